"""
json-toon CLI - Main entry point.

Reads JSON from a file or stdin and renders it as a toon scene (SVG), lists
the extracted nodes, or pretty-prints the input.
"""

from __future__ import annotations

import logging
from typing import TextIO

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from json_toon.api import load_example, visualize
from json_toon.boundary import EXAMPLE_JSON, format_json, replace_lone_surrogates
from json_toon.config import DEFAULT_MAX_NODES, ToonConfig
from json_toon.errors import ToonError
from json_toon.render.svg import render_svg
from json_toon.result import Scene

logger = logging.getLogger(__name__)

_max_nodes_option = click.option(
    "--max-nodes",
    type=click.IntRange(min=1),
    default=DEFAULT_MAX_NODES,
    show_default=True,
    help="Maximum number of nodes to extract",
)


def _load_scene(text: str, max_nodes: int) -> Scene:
    try:
        return visualize(text, ToonConfig(max_nodes=max_nodes))
    except ToonError as e:
        raise click.ClickException(f"JSON error: {e}") from e


def _cell(text: str) -> str:
    # JSON text is literal in the table, never rich markup.
    return escape(replace_lone_surrogates(text, "\\u{:04x}"))


@click.group()
@click.version_option(package_name="json-toon")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
def main(verbose: bool) -> None:
    """json-toon: Paste JSON, get a playful toon-style scene.

    \b
    Quick Start:
      json-toon render data.json -o scene.svg
      cat data.json | json-toon nodes
      json-toon example | json-toon render -o example.svg
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@main.command()
@click.argument("input_file", type=click.File("r", encoding="utf-8"), default="-")
@click.option("-o", "--output", type=click.Path(dir_okay=False), help="Write SVG to this file instead of stdout")
@click.option("--example", "use_example", is_flag=True, help="Render the built-in example instead of INPUT_FILE")
@_max_nodes_option
def render(
    input_file: TextIO, output: str | None, use_example: bool, max_nodes: int
) -> None:
    """
    Render JSON as an SVG scene.
    """
    if use_example:
        scene = load_example(ToonConfig(max_nodes=max_nodes))
    else:
        scene = _load_scene(input_file.read(), max_nodes)

    svg = render_svg(scene)
    if output:
        with open(output, "w", encoding="utf-8") as fh:
            fh.write(svg)
        logger.info(f"Wrote {scene.node_count} nodes to {output}")
        click.echo(f"{scene.status} Saved to {output}", err=True)
    else:
        click.echo(svg)


@main.command()
@click.argument("input_file", type=click.File("r", encoding="utf-8"), default="-")
@_max_nodes_option
def nodes(input_file: TextIO, max_nodes: int) -> None:
    """
    List the extracted nodes with their layout.
    """
    scene = _load_scene(input_file.read(), max_nodes)

    table = Table(title=_cell(scene.title))
    table.add_column("#", justify="right")
    table.add_column("kind")
    table.add_column("path", overflow="fold")
    table.add_column("label", overflow="fold")
    table.add_column("size", justify="right")
    table.add_column("color")

    for i, placed in enumerate(scene.placed):
        table.add_row(
            str(i),
            str(placed.kind),
            _cell(placed.path or "(root)"),
            _cell(placed.label),
            f"{placed.size:g}",
            placed.color,
        )

    Console().print(table)
    click.echo(scene.status)


@main.command(name="format")
@click.argument("input_file", type=click.File("r", encoding="utf-8"), default="-")
@click.option("--indent", type=click.IntRange(min=0), default=2, show_default=True)
def format_command(input_file: TextIO, indent: int) -> None:
    """
    Pretty-print JSON input.
    """
    try:
        click.echo(format_json(input_file.read(), indent=indent))
    except ToonError as e:
        raise click.ClickException(f"JSON error: {e}") from e


@main.command()
def example() -> None:
    """
    Print the built-in example JSON.
    """
    click.echo(EXAMPLE_JSON)


if __name__ == "__main__":
    main()
