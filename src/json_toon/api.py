"""Public API functions for json-toon.

This module provides the user-facing entry points: extract_nodes and
layout_nodes expose the two pure core stages, visualize and visualize_value
run the whole pipeline, and format_json / load_example mirror the input-side
actions of the visualizer.  Each call builds fresh NodeExtractor and
SceneLayout instances, so no state is shared between calls.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from json_toon.boundary import (
    EXAMPLE_JSON,
    EXAMPLE_TITLE,
    check_root,
    format_json,
    load_json,
    scene_title,
)
from json_toon.config import DEFAULT_MAX_NODES, ToonConfig
from json_toon.layout.scene import PlacedNode, SceneLayout
from json_toon.result import Scene
from json_toon.tree.extractor import NodeExtractor
from json_toon.tree.nodes import Node

logger = logging.getLogger(__name__)

__all__ = [
    "extract_nodes",
    "format_json",
    "layout_nodes",
    "load_example",
    "visualize",
    "visualize_value",
]


def extract_nodes(value: Any, max_nodes: int = DEFAULT_MAX_NODES) -> list[Node]:
    """Flatten a parsed JSON value into at most ``max_nodes`` display nodes.

    Args:
        value:     Any parsed JSON value.  Never raises for JSON input; deep or
                   wide values are truncated instead.
        max_nodes: Node cap (>= 1).  Defaults to 60.

    Returns:
        Nodes in depth-first pre-order.
    """
    return NodeExtractor(ToonConfig(max_nodes=max_nodes)).extract(value)


def layout_nodes(nodes: Sequence[Node]) -> list[PlacedNode]:
    """Place nodes on the 900 x 520 canvas.

    Pure: the same node sequence always yields the same placements.
    """
    return SceneLayout().layout(nodes)


def visualize_value(
    value: Any,
    config: ToonConfig | None = None,
    title: str | None = None,
) -> Scene:
    """Build a Scene from an already-parsed value.

    Args:
        value:  Parsed JSON value.  No root-type guard is applied here.
        config: Extraction tunables.  Defaults to ``ToonConfig()`` when None.
        title:  Scene title.  Derived with ``scene_title`` when None.

    Returns:
        A ``Scene`` with nodes, placements, and connectors populated.
    """
    config = config if config is not None else ToonConfig()
    scene_layout = SceneLayout()

    nodes = NodeExtractor(config).extract(value)
    placed = scene_layout.layout(nodes)
    curves = scene_layout.connectors(placed)
    logger.debug(f"Laid out {len(placed)} nodes (cap {config.max_nodes})")

    return Scene(
        title=title if title is not None else scene_title(value),
        nodes=nodes,
        placed=placed,
        connectors=curves,
        width=scene_layout.width,
        height=scene_layout.height,
    )


def visualize(text: str, config: ToonConfig | None = None) -> Scene:
    """Parse raw JSON text and build its Scene.

    Args:
        text:   Raw JSON text.
        config: Extraction tunables.  Defaults to ``ToonConfig()`` when None.

    Returns:
        The Scene for the parsed document.

    Raises:
        JsonSyntaxError:      When ``text`` is not valid JSON.
        UnsupportedRootError: When the root is not an object or array.
    """
    value = load_json(text)
    check_root(value)
    return visualize_value(value, config=config)


def load_example(config: ToonConfig | None = None) -> Scene:
    """Return the Scene for the built-in example document."""
    return visualize_value(load_json(EXAMPLE_JSON), config=config, title=EXAMPLE_TITLE)
