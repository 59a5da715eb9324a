"""json-toon - flatten JSON into a capped, laid-out scene of toon bubbles."""

from __future__ import annotations

from json_toon.api import (
    extract_nodes,
    format_json,
    layout_nodes,
    load_example,
    visualize,
    visualize_value,
)
from json_toon.config import ToonConfig
from json_toon.errors import JsonSyntaxError, ToonError, UnsupportedRootError
from json_toon.layout.scene import Connector, PlacedNode
from json_toon.render.svg import render_svg
from json_toon.result import Scene
from json_toon.tree.nodes import Node, NodeKind

__version__: str = "0.1.0"
__all__: list[str] = [
    "Connector",
    "JsonSyntaxError",
    "Node",
    "NodeKind",
    "PlacedNode",
    "Scene",
    "ToonConfig",
    "ToonError",
    "UnsupportedRootError",
    "extract_nodes",
    "format_json",
    "layout_nodes",
    "load_example",
    "render_svg",
    "visualize",
    "visualize_value",
]
