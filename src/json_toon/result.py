"""Scene dataclass: everything a renderer needs to draw one visualization.

This module provides the result type returned by visualize() calls.
"""

from __future__ import annotations

from dataclasses import dataclass

from json_toon.layout.scene import CANVAS_HEIGHT, CANVAS_WIDTH, Connector, PlacedNode
from json_toon.tree.nodes import Node

__all__ = ["Scene"]


@dataclass(frozen=True, slots=True)
class Scene:
    """Result of a visualize() call.

    Attributes:
        title: Display title derived from the document (see ``scene_title``).
        nodes: Extracted nodes in depth-first pre-order.
        placed: One PlacedNode per entry of ``nodes``, same order.
        connectors: Curves between sequence-adjacent placed nodes
            (``len(placed) - 1`` of them, or none for an empty scene).
        width: Virtual canvas width the positions refer to.
        height: Virtual canvas height the positions refer to.
    """

    title: str
    nodes: list[Node]
    placed: list[PlacedNode]
    connectors: list[Connector]
    width: int = CANVAS_WIDTH
    height: int = CANVAS_HEIGHT

    @property
    def node_count(self) -> int:
        return len(self.nodes)

    @property
    def status(self) -> str:
        """Status line shown next to the input, e.g. "Ready. Rendered 19 nodes."."""
        return f"Ready. Rendered {self.node_count} nodes."
