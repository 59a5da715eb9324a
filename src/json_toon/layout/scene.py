"""SceneLayout: places a Node sequence on a fixed virtual canvas.

Placement is a pure function of the node sequence.  Node ``i`` sits on a
widening elliptical spiral around (0.55W, 0.52H), so earlier (shallower)
nodes cluster near the center:

    angle  = i * 0.62
    radius = 30 + i * 7.5
    x = cx + radius * cos(angle)
    y = cy + 0.75 * radius * sin(angle)

Each node also gets a seed (FNV-1a of its path, falling back to its label and
then to its index) that drives its hash color and a small render-time wobble.
Connectors link every node to its predecessor in sequence order; they show
reading order, not the parent/child structure of the JSON value.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np

from json_toon.layout.hashing import hash_string_to_int, int_to_hsl
from json_toon.layout.palette import (
    BASE_SIZE,
    FIXED_FILL,
    HASH_LIGHTNESS,
    HASH_SATURATION,
)
from json_toon.tree.nodes import Node, NodeKind

__all__ = [
    "CANVAS_HEIGHT",
    "CANVAS_WIDTH",
    "Connector",
    "PlacedNode",
    "SceneLayout",
    "connectors",
    "layout",
]

CANVAS_WIDTH = 900
CANVAS_HEIGHT = 520

ANGLE_STEP = 0.62
BASE_RADIUS = 30.0
RADIUS_STEP = 7.5
Y_SQUASH = 0.75
CENTER_X_RATIO = 0.55
CENTER_Y_RATIO = 0.52

WOBBLE_MODULUS = 11
WOBBLE_X = 0.6
WOBBLE_Y = -0.4

WEIGHT_STEP = 6
MAX_WEIGHT_BONUS = 30

CONNECTOR_BEND = 18.0


@dataclass(frozen=True, slots=True)
class PlacedNode:
    """A Node with its position, size, and color on the canvas.

    Attributes:
        node:   The extracted Node this placement is for.
        x, y:   Base position on the spiral.
        color:  Fill color (hex theme color or ``hsl(...)`` string).
        size:   Bubble diameter.
        seed:   Non-negative hash driving color and wobble.
        wobble: Render offset factor in [-5, 5].
    """

    node: Node
    x: float
    y: float
    color: str
    size: float
    seed: int
    wobble: int

    @property
    def path(self) -> str:
        return self.node.path

    @property
    def label(self) -> str:
        return self.node.label

    @property
    def kind(self) -> NodeKind:
        return self.node.kind

    @property
    def weight(self) -> int:
        return self.node.weight

    @property
    def rendered_x(self) -> float:
        """x shifted by the wobble; the base position stays untouched."""
        return self.x + self.wobble * WOBBLE_X

    @property
    def rendered_y(self) -> float:
        return self.y + self.wobble * WOBBLE_Y


@dataclass(frozen=True, slots=True)
class Connector:
    """A cosmetic quadratic curve between two sequence-adjacent nodes."""

    start: tuple[float, float]
    control: tuple[float, float]
    end: tuple[float, float]
    target_path: str


def node_seed(node: Node, index: int) -> int:
    return hash_string_to_int(node.path or node.label or str(index))


def node_color(kind: NodeKind, seed: int) -> str:
    fixed = FIXED_FILL[kind]
    if fixed is not None:
        return fixed
    return int_to_hsl(seed, HASH_SATURATION, HASH_LIGHTNESS)


def node_size(kind: NodeKind, weight: int) -> float:
    return float(BASE_SIZE[kind] + min(MAX_WEIGHT_BONUS, weight * WEIGHT_STEP))


@dataclass(frozen=True)
class SceneLayout:
    """Lays out Node sequences on a ``width`` x ``height`` canvas.

    Example::
        scene = SceneLayout()
        placed = scene.layout(nodes)
        curves = scene.connectors(placed)
    """

    width: int = CANVAS_WIDTH
    height: int = CANVAS_HEIGHT

    @property
    def center(self) -> tuple[float, float]:
        return (self.width * CENTER_X_RATIO, self.height * CENTER_Y_RATIO)

    def spiral(self, count: int) -> tuple[np.ndarray, np.ndarray]:
        """Return the base x and y coordinates of the first ``count`` slots."""
        cx, cy = self.center
        idx = np.arange(count, dtype=np.float64)
        angle = idx * ANGLE_STEP
        radius = BASE_RADIUS + idx * RADIUS_STEP
        xs = cx + radius * np.cos(angle)
        ys = cy + Y_SQUASH * radius * np.sin(angle)
        return xs, ys

    def layout(self, nodes: Sequence[Node]) -> list[PlacedNode]:
        """Place every node; output has the same length and order as input."""
        xs, ys = self.spiral(len(nodes))
        placed: list[PlacedNode] = []
        for i, node in enumerate(nodes):
            seed = node_seed(node, i)
            placed.append(
                PlacedNode(
                    node=node,
                    x=float(xs[i]),
                    y=float(ys[i]),
                    color=node_color(node.kind, seed),
                    size=node_size(node.kind, node.weight),
                    seed=seed,
                    wobble=seed % WOBBLE_MODULUS - 5,
                )
            )
        return placed

    def connectors(self, placed: Sequence[PlacedNode]) -> list[Connector]:
        """Link each node after the first to its immediate predecessor."""
        curves: list[Connector] = []
        for prev, curr in zip(placed, placed[1:]):
            mid_x = (prev.x + curr.x) / 2
            mid_y = (prev.y + curr.y) / 2
            curves.append(
                Connector(
                    start=(prev.x, prev.y),
                    control=(mid_x + CONNECTOR_BEND, mid_y - CONNECTOR_BEND),
                    end=(curr.x, curr.y),
                    target_path=curr.path,
                )
            )
        return curves


def layout(nodes: Sequence[Node]) -> list[PlacedNode]:
    """Place ``nodes`` on the default 900 x 520 canvas."""
    return SceneLayout().layout(nodes)


def connectors(placed: Sequence[PlacedNode]) -> list[Connector]:
    return SceneLayout().connectors(placed)
