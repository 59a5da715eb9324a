"""Theme colors and per-kind styling tables.

Every NodeKind has an explicit entry in both tables, so a new kind cannot be
added without deciding how it is sized and filled.
"""

from __future__ import annotations

from json_toon.tree.nodes import NodeKind

__all__ = [
    "BASE_SIZE",
    "FIXED_FILL",
    "HASH_LIGHTNESS",
    "HASH_SATURATION",
    "INK",
    "PRIMARY",
    "SUCCESS",
]

PRIMARY = "#3b82f6"
SUCCESS = "#06b6d4"
INK = "#0f172a"

HASH_SATURATION = 78
HASH_LIGHTNESS = 56

# Containers use theme colors; None means "derive a hue from the node seed".
FIXED_FILL: dict[NodeKind, str | None] = {
    NodeKind.OBJECT: PRIMARY,
    NodeKind.ARRAY: SUCCESS,
    NodeKind.STRING: None,
    NodeKind.NUMBER: None,
    NodeKind.BOOLEAN: None,
    NodeKind.NULL: None,
    NodeKind.TRUNCATED: None,
    NodeKind.MORE: None,
    NodeKind.UNKNOWN: None,
}

# Base bubble diameter before the weight bonus.
BASE_SIZE: dict[NodeKind, int] = {
    NodeKind.OBJECT: 64,
    NodeKind.ARRAY: 58,
    NodeKind.STRING: 44,
    NodeKind.NUMBER: 42,
    NodeKind.BOOLEAN: 42,
    NodeKind.NULL: 42,
    NodeKind.TRUNCATED: 42,
    NodeKind.MORE: 42,
    NodeKind.UNKNOWN: 42,
}
