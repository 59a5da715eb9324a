"""layout subpackage: turns Node sequences into placed, colored bubbles.

Import from this module (not from sub-modules directly) to stay on the
stable public interface.

Example::

    from json_toon.layout import layout
    from json_toon.tree import extract

    placed = layout(extract({"name": "Ava"}))
"""

from __future__ import annotations

from json_toon.layout.hashing import hash_string_to_int, int_to_hsl
from json_toon.layout.scene import (
    CANVAS_HEIGHT,
    CANVAS_WIDTH,
    Connector,
    PlacedNode,
    SceneLayout,
    connectors,
    layout,
)

__all__ = [
    "CANVAS_HEIGHT",
    "CANVAS_WIDTH",
    "Connector",
    "PlacedNode",
    "SceneLayout",
    "connectors",
    "hash_string_to_int",
    "int_to_hsl",
    "layout",
]
