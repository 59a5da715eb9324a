"""Node dataclass and NodeKind StrEnum for the flattened JSON node list.

Provides the display unit produced by NodeExtractor: one ``Node`` per JSON
container, scalar leaf, or synthetic marker (depth cutoff, elided siblings).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum, auto


class NodeKind(StrEnum):
    """Closed set of the nine node kinds a JSON value can flatten into.

    StrEnum values are the lowercased member names (Python 3.11+):
    - OBJECT    -> "object"    : JSON object {}
    - ARRAY     -> "array"     : JSON array []
    - STRING    -> "string"    : string leaf
    - NUMBER    -> "number"    : int or float leaf
    - BOOLEAN   -> "boolean"   : true / false leaf
    - NULL      -> "null"      : null leaf
    - TRUNCATED -> "truncated" : subtree replaced at the depth cutoff
    - MORE      -> "more"      : siblings elided past the fan-out limit
    - UNKNOWN   -> "unknown"   : a non-JSON Python value
    """

    OBJECT = auto()
    ARRAY = auto()
    STRING = auto()
    NUMBER = auto()
    BOOLEAN = auto()
    NULL = auto()
    TRUNCATED = auto()
    MORE = auto()
    UNKNOWN = auto()

    @property
    def is_container(self) -> bool:
        return self in (NodeKind.OBJECT, NodeKind.ARRAY)


@dataclass(frozen=True, slots=True)
class Node:
    """One visual unit of a flattened JSON value.

    Attributes:
        path:   Dotted/bracketed path from the root, e.g. "a.b" or "a[0]".
                The root itself has path="" (empty string).  Paths are unique
                except for MORE markers, which end in ".__more__".
        label:  Human-readable text shown on hover; may contain a truncated
                value preview.
        kind:   Which kind of node this is (see NodeKind).
        weight: Sizing hint in [1, 6]: the clamped child count for containers,
                1 for everything else.
    """

    path: str
    label: str
    kind: NodeKind
    weight: int = 1
