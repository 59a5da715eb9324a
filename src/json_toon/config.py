"""ToonConfig: the tunables of a visualization.

ToonConfig is a frozen (immutable) dataclass holding the node cap and the
depth cutoff.  Everything else about extraction and layout (fan-out limit,
preview length, canvas size) is fixed by module-level constants.
"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["DEFAULT_MAX_DEPTH", "DEFAULT_MAX_NODES", "ToonConfig"]

DEFAULT_MAX_NODES = 60
DEFAULT_MAX_DEPTH = 3


@dataclass(frozen=True, slots=True)
class ToonConfig:
    """Immutable configuration for extraction.

    Attributes:
        max_nodes: Upper bound on the number of nodes emitted for one JSON
            value (>= 1).  Traversal stops as soon as it is reached.
        max_depth: Deepest traversal level that is still expanded (>= 0).
            Values nested deeper are replaced by a single TRUNCATED node.
    """

    max_nodes: int = DEFAULT_MAX_NODES
    max_depth: int = DEFAULT_MAX_DEPTH

    def __post_init__(self) -> None:
        if self.max_nodes < 1:
            msg = f"max_nodes must be >= 1, got {self.max_nodes}"
            raise ValueError(msg)
        if self.max_depth < 0:
            msg = f"max_depth must be >= 0, got {self.max_depth}"
            raise ValueError(msg)
