"""Tree subpackage for JSON flattening primitives.

Re-exports the public API for the tree module:
- Node: frozen dataclass representing one display unit
- NodeKind: StrEnum of the nine node kinds
- NodeExtractor: flattens any JSON value into a capped list of Nodes
- extract: functional shortcut around NodeExtractor
"""

from json_toon.tree.extractor import NodeExtractor, extract
from json_toon.tree.nodes import Node, NodeKind

__all__ = ["Node", "NodeExtractor", "NodeKind", "extract"]
