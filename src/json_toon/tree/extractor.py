"""NodeExtractor: flattens any JSON value into a capped list of Nodes.

Walks the value depth-first in pre-order, emitting one Node per container or
leaf.  Two truncation policies keep the result small enough to draw:

- Depth: anything nested deeper than ``max_depth`` collapses into a single
  TRUNCATED node for that branch.
- Width: only the first ``FAN_OUT`` entries of a container are visited; the
  rest are summarised by one MORE node ("+N more").

The node cap is enforced during traversal.  Every recursive call returns a
"continue?" flag, so once ``max_nodes`` nodes exist the whole walk unwinds
without visiting another value.  Containers are never copied: sizes come from
``len()`` and children are read through ``itertools.islice``, which bounds the
work as well as the output on very wide inputs.

Paths:
- Root is "" (empty string); labels show it as "root".
- Object children append ".{key}" (just "{key}" at the root).
- Array children append "[{index}]" to the parent path, or to "root".
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from decimal import Decimal
from itertools import islice
from typing import Any

from json_toon.config import DEFAULT_MAX_NODES, ToonConfig
from json_toon.tree.nodes import Node, NodeKind

logger = logging.getLogger(__name__)

# Type alias for valid JSON values
JsonValue = dict[str, Any] | list[Any] | str | int | float | bool | None

ROOT_LABEL = "root"
FAN_OUT = 10
PREVIEW_CHARS = 18
ELLIPSIS = "…"
MORE_SUFFIX = "__more__"
MAX_WEIGHT = 6


def classify(value: Any) -> NodeKind:
    """Return the NodeKind of a parsed JSON value.

    Lists are checked before dicts and, more importantly, bool before
    int/float: bool subclasses int in Python (isinstance(True, int) is True).
    Anything outside the JSON domain (tuples, sets, arbitrary objects) is
    UNKNOWN.
    """
    if isinstance(value, bool):
        return NodeKind.BOOLEAN
    if value is None:
        return NodeKind.NULL
    if isinstance(value, list):
        return NodeKind.ARRAY
    if isinstance(value, dict):
        return NodeKind.OBJECT
    if isinstance(value, str):
        return NodeKind.STRING
    if isinstance(value, (int, float)):
        return NodeKind.NUMBER
    return NodeKind.UNKNOWN


def format_number(value: int | float) -> str:
    """Render a number the way a JSON/JavaScript serializer would.

    Integral floats lose their fractional part (``1.0`` -> ``"1"``), plain
    decimal notation is used for exponents in (-7, 21), and exponent notation
    has no zero padding (``"1e-7"``, ``"1.5e+22"``).
    """
    if isinstance(value, int):
        return str(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value.is_integer() and abs(value) < 1e21:
        return str(int(value))

    text = repr(value)
    if "e" not in text:
        return text
    mantissa, _, exponent = text.partition("e")
    exp = int(exponent)
    if -7 < exp < 21:
        return format(Decimal(text), "f")
    sign = "+" if exp > 0 else "-"
    return f"{mantissa}e{sign}{abs(exp)}"


def preview_string(text: str) -> str:
    """Return at most PREVIEW_CHARS characters of ``text``, ellipsized if cut."""
    if len(text) > PREVIEW_CHARS:
        return text[:PREVIEW_CHARS] + ELLIPSIS
    return text


def _clamp_weight(count: int) -> int:
    return max(1, min(MAX_WEIGHT, count))


@dataclass
class NodeExtractor:
    """Converts any JSON value into an ordered, capped list of Nodes.

    The extractor holds no state between calls: each ``extract()`` builds a
    fresh accumulator list and threads it through the recursion.

    Example::
        extractor = NodeExtractor()
        nodes = extractor.extract({"name": "Ava", "items": [1, 2]})
        # [object "", string "name", array "items", number "items[0]", ...]
    """

    config: ToonConfig = field(default_factory=ToonConfig)

    def extract(self, value: JsonValue) -> list[Node]:
        """Flatten a JSON value into at most ``config.max_nodes`` Nodes.

        Args:
            value: Any parsed JSON value (dict, list, str, int, float, bool,
                None).  Non-JSON values become UNKNOWN nodes instead of
                raising.

        Returns:
            Nodes in depth-first pre-order.
        """
        nodes: list[Node] = []
        completed = self._walk(value, "", 0, nodes)
        if not completed:
            logger.debug(
                f"Node cap of {self.config.max_nodes} reached; traversal stopped early"
            )
        return nodes[: self.config.max_nodes]

    # ------------------------------------------------------------------
    # Traversal
    # ------------------------------------------------------------------

    def _emit(self, nodes: list[Node], node: Node) -> bool:
        """Append ``node`` unless the cap is reached; return whether it fit.

        Filling the last slot still returns True.  The next visit then finds
        the list full and returns False, so False always means something was
        left out.
        """
        if len(nodes) >= self.config.max_nodes:
            return False
        nodes.append(node)
        return True

    def _walk(self, value: Any, path: str, depth: int, nodes: list[Node]) -> bool:
        """Emit the nodes for ``value`` and its children.

        Returns:
            False once the node cap has been reached, True otherwise.
        """
        if len(nodes) >= self.config.max_nodes:
            return False

        display = path or ROOT_LABEL

        if depth > self.config.max_depth:
            logger.debug(f"Depth cutoff at {display!r} (depth {depth})")
            return self._emit(
                nodes, Node(path, f"{display} ({ELLIPSIS})", NodeKind.TRUNCATED)
            )

        kind = classify(value)

        if kind is NodeKind.OBJECT:
            return self._walk_object(value, path, depth, nodes)

        if kind is NodeKind.ARRAY:
            return self._walk_array(value, path, depth, nodes)

        return self._emit(nodes, Node(path, _leaf_label(kind, value, display), kind))

    def _walk_object(
        self, obj: dict[Any, Any], path: str, depth: int, nodes: list[Node]
    ) -> bool:
        display = path or ROOT_LABEL
        size = len(obj)
        if not self._emit(
            nodes, Node(path, display, NodeKind.OBJECT, _clamp_weight(size))
        ):
            return False

        for key, child in islice(obj.items(), FAN_OUT):
            child_path = f"{path}.{key}" if path else str(key)
            if not self._walk(child, child_path, depth + 1, nodes):
                return False

        hidden = size - FAN_OUT
        if hidden > 0:
            more_path = f"{path}.{MORE_SUFFIX}" if path else MORE_SUFFIX
            return self._emit(
                nodes, Node(more_path, f"+{hidden} more", NodeKind.MORE)
            )
        return True

    def _walk_array(
        self, arr: list[Any], path: str, depth: int, nodes: list[Node]
    ) -> bool:
        display = path or ROOT_LABEL
        size = len(arr)
        if not self._emit(
            nodes, Node(path, display, NodeKind.ARRAY, _clamp_weight(size))
        ):
            return False

        for idx, item in enumerate(islice(arr, FAN_OUT)):
            if not self._walk(item, f"{display}[{idx}]", depth + 1, nodes):
                return False

        hidden = size - FAN_OUT
        if hidden > 0:
            return self._emit(
                nodes,
                Node(f"{display}.{MORE_SUFFIX}", f"+{hidden} more", NodeKind.MORE),
            )
        return True


def _leaf_label(kind: NodeKind, value: Any, display: str) -> str:
    """Build the hover label for a scalar (or UNKNOWN) leaf."""
    if kind is NodeKind.STRING:
        return f'{display}: "{preview_string(value)}"'
    if kind is NodeKind.NUMBER:
        return f"{display}: {format_number(value)}"
    if kind is NodeKind.BOOLEAN:
        return f"{display}: {'true' if value else 'false'}"
    if kind is NodeKind.NULL:
        return f"{display}: null"
    return f"{display}: {value}"


def extract(value: JsonValue, max_nodes: int = DEFAULT_MAX_NODES) -> list[Node]:
    """Flatten ``value`` with the default depth cutoff and the given node cap."""
    return NodeExtractor(ToonConfig(max_nodes=max_nodes)).extract(value)
