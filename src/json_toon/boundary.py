"""Text boundary: parsing, root-type guard, formatting, and scene titles.

Everything here deals with raw user text or with properties of the whole
document.  The extractor and layout downstream only ever see values that have
passed ``parse_json_text`` and ``check_root``.

Parsing is strict: ``NaN``, ``Infinity`` and ``-Infinity`` are rejected, as a
browser's ``JSON.parse`` would, even though Python's ``json`` module accepts
them by default.
"""

from __future__ import annotations

import json
import logging
import re
from dataclasses import dataclass
from typing import Any

from json_toon.errors import JsonSyntaxError, UnsupportedRootError
from json_toon.tree.extractor import classify, format_number

logger = logging.getLogger(__name__)

__all__ = [
    "DEFAULT_TITLE",
    "EXAMPLE_JSON",
    "EXAMPLE_TITLE",
    "ParseResult",
    "check_root",
    "format_json",
    "load_json",
    "parse_json_text",
    "replace_lone_surrogates",
    "scene_title",
]

# Any surrogate left in a decoded str is unpaired: json joins valid pairs.
_LONE_SURROGATE = re.compile("[\ud800-\udfff]")

EXAMPLE_TITLE = "Example JSON"
DEFAULT_TITLE = "Custom JSON"

EXAMPLE_JSON = """{
  "character": {
    "name": "Captain JSON",
    "mood": "curious",
    "stats": { "level": 7, "hp": 42, "mana": 13 },
    "inventory": ["key", "map", "cookie"]
  },
  "scene": {
    "location": "Neo Schema City",
    "weather": "sunny",
    "flags": [true, false, true]
  }
}"""


@dataclass(frozen=True, slots=True)
class ParseResult:
    """Outcome of parsing raw text.

    Attributes:
        value: The parsed JSON value, or None when parsing failed.  A valid
            document ``null`` also yields None, so check ``ok`` instead.
        error: The parser's message, or None on success.
    """

    value: Any
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def _reject_constant(name: str) -> Any:
    msg = f"Unexpected token {name!r}: not valid JSON"
    raise ValueError(msg)


def parse_json_text(text: str) -> ParseResult:
    """Parse ``text`` as strict JSON without raising.

    Args:
        text: Raw JSON text.

    Returns:
        A ``ParseResult`` carrying either the value or the parser's message.
    """
    try:
        value = json.loads(text, parse_constant=_reject_constant)
    except ValueError as exc:
        logger.debug(f"JSON parse failed: {exc}")
        return ParseResult(value=None, error=str(exc))
    except RecursionError:
        logger.debug("JSON parse failed: nesting exceeds the interpreter limit")
        return ParseResult(value=None, error="JSON nesting is too deep to parse")
    return ParseResult(value=value)


def load_json(text: str) -> Any:
    """Parse ``text`` as strict JSON.

    Raises:
        JsonSyntaxError: With the parser's message when ``text`` is invalid.
    """
    result = parse_json_text(text)
    if not result.ok:
        raise JsonSyntaxError(result.error)
    return result.value


def check_root(value: Any) -> None:
    """Accept only object or array roots.

    Raises:
        UnsupportedRootError: For strings, numbers, booleans and null.
    """
    if not classify(value).is_container:
        raise UnsupportedRootError()


def scene_title(value: Any) -> str:
    """Pick a title from common keys of an object root.

    Looks at ``character.name``, then ``name``, then ``title``; the first
    truthy one wins.  Arrays and objects without those keys get
    ``DEFAULT_TITLE``.
    """
    if not isinstance(value, dict):
        return DEFAULT_TITLE

    character = value.get("character")
    if isinstance(character, dict) and character.get("name"):
        return _as_text(character["name"])
    for key in ("name", "title"):
        if value.get(key):
            return _as_text(value[key])
    return DEFAULT_TITLE


def _as_text(value: Any) -> str:
    # Scalars render like node labels ("true", "7"), not Python reprs.
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return format_number(value)
    return json.dumps(value, ensure_ascii=False)


def format_json(text: str, indent: int = 2) -> str:
    """Pretty-print JSON text, preserving key order and non-ASCII characters.

    Raises:
        JsonSyntaxError: When ``text`` is not valid JSON.
    """
    value = load_json(text)
    pretty = json.dumps(value, indent=indent, ensure_ascii=False)
    return replace_lone_surrogates(pretty, "\\u{:04x}")


def replace_lone_surrogates(text: str, template: str) -> str:
    """Swap unpaired surrogates for an encodable reference.

    ``json.loads`` accepts escapes such as ``"\\ud800"`` and yields a str that
    no UTF-8 writer can encode.  Each such code point is replaced by
    ``template.format(code_point)``, e.g. ``"&#x{:X};"`` for XML or
    ``"\\\\u{:04x}"`` for JSON text.
    """
    return _LONE_SURROGATE.sub(lambda m: template.format(ord(m.group())), text)
