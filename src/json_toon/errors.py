"""Exceptions raised at the text boundary of json-toon.

Extraction and layout never raise for a JSON value; only turning raw text into
a visualizable value can fail, in one of two ways.
"""

from __future__ import annotations

__all__ = ["JsonSyntaxError", "ToonError", "UnsupportedRootError"]

UNSUPPORTED_ROOT_MESSAGE = (
    "Root JSON value should be an object or array for a meaningful visualization."
)


class ToonError(ValueError):
    """Base class for input that cannot be visualized."""


class JsonSyntaxError(ToonError):
    """The input text is not valid JSON; the message comes from the parser."""


class UnsupportedRootError(ToonError):
    """The input parsed, but its root is neither an object nor an array."""

    def __init__(self, msg: str = UNSUPPORTED_ROOT_MESSAGE) -> None:
        super().__init__(msg)
