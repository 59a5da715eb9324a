"""Stable string hashing and hash-derived colors.

``hash_string_to_int`` is a fixed-width FNV-1a variant.  Color and wobble are
derived from its exact bits, so the arithmetic is pinned down completely:

- Start from the 32-bit offset basis 2166136261.
- For every UTF-16 code unit of the string: XOR it in, then multiply by the
  prime 16777619, keeping only the low 32 bits.
- Reinterpret the final 32 bits as a signed integer and take ``abs()``.

Iterating UTF-16 code units (rather than Python code points) keeps results
identical to browser renderers hashing the same paths.  The empty string
hashes to the untouched offset basis.
"""

from __future__ import annotations

__all__ = ["FNV_OFFSET_BASIS", "FNV_PRIME", "hash_string_to_int", "int_to_hsl"]

FNV_OFFSET_BASIS = 2166136261
FNV_PRIME = 16777619

_MASK_32 = 0xFFFFFFFF
_SIGN_BIT = 0x80000000


def _utf16_units(text: str) -> list[int]:
    data = text.encode("utf-16-le", errors="surrogatepass")
    return [int.from_bytes(data[i : i + 2], "little") for i in range(0, len(data), 2)]


def hash_string_to_int(text: str) -> int:
    """Return a deterministic, non-negative 32-bit hash of ``text``.

    Args:
        text: Any string, including the empty string.

    Returns:
        2166136261 for the empty string, otherwise an int in [0, 2**31].
    """
    if not text:
        return FNV_OFFSET_BASIS

    h = FNV_OFFSET_BASIS
    for unit in _utf16_units(text):
        h ^= unit
        h = (h * FNV_PRIME) & _MASK_32

    signed = h - (1 << 32) if h & _SIGN_BIT else h
    return abs(signed)


def int_to_hsl(n: int, saturation: int = 75, lightness: int = 55) -> str:
    """Map an int onto a hue wheel: ``hsl(<n mod 360> <s>% <l>%)``."""
    hue = n % 360
    return f"hsl({hue} {saturation}% {lightness}%)"
