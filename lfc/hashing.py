"""Simple hash functions for integers and strings."""

from __future__ import annotations

from collections.abc import Iterable

_WORD_MASK = (1 << 64) - 1
_COEFFICIENT = 31


def int_simple_hash(x: int) -> int:
    """Return the integer itself, reduced to an unsigned 64-bit word."""
    return x & _WORD_MASK


def _codes(text: str | bytes | bytearray) -> Iterable[int]:
    if text is None:
        raise TypeError("text must not be None")
    if isinstance(text, (bytes, bytearray)):
        return text
    return (ord(c) for c in text)


def str_simple_hash(text: str | bytes | bytearray) -> int:
    """Hash a string: the first code plus 31 times each following code."""
    total = 0
    for position, code in enumerate(_codes(text)):
        total += code if position == 0 else _COEFFICIENT * code
    return total & _WORD_MASK