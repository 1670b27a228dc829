"""Conversion of 32-bit integers to their decimal representation."""

from __future__ import annotations

from lfc.ownedstr import Str

_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1


def itoa(n: int) -> str:
    """Return the decimal representation of a 32-bit signed integer."""
    if not _INT32_MIN <= n <= _INT32_MAX:
        raise OverflowError(f"{n} does not fit in a 32-bit signed integer")
    return str(int(n))


def itos(n: int) -> Str:
    """Return the decimal representation as an owned string."""
    return Str(itoa(n))