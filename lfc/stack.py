"""A last-in, first-out stack backed by a vector."""

from __future__ import annotations

from typing import Any

from lfc.vector import VEC_DEFAULT_CAPACITY, Vector


class Stack:
    """A LIFO stack: push, pop and peek at the top."""

    def __init__(self) -> None:
        self._vec = Vector(VEC_DEFAULT_CAPACITY)

    def push(self, value: Any) -> None:
        """Put a value on top of the stack."""
        self._vec.push(value)

    def pop(self) -> Any:
        """Remove and return the top value; raises IndexError when empty."""
        return self._vec.pop()

    def peek(self) -> Any:
        """Return the top value without removing it, or None when empty."""
        return None if self._vec.is_empty() else self._vec[len(self._vec) - 1]

    def __len__(self) -> int:
        return len(self._vec)

    def __repr__(self) -> str:
        return f"Stack({list(self._vec)!r})"

    def is_empty(self) -> bool:
        return self._vec.is_empty()