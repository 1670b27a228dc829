"""A first-in, first-out queue backed by a linked list."""

from __future__ import annotations

from typing import Any

from lfc.linkedlist import LinkedList


class Queue:
    """A FIFO queue: push at the back, pop and peek at the front."""

    def __init__(self) -> None:
        self._list = LinkedList()

    def push(self, value: Any) -> None:
        """Add a value at the back of the queue."""
        self._list.append(value)

    def pop(self) -> Any:
        """Remove and return the front value, or None when empty."""
        return self._list.pop_first()

    def peek(self) -> Any:
        """Return the front value without removing it, or None when empty."""
        return self._list.first()

    def __len__(self) -> int:
        return len(self._list)

    def __repr__(self) -> str:
        return f"Queue({list(self._list)!r})"

    def is_empty(self) -> bool:
        return bool(self._list.is_empty())