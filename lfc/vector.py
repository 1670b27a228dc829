"""A growable array list with mutation at the tail."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

VEC_DEFAULT_CAPACITY = 20


class Vector:
    """An ordered, growable collection whose capacity doubles when full."""

    def __init__(self, capacity: int = VEC_DEFAULT_CAPACITY) -> None:
        if capacity < 0:
            raise ValueError(f"capacity must be non-negative, got {capacity}")
        self._items: list[Any] = []
        self._capacity = capacity

    @property
    def capacity(self) -> int:
        """Number of elements the vector can hold before growing."""
        return self._capacity

    def push(self, value: Any) -> None:
        """Append a value, doubling the capacity when full."""
        if len(self._items) == self._capacity:
            self._capacity = max(self._capacity * 2, 1)
        self._items.append(value)

    def pop(self) -> Any:
        """Remove and return the last value; capacity is kept."""
        if not self._items:
            raise IndexError("can't pop from empty vector")
        return self._items.pop()

    def __getitem__(self, index: int) -> Any:
        size = len(self._items)
        if index < 0 or index >= size:
            raise IndexError(f"index {index} out of bounds for vector of length {size}")
        return self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        yield from self._items

    def __repr__(self) -> str:
        return f"Vector({self._items!r}, capacity={self._capacity})"

    def is_empty(self) -> bool:
        return not self._items