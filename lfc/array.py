"""Fixed-size, bounds-checked arrays."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from typing import Any


class Array:
    """A fixed-length sequence with bounds checking and a simple search."""

    def __init__(self, data: Iterable[Any]) -> None:
        self._data = list(data)

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._data):
            raise IndexError(
                f"index {index} out of bounds of array of length {len(self._data)}"
            )

    def __len__(self) -> int:
        return len(self._data)

    def __getitem__(self, index: int) -> Any:
        self._check_index(index)
        return self._data[index]

    def __setitem__(self, index: int, value: Any) -> None:
        self._check_index(index)
        self._data[index] = value

    def __iter__(self) -> Iterator[Any]:
        return iter(self._data)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._data!r})"

    def find(self, target: Any, elem_eq: Callable[[Any, Any], bool]) -> int:
        """Return the index of the first element equal to target, or -1."""
        if elem_eq is None:
            raise TypeError("element equality function must be provided")
        return next(
            (i for i, elem in enumerate(self._data) if elem_eq(elem, target)), -1
        )


class DynArray(Array):
    """An array allocated with a given length, every slot set to fill."""

    def __init__(self, length: int, fill: Any = None) -> None:
        if length < 0:
            raise ValueError(f"length must be non-negative, got {length}")
        super().__init__([fill] * length)