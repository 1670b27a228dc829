"""Chained buckets of key-value pairs used by the hash map."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Any

EqFn = Callable[[Any, Any], bool]


@dataclass
class Pair:
    """A mutable two-element record holding a key and its value."""

    first: Any
    second: Any


class MapBucket:
    """A chain of key-value pairs; new pairs go in at the front."""

    def __init__(self) -> None:
        self._pairs: list[Pair] = []

    def _position(self, key: Any, key_eq: EqFn) -> int | None:
        return next(
            (pos for pos, pair in enumerate(self._pairs) if key_eq(pair.first, key)),
            None,
        )

    def prepend(self, key: Any, value: Any) -> None:
        """Put a key-value pair at the front of the chain."""
        self._pairs.insert(0, Pair(key, value))

    def remove(self, key: Any, key_eq: EqFn) -> bool:
        """Remove the first pair whose key equals key; return whether one was removed."""
        position = self._position(key, key_eq)
        if position is None:
            return False
        del self._pairs[position]
        return True

    def find(self, key: Any, key_eq: EqFn) -> Any:
        """Return the value of the first pair whose key equals key, or None."""
        if key_eq is None:
            raise TypeError("key_eq must not be None")
        position = self._position(key, key_eq)
        return None if position is None else self._pairs[position].second

    def is_empty(self) -> bool:
        return len(self._pairs) == 0

    def __iter__(self) -> Iterator[Pair]:
        yield from self._pairs

    def __repr__(self) -> str:
        return f"MapBucket({self._pairs!r})"