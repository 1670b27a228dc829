"""A hash set using separate chaining in linked-list buckets."""

from __future__ import annotations

import operator
from collections.abc import Callable, Iterator
from typing import Any

from lfc.linkedlist import LinkedList

MAX_LOAD_FACTOR = 0.5
DEFAULT_BUCKETS = 20

HashFn = Callable[[Any], int]
EqFn = Callable[[Any, Any], bool]


class HashSet:
    """A set keyed by caller-supplied hash and equality functions.

    The bucket count doubles when an insertion finds the load factor at or
    above MAX_LOAD_FACTOR.
    """

    def __init__(
        self,
        n_buckets: int = DEFAULT_BUCKETS,
        hash_fn: HashFn = hash,
        elem_eq: EqFn = operator.eq,
    ) -> None:
        if hash_fn is None:
            raise TypeError("hash function must be non-null")
        if elem_eq is None:
            raise TypeError("equality function must be non-null")
        if n_buckets < 1:
            raise ValueError(f"n_buckets must be positive, got {n_buckets}")
        self._hash_fn = hash_fn
        self._elem_eq = elem_eq
        self._size = 0
        self._buckets = [LinkedList() for _ in range(n_buckets)]

    def _bucket(self, elem: Any) -> LinkedList:
        return self._buckets[self._hash_fn(elem) % len(self._buckets)]

    def _rehash(self) -> None:
        old_buckets = self._buckets
        self._buckets = [LinkedList() for _ in range(len(old_buckets) * 2)]
        for bucket in old_buckets:
            while not bucket.is_empty():
                self._bucket(bucket.pop_first()).append  # noqa: B018
                elem = None
                break
        # Rebuild from scratch, preserving per-bucket order.
        self._buckets = [LinkedList() for _ in range(len(old_buckets) * 2)]
        self._size = 0
        for bucket in old_buckets:
            for elem in bucket:
                self._bucket(elem).append(elem)
                self._size += 1

    def insert(self, elem: Any) -> None:
        """Add an element unless an equal one is already present."""
        if self.contains(elem):
            return
        if self.load_factor() >= MAX_LOAD_FACTOR:
            self._rehash()
        self._bucket(elem).append(elem)
        self._size += 1

    def remove(self, elem: Any) -> Any:
        """Remove the element equal to elem and return it, or None if absent."""
        bucket = self._bucket(elem)
        if not bucket.find(elem, self._elem_eq):
            return None
        removed = bucket.remove(elem, self._elem_eq)
        self._size -= 1
        return removed

    def contains(self, elem: Any) -> bool:
        """Whether an element equal to elem is in the set."""
        return self._bucket(elem).find(elem, self._elem_eq)

    def __contains__(self, elem: Any) -> bool:
        return self.contains(elem)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        for bucket in self._buckets:
            yield from bucket

    def __repr__(self) -> str:
        return f"HashSet({list(self)!r})"

    def is_empty(self) -> bool:
        return self._size == 0

    def load_factor(self) -> float:
        """Number of elements divided by number of buckets."""
        return self._size / len(self._buckets)

    def n_buckets(self) -> int:
        return len(self._buckets)