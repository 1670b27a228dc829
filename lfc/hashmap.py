"""A hash map using separate chaining in key-value buckets."""

from __future__ import annotations

import operator
from collections.abc import Callable, Iterator
from typing import Any

from lfc.hashset import DEFAULT_BUCKETS, MAX_LOAD_FACTOR
from lfc.mapbucket import MapBucket

HashFn = Callable[[Any], int]
EqFn = Callable[[Any, Any], bool]


class HashMap:
    """A map keyed by caller-supplied hash and equality functions.

    A key whose value is None counts as absent. The bucket count doubles
    when an insertion finds the load factor above MAX_LOAD_FACTOR.
    """

    def __init__(
        self,
        n_buckets: int = DEFAULT_BUCKETS,
        hash_fn: HashFn = hash,
        key_eq: EqFn = operator.eq,
    ) -> None:
        if n_buckets < 1:
            raise ValueError(f"n_buckets must be positive, got {n_buckets}")
        self._hash_fn = hash_fn
        self._key_eq = key_eq
        self._size = 0
        self._buckets = [MapBucket() for _ in range(n_buckets)]

    def _bucket(self, key: Any) -> MapBucket:
        return self._buckets[self._hash_fn(key) % len(self._buckets)]

    def _rehash(self) -> None:
        old_buckets = self._buckets
        self._buckets = [MapBucket() for _ in range(len(old_buckets) * 2)]
        for bucket in old_buckets:
            for pair in bucket:
                self._bucket(pair.first).prepend(pair.first, pair.second)

    def get(self, key: Any) -> Any:
        """Return the value stored for key, or None."""
        return self._bucket(key).find(key, self._key_eq)

    def contains(self, key: Any) -> bool:
        """Whether a non-None value is stored for key."""
        return self.get(key) is not None

    def __contains__(self, key: Any) -> bool:
        return self.contains(key)

    def set(self, key: Any, value: Any) -> bool:
        """Store value for key, overwriting; return whether the key already existed."""
        bucket = self._bucket(key)
        for pair in bucket:
            if self._key_eq(pair.first, key):
                pair.second = value
                return True
        bucket.prepend(key, value)
        self._size += 1
        return False

    def insert(self, key: Any, value: Any) -> bool:
        """Store value for key unless present; return whether it was stored."""
        if self.contains(key):
            return False
        if self.load_factor() > MAX_LOAD_FACTOR:
            self._rehash()
        self._bucket(key).prepend(key, value)
        self._size += 1
        return True

    def remove(self, key: Any) -> bool:
        """Remove the pair for key; return whether one was removed."""
        removed = self._bucket(key).remove(key, self._key_eq)
        if removed:
            self._size -= 1
        return removed

    def items(self) -> Iterator[tuple[Any, Any]]:
        """Yield (key, value) pairs in bucket order."""
        for bucket in self._buckets:
            for pair in bucket:
                yield pair.first, pair.second

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"HashMap({dict(self.items())!r})"

    def is_empty(self) -> bool:
        return self._size == 0

    def load_factor(self) -> float:
        """Number of pairs divided by number of buckets."""
        return self._size / len(self._buckets)

    def n_buckets(self) -> int:
        return len(self._buckets)