"""A singly-linked list with access at both ends."""

from __future__ import annotations

import operator
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Any, Optional

EqFn = Callable[[Any, Any], bool]


@dataclass
class _Node:
    data: Any
    next: Optional[_Node] = None


class LinkedList:
    """A singly-linked list; elements go in at either end and leave at the front."""

    def __init__(self) -> None:
        self._head: Optional[_Node] = None
        self._tail: Optional[_Node] = None
        self._len = 0

    def _nodes(self) -> Iterator[_Node]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def first(self) -> Any:
        """Return the first element, or None when the list is empty."""
        return self._head.data if self._head is not None else None

    def last(self) -> Any:
        """Return the last element, or None when the list is empty."""
        return self._tail.data if self._tail is not None else None

    def append(self, elem: Any) -> None:
        """Add an element at the tail."""
        node = _Node(elem)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._len += 1

    def prepend(self, elem: Any) -> None:
        """Add an element at the head."""
        node = _Node(elem, self._head)
        if self._head is None:
            self._tail = node
        self._head = node
        self._len += 1

    def pop_first(self) -> Any:
        """Remove and return the first element, or None when the list is empty."""
        if self._head is None:
            return None
        node = self._head
        self._head = node.next
        if self._head is None:
            self._tail = None
        self._len -= 1
        return node.data

    def find(self, target: Any, elem_eq: EqFn = operator.eq) -> bool:
        """Whether any element equals target according to elem_eq."""
        return any(elem_eq(node.data, target) for node in self._nodes())

    def remove(self, target: Any, elem_eq: EqFn = operator.eq) -> Any:
        """Remove the first element equal to target and return it, or None."""
        prev: Optional[_Node] = None
        for node in self._nodes():
            if elem_eq(node.data, target):
                if prev is None:
                    self._head = node.next
                else:
                    prev.next = node.next
                if node.next is None:
                    self._tail = prev
                self._len -= 1
                return node.data
            prev = node
        return None

    def __len__(self) -> int:
        return self._len

    def __iter__(self) -> Iterator[Any]:
        return (node.data for node in self._nodes())

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def is_empty(self) -> bool:
        return self._len == 0