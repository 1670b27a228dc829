"""A growable, mutable, owned character string."""

from __future__ import annotations

from collections.abc import Iterator

from lfc.hashing import str_simple_hash

STR_DEFAULT_CAPACITY = 32


def _check_char(c: str) -> str:
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    return c


class Str:
    """A mutable string that tracks its length and capacity separately."""

    __hash__ = None  # mutable

    def __init__(self, text: str | None = None) -> None:
        if text is None:
            self._chars: list[str] = []
            self._capacity = STR_DEFAULT_CAPACITY
        else:
            if not isinstance(text, str):
                raise TypeError(f"expected str, got {type(text).__name__}")
            self._chars = list(text)
            self._capacity = len(self._chars)

    @property
    def capacity(self) -> int:
        """Number of characters the string can hold before growing."""
        return self._capacity

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._chars):
            raise IndexError(
                f"index {index} out of bounds for string of length {len(self._chars)}"
            )

    def push(self, c: str) -> None:
        """Append one character, doubling the capacity when full."""
        _check_char(c)
        if len(self._chars) + 1 > self._capacity:
            self._capacity = max(self._capacity * 2, len(self._chars) + 1)
        self._chars.append(c)

    def push_str(self, other: Str) -> None:
        """Append the contents of another string."""
        needed = len(self._chars) + len(other)
        if needed > self._capacity:
            self._capacity = self._capacity * 2 + len(other)
        self._chars.extend(other)

    def pop_last(self) -> str:
        """Remove and return the last character."""
        if not self._chars:
            raise IndexError("can't pop from empty string")
        return self._chars.pop()

    def get(self, index: int) -> str:
        """Return the character at the given index."""
        self._check_index(index)
        return self._chars[index]

    def set(self, index: int, c: str) -> None:
        """Replace the character at the given index."""
        self._check_index(index)
        self._chars[index] = _check_char(c)

    def __getitem__(self, index: int) -> str:
        return self.get(index)

    def __len__(self) -> int:
        return len(self._chars)

    def __iter__(self) -> Iterator[str]:
        return iter(self._chars)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Str):
            return NotImplemented
        return self._chars == other._chars

    def __str__(self) -> str:
        return "".join(self._chars)

    def __repr__(self) -> str:
        return f"Str({str(self)!r})"

    def is_empty(self) -> bool:
        return not self._chars

    def starts_with(self, c: str) -> bool:
        """Whether the first character is c; False when empty."""
        return bool(self._chars) and self._chars[0] == c

    def ends_with(self, c: str) -> bool:
        """Whether the last character is c; False when empty."""
        return bool(self._chars) and self._chars[-1] == c

    def simple_hash(self) -> int:
        return str_simple_hash(str(self))