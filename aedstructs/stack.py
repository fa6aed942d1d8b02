"""Bounded LIFO stack."""

from __future__ import annotations

from typing import Generic, Iterator, TypeVar

T = TypeVar("T")

DEFAULT_CAPACITY = 100


class StackOverflowError(OverflowError):
    """Raised when pushing onto a full stack."""


class StackEmptyError(IndexError):
    """Raised when reading from an empty stack."""


class Stack(Generic[T]):
    """A stack holding at most ``capacity`` values."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._capacity = capacity
        self._items: list[T] = []

    def is_full(self) -> bool:
        return len(self._items) >= self._capacity

    def push(self, value: T) -> None:
        if self.is_full():
            raise StackOverflowError(f"stack overflow: cannot push {value!r}")
        self._items.append(value)

    def pop(self) -> T:
        """Remove and return the top value."""
        if not self._items:
            raise StackEmptyError("stack is empty")
        return self._items.pop()

    def peek(self) -> T:
        """Return the top value without removing it."""
        if not self._items:
            raise StackEmptyError("stack is empty")
        return self._items[-1]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        """Iterate from the top of the stack to the bottom."""
        return reversed(self._items)

    def __str__(self) -> str:
        return " ".join(str(value) for value in self)

    def __repr__(self) -> str:
        return f"Stack(capacity={self._capacity}, items={self._items!r})"