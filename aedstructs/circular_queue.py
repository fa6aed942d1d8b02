"""FIFO queue on a fixed ring of slots, one slot kept free."""

from __future__ import annotations

from typing import Any, Generic, Iterator, TypeVar

T = TypeVar("T")

DEFAULT_SLOTS = 100


class QueueFullError(OverflowError):
    """Raised when enqueuing onto a full queue."""


class QueueEmptyError(IndexError):
    """Raised when reading from an empty queue."""


class CircularQueue(Generic[T]):
    """A ring-buffer queue holding at most ``slots - 1`` values."""

    def __init__(self, slots: int = DEFAULT_SLOTS) -> None:
        if slots < 1:
            raise ValueError("a queue needs at least one slot")
        self._ring: list[Any] = [None] * slots
        self._front = 0
        self._rear = 0

    def _advance(self, position: int) -> int:
        return (position + 1) % len(self._ring)

    def is_full(self) -> bool:
        return self._advance(self._rear) == self._front

    def enqueue(self, value: T) -> None:
        if self.is_full():
            raise QueueFullError(f"queue is full: cannot insert {value!r}")
        self._ring[self._rear] = value
        self._rear = self._advance(self._rear)

    def dequeue(self) -> T:
        """Remove and return the value at the front."""
        if self._front == self._rear:
            raise QueueEmptyError("queue is empty")
        value = self._ring[self._front]
        self._ring[self._front] = None
        self._front = self._advance(self._front)
        return value

    def peek(self) -> T:
        """Return the value at the front without removing it."""
        if self._front == self._rear:
            raise QueueEmptyError("queue is empty")
        return self._ring[self._front]

    def __len__(self) -> int:
        return (self._rear - self._front) % len(self._ring)

    def __iter__(self) -> Iterator[T]:
        """Iterate from front to rear."""
        slots = len(self._ring)
        for offset in range(len(self)):
            yield self._ring[(self._front + offset) % slots]

    def __str__(self) -> str:
        return " ".join(str(value) for value in self)

    def __repr__(self) -> str:
        return f"CircularQueue(slots={len(self._ring)}, items={list(self)!r})"