"""Circular doubly linked list with a sentinel node."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Generic, Iterable, Iterator, TypeVar

T = TypeVar("T")


@dataclass(slots=True, eq=False)
class _Node:
    value: Any = None
    prev: "_Node" = field(default=None, repr=False)
    next: "_Node" = field(default=None, repr=False)


class CircularDoublyLinkedList(Generic[T]):
    """A doubly linked list whose ends are joined through a sentinel."""

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._sentinel = _Node()
        self._sentinel.prev = self._sentinel
        self._sentinel.next = self._sentinel
        self._size = 0
        for item in items:
            self.push_back(item)

    def _require_items(self) -> None:
        if self._size == 0:
            raise IndexError("list is empty")

    def _check_index(self, index: int) -> None:
        if not 0 <= index < self._size:
            raise IndexError("list index out of range")

    def _node_at(self, index: int) -> _Node:
        node = self._sentinel.next
        for _ in range(index):
            node = node.next
        return node

    def _link_before(self, node: _Node, value: T) -> None:
        new = _Node(value, node.prev, node)
        node.prev.next = new
        node.prev = new
        self._size += 1

    def _unlink(self, node: _Node) -> T:
        node.prev.next = node.next
        node.next.prev = node.prev
        self._size -= 1
        return node.value

    def front(self) -> T:
        self._require_items()
        return self._sentinel.next.value

    def back(self) -> T:
        self._require_items()
        return self._sentinel.prev.value

    def push_front(self, value: T) -> None:
        self._link_before(self._sentinel.next, value)

    def push_back(self, value: T) -> None:
        self._link_before(self._sentinel, value)

    def pop_front(self) -> T:
        """Remove and return the first value."""
        self._require_items()
        return self._unlink(self._sentinel.next)

    def pop_back(self) -> T:
        """Remove and return the last value."""
        self._require_items()
        return self._unlink(self._sentinel.prev)

    def clear(self) -> None:
        self._sentinel.next = self._sentinel
        self._sentinel.prev = self._sentinel
        self._size = 0

    def insert(self, value: T, index: int) -> None:
        """Insert value so that it ends up at position index."""
        if not 0 <= index <= self._size:
            raise IndexError("insertion index out of range")
        self._link_before(self._node_at(index), value)

    def remove(self, index: int) -> None:
        """Remove the value at position index."""
        self._check_index(index)
        self._unlink(self._node_at(index))

    def __getitem__(self, index: int) -> T:
        self._check_index(index)
        return self._node_at(index).value

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        node = self._sentinel.next
        while node is not self._sentinel:
            yield node.value
            node = node.next

    def __repr__(self) -> str:
        return f"CircularDoublyLinkedList({list(self)!r})"

    def reverse(self) -> None:
        """Reverse the order of the values in place."""
        node = self._sentinel
        while True:
            node.next, node.prev = node.prev, node.next
            node = node.prev
            if node is self._sentinel:
                break