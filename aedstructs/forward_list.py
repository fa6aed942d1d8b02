"""Singly linked list with merge sort and in-place reversal."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, Iterable, Iterator, Optional, TypeVar

T = TypeVar("T")


@dataclass(slots=True, eq=False)
class _Node:
    value: Any
    next: Optional["_Node"] = None


def _split(head: _Node) -> Optional[_Node]:
    """Cut the chain in the middle and return the head of the second half."""
    if head.next is None:
        return None
    slow = head
    fast = head.next
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
    second = slow.next
    slow.next = None
    return second


def _merge(first: Optional[_Node], second: Optional[_Node]) -> Optional[_Node]:
    anchor = _Node(None)
    tail = anchor
    while first is not None and second is not None:
        if first.value < second.value:
            tail.next, first = first, first.next
        else:
            tail.next, second = second, second.next
        tail = tail.next
    tail.next = first if first is not None else second
    return anchor.next


def _merge_sort(head: Optional[_Node]) -> Optional[_Node]:
    if head is None or head.next is None:
        return head
    second = _split(head)
    return _merge(_merge_sort(head), _merge_sort(second))


class ForwardList(Generic[T]):
    """A singly linked list of values."""

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._head: Optional[_Node] = None
        self._size = 0
        tail: Optional[_Node] = None
        for item in items:
            node = _Node(item)
            if tail is None:
                self._head = node
            else:
                tail.next = node
            tail = node
            self._size += 1

    def _node_at(self, index: int) -> _Node:
        node = self._head
        for _ in range(index):
            node = node.next
        return node

    def _require_items(self) -> None:
        if self._head is None:
            raise IndexError("list is empty")

    def front(self) -> T:
        """Return the first value."""
        self._require_items()
        return self._head.value

    def back(self) -> T:
        """Return the last value."""
        self._require_items()
        return self._node_at(self._size - 1).value

    def push_front(self, value: T) -> None:
        self._head = _Node(value, self._head)
        self._size += 1

    def push_back(self, value: T) -> None:
        node = _Node(value)
        if self._head is None:
            self._head = node
        else:
            self._node_at(self._size - 1).next = node
        self._size += 1

    def pop_front(self) -> T:
        """Remove and return the first value."""
        self._require_items()
        node = self._head
        self._head = node.next
        self._size -= 1
        return node.value

    def pop_back(self) -> T:
        """Remove and return the last value."""
        self._require_items()
        if self._size == 1:
            value = self._head.value
            self._head = None
        else:
            prev = self._node_at(self._size - 2)
            value = prev.next.value
            prev.next = None
        self._size -= 1
        return value

    def __getitem__(self, index: int) -> T:
        if not 0 <= index < self._size:
            raise IndexError("list index out of range")
        return self._node_at(index).value

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __str__(self) -> str:
        return " -> ".join(str(value) for value in self)

    def __repr__(self) -> str:
        return f"ForwardList({list(self)!r})"

    def clear(self) -> None:
        self._head = None
        self._size = 0

    def sort(self) -> None:
        """Sort the values in ascending order with a merge sort on the nodes."""
        self._head = _merge_sort(self._head)

    def reverse(self) -> None:
        """Reverse the order of the values in place."""
        prev = None
        node = self._head
        while node is not None:
            node.next, prev, node = prev, node, node.next
        self._head = prev

    def insert(self, index: int, value: T) -> None:
        """Insert value so that it ends up at position index."""
        if not 0 <= index <= self._size:
            raise IndexError("insertion index out of range")
        if index == 0:
            self.push_front(value)
            return
        prev = self._node_at(index - 1)
        prev.next = _Node(value, prev.next)
        self._size += 1

    def remove(self, index: int) -> None:
        """Remove the value at position index."""
        if not 0 <= index < self._size:
            raise IndexError("list index out of range")
        if index == 0:
            self.pop_front()
            return
        prev = self._node_at(index - 1)
        prev.next = prev.next.next
        self._size -= 1