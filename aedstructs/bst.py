"""Unbalanced binary search tree holding distinct values."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, Iterable, Iterator, Optional, TypeVar

T = TypeVar("T")


@dataclass(slots=True, eq=False)
class _Node:
    value: Any
    left: Optional["_Node"] = None
    right: Optional["_Node"] = None


def _min_node(node: _Node) -> _Node:
    while node.left is not None:
        node = node.left
    return node


def _max_node(node: _Node) -> _Node:
    while node.right is not None:
        node = node.right
    return node


def _remove_min(node: _Node) -> Optional[_Node]:
    """Return the subtree with its smallest node cut out."""
    if node.left is None:
        return node.right
    node.left = _remove_min(node.left)
    return node


def _height(node: Optional[_Node]) -> int:
    if node is None:
        return 0
    return 1 + max(_height(node.left), _height(node.right))


class BinarySearchTree(Generic[T]):
    """A binary search tree; duplicate values are not stored."""

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._root: Optional[_Node] = None
        for item in items:
            self.insert(item)

    def insert(self, value: T) -> bool:
        """Add value; return False if it was already present."""
        if self._root is None:
            self._root = _Node(value)
            return True
        node = self._root
        while True:
            if value < node.value:
                if node.left is None:
                    node.left = _Node(value)
                    return True
                node = node.left
            elif value > node.value:
                if node.right is None:
                    node.right = _Node(value)
                    return True
                node = node.right
            else:
                return False

    def __contains__(self, value: object) -> bool:
        node = self._root
        while node is not None:
            if value < node.value:
                node = node.left
            elif value > node.value:
                node = node.right
            else:
                return True
        return False

    def remove(self, value: T) -> bool:
        """Remove value; return False if it was not present."""
        self._root, removed = self._remove(self._root, value)
        return removed

    def _remove(self, node: Optional[_Node], value: T) -> tuple[Optional[_Node], bool]:
        if node is None:
            return None, False
        if value < node.value:
            node.left, removed = self._remove(node.left, value)
            return node, removed
        if value > node.value:
            node.right, removed = self._remove(node.right, value)
            return node, removed
        if node.left is None:
            return node.right, True
        if node.right is None:
            return node.left, True
        node.value = _min_node(node.right).value
        node.right = _remove_min(node.right)
        return node, True

    def height(self) -> int:
        """Number of nodes on the longest root-to-leaf path; 0 when empty."""
        return _height(self._root)

    def find_min(self) -> T:
        if self._root is None:
            raise ValueError("tree is empty")
        return _min_node(self._root).value

    def find_max(self) -> T:
        if self._root is None:
            raise ValueError("tree is empty")
        return _max_node(self._root).value

    def __iter__(self) -> Iterator[T]:
        """Iterate in ascending order."""
        stack: list[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.value
            node = node.right

    def __repr__(self) -> str:
        return f"BinarySearchTree({list(self)!r})"