"""Self-balancing AVL tree holding distinct values."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, Iterable, Iterator, Optional, TypeVar

T = TypeVar("T")


@dataclass(slots=True, eq=False)
class _Node:
    value: Any
    height: int = 0
    left: Optional["_Node"] = None
    right: Optional["_Node"] = None


def _height(node: Optional[_Node]) -> int:
    return node.height if node is not None else -1


def _update(node: _Node) -> None:
    node.height = 1 + max(_height(node.left), _height(node.right))


def _balance_factor(node: Optional[_Node]) -> int:
    return _height(node.left) - _height(node.right) if node is not None else 0


def _rotate_right(a: _Node) -> _Node:
    b = a.left
    a.left = b.right
    b.right = a
    _update(a)
    _update(b)
    return b


def _rotate_left(a: _Node) -> _Node:
    b = a.right
    a.right = b.left
    b.left = a
    _update(a)
    _update(b)
    return b


def _rebalance(node: _Node) -> _Node:
    _update(node)
    factor = _balance_factor(node)
    if factor == 2:
        if _balance_factor(node.left) == -1:
            node.left = _rotate_left(node.left)
        return _rotate_right(node)
    if factor == -2:
        if _balance_factor(node.right) == 1:
            node.right = _rotate_right(node.right)
        return _rotate_left(node)
    return node


def _min_node(node: _Node) -> _Node:
    while node.left is not None:
        node = node.left
    return node


class AVLTree(Generic[T]):
    """An AVL tree; duplicate values are ignored."""

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._root: Optional[_Node] = None
        self.insert(*items)

    def insert(self, *args: T) -> int:
        """Insert each value given; return how many were newly added."""
        added = 0
        for value in args:
            self._root, was_added = self._insert(self._root, value)
            added += was_added
        return added

    def _insert(self, node: Optional[_Node], value: T) -> tuple[_Node, bool]:
        if node is None:
            return _Node(value), True
        if value == node.value:
            return node, False
        if value < node.value:
            node.left, added = self._insert(node.left, value)
        else:
            node.right, added = self._insert(node.right, value)
        return _rebalance(node), added

    def __contains__(self, value: object) -> bool:
        node = self._root
        while node is not None:
            if value == node.value:
                return True
            node = node.left if value < node.value else node.right
        return False

    def remove(self, value: T) -> None:
        """Remove value, raising KeyError if it is not in the tree."""
        self._root = self._remove(self._root, value)

    def _remove(self, node: Optional[_Node], value: T) -> Optional[_Node]:
        if node is None:
            raise KeyError(value)
        if value < node.value:
            node.left = self._remove(node.left, value)
        elif value > node.value:
            node.right = self._remove(node.right, value)
        else:
            if node.left is None:
                return node.right
            if node.right is None:
                return node.left
            successor = _min_node(node.right)
            node.value = successor.value
            node.right = self._remove(node.right, successor.value)
        return _rebalance(node)

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

    def levels(self) -> Iterator[list[T]]:
        """Yield the values of each level, top down, left to right."""
        level = [self._root] if self._root is not None else []
        while level:
            yield [node.value for node in level]
            level = [
                child
                for node in level
                for child in (node.left, node.right)
                if child is not None
            ]

    def height(self) -> int:
        """Edges on the longest root-to-leaf path; -1 when empty."""
        return _height(self._root)

    def __repr__(self) -> str:
        return f"AVLTree({list(self)!r})"