"""Self-balancing AVL tree holding distinct values."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class _Node:
    value: Any
    height: int = 0
    left: Optional["_Node"] = None
    right: Optional["_Node"] = None


def _height(node: Optional[_Node]) -> int:
    return node.height if node is not None else -1


def _update(node: _Node) -> None:
    node.height = max(_height(node.left), _height(node.right)) + 1


def _rotate_right(node: _Node) -> _Node:
    pivot = node.left
    assert pivot is not None
    node.left = pivot.right
    pivot.right = node
    _update(node)
    _update(pivot)
    return pivot


def _rotate_left(node: _Node) -> _Node:
    pivot = node.right
    assert pivot is not None
    node.right = pivot.left
    pivot.left = node
    _update(node)
    _update(pivot)
    return pivot


def _rebalance(node: _Node) -> _Node:
    _update(node)
    balance = _height(node.left) - _height(node.right)
    if balance > 1:
        assert node.left is not None
        if _height(node.left.left) < _height(node.left.right):
            node.left = _rotate_left(node.left)
        return _rotate_right(node)
    if balance < -1:
        assert node.right is not None
        if _height(node.right.right) < _height(node.right.left):
            node.right = _rotate_right(node.right)
        return _rotate_left(node)
    return node


def _insert(node: Optional[_Node], x: Any) -> _Node:
    if node is None:
        return _Node(x)
    if x == node.value:
        return node
    if x < node.value:
        node.left = _insert(node.left, x)
    else:
        node.right = _insert(node.right, x)
    return _rebalance(node)


def _remove(node: Optional[_Node], x: Any) -> Optional[_Node]:
    if node is None:
        return None
    if x == node.value:
        if node.left is None or node.right is None:
            return node.left if node.left is not None else node.right
        successor = node.right
        while successor.left is not None:
            successor = successor.left
        node.value = successor.value
        node.right = _remove(node.right, successor.value)
    elif x < node.value:
        node.left = _remove(node.left, x)
    else:
        node.right = _remove(node.right, x)
    return _rebalance(node)


class AVLTree:
    """Height-balanced binary search tree; duplicates are ignored."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._root: Optional[_Node] = None
        for value in values:
            self.insert(value)

    def insert(self, x: Any) -> None:
        """Add ``x`` unless it is already present."""
        self._root = _insert(self._root, x)

    def remove(self, x: Any) -> None:
        """Remove ``x`` if present; a missing value is ignored."""
        self._root = _remove(self._root, x)

    def height(self) -> int:
        """Height of the tree: -1 when empty, 0 for a single node."""
        return _height(self._root)

    def __contains__(self, x: object) -> bool:
        node = self._root
        while node is not None:
            if x == node.value:
                return True
            node = node.left if x < node.value else node.right  # type: ignore[operator]
        return False

    def __iter__(self) -> Iterator[Any]:
        """Yield the values in ascending order."""
        stack: list[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.value
            node = node.right