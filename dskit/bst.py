"""Unbalanced binary search tree holding distinct values."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class _Node:
    value: Any
    left: Optional["_Node"] = None
    right: Optional["_Node"] = None


class BinarySearchTree:
    """A plain binary search tree; duplicates are ignored."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._root: Optional[_Node] = None
        for value in values:
            self.insert(value)

    def insert(self, x: Any) -> None:
        """Add ``x`` unless it is already present."""
        if self._root is None:
            self._root = _Node(x)
            return
        node = self._root
        while True:
            if x == node.value:
                return
            if x < node.value:
                if node.left is None:
                    node.left = _Node(x)
                    return
                node = node.left
            else:
                if node.right is None:
                    node.right = _Node(x)
                    return
                node = node.right

    def remove(self, x: Any) -> None:
        """Remove ``x`` if present.

        A node with two children takes the value of the largest node in its
        left subtree, which is then unlinked instead.
        """
        parent: Optional[_Node] = None
        node = self._root
        while node is not None and node.value != x:
            parent = node
            node = node.left if x < node.value else node.right
        if node is None:
            return
        if node.left is not None and node.right is not None:
            pred_parent, pred = node, node.left
            while pred.right is not None:
                pred_parent, pred = pred, pred.right
            node.value = pred.value
            parent, node = pred_parent, pred
        child = node.left if node.left is not None else node.right
        if parent is None:
            self._root = child
        elif parent.left is node:
            parent.left = child
        else:
            parent.right = child

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