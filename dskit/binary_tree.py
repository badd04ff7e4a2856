"""Binary trees built from traversal sequences."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from itertools import zip_longest
from typing import Any, Optional


@dataclass
class BinaryNode:
    """A node of a binary tree."""

    value: Any
    left: Optional["BinaryNode"] = None
    right: Optional["BinaryNode"] = None


class BinaryTree:
    """A binary tree with traversals and constructors from traversals."""

    def __init__(self, root: Optional[BinaryNode] = None) -> None:
        self.root = root

    @classmethod
    def from_level_order(cls, values: Iterable[Any]) -> "BinaryTree":
        """Build from a level-order listing where ``None`` marks a missing child."""
        items = list(values)
        if not items:
            return cls()
        if items[0] is None:
            raise ValueError("the root cannot be missing")
        root = BinaryNode(items[0])
        pending = deque([root])
        rest = iter(items[1:])
        for left, right in zip_longest(rest, rest):
            if not pending:
                raise ValueError("more values than open child slots")
            parent = pending.popleft()
            if left is not None:
                parent.left = BinaryNode(left)
                pending.append(parent.left)
            if right is not None:
                parent.right = BinaryNode(right)
                pending.append(parent.right)
        return cls(root)

    @classmethod
    def from_preorder_inorder(
        cls, preorder: Sequence[Any], inorder: Sequence[Any]
    ) -> "BinaryTree":
        """Rebuild a tree from its pre-order and in-order traversals."""
        if len(preorder) != len(inorder):
            raise ValueError("traversals differ in length")
        inorder = list(inorder)

        def build(pre_lo: int, pre_hi: int, in_lo: int, in_hi: int) -> Optional[BinaryNode]:
            if pre_lo > pre_hi or in_lo > in_hi:
                return None
            value = preorder[pre_lo]
            try:
                pos = inorder.index(value, in_lo, in_hi + 1)
            except ValueError:
                raise ValueError(f"{value!r} is not where the in-order traversal expects it") from None
            left_size = pos - in_lo
            node = BinaryNode(value)
            node.left = build(pre_lo + 1, pre_lo + left_size, in_lo, pos - 1)
            node.right = build(pre_lo + left_size + 1, pre_hi, pos + 1, in_hi)
            return node

        return cls(build(0, len(preorder) - 1, 0, len(inorder) - 1))

    @classmethod
    def from_inorder_levelorder(
        cls, inorder: Sequence[Any], levelorder: Sequence[Any]
    ) -> "BinaryTree":
        """Rebuild a tree of distinct values from in-order and level-order traversals."""
        if len(inorder) != len(levelorder):
            raise ValueError("traversals differ in length")
        inorder = list(inorder)
        position = {value: i for i, value in enumerate(inorder)}

        def build(level: list[Any], lo: int, hi: int) -> Optional[BinaryNode]:
            if lo > hi:
                return None
            if not level:
                raise ValueError("level-order traversal is missing values")
            value = level[0]
            try:
                pos = inorder.index(value, lo, hi + 1)
                rest = [(v, position[v]) for v in level[1:]]
            except (ValueError, KeyError):
                raise ValueError("traversals do not describe the same tree") from None
            node = BinaryNode(value)
            node.left = build([v for v, p in rest if p <= pos], lo, pos - 1)
            node.right = build([v for v, p in rest if p > pos], pos + 1, hi)
            return node

        return cls(build(list(levelorder), 0, len(inorder) - 1))

    def size(self) -> int:
        """Number of nodes."""
        return len(self.preorder())

    def height(self) -> int:
        """Number of levels: 0 for an empty tree, 1 for a single node."""
        levels = 0
        frontier = [self.root] if self.root is not None else []
        while frontier:
            levels += 1
            frontier = [
                child
                for node in frontier
                for child in (node.left, node.right)
                if child is not None
            ]
        return levels

    def inorder(self) -> list[Any]:
        """Values in left-root-right order."""
        result: list[Any] = []
        stack: list[BinaryNode] = []
        node = self.root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            result.append(node.value)
            node = node.right
        return result

    def preorder(self) -> list[Any]:
        """Values in root-left-right order."""
        result: list[Any] = []
        stack = [self.root] if self.root is not None else []
        while stack:
            node = stack.pop()
            result.append(node.value)
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)
        return result

    def level_order(self) -> list[Any]:
        """Values level by level, left to right."""
        result: list[Any] = []
        queue = deque([self.root] if self.root is not None else [])
        while queue:
            node = queue.popleft()
            result.append(node.value)
            if node.left is not None:
                queue.append(node.left)
            if node.right is not None:
                queue.append(node.right)
        return result