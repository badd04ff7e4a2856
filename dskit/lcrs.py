"""Conversion between ordered trees and their left-child right-sibling form."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass
class TreeNode:
    """A node of an ordered tree with any number of children."""

    value: Any
    children: list["TreeNode"] = field(default_factory=list)


@dataclass
class SiblingNode:
    """A binary node: ``child`` is the first child, ``sibling`` the next sibling."""

    value: Any
    child: Optional["SiblingNode"] = None
    sibling: Optional["SiblingNode"] = None


def to_binary(tree: TreeNode) -> SiblingNode:
    """Convert an ordered tree into its left-child right-sibling binary form."""
    root = SiblingNode(tree.value)
    previous: Optional[SiblingNode] = None
    for child in tree.children:
        converted = to_binary(child)
        if previous is None:
            root.child = converted
        else:
            previous.sibling = converted
        previous = converted
    return root


def from_binary(node: SiblingNode) -> TreeNode:
    """Convert a left-child right-sibling tree back; the root's sibling is ignored."""
    tree = TreeNode(node.value)
    child = node.child
    while child is not None:
        tree.children.append(from_binary(child))
        child = child.sibling
    return tree


def tree_preorder(tree: TreeNode) -> list[Any]:
    """Values of an ordered tree in pre-order."""
    result: list[Any] = []
    stack = [tree]
    while stack:
        node = stack.pop()
        result.append(node.value)
        stack.extend(reversed(node.children))
    return result


def binary_preorder(node: Optional[SiblingNode]) -> list[Any]:
    """Values of a left-child right-sibling tree in binary pre-order."""
    result: list[Any] = []
    stack = [node] if node is not None else []
    while stack:
        current = stack.pop()
        result.append(current.value)
        if current.sibling is not None:
            stack.append(current.sibling)
        if current.child is not None:
            stack.append(current.child)
    return result