"""Huffman trees and prefix codes."""

from __future__ import annotations

import heapq
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from itertools import count
from typing import Any, Optional, Union


@dataclass
class HuffmanNode:
    """A Huffman tree node; leaves carry a symbol, inner nodes two children."""

    weight: int
    symbol: Any = None
    left: Optional["HuffmanNode"] = None
    right: Optional["HuffmanNode"] = None

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None


def build_huffman_tree(
    weights: Union[Mapping[Any, int], Iterable[tuple[Any, int]]]
) -> Optional[HuffmanNode]:
    """Build a Huffman tree from symbol weights; ``None`` if there are none.

    The two lightest trees are merged repeatedly, the lighter becoming the
    left child. Ties go to the tree that entered the queue first.
    """
    pairs = weights.items() if isinstance(weights, Mapping) else weights
    order = count()
    queue = [(weight, next(order), HuffmanNode(weight, symbol)) for symbol, weight in pairs]
    heapq.heapify(queue)
    while len(queue) > 1:
        _, _, first = heapq.heappop(queue)
        _, _, second = heapq.heappop(queue)
        merged = HuffmanNode(first.weight + second.weight, left=first, right=second)
        heapq.heappush(queue, (merged.weight, next(order), merged))
    return queue[0][2] if queue else None


def huffman_codes(root: Optional[HuffmanNode]) -> dict[Any, str]:
    """Map each leaf symbol to its code: ``0`` for a left branch, ``1`` for right."""
    codes: dict[Any, str] = {}
    stack = [(root, "")] if root is not None else []
    while stack:
        node, code = stack.pop()
        if node.is_leaf:
            codes[node.symbol] = code
            continue
        if node.right is not None:
            stack.append((node.right, code + "1"))
        if node.left is not None:
            stack.append((node.left, code + "0"))
    return codes


def _render(node: Optional[HuffmanNode], prefix: str, is_left: bool) -> Iterator[str]:
    if node is None:
        return
    label = f"'{node.symbol}' ({node.weight})" if node.is_leaf else f"Node ({node.weight})"
    yield prefix + ("├──" if is_left else "└──") + label
    child_prefix = prefix + ("│   " if is_left else "    ")
    yield from _render(node.left, child_prefix, True)
    yield from _render(node.right, child_prefix, False)


def render_tree(root: Optional[HuffmanNode]) -> str:
    """Draw the tree with box-drawing branches, one node per line."""
    return "\n".join(_render(root, "", False))