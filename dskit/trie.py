"""Counting words by prefix, with a trie or with sorted search."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Iterable
from dataclasses import dataclass, field

_MAX_CHAR = chr(0x10FFFF)


@dataclass
class _TrieNode:
    count: int = 0
    children: dict[str, "_TrieNode"] = field(default_factory=dict)


class Trie:
    """A prefix tree that counts how many inserted words pass each node."""

    def __init__(self) -> None:
        self._root = _TrieNode()

    def insert(self, word: str) -> None:
        """Add one occurrence of ``word``."""
        node = self._root
        node.count += 1
        for ch in word:
            node = node.children.setdefault(ch, _TrieNode())
            node.count += 1

    def count_prefix(self, prefix: str) -> int:
        """Number of inserted words that start with ``prefix``."""
        node = self._root
        for ch in prefix:
            child = node.children.get(ch)
            if child is None:
                return 0
            node = child
        return node.count


def _prefix_end(ordered: list[str], prefix: str) -> int:
    stripped = prefix.rstrip(_MAX_CHAR)
    if not stripped:
        return len(ordered)
    successor = stripped[:-1] + chr(ord(stripped[-1]) + 1)
    return bisect_left(ordered, successor)


def count_prefixes(words: Iterable[str], queries: Iterable[str]) -> list[int]:
    """For each query, count the words starting with it, by search in sorted order."""
    ordered = sorted(words)
    return [
        _prefix_end(ordered, prefix) - bisect_left(ordered, prefix)
        for prefix in queries
    ]