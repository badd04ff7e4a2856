"""Binary trees given as child lists: ancestors, depth, breadth and distance."""

from __future__ import annotations

from collections import Counter, deque
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class TreeProfile:
    """Shape of a tree and a weighted distance between two of its nodes.

    ``distance`` counts two for each step up from the first node to the
    common ancestor and one for each step down to the second node.
    """

    depth: int
    breadth: int
    distance: int


def _check_node(n: int, node: int) -> None:
    if not 1 <= node <= n:
        raise ValueError(f"node {node} is not in 1..{n}")


def _path_to_root(parent: Mapping[int, int], node: int) -> list[int]:
    path: list[int] = []
    seen: set[int] = set()
    while node:
        if node in seen:
            raise ValueError("parent links form a cycle")
        seen.add(node)
        path.append(node)
        node = parent.get(node, 0)
    return path


def _strip_common(px: list[int], py: list[int]) -> Optional[int]:
    common: Optional[int] = None
    while px and py and px[-1] == py[-1]:
        common = px.pop()
        py.pop()
    return common


def lowest_common_ancestor(
    children: Sequence[tuple[int, int]], x: int, y: int
) -> Optional[int]:
    """Deepest common ancestor of ``x`` and ``y``; a node counts as its own ancestor.

    ``children[i - 1]`` holds the two children of node ``i``, with 0 for a
    missing child. Returns ``None`` when the nodes share no ancestor.
    """
    n = len(children)
    _check_node(n, x)
    _check_node(n, y)
    parent: dict[int, int] = {}
    for node, pair in enumerate(children, 1):
        for child in pair:
            if child:
                parent[child] = node
    return _strip_common(_path_to_root(parent, x), _path_to_root(parent, y))


def tree_profile(
    n: int, edges: Iterable[tuple[int, int]], x: int, y: int
) -> TreeProfile:
    """Depth, breadth and the ``x``-to-``y`` distance of a binary tree rooted at 1.

    Each edge ``(u, v)`` makes ``v`` a child of ``u``; a node has at most
    two children. Depth counts levels, so a lone root has depth 1.
    """
    if n < 1:
        raise ValueError("the tree needs at least node 1")
    _check_node(n, x)
    _check_node(n, y)
    kids: dict[int, list[int]] = {v: [] for v in range(1, n + 1)}
    parent: dict[int, int] = {}
    for u, v in edges:
        _check_node(n, u)
        _check_node(n, v)
        if len(kids[u]) == 2:
            raise ValueError(f"node {u} already has two children")
        kids[u].append(v)
        parent[v] = u

    depth = {1: 1}
    queue = deque([1])
    while queue:
        node = queue.popleft()
        for child in kids[node]:
            if child in depth:
                raise ValueError("the edges do not form a tree")
            depth[child] = depth[node] + 1
            queue.append(child)
    level_sizes = Counter(depth.values())

    px = _path_to_root(parent, x)
    py = _path_to_root(parent, y)
    _strip_common(px, py)
    return TreeProfile(
        depth=max(depth.values()),
        breadth=max(level_sizes.values()),
        distance=len(px) * 2 + len(py),
    )