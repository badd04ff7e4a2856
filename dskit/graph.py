"""Directed graphs kept as adjacency lists, with depth-first traversals."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence


def _depth_first(adjacency: Sequence[Sequence[int]], start: int) -> list[int]:
    """Recursive-order depth-first walk from ``start`` without recursion."""
    visited = {start}
    order = [start]
    stack: list[Iterator[int]] = [iter(adjacency[start])]
    while stack:
        for neighbor in stack[-1]:
            if neighbor not in visited:
                visited.add(neighbor)
                order.append(neighbor)
                stack.append(iter(adjacency[neighbor]))
                break
        else:
            stack.pop()
    return order


class Graph:
    """A directed graph on vertices ``0 .. len(graph) - 1``."""

    def __init__(self, vertices: int = 0) -> None:
        if vertices < 0:
            raise ValueError("vertex count cannot be negative")
        self._adjacency: list[list[int]] = [[] for _ in range(vertices)]

    def _valid(self, v: int) -> bool:
        return 0 <= v < len(self._adjacency)

    def add_edge(self, u: int, v: int) -> None:
        """Add an edge from ``u`` to ``v``; ignored if either vertex is missing."""
        if self._valid(u) and self._valid(v):
            self._adjacency[u].append(v)

    def remove_edge(self, u: int, v: int) -> None:
        """Remove every edge from ``u`` to ``v``; ignored if either vertex is missing."""
        if self._valid(u) and self._valid(v):
            self._adjacency[u] = [w for w in self._adjacency[u] if w != v]

    def add_vertex(self) -> int:
        """Add an isolated vertex and return its index."""
        self._adjacency.append([])
        return len(self._adjacency) - 1

    def remove_vertex(self, v: int) -> None:
        """Remove ``v`` and its edges; higher-numbered vertices shift down by one."""
        if not self._valid(v):
            return
        del self._adjacency[v]
        self._adjacency = [
            [w - 1 if w > v else w for w in edges if w != v]
            for edges in self._adjacency
        ]

    def neighbors(self, v: int) -> tuple[int, ...]:
        """Targets of the edges leaving ``v``, in insertion order."""
        if not self._valid(v):
            raise IndexError(f"no vertex {v}")
        return tuple(self._adjacency[v])

    def __len__(self) -> int:
        return len(self._adjacency)

    def dfs(self, start: int) -> list[int]:
        """Vertices reachable from ``start`` in depth-first pre-order."""
        if not self._valid(start):
            raise IndexError(f"no vertex {start}")
        return _depth_first(self._adjacency, start)

    def dfs_stack(self) -> list[int]:
        """Stack-driven depth-first order from vertex 0.

        Neighbours are pushed in insertion order, so the last one added is
        explored first. An empty graph yields an empty list.
        """
        if not self._adjacency:
            return []
        visited: set[int] = set()
        order: list[int] = []
        stack = [0]
        while stack:
            v = stack.pop()
            if v in visited:
                continue
            visited.add(v)
            order.append(v)
            stack.extend(u for u in self._adjacency[v] if u not in visited)
        return order


def edge_pointer_dfs(
    vertices: int, edges: Iterable[tuple[int, int]], start: int
) -> list[int]:
    """Depth-first order from ``start`` over head-inserted edge lists.

    Each edge ``(u, v)`` is put at the front of ``u``'s list, so the
    neighbours of a vertex are tried in reverse order of addition.
    """
    adjacency: list[list[int]] = [[] for _ in range(vertices)]
    for u, v in edges:
        if not (0 <= u < vertices and 0 <= v < vertices):
            raise IndexError(f"edge ({u}, {v}) leaves the graph")
        adjacency[u].append(v)
    for targets in adjacency:
        targets.reverse()
    if not 0 <= start < vertices:
        raise IndexError(f"no vertex {start}")
    return _depth_first(adjacency, start)