"""Classic graph algorithms: components, spanning trees and BFS puzzles."""

from __future__ import annotations

import heapq
from collections import deque
from collections.abc import Iterable, Sequence
from typing import Any


def _explore(
    adjacency: Sequence[Sequence[int]], root: int, visited: list[bool]
) -> tuple[list[int], list[int]]:
    """Depth-first walk from ``root``; returns its pre-order and post-order."""
    visited[root] = True
    preorder = [root]
    postorder: list[int] = []
    stack = [(root, iter(adjacency[root]))]
    while stack:
        v, neighbors = stack[-1]
        for u in neighbors:
            if not visited[u]:
                visited[u] = True
                preorder.append(u)
                stack.append((u, iter(adjacency[u])))
                break
        else:
            stack.pop()
            postorder.append(v)
    return preorder, postorder


def strongly_connected_components(
    n: int, edges: Iterable[tuple[int, int]]
) -> list[list[int]]:
    """Strongly connected components of a directed graph, by Kosaraju's method."""
    forward: list[list[int]] = [[] for _ in range(n)]
    backward: list[list[int]] = [[] for _ in range(n)]
    for u, v in edges:
        forward[u].append(v)
        backward[v].append(u)

    visited = [False] * n
    finish: list[int] = []
    for v in range(n):
        if not visited[v]:
            finish.extend(_explore(backward, v, visited)[1])

    visited = [False] * n
    components = []
    for v in reversed(finish):
        if not visited[v]:
            components.append(_explore(forward, v, visited)[0])
    return components


def kruskal_mst_weight(n: int, edges: Iterable[tuple[int, int, int]]) -> int:
    """Total weight of a minimum spanning forest, by Kruskal's method."""
    parent = list(range(n))
    rank = [0] * n

    def find(x: int) -> int:
        root = x
        while parent[root] != root:
            root = parent[root]
        while parent[x] != root:
            parent[x], x = root, parent[x]
        return root

    total = 0
    for u, v, w in sorted(edges, key=lambda edge: edge[2]):
        ru, rv = find(u), find(v)
        if ru == rv:
            continue
        if rank[ru] > rank[rv]:
            parent[rv] = ru
        else:
            parent[ru] = rv
            if rank[ru] == rank[rv]:
                rank[rv] += 1
        total += w
    return total


def prim_mst_weight(n: int, edges: Iterable[tuple[int, int, int]]) -> int:
    """Weight of a minimum spanning tree of the component of vertex 0, by Prim."""
    if n == 0:
        return 0
    adjacency: list[list[tuple[int, int]]] = [[] for _ in range(n)]
    for u, v, w in edges:
        adjacency[u].append((v, w))
        adjacency[v].append((u, w))
    visited = [False] * n
    total = 0
    frontier = [(0, 0)]
    while frontier:
        w, v = heapq.heappop(frontier)
        if visited[v]:
            continue
        visited[v] = True
        total += w
        for u, weight in adjacency[v]:
            heapq.heappush(frontier, (weight, u))
    return total


def bfs_distances(adjacency: Sequence[Iterable[int]], start: int) -> list[int]:
    """Edge counts of shortest paths from ``start``; -1 marks unreachable vertices."""
    dist = [-1] * len(adjacency)
    dist[start] = 0
    queue = deque([start])
    while queue:
        u = queue.popleft()
        for v in adjacency[u]:
            if dist[v] == -1:
                dist[v] = dist[u] + 1
                queue.append(v)
    return dist


def _undirected(n: int, edges: Iterable[tuple[int, int]]) -> list[list[int]]:
    """Adjacency lists for vertices 1..n (index 0 unused)."""
    adjacency: list[list[int]] = [[] for _ in range(n + 1)]
    for u, v in edges:
        adjacency[u].append(v)
        adjacency[v].append(u)
    return adjacency


def count_removable_edges(n: int, edges: Iterable[tuple[int, int]]) -> int:
    """Count edges of an undirected graph on 1..n that shortest paths from 1 can spare.

    An edge joining two vertices at the same distance always counts. An edge
    from distance d to d + 1 counts when its far end has another neighbour at
    distance at most d + 1.
    """
    if n < 1:
        raise ValueError("the graph needs at least vertex 1")
    edge_list = list(edges)
    adjacency = _undirected(n, edge_list)
    dist = bfs_distances(adjacency, 1)

    predecessors = [0] * (n + 1)
    alternatives = [0] * (n + 1)
    for v in range(1, n + 1):
        for u in adjacency[v]:
            if dist[u] <= dist[v]:
                alternatives[v] += 1
            if dist[u] == dist[v] - 1:
                predecessors[v] += 1

    removable = 0
    for u, v in edge_list:
        if dist[u] > dist[v]:
            u, v = v, u
        if dist[v] == dist[u] + 1:
            if predecessors[v] > 1 or alternatives[v] > 1:
                removable += 1
        else:
            removable += 1
    return removable


def _is_blocked(cell: Any) -> bool:
    return cell in (1, "1")


def shortest_grid_path(
    grid: Sequence[Sequence[Any]], start: tuple[int, int], goal: tuple[int, int]
) -> int:
    """Fewest four-way steps from ``start`` to ``goal`` avoiding blocked cells.

    Cells are ``0``/``"0"`` for open and ``1``/``"1"`` for blocked; positions
    are zero-based ``(row, column)``. Returns -1 when the goal cannot be reached.
    """
    blocked = [[_is_blocked(cell) for cell in row] for row in grid]
    start, goal = tuple(start), tuple(goal)
    for row, col in (start, goal):
        if not (0 <= row < len(blocked) and 0 <= col < len(blocked[row])):
            raise ValueError(f"position ({row}, {col}) is outside the grid")
    if start == goal:
        return 0
    dist = {start: 0}
    queue = deque([start])
    while queue:
        row, col = queue.popleft()
        for step in ((row - 1, col), (row + 1, col), (row, col - 1), (row, col + 1)):
            r, c = step
            if not (0 <= r < len(blocked) and 0 <= c < len(blocked[r])):
                continue
            if blocked[r][c] or step in dist:
                continue
            dist[step] = dist[row, col] + 1
            if step == goal:
                return dist[step]
            queue.append(step)
    return -1


def latest_split_depth(
    n: int, edges: Iterable[tuple[int, int]], origin: int, a: int, b: int
) -> int:
    """Greatest distance from ``origin`` at which a vertex lies on shortest paths to both.

    Vertices are 1..n in an undirected graph. The result is the largest
    distance of a vertex that sits on some shortest path from ``origin`` to
    ``a`` and on some shortest path from ``origin`` to ``b``, or -1 if none.
    """
    adjacency = _undirected(n, edges)
    d = bfs_distances(adjacency, origin)
    da = bfs_distances(adjacency, a)
    db = bfs_distances(adjacency, b)
    latest = -1
    for v in range(1, n + 1):
        if d[v] > latest and d[v] + da[v] == d[a] and d[v] + db[v] == d[b]:
            latest = d[v]
    return latest


def find_sinks(n: int, edges: Iterable[tuple[int, int]]) -> list[int]:
    """Vertices of 1..n with no outgoing edge and an incoming edge count of n - 1."""
    has_out = [False] * (n + 1)
    in_degree = [0] * (n + 1)
    for u, v in edges:
        has_out[u] = True
        in_degree[v] += 1
    return [v for v in range(1, n + 1) if not has_out[v] and in_degree[v] == n - 1]