import random

import pytest

from dskit.graph_algorithms import (
    bfs_distances,
    count_removable_edges,
    find_sinks,
    kruskal_mst_weight,
    latest_split_depth,
    prim_mst_weight,
    shortest_grid_path,
    strongly_connected_components,
)

SAMPLES = [
    (5, [(0, 1, 10), (0, 2, 1), (0, 3, 4), (1, 2, 2), (1, 4, 5), (2, 3, 8), (3, 4, 3)], 10),
    (4, [(0, 1, 1), (0, 2, 4), (1, 2, 2), (1, 3, 6), (2, 3, 3)], 6),
    (
        6,
        [
            (0, 1, 4), (0, 2, 1), (0, 3, 3), (1, 2, 4), (1, 3, 4),
            (2, 3, 2), (2, 4, 4), (3, 4, 6), (4, 5, 5),
        ],
        16,
    ),
]


@pytest.mark.parametrize("n, edges, expected", SAMPLES)
def test_kruskal_source_samples(n, edges, expected):
    assert kruskal_mst_weight(n, edges) == expected


@pytest.mark.parametrize("n, edges, expected", SAMPLES)
def test_prim_source_samples(n, edges, expected):
    assert prim_mst_weight(n, edges) == expected


@pytest.mark.parametrize("seed", range(6))
def test_kruskal_and_prim_agree_on_connected_graphs(seed):
    rng = random.Random(seed)
    n = 12
    edges = [(v, rng.randrange(v), rng.randint(1, 50)) for v in range(1, n)]
    edges += [(rng.randrange(n), rng.randrange(n), rng.randint(1, 50)) for _ in range(20)]
    assert kruskal_mst_weight(n, edges) == prim_mst_weight(n, edges)


def test_spanning_tree_of_a_tree_is_the_whole_tree():
    edges = [(0, 1, 7), (1, 2, 3), (1, 3, 9)]
    total = sum(w for _, _, w in edges)
    assert kruskal_mst_weight(4, edges) == total
    assert prim_mst_weight(4, edges) == total


def test_prim_on_empty_graph():
    assert prim_mst_weight(0, []) == 0


def _directed(n, edges):
    adjacency = [[] for _ in range(n)]
    for u, v in edges:
        adjacency[u].append(v)
    return adjacency


@pytest.mark.parametrize(
    "n, edges",
    [
        (6, [(0, 1), (1, 2), (2, 0), (2, 3), (3, 4), (4, 3), (5, 5)]),
        (5, [(0, 1), (1, 2), (2, 3), (3, 4)]),
        (4, [(0, 1), (1, 0), (2, 3), (3, 2), (1, 2)]),
    ],
)
def test_scc_components_are_exactly_mutual_reachability(n, edges):
    components = strongly_connected_components(n, edges)
    assert sorted(v for comp in components for v in comp) == list(range(n))
    adjacency = _directed(n, edges)
    reach = [bfs_distances(adjacency, v) for v in range(n)]
    label = {v: i for i, comp in enumerate(components) for v in comp}
    for u in range(n):
        for v in range(n):
            mutual = reach[u][v] >= 0 and reach[v][u] >= 0
            assert mutual == (label[u] == label[v])


def test_scc_grouping():
    edges = [(0, 1), (1, 2), (2, 0), (2, 3), (3, 4), (4, 3), (5, 5)]
    components = strongly_connected_components(6, edges)
    assert sorted(sorted(c) for c in components) == [[0, 1, 2], [3, 4], [5]]


def test_bfs_distances_invariants():
    adjacency = [[1, 2], [0, 3], [0, 3], [1, 2, 4], [3], []]
    dist = bfs_distances(adjacency, 0)
    assert dist[0] == 0
    assert dist[5] == -1
    for u, targets in enumerate(adjacency):
        for v in targets:
            if dist[u] >= 0:
                assert 0 <= dist[v] <= dist[u] + 1


@pytest.mark.parametrize(
    "n, edges",
    [
        (1, []),
        (3, [(1, 2), (2, 3)]),
        (6, [(1, 2), (1, 3), (2, 4), (2, 5), (3, 6)]),
    ],
)
def test_count_removable_edges_is_zero_on_trees(n, edges):
    assert count_removable_edges(n, edges) == 0


def test_count_removable_edges_triangle():
    assert count_removable_edges(3, [(1, 2), (2, 3), (1, 3)]) == 3


def test_count_removable_edges_bounded_by_edge_count():
    rng = random.Random(3)
    edges = [(v, rng.randint(1, v - 1)) for v in range(2, 10)]
    edges += [(rng.randint(1, 9), rng.randint(1, 9)) for _ in range(6)]
    assert 0 <= count_removable_edges(9, edges) <= len(edges)


def test_count_removable_edges_rejects_empty_graph():
    with pytest.raises(ValueError):
        count_removable_edges(0, [])


@pytest.mark.parametrize("goal", [(0, 0), (2, 2), (0, 3), (3, 1)])
def test_open_grid_distance_is_manhattan(goal):
    grid = ["0000"] * 4
    assert shortest_grid_path(grid, (0, 0), goal) == goal[0] + goal[1]


def test_grid_detour_around_wall():
    grid = ["010", "010", "000"]
    assert shortest_grid_path(grid, (0, 0), (0, 2)) == 6


def test_grid_unreachable_goal():
    assert shortest_grid_path(["010", "010", "010"], (0, 0), (0, 2)) == -1
    assert shortest_grid_path([[0, 1], [0, 0]], (0, 0), (0, 1)) == -1


def test_grid_same_cell_and_bounds():
    assert shortest_grid_path(["0"], (0, 0), (0, 0)) == 0
    with pytest.raises(ValueError):
        shortest_grid_path(["00"], (0, 0), (1, 0))


def test_latest_split_depth_branching_path():
    edges = [(1, 2), (2, 3), (3, 4), (3, 5)]
    assert latest_split_depth(5, edges, 1, 4, 5) == 2


def test_latest_split_depth_same_target_is_its_distance():
    edges = [(1, 2), (2, 3), (3, 4), (1, 5), (5, 4)]
    adjacency = [[] for _ in range(6)]
    for u, v in edges:
        adjacency[u].append(v)
        adjacency[v].append(u)
    dist = bfs_distances(adjacency, 1)
    for target in range(1, 6):
        assert latest_split_depth(5, edges, 1, target, target) == dist[target]


def test_latest_split_depth_origin_as_target():
    assert latest_split_depth(3, [(1, 2), (2, 3)], 2, 2, 3) == 0


def test_find_sinks():
    assert find_sinks(4, [(2, 1), (3, 1), (4, 1)]) == [1]
    assert find_sinks(3, []) == []
    assert find_sinks(1, []) == [1]
    assert find_sinks(3, [(1, 2), (2, 3), (3, 1)]) == []