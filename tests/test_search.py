import random

import pytest

from dskit.search import binary_search, interpolation_search, lower_bound, rank_queries

DATA = [10, 20, 30, 40, 50, 60, 70, 80, 90, 100]


@pytest.mark.parametrize("search", [binary_search, interpolation_search])
@pytest.mark.parametrize(
    "target, expected",
    [(70, 6), (10, 0), (100, 9), (55, -1), (110, -1)],
)
def test_source_cases(search, target, expected):
    assert search(DATA, target) == expected


@pytest.mark.parametrize("search", [binary_search, interpolation_search])
def test_empty_sequence(search):
    assert search([], 10) == -1


@pytest.mark.parametrize("search", [binary_search, interpolation_search])
def test_every_element_is_found(search):
    data = [-7, -3, 0, 2, 9, 15, 40, 41, 1000]
    for index, value in enumerate(data):
        assert search(data, value) == index


@pytest.mark.parametrize("search", [binary_search, interpolation_search])
def test_below_range(search):
    assert search(DATA, 5) == -1


def test_interpolation_search_on_constant_data():
    data = [4, 4, 4]
    assert data[interpolation_search(data, 4)] == 4
    assert interpolation_search(data, 5) == -1


def test_lower_bound_invariant():
    rng = random.Random(7)
    data = sorted(rng.randint(-50, 50) for _ in range(200))
    for x in range(-60, 61):
        i = lower_bound(data, x)
        assert 0 <= i <= len(data)
        assert all(v < x for v in data[:i])
        assert all(v >= x for v in data[i:])


def test_lower_bound_on_empty():
    assert lower_bound([], 3) == 0


def test_rank_queries_small_example():
    assert rank_queries([3, 1, 2], [2]) == [1]


def test_rank_queries_counts_smaller_values():
    rng = random.Random(99)
    values = [rng.randint(0, 100) for _ in range(300)]
    queries = [rng.randint(-10, 110) for _ in range(50)]
    result = rank_queries(values, queries)
    assert len(result) == len(queries)
    for q, rank in zip(queries, result):
        assert rank == sum(1 for v in values if v < q)


def test_rank_queries_extremes():
    values = [5, 9, 1, 7]
    assert rank_queries(values, [0, 100]) == [0, len(values)]