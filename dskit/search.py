"""Searching in sorted sequences."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


def binary_search(data: Sequence[int], x: int) -> int:
    """Return an index of ``x`` in sorted ``data``, or -1 if it is absent."""
    low, high = 0, len(data) - 1
    while low <= high:
        mid = low + (high - low) // 2
        if x == data[mid]:
            return mid
        if x < data[mid]:
            high = mid - 1
        else:
            low = mid + 1
    return -1


def interpolation_search(data: Sequence[int], x: int) -> int:
    """Return an index of ``x`` in sorted integer ``data``, or -1 if absent.

    Probes are placed by linear interpolation between the range ends.
    """
    low, high = 0, len(data) - 1
    while low <= high and data[low] <= x <= data[high]:
        if data[low] == data[high]:
            return low if x == data[low] else -1
        pos = low + (high - low) * (x - data[low]) // (data[high] - data[low])
        if x == data[pos]:
            return pos
        if x < data[pos]:
            high = pos - 1
        else:
            low = pos + 1
    return -1


def lower_bound(data: Sequence[int], x: int) -> int:
    """Return the first index whose item is not less than ``x``."""
    low, high = 0, len(data)
    while low < high:
        mid = (low + high) // 2
        if data[mid] < x:
            low = mid + 1
        else:
            high = mid
    return low


def rank_queries(values: Iterable[int], queries: Iterable[int]) -> list[int]:
    """For each query, count how many of ``values`` are strictly smaller."""
    ordered = sorted(values)
    return [lower_bound(ordered, q) for q in queries]