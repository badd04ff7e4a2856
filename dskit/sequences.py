"""Operations on integer sequences: sliding windows, segments, runs."""

from __future__ import annotations

import operator
from collections import deque
from collections.abc import Callable, Iterable
from typing import Any


def _window_extremes(
    values: Iterable[Any], k: int, keeps: Callable[[Any, Any], bool]
) -> list[Any]:
    if k < 1:
        raise ValueError("window size must be at least 1")
    items = list(values)
    window: deque[int] = deque()
    result: list[Any] = []
    for i, value in enumerate(items):
        while window and not keeps(items[window[-1]], value):
            window.pop()
        while window and window[0] <= i - k:
            window.popleft()
        window.append(i)
        if i >= k - 1:
            result.append(items[window[0]])
    return result


def sliding_window_minima(values: Iterable[Any], k: int) -> list[Any]:
    """Minimum of every window of ``k`` consecutive values, left to right."""
    return _window_extremes(values, k, operator.lt)


def sliding_window_maxima(values: Iterable[Any], k: int) -> list[Any]:
    """Maximum of every window of ``k`` consecutive values, left to right."""
    return _window_extremes(values, k, operator.gt)


def reverse_segments(
    values: Iterable[Any], segments: Iterable[tuple[int, int]]
) -> list[Any]:
    """Reverse each 1-based inclusive ``(start, end)`` segment in turn.

    Returns a new list; the input is left untouched.
    """
    result = list(values)
    for start, end in segments:
        if not 1 <= start <= end <= len(result):
            raise ValueError(f"segment ({start}, {end}) is out of range")
        result[start - 1 : end] = result[start - 1 : end][::-1]
    return result


def partition_around(values: Iterable[Any], pivot: Any) -> list[Any]:
    """Values below ``pivot`` first, then the rest, each part in original order."""
    below: list[Any] = []
    rest: list[Any] = []
    for value in values:
        (below if value < pivot else rest).append(value)
    return below + rest


def merge_sorted_insert(
    sorted_values: Iterable[Any], inserts: Iterable[Any]
) -> list[Any]:
    """Insert values into a sorted list with a cursor that only moves forward.

    Each value goes before the first item not smaller than it, searching
    from just after the previously inserted value. Sorted inserts therefore
    keep the list sorted; unsorted ones are placed no earlier than the
    value inserted before them.
    """
    result = list(sorted_values)
    pos = 0
    for value in inserts:
        while pos < len(result) and result[pos] < value:
            pos += 1
        result.insert(pos, value)
        pos += 1
    return result


def longest_consecutive_run(values: Iterable[int]) -> int:
    """Length of the longest run of consecutive integers among ``values``.

    Duplicates are counted once; an empty input gives 0.
    """
    ordered = sorted(values)
    if not ordered:
        return 0
    best = 0
    streak = 1
    for previous, current in zip(ordered, ordered[1:]):
        if current == previous + 1:
            streak += 1
        elif current != previous:
            best = max(best, streak)
            streak = 1
    return max(best, streak)