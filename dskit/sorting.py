"""Classic comparison sorts.

Every function takes any iterable of comparable items and returns a new
sorted list, leaving its input untouched.
"""

from __future__ import annotations

import heapq
from collections.abc import Iterable
from typing import Any, TypeVar

T = TypeVar("T", bound=Any)


def bubble_sort(items: Iterable[T]) -> list[T]:
    """Bubble sort that stops early once a pass makes no swap."""
    result = list(items)
    n = len(result)
    for pass_no in range(1, n):
        swapped = False
        for j in range(n - pass_no):
            if result[j] > result[j + 1]:
                result[j], result[j + 1] = result[j + 1], result[j]
                swapped = True
        if not swapped:
            break
    return result


def insertion_sort(items: Iterable[T]) -> list[T]:
    """Straight insertion sort."""
    result = list(items)
    for i in range(1, len(result)):
        value = result[i]
        j = i
        while j > 0 and result[j - 1] > value:
            result[j] = result[j - 1]
            j -= 1
        result[j] = value
    return result


def selection_sort(items: Iterable[T]) -> list[T]:
    """Selection sort: repeatedly move the smallest remaining item forward."""
    result = list(items)
    n = len(result)
    for i in range(n):
        min_idx = min(range(i, n), key=result.__getitem__)
        result[i], result[min_idx] = result[min_idx], result[i]
    return result


def shell_sort(items: Iterable[T]) -> list[T]:
    """Shell sort using Knuth's 3h+1 gap sequence."""
    result = list(items)
    n = len(result)
    gap = 1
    while gap < n // 3:
        gap = 3 * gap + 1
    while gap > 0:
        for i in range(gap, n):
            value = result[i]
            j = i
            while j >= gap and result[j - gap] > value:
                result[j] = result[j - gap]
                j -= gap
            result[j] = value
        gap //= 3
    return result


def _merge(left: list[T], right: list[T]) -> list[T]:
    merged: list[T] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(items: Iterable[T]) -> list[T]:
    """Stable top-down merge sort."""
    result = list(items)
    if len(result) <= 1:
        return result
    mid = (len(result) - 1) // 2 + 1
    return _merge(merge_sort(result[:mid]), merge_sort(result[mid:]))


def _partition(data: list[T], low: int, high: int) -> int:
    pivot = data[high]
    pos = low
    for i in range(low, high):
        if data[i] < pivot:
            data[i], data[pos] = data[pos], data[i]
            pos += 1
    data[pos], data[high] = data[high], data[pos]
    return pos


def quick_sort(items: Iterable[T]) -> list[T]:
    """Quicksort with the last element of each range as pivot."""
    result = list(items)
    pending = [(0, len(result) - 1)]
    while pending:
        low, high = pending.pop()
        if low >= high:
            continue
        pivot = _partition(result, low, high)
        pending.append((low, pivot - 1))
        pending.append((pivot + 1, high))
    return result


def heap_sort(items: Iterable[T]) -> list[T]:
    """Sort by draining a binary min-heap."""
    heap = list(items)
    heapq.heapify(heap)
    return [heapq.heappop(heap) for _ in range(len(heap))]