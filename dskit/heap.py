"""Binary min-heap."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any


class MinHeap:
    """A binary min-heap built bottom-up from an initial collection."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._data = list(items)
        for idx in reversed(range(len(self._data) // 2)):
            self._sift_down(idx)

    def _sift_up(self, idx: int) -> None:
        data = self._data
        while idx > 0:
            parent = (idx - 1) // 2
            if data[idx] >= data[parent]:
                return
            data[idx], data[parent] = data[parent], data[idx]
            idx = parent

    def _sift_down(self, idx: int) -> None:
        data = self._data
        size = len(data)
        while 2 * idx + 1 < size:
            child = 2 * idx + 1
            if child + 1 < size and data[child] > data[child + 1]:
                child += 1
            if data[idx] <= data[child]:
                return
            data[idx], data[child] = data[child], data[idx]
            idx = child

    def push(self, value: Any) -> None:
        """Add ``value`` to the heap."""
        self._data.append(value)
        self._sift_up(len(self._data) - 1)

    def pop(self) -> Any:
        """Remove and return the smallest item."""
        if not self._data:
            raise IndexError("pop from an empty heap")
        last = self._data.pop()
        if not self._data:
            return last
        smallest = self._data[0]
        self._data[0] = last
        self._sift_down(0)
        return smallest

    def peek(self) -> Any:
        """Return the smallest item without removing it."""
        if not self._data:
            raise IndexError("peek at an empty heap")
        return self._data[0]

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"MinHeap({self._data!r})"