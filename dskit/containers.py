"""A growable ring-buffer queue and a linked-list stack."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


class ArrayQueue:
    """FIFO queue over a circular buffer that doubles when full."""

    def __init__(self, capacity: int = 99) -> None:
        if capacity < 1:
            raise ValueError("capacity must be positive")
        self._buffer: list[Any] = [None] * capacity
        self._head = 0
        self._count = 0

    def _grow(self) -> None:
        size = len(self._buffer)
        items = [self._buffer[(self._head + i) % size] for i in range(self._count)]
        self._buffer = items + [None] * (2 * size - self._count)
        self._head = 0

    def enqueue(self, item: Any) -> None:
        """Append ``item`` at the back of the queue."""
        if self._count == len(self._buffer):
            self._grow()
        self._buffer[(self._head + self._count) % len(self._buffer)] = item
        self._count += 1

    def dequeue(self) -> Any:
        """Remove and return the item at the front."""
        if not self._count:
            raise IndexError("dequeue from an empty queue")
        item = self._buffer[self._head]
        self._buffer[self._head] = None
        self._head = (self._head + 1) % len(self._buffer)
        self._count -= 1
        return item

    def peek(self) -> Any:
        """Return the item at the front without removing it."""
        if not self._count:
            raise IndexError("peek at an empty queue")
        return self._buffer[self._head]

    def __len__(self) -> int:
        return self._count


@dataclass
class _Node:
    data: Any
    next: Optional["_Node"] = None


class LinkedStack:
    """LIFO stack kept as a singly linked list."""

    def __init__(self) -> None:
        self._top: Optional[_Node] = None
        self._size = 0

    def push(self, item: Any) -> None:
        """Put ``item`` on top of the stack."""
        self._top = _Node(item, self._top)
        self._size += 1

    def pop(self) -> Any:
        """Remove and return the top item."""
        if self._top is None:
            raise IndexError("pop from an empty stack")
        node = self._top
        self._top = node.next
        self._size -= 1
        return node.data

    def peek(self) -> Any:
        """Return the top item without removing it."""
        if self._top is None:
            raise IndexError("peek at an empty stack")
        return self._top.data

    def __len__(self) -> int:
        return self._size