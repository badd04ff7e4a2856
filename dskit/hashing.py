"""Hash sets of integers: linear probing and separate chaining."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass
from enum import Enum
from typing import Optional


def _identity(x: int) -> int:
    return x


class _State(Enum):
    EMPTY = 0
    ACTIVE = 1
    DELETED = 2


@dataclass
class _Slot:
    value: Optional[int] = None
    state: _State = _State.EMPTY


class ClosedHashTable:
    """Fixed-size hash set using linear probing with tombstones."""

    def __init__(self, size: int = 101, key: Callable[[int], int] = _identity) -> None:
        if size < 1:
            raise ValueError("size must be positive")
        self._size = size
        self._key = key
        self._slots = [_Slot() for _ in range(size)]

    def _probe(self, x: int) -> Iterator[_Slot]:
        start = self._key(x) % self._size
        for offset in range(self._size):
            yield self._slots[(start + offset) % self._size]

    def insert(self, x: int) -> bool:
        """Store ``x``; return False only when no free slot is left."""
        for slot in self._probe(x):
            if slot.state is _State.ACTIVE and slot.value == x:
                return True
            if slot.state is not _State.ACTIVE:
                slot.value = x
                slot.state = _State.ACTIVE
                return True
        return False

    def remove(self, x: int) -> None:
        """Mark ``x`` as deleted if it is stored; otherwise do nothing."""
        for slot in self._probe(x):
            if slot.state is _State.EMPTY:
                return
            if slot.state is _State.ACTIVE and slot.value == x:
                slot.state = _State.DELETED
                return

    def __contains__(self, x: object) -> bool:
        if not isinstance(x, int):
            return False
        for slot in self._probe(x):
            if slot.state is _State.EMPTY:
                return False
            if slot.state is _State.ACTIVE and slot.value == x:
                return True
        return False


class ChainedHashTable:
    """Hash set with one chain per bucket; new items go to the chain front."""

    def __init__(self, size: int = 101, key: Callable[[int], int] = _identity) -> None:
        if size < 1:
            raise ValueError("size must be positive")
        self._size = size
        self._key = key
        self._buckets: list[list[int]] = [[] for _ in range(size)]

    def _bucket(self, x: int) -> list[int]:
        return self._buckets[self._key(x) % self._size]

    def insert(self, x: int) -> bool:
        """Store ``x``; chaining never runs out of room, so this is always True."""
        self._bucket(x).insert(0, x)
        return True

    def remove(self, x: int) -> None:
        """Remove the first stored copy of ``x``, if any."""
        bucket = self._bucket(x)
        if x in bucket:
            bucket.remove(x)

    def __contains__(self, x: object) -> bool:
        if not isinstance(x, int):
            return False
        return x in self._bucket(x)