"""Hash tables for integer keys: separate chaining and linear probing."""

from __future__ import annotations

from typing import Any, List, Optional, Tuple


def _check_size(size: int) -> None:
    if size <= 0:
        raise ValueError("table size must be positive")


class ChainingHashMap:
    """Fixed number of buckets; colliding keys share a bucket's list."""

    def __init__(self, size: int) -> None:
        _check_size(size)
        self.size = size
        self._buckets: List[List[Tuple[int, Any]]] = [[] for _ in range(size)]

    def _bucket(self, key: int) -> List[Tuple[int, Any]]:
        return self._buckets[abs(key) % self.size]

    def insert(self, key: int, value: Any) -> None:
        """Store ``value`` under ``key``, replacing any value already there."""
        bucket = self._bucket(key)
        for position, (existing, _) in enumerate(bucket):
            if existing == key:
                bucket[position] = (key, value)
                return
        bucket.append((key, value))

    def get(self, key: int) -> Optional[Any]:
        """Return the value stored under ``key``, or None if there is none."""
        return next((value for existing, value in self._bucket(key) if existing == key), None)

    def __repr__(self) -> str:
        return f"ChainingHashMap(size={self.size})"


class LinearProbingHashMap:
    """Open addressing: a colliding key goes to the next free slot."""

    def __init__(self, size: int) -> None:
        _check_size(size)
        self.size = size
        self._slots: List[Optional[Tuple[int, Any]]] = [None] * size

    def _probe(self, key: int):
        start = abs(key) % self.size
        return ((start + step) % self.size for step in range(self.size))

    def insert(self, key: int, value: Any) -> None:
        """Store ``value`` under ``key``; raise OverflowError when no slot is free."""
        for index in self._probe(key):
            slot = self._slots[index]
            if slot is None or slot[0] == key:
                self._slots[index] = (key, value)
                return
        raise OverflowError("hash table is full")

    def get(self, key: int) -> Optional[Any]:
        """Return the value stored under ``key``, or None if there is none."""
        for index in self._probe(key):
            slot = self._slots[index]
            if slot is None:
                return None
            if slot[0] == key:
                return slot[1]
        return None

    def __repr__(self) -> str:
        return f"LinearProbingHashMap(size={self.size})"