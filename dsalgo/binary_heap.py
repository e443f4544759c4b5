"""A binary min-heap stored in a list."""

from __future__ import annotations

from typing import Any, Iterable, List


class MinHeap:
    """Binary heap whose top is always the smallest item."""

    def __init__(self) -> None:
        self._data: List[Any] = []

    def push(self, value: Any) -> None:
        """Add ``value`` to the heap."""
        self._data.append(value)
        self._sift_up(len(self._data) - 1)

    def pop(self) -> Any:
        """Remove and return the smallest item; raise IndexError when empty."""
        if not self._data:
            raise IndexError("pop from empty heap")
        last = self._data.pop()
        if not self._data:
            return last
        result = self._data[0]
        self._data[0] = last
        self._sift_down(0)
        return result

    def peek(self) -> Any:
        """Return the smallest item; raise IndexError when empty."""
        if not self._data:
            raise IndexError("peek into empty heap")
        return self._data[0]

    def __len__(self) -> int:
        return len(self._data)

    @classmethod
    def from_iterable(cls, values: Iterable[Any]) -> "MinHeap":
        """Build a heap from ``values`` in linear time."""
        heap = cls()
        heap._data = list(values)
        for index in reversed(range(len(heap._data) // 2)):
            heap._sift_down(index)
        return heap

    def _sift_up(self, index: int) -> None:
        data = self._data
        while index > 0:
            parent = (index - 1) // 2
            if data[index] < data[parent]:
                data[index], data[parent] = data[parent], data[index]
                index = parent
            else:
                break

    def _sift_down(self, index: int) -> None:
        data = self._data
        size = len(data)
        while True:
            left = 2 * index + 1
            right = left + 1
            smallest = index
            if left < size and data[left] < data[smallest]:
                smallest = left
            if right < size and data[right] < data[smallest]:
                smallest = right
            if smallest == index:
                return
            data[index], data[smallest] = data[smallest], data[index]
            index = smallest

    def __repr__(self) -> str:
        return f"MinHeap({self._data!r})"