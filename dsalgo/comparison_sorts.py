"""Comparison-based sorting algorithms; each returns a new sorted list."""

from __future__ import annotations

from typing import Any, Iterable, List


def bubble_sort(items: Iterable[Any]) -> List[Any]:
    """Return the items sorted by repeatedly swapping adjacent pairs (stable)."""
    data = list(items)
    n = len(data)
    for i in range(n):
        for j in range(n - i - 1):
            if data[j] > data[j + 1]:
                data[j], data[j + 1] = data[j + 1], data[j]
    return data


def selection_sort(items: Iterable[Any]) -> List[Any]:
    """Return the items sorted by selecting the minimum of the unsorted rest."""
    data = list(items)
    n = len(data)
    for i in range(n):
        smallest = i
        for j in range(i + 1, n):
            if data[j] < data[smallest]:
                smallest = j
        if smallest != i:
            data[i], data[smallest] = data[smallest], data[i]
    return data


def insertion_sort(items: Iterable[Any]) -> List[Any]:
    """Return the items sorted by inserting each into the sorted prefix (stable)."""
    data = list(items)
    for i in range(1, len(data)):
        key = data[i]
        j = i - 1
        while j >= 0 and data[j] > key:
            data[j + 1] = data[j]
            j -= 1
        data[j + 1] = key
    return data


def _merge(left: List[Any], right: List[Any]) -> List[Any]:
    merged = []
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


def _merge_sorted(data: List[Any]) -> List[Any]:
    if len(data) <= 1:
        return data
    mid = (len(data) - 1) // 2 + 1
    return _merge(_merge_sorted(data[:mid]), _merge_sorted(data[mid:]))


def merge_sort(items: Iterable[Any]) -> List[Any]:
    """Return the items sorted by top-down merging (stable)."""
    return _merge_sorted(list(items))


def _partition(data: List[Any], low: int, high: int) -> int:
    pivot = data[high]
    boundary = low
    for j in range(low, high):
        if data[j] <= pivot:
            data[boundary], data[j] = data[j], data[boundary]
            boundary += 1
    data[boundary], data[high] = data[high], data[boundary]
    return boundary


def quick_sort(items: Iterable[Any]) -> List[Any]:
    """Return the items sorted by quicksort with the last element as pivot."""
    data = list(items)
    ranges = [(0, len(data) - 1)]
    while ranges:
        low, high = ranges.pop()
        if low < high:
            pivot = _partition(data, low, high)
            ranges.append((low, pivot - 1))
            ranges.append((pivot + 1, high))
    return data


def _sift_down(data: List[Any], size: int, index: int) -> None:
    while True:
        largest = index
        left = 2 * index + 1
        right = left + 1
        if left < size and data[left] > data[largest]:
            largest = left
        if right < size and data[right] > data[largest]:
            largest = right
        if largest == index:
            return
        data[index], data[largest] = data[largest], data[index]
        index = largest


def heap_sort(items: Iterable[Any]) -> List[Any]:
    """Return the items sorted with an in-place max-heap."""
    data = list(items)
    n = len(data)
    for index in reversed(range(n // 2)):
        _sift_down(data, n, index)
    for end in reversed(range(1, n)):
        data[0], data[end] = data[end], data[0]
        _sift_down(data, end, 0)
    return data


def shell_sort(items: Iterable[Any]) -> List[Any]:
    """Return the items sorted by gapped insertion, halving the gap each pass."""
    data = list(items)
    n = len(data)
    gap = n // 2
    while gap > 0:
        for i in range(gap, n):
            current = data[i]
            j = i
            while j >= gap and data[j - gap] > current:
                data[j] = data[j - gap]
                j -= gap
            data[j] = current
        gap //= 2
    return data