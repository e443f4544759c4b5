"""Sequential, binary, interpolation and parallel search over sequences."""

from __future__ import annotations

import bisect
import os
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Iterable, Optional, Sequence


def sequential_search(items: Iterable[Any], target: Any) -> Optional[int]:
    """Return the index of the first item equal to ``target``, or None."""
    return next((index for index, item in enumerate(items) if item == target), None)


def binary_search(items: Sequence[Any], target: Any) -> Optional[int]:
    """Return an index of ``target`` in the ascending ``items``, or None."""
    index = bisect.bisect_left(items, target)
    if index < len(items) and items[index] == target:
        return index
    return None


def interpolation_search(items: Sequence[int], target: int) -> Optional[int]:
    """Find ``target`` in ascending integers by estimating its position."""
    if not items:
        return None
    left, right = 0, len(items) - 1
    while left <= right and items[left] <= target <= items[right]:
        if items[left] == items[right]:
            return left if items[left] == target else None
        pos = left + (target - items[left]) * (right - left) // (items[right] - items[left])
        if items[pos] == target:
            return pos
        if items[pos] < target:
            left = pos + 1
        else:
            right = pos - 1
    return None


def parallel_search(items: Sequence[Any], target: Any) -> Optional[int]:
    """Scan chunks of ``items`` in parallel; return an index of ``target`` or None."""
    size = len(items)
    if size == 0:
        return None
    workers = min(os.cpu_count() or 1, size)
    chunk = -(-size // workers)

    def scan(start: int) -> Optional[int]:
        found = sequential_search(items[start:start + chunk], target)
        return None if found is None else start + found

    with ThreadPoolExecutor(max_workers=workers) as pool:
        for found in pool.map(scan, range(0, size, chunk)):
            if found is not None:
                return found
    return None