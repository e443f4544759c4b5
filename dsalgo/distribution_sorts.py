"""Sorting by distribution: bucket, counting and radix sort; each returns a new list."""

from __future__ import annotations

import math
from typing import Iterable, List


def bucket_sort(values: Iterable[float]) -> List[float]:
    """Return the floats sorted by spreading them over one bucket per item.

    The buckets are sized for values in [0, 1).  Smaller values land in the
    first bucket and larger ones in the last, so the result is still sorted.
    Each bucket is sorted stably before the buckets are joined.
    """
    data = list(values)
    n = len(data)
    if n <= 1:
        return data
    buckets: List[List[float]] = [[] for _ in range(n)]
    for value in data:
        scaled = value * n
        if math.isnan(scaled) or scaled < 0:
            index = 0
        elif math.isinf(scaled):
            index = n - 1
        else:
            index = min(int(math.floor(scaled)), n - 1)
        buckets[index].append(value)
    return [value for bucket in buckets for value in sorted(bucket)]


def _check_non_negative(data: List[int], name: str) -> None:
    for value in data:
        if value < 0:
            raise ValueError(f"{name} needs non-negative integers, got {value}")


def counting_sort(values: Iterable[int]) -> List[int]:
    """Return the non-negative integers sorted by counting occurrences (stable).

    A negative value raises ValueError.
    """
    data = list(values)
    if len(data) <= 1:
        return data
    _check_non_negative(data, "counting sort")
    counts = [0] * (max(data) + 1)
    for value in data:
        counts[value] += 1
    total = 0
    for index, count in enumerate(counts):
        total += count
        counts[index] = total
    output = [0] * len(data)
    for value in reversed(data):
        counts[value] -= 1
        output[counts[value]] = value
    return output


def radix_sort(values: Iterable[int]) -> List[int]:
    """Return the non-negative integers sorted digit by digit, least significant first.

    A negative value raises ValueError.
    """
    data = list(values)
    if len(data) <= 1:
        return data
    _check_non_negative(data, "radix sort")
    largest = max(data)
    place = 1
    while place <= largest:
        buckets: List[List[int]] = [[] for _ in range(10)]
        for value in data:
            buckets[(value // place) % 10].append(value)
        data = [value for bucket in buckets for value in bucket]
        place *= 10
    return data