"""Knuth-Morris-Pratt substring search."""

from __future__ import annotations

from typing import Any, List, Optional, Sequence


def compute_lps(pattern: Sequence[Any]) -> List[int]:
    """For each position, the length of the longest proper prefix that is also a suffix."""
    lps = [0] * len(pattern)
    length = 0
    i = 1
    while i < len(pattern):
        if pattern[i] == pattern[length]:
            length += 1
            lps[i] = length
            i += 1
        elif length:
            length = lps[length - 1]
        else:
            i += 1
    return lps


def kmp_search(text: Sequence[Any], pattern: Sequence[Any]) -> Optional[int]:
    """Return the start of the first occurrence of ``pattern`` in ``text``, or None.

    An empty pattern or an empty text gives None.
    """
    if not pattern or not text:
        return None
    lps = compute_lps(pattern)
    matched = 0
    for index, item in enumerate(text):
        while matched and item != pattern[matched]:
            matched = lps[matched - 1]
        if item == pattern[matched]:
            matched += 1
        if matched == len(pattern):
            return index - matched + 1
    return None