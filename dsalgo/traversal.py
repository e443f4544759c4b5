"""Breadth- and depth-first traversal of graphs given as adjacency lists."""

from __future__ import annotations

from collections import deque
from typing import Iterable, List, Sequence, Tuple

Adjacency = Sequence[Sequence[int]]


def build_adjacency(pairs: Iterable[Tuple[int, int]], vertex_count: int) -> List[List[int]]:
    """Build adjacency lists for vertices 0..vertex_count-1 from directed pairs.

    Neighbours keep the order of their first appearance; repeated pairs are
    stored once.  A pair naming a vertex outside the range raises ValueError.
    """
    if vertex_count < 0:
        raise ValueError("vertex count must not be negative")
    adjacency: List[List[int]] = [[] for _ in range(vertex_count)]
    for source, target in pairs:
        for vertex in (source, target):
            if not 0 <= vertex < vertex_count:
                raise ValueError(f"vertex {vertex} out of range 0..{vertex_count - 1}")
        if target not in adjacency[source]:
            adjacency[source].append(target)
    return adjacency


def _check_start(adjacency: Adjacency, start: int) -> None:
    if not 0 <= start < len(adjacency):
        raise IndexError(f"start vertex {start} out of range")


def bfs(adjacency: Adjacency, start: int) -> List[int]:
    """Return the vertices reachable from ``start`` in breadth-first order."""
    _check_start(adjacency, start)
    visited = {start}
    order = [start]
    pending = deque(adjacency[start])
    while pending:
        vertex = pending.popleft()
        if vertex in visited:
            continue
        visited.add(vertex)
        order.append(vertex)
        pending.extend(n for n in adjacency[vertex] if n not in visited)
    return order


def dfs_iterative(adjacency: Adjacency, start: int) -> List[int]:
    """Return the depth-first order from ``start`` using an explicit stack."""
    _check_start(adjacency, start)
    visited = {start}
    order = [start]
    stack = list(reversed(adjacency[start]))
    while stack:
        vertex = stack.pop()
        if vertex in visited:
            continue
        visited.add(vertex)
        order.append(vertex)
        stack.extend(reversed(adjacency[vertex]))
    return order


def dfs_recursive(adjacency: Adjacency, start: int) -> List[int]:
    """Return the depth-first order of a recursive descent from ``start``.

    A start vertex outside the graph yields an empty order.  The descent is
    driven by a stack of neighbour iterators, so deep graphs do not hit the
    interpreter's recursion limit.
    """
    size = len(adjacency)
    if not 0 <= start < size:
        return []
    visited = {start}
    order = [start]
    stack = [iter(adjacency[start])]
    while stack:
        for neighbor in stack[-1]:
            if 0 <= neighbor < size and neighbor not in visited:
                visited.add(neighbor)
                order.append(neighbor)
                stack.append(iter(adjacency[neighbor]))
                break
        else:
            stack.pop()
    return order