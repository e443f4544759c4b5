"""Single-source shortest paths with Dijkstra's algorithm."""

from __future__ import annotations

import heapq
import itertools
from typing import Dict, Hashable, Iterable, Mapping, Tuple

AdjacencyMap = Mapping[Hashable, Iterable[Tuple[Hashable, int]]]


def dijkstra(start: Hashable, adjacency: AdjacencyMap) -> Dict[Hashable, int]:
    """Return the shortest distance from ``start`` to every reachable vertex.

    ``adjacency`` maps each vertex to its (neighbour, cost) pairs.  Vertices
    that cannot be reached are absent from the result.  A negative cost
    raises ValueError.
    """
    distances: Dict[Hashable, int] = {start: 0}
    visited = set()
    order = itertools.count(1)
    heap = [(0, 0, start)]
    while heap:
        distance, _, vertex = heapq.heappop(heap)
        if vertex in visited:
            continue
        visited.add(vertex)
        for neighbor, cost in adjacency.get(vertex, ()):
            if cost < 0:
                raise ValueError(f"negative edge cost {cost} from {vertex!r} to {neighbor!r}")
            new_distance = distance + cost
            current = distances.get(neighbor)
            if current is None or new_distance < current:
                distances[neighbor] = new_distance
                heapq.heappush(heap, (new_distance, next(order), neighbor))
    return distances


def format_graph(adjacency: AdjacencyMap) -> str:
    """Return the adjacency map as text, one ``v -> (n, cost) ...`` line per vertex."""
    lines = []
    for vertex, neighbors in adjacency.items():
        edges = " ".join(f"({neighbor}, {cost})" for neighbor, cost in neighbors)
        lines.append(f"{vertex} -> {edges}".rstrip())
    return "\n".join(lines)