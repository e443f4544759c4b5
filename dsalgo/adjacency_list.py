"""An undirected weighted graph stored as adjacency lists."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Hashable, List, Optional, Tuple


@dataclass
class Vertex:
    """A vertex and the (neighbour key, weight) pairs of its edges."""

    key: Hashable
    connections: List[Tuple[Hashable, int]] = field(default_factory=list)

    def is_adjacent(self, key: Hashable) -> bool:
        """Return whether there is an edge to ``key``."""
        return any(nbr == key for nbr, _ in self.connections)

    def add_neighbor(self, key: Hashable, weight: int) -> None:
        """Add an edge to ``key`` with ``weight``."""
        self.connections.append((key, weight))

    def neighbors(self) -> List[Hashable]:
        """Return the keys of all neighbours in the order they were added."""
        return [nbr for nbr, _ in self.connections]

    def weight_to(self, key: Hashable) -> int:
        """Return the weight of the edge to ``key``, or 0 if there is none."""
        return next((wt for nbr, wt in self.connections if nbr == key), 0)

    def remove_neighbor(self, key: Hashable) -> None:
        """Remove every edge to ``key``."""
        self.connections = [(nbr, wt) for nbr, wt in self.connections if nbr != key]


class Graph:
    """Undirected graph; each edge is stored once in each direction."""

    def __init__(self) -> None:
        self._vertices: Dict[Hashable, Vertex] = {}
        self._edges = 0

    def __len__(self) -> int:
        return len(self._vertices)

    def __contains__(self, key: Any) -> bool:
        return key in self._vertices

    def vertex_count(self) -> int:
        return len(self._vertices)

    def edge_count(self) -> int:
        """Return the number of directed edge entries (a self-loop counts once)."""
        return self._edges

    def add_vertex(self, key: Hashable) -> bool:
        """Add a vertex; return False if it already existed."""
        if key in self._vertices:
            return False
        self._vertices[key] = Vertex(key)
        return True

    def get_vertex(self, key: Hashable) -> Optional[Vertex]:
        """Return the vertex for ``key``, or None if there is none."""
        return self._vertices.get(key)

    def vertex_keys(self) -> List[Hashable]:
        return list(self._vertices)

    def remove_vertex(self, key: Hashable) -> Vertex:
        """Remove a vertex with all its edges and return it; KeyError if absent."""
        old = self._vertices.pop(key)
        self._edges -= len(old.connections)
        for vertex in self._vertices.values():
            if vertex.is_adjacent(key):
                vertex.remove_neighbor(key)
                self._edges -= 1
        return old

    def add_edge(self, source: Hashable, target: Hashable, weight: int) -> None:
        """Connect two vertices, creating them when needed."""
        self.add_vertex(source)
        self.add_vertex(target)
        if not self.is_adjacent(source, target):
            self._vertices[source].add_neighbor(target, weight)
            self._edges += 1
        if not self.is_adjacent(target, source):
            self._vertices[target].add_neighbor(source, weight)
            self._edges += 1

    def remove_edge(self, source: Hashable, target: Hashable) -> None:
        """Disconnect two vertices; does nothing if either is missing."""
        if source not in self._vertices or target not in self._vertices:
            return
        if self.is_adjacent(source, target):
            self._vertices[source].remove_neighbor(target)
            self._edges -= 1
        if self.is_adjacent(target, source):
            self._vertices[target].remove_neighbor(source)
            self._edges -= 1

    def is_adjacent(self, source: Hashable, target: Hashable) -> bool:
        vertex = self._vertices.get(source)
        return vertex is not None and vertex.is_adjacent(target)

    def __repr__(self) -> str:
        return f"Graph(vertices={len(self._vertices)}, edges={self._edges})"