"""An undirected unweighted graph stored as an adjacency matrix."""

from __future__ import annotations

from collections import deque
from typing import List


class MatrixGraph:
    """Graph over vertices 0..nodes-1 with a boolean adjacency matrix."""

    def __init__(self, nodes: int) -> None:
        if nodes < 0:
            raise ValueError("number of nodes must not be negative")
        self.nodes = nodes
        self._matrix: List[List[bool]] = [[False] * nodes for _ in range(nodes)]

    def __len__(self) -> int:
        return self.nodes

    def _check(self, a: int, b: int) -> None:
        if not (0 <= a < self.nodes and 0 <= b < self.nodes):
            raise IndexError(f"vertex index out of range: ({a}, {b})")

    def has_edge(self, a: int, b: int) -> bool:
        self._check(a, b)
        return self._matrix[a][b]

    def add_edge(self, a: int, b: int) -> None:
        """Connect ``a`` and ``b`` in both directions."""
        self._check(a, b)
        self._matrix[a][b] = self._matrix[b][a] = True

    def remove_edge(self, a: int, b: int) -> None:
        """Disconnect ``a`` and ``b`` in both directions."""
        self._check(a, b)
        self._matrix[a][b] = self._matrix[b][a] = False

    def _neighbors(self, vertex: int) -> List[int]:
        return [n for n, connected in enumerate(self._matrix[vertex]) if connected]

    def dfs(self, start: int) -> List[int]:
        """Depth-first order from ``start``, lower-numbered neighbours first."""
        if not 0 <= start < self.nodes:
            return []
        visited = {start}
        result = [start]
        stack = [iter(self._neighbors(start))]
        while stack:
            for neighbor in stack[-1]:
                if neighbor not in visited:
                    visited.add(neighbor)
                    result.append(neighbor)
                    stack.append(iter(self._neighbors(neighbor)))
                    break
            else:
                stack.pop()
        return result

    def bfs(self, start: int) -> List[int]:
        """Breadth-first order from ``start``, lower-numbered neighbours first."""
        if not 0 <= start < self.nodes:
            return []
        visited = {start}
        queue = deque([start])
        result = []
        while queue:
            vertex = queue.popleft()
            result.append(vertex)
            for neighbor in self._neighbors(vertex):
                if neighbor not in visited:
                    visited.add(neighbor)
                    queue.append(neighbor)
        return result

    def render(self) -> str:
        """Return the matrix as text, one row per vertex, 1 for an edge."""
        return "\n".join(
            f"vertex {i}: " + " ".join("1" if cell else "0" for cell in row)
            for i, row in enumerate(self._matrix)
        )

    def __repr__(self) -> str:
        return f"MatrixGraph(nodes={self.nodes})"