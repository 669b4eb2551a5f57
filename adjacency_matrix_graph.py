"""
Dense adjacency-matrix graph storage.

Weights live in a square numpy matrix indexed by vertex position; absent
edges hold NO_EDGE. Lookup is O(1) at O(V^2) space. The matrix grows by
doubling its capacity, and removing a vertex deletes its row and column.
"""

from typing import Dict, List, Optional

import numpy as np

from graph import NO_EDGE, Graph, Vertex


class AdjacencyMatrixGraph(Graph):
    """Directed, weighted graph backed by a dense int64 matrix."""

    def __init__(self, capacity: int = 8) -> None:
        self._labels: List[Vertex] = []
        self._index: Dict[Vertex, int] = {}
        self._matrix = np.full((capacity, capacity), NO_EDGE, dtype=np.int64)

    @property
    def capacity(self) -> int:
        return self._matrix.shape[0]

    def _grow(self) -> None:
        size = max(1, 2 * self.capacity)
        grown = np.full((size, size), NO_EDGE, dtype=np.int64)
        n = len(self._labels)
        grown[:n, :n] = self._matrix[:n, :n]
        self._matrix = grown

    def _insert_vertex(self, vertex: Vertex) -> None:
        if len(self._labels) == self.capacity:
            self._grow()
        self._index[vertex] = len(self._labels)
        self._labels.append(vertex)

    def _delete_vertex(self, vertex: Vertex) -> None:
        i = self._index.pop(vertex)
        self._matrix = np.delete(np.delete(self._matrix, i, axis=0), i, axis=1)
        # keep the matrix square at its old capacity
        self._matrix = np.pad(self._matrix, ((0, 1), (0, 1)), constant_values=NO_EDGE)
        del self._labels[i]
        for j, label in enumerate(self._labels[i:], start=i):
            self._index[label] = j

    def _insert_edge(self, source: Vertex, destination: Vertex, weight: int) -> None:
        self._matrix[self._index[source], self._index[destination]] = weight

    def _delete_edge(self, source: Vertex, destination: Vertex) -> None:
        self._matrix[self._index[source], self._index[destination]] = NO_EDGE

    def _edge_weight(self, source: Vertex, destination: Vertex) -> Optional[int]:
        i = self._index.get(source)
        j = self._index.get(destination)
        if i is None or j is None:
            return None
        w = int(self._matrix[i, j])
        return None if w == NO_EDGE else w

    def vertices(self) -> List[Vertex]:
        return list(self._labels)

    def successors(self, vertex: Vertex) -> List[Vertex]:
        i = self._index.get(vertex)
        if i is None:
            return []
        row = self._matrix[i, : len(self._labels)]
        return [self._labels[j] for j in np.flatnonzero(row != NO_EDGE)]

    def contains_vertex(self, vertex: Vertex) -> bool:
        return vertex in self._index
