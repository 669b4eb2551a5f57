"""
Hashed-adjacency graph storage.

All weights live in one hash map keyed by the (source, destination) pair.
Successor and predecessor indexes make successor queries O(degree) and let
vertex removal touch only the incident edges.
"""

from typing import Dict, List, Optional, Tuple

from graph import Graph, Vertex


class HashedAdjacencyGraph(Graph):
    """Directed, weighted graph keyed by ordered vertex pairs."""

    def __init__(self) -> None:
        self._weights: Dict[Tuple[Vertex, Vertex], int] = {}
        # Insertion-ordered sets (dict keys) so iteration is reproducible.
        self._succ: Dict[Vertex, Dict[Vertex, None]] = {}
        self._pred: Dict[Vertex, Dict[Vertex, None]] = {}

    def _insert_vertex(self, vertex: Vertex) -> None:
        self._succ[vertex] = {}
        self._pred[vertex] = {}

    def _delete_vertex(self, vertex: Vertex) -> None:
        for dest in list(self._succ[vertex]):
            self._delete_edge(vertex, dest)
        for src in list(self._pred[vertex]):
            self._delete_edge(src, vertex)
        del self._succ[vertex]
        del self._pred[vertex]

    def _insert_edge(self, source: Vertex, destination: Vertex, weight: int) -> None:
        self._weights[(source, destination)] = weight
        self._succ[source][destination] = None
        self._pred[destination][source] = None

    def _delete_edge(self, source: Vertex, destination: Vertex) -> None:
        del self._weights[(source, destination)]
        del self._succ[source][destination]
        del self._pred[destination][source]

    def _edge_weight(self, source: Vertex, destination: Vertex) -> Optional[int]:
        return self._weights.get((source, destination))

    def vertices(self) -> List[Vertex]:
        return list(self._succ)

    def successors(self, vertex: Vertex) -> List[Vertex]:
        return list(self._succ.get(vertex, {}))

    def predecessors(self, vertex: Vertex) -> List[Vertex]:
        """Return every u such that u -> vertex exists."""
        return list(self._pred.get(vertex, {}))

    def contains_vertex(self, vertex: Vertex) -> bool:
        return vertex in self._succ
