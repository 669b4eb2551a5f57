"""
Edge-list graph storage.

Keeps the vertex labels plus one flat list of edges. Appending an edge is
O(1); every lookup, removal or successor query walks the whole list, O(E).
"""

from typing import Dict, List, Optional

from graph import Edge, Graph, Vertex


class EdgeListGraph(Graph):
    """Directed, weighted graph stored as a list of Edge records."""

    def __init__(self) -> None:
        # dict used as an insertion-ordered set
        self._vertices: Dict[Vertex, None] = {}
        self._edges: List[Edge] = []

    def _insert_vertex(self, vertex: Vertex) -> None:
        self._vertices[vertex] = None

    def _delete_vertex(self, vertex: Vertex) -> None:
        del self._vertices[vertex]
        self._edges = [
            e for e in self._edges if e.source != vertex and e.destination != vertex
        ]

    def _insert_edge(self, source: Vertex, destination: Vertex, weight: int) -> None:
        self._edges.append(Edge(source, destination, weight))

    def _delete_edge(self, source: Vertex, destination: Vertex) -> None:
        for i, e in enumerate(self._edges):
            if e.source == source and e.destination == destination:
                del self._edges[i]
                return

    def _edge_weight(self, source: Vertex, destination: Vertex) -> Optional[int]:
        for e in self._edges:
            if e.source == source and e.destination == destination:
                return e.weight
        return None

    def vertices(self) -> List[Vertex]:
        return list(self._vertices)

    def successors(self, vertex: Vertex) -> List[Vertex]:
        return [e.destination for e in self._edges if e.source == vertex]

    def contains_vertex(self, vertex: Vertex) -> bool:
        return vertex in self._vertices

    def outgoing(self, vertex: Vertex) -> Dict[Vertex, int]:
        return {e.destination: e.weight for e in self._edges if e.source == vertex}
