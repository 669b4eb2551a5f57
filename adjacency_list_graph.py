"""
Adjacency-list graph storage.

Implements the Graph contract with a vertex -> (neighbour -> weight) mapping.
"""

from typing import Dict, List, Optional

from graph import Graph, Vertex


class AdjacencyListGraph(Graph):
    """
    Directed, weighted graph backed by a vertex -> (neighbour -> weight) mapping.

    Edge lookup is O(1) on average and successor iteration O(degree).
    Removing a vertex scans every adjacency map, O(V).
    """

    def __init__(self) -> None:
        self._adj: Dict[Vertex, Dict[Vertex, int]] = {}

    # --- Storage primitives ---------------------------------------------------

    def _insert_vertex(self, vertex: Vertex) -> None:
        self._adj[vertex] = {}

    def _delete_vertex(self, vertex: Vertex) -> None:
        del self._adj[vertex]
        for neighbours in self._adj.values():
            neighbours.pop(vertex, None)

    def _insert_edge(self, source: Vertex, destination: Vertex, weight: int) -> None:
        self._adj[source][destination] = weight

    def _delete_edge(self, source: Vertex, destination: Vertex) -> None:
        del self._adj[source][destination]

    def _edge_weight(self, source: Vertex, destination: Vertex) -> Optional[int]:
        return self._adj.get(source, {}).get(destination)

    # --- Graph interface -----------------------------------------------------

    def vertices(self) -> List[Vertex]:
        return list(self._adj)

    def successors(self, vertex: Vertex) -> List[Vertex]:
        return list(self._adj.get(vertex, {}))

    def contains_vertex(self, vertex: Vertex) -> bool:
        return vertex in self._adj

    def outgoing(self, vertex: Vertex) -> Dict[Vertex, int]:
        return dict(self._adj.get(vertex, {}))  # defensive copy
