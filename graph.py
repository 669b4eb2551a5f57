"""
Directed, weighted graph abstraction.

Vertices are plain string labels.
Edges are directed: u -> v with a non-negative integer weight, at most one
edge per ordered pair.

GraphView is the read-only capability algorithms depend on. Graph is the
mutable contract implemented by every storage strategy; argument validation
lives here so that all strategies accept and reject exactly the same calls.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional, Protocol

from errors import DuplicateEdgeError, EdgeNotFoundError, InvalidEdgeError, InvalidVertexError
from graph_text import format_graph, is_valid_label, populate_graph

# Returned wherever "no edge" or "unreachable" must be reported without raising.
NO_EDGE: int = -1

# Largest accepted edge weight; the dense matrix stores weights as int64.
MAX_WEIGHT: int = 2**63 - 1

Vertex = str


@dataclass(frozen=True)
class Edge:
    """Directed edge source -> destination."""

    source: Vertex
    destination: Vertex
    weight: int


class GraphView(Protocol):
    """Read-only queries over a directed weighted graph."""

    def vertices(self) -> List[Vertex]:
        ...

    def successors(self, vertex: Vertex) -> List[Vertex]:
        ...

    def weight(self, source: Vertex, destination: Vertex) -> int:
        ...

    def contains_vertex(self, vertex: Vertex) -> bool:
        ...

    def contains_edge(self, source: Vertex, destination: Vertex) -> bool:
        ...


class Graph(ABC):
    """Mutable directed weighted graph over string labels."""

    # --- Storage primitives ---------------------------------------------------

    @abstractmethod
    def _insert_vertex(self, vertex: Vertex) -> None:
        """Store a vertex known to be absent."""
        raise NotImplementedError

    @abstractmethod
    def _delete_vertex(self, vertex: Vertex) -> None:
        """Drop a vertex known to be present, together with its incident edges."""
        raise NotImplementedError

    @abstractmethod
    def _insert_edge(self, source: Vertex, destination: Vertex, weight: int) -> None:
        """Store an edge whose endpoints exist and which is not yet present."""
        raise NotImplementedError

    @abstractmethod
    def _delete_edge(self, source: Vertex, destination: Vertex) -> None:
        """Drop an edge known to be present."""
        raise NotImplementedError

    @abstractmethod
    def _edge_weight(self, source: Vertex, destination: Vertex) -> Optional[int]:
        """Weight of source -> destination, or None if there is no such edge."""
        raise NotImplementedError

    # --- Read queries ----------------------------------------------------------

    @abstractmethod
    def vertices(self) -> List[Vertex]:
        """Return all vertex labels."""
        raise NotImplementedError

    @abstractmethod
    def successors(self, vertex: Vertex) -> List[Vertex]:
        """
        Return every w such that vertex -> w exists.

        An absent vertex has no successors.
        """
        raise NotImplementedError

    @abstractmethod
    def contains_vertex(self, vertex: Vertex) -> bool:
        raise NotImplementedError

    def contains_edge(self, source: Vertex, destination: Vertex) -> bool:
        return self._edge_weight(source, destination) is not None

    def weight(self, source: Vertex, destination: Vertex) -> int:
        """Weight of source -> destination; raises EdgeNotFoundError if absent."""
        w = self._edge_weight(source, destination)
        if w is None:
            raise EdgeNotFoundError(f"No edge {source}-{destination}")
        return w

    def outgoing(self, vertex: Vertex) -> Dict[Vertex, int]:
        """
        Outgoing neighbours and edge weights for a given vertex.

        Returns a fresh dict; mutating it does not touch the graph.
        """
        return {dest: self.weight(vertex, dest) for dest in self.successors(vertex)}

    def edges(self) -> Iterator[Edge]:
        for source in self.vertices():
            for dest, w in self.outgoing(source).items():
                yield Edge(source, dest, w)

    def __len__(self) -> int:
        return len(self.vertices())

    def __contains__(self, vertex: object) -> bool:
        return isinstance(vertex, str) and self.contains_vertex(vertex)

    def __str__(self) -> str:
        return format_graph(self)

    # --- Mutation API ------------------------------------------------------------

    def add_vertex(self, vertex: Vertex) -> None:
        """Ensure vertex exists in the graph."""
        _check_label(vertex)
        if not self.contains_vertex(vertex):
            self._insert_vertex(vertex)

    def remove_vertex(self, vertex: Vertex) -> None:
        """Remove vertex and every edge touching it; no-op if absent."""
        if self.contains_vertex(vertex):
            self._delete_vertex(vertex)

    def add_edge(self, source: Vertex, destination: Vertex, weight: int) -> None:
        """
        Add a directed edge source -> destination.

        Missing endpoints are added first. An invalid weight or a duplicate
        edge is rejected before anything is stored.
        """
        _check_label(source)
        _check_label(destination)
        if isinstance(weight, bool) or not isinstance(weight, int):
            raise InvalidEdgeError(f"Edge {source}-{destination}: weight must be an integer, got {weight!r}")
        if weight < 0:
            raise InvalidEdgeError(f"Edge {source}-{destination}: negative weight {weight}")
        if weight > MAX_WEIGHT:
            raise InvalidEdgeError(f"Edge {source}-{destination}: weight {weight} exceeds {MAX_WEIGHT}")
        if self.contains_edge(source, destination):
            raise DuplicateEdgeError(f"Edge {source}-{destination} already exists")
        self.add_vertex(source)
        self.add_vertex(destination)
        self._insert_edge(source, destination, weight)

    def remove_edge(self, source: Vertex, destination: Vertex) -> None:
        """Remove source -> destination, keeping both vertices."""
        if not self.contains_edge(source, destination):
            raise EdgeNotFoundError(f"No edge {source}-{destination}")
        self._delete_edge(source, destination)

    def populate(self, description: str) -> None:
        """Add the vertices and edges listed in a textual graph description."""
        populate_graph(self, description)

    def clear(self) -> None:
        for vertex in self.vertices():
            self.remove_vertex(vertex)


def _check_label(vertex: object) -> None:
    if not is_valid_label(vertex):
        raise InvalidVertexError(
            f"Invalid vertex label {vertex!r}: labels are non-empty strings without whitespace or , : ( ) -"
        )
