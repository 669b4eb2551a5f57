"""
Selection of a graph storage strategy at construction time.

Every strategy implements the same Graph contract; the choice only changes
performance and memory use, never observable behaviour.
"""

from enum import Enum
from typing import Callable, Dict, Union

from adjacency_list_graph import AdjacencyListGraph
from adjacency_matrix_graph import AdjacencyMatrixGraph
from edge_list_graph import EdgeListGraph
from graph import Graph
from hashed_adjacency_graph import HashedAdjacencyGraph


class GraphStorage(Enum):
    """
    Available storage strategies.

    EDGE_LIST: flat list of edges, O(1) insert, O(E) lookup.
    ADJACENCY_LIST: vertex -> neighbour -> weight maps, O(1) lookup.
    ADJACENCY_MATRIX: dense V x V matrix, O(1) lookup, O(V^2) space.
    HASHED_ADJACENCY: (source, destination) -> weight map with neighbour indexes.
    """

    EDGE_LIST = "edge_list"
    ADJACENCY_LIST = "adjacency_list"
    ADJACENCY_MATRIX = "adjacency_matrix"
    HASHED_ADJACENCY = "hashed_adjacency"


_FACTORIES: Dict[GraphStorage, Callable[[], Graph]] = {
    GraphStorage.EDGE_LIST: EdgeListGraph,
    GraphStorage.ADJACENCY_LIST: AdjacencyListGraph,
    GraphStorage.ADJACENCY_MATRIX: AdjacencyMatrixGraph,
    GraphStorage.HASHED_ADJACENCY: HashedAdjacencyGraph,
}


def resolve_storage(storage: Union[GraphStorage, str]) -> GraphStorage:
    if isinstance(storage, GraphStorage):
        return storage
    try:
        return GraphStorage(storage)
    except ValueError:
        known = ", ".join(s.value for s in GraphStorage)
        raise ValueError(f"Unknown graph storage '{storage}' (expected one of: {known})") from None


def create_graph(storage: Union[GraphStorage, str] = GraphStorage.ADJACENCY_LIST) -> Graph:
    """Return a new empty graph using the requested storage strategy."""
    return _FACTORIES[resolve_storage(storage)]()


def copy_graph(graph: Graph, storage: Union[GraphStorage, str]) -> Graph:
    """
    Rebuild graph in another storage strategy.

    Goes through the public mutators only, so the copy is validated exactly
    like any other construction.
    """
    copy = create_graph(storage)
    for vertex in graph.vertices():
        copy.add_vertex(vertex)
    for edge in graph.edges():
        copy.add_edge(edge.source, edge.destination, edge.weight)
    return copy
