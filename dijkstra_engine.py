"""
Dijkstra shortest-path engine.

Computes single-source shortest paths over any GraphView. Every vertex moves
NOT_VISITED -> VISITED (queued) -> VISITED_AND_PROCESSED (final); a queued
vertex whose tentative distance drops is re-sequenced in the queue.
"""

from enum import Enum, auto
from typing import Dict, List, Mapping, MutableMapping, Optional, Sequence
import math

from algorithms import ShortestPathEngine
from errors import VertexNotFoundError
from graph import NO_EDGE, GraphView, Vertex
from priority_queue import VertexQueue


class VertexState(Enum):
    NOT_VISITED = auto()
    # reached and queued, distance still tentative
    VISITED = auto()
    # distance final
    VISITED_AND_PROCESSED = auto()


class DijkstraEngine(ShortestPathEngine):
    """
    Single-source Dijkstra with decrease-key by remove and re-insert.

    Complexity:
        O((V + E) log V) queue operations. Weights must be non-negative,
        which the Graph contract guarantees.

    All working state is local to one call, so one engine may serve several
    computations on the same unchanging graph, including concurrently.
    """

    def shortest_path_costs(self, graph: GraphView, source: Vertex) -> Dict[Vertex, Optional[int]]:
        dist, _ = self.shortest_paths(graph, source)
        return dist

    def shortest_paths(
        self, graph: GraphView, source: Vertex
    ) -> tuple[Dict[Vertex, Optional[int]], Dict[Vertex, Optional[Vertex]]]:
        vertices = graph.vertices()
        if not vertices:
            return {}, {}
        if not graph.contains_vertex(source):
            raise VertexNotFoundError(f"Source vertex '{source}' is not in the graph")

        dist: Dict[Vertex, float] = {v: math.inf for v in vertices}
        prev: Dict[Vertex, Optional[Vertex]] = {v: None for v in vertices}
        state: Dict[Vertex, VertexState] = {v: VertexState.NOT_VISITED for v in vertices}
        queue = VertexQueue()

        dist[source] = 0
        state[source] = VertexState.VISITED
        queue.push(source, 0)

        while queue:
            u, d_u = queue.pop()
            for v in graph.successors(u):
                alt = d_u + graph.weight(u, v)
                if alt >= dist[v]:
                    continue
                dist[v] = alt
                prev[v] = u
                if state[v] is VertexState.NOT_VISITED:
                    state[v] = VertexState.VISITED
                    queue.push(v, alt)
                elif state[v] is VertexState.VISITED:
                    queue.requeue(v, alt)
                # a processed vertex can never improve with non-negative weights
            state[u] = VertexState.VISITED_AND_PROCESSED

        costs: Dict[Vertex, Optional[int]] = {
            v: None if d == math.inf else int(d) for v, d in dist.items()
        }
        return costs, prev


def dijkstra(
    graph: GraphView,
    source: Vertex,
    dist: MutableMapping[Vertex, int],
    pred: MutableMapping[Vertex, Optional[Vertex]],
) -> None:
    """
    Fill dist and pred for every vertex of graph.

    dist[v] is the shortest distance from source, or NO_EDGE when v is
    unreachable. pred[v] is the vertex before v on that path, None for the
    source and unreachable vertices.
    """
    costs, prev = DijkstraEngine().shortest_paths(graph, source)
    for vertex in graph.vertices():
        cost = costs[vertex]
        dist[vertex] = NO_EDGE if cost is None else cost
        pred[vertex] = prev[vertex]


def shortest_path(
    predecessors: Mapping[Vertex, Optional[Vertex]],
    distances: Mapping[Vertex, Optional[int]],
    target: Vertex,
) -> Optional[List[Vertex]]:
    """
    Walk predecessor links back from target and return the source -> target path.

    Accepts distances from either DijkstraEngine (None = unreachable) or
    dijkstra() (NO_EDGE = unreachable). Returns None if target is unreachable.
    """
    if target not in distances:
        raise VertexNotFoundError(f"Vertex '{target}' has no computed distance")
    if distances[target] is None or distances[target] == NO_EDGE:
        return None

    path = [target]
    node = predecessors.get(target)
    while node is not None:
        path.append(node)
        node = predecessors.get(node)
    path.reverse()
    return path


def path_weight(graph: GraphView, path: Sequence[Vertex]) -> int:
    """Sum of edge weights along path; raises EdgeNotFoundError on a missing hop."""
    return sum(graph.weight(u, v) for u, v in zip(path, path[1:]))
