"""
Algorithm interfaces for graph queries.

Keeps shortest-path algorithms separate from graph storage: engines only see
the read-only GraphView capability.
"""

from abc import ABC, abstractmethod
from typing import Dict, Optional

from graph import GraphView, Vertex


class ShortestPathEngine(ABC):
    """
    Interface for single-source shortest-path computation.
    """

    @abstractmethod
    def shortest_path_costs(self, graph: GraphView, source: Vertex) -> Dict[Vertex, Optional[int]]:
        """
        Compute shortest-path costs from source to every vertex.

        Returns:
            Mapping vertex -> path_cost(source -> vertex), None if unreachable.
        """
        raise NotImplementedError

    @abstractmethod
    def shortest_paths(
        self, graph: GraphView, source: Vertex
    ) -> tuple[Dict[Vertex, Optional[int]], Dict[Vertex, Optional[Vertex]]]:
        """
        Compute shortest-path costs plus the predecessor of every vertex.

        Returns:
            (dist, prev) covering every vertex of the graph. prev[v] is the
            vertex just before v on a shortest path, None for the source and
            for unreachable vertices.
        """
        raise NotImplementedError
