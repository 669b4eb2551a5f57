"""
Min-priority queue of vertices with removal by value.

Built on heapq. Removing a vertex only marks its heap entry dead; dead
entries are discarded when they reach the top. Lowering a vertex's priority
is a remove followed by a fresh push.
"""

from typing import Dict, List, Tuple
import heapq

from graph import Vertex

# Heap entry layout: [priority, vertex, alive]. Equal priorities fall back to
# comparing labels, so ties pop in label order.
_PRIORITY, _VERTEX, _ALIVE = 0, 1, 2


class VertexQueue:
    """Vertices ordered by priority, smallest first, ties broken by label."""

    def __init__(self) -> None:
        self._heap: List[list] = []
        self._entries: Dict[Vertex, list] = {}

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, vertex: object) -> bool:
        return vertex in self._entries

    def push(self, vertex: Vertex, priority: float) -> None:
        if vertex in self._entries:
            raise ValueError(f"Vertex '{vertex}' is already queued")
        entry = [priority, vertex, True]
        self._entries[vertex] = entry
        heapq.heappush(self._heap, entry)

    def remove(self, vertex: Vertex) -> None:
        entry = self._entries.pop(vertex)
        entry[_ALIVE] = False

    def requeue(self, vertex: Vertex, priority: float) -> None:
        """Give a queued vertex a new priority."""
        self.remove(vertex)
        self.push(vertex, priority)

    def pop(self) -> Tuple[Vertex, float]:
        """Remove and return (vertex, priority) with the smallest priority."""
        while self._heap:
            entry = heapq.heappop(self._heap)
            if entry[_ALIVE]:
                del self._entries[entry[_VERTEX]]
                return entry[_VERTEX], entry[_PRIORITY]
        raise IndexError("pop from an empty VertexQueue")
