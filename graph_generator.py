"""
Utilities to generate reproducible random directed graphs for experiments.
"""

from typing import Union
import random

from graph import Graph
from storage import GraphStorage, create_graph


def vertex_label(i: int) -> str:
    return f"V{i}"


def build_random_graph(
    vertices: int,
    out_degree: int,
    max_weight: int,
    seed: int | None = None,
    storage: Union[GraphStorage, str] = GraphStorage.ADJACENCY_LIST,
) -> Graph:
    """
    Generate a random directed graph with integer weights.

    Args:
        vertices: number of vertices, labelled V0..V{n-1}.
        out_degree: distinct random successors per vertex (capped at n - 1).
        max_weight: weights are drawn uniformly from [0, max_weight].
        seed: RNG seed for reproducibility.
        storage: storage strategy of the returned graph.
    """
    if vertices < 0:
        raise ValueError("vertices must be non-negative")
    if out_degree < 0:
        raise ValueError("out_degree must be non-negative")
    if max_weight < 0:
        raise ValueError("max_weight must be non-negative")

    rng = random.Random(seed)
    labels = [vertex_label(i) for i in range(vertices)]

    graph = create_graph(storage)
    for label in labels:
        graph.add_vertex(label)

    degree = min(out_degree, max(vertices - 1, 0))
    for i, src in enumerate(labels):
        others = labels[:i] + labels[i + 1:]
        for dst in rng.sample(others, degree):
            graph.add_edge(src, dst, rng.randint(0, max_weight))
    return graph
