"""
Unit tests for storage selection and copying.
"""

import pytest

from adjacency_matrix_graph import AdjacencyMatrixGraph
from edge_list_graph import EdgeListGraph
from storage import GraphStorage, copy_graph, create_graph


def test_create_graph_by_enum_and_name():
    assert isinstance(create_graph(GraphStorage.EDGE_LIST), EdgeListGraph)
    assert isinstance(create_graph("adjacency_matrix"), AdjacencyMatrixGraph)


def test_unknown_storage_rejected():
    with pytest.raises(ValueError, match="Unknown graph storage"):
        create_graph("linked_list")


@pytest.mark.parametrize("storage", list(GraphStorage), ids=lambda s: s.value)
def test_copy_graph_preserves_structure(storage):
    src = create_graph(GraphStorage.EDGE_LIST)
    src.populate("A-B(1), B-A(2), B-C(3), D:")

    copy = copy_graph(src, storage)

    assert str(copy) == str(src)
    # the copy is independent
    copy.remove_vertex("B")
    assert src.contains_edge("A", "B")
