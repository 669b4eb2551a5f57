"""
Unit tests for the canonical text form.
"""

import pytest

from errors import DuplicateEdgeError, GraphFormatError, InvalidEdgeError
from graph_text import format_graph, parse_tokens
from storage import create_graph


def test_format_orders_vertices_and_destinations():
    g = create_graph()
    g.add_vertex("Z")
    g.add_edge("A", "C", 1)
    g.add_edge("A", "B", 2)

    assert format_graph(g) == "A-B(2), A-C(1), B:, C:, Z:"
    assert str(g) == format_graph(g)


def test_labels_sort_as_strings():
    g = create_graph()
    g.populate("2-1(5), 10-3(3), 1-3(5)")
    assert str(g) == "1-3(5), 10-3(3), 2-1(5), 3:"


def test_parse_tokens_tolerates_loose_separators():
    parsed = parse_tokens(" A-B(2),,J:,  C-A(0) ,")
    assert parsed.vertices == ["J"]
    assert parsed.edges == [("A", "B", 2), ("C", "A", 0)]


def test_parse_tokens_keeps_negative_weights_for_the_graph():
    assert parse_tokens("A-B(-1)").edges == [("A", "B", -1)]


@pytest.mark.parametrize("bad", ["A-B", "A-B(x)", "A B(1)", "A", "A-B(1", "-B(1)", "A:B"])
def test_parse_tokens_rejects_malformed(bad):
    with pytest.raises(GraphFormatError):
        parse_tokens(bad)


def test_populate_leaves_graph_untouched_on_syntax_error():
    g = create_graph()
    with pytest.raises(GraphFormatError):
        g.populate("A-B(1), oops")
    assert g.vertices() == []


def test_populate_reports_contract_violations():
    g = create_graph()
    with pytest.raises(InvalidEdgeError):
        g.populate("A-B(-3)")
    assert g.vertices() == []

    with pytest.raises(DuplicateEdgeError):
        g.populate("A-B(1), A-B(2)")


def test_round_trip_through_text():
    text = "A-B(2), A-C(1), B-C(7), C:, D-A(0), E:"
    g = create_graph()
    g.populate(text)
    assert str(g) == text
