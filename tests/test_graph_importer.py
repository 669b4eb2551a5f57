"""
Unit tests for graph file import.
"""

from pathlib import Path

import pytest

from errors import GraphFormatError
from graph_importer import PathQuery, import_graph
from storage import GraphStorage, create_graph

GRAPHS = Path(__file__).resolve().parent.parent / "experiments" / "graphs"


@pytest.mark.parametrize("storage", list(GraphStorage), ids=lambda s: s.value)
def test_small_import(storage):
    g = create_graph(storage)
    query = import_graph(GRAPHS / "g-10-1.txt", g)

    assert str(g) == (
        "1-3(5), "
        "10-3(3), 2-1(5), 2-3(5), 2-5(4), "
        "3-4(4), 3-5(4), 4-10(1), 4-2(1), 4-7(3), "
        "5-9(4), 6-2(3), 6-3(4), 7-3(2), "
        "8-2(4), 8-6(1), 9-2(4)"
    )
    assert query == PathQuery("5", "7")


def test_import_without_path_directive(tmp_path: Path):
    f = tmp_path / "g.txt"
    f.write_text("# just edges\nA-B(1)\n\nB-C(2), D:\n")

    g = create_graph()
    assert import_graph(f, g) is None
    assert str(g) == "A-B(1), B-C(2), C:, D:"


def test_line_break_ends_a_token(tmp_path: Path):
    f = tmp_path / "g.txt"
    f.write_text("A-B(1)\nB-C(2)\n")

    g = create_graph()
    import_graph(f, g)
    assert g.contains_edge("B", "C")


def test_bad_path_directive(tmp_path: Path):
    f = tmp_path / "g.txt"
    f.write_text("A-B(1)\npath: A\n")
    with pytest.raises(GraphFormatError):
        import_graph(f, create_graph())


def test_duplicate_path_directive(tmp_path: Path):
    f = tmp_path / "g.txt"
    f.write_text("A-B(1)\npath: A B\npath: B A\n")
    with pytest.raises(GraphFormatError):
        import_graph(f, create_graph())


def test_exercise_file_matches_canonical_form():
    g = create_graph()
    query = import_graph(GRAPHS / "g31.txt", g)
    assert query == PathQuery("A", "F")
    assert sorted(g.vertices()) == list("ABCDEFGHIJ")
    assert g.weight("I", "H") == 10


def test_vertex_named_path_is_graph_data(tmp_path: Path):
    f = tmp_path / "g.txt"
    f.write_text("path:, A-B(1)\npath: A B\n")

    g = create_graph()
    query = import_graph(f, g)

    assert query == PathQuery("A", "B")
    assert str(g) == "A-B(1), B:, path:"


def test_path_directive_with_extra_tokens_is_rejected(tmp_path: Path):
    f = tmp_path / "g.txt"
    f.write_text("A-B(1)\npath: A B C\n")
    with pytest.raises(GraphFormatError):
        import_graph(f, create_graph())
