"""
Unit tests for VertexQueue.
"""

import pytest

from priority_queue import VertexQueue


def test_pops_in_priority_order():
    q = VertexQueue()
    q.push("C", 3)
    q.push("A", 1)
    q.push("B", 2)

    assert [q.pop() for _ in range(3)] == [("A", 1), ("B", 2), ("C", 3)]
    assert len(q) == 0


def test_ties_break_by_label():
    q = VertexQueue()
    for label in ("D", "B", "C", "A"):
        q.push(label, 5)
    assert [q.pop()[0] for _ in range(4)] == ["A", "B", "C", "D"]


def test_requeue_lowers_priority():
    q = VertexQueue()
    q.push("A", 10)
    q.push("B", 5)
    q.requeue("A", 1)

    assert len(q) == 2
    assert q.pop() == ("A", 1)
    assert q.pop() == ("B", 5)
    with pytest.raises(IndexError):
        q.pop()


def test_remove_by_value():
    q = VertexQueue()
    q.push("A", 1)
    q.push("B", 2)
    q.remove("A")

    assert "A" not in q
    assert "B" in q
    assert q.pop() == ("B", 2)
    assert not q


def test_push_twice_rejected():
    q = VertexQueue()
    q.push("A", 1)
    with pytest.raises(ValueError):
        q.push("A", 0)


def test_pop_empty_raises():
    with pytest.raises(IndexError):
        VertexQueue().pop()
