"""
Tests for the Vertex model.
"""

import pytest

from graphpath.core.models import Vertex


def test_new_vertex():
    """Test a new vertex has no edges."""
    vertex = Vertex(1)
    assert vertex.value == 1
    assert vertex.edges_to == frozenset()
    assert vertex.neighbors == ()
    assert len(vertex) == 0


def test_add_edge_to():
    """Test neighbors keep insertion order and collapse duplicates."""
    vertex = Vertex(1)
    vertex.add_edge_to(3)
    vertex.add_edge_to(2)
    vertex.add_edge_to(3)

    assert vertex.neighbors == (3, 2)
    assert vertex.edges_to == {2, 3}
    assert vertex.has_edge_to(2)
    assert not vertex.has_edge_to(1)
    assert len(vertex) == 2


def test_edges_to_is_a_snapshot():
    """Test the neighbor set cannot be used to mutate the vertex."""
    vertex = Vertex(1)
    edges = vertex.edges_to
    vertex.add_edge_to(2)

    assert edges == frozenset()
    with pytest.raises(AttributeError):
        vertex.edges_to.add(5)  # type: ignore[attr-defined]


def test_vertex_equality():
    """Test vertices compare by value and neighbors."""
    first, second = Vertex(1), Vertex(1)
    assert first == second

    first.add_edge_to(2)
    assert first != second

    second.add_edge_to(2)
    assert first == second
    assert Vertex(1) != Vertex(2)
    assert Vertex(1) != 1


def test_vertex_equality_ignores_neighbor_order():
    """Test neighbor insertion order does not affect equality."""
    first, second = Vertex(1), Vertex(1)
    first.add_edge_to(2)
    first.add_edge_to(3)
    second.add_edge_to(3)
    second.add_edge_to(2)

    assert first == second


def test_vertex_is_unhashable():
    """Test mutable vertices cannot be hashed."""
    with pytest.raises(TypeError):
        hash(Vertex(1))


def test_vertex_repr():
    """Test vertex representation."""
    vertex = Vertex("a")
    vertex.add_edge_to("b")
    assert repr(vertex) == "Vertex(value='a', edges_to=['b'])"


def test_vertex_copy_is_detached():
    """Test changes to a copy do not reach the original vertex."""
    vertex = Vertex(1)
    vertex.add_edge_to(2)
    copy = vertex.copy()
    copy.add_edge_to(3)

    assert copy == Vertex(1, {2: None, 3: None})
    assert vertex.neighbors == (2,)
