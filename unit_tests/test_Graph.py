import numpy as np
import pytest
from pymst.Graph import Edge, Graph


def make_square():
    """Four vertices on a cycle plus one diagonal."""
    return Graph(4, [(1, 2, 1), (2, 3, 2), (3, 4, 3), (1, 4, 4), (1, 3, 10)])


def snapshot(graph):
    return [graph.incident_edges(v) for v in graph.vertices]


def assert_symmetric(graph):
    for v in graph.vertices:
        for e in graph.incident_edges(v):
            assert e.head == v
            assert graph.weight(e.tail, v) == e.weight


def test_edge_reverse_and_matching():
    e = Edge(1, 2, 5)
    assert e.reverse() == Edge(2, 1, 5)
    assert e.links_same_nodes(Edge(1, 2, 9))
    assert not e.links_same_nodes(Edge(2, 1, 5))


def test_empty_graph():
    g = Graph(3)
    assert g.num_vertices == 3
    assert g.num_edges == 0
    assert list(g.vertices) == [1, 2, 3]
    assert list(g.edges()) == []


def test_invalid_vertex_count():
    with pytest.raises(ValueError):
        Graph(0)
    with pytest.raises(ValueError):
        Graph(-2)


def test_construct_from_edges():
    g = make_square()
    assert g.num_edges == 5
    assert g.neighbors(1) == [2, 4, 3]
    assert g.degree(3) == 3
    assert_symmetric(g)
    assert Graph.from_edges([(1, 2, 1)], 2).num_edges == 1


def test_insert_stores_both_directions():
    g = Graph(3)
    g.insert_edge(Edge(1, 3, 7))
    assert g.num_edges == 1
    assert g.incident_edges(1) == [Edge(1, 3, 7)]
    assert g.incident_edges(3) == [Edge(3, 1, 7)]
    assert g.has_edge(3, 1)
    assert (1, 3, 7) in g


def test_duplicate_insert_updates_weight_only():
    g = make_square()
    g.insert_edge((3, 2, 8))
    assert g.num_edges == 5
    assert g.weight(2, 3) == 8
    assert g.weight(3, 2) == 8
    assert g.degree(2) == 2
    assert_symmetric(g)


def test_later_duplicate_in_edge_list_wins():
    g = Graph(2, [(1, 2, 5), (2, 1, 3)])
    assert g.num_edges == 1
    assert g.weight(1, 2) == 3


def test_insert_boundaries():
    g = Graph(5)
    g.insert_edge((1, 5, 2))
    assert g.has_edge(5, 1)
    with pytest.raises(IndexError):
        g.insert_edge((0, 1, 1))
    with pytest.raises(IndexError):
        g.insert_edge((1, 6, 1))
    assert g.num_edges == 1


def test_insert_then_remove_restores_state():
    g = make_square()
    before = snapshot(g)
    g.insert_edge((2, 4, 6))
    assert g.num_edges == 6
    g.remove_edge((4, 2, 6))
    assert g.num_edges == 5
    assert snapshot(g) == before


def test_remove_ignores_weight():
    g = make_square()
    g.remove_edge((1, 3, 0))
    assert not g.has_edge(1, 3)
    assert not g.has_edge(3, 1)
    assert g.num_edges == 4
    assert_symmetric(g)


def test_remove_missing_edge():
    g = make_square()
    before = snapshot(g)
    with pytest.raises(KeyError):
        g.remove_edge((2, 4, 1))
    with pytest.raises(IndexError):
        g.remove_edge((2, 9, 1))
    assert snapshot(g) == before
    assert g.num_edges == 5


def test_weight_of_missing_edge():
    g = make_square()
    with pytest.raises(KeyError):
        g.weight(2, 4)


def test_edges_lists_each_once():
    g = make_square()
    edges = list(g.edges())
    assert len(edges) == g.num_edges
    assert all(e.head < e.tail for e in edges)
    assert {(e.head, e.tail) for e in edges} == {(1, 2), (2, 3), (3, 4), (1, 4), (1, 3)}
    assert g.total_weight() == 20


def test_self_loop_counts_once():
    g = Graph(2)
    g.insert_edge((2, 2, 4))
    assert g.num_edges == 1
    assert g.incident_edges(2) == [Edge(2, 2, 4)]
    assert list(g.edges()) == [Edge(2, 2, 4)]
    g.insert_edge((2, 2, 1))
    assert g.weight(2, 2) == 1
    g.remove_edge((2, 2))
    assert g.num_edges == 0
    assert g.incident_edges(2) == []


def test_to_sparse_is_symmetric():
    g = make_square()
    m = g.to_sparse()
    assert m.shape == (4, 4)
    dense = m.toarray()
    assert np.array_equal(dense, dense.T)
    assert dense[0, 2] == 10
    assert m.nnz == 2 * g.num_edges


def test_copy_is_independent():
    g = make_square()
    h = g.copy()
    h.remove_edge((1, 2))
    assert g.has_edge(1, 2)
    assert h.num_edges == g.num_edges - 1
    assert repr(g) == "Graph(num_vertices=4, num_edges=5)"


def test_insert_requires_weight():
    g = Graph(3)
    with pytest.raises(ValueError):
        g.insert_edge((1, 2))
    assert g.num_edges == 0
    # lookups and removal still take bare endpoint pairs
    g.insert_edge((1, 2, 4))
    assert (2, 1) in g
    g.remove_edge((2, 1))
    assert g.num_edges == 0


def test_contains_out_of_range_endpoints():
    g = make_square()
    assert (1, 2, 1) in g
    assert (0, 1) not in g
    assert (1, 5) not in g
    assert (5, 6, 1) not in g
    assert (2, 4) not in g
