import pytest

from blossom_matching.edmonds import Blossom
from blossom_matching.graph import (STEM_LABEL, Graph, InvalidEdge,
                                    InvalidMatching, InvalidNode, Matching)


def test_self_loop_rejected():
    g = Graph()
    with pytest.raises(InvalidEdge):
        g.add_edge((1, 1))


def test_edge_must_be_pair():
    g = Graph()
    with pytest.raises(TypeError):
        g.add_edge([0, 1])
    with pytest.raises(TypeError):
        g.add_edge((0, 1, 2))


def test_duplicate_edges_ignored():
    g = Graph(edges=[(0, 1), (1, 0), (0, 1)])
    assert g.num_edges() == 1
    assert g.edges() == [(0, 1)]
    assert g.neighbours(0) == [1]
    assert g.degree(1) == 1


def test_edges_add_nodes():
    g = Graph(nodes=[5], edges=[(0, 1)])
    assert g.nodes() == [5, 0, 1]
    assert 1 in g
    assert len(g) == 3


def test_has_edge_and_edge():
    g = Graph(edges=[(2, 1)])
    assert g.has_edge(1, 2)
    assert g.has_edge(2, 1)
    assert not g.has_edge(1, 3)
    assert g.edge(1, 2) == (2, 1)


def test_labels():
    g = Graph()
    g.add_edge((0, 1), "edge0")
    g.add_edge((1, 2))
    assert g.label(1, 0) == "edge0"
    assert g.label(1, 2) is None
    with pytest.raises(InvalidEdge):
        g.label(0, 2)


def test_remove_edge():
    g = Graph(edges=[(0, 1), (1, 2)])
    g.remove_edge((1, 0))
    assert g.edges() == [(1, 2)]
    assert g.neighbours(0) == []
    with pytest.raises(InvalidEdge):
        g.remove_edge((0, 1))


def test_copy_is_independent():
    g = Graph(edges=[(0, 1), (1, 2)])
    h = g.copy()
    h.remove_edge((0, 1))
    assert g.has_edge(0, 1)
    assert not h.has_edge(0, 1)


def test_contract():
    g = Graph(range(6), [(0, 1), (1, 2), (2, 0), (2, 3), (1, 3), (3, 4),
                         (0, 5)])
    blossom = Blossom([0, 1, 2])
    contracted = g.contract(blossom)
    assert contracted.nodes() == [3, 4, 5, blossom]
    assert contracted.num_edges() == 3
    assert contracted.has_edge(blossom, 3)
    assert contracted.has_edge(blossom, 5)
    assert contracted.has_edge(3, 4)
    assert contracted.label(3, blossom) == STEM_LABEL
    # The original is untouched
    assert g.num_edges() == 7


def test_matching_conflicts():
    m = Matching([(0, 1)])
    with pytest.raises(InvalidMatching):
        m.add_edge((1, 2))
    with pytest.raises(InvalidMatching):
        m.add_edge((3, 0))
    m.add_edge((1, 0))
    assert len(m) == 1


def test_matching_mates():
    m = Matching([(0, 1), (2, 3)])
    assert m.mate(1) == 0
    assert m.mate(4) is None
    assert m.is_exposed(4)
    assert not m.is_exposed(3)
    assert m.has_edge(3, 2)
    assert (1, 0) in m
    assert m.edges() == [(0, 1), (2, 3)]


def test_matching_remove_edge():
    m = Matching([(0, 1)])
    with pytest.raises(InvalidEdge):
        m.remove_edge((0, 2))
    m.remove_edge((1, 0))
    assert len(m) == 0


def test_augment_toggles_edges():
    m = Matching([(1, 2), (3, 4)])
    augmented = m.augment([(0, 1), (1, 2), (2, 3), (3, 4), (4, 5)])
    assert augmented == Matching([(0, 1), (2, 3), (4, 5)])
    assert m == Matching([(2, 1), (3, 4)])


def test_matching_contract():
    m = Matching([(1, 2), (3, 4), (0, 5)])
    blossom = Blossom([0, 1, 2])
    contracted = m.contract(blossom)
    assert len(contracted) == 2
    assert contracted.mate(blossom) == 5
    assert contracted.has_edge(3, 4)
    assert len(m) == 3


def test_matching_contract_exposed_base():
    m = Matching([(1, 2), (3, 4)])
    blossom = Blossom([0, 1, 2])
    contracted = m.contract(blossom)
    assert contracted.is_exposed(blossom)
    assert contracted.edges() == [(3, 4)]


def test_matching_equality():
    assert Matching([(0, 1), (2, 3)]) == Matching([(3, 2), (1, 0)])
    assert Matching([(0, 1)]) != Matching([(0, 2)])


def test_none_is_not_a_node():
    with pytest.raises(InvalidNode):
        Graph(nodes=[None])
    with pytest.raises(InvalidNode):
        Graph(edges=[(None, 1), (1, 2)])
    with pytest.raises(InvalidNode):
        Matching([(0, None)])


def test_str():
    g = Graph(range(3), [(0, 1), (1, 2)])
    assert str(g) == "V: 0 1 2\nE: (0, 1) (1, 2)"
