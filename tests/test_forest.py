import pytest

from blossom_matching.forest import Forest, InvalidEdgeException


def make_tree():
    forest = Forest()
    forest.add_node("r")
    forest.attach("a", "r")
    forest.attach("b", "a")
    forest.attach("c", "b")
    forest.add_node("s")
    forest.attach("d", "s")
    return forest


def test_root_and_path():
    forest = make_tree()
    assert forest.root("c") == "r"
    assert forest.root("r") == "r"
    assert forest.path("c") == ["c", "b", "a", "r"]
    assert forest.path("d") == ["d", "s"]


def test_distance_and_parity():
    forest = make_tree()
    assert forest.distance("r") == 0
    assert forest.distance("c") == 3
    assert forest.is_even("b")
    assert not forest.is_even("a")


def test_find():
    forest = make_tree()
    assert forest.find("c", "a")
    assert not forest.find("c", "d")


def test_attach_in_same_tree_does_nothing():
    forest = make_tree()
    forest.attach("c", "r")
    assert forest.path("c") == ["c", "b", "a", "r"]


def test_attach_is_not_symmetric():
    forest = make_tree()
    forest.attach("s", "c")
    assert forest.root("d") == "r"
    assert forest.path("d") == ["d", "s", "c", "b", "a", "r"]
    assert forest.root("c") == "r"


def test_attach_to_missing_parent():
    forest = Forest()
    with pytest.raises(InvalidEdgeException):
        forest.attach(1, 0)


def test_has_node():
    forest = make_tree()
    assert forest.has_node("d")
    assert "x" not in forest
    assert len(forest) == 6


def test_falsy_nodes():
    forest = Forest()
    forest.add_node(1)
    forest.attach(0, 1)
    forest.attach(2, 0)
    assert forest.path(2) == [2, 0, 1]
    assert forest.distance(2) == 2
