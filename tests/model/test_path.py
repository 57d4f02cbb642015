import dataclasses

import pytest

from spgraph.model.path import Path


def test_path_init():
    """Test basic initialization of a Path and derived properties."""
    p = Path(("A", "B", "C"), cost=3)

    assert p.nodes == ("A", "B", "C")
    assert p.cost == 3
    assert p.src_node == "A"
    assert p.dst_node == "C"
    assert p.hops == 2


def test_path_accepts_list_and_stores_tuple():
    p = Path(["A", "B"], 1)
    assert p.nodes == ("A", "B")
    assert isinstance(p.nodes, tuple)


def test_path_rejects_empty_sequence():
    with pytest.raises(ValueError, match="at least one node"):
        Path((), 0)


def test_path_rejects_empty_iterable():
    with pytest.raises(ValueError, match="at least one node"):
        Path((n for n in ()), 0)


def test_path_single_node():
    """A path from a node to itself has one node, zero hops and no pairs."""
    p = Path(("S",), 0)
    assert len(p) == 1
    assert p.hops == 0
    assert p.node_pairs == ()
    assert p.src_node == p.dst_node == "S"


def test_path_indexing_and_iteration():
    p = Path(("N1", "N2", "N3"), 7)
    assert p[0] == "N1"
    assert p[-1] == "N3"
    assert list(p) == ["N1", "N2", "N3"]
    assert len(p) == 3


def test_path_node_pairs():
    p = Path(("A", "B", "C"), 3)
    assert p.node_pairs == (("A", "B"), ("B", "C"))


def test_path_repr():
    p = Path(("A", "B"), 5)
    assert repr(p) == "Path(['A', 'B'], cost=5)"


def test_path_equality_and_hash():
    p1 = Path(("A", "B"), 5)
    p2 = Path(["A", "B"], 5)
    p3 = Path(("A", "B"), 6)
    assert p1 == p2
    assert hash(p1) == hash(p2)
    assert p1 != p3


def test_path_ordering_by_cost():
    cheap = Path(("A", "C"), 2)
    dear = Path(("A", "B", "C"), 9)
    assert cheap < dear
    assert not dear < cheap
    assert sorted([dear, cheap]) == [cheap, dear]


def test_path_lt_with_non_path():
    p = Path(("A",), 0)
    assert p.__lt__("not a path") is NotImplemented


def test_path_is_immutable():
    p = Path(("A", "B"), 1)
    with pytest.raises(dataclasses.FrozenInstanceError):
        p.cost = 0  # type: ignore[misc]
