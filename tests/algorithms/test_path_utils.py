import pytest

from spgraph.algorithms.path_utils import reconstruct_path
from spgraph.model.path import Path


def test_reconstruct_path_source_only():
    assert reconstruct_path("A", "A", {}, 0) == Path(("A",), 0)


def test_reconstruct_path_chain():
    pred = {"B": "A", "C": "B", "D": "C"}
    assert reconstruct_path("A", "D", pred, 4) == Path(("A", "B", "C", "D"), 4)
    assert reconstruct_path("A", "B", pred, 1) == Path(("A", "B"), 1)


def test_reconstruct_path_cycle_detected():
    pred = {"B": "C", "C": "B"}
    with pytest.raises(ValueError, match="cycle"):
        reconstruct_path("A", "B", pred, 1)


def test_reconstruct_path_wrong_source():
    pred = {"B": "X"}
    with pytest.raises(ValueError, match="not at source 'A'"):
        reconstruct_path("A", "B", pred, 1)
