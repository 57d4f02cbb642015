"""Shared graph fixtures and test doubles."""

from __future__ import annotations

import threading
from typing import Dict, List

import pytest

from spgraph.algorithms.spf import DijkstraEngine
from spgraph.graph.digraph import Graph
from spgraph.model.path import Path


class CountingEngine(DijkstraEngine):
    """DijkstraEngine that records every source it is executed for."""

    def __init__(self) -> None:
        self.calls: List[object] = []
        self._lock = threading.Lock()

    def execute(self, graph, src_node) -> Dict[object, Path]:
        with self._lock:
            self.calls.append(src_node)
        return super().execute(graph, src_node)

    def count(self, src_node) -> int:
        return self.calls.count(src_node)


@pytest.fixture
def counting_engine() -> CountingEngine:
    return CountingEngine()


@pytest.fixture
def abcd_edges():
    # Metric:
    #       [1]      [2]      [1]
    #   A ──────► B ──────► C ──────► D
    #   │                   ▲
    #   └───────────────────┘
    #            [5]
    return [("A", "B", 1), ("B", "C", 2), ("A", "C", 5), ("C", "D", 1)]


@pytest.fixture
def abcd(abcd_edges) -> Graph:
    return Graph(nodes={"A", "B", "C", "D"}, edges=abcd_edges)


@pytest.fixture
def isolated() -> Graph:
    return Graph(nodes={"X"})


@pytest.fixture
def asymmetric() -> Graph:
    # Metric:
    #        [1]
    #   A ────────► B
    #   ▲           │
    #   └───────────┘
    #        [7]
    return Graph(nodes=["A", "B"], edges=[("A", "B", 1), ("B", "A", 7)])


@pytest.fixture
def two_components() -> Graph:
    # A ─[1]─► B      C ─[2]─► D
    return Graph(
        nodes=["A", "B", "C", "D"],
        edges=[("A", "B", 1), ("C", "D", 2)],
    )


@pytest.fixture
def diamond() -> Graph:
    # Metric:
    #          [1]   B   [3]
    #        ┌──────►─────────┐
    #   S ───┤                ├──► T ─[1]─► U
    #        └──────►─────────┘
    #          [2]   C   [1]
    #   plus B -> C [0]
    return Graph(
        nodes=["S", "B", "C", "T", "U"],
        edges=[
            ("S", "B", 1),
            ("S", "C", 2),
            ("B", "T", 3),
            ("C", "T", 1),
            ("B", "C", 0),
            ("T", "U", 1),
        ],
    )
