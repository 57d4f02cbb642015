"""Graph algorithms: shortest-path engines, traversals and path helpers."""

from spgraph.algorithms.path_utils import reconstruct_path
from spgraph.algorithms.spf import (
    DijkstraEngine,
    LinearScanDijkstraEngine,
    ShortestPathEngine,
    engine_for,
)
from spgraph.algorithms.traversal import bfs_order, dfs_order

__all__ = [
    "DijkstraEngine",
    "LinearScanDijkstraEngine",
    "ShortestPathEngine",
    "bfs_order",
    "dfs_order",
    "engine_for",
    "reconstruct_path",
]
