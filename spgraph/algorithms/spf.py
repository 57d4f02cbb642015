"""Single-source shortest-path engines.

Both engines implement Dijkstra's algorithm and return, for a given source,
a mapping from every reachable node to its ``Path``. They differ only in how
the frontier is kept:

- ``DijkstraEngine`` uses a binary heap, O((V + E) log V).
- ``LinearScanDijkstraEngine`` scans the frontier for its minimum, O(V^2).

All bookkeeping (frontier, costs, predecessors) lives in local variables of
``execute``, so one engine instance can serve any number of graphs and
threads. Edge weights must be non-negative; ``Graph.add_edge`` enforces it.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from heapq import heappop, heappush
from typing import TYPE_CHECKING, Dict, List, Tuple

from spgraph.algorithms.path_utils import reconstruct_path
from spgraph.logging import get_logger
from spgraph.model.path import Path
from spgraph.types.base import Cost, EngineKind, NodeID

if TYPE_CHECKING:
    from spgraph.graph.digraph import Graph

logger = get_logger(__name__)


class ShortestPathEngine(ABC):
    """Computes all shortest paths from one source node."""

    @abstractmethod
    def execute(self, graph: Graph, src_node: NodeID) -> Dict[NodeID, Path]:
        """
        Run SSSP from src_node over graph.

        Args:
            graph: Graph providing ``neighbours(node)``.
            src_node: Source node.

        Returns:
            Maps each node reachable from src_node (src_node included) to its
            shortest Path. Unreachable nodes are absent.
        """
        raise NotImplementedError


class DijkstraEngine(ShortestPathEngine):
    """
    Single-source Dijkstra using a binary heap.

    Ties between equal tentative costs are broken by node ID.
    """

    def execute(self, graph: Graph, src_node: NodeID) -> Dict[NodeID, Path]:
        costs: Dict[NodeID, Cost] = {src_node: 0}
        pred: Dict[NodeID, NodeID] = {}
        paths: Dict[NodeID, Path] = {}
        min_pq: List[Tuple[Cost, NodeID]] = [(0, src_node)]

        while min_pq:
            current_cost, node_id = heappop(min_pq)
            # Skip outdated entries
            if node_id in paths or current_cost > costs[node_id]:
                continue

            paths[node_id] = reconstruct_path(src_node, node_id, pred, current_cost)

            for neighbour in graph.neighbours(node_id):
                new_cost = current_cost + neighbour.weight
                if new_cost < costs.get(neighbour.dest, float("inf")):
                    costs[neighbour.dest] = new_cost
                    pred[neighbour.dest] = node_id
                    heappush(min_pq, (new_cost, neighbour.dest))

        logger.debug(f"SPF from '{src_node}' finalized {len(paths)} nodes (heap)")
        return paths


class LinearScanDijkstraEngine(ShortestPathEngine):
    """
    Single-source Dijkstra with an unordered frontier.

    Each round scans the frontier for its minimum tentative cost; on ties the
    member added to the frontier first wins.
    """

    def execute(self, graph: Graph, src_node: NodeID) -> Dict[NodeID, Path]:
        costs: Dict[NodeID, Cost] = {src_node: 0}
        pred: Dict[NodeID, NodeID] = {}
        paths: Dict[NodeID, Path] = {}
        # dict as an insertion-ordered set
        frontier: Dict[NodeID, None] = {src_node: None}

        while frontier:
            node_id = min(frontier, key=costs.__getitem__)
            del frontier[node_id]
            current_cost = costs[node_id]

            paths[node_id] = reconstruct_path(src_node, node_id, pred, current_cost)

            for neighbour in graph.neighbours(node_id):
                new_cost = current_cost + neighbour.weight
                if new_cost < costs.get(neighbour.dest, float("inf")):
                    costs[neighbour.dest] = new_cost
                    pred[neighbour.dest] = node_id
                    frontier[neighbour.dest] = None

        logger.debug(f"SPF from '{src_node}' finalized {len(paths)} nodes (linear)")
        return paths


def engine_for(kind: EngineKind) -> ShortestPathEngine:
    """Return a new engine instance for the given kind.

    Raises:
        ValueError: If kind is not a known EngineKind.
    """
    if kind == EngineKind.HEAP:
        return DijkstraEngine()
    if kind == EngineKind.LINEAR:
        return LinearScanDijkstraEngine()
    raise ValueError(f"Unsupported engine kind: {kind!r}")
