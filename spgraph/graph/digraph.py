from __future__ import annotations

import math
import numbers
import threading
from bisect import insort
from typing import (
    Any,
    Dict,
    FrozenSet,
    Iterable,
    Iterator,
    List,
    Optional,
    Set,
    Tuple,
)

from spgraph.algorithms.spf import ShortestPathEngine, engine_for
from spgraph.algorithms.traversal import bfs_order, dfs_order
from spgraph.config import DEFAULT_CONFIG, GraphConfig
from spgraph.exceptions import InvalidWeightError, UndeclaredNodeError
from spgraph.logging import get_logger
from spgraph.model.neighbour import Neighbour
from spgraph.model.path import Path
from spgraph.types.base import UNREACHABLE, AdjacencyOrder, Cost, NodeID

logger = get_logger(__name__)

EdgeTriple = Tuple[NodeID, NodeID, Cost]


def validate_weight(weight: Any) -> Cost:
    """
    Return weight unchanged if it is a usable edge weight.

    Raises:
        InvalidWeightError: If weight is not a real number, is a bool, is not
            finite, or is negative.
    """
    if isinstance(weight, bool) or not isinstance(weight, numbers.Real):
        raise InvalidWeightError(weight)
    if not math.isfinite(weight) or weight < 0:
        raise InvalidWeightError(weight)
    return weight


class Graph:
    """
    A directed, weighted graph with memoized single-source shortest paths.

    This class enforces:
      - Nodes are declared explicitly; declaring a node twice raises ValueError.
      - Edges may only leave declared nodes (UndeclaredNodeError otherwise).
        Edges into undeclared nodes are kept, but those nodes stay
        unreachable for queries until declared.
      - Edge weights are finite, non-negative numbers (InvalidWeightError otherwise).
      - Adding an identical (source, dest, weight) edge twice is a no-op.
      - Each distinct source runs the shortest-path engine at most once
        between mutations, including under concurrent first queries.

    Any successful mutation drops all cached shortest-path results.
    """

    def __init__(
        self,
        nodes: Iterable[NodeID] = (),
        edges: Iterable[EdgeTriple] = (),
        config: Optional[GraphConfig] = None,
        engine: Optional[ShortestPathEngine] = None,
    ) -> None:
        """
        Initialize a Graph from declared nodes and (source, dest, weight) edges.

        Args:
            nodes: Node IDs to declare.
            edges: Edge triples added in order via ``add_edge``.
            config: Construction options. Defaults to ``DEFAULT_CONFIG``.
            engine: Shortest-path engine. Defaults to the one named by
                ``config.engine``.

        Raises:
            ValueError: If a node is declared twice.
            UndeclaredNodeError: If an edge leaves an undeclared node.
            InvalidWeightError: If an edge weight is invalid.
        """
        self.config = config or DEFAULT_CONFIG
        self._engine = engine if engine is not None else engine_for(self.config.engine)

        self._adj: Dict[NodeID, List[Neighbour]] = {}
        self._edge_sets: Dict[NodeID, Set[Neighbour]] = {}

        # source -> dest -> Path, filled one full engine run at a time
        self._shortest_paths: Dict[NodeID, Dict[NodeID, Path]] = {}
        self._cache_lock = threading.Lock()
        self._source_locks: Dict[NodeID, threading.Lock] = {}

        for node in nodes:
            self.add_node(node)
        for source, dest, weight in edges:
            self.add_edge(source, dest, weight)

    #
    # Construction
    #
    def add_node(self, node: NodeID) -> None:
        """
        Declare a node with no outgoing edges.

        Raises:
            ValueError: If the node is already declared.
        """
        if node in self._adj:
            raise ValueError(f"Node '{node}' already exists in this graph.")
        self._adj[node] = []
        self._edge_sets[node] = set()
        self._invalidate()

    def add_edge(self, source: NodeID, dest: NodeID, weight: Cost) -> bool:
        """
        Add a directed edge source -> dest.

        Args:
            source: Declared source node.
            dest: Destination node (need not be declared).
            weight: Non-negative edge weight.

        Returns:
            True if the edge was added, False if the identical edge already
            existed.

        Raises:
            UndeclaredNodeError: If source is not declared.
            InvalidWeightError: If weight is invalid.
        """
        if source not in self._adj:
            raise UndeclaredNodeError(source)
        neighbour = Neighbour(dest, validate_weight(weight))

        if neighbour in self._edge_sets[source]:
            return False
        if self.config.adjacency_order == AdjacencyOrder.SORTED:
            insort(self._adj[source], neighbour)
        else:
            self._adj[source].append(neighbour)
        self._edge_sets[source].add(neighbour)
        self._invalidate()
        return True

    #
    # Adjacency access
    #
    def __contains__(self, node: object) -> bool:
        return node in self._adj

    def __len__(self) -> int:
        return len(self._adj)

    def __repr__(self) -> str:
        return f"Graph(nodes={len(self)}, edges={self.edge_count()})"

    @property
    def nodes(self) -> Tuple[NodeID, ...]:
        """Declared nodes in declaration order."""
        return tuple(self._adj)

    @property
    def adjacency(self) -> Dict[NodeID, Tuple[Neighbour, ...]]:
        """Snapshot of the adjacency map: node -> ordered outgoing edges."""
        return {node: tuple(edges) for node, edges in self._adj.items()}

    def neighbours(self, node: NodeID) -> Tuple[Neighbour, ...]:
        """Outgoing edges of node in adjacency order; empty if undeclared."""
        return tuple(self._adj.get(node, ()))

    def edges(self) -> Iterator[EdgeTriple]:
        """Iterate (source, dest, weight) triples in adjacency order."""
        for source, neighbours in self._adj.items():
            for neighbour in neighbours:
                yield source, neighbour.dest, neighbour.weight

    def edge_count(self) -> int:
        """Total number of stored edges."""
        return sum(len(neighbours) for neighbours in self._adj.values())

    #
    # Shortest paths
    #
    def shortest_distance(self, source: NodeID, dest: NodeID) -> Cost:
        """
        Shortest distance from source to dest.

        Returns:
            The distance, or ``UNREACHABLE`` if there is no path or either
            node is undeclared.
        """
        path = self.determine_shortest_path(source, dest)
        return UNREACHABLE if path is None else path.cost

    def shortest_path(self, source: NodeID, dest: NodeID) -> Optional[Path]:
        """
        Shortest path from source to dest.

        Returns:
            The Path, or None if there is no path or either node is undeclared.
        """
        return self.determine_shortest_path(source, dest)

    def shortest_paths_from(self, source: NodeID) -> Dict[NodeID, Path]:
        """All shortest paths from source to declared nodes it can reach."""
        if source not in self._adj:
            return {}
        results = self._results_for(source)
        return {dest: path for dest, path in results.items() if dest in self._adj}

    def determine_shortest_path(
        self, source: NodeID, dest: NodeID
    ) -> Optional[Path]:
        """
        Look up (computing on first use) the shortest Path from source to dest.

        The first query for a source runs the engine once and caches the full
        result set; later queries from that source are dictionary lookups.
        """
        if source not in self._adj or dest not in self._adj:
            return None
        return self._results_for(source).get(dest)

    def computed_sources(self) -> FrozenSet[NodeID]:
        """Sources whose result sets are currently cached."""
        return frozenset(self._shortest_paths)

    def clear_cache(self) -> None:
        """Drop all cached shortest-path results."""
        self._invalidate()

    def _results_for(self, source: NodeID) -> Dict[NodeID, Path]:
        results = self._shortest_paths.get(source)
        if results is not None:
            return results

        with self._cache_lock:
            slot_lock = self._source_locks.setdefault(source, threading.Lock())
        with slot_lock:
            # Another thread may have filled the slot while we waited
            results = self._shortest_paths.get(source)
            if results is None:
                logger.debug(f"Computing shortest paths from '{source}'")
                results = self._engine.execute(self, source)
                self._shortest_paths[source] = results
        return results

    def _invalidate(self) -> None:
        with self._cache_lock:
            self._shortest_paths.clear()
            self._source_locks.clear()

    #
    # Traversal
    #
    def dfs_order(self, start: NodeID) -> List[NodeID]:
        """Depth-first visiting order from start; empty if start is undeclared."""
        return dfs_order(self, start)

    def bfs_order(self, start: NodeID) -> List[NodeID]:
        """Breadth-first visiting order from start; empty if start is undeclared."""
        return bfs_order(self, start)
