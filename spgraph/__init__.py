"""spgraph: weighted digraphs with memoized shortest paths.

spgraph builds a directed, weighted graph from declared nodes and edges and
answers shortest-distance and shortest-path queries between any two nodes.
The first query from a source runs Dijkstra's algorithm once and caches the
result for every destination; later queries from that source are lookups.

Primary API:
    Graph - Graph model with shortest-path and traversal queries
    Path, Neighbour - Immutable result and edge records
    load_graph() - Build a Graph from a token-format text file
    from_networkx() / to_networkx() - NetworkX interop

Example:
    from spgraph import Graph

    graph = Graph(
        nodes=["A", "B", "C", "D"],
        edges=[("A", "B", 1), ("B", "C", 2), ("A", "C", 5), ("C", "D", 1)],
    )
    graph.shortest_distance("A", "D")        # 4
    list(graph.shortest_path("A", "D"))      # ['A', 'B', 'C', 'D']
"""

from __future__ import annotations

from spgraph import cli, logging
from spgraph._version import __version__
from spgraph.algorithms.spf import (
    DijkstraEngine,
    LinearScanDijkstraEngine,
    ShortestPathEngine,
)
from spgraph.config import DEFAULT_CONFIG, GraphConfig
from spgraph.exceptions import GraphError, InvalidWeightError, UndeclaredNodeError
from spgraph.graph.digraph import Graph
from spgraph.io import GraphSpec, graph_to_text, load_graph, parse_graph_text
from spgraph.lib.nx import from_networkx, to_networkx
from spgraph.model.neighbour import Neighbour
from spgraph.model.path import Path
from spgraph.types.base import UNREACHABLE, AdjacencyOrder, EngineKind

__all__ = [
    # Version
    "__version__",
    # Model
    "Graph",
    "Neighbour",
    "Path",
    "UNREACHABLE",
    # Engines
    "ShortestPathEngine",
    "DijkstraEngine",
    "LinearScanDijkstraEngine",
    # Configuration
    "GraphConfig",
    "DEFAULT_CONFIG",
    "AdjacencyOrder",
    "EngineKind",
    # Errors
    "GraphError",
    "UndeclaredNodeError",
    "InvalidWeightError",
    # I/O
    "GraphSpec",
    "parse_graph_text",
    "load_graph",
    "graph_to_text",
    # Library integrations (NetworkX)
    "from_networkx",
    "to_networkx",
    # Utilities
    "cli",
    "logging",
]
