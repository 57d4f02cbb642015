"""Graph primitives.

This package provides the memoizing directed graph type `Graph`.
"""

from spgraph.graph.digraph import Graph, validate_weight

__all__ = ["Graph", "validate_weight"]
