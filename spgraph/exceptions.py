"""Errors raised while building a graph.

Both errors derive from ``ValueError`` so callers that already guard graph
construction with ``except ValueError`` keep working.
"""

from __future__ import annotations

from typing import Any

from spgraph.types.base import NodeID


class GraphError(ValueError):
    """Base class for graph construction errors."""


class UndeclaredNodeError(GraphError):
    """An edge references a source node that was never declared."""

    def __init__(self, node: NodeID) -> None:
        self.node = node
        super().__init__(f"Source node '{node}' is not declared in this graph.")


class InvalidWeightError(GraphError):
    """An edge weight is negative or not a number."""

    def __init__(self, weight: Any) -> None:
        self.weight = weight
        super().__init__(
            f"Edge weight must be a finite, non-negative number, got {weight!r}."
        )
