"""Shared type aliases and enums."""

from spgraph.types.base import (
    UNREACHABLE,
    AdjacencyOrder,
    Cost,
    EngineKind,
    NodeID,
)

__all__ = [
    "UNREACHABLE",
    "AdjacencyOrder",
    "Cost",
    "EngineKind",
    "NodeID",
]
