"""Adjacency-list entry for a directed, weighted edge."""

from __future__ import annotations

from dataclasses import dataclass

from spgraph.types.base import Cost, NodeID


@dataclass(frozen=True, order=True)
class Neighbour:
    """Destination and weight of one outgoing edge.

    Equality, hashing and ordering are all by ``(dest, weight)``, so two edges
    to the same destination with different weights are distinct entries.

    Attributes:
        dest: Destination node of the edge.
        weight: Non-negative edge weight.
    """

    dest: NodeID
    weight: Cost

    def __repr__(self) -> str:
        return f"Neighbour({self.dest!r}, weight={self.weight})"
