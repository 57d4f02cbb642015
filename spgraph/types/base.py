"""Base type aliases, sentinels and enums shared across spgraph."""

from __future__ import annotations

import math
from enum import IntEnum
from typing import Hashable, Union

#: Opaque node identifier. Must be hashable and totally ordered.
NodeID = Hashable

#: Represents numeric edge weight or accumulated path distance.
Cost = Union[int, float]

#: Distance reported for node pairs with no connecting path.
UNREACHABLE: float = math.inf


class AdjacencyOrder(IntEnum):
    """Ordering policy for a node's outgoing edge list.

    Only affects traversal output order, never shortest-path results.
    """

    #: Keep edges sorted by (dest, weight) after every insertion.
    SORTED = 1
    #: Keep edges in the order they were added.
    INSERTION = 2

    @classmethod
    def from_string(cls, value: str) -> "AdjacencyOrder":
        """Parse a case-insensitive name into an AdjacencyOrder member.

        Raises:
            ValueError: If the string doesn't match any enum member.
        """
        try:
            return cls[value.upper()]
        except KeyError:
            valid = ", ".join(e.name for e in cls)
            raise ValueError(
                f"Invalid adjacency_order '{value}'. Valid values are: {valid}"
            ) from None


class EngineKind(IntEnum):
    """Shortest-path engine implementations."""

    #: Dijkstra with a binary-heap frontier, O((V + E) log V).
    HEAP = 1
    #: Dijkstra with a linear-scan frontier, O(V^2).
    LINEAR = 2

    @classmethod
    def from_string(cls, value: str) -> "EngineKind":
        """Parse a case-insensitive name into an EngineKind member.

        Raises:
            ValueError: If the string doesn't match any enum member.
        """
        try:
            return cls[value.upper()]
        except KeyError:
            valid = ", ".join(e.name for e in cls)
            raise ValueError(
                f"Invalid engine '{value}'. Valid values are: {valid}"
            ) from None
