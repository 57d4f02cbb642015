"""Lightweight representation of a single shortest path.

The ``Path`` dataclass stores the ordered node sequence from a source to a
destination together with the total distance. Paths are produced by the
shortest-path engines and cached by ``Graph``; they are immutable once built.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import cached_property
from typing import Any, Iterator, Tuple

from spgraph.types.base import Cost, NodeID


@dataclass(frozen=True)
class Path:
    """Represents a single path in the graph.

    Attributes:
        nodes: Node sequence from source to destination (inclusive).
        cost: Total distance along the path.
    """

    nodes: Tuple[NodeID, ...]
    cost: Cost

    def __post_init__(self) -> None:
        # Accept any iterable but always store a tuple
        object.__setattr__(self, "nodes", tuple(self.nodes))
        if not self.nodes:
            raise ValueError("Path must contain at least one node.")

    def __getitem__(self, idx: int) -> NodeID:
        """Return the node at the specified index."""
        return self.nodes[idx]

    def __iter__(self) -> Iterator[NodeID]:
        """Iterate over the nodes in traversal order."""
        return iter(self.nodes)

    def __len__(self) -> int:
        """Return the number of nodes in the path."""
        return len(self.nodes)

    def __lt__(self, other: Any) -> bool:
        """Compare two paths by cost.

        Returns NotImplemented if ``other`` is not a Path.
        """
        if not isinstance(other, Path):
            return NotImplemented
        return self.cost < other.cost

    def __repr__(self) -> str:
        return f"Path({list(self.nodes)}, cost={self.cost})"

    @property
    def src_node(self) -> NodeID:
        """Return the first node in the path (the source node)."""
        return self.nodes[0]

    @property
    def dst_node(self) -> NodeID:
        """Return the last node in the path (the destination node)."""
        return self.nodes[-1]

    @property
    def hops(self) -> int:
        """Number of edges traversed."""
        return len(self.nodes) - 1

    @cached_property
    def node_pairs(self) -> Tuple[Tuple[NodeID, NodeID], ...]:
        """Return consecutive (from, to) node pairs, one per traversed edge.

        Returns an empty tuple for a single-node path.
        """
        return tuple(zip(self.nodes, self.nodes[1:]))
