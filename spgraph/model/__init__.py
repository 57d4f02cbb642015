"""Immutable value records used by the graph and its engines.

- ``Neighbour`` is one outgoing edge: a (dest, weight) pair.
- ``Path`` is one computed shortest path: a node sequence plus total cost.
"""

from spgraph.model.neighbour import Neighbour
from spgraph.model.path import Path

__all__ = ["Neighbour", "Path"]
