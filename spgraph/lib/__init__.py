"""Library utilities for spgraph.

This package contains integration modules for external libraries.
"""

from spgraph.lib.nx import from_networkx, to_networkx

__all__ = [
    "from_networkx",
    "to_networkx",
]
