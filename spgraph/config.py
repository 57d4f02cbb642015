"""Configuration classes for spgraph graphs."""

from dataclasses import dataclass
from typing import Optional

from spgraph.types.base import AdjacencyOrder, EngineKind


@dataclass(frozen=True)
class GraphConfig:
    """Construction-time options for a ``Graph``."""

    # Ordering policy for each node's outgoing edge list
    adjacency_order: AdjacencyOrder = AdjacencyOrder.SORTED

    # Engine built when the caller does not pass one explicitly
    engine: EngineKind = EngineKind.HEAP

    @classmethod
    def from_names(
        cls,
        adjacency_order: Optional[str] = None,
        engine: Optional[str] = None,
    ) -> "GraphConfig":
        """Build a config from option names such as ``"insertion"`` or ``"linear"``.

        Unset names fall back to the defaults.
        """
        return cls(
            adjacency_order=(
                AdjacencyOrder.from_string(adjacency_order)
                if adjacency_order
                else cls.adjacency_order
            ),
            engine=EngineKind.from_string(engine) if engine else cls.engine,
        )


# Global default configuration instance
DEFAULT_CONFIG = GraphConfig()
