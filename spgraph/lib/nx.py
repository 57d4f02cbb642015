"""NetworkX graph conversion utilities.

This module converts between NetworkX graphs and ``spgraph.Graph``, so that
graphs built with NetworkX generators can be queried with the memoizing
shortest-path engine, and spgraph graphs can be handed to NetworkX tooling.

Example:
    >>> import networkx as nx
    >>> from spgraph.lib.nx import from_networkx, to_networkx
    >>>
    >>> G = nx.DiGraph()
    >>> G.add_edge("A", "B", weight=10)
    >>> G.add_edge("B", "C", weight=5)
    >>>
    >>> graph = from_networkx(G)
    >>> graph.shortest_distance("A", "C")
    15
    >>>
    >>> G_out = to_networkx(graph)
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Optional, Union

from spgraph.algorithms.spf import ShortestPathEngine
from spgraph.config import GraphConfig
from spgraph.graph.digraph import Graph
from spgraph.types.base import Cost

if TYPE_CHECKING:
    import networkx as nx

    NxGraph = Union[nx.DiGraph, nx.MultiDiGraph, nx.Graph, nx.MultiGraph]
else:
    NxGraph = Any


def from_networkx(
    G: NxGraph,
    *,
    weight_attr: str = "weight",
    default_weight: Cost = 1,
    bidirectional: bool = False,
    config: Optional[GraphConfig] = None,
    engine: Optional[ShortestPathEngine] = None,
) -> Graph:
    """Convert a NetworkX graph to a spgraph ``Graph``.

    Every NetworkX node is declared in the graph's node order, then every
    edge is added. Undirected inputs always produce edges in both directions.

    Args:
        G: NetworkX graph (DiGraph, MultiDiGraph, Graph, or MultiGraph)
        weight_attr: Edge attribute holding the weight (default: "weight")
        default_weight: Weight used when the attribute is missing (default: 1)
        bidirectional: If True, also add the reverse of every edge.
        config: Optional GraphConfig for the new graph.
        engine: Optional shortest-path engine for the new graph.

    Returns:
        The populated Graph.

    Raises:
        TypeError: If G is not a NetworkX graph
        InvalidWeightError: If an edge carries a negative or non-numeric weight
    """
    import networkx as nx

    if not isinstance(G, (nx.DiGraph, nx.MultiDiGraph, nx.Graph, nx.MultiGraph)):
        raise TypeError(
            f"Expected NetworkX graph (DiGraph, MultiDiGraph, Graph, MultiGraph), "
            f"got {type(G).__name__}"
        )

    reverse = bidirectional or not G.is_directed()
    graph = Graph(G.nodes(), config=config, engine=engine)
    for u, v, data in G.edges(data=True):
        weight = data.get(weight_attr, default_weight)
        graph.add_edge(u, v, weight)
        if reverse:
            graph.add_edge(v, u, weight)
    return graph


def to_networkx(graph: Graph, *, weight_attr: str = "weight") -> "nx.MultiDiGraph":
    """Convert a spgraph ``Graph`` to a NetworkX MultiDiGraph.

    Declared nodes are added first in declaration order. Edge destinations
    that were never declared become plain NetworkX nodes.

    Args:
        graph: Graph to convert.
        weight_attr: Edge attribute name for the weight (default: "weight")

    Returns:
        nx.MultiDiGraph with one edge per stored (source, dest, weight).
    """
    import networkx as nx

    G = nx.MultiDiGraph()
    G.add_nodes_from(graph.nodes)
    for src, dst, weight in graph.edges():
        G.add_edge(src, dst, **{weight_attr: weight})
    return G
