"""Reading and writing graphs in the whitespace token format.

The format is a stream of whitespace-separated tokens:

    <node count n>
    <node_1> ... <node_n>
    <source> <dest> <weight>     (repeated until end of input)

Line breaks carry no meaning beyond separating tokens. Lines whose first
non-blank character is ``#`` are comments.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Tuple, Union

from spgraph.algorithms.spf import ShortestPathEngine
from spgraph.config import GraphConfig
from spgraph.graph.digraph import Graph
from spgraph.logging import get_logger

logger = get_logger(__name__)


@dataclass
class GraphSpec:
    """Parsed contents of a graph text file.

    Attributes:
        nodes: Node identifiers in declaration order.
        edges: (source, dest, weight) triples in file order.
    """

    nodes: List[str] = field(default_factory=list)
    edges: List[Tuple[str, str, int]] = field(default_factory=list)

    def build(
        self,
        config: Optional[GraphConfig] = None,
        engine: Optional[ShortestPathEngine] = None,
    ) -> Graph:
        """Construct a Graph from this spec."""
        return Graph(self.nodes, self.edges, config=config, engine=engine)


def _tokenize(text: str) -> List[str]:
    tokens: List[str] = []
    for line in text.splitlines():
        if line.lstrip().startswith("#"):
            continue
        tokens.extend(line.split())
    return tokens


def parse_graph_text(text: str) -> GraphSpec:
    """
    Parse the token format into a GraphSpec.

    Args:
        text: Full contents of a graph description.

    Returns:
        The declared nodes and edge triples.

    Raises:
        ValueError: If the node count is missing, not an integer or negative;
            if fewer node tokens than declared are present; if a node is
            declared twice; if the trailing edge list ends mid-triple; or if
            a weight token is not an integer.
    """
    tokens = _tokenize(text)
    if not tokens:
        raise ValueError("Graph text is empty; expected a node count.")

    try:
        node_count = int(tokens[0])
    except ValueError:
        raise ValueError(
            f"Expected integer node count, got '{tokens[0]}'."
        ) from None
    if node_count < 0:
        raise ValueError(f"Node count must be non-negative, got {node_count}.")

    node_tokens = tokens[1 : 1 + node_count]
    if len(node_tokens) < node_count:
        raise ValueError(
            f"Declared {node_count} nodes but only {len(node_tokens)} node tokens found."
        )
    seen = set()
    for node in node_tokens:
        if node in seen:
            raise ValueError(f"Node '{node}' is declared more than once.")
        seen.add(node)

    edge_tokens = tokens[1 + node_count :]
    if len(edge_tokens) % 3:
        raise ValueError(
            f"Edge list has {len(edge_tokens)} tokens; expected complete "
            "'source dest weight' triples."
        )

    edges: List[Tuple[str, str, int]] = []
    for i in range(0, len(edge_tokens), 3):
        src, dst, weight_token = edge_tokens[i : i + 3]
        try:
            weight = int(weight_token)
        except ValueError:
            raise ValueError(
                f"Edge '{src} {dst} {weight_token}': weight must be an integer."
            ) from None
        edges.append((src, dst, weight))

    return GraphSpec(nodes=list(node_tokens), edges=edges)


def load_graph(
    path: Union[str, Path],
    config: Optional[GraphConfig] = None,
    engine: Optional[ShortestPathEngine] = None,
) -> Graph:
    """
    Read a graph file and build a Graph from it.

    Raises:
        FileNotFoundError: If path does not exist.
        ValueError: If the contents are malformed or an edge is rejected by
            the graph (undeclared source, invalid weight).
    """
    path = Path(path)
    spec = parse_graph_text(path.read_text(encoding="utf-8"))
    graph = spec.build(config=config, engine=engine)
    logger.info(
        f"Loaded graph from {path}: {len(graph)} nodes, {graph.edge_count()} edges"
    )
    return graph


def graph_to_text(graph: Graph) -> str:
    """
    Render a Graph in the token format.

    Nodes are written one per line in declaration order, followed by one
    edge per line in adjacency order. Parsing the result yields an equal
    graph when node IDs are whitespace-free strings.
    """
    lines = [str(len(graph))]
    lines.extend(str(node) for node in graph.nodes)
    lines.extend(f"{src} {dst} {weight}" for src, dst, weight in graph.edges())
    return "\n".join(lines) + "\n"
