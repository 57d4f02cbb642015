"""Command-line interface for spgraph."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Any, List, Optional

from spgraph.config import GraphConfig
from spgraph.graph.digraph import Graph
from spgraph.io import load_graph
from spgraph.logging import get_logger, set_global_log_level
from spgraph.types.base import UNREACHABLE

logger = get_logger(__name__)


def _format_table(headers: List[str], rows: List[List[str]], min_width: int = 6) -> str:
    """Format data as a simple ASCII table.

    Args:
        headers: Column headers
        rows: Data rows
        min_width: Minimum column width

    Returns:
        Formatted table string, or an empty string when there are no rows.
    """
    if not rows:
        return ""

    all_data = [headers] + rows
    col_widths = [
        max(max(len(str(row[i])) for row in all_data), min_width)
        for i in range(len(headers))
    ]

    def format_row(row_data: List[str]) -> str:
        return "   " + " | ".join(
            f"{str(item):<{col_widths[i]}}" for i, item in enumerate(row_data)
        ).rstrip()

    lines = [format_row(headers)]
    lines.append("   " + "-+-".join("-" * width for width in col_widths))
    lines.extend(format_row(row) for row in rows)
    return "\n".join(lines)


def _format_cost(value: Any) -> str:
    """Return a distance as text; whole numbers print without decimals.

    Examples:
        4 -> "4"; 2.0 -> "2"; 2.5 -> "2.5"; inf -> "unreachable".
    """
    if value == UNREACHABLE:
        return "unreachable"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _inspect(graph: Graph) -> None:
    print(f"Nodes: {len(graph)}")
    print(f"Edges: {graph.edge_count()}")
    rows = [
        [str(node), ", ".join(f"{n.dest}({n.weight})" for n in neighbours) or "-"]
        for node, neighbours in graph.adjacency.items()
    ]
    table = _format_table(["Node", "Neighbours"], rows)
    if table:
        print(table)


def _distance(graph: Graph, source: str, dest: str) -> None:
    print(_format_cost(graph.shortest_distance(source, dest)))


def _path(graph: Graph, source: str, dest: str) -> None:
    path = graph.shortest_path(source, dest)
    if path is None:
        print("no path")
        return
    print(f"{' -> '.join(str(n) for n in path)} (cost {_format_cost(path.cost)})")


def _traverse(graph: Graph, start: str, breadth_first: bool) -> None:
    order = graph.bfs_order(start) if breadth_first else graph.dfs_order(start)
    if not order:
        logger.warning(f"Start node '{start}' is not declared in the graph")
    print(" ".join(str(n) for n in order))


def _run_command(args: argparse.Namespace) -> None:
    """Load the graph file named in args and dispatch the subcommand.

    Exits with status 1 if the file is missing or malformed.
    """
    try:
        config = GraphConfig.from_names(
            adjacency_order=args.adjacency_order, engine=args.engine
        )
        graph = load_graph(args.file, config=config)
    except FileNotFoundError:
        logger.error(f"Graph file not found: {args.file}")
        print(f"ERROR: Graph file not found: {args.file}")
        sys.exit(1)
    except ValueError as e:
        logger.error(f"Failed to load graph: {type(e).__name__}: {e}")
        print(f"ERROR: Failed to load graph: {e}")
        sys.exit(1)

    if args.command == "inspect":
        _inspect(graph)
    elif args.command == "distance":
        _distance(graph, args.source, args.dest)
    elif args.command == "path":
        _path(graph, args.source, args.dest)
    elif args.command in ("dfs", "bfs"):
        _traverse(graph, args.start, breadth_first=args.command == "bfs")


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``spgraph`` command.

    Args:
        argv: Optional list of command-line arguments. If ``None``, ``sys.argv``
            is used.
    """
    parser = argparse.ArgumentParser(
        prog="spgraph",
        description="Query shortest paths and traversals of a weighted digraph.",
    )

    # Global options
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--quiet", action="store_true", help="Only log warnings and errors"
    )
    parser.add_argument(
        "--adjacency-order",
        choices=["sorted", "insertion"],
        default=None,
        help="Ordering of each node's outgoing edges (default: sorted)",
    )
    parser.add_argument(
        "--engine",
        choices=["heap", "linear"],
        default=None,
        help="Shortest-path engine (default: heap)",
    )

    subparsers = parser.add_subparsers(
        dest="command",
        required=True,
        title="Available commands",
        metavar="{inspect,distance,path,dfs,bfs}",
        help="Available commands",
    )

    inspect_parser = subparsers.add_parser(
        "inspect", help="Show node/edge counts and the adjacency table"
    )
    inspect_parser.add_argument("file", type=Path, help="Path to graph text file")

    for name, help_text in (
        ("distance", "Print the shortest distance between two nodes"),
        ("path", "Print the shortest path between two nodes"),
    ):
        p = subparsers.add_parser(name, help=help_text)
        p.add_argument("file", type=Path, help="Path to graph text file")
        p.add_argument("source", help="Source node")
        p.add_argument("dest", help="Destination node")

    for name, help_text in (
        ("dfs", "Print the depth-first visiting order"),
        ("bfs", "Print the breadth-first visiting order"),
    ):
        p = subparsers.add_parser(name, help=help_text)
        p.add_argument("file", type=Path, help="Path to graph text file")
        p.add_argument("start", help="Start node")

    effective_args = sys.argv[1:] if argv is None else argv

    # If no arguments are provided, show help and exit cleanly
    if not effective_args:
        parser.print_help()
        raise SystemExit(0)

    args = parser.parse_args(effective_args)

    if args.verbose:
        set_global_log_level(logging.DEBUG)
        logger.debug("Debug logging enabled")
    elif args.quiet:
        set_global_log_level(logging.WARNING)
    else:
        set_global_log_level(logging.INFO)

    _run_command(args)


if __name__ == "__main__":
    main()
