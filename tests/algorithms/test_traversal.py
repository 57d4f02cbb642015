from spgraph.algorithms.traversal import bfs_order, dfs_order
from spgraph.config import GraphConfig
from spgraph.graph.digraph import Graph
from spgraph.types.base import AdjacencyOrder


def _tree() -> Graph:
    #        A
    #      /   \
    #     B     C
    #    / \     \
    #   D   E     F
    return Graph(
        ["A", "B", "C", "D", "E", "F"],
        [
            ("A", "C", 1),
            ("A", "B", 1),
            ("B", "E", 1),
            ("B", "D", 1),
            ("C", "F", 1),
        ],
    )


def test_dfs_preorder_follows_sorted_adjacency():
    assert dfs_order(_tree(), "A") == ["A", "B", "D", "E", "C", "F"]


def test_bfs_level_order():
    assert bfs_order(_tree(), "A") == ["A", "B", "C", "D", "E", "F"]


def test_insertion_order_changes_traversal_order():
    g = Graph(
        ["A", "B", "C"],
        [("A", "C", 1), ("A", "B", 1)],
        config=GraphConfig(adjacency_order=AdjacencyOrder.INSERTION),
    )
    assert dfs_order(g, "A") == ["A", "C", "B"]
    assert bfs_order(g, "A") == ["A", "C", "B"]


def test_isolated_node(isolated):
    assert dfs_order(isolated, "X") == ["X"]
    assert bfs_order(isolated, "X") == ["X"]


def test_undeclared_start_is_empty(abcd):
    assert dfs_order(abcd, "nope") == []
    assert bfs_order(abcd, "nope") == []


def test_cycles_visit_each_node_once():
    g = Graph(
        ["A", "B", "C"],
        [("A", "B", 1), ("B", "C", 1), ("C", "A", 1), ("C", "B", 1)],
    )
    assert dfs_order(g, "B") == ["B", "C", "A"]
    assert bfs_order(g, "B") == ["B", "C", "A"]


def test_only_reachable_nodes(two_components):
    assert dfs_order(two_components, "A") == ["A", "B"]
    assert bfs_order(two_components, "C") == ["C", "D"]


def test_dfs_differs_from_bfs():
    # A -> B -> D, A -> C
    g = Graph(["A", "B", "C", "D"], [("A", "B", 1), ("A", "C", 1), ("B", "D", 1)])
    assert dfs_order(g, "A") == ["A", "B", "D", "C"]
    assert bfs_order(g, "A") == ["A", "B", "C", "D"]


def test_undeclared_destination_is_visited():
    g = Graph(["A"], [("A", "Z", 1)])
    assert dfs_order(g, "A") == ["A", "Z"]
    assert bfs_order(g, "A") == ["A", "Z"]


def test_deep_chain_does_not_recurse():
    n = 5000
    nodes = list(range(n))
    edges = [(i, i + 1, 1) for i in range(n - 1)]
    g = Graph(nodes, edges)
    assert dfs_order(g, 0) == nodes
