from __future__ import annotations

from collections import deque
from typing import TYPE_CHECKING, Iterator, List, Set, Tuple

from spgraph.types.base import NodeID

if TYPE_CHECKING:
    from spgraph.graph.digraph import Graph


def dfs_order(graph: Graph, start: NodeID) -> List[NodeID]:
    """
    Depth-first search.

    Returns nodes in the pre-order a recursive DFS would visit them, following
    each node's adjacency order. Uses an explicit stack of neighbour
    iterators, so deep graphs do not hit the recursion limit.
    """
    if start not in graph:
        return []

    order: List[NodeID] = [start]
    visited: Set[NodeID] = {start}
    stack: List[Tuple[NodeID, Iterator]] = [(start, iter(graph.neighbours(start)))]
    while stack:
        _, neighbours = stack[-1]
        for neighbour in neighbours:
            if neighbour.dest not in visited:
                visited.add(neighbour.dest)
                order.append(neighbour.dest)
                stack.append(
                    (neighbour.dest, iter(graph.neighbours(neighbour.dest)))
                )
                break
        else:
            stack.pop()
    return order


def bfs_order(graph: Graph, start: NodeID) -> List[NodeID]:
    """
    Breadth-first search.

    Nodes are marked visited when enqueued, so each appears once.
    """
    if start not in graph:
        return []

    order: List[NodeID] = []
    visited: Set[NodeID] = {start}
    queue = deque([start])
    while queue:
        node_id = queue.popleft()
        order.append(node_id)
        for neighbour in graph.neighbours(node_id):
            if neighbour.dest not in visited:
                visited.add(neighbour.dest)
                queue.append(neighbour.dest)
    return order
