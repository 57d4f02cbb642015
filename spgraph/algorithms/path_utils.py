from __future__ import annotations

from typing import Dict, List

from spgraph.model.path import Path
from spgraph.types.base import Cost, NodeID


def reconstruct_path(
    src_node: NodeID,
    dst_node: NodeID,
    pred: Dict[NodeID, NodeID],
    cost: Cost,
) -> Path:
    """
    Build the Path from src_node to dst_node by walking a predecessor map.

    Starts at dst_node and repeatedly steps to its predecessor until a node
    without one (src_node) is reached, then reverses the collected nodes.

    Args:
        src_node: Source node of the SPF run.
        dst_node: Node to build the path for.
        pred: Single-predecessor map from an SPF run. The source has no entry.
        cost: Final distance of dst_node.

    Returns:
        The reconstructed Path.

    Raises:
        ValueError: If the walk does not terminate at src_node.
    """
    nodes: List[NodeID] = [dst_node]
    seen = {dst_node}
    current = dst_node
    while current in pred:
        current = pred[current]
        if current in seen:
            raise ValueError(f"Predecessor cycle detected at node '{current}'.")
        seen.add(current)
        nodes.append(current)

    if current != src_node:
        raise ValueError(
            f"Predecessor walk from '{dst_node}' ended at '{current}', "
            f"not at source '{src_node}'."
        )

    nodes.reverse()
    return Path(tuple(nodes), cost)
