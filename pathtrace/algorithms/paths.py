"""Path reconstruction from a predecessor map."""

from __future__ import annotations

from typing import List, Mapping, Optional, Sequence, Tuple

from pathtrace.algorithms.adjacency import Adjacency
from pathtrace.types.base import Cost


def reconstruct_path(
    previous: Mapping[str, Optional[str]], goal: str
) -> Tuple[str, ...]:
    """Walk predecessor links from ``goal`` back to the start.

    Predecessors form a tree over settled nodes, so the walk ends at the start
    node, whose predecessor is ``None``. A goal missing from ``previous`` is
    treated as its own start.

    Args:
        previous: Predecessor per node id.
        goal: Node id to walk back from.

    Returns:
        Node ids from start to goal inclusive.
    """
    path: List[str] = []
    node: Optional[str] = goal
    while node is not None:
        path.append(node)
        node = previous.get(node)
    path.reverse()
    return tuple(path)


def path_cost(path: Sequence[str], adjacency: Adjacency) -> Cost:
    """Sum effective costs along ``path``.

    Parallel edges are allowed; the cheapest one between each consecutive pair
    is used, matching what the search loop relaxes.

    Raises:
        ValueError: If two consecutive nodes are not adjacent.
    """
    total: Cost = 0
    for u, v in zip(path, path[1:]):
        costs = [cost for nbr, cost in adjacency.get(u, ()) if nbr == v]
        if not costs:
            raise ValueError(f"No edge between '{u}' and '{v}' on path {list(path)}.")
        total += min(costs)
    return total
