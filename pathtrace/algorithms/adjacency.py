"""Undirected adjacency construction with road-type cost multipliers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, List, Mapping, Optional, Tuple

from pathtrace.algorithms.heuristic import euclidean
from pathtrace.logging import get_logger
from pathtrace.model.graph import Edge, Node
from pathtrace.types.base import Cost

logger = get_logger(__name__)

#: Node id -> list of (neighbor id, effective cost).
Adjacency = Dict[str, List[Tuple[str, Cost]]]


def effective_cost(edge: Edge, multipliers: Mapping[str, float]) -> Cost:
    """Return ``edge.weight * multipliers[edge.road_type]``.

    Raises:
        KeyError: If the edge's road type has no multiplier.
    """
    return edge.weight * multipliers[edge.road_type]


def build_adjacency(
    nodes: Iterable[Node],
    edges: Iterable[Edge],
    multipliers: Mapping[str, float],
) -> Adjacency:
    """Build a symmetric adjacency map from node and edge lists.

    Every node gets an entry, possibly empty. Each edge contributes
    ``(target, cost)`` to its source and ``(source, cost)`` to its target, so
    the map is symmetric. An edge with an endpoint that is not a known node id
    contributes nothing. An edge whose road type has no multiplier is dropped
    with a warning.

    Args:
        nodes: Graph nodes.
        edges: Undirected edges between nodes.
        multipliers: Road type -> cost multiplier.

    Returns:
        Mapping of node id to neighbor entries, in edge order.
    """
    adjacency: Adjacency = {node.id: [] for node in nodes}

    for edge in edges:
        if edge.source not in adjacency or edge.target not in adjacency:
            continue
        if edge.road_type not in multipliers:
            logger.warning(
                "Edge '%s' has road type '%s' with no multiplier; ignoring it",
                edge.id,
                edge.road_type,
            )
            continue
        cost = effective_cost(edge, multipliers)
        adjacency[edge.source].append((edge.target, cost))
        adjacency[edge.target].append((edge.source, cost))

    return adjacency


@dataclass(frozen=True)
class InadmissibleEdge:
    """An edge whose effective cost is below the straight-line distance."""

    edge: Edge
    cost: Cost
    distance: float

    @property
    def deficit(self) -> float:
        return self.distance - self.cost


def find_inadmissible_edges(
    nodes: Iterable[Node],
    edges: Iterable[Edge],
    multipliers: Mapping[str, float],
    tolerance: float = 1.0,
) -> List[InadmissibleEdge]:
    """Report edges that let the straight-line heuristic overestimate.

    Informed search is optimal only if no edge is cheaper than the distance
    between its endpoints. This check is advisory; the search loop runs the
    same way whether or not any edge is reported.

    Args:
        nodes: Graph nodes.
        edges: Graph edges; dangling edges and unknown road types are skipped.
        multipliers: Road type -> cost multiplier.
        tolerance: Deficit (in cost units) tolerated before reporting. The
            default absorbs weights rounded to whole pixels.

    Returns:
        Offending edges in input order.
    """
    by_id: Dict[str, Node] = {node.id: node for node in nodes}
    found: List[InadmissibleEdge] = []
    for edge in edges:
        src: Optional[Node] = by_id.get(edge.source)
        dst: Optional[Node] = by_id.get(edge.target)
        if src is None or dst is None or edge.road_type not in multipliers:
            continue
        cost = effective_cost(edge, multipliers)
        dist = euclidean(src, dst)
        if dist - cost > tolerance:
            found.append(InadmissibleEdge(edge=edge, cost=cost, distance=dist))
    return found
