"""Step-trace shortest-path search.

One loop serves both modes. Uninformed mode (Dijkstra) orders the frontier by
accumulated cost ``g``; informed mode (A*) orders it by ``g + h`` where ``h`` is
the straight-line distance to the goal. Everything else (relaxation, lazy
deletion, snapshot points) is identical.

Snapshots are emitted at these points, in order:
    - INITIAL: before the first dequeue.
    - VISIT: a non-stale node was dequeued; state is shown before it is settled.
    - RELAX: after the node's neighbors were relaxed.
    - FOUND or EXHAUSTED: terminal frame with the path (empty if unreachable).

Stale queue entries for settled nodes are discarded without a snapshot.

Notes:
    All mutable state lives in a ``_SearchState`` created per call. The node and
    edge sequences are read once and never mutated, so concurrent calls on the
    same inputs are independent.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Set, Tuple

from pathtrace.algorithms.adjacency import build_adjacency
from pathtrace.algorithms.heuristic import euclidean
from pathtrace.algorithms.paths import reconstruct_path
from pathtrace.algorithms.queue import PriorityQueue
from pathtrace.algorithms.types import TraceResult
from pathtrace.config import DEFAULT_CONFIG
from pathtrace.logging import get_logger
from pathtrace.model.graph import Edge, Node
from pathtrace.model.step import StepSnapshot
from pathtrace.types.base import Algorithm, Cost, SearchStatus, StepKind

logger = get_logger(__name__)


@dataclass
class _SearchState:
    """Mutable state owned by exactly one search invocation."""

    distances: Dict[str, Cost]
    previous: Dict[str, Optional[str]]
    visited: Set[str] = field(default_factory=set)
    visit_order: List[str] = field(default_factory=list)
    frontier: PriorityQueue[str] = field(default_factory=PriorityQueue)
    status: SearchStatus = SearchStatus.READY

    @classmethod
    def for_nodes(cls, nodes: Sequence[Node], start_id: str) -> "_SearchState":
        distances: Dict[str, Cost] = {node.id: math.inf for node in nodes}
        previous: Dict[str, Optional[str]] = {node.id: None for node in nodes}
        distances[start_id] = 0
        return cls(distances=distances, previous=previous)

    def settle(self, node_id: str) -> None:
        self.visited.add(node_id)
        self.visit_order.append(node_id)

    def snapshot(
        self,
        kind: StepKind,
        current: Optional[str],
        path: Optional[Tuple[str, ...]] = None,
    ) -> StepSnapshot:
        frontier = () if kind.terminal else self.frontier.peek_all()
        return StepSnapshot.capture(
            kind,
            self.visit_order,
            self.distances,
            self.previous,
            current,
            frontier,
            path,
        )


def _search(
    nodes: Sequence[Node],
    edges: Iterable[Edge],
    start_id: str,
    end_id: str,
    algorithm: Algorithm,
    multipliers: Mapping[str, float],
) -> Tuple[List[StepSnapshot], _SearchState]:
    adjacency = build_adjacency(nodes, edges, multipliers)
    by_id: Dict[str, Node] = {node.id: node for node in nodes}
    goal_node = by_id.get(end_id)
    informed = algorithm.informed and goal_node is not None

    def priority(node_id: str, g: Cost) -> Cost:
        if informed:
            node = by_id.get(node_id)
            if node is not None:
                return g + euclidean(node, goal_node)
        return g

    state = _SearchState.for_nodes(nodes, start_id)
    state.frontier.enqueue(start_id, priority(start_id, 0))
    steps: List[StepSnapshot] = [state.snapshot(StepKind.INITIAL, None)]

    logger.debug(
        "Starting %s search from '%s' to '%s' over %d nodes",
        algorithm.name,
        start_id,
        end_id,
        len(nodes),
    )
    state.status = SearchStatus.RUNNING

    while not state.frontier.is_empty():
        current = state.frontier.dequeue()
        if current is None:
            break

        # Lazy deletion: a cheaper entry for this node was settled earlier
        if current in state.visited:
            continue

        steps.append(state.snapshot(StepKind.VISIT, current))
        state.settle(current)

        if current == end_id:
            path = reconstruct_path(state.previous, end_id)
            steps.append(state.snapshot(StepKind.FOUND, None, path))
            state.status = SearchStatus.SUCCEEDED
            logger.debug(
                "%s reached '%s' at cost %s after %d steps (%d settled)",
                algorithm.name,
                end_id,
                state.distances[end_id],
                len(steps),
                len(state.visit_order),
            )
            return steps, state

        current_cost = state.distances[current]
        for neighbor, edge_cost in adjacency.get(current, ()):
            tentative = current_cost + edge_cost
            # Strict: equal-cost alternatives keep the first predecessor found
            if tentative < state.distances[neighbor]:
                state.distances[neighbor] = tentative
                state.previous[neighbor] = current
                state.frontier.enqueue(neighbor, priority(neighbor, tentative))

        steps.append(state.snapshot(StepKind.RELAX, current))

    steps.append(state.snapshot(StepKind.EXHAUSTED, None, ()))
    state.status = SearchStatus.EXHAUSTED
    logger.debug(
        "%s exhausted the frontier without reaching '%s' after %d steps",
        algorithm.name,
        end_id,
        len(steps),
    )
    return steps, state


def generate_steps(
    nodes: Iterable[Node],
    edges: Iterable[Edge],
    start_id: str,
    end_id: str,
    algorithm: Algorithm = Algorithm.DIJKSTRA,
    multipliers: Optional[Mapping[str, float]] = None,
) -> List[StepSnapshot]:
    """Run a shortest-path search and record every observable transition.

    Args:
        nodes: Graph nodes. Positions are only used in informed mode.
        edges: Undirected edges; dangling edges are ignored.
        start_id: Start node id. Not validated.
        end_id: Goal node id. Not validated; an absent goal exhausts the search.
        algorithm: DIJKSTRA (uninformed) or ASTAR (informed).
        multipliers: Road type -> cost multiplier. Defaults to
            ``DEFAULT_CONFIG.multipliers()``.

    Returns:
        Fully materialized list of snapshots; the last one is terminal.

    Notes:
        Informed mode is optimal only if every edge's effective cost is at
        least the distance between its endpoints. Negative costs are not
        supported.
    """
    if multipliers is None:
        multipliers = DEFAULT_CONFIG.multipliers()
    steps, _ = _search(list(nodes), edges, start_id, end_id, algorithm, multipliers)
    return steps


def run_search(
    nodes: Iterable[Node],
    edges: Iterable[Edge],
    start_id: str,
    end_id: str,
    algorithm: Algorithm = Algorithm.DIJKSTRA,
    multipliers: Optional[Mapping[str, float]] = None,
) -> TraceResult:
    """Run the search and summarize the outcome.

    Takes the same arguments as ``generate_steps``.

    Returns:
        TraceResult with the steps, final status, path and the goal's final
        distance as the path cost.
    """
    if multipliers is None:
        multipliers = DEFAULT_CONFIG.multipliers()
    steps, state = _search(list(nodes), edges, start_id, end_id, algorithm, multipliers)
    final = steps[-1]
    return TraceResult(
        algorithm=algorithm,
        start=start_id,
        end=end_id,
        steps=steps,
        status=state.status,
        path=final.path or (),
        cost=final.distance(end_id),
    )
