"""Step-trace pathfinding engine."""

from __future__ import annotations

from pathtrace.algorithms.adjacency import (
    Adjacency,
    InadmissibleEdge,
    build_adjacency,
    effective_cost,
    find_inadmissible_edges,
)
from pathtrace.algorithms.heuristic import euclidean
from pathtrace.algorithms.paths import path_cost, reconstruct_path
from pathtrace.algorithms.queue import PriorityQueue
from pathtrace.algorithms.search import generate_steps, run_search
from pathtrace.algorithms.types import TraceResult

__all__ = [
    "Adjacency",
    "InadmissibleEdge",
    "PriorityQueue",
    "TraceResult",
    "build_adjacency",
    "effective_cost",
    "euclidean",
    "find_inadmissible_edges",
    "generate_steps",
    "path_cost",
    "reconstruct_path",
    "run_search",
]
