"""Straight-line distance heuristic for informed search."""

from __future__ import annotations

import math

from pathtrace.model.graph import Node


def euclidean(a: Node, b: Node) -> float:
    """Return the Euclidean distance between two node positions.

    The estimate is admissible only while every edge's effective cost is at
    least the pixel distance between its endpoints. Editors keep this by
    defaulting edge weights to that distance, and multipliers of 1 or more
    preserve it. The engine does not enforce it; see
    ``pathtrace.algorithms.adjacency.find_inadmissible_edges``.
    """
    return math.hypot(a.x - b.x, a.y - b.y)
