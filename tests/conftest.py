"""Shared graph fixtures.

Each fixture returns ``(nodes, edges)``. Positions are chosen so every edge's
weight is at least the straight-line distance between its ends, keeping the A*
heuristic admissible unless a test says otherwise.
"""

from __future__ import annotations

import pytest

from pathtrace.model.graph import Edge, Node

UNIT = {"City": 1.0}


@pytest.fixture
def unit_multipliers():
    return dict(UNIT)


@pytest.fixture
def pair():
    #   A ───[10]─── B
    nodes = [Node("A", 0, 0), Node("B", 10, 0)]
    edges = [Edge("e1", "A", "B", 10, "City")]
    return nodes, edges


@pytest.fixture
def line_with_shortcut():
    #   A ──[5]── B ──[5]── C
    #   └──────────[20]─────┘
    nodes = [Node("A", 0, 0), Node("B", 5, 0), Node("C", 10, 0)]
    edges = [
        Edge("e1", "A", "B", 5, "City"),
        Edge("e2", "B", "C", 5, "City"),
        Edge("e3", "A", "C", 20, "City"),
    ]
    return nodes, edges


@pytest.fixture
def line_with_tail(line_with_shortcut):
    # Same as line_with_shortcut plus C ──[100]── D. Reaching D forces the
    # stale C entry (priority 20) to surface before D is dequeued.
    nodes, edges = line_with_shortcut
    nodes = nodes + [Node("D", 110, 0)]
    edges = edges + [Edge("e4", "C", "D", 100, "City")]
    return nodes, edges


@pytest.fixture
def diamond():
    #        B
    #   [1] / \ [1]
    #      A   D
    #   [1] \ / [1]
    #        C
    nodes = [Node("A", 0, 0), Node("B", 0.5, -0.5), Node("C", 0.5, 0.5), Node("D", 1, 0)]
    edges = [
        Edge("ab", "A", "B", 1, "City"),
        Edge("ac", "A", "C", 1, "City"),
        Edge("bd", "B", "D", 1, "City"),
        Edge("cd", "C", "D", 1, "City"),
    ]
    return nodes, edges


@pytest.fixture
def two_components():
    #   A ──[3]── B        C ──[4]── D
    nodes = [Node("A", 0, 0), Node("B", 3, 0), Node("C", 20, 0), Node("D", 24, 0)]
    edges = [Edge("e1", "A", "B", 3, "City"), Edge("e2", "C", "D", 4, "City")]
    return nodes, edges


@pytest.fixture
def road_choice():
    #          H (Highway x1)
    #   [142] /  \ [142]
    #        S    T
    #   [142] \  / [142]
    #          D (Dirt x2.5)
    #
    # Both routes have the same base weight; dirt edges are listed first so the
    # dirt route is discovered first.
    nodes = [
        Node("S", 0, 0),
        Node("T", 200, 0),
        Node("H", 100, -100),
        Node("D", 100, 100),
    ]
    edges = [
        Edge("sd", "S", "D", 142, "Dirt"),
        Edge("dt", "D", "T", 142, "Dirt"),
        Edge("sh", "S", "H", 142, "Highway"),
        Edge("ht", "H", "T", 142, "Highway"),
    ]
    return nodes, edges
