"""NetworkX conversion utilities.

The step-trace engine works on plain node/edge lists. Converting to a
``networkx.Graph`` gives access to NetworkX's connectivity queries and to an
independent shortest-path implementation for cross-checking traces.

Example:
    >>> from pathtrace.lib.nx import to_networkx, reference_cost
    >>> G = to_networkx(scenario.nodes, scenario.edges, scenario.multipliers)
    >>> nx.number_connected_components(G)
    1
    >>> reference_cost(G, scenario.start, scenario.end)
    873.0
"""

from __future__ import annotations

import math
from typing import Iterable, Mapping

import networkx as nx

from pathtrace.algorithms.adjacency import effective_cost
from pathtrace.model.graph import Edge, Node
from pathtrace.types.base import Cost


def to_networkx(
    nodes: Iterable[Node],
    edges: Iterable[Edge],
    multipliers: Mapping[str, float],
) -> nx.Graph:
    """Convert nodes and edges to an undirected ``networkx.Graph``.

    Node attributes: ``x``, ``y``, ``type``, ``label``. Edge attributes:
    ``cost`` (effective cost), ``weight``, ``road_type``, ``id``. Between any
    pair of nodes only the cheapest edge is kept. Dangling edges and edges
    without a multiplier are skipped, mirroring ``build_adjacency``.

    Args:
        nodes: Graph nodes.
        edges: Graph edges.
        multipliers: Road type -> cost multiplier.

    Returns:
        A new NetworkX graph.
    """
    G = nx.Graph()
    for node in nodes:
        G.add_node(node.id, x=node.x, y=node.y, type=node.type, label=node.label)

    for edge in edges:
        if edge.source not in G or edge.target not in G:
            continue
        if edge.road_type not in multipliers:
            continue
        cost = effective_cost(edge, multipliers)
        existing = G.get_edge_data(edge.source, edge.target)
        if existing is not None and existing["cost"] <= cost:
            continue
        G.add_edge(
            edge.source,
            edge.target,
            cost=cost,
            weight=edge.weight,
            road_type=edge.road_type,
            id=edge.id,
        )
    return G


def reference_cost(G: nx.Graph, source: str, target: str) -> Cost:
    """Return the shortest ``cost``-weighted distance computed by NetworkX.

    Returns ``inf`` when either node is missing or no path exists.
    """
    try:
        return nx.dijkstra_path_length(G, source, target, weight="cost")
    except (nx.NetworkXNoPath, nx.NodeNotFound):
        return math.inf
