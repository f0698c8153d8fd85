"""pathtrace: step-trace shortest-path search for visualization.

pathtrace runs Dijkstra or A* over a small undirected road graph and records
every observable state transition as an immutable snapshot, so an editor can
replay the search frame by frame.

Primary API:
    generate_steps() - Run a search and return the list of step snapshots
    run_search() - Same, plus status, path and cost in a TraceResult
    Scenario - Graph, start/end pair and settings loaded from YAML
    load_preset() - Bundled example scenarios
    StepPlayer - Index-based playback over a step sequence

Example:
    from pathtrace import Algorithm, Edge, Node, generate_steps

    nodes = [Node("A", 0, 0), Node("B", 10, 0)]
    edges = [Edge("e1", "A", "B", weight=10, road_type="City")]
    steps = generate_steps(nodes, edges, "A", "B", Algorithm.ASTAR, {"City": 1.0})
    steps[-1].path  # ("A", "B")
"""

from __future__ import annotations

from pathtrace import cli, logging
from pathtrace._version import __version__
from pathtrace.algorithms import (
    PriorityQueue,
    TraceResult,
    build_adjacency,
    generate_steps,
    reconstruct_path,
    run_search,
)
from pathtrace.config import DEFAULT_CONFIG, EngineConfig
from pathtrace.model import Edge, Node, StepSnapshot
from pathtrace.playback import StepPlayer
from pathtrace.presets import list_presets, load_preset
from pathtrace.scenario import Scenario
from pathtrace.types import Algorithm, NodeType, RoadType, SearchStatus, StepKind

__all__ = [
    # Version
    "__version__",
    # Model
    "Node",
    "Edge",
    "StepSnapshot",
    "Scenario",
    # Engine
    "generate_steps",
    "run_search",
    "build_adjacency",
    "reconstruct_path",
    "PriorityQueue",
    "TraceResult",
    # Types
    "Algorithm",
    "NodeType",
    "RoadType",
    "SearchStatus",
    "StepKind",
    # Configuration
    "EngineConfig",
    "DEFAULT_CONFIG",
    # Presets and playback
    "list_presets",
    "load_preset",
    "StepPlayer",
    # Utilities
    "cli",
    "logging",
]
