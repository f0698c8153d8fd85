"""Command-line interface for pathtrace."""

from __future__ import annotations

import argparse
import json
import logging
import math
import sys
import time
from pathlib import Path
from typing import Any, Dict, List, NoReturn, Optional

import networkx as nx

from pathtrace.algorithms.adjacency import effective_cost, find_inadmissible_edges
from pathtrace.algorithms.types import TraceResult
from pathtrace.config import DEFAULT_CONFIG, validate_multiplier
from pathtrace.lib.nx import reference_cost, to_networkx
from pathtrace.logging import get_logger, set_global_log_level
from pathtrace.playback import StepPlayer
from pathtrace.presets import list_presets, load_preset
from pathtrace.report import format_cost, format_table, render_step, render_summary
from pathtrace.scenario import Scenario
from pathtrace.types.base import Algorithm

logger = get_logger(__name__)


def _parse_multipliers(assignments: Optional[List[str]]) -> Dict[str, float]:
    """Parse ``TYPE=VALUE`` strings into a multiplier table.

    Raises:
        ValueError: On a missing ``=``, or a value that is not a positive,
            finite number.
    """
    table: Dict[str, float] = {}
    for item in assignments or []:
        road_type, sep, raw = item.partition("=")
        if not sep or not road_type.strip():
            raise ValueError(f"Invalid multiplier '{item}', expected TYPE=VALUE")
        try:
            value = float(raw)
        except ValueError:
            raise ValueError(
                f"Invalid multiplier value '{raw}' for road type '{road_type}'"
            ) from None
        table[road_type.strip()] = validate_multiplier(road_type.strip(), value)
    return table


def _load_scenario(path: Optional[Path], preset: Optional[str]) -> Scenario:
    if preset is not None:
        logger.info(f"Loading preset: {preset}")
        return load_preset(preset)
    if path is None:
        raise ValueError("Either a scenario file or --preset is required")
    logger.info(f"Loading scenario from: {path}")
    return Scenario.from_yaml(path.read_text())


def _result_to_dict(scenario: Scenario, result: TraceResult) -> Dict[str, Any]:
    return {
        "scenario": scenario.name,
        "algorithm": result.algorithm.name.lower(),
        "start": result.start,
        "end": result.end,
        "status": result.status.name.lower(),
        "path": list(result.path),
        "cost": None if math.isinf(result.cost) else result.cost,
        "steps": [step.to_dict() for step in result.steps],
    }


def _fail(message: str) -> NoReturn:
    logger.error(message)
    print(f"ERROR: {message}")
    sys.exit(1)


def _run(args: argparse.Namespace) -> None:
    """Run the search for a scenario and report the trace."""
    try:
        scenario = _load_scenario(args.scenario, args.preset)
        algorithm = (
            Algorithm.from_string(args.algorithm) if args.algorithm else None
        )
        multipliers = _parse_multipliers(args.multiplier)

        result = scenario.run(
            algorithm=algorithm,
            multipliers=multipliers,
            start=args.start,
            end=args.end,
        )
        logger.info(
            f"{result.algorithm.name} produced {len(result.steps)} steps "
            f"({result.status.name.lower()})"
        )

        print(render_summary(result, scenario.nodes))

        total = len(result.steps)
        if args.animate:
            player = StepPlayer(result.steps)
            for frame in player.frames():
                print()
                print(render_step(frame, scenario.nodes, player.index, total))
                if not player.at_end:
                    time.sleep(args.interval)
        elif args.steps:
            for idx, step in enumerate(result.steps):
                print()
                print(render_step(step, scenario.nodes, idx, total))

        if args.results is not None or args.stdout:
            json_str = json.dumps(_result_to_dict(scenario, result), indent=2)
            if args.results is not None:
                args.results.parent.mkdir(parents=True, exist_ok=True)
                args.results.write_text(json_str)
                logger.info(f"Results written to: {args.results}")
                print(f"Results written to: {args.results}")
            if args.stdout:
                print(json_str)

    except FileNotFoundError:
        _fail(f"Scenario file not found: {args.scenario}")
    except Exception as e:
        _fail(f"Failed to run scenario: {type(e).__name__}: {e}")


def _inspect(args: argparse.Namespace) -> None:
    """Print graph structure, connectivity and admissibility diagnostics."""
    try:
        scenario = _load_scenario(args.scenario, args.preset)
    except FileNotFoundError:
        _fail(f"Scenario file not found: {args.scenario}")
    except Exception as e:
        _fail(f"Failed to load scenario: {type(e).__name__}: {e}")

    multipliers = scenario.multipliers
    title = scenario.name or (str(args.scenario) if args.scenario else args.preset)
    print(f"Scenario: {title}")
    if scenario.description:
        print(f"  {scenario.description}")
    print(f"Nodes: {len(scenario.nodes)}  Edges: {len(scenario.edges)}")
    print(f"Start: {scenario.start}  End: {scenario.end}")
    print(f"Algorithm: {scenario.algorithm.name.lower()}")
    print(
        "Multipliers: "
        + ", ".join(f"{k}={format_cost(v)}" for k, v in sorted(multipliers.items()))
    )

    node_rows = [
        [node.id, node.display_label, node.type, format_cost(node.x), format_cost(node.y)]
        for node in scenario.nodes
    ]
    if node_rows:
        print("\nNodes:")
        print(format_table(["ID", "Label", "Type", "X", "Y"], node_rows))

    edge_rows = []
    for edge in scenario.edges:
        mult = multipliers.get(edge.road_type)
        cost = effective_cost(edge, multipliers) if mult is not None else None
        edge_rows.append(
            [
                edge.id,
                edge.source,
                edge.target,
                format_cost(edge.weight),
                edge.road_type,
                format_cost(cost) if cost is not None else "n/a",
            ]
        )
    if edge_rows:
        print("\nEdges:")
        print(
            format_table(
                ["ID", "Source", "Target", "Weight", "Road", "Cost"], edge_rows
            )
        )

    G = to_networkx(scenario.nodes, scenario.edges, multipliers)
    print(f"\nConnected components: {nx.number_connected_components(G)}")
    ref = reference_cost(G, scenario.start, scenario.end)
    if math.isinf(ref):
        print(f"End '{scenario.end}' is not reachable from start '{scenario.start}'")
    else:
        print(f"Shortest cost from start to end: {format_cost(ref)}")

    dangling = [
        e.id for e in scenario.edges if e.source not in G or e.target not in G
    ]
    if dangling:
        print(f"Edges with unknown endpoints (ignored): {', '.join(dangling)}")

    inadmissible = find_inadmissible_edges(scenario.nodes, scenario.edges, multipliers)
    if inadmissible:
        logger.warning(
            f"{len(inadmissible)} edge(s) are cheaper than their straight-line "
            "length; A* may return a suboptimal path"
        )
        rows = [
            [
                item.edge.id,
                format_cost(item.cost),
                format_cost(item.distance),
                format_cost(item.deficit),
            ]
            for item in inadmissible
        ]
        print("\nEdges cheaper than straight-line distance:")
        print(format_table(["ID", "Cost", "Distance", "Deficit"], rows))
    else:
        print("Heuristic admissible: yes")


def _presets(_args: argparse.Namespace) -> None:
    for name in list_presets():
        scenario = load_preset(name)
        print(
            f"{name}: {scenario.name} ({len(scenario.nodes)} nodes, "
            f"{len(scenario.edges)} edges)"
        )


def _add_source_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "scenario", type=Path, nargs="?", default=None, help="Path to scenario YAML"
    )
    parser.add_argument(
        "--preset",
        "-p",
        default=None,
        help="Use a bundled preset instead of a scenario file",
    )


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``pathtrace`` command.

    Args:
        argv: Optional list of command-line arguments. If ``None``, ``sys.argv``
            is used.
    """
    parser = argparse.ArgumentParser(
        prog="pathtrace",
        description="Trace shortest-path searches step by step.",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--quiet", action="store_true", help="Suppress console output (logs only)"
    )

    subparsers = parser.add_subparsers(
        dest="command",
        required=True,
        title="Available commands",
        metavar="{run,inspect,presets}",
        help="Available commands",
    )

    run_parser = subparsers.add_parser("run", help="Run a search and show the trace")
    _add_source_arguments(run_parser)
    run_parser.add_argument(
        "--algorithm",
        "-a",
        default=None,
        help="dijkstra or astar (default: the scenario's algorithm)",
    )
    run_parser.add_argument("--start", default=None, help="Override start node id")
    run_parser.add_argument("--end", default=None, help="Override end node id")
    run_parser.add_argument(
        "--multiplier",
        "-m",
        action="append",
        metavar="TYPE=VALUE",
        help="Override a road-type multiplier (repeatable)",
    )
    run_parser.add_argument(
        "--steps", action="store_true", help="Print every step as a table"
    )
    run_parser.add_argument(
        "--animate",
        action="store_true",
        help="Print steps one at a time with a delay between them",
    )
    run_parser.add_argument(
        "--interval",
        type=float,
        default=DEFAULT_CONFIG.playback_interval,
        help="Seconds between frames with --animate",
    )
    run_parser.add_argument(
        "--results",
        "-r",
        type=Path,
        default=None,
        help="Export the trace to a JSON file",
    )
    run_parser.add_argument(
        "--stdout", action="store_true", help="Print the JSON trace to stdout"
    )

    inspect_parser = subparsers.add_parser(
        "inspect", help="Inspect a scenario's graph and connectivity"
    )
    _add_source_arguments(inspect_parser)

    subparsers.add_parser("presets", help="List bundled presets")

    effective_args = sys.argv[1:] if argv is None else argv

    if not effective_args:
        parser.print_help()
        raise SystemExit(0)

    args = parser.parse_args(effective_args)

    if args.verbose:
        set_global_log_level(logging.DEBUG)
        logger.debug("Debug logging enabled")
    elif args.quiet:
        set_global_log_level(logging.WARNING)
    else:
        set_global_log_level(logging.INFO)

    if args.command == "run":
        _run(args)
    elif args.command == "inspect":
        _inspect(args)
    elif args.command == "presets":
        _presets(args)


if __name__ == "__main__":
    main()
