"""Plain-text rendering of step snapshots and run summaries."""

from __future__ import annotations

import math
import re
from typing import Any, Dict, Iterable, List, Optional

from pathtrace.algorithms.types import TraceResult
from pathtrace.model.graph import Node
from pathtrace.model.step import StepSnapshot


def format_table(
    headers: List[str],
    rows: List[List[str]],
    min_width: int = 6,
    max_col_width: Optional[int] = None,
) -> str:
    """Format data as a simple ASCII table.

    Args:
        headers: Column headers.
        rows: Data rows.
        min_width: Minimum column width.
        max_col_width: Clip cells longer than this (with "...").

    Returns:
        Formatted table string, or "" when there are no rows.
    """
    if not rows:
        return ""

    def clip(val: Any) -> str:
        s = str(val)
        if max_col_width is not None and len(s) > max_col_width:
            return s[: max_col_width - 3] + "..."
        return s

    clipped_headers = [clip(h) for h in headers]
    clipped_rows = [[clip(item) for item in row] for row in rows]

    all_data = [clipped_headers] + clipped_rows
    col_widths = [
        max(max(len(row[col_idx]) for row in all_data), min_width)
        for col_idx in range(len(clipped_headers))
    ]

    def format_row(row_data: List[str]) -> str:
        return "   " + " | ".join(
            f"{item:<{col_widths[i]}}" for i, item in enumerate(row_data)
        ).rstrip()

    lines = [format_row(clipped_headers)]
    lines.append("   " + "-+-".join("-" * width for width in col_widths))
    lines.extend(format_row(row) for row in clipped_rows)
    return "\n".join(lines)


def format_cost(value: Any) -> str:
    """Return a cost with up to three decimals; ``inf`` stays ``inf``.

    Examples:
        10.0 -> "10"; 1309.5 -> "1,309.5"; inf -> "inf".
    """
    try:
        v = float(value)
    except (TypeError, ValueError):
        return str(value)
    if math.isinf(v):
        return "inf"

    s = f"{v:,.3f}"
    if "." in s:
        s = s.rstrip("0").rstrip(".")
    return s


def _natural_key(text: str) -> List[Any]:
    # "n10" sorts after "n9"
    return [int(part) if part.isdigit() else part.lower() for part in re.split(r"(\d+)", text)]


def _status(step: StepSnapshot, node_id: str) -> str:
    if step.path and node_id in step.path:
        return "path"
    if step.current == node_id:
        return "current"
    if step.is_visited(node_id):
        return "visited"
    if step.in_frontier(node_id):
        return "frontier"
    return ""


def render_step(
    step: StepSnapshot,
    nodes: Iterable[Node],
    index: Optional[int] = None,
    total: Optional[int] = None,
) -> str:
    """Render one snapshot as a header line plus a per-node table.

    Rows are ordered by display label with numeric-aware comparison. The status
    column shows the strongest of path, current, visited, frontier.
    """
    nodes = list(nodes)
    labels: Dict[str, str] = {node.id: node.display_label for node in nodes}

    position = ""
    if index is not None:
        position = f" {index + 1}/{total}" if total is not None else f" {index + 1}"
    header = f"Step{position} [{step.kind.name.lower()}]"
    if step.current is not None:
        header += f" current: {labels.get(step.current, step.current)}"
    if step.path is not None:
        if step.path:
            header += " path: " + " -> ".join(labels.get(n, n) for n in step.path)
        else:
            header += " no path"

    rows = []
    for node in sorted(nodes, key=lambda n: _natural_key(n.display_label)):
        prev_id = step.previous.get(node.id)
        rows.append(
            [
                node.display_label,
                format_cost(step.distance(node.id)),
                labels.get(prev_id, prev_id) if prev_id is not None else "-",
                _status(step, node.id),
            ]
        )
    table = format_table(["Node", "Distance", "Previous", "Status"], rows)
    return f"{header}\n{table}" if table else header


def render_summary(result: TraceResult, nodes: Iterable[Node]) -> str:
    """Render the outcome of a run in a few lines."""
    labels = {node.id: node.display_label for node in nodes}
    lines = [
        f"Algorithm: {result.algorithm.name.lower()}",
        f"Start: {labels.get(result.start, result.start)}",
        f"End: {labels.get(result.end, result.end)}",
        f"Steps: {len(result.steps)}",
        f"Settled: {len(result.final_step.visited)}",
    ]
    if result.found:
        route = " -> ".join(labels.get(n, n) for n in result.path)
        lines.append(f"Path: {route}")
        lines.append(f"Cost: {format_cost(result.cost)}")
    else:
        lines.append("Path: none (goal unreachable)")
    return "\n".join(lines)
