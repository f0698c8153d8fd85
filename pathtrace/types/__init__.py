"""Shared enums and type aliases."""

from __future__ import annotations

from pathtrace.types.base import (
    Algorithm,
    Cost,
    NodeType,
    RoadType,
    SearchStatus,
    StepKind,
)

__all__ = [
    "Algorithm",
    "Cost",
    "NodeType",
    "RoadType",
    "SearchStatus",
    "StepKind",
]
