"""Immutable snapshot of the search state at one observable moment.

A snapshot owns private copies of the engine's maps and exposes them through
read-only views, so later engine mutation cannot reach earlier snapshots.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Iterable, Mapping, Optional, Tuple

from pathtrace.types.base import Cost, StepKind


@dataclass(frozen=True)
class StepSnapshot:
    """One frame of a step-trace run.

    Attributes:
        kind: Transition that produced this frame.
        visited: Settled node ids in the order they were settled.
        distances: Best known cost from start per node id (``inf`` if unknown).
        previous: Predecessor per node id (``None`` for start and unreached).
        current: Node being processed, or ``None`` on initial/terminal frames.
        frontier: Queued node ids in dequeue order, stale entries included.
        path: Reconstructed path on terminal frames (empty when unreachable);
            ``None`` on every other frame.
    """

    kind: StepKind
    visited: Tuple[str, ...]
    # Read-only views are unhashable; equality still compares them
    distances: Mapping[str, Cost] = field(hash=False)
    previous: Mapping[str, Optional[str]] = field(hash=False)
    current: Optional[str]
    frontier: Tuple[str, ...]
    path: Optional[Tuple[str, ...]] = None

    @classmethod
    def capture(
        cls,
        kind: StepKind,
        visited: Iterable[str],
        distances: Mapping[str, Cost],
        previous: Mapping[str, Optional[str]],
        current: Optional[str],
        frontier: Iterable[str],
        path: Optional[Iterable[str]] = None,
    ) -> "StepSnapshot":
        """Build a snapshot from live engine state, copying every container."""
        return cls(
            kind=kind,
            visited=tuple(visited),
            distances=MappingProxyType(dict(distances)),
            previous=MappingProxyType(dict(previous)),
            current=current,
            frontier=tuple(frontier),
            path=None if path is None else tuple(path),
        )

    @property
    def is_terminal(self) -> bool:
        return self.path is not None

    def distance(self, node_id: str) -> Cost:
        """Return the recorded distance for ``node_id``, ``inf`` if absent."""
        return self.distances.get(node_id, math.inf)

    def is_visited(self, node_id: str) -> bool:
        return node_id in self.visited

    def in_frontier(self, node_id: str) -> bool:
        return node_id in self.frontier

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-friendly dict; infinite distances become ``None``."""
        return {
            "kind": self.kind.name.lower(),
            "visited": list(self.visited),
            "distances": {
                node_id: (None if math.isinf(dist) else dist)
                for node_id, dist in self.distances.items()
            },
            "previous": dict(self.previous),
            "current": self.current,
            "frontier": list(self.frontier),
            "path": None if self.path is None else list(self.path),
        }
