"""Result containers for step-trace searches."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

from pathtrace.model.step import StepSnapshot
from pathtrace.types.base import Algorithm, Cost, SearchStatus


@dataclass(frozen=True)
class TraceResult:
    """Step sequence of one run plus its outcome.

    Attributes:
        algorithm: Mode the run used.
        start: Start node id.
        end: Goal node id.
        steps: Snapshots in production order; the last one is terminal.
        status: SUCCEEDED if the goal was settled, EXHAUSTED otherwise.
        path: Node ids from start to end, empty when unreachable.
        cost: Final distance of ``end`` (``inf`` when unreachable).
    """

    algorithm: Algorithm
    start: str
    end: str
    steps: List[StepSnapshot]
    status: SearchStatus
    path: Tuple[str, ...]
    cost: Cost

    @property
    def found(self) -> bool:
        return self.status is SearchStatus.SUCCEEDED

    @property
    def final_step(self) -> StepSnapshot:
        return self.steps[-1]
