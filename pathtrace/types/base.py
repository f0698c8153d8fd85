"""Base enums and aliases for the step-trace search engine."""

from __future__ import annotations

from enum import Enum, IntEnum
from typing import Union

#: Represents a numeric path cost (weight times road multiplier).
Cost = Union[int, float]


class Algorithm(IntEnum):
    """Search mode. Both modes share one loop and differ only in priority."""

    #: Uninformed search: priority is the accumulated cost ``g``.
    DIJKSTRA = 1
    #: Informed search: priority is ``g + h`` with straight-line ``h``.
    ASTAR = 2

    @classmethod
    def from_string(cls, value: str) -> "Algorithm":
        """Parse a string into an Algorithm enum value.

        Accepts the member names case-insensitively, plus ``"a*"`` and
        ``"a-star"`` as spellings of ASTAR.

        Args:
            value: Algorithm name (e.g., "dijkstra", "AStar", "a*").

        Returns:
            The corresponding Algorithm member.

        Raises:
            ValueError: If the string doesn't match any member.
        """
        key = value.strip().upper().replace("*", "STAR").replace("-", "")
        try:
            return cls[key]
        except KeyError:
            valid = ", ".join(e.name.lower() for e in cls)
            raise ValueError(
                f"Invalid algorithm '{value}'. Valid values are: {valid}"
            ) from None

    @property
    def informed(self) -> bool:
        return self is Algorithm.ASTAR


class RoadType(str, Enum):
    """Road categories with a default cost multiplier in ``pathtrace.config``.

    Edges carry road types as plain strings, so a multiplier table may also
    define types that are not listed here.
    """

    HIGHWAY = "Highway"
    CITY = "City"
    DIRT = "Dirt"


class NodeType(str, Enum):
    """Cosmetic node categories used by presets and editors."""

    HOUSE = "House"
    SCHOOL = "School"
    HOSPITAL = "Hospital"
    POLICE = "Police"
    PARK = "Park"
    SHOP = "Shop"
    FACTORY = "Factory"
    AIRPORT = "Airport"
    FIRE_STATION = "FireStation"
    HOTEL = "Hotel"


class StepKind(IntEnum):
    """Observable transition recorded by a step snapshot."""

    #: Before the first dequeue; frontier holds only the start node.
    INITIAL = 1
    #: A node was dequeued and is about to be settled.
    VISIT = 2
    #: The current node's neighbors were relaxed.
    RELAX = 3
    #: Terminal snapshot: goal settled, path reconstructed.
    FOUND = 4
    #: Terminal snapshot: frontier exhausted without reaching the goal.
    EXHAUSTED = 5

    @property
    def terminal(self) -> bool:
        return self in (StepKind.FOUND, StepKind.EXHAUSTED)


class SearchStatus(IntEnum):
    """Lifecycle of one search invocation."""

    READY = 1
    RUNNING = 2
    SUCCEEDED = 3
    EXHAUSTED = 4
