"""Node and Edge records consumed by the search engine.

Both are frozen: an editor builds a fresh list of records for every run and the
engine never mutates them.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict

from pathtrace.types.base import NodeType, RoadType


@dataclass(frozen=True)
class Node:
    """A positioned graph node.

    Attributes:
        id (str): Unique identifier.
        x (float): Horizontal position (canvas pixels).
        y (float): Vertical position (canvas pixels).
        type (str): Cosmetic category tag; ignored by the algorithm.
        label (str): Display label; falls back to ``id`` when empty.
    """

    id: str
    x: float
    y: float
    type: str = NodeType.HOUSE.value
    label: str = ""

    @property
    def display_label(self) -> str:
        return self.label or self.id

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "x": self.x,
            "y": self.y,
            "type": self.type,
            "label": self.label,
        }


@dataclass(frozen=True)
class Edge:
    """An undirected, weighted road between two nodes.

    ``source`` and ``target`` only name the endpoints; traversal is allowed in
    both directions at the same cost.

    Attributes:
        id (str): Unique identifier.
        source (str): First endpoint node id.
        target (str): Second endpoint node id.
        weight (float): Base weight, normally the pixel distance between ends.
        road_type (str): Key into the cost multiplier table.
    """

    id: str
    source: str
    target: str
    weight: float
    road_type: str = RoadType.CITY.value

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "source": self.source,
            "target": self.target,
            "weight": self.weight,
            "road_type": self.road_type,
        }
