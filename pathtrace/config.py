"""Configuration classes for pathtrace components."""

from __future__ import annotations

import math
from dataclasses import dataclass, field, replace
from typing import Dict, Mapping, Optional

from pathtrace.types.base import Algorithm, RoadType


def validate_multiplier(road_type: str, value: object) -> float:
    """Return ``value`` as a float if it is a usable cost multiplier.

    Raises:
        ValueError: If ``value`` is not a number, or is zero, negative, NaN or
            infinite.
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(
            f"Multiplier for road type '{road_type}' must be a number, got {value!r}"
        )
    # NaN compares false against everything, so check finiteness first
    if not math.isfinite(value) or value <= 0:
        raise ValueError(
            f"Multiplier for road type '{road_type}' must be positive and finite, "
            f"got {value}"
        )
    return float(value)


def _default_multipliers() -> Dict[str, float]:
    return {
        RoadType.HIGHWAY.value: 1.0,
        RoadType.CITY.value: 1.5,
        # High penalty for dirt roads
        RoadType.DIRT.value: 2.5,
    }


@dataclass(frozen=True)
class EngineConfig:
    """Defaults shared by scenario loading, the CLI, and playback."""

    # Cost multiplier per road type
    road_multipliers: Dict[str, float] = field(default_factory=_default_multipliers)

    # Edge weight used when neither a weight nor both endpoint positions exist
    default_edge_weight: float = 10.0

    # Road type assigned to edges that do not declare one
    default_road_type: str = RoadType.CITY.value

    default_algorithm: Algorithm = Algorithm.DIJKSTRA

    # Seconds between frames when animating a step sequence
    playback_interval: float = 0.5

    def multipliers(self) -> Dict[str, float]:
        """Return a fresh copy of the multiplier table for one run."""
        return dict(self.road_multipliers)

    def with_overrides(
        self, multipliers: Optional[Mapping[str, float]] = None
    ) -> "EngineConfig":
        """Return a copy whose multiplier table is merged with ``multipliers``.

        Args:
            multipliers: Road type to multiplier overrides.

        Returns:
            New EngineConfig; the receiver is left untouched.

        Raises:
            ValueError: If any override is not a positive, finite number.
        """
        if not multipliers:
            return self
        merged = self.multipliers()
        for road_type, value in multipliers.items():
            merged[str(road_type)] = validate_multiplier(road_type, value)
        return replace(self, road_multipliers=merged)


# Global configuration instance
DEFAULT_CONFIG = EngineConfig()
