"""Bundled example scenarios.

Each preset is a scenario YAML file shipped as package data; the preset name is
the file stem.
"""

from __future__ import annotations

from importlib import resources
from typing import List

from pathtrace.config import DEFAULT_CONFIG, EngineConfig
from pathtrace.scenario import Scenario

_SUFFIX = ".yaml"


def list_presets() -> List[str]:
    """Return the names of all bundled presets, sorted."""
    return sorted(
        entry.name[: -len(_SUFFIX)]
        for entry in resources.files(__name__).iterdir()
        if entry.name.endswith(_SUFFIX)
    )


def load_preset(name: str, config: EngineConfig = DEFAULT_CONFIG) -> Scenario:
    """Load a bundled preset as a fresh Scenario.

    Every call parses the file again, so callers never share mutable lists.

    Raises:
        KeyError: If no preset with that name exists.
    """
    available = list_presets()
    if name not in available:
        raise KeyError(
            f"Unknown preset '{name}'. Available presets: {', '.join(available)}"
        )
    text = resources.files(__name__).joinpath(name + _SUFFIX).read_text(encoding="utf-8")
    return Scenario.from_yaml(text, config)


__all__ = ["list_presets", "load_preset"]
