"""Scenario YAML loading and validation."""

from __future__ import annotations

from pathtrace.dsl.loader import load_scenario_yaml

__all__ = ["load_scenario_yaml"]
