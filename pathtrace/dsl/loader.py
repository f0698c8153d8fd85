"""YAML loader + schema validation for scenario files.

Provides a single entrypoint to parse a YAML string, normalize keys where
needed, validate against the packaged JSON schema, and return a canonical
dictionary suitable for building a ``Scenario``.
"""

from __future__ import annotations

import json
from importlib import resources
from typing import Any, Dict

import jsonschema
import yaml

from pathtrace.utils.yaml_utils import normalize_yaml_dict_keys

RECOGNIZED_KEYS = frozenset(
    {"name", "description", "start", "end", "algorithm", "multipliers", "nodes", "edges"}
)


def _load_schema() -> Dict[str, Any]:
    with (
        resources.files("pathtrace.schemas")
        .joinpath("scenario.json")
        .open("r", encoding="utf-8")
    ) as f:
        return json.load(f)


def load_scenario_yaml(yaml_str: str) -> Dict[str, Any]:
    """Load, normalize, and validate a scenario YAML string.

    Args:
        yaml_str: YAML document text.

    Returns:
        Validated dictionary. Ids stay as written (ints are converted by the
        scenario builder), multiplier keys are strings.

    Raises:
        ValueError: If the document is not a mapping or has unknown top-level
            keys.
        jsonschema.ValidationError: If the document does not match the schema.
    """
    data = yaml.safe_load(yaml_str)
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError("The provided YAML must map to a dictionary at top-level.")

    # Road types such as "on"/"off" would otherwise load as booleans
    if isinstance(data.get("multipliers"), dict):
        data["multipliers"] = normalize_yaml_dict_keys(data["multipliers"])

    extra = set(data.keys()) - RECOGNIZED_KEYS
    if extra:
        raise ValueError(
            f"Unrecognized top-level key(s) in scenario: {', '.join(sorted(map(str, extra)))}. "
            f"Allowed keys are {sorted(RECOGNIZED_KEYS)}"
        )

    jsonschema.validate(data, _load_schema())
    return data
