import jsonschema
import pytest

from pathtrace.dsl.loader import load_scenario_yaml

MINIMAL = """
start: a
end: b
nodes:
  - {id: a, x: 0, y: 0}
  - {id: b, x: 3, y: 4}
"""


def test_minimal_document():
    data = load_scenario_yaml(MINIMAL)
    assert data["start"] == "a"
    assert [n["id"] for n in data["nodes"]] == ["a", "b"]
    assert "edges" not in data


def test_top_level_must_be_mapping():
    with pytest.raises(ValueError, match="must map to a dictionary"):
        load_scenario_yaml("- a\n- b\n")


def test_empty_document_fails_schema():
    with pytest.raises(jsonschema.ValidationError):
        load_scenario_yaml("")


def test_unknown_top_level_key():
    with pytest.raises(ValueError, match="Unrecognized top-level key"):
        load_scenario_yaml(MINIMAL + "workflow: []\n")


def test_multiplier_keys_are_normalized():
    data = load_scenario_yaml(MINIMAL + "multipliers:\n  on: 2.0\n  Dirt: 1\n")
    assert data["multipliers"] == {"True": 2.0, "Dirt": 1}


@pytest.mark.parametrize(
    "extra",
    [
        "multipliers: {Dirt: 0}\n",
        "multipliers: {Dirt: fast}\n",
        "edges:\n  - {source: a}\n",
        "edges:\n  - {source: a, target: b, weight: -1}\n",
        "edges:\n  - {source: a, target: b, capacity: 3}\n",
    ],
)
def test_schema_rejects(extra):
    with pytest.raises(jsonschema.ValidationError):
        load_scenario_yaml(MINIMAL + extra)


def test_node_requires_position():
    with pytest.raises(jsonschema.ValidationError):
        load_scenario_yaml("start: a\nend: a\nnodes:\n  - {id: a, x: 0}\n")
