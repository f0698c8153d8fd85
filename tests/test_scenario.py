import math

import pytest

from pathtrace.config import DEFAULT_CONFIG, EngineConfig
from pathtrace.scenario import Scenario
from pathtrace.types.base import Algorithm, SearchStatus

SCENARIO = """
name: Triangle
description: Two routes to the goal.
start: a
end: c
algorithm: astar
multipliers:
  Dirt: 3
nodes:
  - {id: a, x: 0, y: 0, type: House, label: Home}
  - {id: b, x: 30, y: 40}
  - {id: c, x: 60, y: 0, type: Hospital}
edges:
  - {source: a, target: b}
  - {source: b, target: c, road_type: Highway}
  - {id: direct, source: a, target: c, weight: 60, road_type: Dirt}
"""


def test_from_yaml_builds_records():
    scenario = Scenario.from_yaml(SCENARIO)
    assert scenario.name == "Triangle"
    assert scenario.description == "Two routes to the goal."
    assert scenario.algorithm is Algorithm.ASTAR
    assert [n.id for n in scenario.nodes] == ["a", "b", "c"]
    assert scenario.node("a").label == "Home"
    assert scenario.node("b").type == "House"
    assert scenario.node("zzz") is None


def test_edge_defaults():
    scenario = Scenario.from_yaml(SCENARIO)
    ab, bc, direct = scenario.edges
    assert (ab.id, bc.id, direct.id) == ("e1", "e2", "direct")
    # Missing weight falls back to the rounded distance between the endpoints
    assert ab.weight == 50.0
    assert ab.road_type == "City"
    assert bc.road_type == "Highway"
    assert direct.weight == 60.0


def test_missing_weight_with_unknown_endpoint():
    scenario = Scenario.from_yaml(
        "start: a\nend: a\nnodes:\n  - {id: a, x: 0, y: 0}\n"
        "edges:\n  - {source: a, target: ghost}\n"
    )
    assert scenario.edges[0].weight == DEFAULT_CONFIG.default_edge_weight


def test_multipliers_merge_with_config():
    scenario = Scenario.from_yaml(SCENARIO)
    assert scenario.multipliers == {"Highway": 1.0, "City": 1.5, "Dirt": 3.0}

    config = EngineConfig(road_multipliers={"City": 1.0}, default_road_type="Dirt")
    custom = Scenario.from_yaml(SCENARIO, config)
    assert custom.multipliers == {"City": 1.0, "Dirt": 3.0}
    assert custom.edges[0].road_type == "Dirt"


def test_integer_ids_become_strings():
    scenario = Scenario.from_yaml(
        "start: 1\nend: 2\nnodes:\n  - {id: 1, x: 0, y: 0}\n  - {id: 2, x: 5, y: 0}\n"
        "edges:\n  - {source: 1, target: 2, weight: 5}\n"
    )
    assert scenario.start == "1"
    assert scenario.edges[0].source == "1"
    assert scenario.run().path == ("1", "2")


def test_invalid_algorithm():
    with pytest.raises(ValueError, match="Invalid algorithm"):
        Scenario.from_yaml(SCENARIO.replace("astar", "bfs"))


def test_run_uses_scenario_settings():
    scenario = Scenario.from_yaml(SCENARIO)
    result = scenario.run()
    assert result.algorithm is Algorithm.ASTAR
    # a-b City 75 + b-c Highway 50 = 125 beats a-c Dirt 180
    assert result.path == ("a", "b", "c")
    assert result.cost == 125.0


def test_run_overrides_are_per_call():
    scenario = Scenario.from_yaml(SCENARIO)
    result = scenario.run(algorithm=Algorithm.DIJKSTRA, multipliers={"Dirt": 1.0})
    assert result.algorithm is Algorithm.DIJKSTRA
    assert result.path == ("a", "c")
    assert result.cost == 60.0
    assert scenario.multipliers["Dirt"] == 3.0

    reverse = scenario.run(start="c", end="a")
    assert reverse.path == ("c", "b", "a")


def test_run_unreachable_end():
    scenario = Scenario.from_yaml(SCENARIO)
    result = scenario.run(end="nowhere")
    assert result.status is SearchStatus.EXHAUSTED
    assert math.isinf(result.cost)


def test_to_dict_round_trip():
    scenario = Scenario.from_yaml(SCENARIO)
    data = scenario.to_dict()
    assert data["algorithm"] == "astar"
    assert data["edges"][0] == {
        "id": "e1",
        "source": "a",
        "target": "b",
        "weight": 50.0,
        "road_type": "City",
    }
    rebuilt = Scenario.from_dict(data)
    assert rebuilt == scenario


@pytest.mark.parametrize("value", [".nan", ".inf", "-.inf"])
def test_non_finite_yaml_multiplier_rejected(value):
    text = (
        "start: a\nend: b\n"
        "nodes:\n  - {id: a, x: 0, y: 0}\n  - {id: b, x: 10, y: 0}\n"
        "edges:\n  - {source: a, target: b, weight: 10}\n"
        f"multipliers: {{City: {value}}}\n"
    )
    with pytest.raises(ValueError, match="'City' must be positive and finite"):
        Scenario.from_yaml(text)


@pytest.mark.parametrize("value", [math.nan, math.inf, 0])
def test_run_rejects_bad_override(value):
    scenario = Scenario.from_yaml(SCENARIO)
    with pytest.raises(ValueError, match="must be positive and finite"):
        scenario.run(multipliers={"City": value})
