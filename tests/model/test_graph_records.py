import pytest

from pathtrace.model.graph import Edge, Node
from pathtrace.types.base import NodeType, RoadType


def test_node_defaults_and_label():
    node = Node("n1", 10, 20)
    assert node.type == NodeType.HOUSE.value
    assert node.label == ""
    assert node.display_label == "n1"
    assert Node("n1", 0, 0, label="Start").display_label == "Start"


def test_edge_default_road_type():
    edge = Edge("e1", "a", "b", 5)
    assert edge.road_type == RoadType.CITY.value == "City"


def test_records_are_frozen_and_hashable():
    node = Node("n1", 0, 0)
    with pytest.raises(AttributeError):
        node.x = 5  # type: ignore[misc]
    assert len({node, Node("n1", 0, 0)}) == 1


def test_to_dict():
    assert Node("n1", 1.0, 2.0, "Park", "P").to_dict() == {
        "id": "n1",
        "x": 1.0,
        "y": 2.0,
        "type": "Park",
        "label": "P",
    }
    assert Edge("e1", "a", "b", 3.0, "Dirt").to_dict() == {
        "id": "e1",
        "source": "a",
        "target": "b",
        "weight": 3.0,
        "road_type": "Dirt",
    }
