"""Scenario class: a graph plus the start/end selection and run settings."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional

from pathtrace.algorithms.heuristic import euclidean
from pathtrace.algorithms.search import run_search
from pathtrace.algorithms.types import TraceResult
from pathtrace.config import DEFAULT_CONFIG, EngineConfig, validate_multiplier
from pathtrace.dsl.loader import load_scenario_yaml
from pathtrace.logging import get_logger
from pathtrace.model.graph import Edge, Node
from pathtrace.types.base import Algorithm, NodeType

logger = get_logger(__name__)


@dataclass
class Scenario:
    """A graph with a start/end pair, a default mode, and a multiplier table.

    Typical usage example:

        scenario = Scenario.from_yaml(yaml_str)
        result = scenario.run(algorithm=Algorithm.ASTAR)
        result.path, result.cost

    Attributes:
        nodes: Graph nodes in declaration order.
        edges: Graph edges in declaration order.
        start: Start node id.
        end: Goal node id.
        algorithm: Mode used by ``run()`` when none is given.
        multipliers: Road type -> cost multiplier used by ``run()``.
        name: Optional display name.
        description: Optional free text.
    """

    nodes: List[Node]
    edges: List[Edge]
    start: str
    end: str
    algorithm: Algorithm = DEFAULT_CONFIG.default_algorithm
    multipliers: Dict[str, float] = field(default_factory=DEFAULT_CONFIG.multipliers)
    name: str = ""
    description: str = ""

    @classmethod
    def from_yaml(
        cls, yaml_str: str, config: EngineConfig = DEFAULT_CONFIG
    ) -> "Scenario":
        """Parse, validate and build a scenario from YAML text.

        Raises:
            ValueError: If the YAML is not a mapping, has unknown keys, or names
                an unknown algorithm.
            jsonschema.ValidationError: If the document violates the schema.
        """
        return cls.from_dict(load_scenario_yaml(yaml_str), config)

    @classmethod
    def from_dict(
        cls, data: Mapping[str, Any], config: EngineConfig = DEFAULT_CONFIG
    ) -> "Scenario":
        """Build a scenario from an already validated dictionary.

        Edges may omit ``id`` (becomes ``e<n>``, 1-based), ``road_type``
        (``config.default_road_type``) and ``weight`` (rounded distance between
        the endpoints, or ``config.default_edge_weight`` when an endpoint is
        unknown).
        """
        nodes = [
            Node(
                id=str(nd["id"]),
                x=float(nd["x"]),
                y=float(nd["y"]),
                type=nd.get("type", NodeType.HOUSE.value),
                label=str(nd.get("label", "")),
            )
            for nd in data.get("nodes", [])
        ]
        by_id = {node.id: node for node in nodes}

        edges: List[Edge] = []
        for idx, ed in enumerate(data.get("edges") or [], start=1):
            source, target = str(ed["source"]), str(ed["target"])
            weight = ed.get("weight")
            if weight is None:
                if source in by_id and target in by_id:
                    weight = round(euclidean(by_id[source], by_id[target]))
                else:
                    weight = config.default_edge_weight
            edges.append(
                Edge(
                    id=str(ed.get("id", f"e{idx}")),
                    source=source,
                    target=target,
                    weight=float(weight),
                    road_type=ed.get("road_type", config.default_road_type),
                )
            )

        algorithm = config.default_algorithm
        if data.get("algorithm"):
            algorithm = Algorithm.from_string(data["algorithm"])

        scenario = cls(
            nodes=nodes,
            edges=edges,
            start=str(data["start"]),
            end=str(data["end"]),
            algorithm=algorithm,
            multipliers=config.with_overrides(data.get("multipliers")).multipliers(),
            name=data.get("name", ""),
            description=data.get("description", ""),
        )
        logger.debug(
            "Built scenario '%s' with %d nodes and %d edges",
            scenario.name,
            len(nodes),
            len(edges),
        )
        return scenario

    def node(self, node_id: str) -> Optional[Node]:
        for node in self.nodes:
            if node.id == node_id:
                return node
        return None

    def run(
        self,
        algorithm: Optional[Algorithm] = None,
        multipliers: Optional[Mapping[str, float]] = None,
        start: Optional[str] = None,
        end: Optional[str] = None,
    ) -> TraceResult:
        """Run the step-trace search on this scenario.

        Arguments override the scenario's own settings for this run only.
        ``multipliers`` are merged over the scenario's table.

        Raises:
            ValueError: If an override multiplier is not a positive, finite
                number.
        """
        table = dict(self.multipliers)
        for road_type, value in (multipliers or {}).items():
            table[str(road_type)] = validate_multiplier(road_type, value)
        return run_search(
            self.nodes,
            self.edges,
            start if start is not None else self.start,
            end if end is not None else self.end,
            algorithm if algorithm is not None else self.algorithm,
            table,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "start": self.start,
            "end": self.end,
            "algorithm": self.algorithm.name.lower(),
            "multipliers": dict(self.multipliers),
            "nodes": [node.to_dict() for node in self.nodes],
            "edges": [edge.to_dict() for edge in self.edges],
        }
