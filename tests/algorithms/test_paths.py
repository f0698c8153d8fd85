import pytest

from pathtrace.algorithms.adjacency import build_adjacency
from pathtrace.algorithms.paths import path_cost, reconstruct_path


class TestReconstructPath:
    def test_walks_back_to_start(self):
        previous = {"A": None, "B": "A", "C": "B", "D": None}
        assert reconstruct_path(previous, "C") == ("A", "B", "C")

    def test_start_only(self):
        assert reconstruct_path({"A": None}, "A") == ("A",)

    def test_goal_missing_from_map(self):
        assert reconstruct_path({"A": None}, "Z") == ("Z",)

    def test_empty_string_ids_are_valid(self):
        previous = {"": None, "x": ""}
        assert reconstruct_path(previous, "x") == ("", "x")


class TestPathCost:
    def test_sums_effective_costs(self, line_with_shortcut):
        nodes, edges = line_with_shortcut
        adj = build_adjacency(nodes, edges, {"City": 1.5})
        assert path_cost(("A", "B", "C"), adj) == 15.0
        assert path_cost(("A", "C"), adj) == 30.0

    def test_single_node_and_empty_paths_cost_zero(self, pair):
        nodes, edges = pair
        adj = build_adjacency(nodes, edges, {"City": 1.0})
        assert path_cost(("A",), adj) == 0
        assert path_cost((), adj) == 0

    def test_uses_cheapest_parallel_edge(self):
        adj = {"A": [("B", 6.0), ("B", 2.0)], "B": [("A", 6.0), ("A", 2.0)]}
        assert path_cost(("A", "B"), adj) == 2.0

    def test_non_adjacent_hop_raises(self, two_components):
        nodes, edges = two_components
        adj = build_adjacency(nodes, edges, {"City": 1.0})
        with pytest.raises(ValueError, match="No edge between 'B' and 'C'"):
            path_cost(("A", "B", "C"), adj)
