import pytest

from pathtrace.algorithms.heuristic import euclidean
from pathtrace.model.graph import Node


def test_euclidean_distance():
    assert euclidean(Node("a", 0, 0), Node("b", 3, 4)) == pytest.approx(5.0)


def test_euclidean_is_symmetric_and_zero_on_self():
    a, b = Node("a", 100, 400), Node("b", 800, 400)
    assert euclidean(a, b) == euclidean(b, a) == pytest.approx(700.0)
    assert euclidean(a, a) == 0.0
