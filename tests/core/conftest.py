"""Shared test fixtures."""

from typing import Dict

import pytest


class AdjacencyGraph:
    """Weighted digraph exposed through neighbor/cost callbacks."""

    def __init__(self, edges: Dict[str, Dict[str, float]]):
        self.edges = edges
        self.neighbor_calls = 0
        self.cost_calls = 0

    def neighbors(self, vertex):
        self.neighbor_calls += 1
        return list(self.edges.get(vertex, {}))

    def cost(self, source, target):
        self.cost_calls += 1
        return self.edges[source][target]


@pytest.fixture
def triangle_graph() -> AdjacencyGraph:
    """
    A -1-> B -1-> C
    |             ^
    +------4------+
    """
    return AdjacencyGraph({"A": {"B": 1, "C": 4}, "B": {"C": 1}})


@pytest.fixture
def diamond_graph() -> AdjacencyGraph:
    """Two equal-cost routes from A to D."""
    return AdjacencyGraph({"A": {"B": 1, "C": 1}, "B": {"D": 1}, "C": {"D": 1}})


@pytest.fixture
def cyclic_graph() -> AdjacencyGraph:
    """
    A -> B -> C -> A
    |         |
    v         v
    D ------> E
    """
    return AdjacencyGraph(
        {
            "A": {"B": 1.25, "D": 2.0},
            "B": {"C": 1.5},
            "C": {"A": 1.0, "E": 0.5},
            "D": {"E": 3.5},
        }
    )


@pytest.fixture
def disconnected_graph() -> AdjacencyGraph:
    return AdjacencyGraph({"A": {"C": 1}, "B": {"C": 1}})
