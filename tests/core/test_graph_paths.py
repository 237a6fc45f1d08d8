"""
Tests for the path finding facade, result models and path helpers.
"""

from time import time

import pytest

from lodestar import NoPathFoundError, PathFinding, PathResult
from lodestar.core.exceptions import GraphOperationError
from lodestar.core.graph_paths import (
    PathType,
    PathValidationError,
    PerformanceMetrics,
    SearchStatus,
    calculate_path_cost,
    validate_path,
)


def test_shortest_path_basic(triangle_graph):
    """Test the facade returns a full result."""
    result = PathFinding.shortest_path("A", "C", triangle_graph.neighbors, triangle_graph.cost)
    assert isinstance(result, PathResult)
    assert result.nodes == ["A", "B", "C"]
    assert result.total_cost == 2
    assert result.start == "A" and result.goal == "C"


def test_shortest_path_no_path(disconnected_graph):
    """Test the facade raises when no path exists."""
    with pytest.raises(NoPathFoundError, match="No path exists between 'A' and 'B'"):
        PathFinding.shortest_path("A", "B", disconnected_graph.neighbors, disconnected_graph.cost)


def test_dijkstra_alias(cyclic_graph):
    """Test the algorithm-specific entry point."""
    result = PathFinding.dijkstra(
        "A", "E", cyclic_graph.neighbors, cyclic_graph.cost, validate=True, max_memory_mb=512
    )
    assert result.nodes == ["A", "B", "C", "E"]
    assert result.total_cost == pytest.approx(3.25)
    assert PathType.DIJKSTRA.value == "dijkstra"


def test_path_result_methods():
    """Test PathResult container behaviour."""
    result = PathResult(path=["A", "D", "E"], total_cost=2.0)
    assert len(result) == 3
    assert result.length == 2
    assert result[0] == "A"
    assert list(result) == ["A", "D", "E"]

    nodes = result.nodes
    nodes.append("X")
    assert result.path == ["A", "D", "E"]


def test_path_result_rejects_invalid_input():
    """Test PathResult construction checks."""
    with pytest.raises(TypeError, match="path must be a list"):
        PathResult(path=("A", "B"), total_cost=1)
    with pytest.raises(PathValidationError, match="at least one vertex"):
        PathResult(path=[], total_cost=0)


def test_path_result_validate(triangle_graph):
    """Test validation against the callbacks that produced the path."""
    PathResult(path=["A", "B", "C"], total_cost=2).validate(
        triangle_graph.neighbors, triangle_graph.cost
    )

    with pytest.raises(PathValidationError, match="Cost mismatch"):
        PathResult(path=["A", "B", "C"], total_cost=4).validate(
            triangle_graph.neighbors, triangle_graph.cost
        )

    with pytest.raises(PathValidationError, match="Path discontinuity"):
        PathResult(path=["A", "C", "B"], total_cost=5).validate(triangle_graph.neighbors)

    with pytest.raises(ValueError, match="epsilon must be positive"):
        PathResult(path=["A"], total_cost=0).validate(triangle_graph.neighbors, epsilon=0)


def test_validate_path_rejects_fabricated_edges(triangle_graph):
    """Test validate_path checks adjacency step by step."""
    validate_path(["A"], triangle_graph.neighbors)
    validate_path(["A", "C"], triangle_graph.neighbors, triangle_graph.cost)

    with pytest.raises(PathValidationError, match="Path is empty"):
        validate_path([], triangle_graph.neighbors)
    with pytest.raises(PathValidationError, match="'A' is not a neighbor of 'B'"):
        validate_path(["B", "A"], triangle_graph.neighbors)


def test_validate_path_rejects_nan_costs(triangle_graph):
    """Test NaN edge costs are reported."""
    with pytest.raises(PathValidationError, match="is NaN"):
        validate_path(["A", "B"], triangle_graph.neighbors, lambda a, b: float("nan"))


def test_calculate_path_cost(triangle_graph):
    """Test path cost accumulation."""
    assert calculate_path_cost(["A"], triangle_graph.cost) == 0
    assert calculate_path_cost(["A", "B", "C"], triangle_graph.cost) == 2
    assert calculate_path_cost(["A", "C"], triangle_graph.cost) == 4
    with pytest.raises(ValueError, match="at least one vertex"):
        calculate_path_cost([], triangle_graph.cost)


def test_performance_metrics_validation():
    """Test metrics container checks and derived values."""
    metrics = PerformanceMetrics(operation="dijkstra", start_time=100.0)
    assert metrics.status is SearchStatus.INITIALIZED
    assert metrics.duration == 0.0

    metrics.end_time = 100.5
    assert metrics.duration == pytest.approx(500.0)
    assert metrics.to_dict()["duration_ms"] == pytest.approx(500.0)

    with pytest.raises(ValueError, match="operation must be a non-empty string"):
        PerformanceMetrics(operation=" ", start_time=time())
    with pytest.raises(TypeError, match="start_time must be a numeric value"):
        PerformanceMetrics(operation="dijkstra", start_time="now")
    with pytest.raises(ValueError, match="end_time cannot be before start_time"):
        PerformanceMetrics(operation="dijkstra", start_time=10.0, end_time=5.0)


def test_search_status_terminal_states():
    """Test only SUCCEEDED, EXHAUSTED and ABORTED are terminal."""
    assert SearchStatus.SUCCEEDED.is_terminal
    assert SearchStatus.EXHAUSTED.is_terminal
    assert SearchStatus.ABORTED.is_terminal
    assert not SearchStatus.INITIALIZED.is_terminal
    assert not SearchStatus.RUNNING.is_terminal


def test_no_path_error_is_graph_operation_error():
    """Test exception hierarchy and message formatting."""
    error = NoPathFoundError("test message")
    assert isinstance(error, GraphOperationError)
    assert str(error) == "Graph Operation Error: test message"
