"""
Data models for implicit-graph path finding.

This module provides the core data structures returned by the search driver:
- PathResult: Container for a found path and its total cost
- PerformanceMetrics: Container for per-search performance metrics
- PathValidationError: Exception for path validation failures

Example:
    >>> result = PathResult(path=["A", "B", "C"], total_cost=2)
    >>> result.nodes
    ['A', 'B', 'C']
    >>> result.length
    2
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Union

from lodestar.core.graph_paths.types import CostFunc, NeighborFunc, SearchStatus


class PathValidationError(Exception):
    """
    Raised when a path fails validation checks.

    This exception indicates issues such as:
    - Empty paths
    - Consecutive vertices not reported adjacent by the neighbor function
    - Invalid (NaN) edge costs
    - Stored total cost disagreeing with the recomputed cost
    """

    pass


@dataclass
class PathResult:
    """
    Container for path finding results.

    Attributes:
        path: Sequence of vertices from start to goal, inclusive
        total_cost: Accumulated cost of all edges along the path
        length: Number of edges in the path (computed dynamically)

    Example:
        >>> result = PathResult(path=["A"], total_cost=0)
        >>> len(result)
        1
    """

    path: List[Any]
    total_cost: Any = 0

    def __post_init__(self):
        """Validate initialization parameters."""
        if not isinstance(self.path, list):
            raise TypeError("path must be a list")

        if not self.path:
            raise PathValidationError("path must contain at least one vertex")

    def __len__(self) -> int:
        """Return the number of vertices in the path."""
        return len(self.path)

    def __getitem__(self, index: int) -> Any:
        return self.path[index]

    def __iter__(self):
        return iter(self.path)

    @property
    def nodes(self) -> List[Any]:
        """Get a copy of the vertex sequence in order of traversal."""
        return list(self.path)

    @property
    def length(self) -> int:
        """Number of edges traversed."""
        return len(self.path) - 1

    @property
    def start(self) -> Any:
        return self.path[0]

    @property
    def goal(self) -> Any:
        return self.path[-1]

    def validate(
        self,
        neighbor_fn: NeighborFunc,
        cost_fn: Optional[CostFunc] = None,
        epsilon: float = 1e-9,
    ) -> None:
        """
        Validate the path's consistency against the callbacks that produced it.

        Performs the following checks:
        - Every consecutive pair is an edge reported by ``neighbor_fn``
        - Every edge cost is a number (not NaN)
        - The stored total equals the recomputed total (within ``epsilon``)

        Args:
            neighbor_fn: Neighbor enumeration used for the search
            cost_fn: Optional edge cost function used for the search
            epsilon: Tolerance for the total cost comparison

        Raises:
            PathValidationError: If any validation check fails
            ValueError: If epsilon is not positive
        """
        if epsilon <= 0:
            raise ValueError("epsilon must be positive")

        # Deferred to avoid a cycle: utils imports this module
        from lodestar.core.graph_paths.utils import calculate_path_cost, validate_path

        validate_path(self.path, neighbor_fn, cost_fn)

        if cost_fn is not None:
            calculated = calculate_path_cost(self.path, cost_fn)
            if abs(calculated - self.total_cost) > epsilon:
                raise PathValidationError(
                    f"Cost mismatch: calculated {calculated} != stored {self.total_cost}"
                )


@dataclass
class PerformanceMetrics:
    """
    Container for search performance metrics.

    Attributes:
        operation: Name of the path finding operation
        start_time: Operation start timestamp
        end_time: Operation end timestamp (0.0 if not completed)
        status: Final state of the search state machine
        path_length: Number of edges in the found path (if any)
        nodes_explored: Number of vertices extracted from the frontier
        nodes_discovered: Number of distinct vertices given a node record
        max_memory_used: Peak memory usage during operation (bytes)

    Example:
        >>> metrics = PerformanceMetrics(operation="dijkstra", start_time=time())
        >>> # ... perform search ...
        >>> metrics.end_time = time()
        >>> print(f"Search took {metrics.duration:.2f}ms")
    """

    operation: str
    start_time: float
    end_time: float = 0.0
    status: SearchStatus = SearchStatus.INITIALIZED
    path_length: Optional[int] = None
    nodes_explored: int = 0
    nodes_discovered: int = 0
    max_memory_used: Optional[int] = None

    def __post_init__(self):
        """Validate metrics after initialization."""
        if not isinstance(self.operation, str) or not self.operation.strip():
            raise ValueError("operation must be a non-empty string")

        if not isinstance(self.start_time, (int, float)):
            raise TypeError("start_time must be a numeric value")

        if self.end_time and self.end_time < self.start_time:
            raise ValueError("end_time cannot be before start_time")

    @property
    def duration(self) -> float:
        """
        Calculate operation duration in milliseconds.

        Returns:
            Duration of the operation in milliseconds, 0.0 while running
        """
        return (self.end_time - self.start_time) * 1000 if self.end_time else 0.0

    def to_dict(self) -> Dict[str, Union[str, float, int, None]]:
        """
        Convert metrics to dictionary format.

        Returns:
            Dictionary containing all metrics
        """
        return {
            "operation": self.operation,
            "status": self.status.value,
            "duration_ms": self.duration,
            "path_length": self.path_length,
            "nodes_explored": self.nodes_explored,
            "nodes_discovered": self.nodes_discovered,
            "max_memory_used": self.max_memory_used,
        }
