"""Graph path finding functionality."""

from typing import Any

from ..exceptions import NoPathFoundError
from .algorithms.dijkstra import DijkstraFinder, search
from .base import PathFinder
from .models import PathResult, PathValidationError, PerformanceMetrics
from .types import CostFunc, NeighborFunc, PathType, SearchStatus
from .utils import Frontier, NodeRecord, calculate_path_cost, validate_path

__all__ = [
    "CostFunc",
    "DijkstraFinder",
    "Frontier",
    "NeighborFunc",
    "NodeRecord",
    "PathFinder",
    "PathFinding",
    "PathResult",
    "PathType",
    "PathValidationError",
    "PerformanceMetrics",
    "SearchStatus",
    "calculate_path_cost",
    "search",
    "validate_path",
]


class PathFinding:
    """Static interface for path finding operations."""

    _FINDERS = {
        PathType.SHORTEST: DijkstraFinder,
        PathType.DIJKSTRA: DijkstraFinder,
    }

    @classmethod
    def shortest_path(
        cls,
        start: Any,
        goal: Any,
        neighbor_fn: NeighborFunc,
        cost_fn: CostFunc,
        path_type: PathType = PathType.SHORTEST,
        **kwargs,
    ) -> PathResult:
        """Find shortest path between vertices, raising if none exists.

        Keyword arguments other than ``validate`` configure the finder
        (for example ``max_memory_mb``).
        """
        validate = kwargs.pop("validate", False)
        finder = cls._FINDERS[path_type](neighbor_fn, cost_fn, **kwargs)
        result = finder.find_path(start, goal, validate=validate)
        if result is None:
            raise NoPathFoundError(f"No path exists between {start!r} and {goal!r}")
        return result

    @classmethod
    def dijkstra(
        cls,
        start: Any,
        goal: Any,
        neighbor_fn: NeighborFunc,
        cost_fn: CostFunc,
        **kwargs,
    ) -> PathResult:
        """Find shortest path using Dijkstra's algorithm."""
        return cls.shortest_path(
            start, goal, neighbor_fn, cost_fn, path_type=PathType.DIJKSTRA, **kwargs
        )
