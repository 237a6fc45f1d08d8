from abc import ABC, abstractmethod
from typing import Any, Iterator, Optional

from lodestar.core.exceptions import ConfigurationError
from lodestar.core.graph_paths.types import CostFunc, NeighborFunc


class PathFinder[T](ABC):
    """Abstract base class for path finding algorithms over an implicit graph.

    The graph is never stored. It is described by two independently
    substitutable callbacks: ``neighbor_fn`` enumerates the vertices adjacent
    to a vertex and ``cost_fn`` prices the edge between two adjacent vertices.
    """

    def __init__(self, neighbor_fn: NeighborFunc, cost_fn: CostFunc):
        """Initialize finder with the graph callbacks."""
        if not callable(neighbor_fn):
            raise ConfigurationError("neighbor_fn must be callable")
        if not callable(cost_fn):
            raise ConfigurationError("cost_fn must be callable")
        self.neighbor_fn = neighbor_fn
        self.cost_fn = cost_fn

    @abstractmethod
    def find_path(self, start: Any, goal: Any, **kwargs) -> Optional[T]:
        """Find path between vertices, or None if the goal is unreachable."""
        pass

    def find_paths(self, start: Any, goal: Any, **kwargs) -> Iterator[T]:
        """Find multiple paths between vertices.

        Default implementation yields the single path from find_path.
        """
        path = self.find_path(start, goal, **kwargs)
        if path is not None:
            yield path
