"""
Dijkstra's shortest path search over an implicit graph.

The graph is described only through a neighbor function and an edge cost
function. Edge costs are assumed non-negative; with negative costs the search
still terminates on finite graphs but the result is no longer guaranteed
optimal.
"""

import logging
from time import time
from typing import Any, Dict, Hashable, Optional

from lodestar.core.exceptions import ConfigurationError
from lodestar.core.graph_paths.base import PathFinder
from lodestar.core.graph_paths.models import PathResult, PerformanceMetrics
from lodestar.core.graph_paths.types import CostFunc, NeighborFunc, SearchResult, SearchStatus
from lodestar.core.graph_paths.utils import (
    Frontier,
    MemoryManager,
    NodeRecord,
    reconstruct_path,
    validate_path,
)

logger = logging.getLogger(__name__)


class DijkstraFinder(PathFinder[PathResult]):
    """Single-source shortest path search.

    Every call to :meth:`find_path` owns its own frontier and record arena,
    so independent searches never share mutable state. The finder itself
    only remembers the metrics of its most recent call; use one finder per
    thread if those metrics matter.
    """

    def __init__(
        self,
        neighbor_fn: NeighborFunc,
        cost_fn: CostFunc,
        max_memory_mb: Optional[float] = None,
    ):
        super().__init__(neighbor_fn, cost_fn)
        if max_memory_mb is not None and max_memory_mb <= 0:
            raise ConfigurationError("max_memory_mb must be positive")
        self.max_memory_mb = max_memory_mb
        self.last_metrics: Optional[PerformanceMetrics] = None

    def find_path(
        self, start: Any, goal: Any, validate: bool = False, **kwargs
    ) -> Optional[PathResult]:
        """Find the cheapest path from ``start`` to ``goal``.

        Returns None when the frontier drains without reaching the goal.
        """
        metrics = PerformanceMetrics(operation="dijkstra", start_time=time())
        self.last_metrics = metrics
        # psutil is only consulted when a ceiling is configured
        memory_manager = MemoryManager(self.max_memory_mb) if self.max_memory_mb else None
        records: Dict[Hashable, NodeRecord] = {}

        try:
            result = self._search(start, goal, records, metrics, memory_manager)
        finally:
            metrics.end_time = time()
            metrics.nodes_discovered = len(records)
            if not metrics.status.is_terminal:
                metrics.status = SearchStatus.ABORTED
            if memory_manager is not None:
                metrics.max_memory_used = memory_manager.peak_memory

        if result is not None and validate:
            validate_path(result.path, self.neighbor_fn, self.cost_fn)
        return result

    def _search(
        self,
        start: Any,
        goal: Any,
        records: Dict[Hashable, NodeRecord],
        metrics: PerformanceMetrics,
        memory_manager: Optional[MemoryManager],
    ) -> Optional[PathResult]:
        logger.debug(f"Starting Dijkstra search from {start!r} to {goal!r}")

        frontier = Frontier()
        start_record = NodeRecord(start, cost_to_come=0)
        records[start] = start_record
        frontier.insert_or_update(start_record)
        metrics.status = SearchStatus.RUNNING

        while not frontier.empty():
            if memory_manager is not None:
                memory_manager.check_memory()

            current = frontier.extract_min()
            metrics.nodes_explored += 1
            logger.debug(f"Expanding {current.vertex!r} at cost {current.cost_to_come}")

            if current.vertex == goal:
                metrics.status = SearchStatus.SUCCEEDED
                path = reconstruct_path(records, current.vertex)
                metrics.path_length = len(path) - 1
                logger.debug(f"Found path {path} with cost {current.cost_to_come}")
                return PathResult(path=path, total_cost=current.cost_to_come)

            self._expand(current, records, frontier)

        metrics.status = SearchStatus.EXHAUSTED
        logger.debug(
            f"Frontier exhausted after {metrics.nodes_explored} expansions; "
            f"{goal!r} unreachable from {start!r}"
        )
        return None

    def _expand(
        self,
        current: NodeRecord,
        records: Dict[Hashable, NodeRecord],
        frontier: Frontier,
    ) -> None:
        for neighbor in self.neighbor_fn(current.vertex):
            record = records.get(neighbor)
            if record is None:
                record = records[neighbor] = NodeRecord(neighbor)
            elif record.is_closed:
                logger.debug(f"  Skipping closed vertex {neighbor!r}")
                continue

            candidate = current.cost_to_come + self.cost_fn(current.vertex, neighbor)
            if record.relax(candidate, current.vertex):
                logger.debug(f"  Relaxed {neighbor!r} to {candidate} via {current.vertex!r}")
                frontier.insert_or_update(record)


def search(
    start: Any,
    goal: Any,
    neighbor_fn: NeighborFunc,
    cost_fn: CostFunc,
) -> SearchResult:
    """Return the cheapest vertex path from ``start`` to ``goal``, or None.

    Vertices must be hashable; the search keys its bookkeeping by vertex.

    Args:
        start: Vertex the search begins from
        goal: Vertex the search stops at
        neighbor_fn: Callable returning the finite neighbors of a vertex
        cost_fn: Callable returning the non-negative cost of an edge

    Example:
        >>> graph = {"A": {"B": 1, "C": 4}, "B": {"C": 1}, "C": {}}
        >>> search("A", "C", lambda v: graph[v], lambda a, b: graph[a][b])
        ['A', 'B', 'C']
    """
    result = DijkstraFinder(neighbor_fn, cost_fn).find_path(start, goal)
    return None if result is None else result.nodes
