"""
Utility functions and bookkeeping structures for path finding operations.
"""

import gc
import logging
import math
import os
import time
from dataclasses import dataclass, field
from heapq import heappop, heappush
from typing import Any, Dict, Hashable, List, Optional, Sequence, Set, Tuple

import psutil

from lodestar.core.exceptions import ConfigurationError, EmptyFrontierError, InvalidOperationError
from lodestar.core.graph_paths.models import PathValidationError
from lodestar.core.graph_paths.types import CostFunc, NeighborFunc

logger = logging.getLogger(__name__)

# Constants
INFINITY = float("inf")  # Cost-to-come of an undiscovered vertex
MEMORY_CHECK_INTERVAL = 0.1  # Seconds between RSS samples


def is_better_cost(new_cost: Any, old_cost: Any) -> bool:
    """Return True if ``new_cost`` strictly improves on ``old_cost``.

    Costs are compared exactly, so any ordered arithmetic type works
    (int, float, Decimal, Fraction). A NaN on either side never improves.
    """
    return new_cost < old_cost


def calculate_path_cost(path: Sequence[Any], cost_fn: CostFunc) -> Any:
    """Calculate total cost of a vertex path.

    A single-vertex path costs 0.
    """
    if not path:
        raise ValueError("path must contain at least one vertex")

    total: Any = 0
    for source, target in zip(path, path[1:]):
        total = total + cost_fn(source, target)
    return total


def validate_path(
    path: Sequence[Any],
    neighbor_fn: NeighborFunc,
    cost_fn: Optional[CostFunc] = None,
) -> None:
    """Validate that every step of ``path`` is an edge of the implicit graph."""
    if not path:
        raise PathValidationError("Path is empty")

    for i, (source, target) in enumerate(zip(path, path[1:])):
        if target not in list(neighbor_fn(source)):
            raise PathValidationError(
                f"Path discontinuity at step {i}: {target!r} is not a neighbor of {source!r}"
            )
        if cost_fn is not None:
            cost = cost_fn(source, target)
            if isinstance(cost, float) and math.isnan(cost):
                raise PathValidationError(f"Edge cost for {source!r} -> {target!r} is NaN")


@dataclass(slots=True)
class NodeRecord:
    """Per-vertex search bookkeeping.

    Parent links are vertex values, never references to other records, so
    reconstruction only needs the vertex-keyed record arena.
    """

    vertex: Any
    cost_to_come: Any = INFINITY
    is_open: bool = False
    is_closed: bool = False
    # Only relax() links a parent
    parent: Any = field(default=None, init=False)
    has_parent: bool = field(default=False, init=False)

    def relax(self, new_cost: Any, new_parent: Any) -> bool:
        """Adopt ``new_cost`` and ``new_parent`` if they improve the record.

        Returns True if the record changed. Non-improving updates never
        mutate the record.
        """
        if self.is_closed:
            raise InvalidOperationError(f"Cannot relax closed record for vertex {self.vertex!r}")
        if not is_better_cost(new_cost, self.cost_to_come):
            return False
        self.cost_to_come = new_cost
        self.parent = new_parent
        self.has_parent = True
        return True


def reconstruct_path(records: Dict[Hashable, NodeRecord], goal: Hashable) -> List[Any]:
    """Follow parent links from ``goal`` back to the root and return root-to-goal order."""
    path = [goal]
    record = records[goal]
    while record.has_parent:
        path.append(record.parent)
        record = records[record.parent]
    path.reverse()
    return path


class Frontier:
    """Min-priority queue of open node records keyed by cost-to-come.

    Decrease-key is done by lazy invalidation: a better entry is pushed and
    the vertex index is pointed at it, so superseded heap entries are
    skipped on extraction. Each open vertex has exactly one live entry.
    Closed vertices never re-enter.
    """

    def __init__(self) -> None:
        self._queue: List[Tuple[Any, int, NodeRecord]] = []
        self._entry_finder: Dict[Hashable, Tuple[Any, int]] = {}
        self._closed: Set[Hashable] = set()
        self._counter = 0  # Unique counter to break ties

    def insert_or_update(self, record: NodeRecord) -> bool:
        """Insert ``record`` or lower the key of its existing open entry.

        Returns True if the frontier changed.
        """
        vertex = record.vertex
        if record.is_closed or vertex in self._closed:
            logger.debug(f"Ignoring closed vertex {vertex!r}")
            return False

        if vertex in self._entry_finder:
            old_cost, _ = self._entry_finder[vertex]
            # Only update if new priority is lower (better)
            if not is_better_cost(record.cost_to_come, old_cost):
                return False

        entry = (record.cost_to_come, self._counter, record)
        self._entry_finder[vertex] = (record.cost_to_come, self._counter)
        heappush(self._queue, entry)
        self._counter += 1
        record.is_open = True
        return True

    def extract_min(self) -> NodeRecord:
        """Remove and return the cheapest open record, marking it closed."""
        while self._queue:
            _, count, record = heappop(self._queue)
            entry = self._entry_finder.get(record.vertex)
            if entry is None or entry[1] != count:
                continue
            del self._entry_finder[record.vertex]
            record.is_open = False
            record.is_closed = True
            self._closed.add(record.vertex)
            return record
        raise EmptyFrontierError("extract_min called on an empty frontier")

    def peek(self) -> Optional[NodeRecord]:
        """Return the cheapest open record without removing it."""
        while self._queue:
            _, count, record = self._queue[0]
            entry = self._entry_finder.get(record.vertex)
            if entry is not None and entry[1] == count:
                return record
            heappop(self._queue)
        return None

    def is_closed(self, vertex: Hashable) -> bool:
        return vertex in self._closed

    def empty(self) -> bool:
        """Return True if no open records remain."""
        return len(self._entry_finder) == 0

    def __contains__(self, vertex: Hashable) -> bool:
        return vertex in self._entry_finder

    def __len__(self) -> int:
        """Return the number of open records."""
        return len(self._entry_finder)


class MemoryManager:
    """Peak memory sampling with an optional ceiling for a running search."""

    def __init__(self, max_memory_mb: Optional[float] = None):
        if max_memory_mb is not None and max_memory_mb <= 0:
            raise ConfigurationError("max_memory_mb must be positive")

        self.max_memory = max_memory_mb * 1024 * 1024 if max_memory_mb else None
        self.start_memory = get_memory_usage()
        self._peak_memory = self.start_memory
        self._last_check = time.time()
        self._check_interval = MEMORY_CHECK_INTERVAL

    def check_memory(self) -> None:
        """Sample peak usage and raise MemoryError if growth exceeds the limit."""
        current_time = time.time()
        if current_time - self._last_check < self._check_interval:
            return
        self._last_check = current_time

        current = get_memory_usage()
        self._peak_memory = max(self._peak_memory, current)

        if not self.max_memory:
            return

        if current - self.start_memory > self.max_memory:
            # Try to reclaim memory
            gc.collect()
            current = get_memory_usage()

            if current - self.start_memory > self.max_memory:
                raise MemoryError(
                    f"Memory usage {current/1024/1024:.1f}MB exceeds "
                    f"limit of {self.max_memory/1024/1024:.1f}MB"
                )

    @property
    def peak_memory(self) -> int:
        """Peak sampled RSS in bytes."""
        return self._peak_memory

    def reset(self) -> None:
        """Restart tracking from the current memory usage."""
        self._peak_memory = get_memory_usage()
        self.start_memory = self._peak_memory
        self._last_check = time.time()


def get_memory_usage() -> int:
    """Get current memory usage in bytes."""
    process = psutil.Process(os.getpid())
    return process.memory_info().rss
