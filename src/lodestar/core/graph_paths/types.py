"""Type definitions for implicit-graph path finding."""

from enum import Enum
from typing import Any, Callable, Iterable, List, Optional


class PathType(Enum):
    """Enumeration of path finding types."""

    SHORTEST = "shortest"
    DIJKSTRA = "dijkstra"  # Non-negative weights only


class SearchStatus(Enum):
    """Lifecycle of a single search invocation."""

    INITIALIZED = "initialized"
    RUNNING = "running"
    SUCCEEDED = "succeeded"  # Terminal
    EXHAUSTED = "exhausted"  # Terminal
    ABORTED = "aborted"  # Terminal, raised out of the loop (memory ceiling, callback error)

    @property
    def is_terminal(self) -> bool:
        return self in (SearchStatus.SUCCEEDED, SearchStatus.EXHAUSTED, SearchStatus.ABORTED)


# Type alias for neighbor enumeration: vertex -> finite iterable of adjacent vertices
NeighborFunc = Callable[[Any], Iterable[Any]]

# Type alias for edge cost functions: (from, to) -> non-negative cost
CostFunc = Callable[[Any, Any], Any]

# Type alias for the plain search result; vertices must be hashable
SearchResult = Optional[List[Any]]
