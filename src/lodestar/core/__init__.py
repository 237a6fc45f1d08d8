"""Core path search functionality."""

from .exceptions import (
    ConfigurationError,
    EmptyFrontierError,
    GraphOperationError,
    InvalidOperationError,
    NoPathFoundError,
)
from .graph_paths import (
    DijkstraFinder,
    PathFinding,
    PathResult,
    PathType,
    PathValidationError,
    SearchStatus,
    search,
)

__all__ = [
    "ConfigurationError",
    "DijkstraFinder",
    "EmptyFrontierError",
    "GraphOperationError",
    "InvalidOperationError",
    "NoPathFoundError",
    "PathFinding",
    "PathResult",
    "PathType",
    "PathValidationError",
    "SearchStatus",
    "search",
]
