"""
Lodestar - Generic shortest path search over implicit graphs

This package provides single-source shortest path search for planning,
routing and game-AI code. Graphs are never stored; they are described by a
neighbor function and an edge cost function supplied by the caller:

- ``search`` returns the cheapest vertex path, or None if the goal is unreachable
- ``DijkstraFinder`` exposes the same search with metrics and an optional memory bound
- ``PathFinding`` is an exception-raising facade over the finders
"""

__version__ = "0.1.0"
__author__ = "Lodestar Team"
__license__ = "See LICENSE file"

# Version compatibility check
import sys

if sys.version_info < (3, 12):
    raise RuntimeError("Lodestar requires Python 3.12 or higher")

# Import commonly used components for easier access
from .core.exceptions import NoPathFoundError
from .core.graph_paths import DijkstraFinder, PathFinding, PathResult, search

__all__ = [
    "DijkstraFinder",
    "NoPathFoundError",
    "PathFinding",
    "PathResult",
    "search",
]
