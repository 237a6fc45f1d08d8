"""Path finding algorithm implementations."""

from lodestar.core.graph_paths.algorithms.dijkstra import DijkstraFinder, search

__all__ = [
    "DijkstraFinder",
    "search",
]
