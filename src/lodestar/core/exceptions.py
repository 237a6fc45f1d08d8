"""
Custom exceptions for the path search system.

This module defines the hierarchy of custom exceptions used by the search core
and its facades. An unreachable goal is not an error for the core entry point;
it is reported as ``None``. The exceptions below cover facade-level failures
and internal logic faults.
"""


class GraphOperationError(Exception):
    """
    Raised when graph operations fail.

    This exception is raised when an operation over the implicit graph cannot
    produce the requested result.

    Examples:
        * No path between two vertices (see NoPathFoundError)
        * Search aborted by a wrapping bound
    """

    def __str__(self) -> str:
        """Format graph operation error message."""
        return f"Graph Operation Error: {super().__str__()}"


class NoPathFoundError(GraphOperationError):
    """
    Raised when no path connects the start vertex to the goal vertex.

    Only the exception-style facade (``PathFinding.shortest_path``) raises this;
    ``search`` and ``DijkstraFinder.find_path`` return ``None`` instead.
    """


class InvalidOperationError(Exception):
    """
    Raised when an operation is invalid in the current context.

    Examples:
        * Relaxing a node record that has already been closed
        * Invalid state transitions
    """


class EmptyFrontierError(InvalidOperationError):
    """
    Raised when extraction is attempted on an empty frontier.

    The search driver checks the frontier for emptiness before every
    extraction, so this is unreachable through the public entry points and
    indicates a logic fault when it occurs.
    """


class ConfigurationError(Exception):
    """
    Raised when configuration is invalid.

    Examples:
        * Non-positive memory limit
        * Non-callable neighbor or cost function
    """
