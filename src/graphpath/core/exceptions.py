"""
Custom exceptions for the graph container.

This module defines the hierarchy of exceptions raised by graph operations.
Every failure is detected before the graph is mutated or traversed, so a
raised exception always leaves the graph exactly as it was before the call.
"""

from typing import Any


class GraphOperationError(Exception):
    """
    Raised when graph operations fail.

    Base class for every error raised by the package.

    Examples:
        * Invalid vertex values
        * Edge insertion between unknown vertices
        * Path queries on unknown vertices
    """

    def __str__(self) -> str:
        """Format graph operation error message."""
        return f"Graph Operation Error: {super().__str__()}"


class InvalidVertexError(GraphOperationError, ValueError):
    """
    Raised when a vertex argument is not acceptable.

    This is the single invalid-argument condition of the graph API. It also
    derives from ``ValueError`` so callers can catch the built-in type.
    """


class NullVertexError(InvalidVertexError):
    """
    Raised when ``None`` is passed where a vertex value is required.

    Examples:
        * ``graph.add_vertex(None)``
        * ``graph.add_edge(1, None)``
        * ``graph.get_path(None, 2)``
    """

    def __init__(self, argument: str):
        self.argument = argument
        super().__init__(f"{argument} must not be None")


class VertexNotFoundError(InvalidVertexError):
    """
    Raised when a vertex value is not present in the graph.

    Examples:
        * Edge insertion from or to an unknown vertex
        * Path query from or to an unknown vertex
    """

    def __init__(self, value: Any, argument: str = "vertex"):
        self.value = value
        self.argument = argument
        super().__init__(f"{argument} '{value}' doesn't exist")
