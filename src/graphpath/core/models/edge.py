"""
Edge model returned by path queries.

An edge is an immutable ``(from_vertex, to_vertex)`` pair compared by value.
The graph does not store edges; it builds them on demand when describing a
path or enumerating adjacency.
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Edge(Generic[T]):
    """
    Directed connection from one vertex value to another.

    Attributes:
        from_vertex (T): Value of the source vertex
        to_vertex (T): Value of the target vertex

    Example:
        >>> Edge(1, 2) == Edge(1, 2)
        True
        >>> Edge(1, 2).reversed()
        Edge(from_vertex=2, to_vertex=1)
    """

    from_vertex: T
    to_vertex: T

    def reversed(self) -> "Edge[T]":
        """Return the edge pointing the other way."""
        return Edge(self.to_vertex, self.from_vertex)
