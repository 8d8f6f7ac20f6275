"""
Core type definitions and protocols.

This module provides the structural contract path finders rely on, so the
algorithms do not depend on the concrete graph class.
"""

from typing import Hashable, Protocol, Tuple, TypeVar

T = TypeVar("T", bound=Hashable)


class GraphProtocol(Protocol[T]):
    """Protocol defining required graph operations."""

    def has_vertex(self, value: T) -> bool:
        """Check if a vertex exists in the graph."""
        ...

    def get_neighbors(self, value: T) -> Tuple[T, ...]:
        """Get outgoing neighbors of a vertex in insertion order."""
        ...
