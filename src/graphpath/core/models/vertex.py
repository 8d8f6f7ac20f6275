"""
Vertex model for the graph container.

A vertex holds its value and the values of the vertices it has a direct
edge to. Neighbors are kept in insertion order so traversal order is
reproducible between runs.
"""

from dataclasses import dataclass, field
from typing import Dict, FrozenSet, Generic, Tuple, TypeVar

T = TypeVar("T")


@dataclass(eq=False)
class Vertex(Generic[T]):
    """
    Vertex record owned by a graph.

    Attributes:
        value (T): Identity of the vertex, never changes
        edges_to (FrozenSet[T]): Snapshot of outgoing neighbor values
        neighbors (Tuple[T, ...]): Outgoing neighbor values in insertion order

    Two vertices are equal when both their values and their neighbor sets
    are equal. Vertices are mutable and therefore unhashable.
    """

    value: T
    _edges_to: Dict[T, None] = field(default_factory=dict, repr=False)

    @property
    def edges_to(self) -> FrozenSet[T]:
        return frozenset(self._edges_to)

    @property
    def neighbors(self) -> Tuple[T, ...]:
        return tuple(self._edges_to)

    def add_edge_to(self, value: T) -> None:
        """
        Add an outgoing edge to ``value``.

        Re-adding an existing neighbor is a no-op. No validation is done here;
        the owning graph checks that ``value`` is one of its vertices.
        """
        self._edges_to.setdefault(value, None)

    def _discard_edge_to(self, value: T) -> None:
        """Remove an outgoing edge, used to undo a failed insertion."""
        self._edges_to.pop(value, None)

    def copy(self) -> "Vertex[T]":
        """Return a detached copy; changes to it do not reach this vertex."""
        return Vertex(self.value, dict(self._edges_to))

    def has_edge_to(self, value: T) -> bool:
        return value in self._edges_to

    def __len__(self) -> int:
        """Return the out-degree of the vertex."""
        return len(self._edges_to)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vertex):
            return NotImplemented
        return self.value == other.value and self._edges_to.keys() == other._edges_to.keys()

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Vertex(value={self.value!r}, edges_to={list(self._edges_to)!r})"
