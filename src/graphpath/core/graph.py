"""
Core graph data structure with an adjacency list representation.

This module provides the Graph class: a container of vertices identified by
hashable values, each holding the values of the vertices it has a direct
edge to. Whether ``add_edge`` inserts one adjacency entry or two is decided
by the graph's ``EdgePolicy``; everything else, including the shortest path
query, only ever sees directed adjacency.

Vertices and edges are only ever added. The graph is not thread-safe:
callers sharing a graph between threads must serialize access themselves.
"""

import logging
from contextlib import contextmanager
from types import MappingProxyType
from typing import (
    Any,
    Dict,
    Generator,
    Hashable,
    Iterable,
    Iterator,
    List,
    Mapping,
    Protocol,
    Tuple,
)

from .enums import EdgePolicy, GraphEvent
from .exceptions import NullVertexError, VertexNotFoundError
from .graph_paths import ShortestPathFinder
from .models import Edge, Vertex

logger = logging.getLogger(__name__)


class GraphStateListener(Protocol):
    """Protocol for objects that listen to graph state changes."""

    def on_state_change(self, change_type: GraphEvent, details: dict) -> None:
        """Called when the graph state changes."""


class Graph[T: Hashable]:
    """
    In-memory graph with breadth-first shortest path queries.

    Vertex values must be hashable; two values denote the same vertex when
    they compare equal and hash equally. Objects that do not override
    ``__eq__`` are therefore identified by identity.

    Attributes:
        _policy (EdgePolicy): Decides how ``add_edge`` inserts adjacency
        _vertices (Dict[T, Vertex[T]]): Vertex records keyed by value
        _listeners (List[GraphStateListener]): State change listeners

    Example:
        >>> graph = Graph.undirected()
        >>> graph.add_vertex("a")
        >>> graph.add_vertex("b")
        >>> graph.add_edge("a", "b")
        >>> graph.get_path("b", "a")
        [Edge(from_vertex='b', to_vertex='a')]
    """

    def __init__(self, policy: EdgePolicy = EdgePolicy.DIRECTED):
        """
        Initialize an empty graph.

        Args:
            policy (EdgePolicy): DIRECTED inserts one adjacency entry per
                ``add_edge`` call, UNDIRECTED inserts both directions.
        """
        if not isinstance(policy, EdgePolicy):
            raise TypeError(f"policy must be an EdgePolicy, got {policy!r}")
        self._policy = policy
        self._vertices: Dict[T, Vertex[T]] = {}
        self._listeners: List[GraphStateListener] = []

    @classmethod
    def directed(cls) -> "Graph[T]":
        """Create an empty directed graph."""
        return cls(EdgePolicy.DIRECTED)

    @classmethod
    def undirected(cls) -> "Graph[T]":
        """Create an empty undirected graph."""
        return cls(EdgePolicy.UNDIRECTED)

    @classmethod
    def from_edges(
        cls, edges: Iterable[Tuple[T, T]], policy: EdgePolicy = EdgePolicy.DIRECTED
    ) -> "Graph[T]":
        """
        Create a graph from ``(from, to)`` pairs.

        Every endpoint is added as a vertex before any edge is inserted.
        """
        pairs = list(edges)
        graph = cls(policy)
        for from_value, to_value in pairs:
            graph.add_vertex(from_value)
            graph.add_vertex(to_value)
        for from_value, to_value in pairs:
            graph.add_edge(from_value, to_value)
        return graph

    @property
    def policy(self) -> EdgePolicy:
        return self._policy

    @property
    def is_directed(self) -> bool:
        """True when ``add_edge`` inserts a single direction."""
        return self._policy is EdgePolicy.DIRECTED

    @property
    def vertices(self) -> Mapping[T, Vertex[T]]:
        """
        Read-only snapshot of the vertex records keyed by value.

        The records are copies, so mutating them does not change the graph.
        """
        return MappingProxyType(
            {value: vertex.copy() for value, vertex in self._vertices.items()}
        )

    def add_state_listener(self, listener: GraphStateListener) -> None:
        """Add a listener for state changes."""
        self._listeners.append(listener)

    def remove_state_listener(self, listener: GraphStateListener) -> None:
        """Remove a state change listener."""
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _notify_state_change(self, change_type: GraphEvent, details: dict) -> None:
        """Notify listeners of a state change."""
        for listener in self._listeners:
            listener.on_state_change(change_type, details)

    def add_vertex(self, value: T) -> None:
        """
        Add a vertex without edges.

        Adding a value that is already present does nothing.

        Raises:
            NullVertexError: If value is None
        """
        if value is None:
            raise NullVertexError("value")
        if value in self._vertices:
            return

        self._vertices[value] = Vertex(value)
        logger.debug(f"Added vertex {value!r}")
        self._notify_state_change(GraphEvent.VERTEX_ADDED, {"value": value})

    def add_edge(self, from_value: T, to_value: T) -> None:
        """
        Add an edge according to the graph's policy.

        Both vertices are validated before anything is inserted. Listeners
        are notified once every direction is in place; if one of them
        raises, the inserted entries are removed again, so a failed call
        leaves the graph unchanged.

        Raises:
            NullVertexError: If either value is None
            VertexNotFoundError: If either vertex is not in the graph
        """
        self._get_vertex(from_value, "from_value")
        self._get_vertex(to_value, "to_value")

        with self._edge_transaction() as inserted:
            if self._add_path(from_value, to_value):
                inserted.append((from_value, to_value))
            if self._policy is EdgePolicy.UNDIRECTED and self._add_path(to_value, from_value):
                inserted.append((to_value, from_value))

            for source, target in inserted:
                self._notify_state_change(
                    GraphEvent.EDGE_ADDED, {"from_value": source, "to_value": target}
                )

    @contextmanager
    def _edge_transaction(self) -> Generator[List[Tuple[T, T]], None, None]:
        """Undo the adjacency entries recorded in the yielded list on error."""
        inserted: List[Tuple[T, T]] = []
        try:
            yield inserted
        except Exception:
            for source, target in reversed(inserted):
                self._vertices[source]._discard_edge_to(target)
            logger.debug(f"Rolled back {len(inserted)} adjacency entries")
            raise

    def _add_path(self, from_value: T, to_value: T) -> bool:
        """
        Add a single directed adjacency entry between existing vertices.

        Returns:
            bool: False when the entry was already present
        """
        vertex_from = self._get_vertex(from_value, "from_value")
        vertex_to = self._get_vertex(to_value, "to_value")

        if vertex_from.has_edge_to(vertex_to.value):
            return False
        vertex_from.add_edge_to(vertex_to.value)
        logger.debug(f"Added edge {from_value!r} -> {to_value!r}")
        return True

    def _get_vertex(self, value: T, argument: str = "value") -> Vertex[T]:
        if value is None:
            raise NullVertexError(argument)
        vertex = self._vertices.get(value)
        if vertex is None:
            raise VertexNotFoundError(value, argument)
        return vertex

    def get_path(self, from_value: T, to_value: T) -> List[Edge[T]]:
        """
        Find a path with the fewest edges between two vertices.

        Each call runs a fresh breadth-first search; nothing is cached.
        When several shortest paths exist the one through the earliest
        inserted neighbors is returned.

        Args:
            from_value: Value of the start vertex
            to_value: Value of the end vertex

        Returns:
            List[Edge[T]]: Edges in travel order. Empty when no path exists
            or when ``from_value == to_value``.

        Raises:
            NullVertexError: If either value is None
            VertexNotFoundError: If either vertex is not in the graph
        """
        finder: ShortestPathFinder[T] = ShortestPathFinder(self)
        path = finder.find_path(from_value, to_value)
        if finder.metrics is not None and logger.isEnabledFor(logging.DEBUG):
            logger.debug(f"Path query metrics: {finder.metrics.to_dict()}")
        return path

    def has_vertex(self, value: Any) -> bool:
        """Check if a vertex exists in the graph."""
        return value is not None and value in self._vertices

    def get_neighbors(self, value: T) -> Tuple[T, ...]:
        """Get outgoing neighbors of a vertex in insertion order."""
        return self._get_vertex(value).neighbors

    def has_edge(self, from_value: T, to_value: T) -> bool:
        """Check if a directed adjacency entry exists between two vertices."""
        vertex = self._vertices.get(from_value)
        return vertex is not None and vertex.has_edge_to(to_value)

    def get_edges(self) -> Iterator[Edge[T]]:
        """
        Get all directed adjacency entries in the graph.

        An undirected edge appears once per direction.
        """
        for value, vertex in self._vertices.items():
            for neighbor in vertex.neighbors:
                yield Edge(value, neighbor)

    def get_edge_count(self) -> int:
        """Get the total number of directed adjacency entries."""
        return sum(len(vertex) for vertex in self._vertices.values())

    def __contains__(self, value: object) -> bool:
        return self.has_vertex(value)

    def __len__(self) -> int:
        """Return the number of vertices."""
        return len(self._vertices)

    def __repr__(self) -> str:
        return (
            f"Graph(policy={self._policy.value}, vertices={len(self._vertices)}, "
            f"edges={self.get_edge_count()})"
        )


def directed_graph() -> Graph[Any]:
    """Create an empty graph whose edges go one way."""
    return Graph(EdgePolicy.DIRECTED)


def undirected_graph() -> Graph[Any]:
    """Create an empty graph whose edges go both ways."""
    return Graph(EdgePolicy.UNDIRECTED)
