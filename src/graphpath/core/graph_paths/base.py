from abc import ABC, abstractmethod
from typing import Any, Hashable, List, Optional

from graphpath.core.exceptions import NullVertexError, VertexNotFoundError
from graphpath.core.graph_paths.models import PerformanceMetrics
from graphpath.core.models import Edge
from graphpath.core.types import GraphProtocol


class PathFinder[T: Hashable](ABC):
    """Abstract base class for path finding algorithms."""

    def __init__(self, graph: GraphProtocol[Any]):
        """Initialize finder with graph."""
        self.graph = graph
        self.metrics: Optional[PerformanceMetrics] = None

    @abstractmethod
    def find_path(self, start_vertex: T, end_vertex: T) -> List[Edge[T]]:
        """Find path between vertices, empty when there is none."""
        pass

    def validate_vertices(self, start_vertex: T, end_vertex: T) -> None:
        """Validate that both vertices are given and exist in graph."""
        if start_vertex is None:
            raise NullVertexError("from_value")
        if end_vertex is None:
            raise NullVertexError("to_value")
        if not self.graph.has_vertex(start_vertex):
            raise VertexNotFoundError(start_vertex, "from_value")
        if not self.graph.has_vertex(end_vertex):
            raise VertexNotFoundError(end_vertex, "to_value")
