"""
Data models for graph path finding.

This module provides the records used while a path query runs:
- VisitedVertex: how a vertex was reached during one breadth-first search
- PerformanceMetrics: timing and exploration counters for one query

Neither record is kept on the graph; both live only as long as the query
(or the finder that ran it).

Example:
    >>> VisitedVertex(previous=None, distance=0)
    VisitedVertex(previous=None, distance=0)
"""

from dataclasses import dataclass
from typing import Dict, Generic, Optional, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class VisitedVertex(Generic[T]):
    """
    Best known way of reaching a vertex.

    Attributes:
        previous: Vertex the search came from, ``None`` for the start vertex
        distance: Number of edges from the start vertex
    """

    previous: Optional[T]
    distance: int

    def __post_init__(self):
        if self.distance < 0:
            raise ValueError("distance cannot be negative")


@dataclass
class PerformanceMetrics:
    """
    Container for path finding performance metrics.

    Attributes:
        operation: Name of the path finding operation
        start_time: Operation start timestamp
        end_time: Operation end timestamp (0.0 if not completed)
        path_length: Length of found path (if applicable)
        nodes_explored: Number of vertices expanded during search
        layers: Number of frontier layers processed

    Example:
        >>> metrics = PerformanceMetrics(operation="shortest_path", start_time=time())
        >>> # ... perform operation ...
        >>> metrics.end_time = time()
        >>> print(f"Operation took {metrics.duration:.2f}ms")
    """

    operation: str
    start_time: float
    end_time: float = 0.0
    path_length: Optional[int] = None
    nodes_explored: int = 0
    layers: int = 0

    def __post_init__(self):
        """Validate metrics after initialization."""
        if not isinstance(self.operation, str) or not self.operation.strip():
            raise ValueError("operation must be a non-empty string")

        if self.end_time < 0:
            raise ValueError("end_time cannot be negative")

        if self.end_time and self.end_time < self.start_time:
            raise ValueError("end_time cannot be before start_time")

    @property
    def duration(self) -> float:
        """
        Calculate operation duration in milliseconds.

        Returns:
            Duration of the operation in milliseconds
        """
        return (self.end_time - self.start_time) * 1000 if self.end_time else 0.0

    def to_dict(self) -> Dict[str, Union[str, float, int, None]]:
        """
        Convert metrics to dictionary format.

        Returns:
            Dictionary containing all metrics
        """
        return {
            "operation": self.operation,
            "duration_ms": self.duration,
            "path_length": self.path_length,
            "nodes_explored": self.nodes_explored,
            "layers": self.layers,
        }
