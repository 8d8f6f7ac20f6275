"""Graph path finding functionality."""

from .algorithms.shortest_path import ShortestPathFinder
from .base import PathFinder
from .models import PerformanceMetrics, VisitedVertex
from .utils import collect_path, path_vertices

__all__ = [
    "PathFinder",
    "PerformanceMetrics",
    "ShortestPathFinder",
    "VisitedVertex",
    "collect_path",
    "path_vertices",
]
