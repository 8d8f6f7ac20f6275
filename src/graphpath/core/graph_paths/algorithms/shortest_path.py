"""
Unweighted shortest path search.

Breadth-first search in its level-synchronous form: the whole frontier is
expanded before the next one is built, so vertices are settled in order of
increasing hop count from the start vertex.
"""

import logging
from time import time
from typing import Dict, Hashable, List, TypeVar

from ....core.models import Edge
from ..base import PathFinder
from ..models import PerformanceMetrics, VisitedVertex
from ..utils import collect_path

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=Hashable)


class ShortestPathFinder(PathFinder[T]):
    """Fewest-hops path finder."""

    def find_path(self, start_vertex: T, end_vertex: T) -> List[Edge[T]]:
        """
        Find one path with the fewest edges from start to end.

        Both vertices are validated before the search begins. Ties between
        equally short paths go to the neighbor inserted first.

        Args:
            start_vertex: Value of the vertex to start from
            end_vertex: Value of the vertex to reach

        Returns:
            Edges of the path in travel order. Empty when the end vertex is
            unreachable or equal to the start vertex.

        Raises:
            NullVertexError: If either vertex is None
            VertexNotFoundError: If either vertex is not in the graph
        """
        self.validate_vertices(start_vertex, end_vertex)

        metrics = PerformanceMetrics(operation="shortest_path", start_time=time())
        self.metrics = metrics
        try:
            paths = self._search(start_vertex, metrics)
            path = collect_path(start_vertex, end_vertex, paths)
            metrics.path_length = len(path)
        finally:
            metrics.end_time = time()

        if path:
            logger.debug(f"Found path {start_vertex} -> {end_vertex} with {len(path)} edges")
        else:
            logger.debug(f"No path from {start_vertex} to {end_vertex}")
        return path

    def _search(self, start_vertex: T, metrics: PerformanceMetrics) -> Dict[T, VisitedVertex[T]]:
        """Record how every vertex reachable from start_vertex is reached."""
        logger.debug(f"Starting breadth-first search from {start_vertex}")

        paths: Dict[T, VisitedVertex[T]] = {start_vertex: VisitedVertex(None, 0)}
        # dicts as insertion-ordered sets
        frontier: Dict[T, None] = {start_vertex: None}

        while frontier:
            metrics.layers += 1
            updated: Dict[T, None] = {}
            for current in frontier:
                metrics.nodes_explored += 1
                next_distance = paths[current].distance + 1
                for neighbor in self.graph.get_neighbors(current):
                    known = paths.get(neighbor)
                    if known is None or known.distance > next_distance:
                        paths[neighbor] = VisitedVertex(current, next_distance)
                        updated[neighbor] = None
            logger.debug(f"  Layer {metrics.layers}: {len(updated)} vertices reached")
            frontier = updated

        return paths
