"""
Utility functions for path finding operations.
"""

from typing import Dict, Hashable, List, TypeVar

from graphpath.core.graph_paths.models import VisitedVertex
from graphpath.core.models import Edge

T = TypeVar("T", bound=Hashable)


def collect_path(start_vertex: T, end_vertex: T, paths: Dict[T, VisitedVertex[T]]) -> List[Edge[T]]:
    """
    Rebuild the path to ``end_vertex`` from the search records.

    Walks ``previous`` links back from ``end_vertex`` to ``start_vertex`` and
    returns the edges in travel order. An unreachable end vertex and
    ``start_vertex == end_vertex`` both produce an empty list.
    """
    visited = paths.get(end_vertex)
    if visited is None:
        return []

    path: List[Edge[T]] = []
    current = end_vertex
    # Only the start vertex has no predecessor
    while visited.previous is not None:
        path.append(Edge(visited.previous, current))
        current = visited.previous
        visited = paths[current]

    if current != start_vertex:
        raise ValueError(f"search records do not lead back to {start_vertex!r}")

    path.reverse()
    return path


def path_vertices(path: List[Edge[T]]) -> List[T]:
    """
    Get the sequence of vertex values visited by a path.

    Returns:
        List of vertex values in order of traversal, empty for an empty path
    """
    if not path:
        return []
    result = [path[0].from_vertex]
    result.extend(edge.to_vertex for edge in path)
    return result
