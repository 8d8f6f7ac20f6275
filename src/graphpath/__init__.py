"""
graphpath - In-memory graphs with unweighted shortest path queries

This package provides a small graph container:

- Directed and undirected graphs over any hashable vertex value
- Idempotent vertex and edge insertion with eager argument validation
- Fewest-hops path queries by breadth-first search

For more information, please see the documentation.
"""

__version__ = "0.1.0"

# Version compatibility check
import sys

if sys.version_info < (3, 12):
    raise RuntimeError("graphpath requires Python 3.12 or higher")

# Import commonly used components for easier access
from .core.enums import EdgePolicy
from .core.exceptions import GraphOperationError, InvalidVertexError
from .core.graph import Graph, directed_graph, undirected_graph
from .core.models import Edge, Vertex

__all__ = [
    "Edge",
    "EdgePolicy",
    "Graph",
    "GraphOperationError",
    "InvalidVertexError",
    "Vertex",
    "directed_graph",
    "undirected_graph",
]
