"""Core graph functionality."""

from .enums import EdgePolicy, GraphEvent
from .exceptions import (
    GraphOperationError,
    InvalidVertexError,
    NullVertexError,
    VertexNotFoundError,
)
from .models import Edge, Vertex
from .types import GraphProtocol
from .graph import Graph, GraphStateListener, directed_graph, undirected_graph

__all__ = [
    "Edge",
    "EdgePolicy",
    "Graph",
    "GraphEvent",
    "GraphOperationError",
    "GraphProtocol",
    "GraphStateListener",
    "InvalidVertexError",
    "NullVertexError",
    "Vertex",
    "VertexNotFoundError",
    "directed_graph",
    "undirected_graph",
]
