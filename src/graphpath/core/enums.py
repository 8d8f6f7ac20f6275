"""Enumerations shared by the graph core."""

from enum import Enum, auto


class EdgePolicy(Enum):
    """How ``Graph.add_edge`` turns one call into adjacency entries."""

    DIRECTED = "directed"  # one entry: from -> to
    UNDIRECTED = "undirected"  # two entries: from -> to and to -> from


class GraphEvent(Enum):
    """Events that can occur in the graph."""

    VERTEX_ADDED = auto()
    EDGE_ADDED = auto()
