"""Shared test fixtures."""

from typing import Callable, List, Tuple

import pytest

from graphpath.core.enums import EdgePolicy, GraphEvent
from graphpath.core.graph import Graph


@pytest.fixture
def directed() -> Graph[int]:
    """Fixture providing an empty directed graph."""
    return Graph(EdgePolicy.DIRECTED)


@pytest.fixture
def undirected() -> Graph[int]:
    """Fixture providing an empty undirected graph."""
    return Graph(EdgePolicy.UNDIRECTED)


@pytest.fixture(params=list(EdgePolicy), ids=lambda policy: policy.value)
def any_graph(request) -> Graph[int]:
    """Fixture providing an empty graph of each policy."""
    return Graph(request.param)


@pytest.fixture
def make_graph() -> Callable[..., Graph[int]]:
    """
    Fixture providing a builder: vertices are added first, then edges.

    make_graph(range(1, 4), [(1, 2), (2, 3)])
    """

    def _make(vertices, edges=(), policy: EdgePolicy = EdgePolicy.DIRECTED) -> Graph[int]:
        graph = Graph(policy)
        for value in vertices:
            graph.add_vertex(value)
        for from_value, to_value in edges:
            graph.add_edge(from_value, to_value)
        return graph

    return _make


class RecordingListener:
    """Listener collecting every state change it is told about."""

    def __init__(self):
        self.events: List[Tuple[GraphEvent, dict]] = []

    def on_state_change(self, change_type: GraphEvent, details: dict) -> None:
        self.events.append((change_type, details))


@pytest.fixture
def listener() -> RecordingListener:
    return RecordingListener()
