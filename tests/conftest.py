from __future__ import annotations

import pytest

from forcelayout.model.graph import Graph


class RecordingHook:
    """Render hook that records every notification in order."""

    def __init__(self) -> None:
        self.events: list[tuple[str, int]] = []
        self.layouts = 0

    def on_vertex_created(self, vertex) -> None:
        self.events.append(("vertex_created", vertex.id))

    def on_vertex_removed(self, vertex) -> None:
        self.events.append(("vertex_removed", vertex.id))

    def on_edge_created(self, edge) -> None:
        self.events.append(("edge_created", edge.id))

    def on_edge_removed(self, edge) -> None:
        self.events.append(("edge_removed", edge.id))

    def on_layout(self, graph) -> None:
        self.layouts += 1


def assert_incidence_consistent(graph: Graph) -> None:
    """Every vertex's incident edges are exactly the edges touching it."""
    for vertex in graph.vertices.values():
        expected = {
            edge.id for edge in graph.edges.values()
            if edge.source is vertex or edge.target is vertex
        }
        assert set(vertex.edges) == expected
        assert vertex.degree == len(expected)


@pytest.fixture
def hook() -> RecordingHook:
    return RecordingHook()


@pytest.fixture
def graph(hook: RecordingHook) -> Graph:
    return Graph(hook=hook, seed=7)


@pytest.fixture
def check_incidence():
    return assert_incidence_consistent
