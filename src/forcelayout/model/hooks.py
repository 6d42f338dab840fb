"""
Render Hook Contract
====================
The layout core notifies a render hook at fixed lifecycle points. The hook
owns every visual (meshes, lines, labels) and reads vertex positions; it
must not write kinematic state.

Order guarantees:
    - Removing a vertex notifies each incident edge removal before the vertex.
    - ``on_layout`` is called once after every completed layout step.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from forcelayout.model.edge import Edge
    from forcelayout.model.graph import Graph
    from forcelayout.model.vertex import Vertex


@runtime_checkable
class RenderHook(Protocol):
    def on_vertex_created(self, vertex: Vertex) -> None: ...
    def on_vertex_removed(self, vertex: Vertex) -> None: ...
    def on_edge_created(self, edge: Edge) -> None: ...
    def on_edge_removed(self, edge: Edge) -> None: ...
    def on_layout(self, graph: Graph) -> None: ...


class NullRenderHook:
    """Render hook that ignores every notification (headless use)."""

    def on_vertex_created(self, vertex: Vertex) -> None:
        pass

    def on_vertex_removed(self, vertex: Vertex) -> None:
        pass

    def on_edge_created(self, edge: Edge) -> None:
        pass

    def on_edge_removed(self, edge: Edge) -> None:
        pass

    def on_layout(self, graph: Graph) -> None:
        pass
