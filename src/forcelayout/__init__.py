"""
Incremental force-directed 3D graph layout.

Typical use::

    graph = Graph(seed=1)
    a = graph.add_vertex()
    b = graph.add_vertex()
    graph.add_edge(a, b, strength=1.0)
    for _ in range(100):
        graph.layout()
"""
from forcelayout.config import LayoutConfig
from forcelayout.errors import InvalidArgumentError, LayoutError, NotFoundError, ReentrantMutationError
from forcelayout.model import Edge, EdgePolicy, Graph, GraphSummary, NullRenderHook, RenderHook, Vertex
from forcelayout.solvers import RelaxationResult

__all__ = [
    "Edge",
    "EdgePolicy",
    "Graph",
    "GraphSummary",
    "InvalidArgumentError",
    "LayoutConfig",
    "LayoutError",
    "NotFoundError",
    "NullRenderHook",
    "ReentrantMutationError",
    "RelaxationResult",
    "RenderHook",
    "Vertex",
]
