"""
The MODEL layer contains the graph data structures.
It has NO knowledge of the visualization (PyVista).
"""
from forcelayout.model.edge import Edge
from forcelayout.model.graph import EdgePolicy, Graph, GraphSummary
from forcelayout.model.hooks import NullRenderHook, RenderHook
from forcelayout.model.vertex import Vertex

__all__ = ["Edge", "EdgePolicy", "Graph", "GraphSummary", "NullRenderHook", "RenderHook", "Vertex"]
