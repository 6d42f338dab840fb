"""
PyVista Render Hook
===================
Draws every vertex as a cube and every edge as a line, and moves the
geometry after each layout step.

Vertex options understood:
    size                    - edge length of the cube (overrides the three below)
    width, height, depth    - cube dimensions, default 3
    color                   - default "#00ccaa"
    texture                 - path of an image to map onto the cube
    wireframe               - draw the cube as a wireframe

Edge options understood:
    color                   - default "black"
    line_width              - default 1.0
"""
from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import TYPE_CHECKING, Any, Dict

import numpy as np
import pyvista as pv

if TYPE_CHECKING:
    import numpy.typing as npt

    from forcelayout.model.edge import Edge
    from forcelayout.model.graph import Graph
    from forcelayout.model.vertex import Vertex

logger = logging.getLogger(__name__)

DEFAULT_VERTEX_COLOR = "#00ccaa"
DEFAULT_EDGE_COLOR = "black"
DEFAULT_CUBE_SIDE = 3.0


@dataclass
class VertexVisual:
    mesh: pv.PolyData
    actor: Any
    # Cube corners relative to the vertex position
    offsets: npt.NDArray[np.float64]


@dataclass
class EdgeVisual:
    mesh: pv.PolyData
    actor: Any


class PyVistaRenderHook:
    def __init__(self, plotter: pv.Plotter) -> None:
        self.plotter = plotter
        self.vertex_visuals: Dict[int, VertexVisual] = {}
        self.edge_visuals: Dict[int, EdgeVisual] = {}

    @staticmethod
    def _cube_dimensions(options: Dict[str, Any]) -> tuple[float, float, float]:
        if options.get("size"):
            side = float(options["size"])
            return side, side, side
        return (
            float(options.get("width", DEFAULT_CUBE_SIDE)),
            float(options.get("height", DEFAULT_CUBE_SIDE)),
            float(options.get("depth", DEFAULT_CUBE_SIDE)),
        )

    def on_vertex_created(self, vertex: Vertex) -> None:
        width, height, depth = self._cube_dimensions(vertex.options)
        mesh = pv.Cube(center=(0.0, 0.0, 0.0), x_length=width, y_length=height, z_length=depth)
        offsets = np.array(mesh.points, dtype=np.float64)
        mesh.points = offsets + vertex.position

        mesh_kwargs: Dict[str, Any] = {}
        if vertex.options.get("texture"):
            mesh_kwargs["texture"] = pv.read_texture(vertex.options["texture"])
        else:
            mesh_kwargs["color"] = vertex.options.get("color", DEFAULT_VERTEX_COLOR)
        if vertex.options.get("wireframe"):
            mesh_kwargs["style"] = "wireframe"

        actor = self.plotter.add_mesh(mesh, **mesh_kwargs)
        self.vertex_visuals[vertex.id] = VertexVisual(mesh=mesh, actor=actor, offsets=offsets)

    def on_vertex_removed(self, vertex: Vertex) -> None:
        visual = self.vertex_visuals.pop(vertex.id, None)
        if visual is None:
            logger.warning(f"No visual registered for vertex {vertex.id}.")
            return
        self.plotter.remove_actor(visual.actor)

    def on_edge_created(self, edge: Edge) -> None:
        mesh = pv.Line(edge.source.position, edge.target.position)
        actor = self.plotter.add_mesh(
            mesh,
            color=edge.options.get("color", DEFAULT_EDGE_COLOR),
            line_width=edge.options.get("line_width", 1.0),
        )
        self.edge_visuals[edge.id] = EdgeVisual(mesh=mesh, actor=actor)

    def on_edge_removed(self, edge: Edge) -> None:
        visual = self.edge_visuals.pop(edge.id, None)
        if visual is None:
            logger.warning(f"No visual registered for edge {edge.id}.")
            return
        self.plotter.remove_actor(visual.actor)

    def on_layout(self, graph: Graph) -> None:
        """Move cubes and line end points to the new positions."""
        for vertex_id, visual in self.vertex_visuals.items():
            visual.mesh.points = visual.offsets + graph.vertices[vertex_id].position

        for edge_id, visual in self.edge_visuals.items():
            edge = graph.edges[edge_id]
            visual.mesh.points = np.vstack((edge.source.position, edge.target.position))
