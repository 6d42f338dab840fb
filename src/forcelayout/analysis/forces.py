from __future__ import annotations

from functools import partial
from typing import TYPE_CHECKING, Iterable

import numpy as np

from forcelayout.analysis.octree import ForceLaw, OctreeNode
from forcelayout.utils import length, zero_vector

if TYPE_CHECKING:
    import numpy.typing as npt

    from forcelayout.config import LayoutConfig
    from forcelayout.model.edge import Edge
    from forcelayout.model.vertex import Vertex


def pairwise_repulsion(
    x1: npt.NDArray[np.float64],
    x2: npt.NDArray[np.float64],
    repulsion: float,
    epsilon: float,
) -> npt.NDArray[np.float64]:
    """
    Softened inverse-square repulsion acting on ``x1`` from ``x2``.

    The force points from ``x2`` towards ``x1`` with magnitude
    ``repulsion / (epsilon + r)**2``. Coincident positions give the zero
    vector.
    """
    difference = x1 - x2
    distance = length(difference)
    if distance == 0.0:
        return zero_vector()

    magnitude = repulsion / (epsilon + distance) ** 2
    return difference * (magnitude / distance)


class ForceModel:
    """
    Computes the repulsion and attraction accumulators for one layout step.
    """
    def __init__(self, config: LayoutConfig) -> None:
        self.config = config

    def repulsion_law(self) -> ForceLaw:
        """Pairwise repulsion bound to the configured constants."""
        return partial(pairwise_repulsion, repulsion=self.config.repulsion, epsilon=self.config.epsilon)

    def build_tree(self, vertices: Iterable[Vertex]) -> OctreeNode:
        return OctreeNode.build(vertices, inner_distance=self.config.inner_distance)

    def apply_repulsion(self, tree: OctreeNode, vertices: Iterable[Vertex]) -> None:
        """Fill every vertex's repulsion accumulator from the octree."""
        law = self.repulsion_law()
        for vertex in vertices:
            vertex.repulsion.fill(0.0)
            tree.estimate(vertex, vertex.repulsion, law)

    def apply_attraction(self, edges: Iterable[Edge]) -> None:
        """
        Add the spring and gravity terms of every edge.

        The spring has zero rest length, so its pull grows linearly with the
        separation of the endpoints.
        """
        gravity = np.array([0.0, -self.config.gravity, 0.0], dtype=np.float64)
        for edge in edges:
            attraction = edge.source.position - edge.target.position
            attraction *= -self.config.attraction * edge.strength

            edge.source.attraction -= attraction
            edge.target.attraction += attraction

            if edge.gravity:
                edge.target.acceleration += gravity
