"""
Barnes-Hut Octree
=================
Approximates the net repulsion acting on every vertex in better than
quadratic time.

The near/far split is decided at insertion time: a vertex closer than
``inner_distance`` to a node's centroid joins that node's inner group, where
forces are summed exactly. Any other vertex is routed into the child octant
around the centroid. When estimating, every node whose inner group does not
contain the vertex contributes a single point-mass term at its centroid,
weighted by the size of the inner group.

The tree is rebuilt from scratch every layout step and then discarded.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Dict, Iterable, Iterator

import numpy as np

from forcelayout.utils import length, zero_vector

if TYPE_CHECKING:
    import numpy.typing as npt

    from forcelayout.model.vertex import Vertex

ForceLaw = Callable[["npt.NDArray[np.float64]", "npt.NDArray[np.float64]"], "npt.NDArray[np.float64]"]


class OctreeNode:
    """
    One node of the octree.

    Attributes:
        inners: Vertices treated as mutually close; their forces are exact.
        children: Child nodes keyed by octant index (0..7), created lazily.
        center_sum: Sum of the inner positions, the centroid is its mean.
        count: Number of inner vertices, the weight of the far-field term.
    """
    def __init__(self, inner_distance: float) -> None:
        self.inner_distance = inner_distance
        self.inners: list[Vertex] = []
        self.children: Dict[int, OctreeNode] = {}
        self.center_sum = zero_vector()
        self.count = 0

    def __repr__(self) -> str:
        center = self.center() if self.count else None
        return f"{self.__class__.__name__}(count={self.count}, center={center}, children={len(self.children)})"

    @classmethod
    def build(cls, vertices: Iterable[Vertex], inner_distance: float) -> OctreeNode:
        """Build a tree holding every vertex in ``vertices``."""
        root = cls(inner_distance)
        for vertex in vertices:
            root.insert(vertex)
        return root

    def center(self) -> npt.NDArray[np.float64]:
        """Centroid of the inner vertices."""
        if self.count == 0:
            raise RuntimeError("center() called on an empty octree node.")
        return self.center_sum / self.count

    def octant(self, position: npt.NDArray[np.float64]) -> int:
        """Index (0..7) of the octant ``position`` falls in around the centroid."""
        above = self.center() < position
        return int(above[0]) | int(above[1]) << 1 | int(above[2]) << 2

    def _place_inner(self, vertex: Vertex) -> None:
        self.inners.append(vertex)
        self.center_sum += vertex.position
        self.count += 1

    def insert(self, vertex: Vertex) -> None:
        """Insert a vertex, descending through the octants as needed."""
        node = self
        while True:
            if node.count == 0:
                node._place_inner(vertex)
                return

            center = node.center()
            if length(vertex.position - center) <= node.inner_distance:
                node._place_inner(vertex)
                return

            octant = node.octant(vertex.position)
            child = node.children.get(octant)
            if child is None:
                child = node.children[octant] = OctreeNode(node.inner_distance)
            node = child

    def nodes(self) -> Iterator[OctreeNode]:
        """Depth-first iteration over this node and all descendants."""
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(node.children.values())

    @property
    def total_count(self) -> int:
        """Number of vertices held by this node and its descendants."""
        return sum(node.count for node in self.nodes())

    @property
    def depth(self) -> int:
        deepest = 0
        stack = [(self, 1)]
        while stack:
            node, level = stack.pop()
            deepest = max(deepest, level)
            stack.extend((child, level + 1) for child in node.children.values())
        return deepest

    def estimate(
        self,
        vertex: Vertex,
        force: npt.NDArray[np.float64],
        force_fn: ForceLaw,
    ) -> npt.NDArray[np.float64]:
        """
        Accumulate the approximate force on ``vertex`` into ``force`` in place.

        Args:
            vertex: The vertex the force acts on.
            force: Accumulator, modified in place and returned.
            force_fn: Pairwise force law f(x_on, x_from).

        Returns:
            The accumulator.
        """
        for node in self.nodes():
            if any(inner is vertex for inner in node.inners):
                for other in node.inners:
                    if other is not vertex:
                        force += force_fn(vertex.position, other.position)
            else:
                force += force_fn(vertex.position, node.center()) * node.count
        return force
