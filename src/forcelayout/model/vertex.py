from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict

import numpy as np

from forcelayout.utils import as_vector, length, zero_vector

if TYPE_CHECKING:
    import numpy.typing as npt

    from forcelayout.model.edge import Edge


class Vertex:
    """
    Represents a vertex of the layout graph.

    Instances are handed out by :meth:`Graph.add_vertex` and act as handles
    for the other graph operations. Kinematic state is owned by the vertex and
    mutated in place by every layout step.
    """
    def __init__(
        self,
        index: int,
        position: list[float] | npt.NDArray[np.float64],
        options: Dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize the vertex at rest.

        Args:
            index: Identifier issued by the owning graph.
            position: Initial position [X, Y, Z].
            options: Render options passed through to the render hook.
        """
        self.id = index
        self.options: Dict[str, Any] = dict(options) if options else {}

        self.position = as_vector(position, name="position")
        self.velocity = zero_vector()
        self.acceleration = zero_vector()

        # Written by the force model, reset at the start of every step
        self.repulsion = zero_vector()
        self.attraction = zero_vector()

        # Non-owning back references, keyed by edge id
        self.edges: Dict[int, Edge] = {}

    def __repr__(self) -> str:
        """String representation of the vertex."""
        return f"{self.__class__.__name__}(id={self.id}, position={self.position})"

    def __str__(self) -> str:
        return str(self.id)

    @property
    def degree(self) -> int:
        """Number of incident edges."""
        return len(self.edges)

    @property
    def neighbors(self) -> list[Vertex]:
        """Distinct vertices joined to this one by an incident edge."""
        seen: Dict[int, Vertex] = {}
        for edge in self.edges.values():
            other = edge.other(self)
            seen.setdefault(other.id, other)
        return list(seen.values())

    @property
    def speed(self) -> float:
        return length(self.velocity)

    def reset_forces(self) -> None:
        """Zero the acceleration and both force accumulators."""
        self.acceleration.fill(0.0)
        self.repulsion.fill(0.0)
        self.attraction.fill(0.0)
