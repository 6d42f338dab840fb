from __future__ import annotations

from typing import TYPE_CHECKING, Iterable

import numpy as np

if TYPE_CHECKING:
    from forcelayout.config import LayoutConfig
    from forcelayout.model.vertex import Vertex


class Integrator:
    """
    Explicit Euler integrator with linear friction.

    Per vertex, in this order:
        1. friction = velocity * friction coefficient (previous velocity)
        2. acceleration += repulsion - attraction
        3. acceleration -= friction
        4. velocity += acceleration
        5. position += velocity
    """
    def __init__(self, config: LayoutConfig) -> None:
        self.config = config

    def advance(self, vertex: Vertex) -> None:
        friction = vertex.velocity * self.config.friction

        vertex.acceleration += vertex.repulsion - vertex.attraction
        vertex.acceleration -= friction

        vertex.velocity += vertex.acceleration

        minimum = self.config.minimum_velocity
        if minimum > 0.0 and np.linalg.norm(vertex.velocity) < minimum:
            vertex.velocity.fill(0.0)

        vertex.position += vertex.velocity

    def advance_all(self, vertices: Iterable[Vertex]) -> float:
        """
        Advance every vertex by one step.

        Returns:
            The largest speed reached by any vertex.
        """
        max_speed = 0.0
        for vertex in vertices:
            self.advance(vertex)
            max_speed = max(max_speed, vertex.speed)
        return max_speed
