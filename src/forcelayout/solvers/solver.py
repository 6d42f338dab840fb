from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import TYPE_CHECKING, Callable, Optional

from forcelayout.analysis.forces import ForceModel
from forcelayout.solvers.integrator import Integrator

if TYPE_CHECKING:
    import numpy as np
    import numpy.typing as npt

    from forcelayout.model.graph import Graph

logger = logging.getLogger(__name__)


@dataclass
class RelaxationResult:
    """Outcome of :meth:`LayoutSolver.solve`."""
    steps: int
    max_speed: float
    converged: bool


class LayoutSolver:
    """
    Class for the force-directed layout solver.
    """

    def __init__(self, graph: Graph) -> None:
        """
        Initialize the solver with a graph.

        Args:
            graph: The graph whose vertices are laid out.
        """
        self.graph = graph
        self.steps_taken = 0
        self.last_max_speed = 0.0

    def step(self) -> Optional[npt.NDArray[np.float64]]:
        """
        Advance the layout by exactly one step.

        Constants are read from the graph's configuration on every call, so
        runtime overrides take effect on the next step.

        Returns:
            Centroid of the root octree node, or None for an empty graph.
        """
        config = self.graph.config
        forces = ForceModel(config)
        integrator = Integrator(config)

        vertices = list(self.graph.vertices.values())
        if not vertices:
            self.last_max_speed = 0.0
            return None

        for vertex in vertices:
            vertex.reset_forces()

        tree = forces.build_tree(vertices)
        forces.apply_repulsion(tree, vertices)
        forces.apply_attraction(self.graph.edges.values())

        self.last_max_speed = integrator.advance_all(vertices)
        self.steps_taken += 1

        logger.debug(
            f"Step {self.steps_taken}: |V|={len(vertices)}, |E|={len(self.graph.edges)}, "
            f"octree depth={tree.depth}, max speed={self.last_max_speed:.6f}"
        )
        return tree.center()

    def solve(
        self,
        max_steps: int,
        tolerance: float = 1e-3,
        callback: Optional[Callable[[int, float], None]] = None,
    ) -> RelaxationResult:
        """
        Run layout steps until the fastest vertex is slower than ``tolerance``.

        Args:
            max_steps: Upper bound on the number of steps.
            tolerance: Speed below which the layout counts as settled.
            callback: Called after every step with (step, max speed).

        Returns:
            Number of steps run, the final max speed and whether it settled.
        """
        if max_steps < 0:
            raise ValueError(f"max_steps must be non-negative, got {max_steps}.")

        steps = 0
        max_speed = 0.0
        converged = False
        while steps < max_steps:
            self.graph.layout()
            steps += 1
            max_speed = self.last_max_speed

            if callback is not None:
                callback(steps, max_speed)

            if max_speed < tolerance:
                converged = True
                break

        logger.info(
            f"Relaxation finished after {steps} steps - max speed {max_speed:.6f} "
            f"({'converged' if converged else 'not converged'})"
        )
        return RelaxationResult(steps=steps, max_speed=max_speed, converged=converged)
