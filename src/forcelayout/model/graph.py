"""
Graph Store
===========
Owns the vertex and edge collections of one layout and advances the layout
one step at a time.

Mutations (add/remove/clear/configure) must happen between layout steps.
Mutating the graph while :meth:`Graph.layout` is running raises
:class:`ReentrantMutationError`.

Multi-edge policy
-----------------
The policy is fixed per graph at construction:

    EdgePolicy.COLLAPSE    - adding an edge for an ordered (source, target)
                             pair that already has one returns the existing
                             edge and bumps its multiplicity; removing it
                             decrements the multiplicity and only destroys the
                             edge once it reaches zero.
    EdgePolicy.MULTIGRAPH  - every add_edge call creates a distinct edge.

Render hook failures
--------------------
If the hook raises from on_vertex_created or on_edge_created, the new vertex
or edge is taken out of the graph again and the exception propagates. The
identifier it was issued stays consumed.
"""
from __future__ import annotations

from dataclasses import dataclass, asdict
from enum import StrEnum
import logging
import math
from typing import TYPE_CHECKING, Any, Callable, Dict, Mapping, Optional, Union

import numpy as np

from forcelayout.config import LayoutConfig
from forcelayout.errors import InvalidArgumentError, NotFoundError, ReentrantMutationError
from forcelayout.model.edge import Edge
from forcelayout.model.hooks import NullRenderHook, RenderHook
from forcelayout.model.ids import IdAllocator
from forcelayout.model.vertex import Vertex
from forcelayout.solvers.solver import LayoutSolver, RelaxationResult
from forcelayout.utils import is_real_number

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)

_EDGE_FLAGS = ("directed", "gravity")


class EdgePolicy(StrEnum):
    COLLAPSE = "collapse"
    MULTIGRAPH = "multigraph"


@dataclass(frozen=True)
class GraphSummary:
    vertex_count: int
    edge_count: int

    def to_dict(self) -> Dict[str, int]:
        return asdict(self)


class Graph:
    """
    Mutable graph with an incremental force-directed 3D layout.
    """
    def __init__(
        self,
        config: Union[LayoutConfig, Mapping[str, Any], None] = None,
        hook: Optional[RenderHook] = None,
        policy: EdgePolicy = EdgePolicy.COLLAPSE,
        seed: Optional[int] = None,
    ) -> None:
        """
        Initialize an empty graph.

        Args:
            config: Layout constants, as a LayoutConfig or a mapping of overrides.
            hook: Receives lifecycle notifications. Defaults to a no-op hook.
            policy: How repeated edges between the same ordered pair are handled.
            seed: Seed for the random placement of new vertices.
        """
        if config is None:
            config = LayoutConfig()
        elif not isinstance(config, LayoutConfig):
            config = LayoutConfig.from_dict(config)
        self.config: LayoutConfig = config

        self.hook: RenderHook = hook if hook is not None else NullRenderHook()
        self.policy = EdgePolicy(policy)

        self._seed = seed
        self._rng = np.random.default_rng(seed)

        self._vertex_ids = IdAllocator()
        self._edge_ids = IdAllocator()

        self.vertices: Dict[int, Vertex] = {}
        self.edges: Dict[int, Edge] = {}

        # COLLAPSE bookkeeping, keyed by the ordered endpoint-id pair
        self._edge_by_key: Dict[tuple[int, int], Edge] = {}
        self._edge_counts: Dict[tuple[int, int], int] = {}

        self.center: Optional[npt.NDArray[np.float64]] = None

        self._solver = LayoutSolver(self)
        self._stepping = False

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(vertices={len(self.vertices)}, "
            f"edges={len(self.edges)}, policy={self.policy.value})"
        )

    def __str__(self) -> str:
        return f"|V|: {len(self.vertices)},  |E|: {len(self.edges)}"

    def __contains__(self, item: object) -> bool:
        if isinstance(item, Vertex):
            return self.vertices.get(item.id) is item
        if isinstance(item, Edge):
            return self.edges.get(item.id) is item
        return False

    # --- Membership checks ---

    def _ensure_idle(self, operation: str) -> None:
        if self._stepping:
            raise ReentrantMutationError(
                f"Cannot {operation} while a layout step is in progress."
            )

    def _check_endpoint(self, candidate: Any, role: str) -> Vertex:
        if candidate is None:
            raise InvalidArgumentError(f"The {role} vertex is missing.")
        if not isinstance(candidate, Vertex):
            raise InvalidArgumentError(
                f"The {role} should be a Vertex instead of a {type(candidate).__name__}."
            )
        if candidate not in self:
            raise InvalidArgumentError(
                f"The {role} vertex {candidate.id} is not a member of this graph."
            )
        return candidate

    # --- Configuration ---

    def configure(self, **overrides: Any) -> LayoutConfig:
        """Override layout constants; takes effect on the next step."""
        self._ensure_idle("configure the layout")
        self.config = self.config.with_overrides(**overrides)
        logger.info(f"Layout configuration updated: {overrides}")
        return self.config

    # --- Mutation ---

    def add_vertex(self, options: Optional[Mapping[str, Any]] = None, **kwargs: Any) -> Vertex:
        """
        Create a vertex at rest.

        Options:
            position: Initial [X, Y, Z]. Defaults to a random point in the
                cube [0, initial_spread)^3.
            Anything else is kept in ``vertex.options`` for the render hook.
        """
        self._ensure_idle("add a vertex")
        options = {**(options or {}), **kwargs}

        position = options.pop("position", None)
        if position is None:
            position = self._rng.random(3) * self.config.initial_spread

        vertex = Vertex(self._vertex_ids.issue(), position, options)
        self.vertices[vertex.id] = vertex
        logger.debug(f"Added vertex {vertex.id} at {vertex.position}")

        try:
            self.hook.on_vertex_created(vertex)
        except Exception:
            del self.vertices[vertex.id]
            raise
        return vertex

    def add_edge(
        self,
        source: Vertex,
        target: Vertex,
        options: Optional[Mapping[str, Any]] = None,
        **kwargs: Any,
    ) -> Edge:
        """
        Join two member vertices.

        Options:
            strength: Multiplier of the spring attraction (default 1.0).
            directed: Topological direction marker (default False).
            gravity: Pull the target downwards every step (default False).
            Anything else is kept in ``edge.options`` for the render hook.

        Raises:
            InvalidArgumentError: If an endpoint is missing, not a Vertex, or
                belongs to another graph, or an option value is invalid.
        """
        self._ensure_idle("add an edge")
        source = self._check_endpoint(source, "source")
        target = self._check_endpoint(target, "target")

        options = {**(options or {}), **kwargs}
        strength = options.pop("strength", 1.0)
        if not is_real_number(strength) or not math.isfinite(strength):
            raise InvalidArgumentError(f"Edge strength must be a finite number, got {strength!r}.")
        strength = float(strength)

        flags = {name: options.pop(name, False) for name in _EDGE_FLAGS}
        for name, value in flags.items():
            if not isinstance(value, (bool, np.bool_)):
                raise InvalidArgumentError(f"Edge option '{name}' must be a bool, got {value!r}.")

        key = (source.id, target.id)
        if self.policy is EdgePolicy.COLLAPSE and key in self._edge_by_key:
            self._edge_counts[key] += 1
            existing = self._edge_by_key[key]
            logger.debug(f"Edge {existing.id} ({existing}) multiplicity raised to {self._edge_counts[key]}")
            return existing

        edge = Edge(
            self._edge_ids.issue(),
            source,
            target,
            strength=strength,
            directed=flags["directed"],
            gravity=flags["gravity"],
            options=options,
        )
        edge._link()
        self.edges[edge.id] = edge
        if self.policy is EdgePolicy.COLLAPSE:
            self._edge_by_key[key] = edge
            self._edge_counts[key] = 1
        logger.debug(f"Added edge {edge.id} ({edge})")

        try:
            self.hook.on_edge_created(edge)
        except Exception:
            self._forget_edge(edge)
            raise
        return edge

    def _forget_edge(self, edge: Edge) -> None:
        edge._unlink()
        del self.edges[edge.id]
        if self._edge_by_key.get(edge.key) is edge:
            del self._edge_by_key[edge.key]
            del self._edge_counts[edge.key]

    def _destroy_edge(self, edge: Edge) -> None:
        self._forget_edge(edge)
        logger.debug(f"Removed edge {edge.id} ({edge})")
        self.hook.on_edge_removed(edge)

    def remove_edge(self, edge: Edge) -> bool:
        """
        Remove one logical reference to an edge.

        Returns:
            True if the edge was destroyed, False if only its multiplicity
            was decremented.

        Raises:
            NotFoundError: If the edge is not a current member of the graph.
        """
        self._ensure_idle("remove an edge")
        if edge not in self:
            raise NotFoundError(f"Edge {edge!r} is not a member of this graph.")

        if self.policy is EdgePolicy.COLLAPSE and self._edge_counts[edge.key] > 1:
            self._edge_counts[edge.key] -= 1
            logger.debug(f"Edge {edge.id} multiplicity lowered to {self._edge_counts[edge.key]}")
            return False

        self._destroy_edge(edge)
        return True

    def remove_vertex(self, vertex: Vertex) -> None:
        """
        Remove a vertex and every edge incident to it.

        Edge removals are notified before the vertex removal.

        Raises:
            NotFoundError: If the vertex is not a current member of the graph.
        """
        self._ensure_idle("remove a vertex")
        if vertex not in self:
            raise NotFoundError(f"Vertex {vertex!r} is not a member of this graph.")

        for edge in list(vertex.edges.values()):
            self._destroy_edge(edge)

        del self.vertices[vertex.id]
        logger.debug(f"Removed vertex {vertex.id}")
        self.hook.on_vertex_removed(vertex)

    def clear(self) -> None:
        """Remove everything and rewind both identifier counters."""
        self._ensure_idle("clear the graph")
        for edge in list(self.edges.values()):
            self._destroy_edge(edge)
        for vertex in list(self.vertices.values()):
            del self.vertices[vertex.id]
            self.hook.on_vertex_removed(vertex)

        self._edge_by_key.clear()
        self._edge_counts.clear()
        self._vertex_ids.reset()
        self._edge_ids.reset()
        self._rng = np.random.default_rng(self._seed)
        self.center = None
        logger.info("Graph cleared.")

    # --- Queries ---

    def describe(self) -> GraphSummary:
        return GraphSummary(vertex_count=len(self.vertices), edge_count=len(self.edges))

    def multiplicity(self, edge: Edge) -> int:
        """Number of add_edge calls currently represented by ``edge``."""
        if edge not in self:
            raise NotFoundError(f"Edge {edge!r} is not a member of this graph.")
        return self._edge_counts.get(edge.key, 1) if self.policy is EdgePolicy.COLLAPSE else 1

    # --- Simulation ---

    def layout(self) -> None:
        """Advance the layout by exactly one step."""
        self._ensure_idle("start a layout step")
        self._stepping = True
        try:
            self.center = self._solver.step()
        finally:
            self._stepping = False
        self.hook.on_layout(self)

    def relax(
        self,
        max_steps: int = 500,
        tolerance: float = 1e-3,
        callback: Optional[Callable[[int, float], None]] = None,
    ) -> RelaxationResult:
        """Run layout steps until the layout settles or ``max_steps`` is hit."""
        return self._solver.solve(max_steps=max_steps, tolerance=tolerance, callback=callback)
