from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict

if TYPE_CHECKING:
    from forcelayout.model.vertex import Vertex


class Edge:
    """
    Represents an edge between two live vertices.

    ``directed`` is a topological marker only. ``gravity`` independently
    switches on the constant downward pull applied to the target.
    """
    def __init__(
        self,
        index: int,
        source: Vertex,
        target: Vertex,
        strength: float = 1.0,
        directed: bool = False,
        gravity: bool = False,
        options: Dict[str, Any] | None = None,
    ) -> None:
        self.id = index
        self.source = source
        self.target = target
        self.strength = float(strength)
        self.directed = bool(directed)
        self.gravity = bool(gravity)
        self.options: Dict[str, Any] = dict(options) if options else {}

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(id={self.id}, source={self.source.id}, "
            f"target={self.target.id}, strength={self.strength})"
        )

    def __str__(self) -> str:
        arrow = "-->" if self.directed else "---"
        return f"{self.source}{arrow}{self.target}"

    @property
    def key(self) -> tuple[int, int]:
        """Ordered endpoint-id pair."""
        return self.source.id, self.target.id

    def other(self, vertex: Vertex) -> Vertex:
        """Return the endpoint opposite to ``vertex``."""
        if vertex is self.source:
            return self.target
        if vertex is self.target:
            return self.source
        raise ValueError(f"Vertex {vertex.id} is not an endpoint of edge {self.id}.")

    def _link(self) -> None:
        self.source.edges[self.id] = self
        self.target.edges[self.id] = self

    def _unlink(self) -> None:
        self.source.edges.pop(self.id, None)
        self.target.edges.pop(self.id, None)
