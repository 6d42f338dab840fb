"""
Layout Configuration
====================
This module holds the tunable constants of the force-directed layout.

Every option maps onto one constant of the force model or the integrator:

    attraction       - spring constant of the edge attraction
    repulsion        - numerator of the softened inverse-square repulsion
    epsilon          - softening term added to the separation
    friction         - fraction of the velocity removed every step
    inner_distance   - radius around an octree centroid treated as near-field
    gravity          - downward pull applied to targets of gravity edges
    minimum_velocity - speeds below this are snapped to zero (0 disables it)
    initial_spread   - side of the cube new vertices are scattered in
    zoom             - camera offset along z, used by the viewer only

Exports:
    LayoutConfig: Dataclass with the defaults listed above.
"""
from __future__ import annotations

from dataclasses import dataclass, asdict, fields, replace
import math
from typing import Any, Dict, Mapping

from forcelayout.errors import InvalidArgumentError
from forcelayout.utils import is_real_number

_NON_NEGATIVE = ("epsilon", "inner_distance", "minimum_velocity", "initial_spread")


@dataclass(frozen=True)
class LayoutConfig:
    attraction: float = 0.0025
    repulsion: float = 100.0
    epsilon: float = 0.1
    friction: float = 0.60
    inner_distance: float = 0.036
    gravity: float = 0.070
    minimum_velocity: float = 0.0
    initial_spread: float = 2.0
    zoom: float = -500.0

    def __post_init__(self) -> None:
        for f in fields(self):
            value = getattr(self, f.name)
            if not is_real_number(value):
                raise InvalidArgumentError(
                    f"Option '{f.name}' must be a number, got {type(value).__name__}."
                )
            if not math.isfinite(value):
                raise InvalidArgumentError(f"Option '{f.name}' must be finite, got {value}.")
            # Frozen dataclass, so coerce through object.__setattr__
            object.__setattr__(self, f.name, float(value))

        for name in _NON_NEGATIVE:
            if getattr(self, name) < 0.0:
                raise InvalidArgumentError(f"Option '{name}' must be non-negative, got {getattr(self, name)}.")

        if not 0.0 <= self.friction <= 1.0:
            raise InvalidArgumentError(f"Option 'friction' must lie in [0, 1], got {self.friction}.")

    @classmethod
    def option_names(cls) -> tuple[str, ...]:
        return tuple(f.name for f in fields(cls))

    def with_overrides(self, **overrides: Any) -> LayoutConfig:
        """Return a copy with the given options replaced."""
        unknown = sorted(set(overrides) - set(self.option_names()))
        if unknown:
            raise InvalidArgumentError(
                f"Unknown layout option(s): {', '.join(unknown)}. "
                f"Recognized options: {', '.join(self.option_names())}."
            )
        return replace(self, **overrides)

    def to_dict(self) -> Dict[str, float]:
        return asdict(self)

    @staticmethod
    def from_dict(data: Mapping[str, Any]) -> LayoutConfig:
        return LayoutConfig().with_overrides(**dict(data))
