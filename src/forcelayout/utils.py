from __future__ import annotations

import numbers
from typing import TYPE_CHECKING, Iterable

import numpy as np

from forcelayout.errors import InvalidArgumentError

if TYPE_CHECKING:
    import numpy.typing as npt


def zero_vector() -> npt.NDArray[np.float64]:
    """Return a new zero 3-vector."""
    return np.zeros(3, dtype=np.float64)


def as_vector(value: Iterable[float] | npt.NDArray[np.float64], name: str = "vector") -> npt.NDArray[np.float64]:
    """
    Convert a sequence of three numbers into a float64 3-vector.

    The result is always a fresh copy, so callers may mutate it in place.

    Raises:
        InvalidArgumentError: If the value is not three finite numbers.
    """
    try:
        vector = np.array(value, dtype=np.float64)
    except (TypeError, ValueError) as e:
        raise InvalidArgumentError(f"{name} must be three numbers, got {value!r}") from e

    if vector.shape != (3,):
        raise InvalidArgumentError(f"{name} must have shape (3,), got {vector.shape}")
    if not np.all(np.isfinite(vector)):
        raise InvalidArgumentError(f"{name} must be finite, got {vector}")
    return vector


def length(vector: npt.NDArray[np.float64]) -> float:
    """Euclidean length of a 3-vector."""
    return float(np.sqrt(vector.dot(vector)))


def is_real_number(value: object) -> bool:
    """True for int/float and NumPy scalars alike, False for bools."""
    return isinstance(value, numbers.Real) and not isinstance(value, (bool, np.bool_))
