"""Distance functions between feature vectors."""
from __future__ import annotations

from typing import Callable, Dict, Sequence

import numpy as np

from .errors import DimensionMismatchError

DistanceFunction = Callable[[Sequence[float], Sequence[float]], float]


def check_dimensions(a: Sequence[float], b: Sequence[float]) -> None:
    """Raise DimensionMismatchError if the vectors differ in length."""
    if len(a) != len(b):
        raise DimensionMismatchError(len(a), len(b))


def euclidean_distance(a: Sequence[float], b: Sequence[float]) -> float:
    """Square root of the summed squared coordinate differences."""
    check_dimensions(a, b)
    diff = np.asarray(b, dtype=np.float64) - np.asarray(a, dtype=np.float64)
    return float(np.sqrt(np.sum(diff * diff)))


def manhattan_distance(a: Sequence[float], b: Sequence[float]) -> float:
    """Sum of absolute coordinate differences."""
    check_dimensions(a, b)
    diff = np.asarray(b, dtype=np.float64) - np.asarray(a, dtype=np.float64)
    return float(np.sum(np.abs(diff)))


def chebyshev_distance(a: Sequence[float], b: Sequence[float]) -> float:
    """Largest absolute coordinate difference."""
    check_dimensions(a, b)
    if len(a) == 0:
        return 0.0
    diff = np.asarray(b, dtype=np.float64) - np.asarray(a, dtype=np.float64)
    return float(np.max(np.abs(diff)))


DISTANCES: Dict[str, DistanceFunction] = {
    "euclidean": euclidean_distance,
    "manhattan": manhattan_distance,
    "chebyshev": chebyshev_distance,
}


def get_distance(name: str) -> DistanceFunction:
    """Look up a built-in distance function by name."""
    try:
        return DISTANCES[name]
    except KeyError:
        raise ValueError(
            f"Unsupported distance: {name}. Choose from {sorted(DISTANCES)}"
        ) from None
