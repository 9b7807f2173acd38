"""Initial cluster assignment."""
from __future__ import annotations

import numbers
from typing import Sequence

import numpy as np

from .errors import InvalidCentroidIndicesError


def random_assignment(item_count: int, cluster_count: int, seed: int) -> np.ndarray:
    """Assign every item to a uniformly random cluster.

    The same ``seed``, ``item_count`` and ``cluster_count`` always yield the
    same assignment. Cluster sizes are not balanced and some clusters may
    start out empty.
    """
    # Negative seeds wrap into the unsigned 64-bit range numpy accepts.
    rng = np.random.default_rng(seed & 0xFFFFFFFFFFFFFFFF)
    return rng.integers(0, cluster_count, size=item_count, dtype=np.int64)


def validate_centroid_indices(
    indices: Sequence[int], item_count: int, cluster_count: int
) -> np.ndarray:
    """Check caller-supplied seed indices and return them as an array."""
    if len(indices) != cluster_count:
        raise InvalidCentroidIndicesError(
            f"Expected {cluster_count} initial centroid indices, got {len(indices)}"
        )
    for index in indices:
        if not isinstance(index, numbers.Integral) or isinstance(index, bool):
            raise InvalidCentroidIndicesError(
                f"Initial centroid index {index!r} is not an integer"
            )
    result = np.asarray(indices, dtype=np.int64)
    for index in result:
        if index < 0 or index >= item_count:
            raise InvalidCentroidIndicesError(
                f"Initial centroid index {int(index)} outside [0, {item_count})"
            )
    return result
