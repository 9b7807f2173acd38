"""Configuration models for clustering runs and sample generation."""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from .constants import (
    DEFAULT_BOX_MAX_SIZE,
    DEFAULT_CLUSTER_COUNT,
    DEFAULT_MAX_ITERATIONS,
    DEFAULT_SAMPLE_SIZE,
    DEFAULT_SEED,
    DEFAULT_SPACE_SIZE,
)


@dataclass
class ClusterConfig:
    """Parameters for a single clustering call."""

    cluster_count: int = DEFAULT_CLUSTER_COUNT
    max_iterations: int = DEFAULT_MAX_ITERATIONS
    seed: int = DEFAULT_SEED
    distance: str = "euclidean"
    initial_centroid_indices: Optional[List[int]] = None
    restarts: int = 1


@dataclass
class SampleConfig:
    """Random sample generation settings."""

    kind: str = "vector3"
    sample_size: int = DEFAULT_SAMPLE_SIZE
    space_size: float = DEFAULT_SPACE_SIZE
    box_max_size: float = DEFAULT_BOX_MAX_SIZE
    seed: Optional[int] = None
