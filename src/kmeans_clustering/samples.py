"""Random sample items for demos and tests."""
from __future__ import annotations

from typing import Any, List, Optional

import numpy as np

from .config import SampleConfig
from .constants import DEFAULT_BOX_MIN_SIZE, SAMPLE_KINDS
from .features import Bounds, Vector2, Vector3


def _rng(seed: Optional[int]) -> np.random.Generator:
    return np.random.default_rng(seed)


def random_vector2s(
    count: int, space_size: float, seed: Optional[int] = None
) -> List[Vector2]:
    """Points uniform in [-1, 1)^2 scaled by ``space_size``."""
    coords = _rng(seed).uniform(-1.0, 1.0, size=(count, 2)) * space_size
    return [Vector2(float(x), float(y)) for x, y in coords]


def random_vector3s(
    count: int, space_size: float, seed: Optional[int] = None
) -> List[Vector3]:
    """Points uniform in [-1, 1)^3 scaled by ``space_size``."""
    coords = _rng(seed).uniform(-1.0, 1.0, size=(count, 3)) * space_size
    return [Vector3(float(x), float(y), float(z)) for x, y, z in coords]


def random_bounds(
    count: int,
    space_size: float,
    box_max_size: float,
    seed: Optional[int] = None,
) -> List[Bounds]:
    """Boxes centered in [-1, 1)^3 * ``space_size`` with random extents."""
    if box_max_size < DEFAULT_BOX_MIN_SIZE:
        raise ValueError(
            f"box_max_size must be at least {DEFAULT_BOX_MIN_SIZE}, got {box_max_size}"
        )
    rng = _rng(seed)
    centers = rng.uniform(-1.0, 1.0, size=(count, 3)) * space_size
    sizes = rng.uniform(DEFAULT_BOX_MIN_SIZE, box_max_size, size=(count, 3))
    return [
        Bounds(Vector3(*map(float, center)), Vector3(*map(float, size)))
        for center, size in zip(centers, sizes)
    ]


def generate_samples(config: SampleConfig) -> List[Any]:
    """Generate the sample set described by ``config``."""
    if config.sample_size < 1:
        raise ValueError(f"sample_size must be positive, got {config.sample_size}")
    if config.kind == "vector2":
        return random_vector2s(config.sample_size, config.space_size, config.seed)
    if config.kind == "vector3":
        return random_vector3s(config.sample_size, config.space_size, config.seed)
    if config.kind == "bounds":
        return random_bounds(
            config.sample_size,
            config.space_size,
            config.box_max_size,
            config.seed,
        )
    raise ValueError(f"Unsupported sample kind: {config.kind}. Choose from {SAMPLE_KINDS}")
