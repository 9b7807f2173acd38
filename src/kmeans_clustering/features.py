"""Item types and feature extraction for clustering.

Items are converted into rows of a ``(N, D)`` float array. Conversion is a
strategy: a ``FeatureExtractor`` maps one item to its coordinates. Built-in
extractors cover the point and box types below plus plain numeric tuples;
callers may pass their own extractor or register one for a type.
"""
from __future__ import annotations

from typing import Any, Callable, Dict, List, NamedTuple, Optional, Sequence

import numpy as np

from .errors import DimensionMismatchError, EmptyInputError, UnsupportedItemTypeError

FeatureExtractor = Callable[[Any], Sequence[float]]
CoordinateGetter = Callable[[Any], float]


class Vector2(NamedTuple):
    """A point in the plane."""

    x: float
    y: float


class Vector3(NamedTuple):
    """A point in space."""

    x: float
    y: float
    z: float


class Bounds(NamedTuple):
    """An axis-aligned box given by its center and full size."""

    center: Vector3
    size: Vector3

    @property
    def min(self) -> Vector3:
        return Vector3(*(c - s / 2.0 for c, s in zip(self.center, self.size)))

    @property
    def max(self) -> Vector3:
        return Vector3(*(c + s / 2.0 for c, s in zip(self.center, self.size)))


def vector2_features(item: Vector2) -> Sequence[float]:
    return (item.x, item.y)


def vector3_features(item: Vector3) -> Sequence[float]:
    return (item.x, item.y, item.z)


def bounds_features(item: Bounds) -> Sequence[float]:
    """Boxes cluster by center position only; size is ignored."""
    center = item.center
    return (center[0], center[1], center[2])


def sequence_features(item: Sequence[float]) -> Sequence[float]:
    """Pass numeric tuples, lists and array rows through unchanged."""
    return item


def scalar_features(item: float) -> Sequence[float]:
    return (item,)


_EXTRACTORS: Dict[type, FeatureExtractor] = {
    Vector2: vector2_features,
    Vector3: vector3_features,
    Bounds: bounds_features,
    tuple: sequence_features,
    list: sequence_features,
    np.ndarray: sequence_features,
    int: scalar_features,
    float: scalar_features,
}


def register_extractor(item_type: type, extractor: FeatureExtractor) -> None:
    """Register the extractor used for items of ``item_type``."""
    _EXTRACTORS[item_type] = extractor


def extractor_for(item: Any) -> FeatureExtractor:
    """Return the registered extractor for an item's type or closest base."""
    for klass in type(item).__mro__:
        extractor = _EXTRACTORS.get(klass)
        if extractor is not None:
            return extractor
    raise UnsupportedItemTypeError(type(item))


def coordinate_extractor(*getters: CoordinateGetter) -> FeatureExtractor:
    """Build an extractor from one getter per coordinate."""
    if not getters:
        raise ValueError("coordinate_extractor requires at least one getter")

    def extract(item: Any) -> Sequence[float]:
        return tuple(float(getter(item)) for getter in getters)

    return extract


def extract_features(
    items: Sequence[Any],
    extractor: Optional[FeatureExtractor] = None,
) -> np.ndarray:
    """Convert items into a read-only ``(N, D)`` float64 feature array."""
    if len(items) == 0:
        raise EmptyInputError("Cannot extract features from an empty item list")

    rows: List[np.ndarray] = []
    dimension: Optional[int] = None
    for item in items:
        extract = extractor if extractor is not None else extractor_for(item)
        row = np.asarray(extract(item), dtype=np.float64).reshape(-1)
        if dimension is None:
            dimension = row.shape[0]
        elif row.shape[0] != dimension:
            raise DimensionMismatchError(dimension, row.shape[0])
        rows.append(row)

    if dimension == 0:
        raise ValueError("Feature vectors must have at least one coordinate")
    features = np.vstack(rows)
    if not np.all(np.isfinite(features)):
        raise ValueError("Feature vectors contain non-finite coordinates")
    features.setflags(write=False)
    return features
