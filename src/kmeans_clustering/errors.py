"""Error types raised by the clustering engine."""
from __future__ import annotations


class ClusteringError(Exception):
    """Base class for all clustering failures."""


class EmptyInputError(ClusteringError, ValueError):
    """Raised when no items are given."""


class InvalidClusterCountError(ClusteringError, ValueError):
    """Raised when the cluster count is outside [1, item count]."""

    def __init__(self, cluster_count: int, item_count: int) -> None:
        super().__init__(
            f"Cluster count must be in [1, {item_count}], got {cluster_count}"
        )
        self.cluster_count = cluster_count
        self.item_count = item_count


class InvalidIterationCountError(ClusteringError, ValueError):
    """Raised when max iterations is below one."""


class InvalidCentroidIndicesError(ClusteringError, ValueError):
    """Raised when seed centroid indices do not fit the item array."""


class DimensionMismatchError(ClusteringError, ValueError):
    """Raised when two feature vectors differ in length."""

    def __init__(self, expected: int, actual: int) -> None:
        super().__init__(
            f"Feature vector dimension mismatch: expected {expected}, got {actual}"
        )
        self.expected = expected
        self.actual = actual


class UnsupportedItemTypeError(ClusteringError, TypeError):
    """Raised when an item has no feature extraction rule."""

    def __init__(self, item_type: type) -> None:
        super().__init__(
            f"No feature extractor for item type {item_type.__name__}; "
            "pass an extractor or register one."
        )
        self.item_type = item_type
