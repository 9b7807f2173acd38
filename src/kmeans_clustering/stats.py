"""Streaming statistics over member-to-mean distances."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, List

import numpy as np


@dataclass(frozen=True)
class DistanceSummary:
    """Summary of the distances between a cluster's members and its mean."""

    count: int
    mean: float
    std: float
    min: float
    max: float

    def to_dict(self) -> Dict[str, float]:
        return {
            "count": self.count,
            "mean": self.mean,
            "std": self.std,
            "min": self.min,
            "max": self.max,
        }


@dataclass
class OnlineStats:
    """Track mean/variance/min/max in one pass (Welford)."""

    count: int = 0
    mean: float = 0.0
    m2: float = 0.0
    min_value: float | None = None
    max_value: float | None = None

    def add(self, value: float) -> None:
        self.count += 1
        if self.min_value is None or value < self.min_value:
            self.min_value = value
        if self.max_value is None or value > self.max_value:
            self.max_value = value
        delta = value - self.mean
        self.mean += delta / self.count
        self.m2 += delta * (value - self.mean)

    def update(self, values: Iterable[float]) -> None:
        for value in values:
            self.add(float(value))

    @property
    def variance(self) -> float:
        if self.count < 2:
            return 0.0
        return self.m2 / (self.count - 1)

    @property
    def std(self) -> float:
        return self.variance ** 0.5

    def summary(self) -> DistanceSummary:
        return DistanceSummary(
            count=self.count,
            mean=self.mean,
            std=self.std,
            min=self.min_value if self.min_value is not None else 0.0,
            max=self.max_value if self.max_value is not None else 0.0,
        )


def summarize_distances(
    distances: np.ndarray, assignment: np.ndarray, cluster_count: int
) -> List[DistanceSummary]:
    """Group per-item distances by cluster and summarize each group."""
    accumulators = [OnlineStats() for _ in range(cluster_count)]
    for distance, cluster_idx in zip(distances, assignment):
        accumulators[int(cluster_idx)].add(float(distance))
    return [acc.summary() for acc in accumulators]
