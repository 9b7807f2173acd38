"""Clustering result container and aggregation."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Sequence, Tuple

import numpy as np

from .lloyd import IterationState, LloydOutcome
from .stats import DistanceSummary, summarize_distances


@dataclass(frozen=True, eq=False)
class ClusterResult:
    """Items arranged into clusters plus the solution that produced them.

    ``clusters[k]`` holds the original items assigned to cluster ``k`` in
    their original order. ``centroid_indices`` index into the item sequence
    that was clustered. ``total_distance`` is the summed item-to-mean
    distance of the last pass; lower usually means a tighter solution when
    comparing runs with different starting configurations.
    ``distance_history`` holds that total for every pass that ran.
    """

    clusters: Tuple[Tuple[Any, ...], ...]
    means: np.ndarray
    centroid_indices: Tuple[int, ...]
    total_distance: float
    assignment: Tuple[int, ...]
    iterations: int
    state: IterationState
    distance_stats: Tuple[DistanceSummary, ...]
    distance_history: Tuple[float, ...] = ()

    @property
    def cluster_count(self) -> int:
        return len(self.clusters)

    @property
    def converged(self) -> bool:
        return self.state is IterationState.CONVERGED

    @property
    def cluster_sizes(self) -> List[int]:
        return [len(members) for members in self.clusters]

    def centroid_items(self, items: Sequence[Any]) -> List[Any]:
        """Return the item chosen as centroid for each cluster."""
        return [items[index] for index in self.centroid_indices]

    def to_dict(self) -> Dict[str, Any]:
        """Serialize the numeric parts of the result."""
        return {
            "cluster_count": self.cluster_count,
            "cluster_sizes": self.cluster_sizes,
            "means": self.means.tolist(),
            "centroid_indices": list(self.centroid_indices),
            "total_distance": self.total_distance,
            "iterations": self.iterations,
            "state": self.state.value,
            "distance_stats": [stats.to_dict() for stats in self.distance_stats],
            "distance_history": list(self.distance_history),
        }


def aggregate(items: Sequence[Any], outcome: LloydOutcome) -> ClusterResult:
    """Bucket original items by their final cluster id."""
    cluster_count = outcome.means.shape[0]
    buckets: List[List[Any]] = [[] for _ in range(cluster_count)]
    for item, cluster_idx in zip(items, outcome.assignment):
        buckets[int(cluster_idx)].append(item)

    means = np.array(outcome.means, dtype=np.float64, copy=True)
    means.setflags(write=False)
    distance_stats = summarize_distances(
        outcome.member_distances, outcome.scored_assignment, cluster_count
    )
    return ClusterResult(
        clusters=tuple(tuple(bucket) for bucket in buckets),
        means=means,
        centroid_indices=tuple(int(index) for index in outcome.centroid_indices),
        total_distance=float(outcome.total_distance),
        assignment=tuple(int(label) for label in outcome.assignment),
        iterations=outcome.iterations,
        state=outcome.state,
        distance_stats=tuple(distance_stats),
        distance_history=tuple(float(total) for total in outcome.history),
    )
