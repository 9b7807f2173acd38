"""Lloyd iteration over a fixed feature array.

Each pass recomputes cluster means, picks the real item nearest to every
mean as that cluster's centroid, then moves each item to the cluster whose
centroid item is closest. Reassignment compares against centroid items, not
against the means themselves.
"""
from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

import numpy as np
from tqdm import tqdm

from .distance import DistanceFunction, euclidean_distance

logger = logging.getLogger(__name__)


class IterationState(enum.Enum):
    """Lifecycle of a Lloyd run."""

    RUNNING = "running"
    CONVERGED = "converged"
    ITERATION_LIMIT_REACHED = "iteration_limit_reached"


@dataclass
class LloydOutcome:
    """Terminal state of a Lloyd run."""

    assignment: np.ndarray
    means: np.ndarray
    counts: np.ndarray
    centroid_indices: np.ndarray
    total_distance: float
    member_distances: np.ndarray
    scored_assignment: np.ndarray
    iterations: int
    state: IterationState
    history: List[float] = field(default_factory=list)


def compute_means(
    data: np.ndarray, assignment: np.ndarray, cluster_count: int
) -> Tuple[np.ndarray, np.ndarray]:
    """Return per-cluster coordinate means and member counts.

    An empty cluster divides by one, so its mean stays at the zero vector.
    """
    means = np.zeros((cluster_count, data.shape[1]), dtype=np.float64)
    np.add.at(means, assignment, data)
    counts = np.bincount(assignment, minlength=cluster_count)
    means /= np.maximum(counts, 1)[:, None]
    return means, counts


def select_centroids(
    data: np.ndarray,
    assignment: np.ndarray,
    means: np.ndarray,
    previous: np.ndarray,
    distance_fn: DistanceFunction = euclidean_distance,
) -> Tuple[np.ndarray, float, np.ndarray]:
    """Pick the item nearest to each cluster mean.

    Returns the centroid indices, the summed item-to-mean distance and the
    per-item distances. The lowest item index wins ties; a cluster with no
    members keeps its entry from ``previous``.
    """
    centroid_indices = np.array(previous, dtype=np.int64, copy=True)
    min_distances = np.full(means.shape[0], np.inf)
    member_distances = np.empty(data.shape[0], dtype=np.float64)
    total_distance = 0.0
    for index in range(data.shape[0]):
        cluster_idx = assignment[index]
        distance = distance_fn(data[index], means[cluster_idx])
        member_distances[index] = distance
        total_distance += distance
        if distance < min_distances[cluster_idx]:
            min_distances[cluster_idx] = distance
            centroid_indices[cluster_idx] = index
    return centroid_indices, total_distance, member_distances


def reassign(
    data: np.ndarray,
    assignment: np.ndarray,
    centroid_indices: Sequence[int],
    distance_fn: DistanceFunction = euclidean_distance,
) -> Tuple[np.ndarray, bool]:
    """Move every item to the cluster with the closest centroid item.

    Ties go to the lowest cluster id. Returns the new assignment and whether
    any item changed cluster; ``assignment`` itself is left untouched.
    """
    updated = np.array(assignment, dtype=np.int64, copy=True)
    centroids = data[np.asarray(centroid_indices, dtype=np.int64)]
    changed = False
    for index in range(data.shape[0]):
        min_distance = np.inf
        best_cluster = -1
        for cluster_idx in range(centroids.shape[0]):
            distance = distance_fn(data[index], centroids[cluster_idx])
            if distance < min_distance:
                min_distance = distance
                best_cluster = cluster_idx
        if best_cluster != -1 and updated[index] != best_cluster:
            updated[index] = best_cluster
            changed = True
    return updated, changed


def run_lloyd(
    data: np.ndarray,
    assignment: np.ndarray,
    cluster_count: int,
    max_iterations: int,
    distance_fn: DistanceFunction = euclidean_distance,
    centroid_indices: Optional[Sequence[int]] = None,
    progress: bool = False,
) -> LloydOutcome:
    """Iterate until no item moves or ``max_iterations`` passes have run.

    When ``centroid_indices`` is given, one reassignment against those items
    runs first and ``assignment`` only serves as the starting labels for it.
    """
    current = np.array(assignment, dtype=np.int64, copy=True)
    if centroid_indices is not None:
        centroids = np.array(centroid_indices, dtype=np.int64, copy=True)
        current, _ = reassign(data, current, centroids, distance_fn)
    else:
        centroids = np.zeros(cluster_count, dtype=np.int64)

    state = IterationState.RUNNING
    iterations = 0
    history: List[float] = []
    with tqdm(
        total=max_iterations, desc="Lloyd iterations", disable=not progress
    ) as bar:
        while state is IterationState.RUNNING:
            means, counts = compute_means(data, current, cluster_count)
            centroids, total_distance, member_distances = select_centroids(
                data, current, means, centroids, distance_fn
            )
            scored = current
            history.append(total_distance)
            current, changed = reassign(data, current, centroids, distance_fn)
            iterations += 1
            bar.update(1)
            logger.debug(
                f"Iteration {iterations}: total distance {total_distance:.6f}, "
                f"cluster sizes {counts.tolist()}, changed={changed}"
            )

            if not changed:
                state = IterationState.CONVERGED
            elif iterations >= max_iterations:
                state = IterationState.ITERATION_LIMIT_REACHED

    logger.debug(f"Lloyd run finished after {iterations} iterations: {state.value}")
    return LloydOutcome(
        assignment=current,
        means=means,
        counts=counts,
        centroid_indices=centroids,
        total_distance=total_distance,
        member_distances=member_distances,
        scored_assignment=scored,
        iterations=iterations,
        state=state,
        history=history,
    )
