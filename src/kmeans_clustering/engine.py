"""Public clustering entrypoints."""
from __future__ import annotations

import logging
from typing import Any, Iterable, Optional, Sequence

import numpy as np
from tqdm import tqdm

from .config import ClusterConfig
from .distance import DistanceFunction, euclidean_distance, get_distance
from .errors import EmptyInputError, InvalidClusterCountError, InvalidIterationCountError
from .features import FeatureExtractor, extract_features
from .initializer import random_assignment, validate_centroid_indices
from .lloyd import run_lloyd
from .results import ClusterResult, aggregate

logger = logging.getLogger(__name__)


def _check_preconditions(
    item_count: int, cluster_count: int, max_iterations: int
) -> None:
    if item_count == 0:
        raise EmptyInputError("Cannot cluster an empty item list")
    if cluster_count < 1 or cluster_count > item_count:
        raise InvalidClusterCountError(cluster_count, item_count)
    if max_iterations < 1:
        raise InvalidIterationCountError(
            f"max_iterations must be at least 1, got {max_iterations}"
        )


def cluster(
    items: Sequence[Any],
    cluster_count: int,
    max_iterations: int = 100,
    seed: int = 0,
    distance_fn: Optional[DistanceFunction] = None,
    initial_centroid_indices: Optional[Sequence[int]] = None,
    extractor: Optional[FeatureExtractor] = None,
    progress: bool = False,
) -> ClusterResult:
    """Cluster ``items`` into ``cluster_count`` groups with Lloyd's algorithm.

    Args:
        items: points, boxes, numeric tuples, or anything ``extractor`` reads.
        cluster_count: number of clusters, in [1, len(items)].
        max_iterations: upper bound on Lloyd passes.
        seed: seed of the random initial assignment. Ignored when
            ``initial_centroid_indices`` is given.
        distance_fn: distance between two feature vectors; Euclidean by
            default.
        initial_centroid_indices: one item index per cluster used as the
            starting centroids instead of a random assignment.
        extractor: converts one item into its feature vector.
        progress: show a progress bar over iterations.
    """
    _check_preconditions(len(items), cluster_count, max_iterations)
    if initial_centroid_indices is not None:
        seeds = validate_centroid_indices(
            initial_centroid_indices, len(items), cluster_count
        )
    else:
        seeds = None

    data = extract_features(items, extractor)
    distance_fn = distance_fn or euclidean_distance
    if seeds is not None:
        assignment = np.zeros(len(items), dtype=np.int64)
    else:
        assignment = random_assignment(len(items), cluster_count, seed)

    logger.debug(
        f"Clustering {data.shape[0]} items of dimension {data.shape[1]} "
        f"into {cluster_count} clusters (max_iterations={max_iterations})"
    )
    outcome = run_lloyd(
        data,
        assignment,
        cluster_count,
        max_iterations,
        distance_fn=distance_fn,
        centroid_indices=seeds,
        progress=progress,
    )
    return aggregate(items, outcome)


def cluster_restarts(
    items: Sequence[Any],
    cluster_count: int,
    seeds: Iterable[int],
    max_iterations: int = 100,
    distance_fn: Optional[DistanceFunction] = None,
    extractor: Optional[FeatureExtractor] = None,
    progress: bool = False,
) -> ClusterResult:
    """Run ``cluster`` once per seed and keep the lowest total distance.

    The earliest seed wins ties.
    """
    best: Optional[ClusterResult] = None
    for seed in tqdm(list(seeds), desc="Restarts", disable=not progress):
        result = cluster(
            items,
            cluster_count,
            max_iterations=max_iterations,
            seed=seed,
            distance_fn=distance_fn,
            extractor=extractor,
        )
        logger.debug(f"Seed {seed}: total distance {result.total_distance:.6f}")
        if best is None or result.total_distance < best.total_distance:
            best = result
    if best is None:
        raise ValueError("cluster_restarts requires at least one seed")
    return best


def cluster_with_config(
    items: Sequence[Any],
    config: ClusterConfig,
    extractor: Optional[FeatureExtractor] = None,
    progress: bool = False,
) -> ClusterResult:
    """Run a clustering described by a ``ClusterConfig``."""
    if config.restarts < 1:
        raise ValueError(f"restarts must be positive, got {config.restarts}")
    distance_fn = get_distance(config.distance)
    if config.initial_centroid_indices is None and config.restarts > 1:
        seeds = range(config.seed, config.seed + config.restarts)
        return cluster_restarts(
            items,
            config.cluster_count,
            seeds,
            max_iterations=config.max_iterations,
            distance_fn=distance_fn,
            extractor=extractor,
            progress=progress,
        )
    return cluster(
        items,
        config.cluster_count,
        max_iterations=config.max_iterations,
        seed=config.seed,
        distance_fn=distance_fn,
        initial_centroid_indices=config.initial_centroid_indices,
        extractor=extractor,
        progress=progress,
    )
