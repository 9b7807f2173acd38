import numpy as np
import pytest

from kmeans_clustering.lloyd import IterationState, LloydOutcome
from kmeans_clustering.results import aggregate


def _outcome(**overrides):
    fields = dict(
        assignment=np.array([1, 0, 1, 1]),
        means=np.array([[1.0, 1.0], [2.0, 3.0]]),
        counts=np.array([1, 3]),
        centroid_indices=np.array([1, 2]),
        total_distance=4.5,
        member_distances=np.array([1.0, 0.0, 0.5, 3.0]),
        scored_assignment=np.array([1, 0, 1, 1]),
        iterations=3,
        state=IterationState.CONVERGED,
    )
    fields.update(overrides)
    return LloydOutcome(**fields)


def test_aggregate_buckets_in_original_order():
    items = ["a", "b", "c", "d"]
    result = aggregate(items, _outcome())

    assert result.clusters == (("b",), ("a", "c", "d"))
    assert result.cluster_sizes == [1, 3]
    assert result.centroid_indices == (1, 2)
    assert result.centroid_items(items) == ["b", "c"]
    assert result.total_distance == 4.5
    assert result.assignment == (1, 0, 1, 1)
    assert result.converged


def test_aggregate_keeps_empty_clusters():
    outcome = _outcome(
        means=np.zeros((3, 2)),
        centroid_indices=np.array([1, 0, 0]),
    )
    result = aggregate(["a", "b", "c", "d"], outcome)
    assert result.clusters[2] == ()
    assert result.distance_stats[2].count == 0


def test_aggregate_copies_means():
    outcome = _outcome()
    result = aggregate(["a", "b", "c", "d"], outcome)
    outcome.means[0, 0] = 99.0
    assert result.means[0, 0] == 1.0
    assert not result.means.flags.writeable


def test_distance_stats():
    result = aggregate(["a", "b", "c", "d"], _outcome())
    stats = result.distance_stats[1]
    assert stats.count == 3
    assert stats.mean == pytest.approx(1.5)
    assert stats.min == 0.5
    assert stats.max == 3.0


def test_to_dict():
    result = aggregate(
        ["a", "b", "c", "d"],
        _outcome(state=IterationState.ITERATION_LIMIT_REACHED),
    )
    payload = result.to_dict()
    assert payload["cluster_sizes"] == [1, 3]
    assert payload["means"] == [[1.0, 1.0], [2.0, 3.0]]
    assert payload["state"] == "iteration_limit_reached"
    assert payload["iterations"] == 3
    assert len(payload["distance_stats"]) == 2
    assert not result.converged


def test_aggregate_carries_distance_history():
    result = aggregate(["a", "b", "c", "d"], _outcome(history=[9.0, 4.5]))
    assert result.distance_history == (9.0, 4.5)
