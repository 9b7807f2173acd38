import numpy as np
import pytest

from kmeans_clustering.distance import manhattan_distance
from kmeans_clustering.lloyd import (
    IterationState,
    compute_means,
    reassign,
    run_lloyd,
    select_centroids,
)

FOUR_POINTS = np.array([[0, 0], [0, 1], [10, 10], [10, 11]], dtype=float)


def test_compute_means():
    data = np.array([[0, 0], [2, 0], [4, 6]], dtype=float)
    means, counts = compute_means(data, np.array([0, 0, 1]), 2)
    np.testing.assert_allclose(means, [[1, 0], [4, 6]])
    np.testing.assert_array_equal(counts, [2, 1])


def test_compute_means_empty_cluster_is_zero():
    data = np.array([[0, 0], [2, 0], [4, 4]], dtype=float)
    means, counts = compute_means(data, np.array([0, 0, 0]), 2)
    np.testing.assert_allclose(means, [[2, 4 / 3], [0, 0]])
    np.testing.assert_array_equal(counts, [3, 0])


def test_select_centroids_picks_nearest_item():
    data = np.array([[0, 0], [2, 0], [1, 0]], dtype=float)
    assignment = np.array([0, 0, 0])
    means, _ = compute_means(data, assignment, 2)
    centroids, total, member = select_centroids(
        data, assignment, means, np.array([0, 1])
    )
    np.testing.assert_array_equal(centroids, [2, 1])
    assert total == pytest.approx(2.0)
    np.testing.assert_allclose(member, [1, 1, 0])


def test_select_centroids_tie_goes_to_first_item():
    data = np.array([[0, 0], [2, 0]], dtype=float)
    assignment = np.array([0, 0])
    means, _ = compute_means(data, assignment, 1)
    centroids, _, _ = select_centroids(data, assignment, means, np.array([1]))
    np.testing.assert_array_equal(centroids, [0])


def test_reassign_tie_goes_to_lowest_cluster_id():
    data = np.array([[0, 0], [2, 0], [1, 0]], dtype=float)
    assignment = np.array([1, 1, 1])

    updated, changed = reassign(data, assignment, [0, 1])
    np.testing.assert_array_equal(updated, [0, 1, 0])
    assert changed

    updated, changed = reassign(data, assignment, [1, 0])
    np.testing.assert_array_equal(updated, [1, 0, 0])
    assert changed
    np.testing.assert_array_equal(assignment, [1, 1, 1])


def test_reassign_reports_no_change():
    updated, changed = reassign(FOUR_POINTS, np.array([0, 0, 1, 1]), [0, 2])
    np.testing.assert_array_equal(updated, [0, 0, 1, 1])
    assert not changed


def test_reassign_uses_centroid_items_not_means():
    # Item 2 sits closer to the cluster 0 mean (16/3, 0) than to item 3,
    # but closer to item 3 than to the cluster 0 centroid item (0, 0).
    data = np.array([[0, 0], [10, 0], [6, 0], [9, 0]], dtype=float)
    updated, _ = reassign(data, np.array([0, 0, 0, 1]), [0, 3])
    np.testing.assert_array_equal(updated, [0, 1, 1, 1])


def test_run_lloyd_from_seed_indices_converges():
    outcome = run_lloyd(FOUR_POINTS, np.zeros(4, dtype=int), 2, 10, centroid_indices=[0, 1])
    assert outcome.state is IterationState.CONVERGED
    assert outcome.iterations == 2
    np.testing.assert_array_equal(outcome.assignment, [0, 0, 1, 1])
    np.testing.assert_allclose(outcome.means, [[0, 0.5], [10, 10.5]])
    np.testing.assert_array_equal(outcome.centroid_indices, [0, 2])
    assert outcome.total_distance == pytest.approx(2.0)
    assert len(outcome.history) == 2


def test_run_lloyd_stops_at_iteration_limit():
    outcome = run_lloyd(FOUR_POINTS, np.zeros(4, dtype=int), 2, 1, centroid_indices=[0, 1])
    assert outcome.state is IterationState.ITERATION_LIMIT_REACHED
    assert outcome.iterations == 1
    np.testing.assert_array_equal(outcome.assignment, [0, 0, 1, 1])
    np.testing.assert_array_equal(outcome.scored_assignment, [0, 1, 1, 1])
    np.testing.assert_allclose(outcome.means, [[0, 0], [20 / 3, 22 / 3]])


def test_run_lloyd_does_not_mutate_inputs():
    assignment = np.array([1, 0, 1, 0])
    run_lloyd(FOUR_POINTS, assignment, 2, 10)
    np.testing.assert_array_equal(assignment, [1, 0, 1, 0])


def test_run_lloyd_never_exceeds_bound():
    rng = np.random.default_rng(5)
    data = rng.uniform(-5, 5, size=(60, 3))
    assignment = rng.integers(0, 6, size=60)
    for limit in (1, 2, 3):
        outcome = run_lloyd(data, assignment, 6, limit)
        assert outcome.iterations <= limit
        assert outcome.counts.sum() == 60


def test_run_lloyd_custom_distance():
    outcome = run_lloyd(
        FOUR_POINTS,
        np.array([0, 1, 0, 1]),
        2,
        10,
        distance_fn=manhattan_distance,
    )
    assert outcome.state is IterationState.CONVERGED
    groups = sorted(
        tuple(np.flatnonzero(outcome.assignment == k)) for k in range(2)
    )
    assert groups == [(0, 1), (2, 3)]
