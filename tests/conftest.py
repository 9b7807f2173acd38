from __future__ import annotations

from typing import List

import pytest

from kmeans_clustering.features import Vector2


@pytest.fixture
def two_groups() -> List[Vector2]:
    """Two well separated pairs of points."""
    return [Vector2(0, 0), Vector2(0, 1), Vector2(10, 10), Vector2(10, 11)]
