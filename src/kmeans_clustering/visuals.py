"""Preview rendering for clustering results."""
from __future__ import annotations

from typing import Any, List, Optional, Sequence, Tuple

import numpy as np
from PIL import Image, ImageColor, ImageDraw

from .features import Bounds, FeatureExtractor, extract_features
from .results import ClusterResult

RGB = Tuple[int, int, int]


def cluster_colors(cluster_count: int) -> List[RGB]:
    """Evenly spaced hues: cluster ``i`` gets hue ``i / cluster_count``."""
    return [
        ImageColor.getrgb(f"hsv({360.0 * idx / cluster_count:.3f},100%,100%)")
        for idx in range(cluster_count)
    ]


def _planar(features: np.ndarray) -> np.ndarray:
    """Project features onto their first two coordinates."""
    if features.shape[1] >= 2:
        return features[:, :2]
    return np.hstack([features, np.zeros((features.shape[0], 1))])


class _Viewport:
    """Map world coordinates onto image pixels, y pointing up."""

    def __init__(
        self, points: np.ndarray, size: Tuple[int, int], padding: int
    ) -> None:
        self.low = points.min(axis=0)
        span = points.max(axis=0) - self.low
        span[span == 0] = 1.0
        width, height = size
        self.scale = min(
            (width - 2 * padding) / span[0], (height - 2 * padding) / span[1]
        )
        self.padding = padding
        self.height = height

    def to_pixel(self, x: float, y: float) -> Tuple[float, float]:
        px = self.padding + (x - self.low[0]) * self.scale
        py = self.height - self.padding - (y - self.low[1]) * self.scale
        return px, py


def render_clusters(
    items: Sequence[Any],
    result: ClusterResult,
    size: Tuple[int, int] = (512, 512),
    padding: int = 24,
    point_radius: int = 3,
    extractor: Optional[FeatureExtractor] = None,
    background: str = "white",
) -> Image.Image:
    """Draw each item in its cluster colour and mark the cluster means."""
    features = _planar(extract_features(items, extractor))
    means = _planar(np.asarray(result.means))
    occupied = means[np.asarray(result.cluster_sizes) > 0]
    viewport = _Viewport(np.vstack([features, occupied]), size, padding)
    colors = cluster_colors(result.cluster_count)

    image = Image.new("RGB", size, background)
    draw = ImageDraw.Draw(image)
    for item, point, cluster_idx in zip(items, features, result.assignment):
        color = colors[cluster_idx]
        px, py = viewport.to_pixel(point[0], point[1])
        if isinstance(item, Bounds):
            half_w = item.size[0] * viewport.scale / 2.0
            half_h = item.size[1] * viewport.scale / 2.0
            draw.rectangle(
                [px - half_w, py - half_h, px + half_w, py + half_h],
                outline=color,
                width=2,
            )
        else:
            draw.ellipse(
                [
                    px - point_radius,
                    py - point_radius,
                    px + point_radius,
                    py + point_radius,
                ],
                fill=color,
            )

    arm = point_radius * 3
    for cluster_idx, mean in enumerate(means):
        if result.cluster_sizes[cluster_idx] == 0:
            continue
        px, py = viewport.to_pixel(mean[0], mean[1])
        color = colors[cluster_idx]
        draw.line([px - arm, py, px + arm, py], fill="black", width=4)
        draw.line([px, py - arm, px, py + arm], fill="black", width=4)
        draw.line([px - arm, py, px + arm, py], fill=color, width=2)
        draw.line([px, py - arm, px, py + arm], fill=color, width=2)
    return image
