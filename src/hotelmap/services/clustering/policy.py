"""Viewport rules deciding when and over which hotels clustering runs."""

from __future__ import annotations

from typing import Optional, Sequence

from ...models.domain import ClusterConfig, Hotel, MapBounds
from ..geospatial import point_in_bounds


def should_cluster(zoom: float, config: ClusterConfig) -> bool:
    """True when ``zoom`` lies inside the configured clustering range (inclusive).

    Outside the range every hotel is rendered individually and the engine is
    not consulted.
    """
    return config.min_zoom <= zoom <= config.max_zoom


def filter_visible(points: Sequence[Hotel], bounds: Optional[MapBounds]) -> list[Hotel]:
    if bounds is None:
        return list(points)
    return [point for point in points if point_in_bounds(point.latitude, point.longitude, bounds)]
