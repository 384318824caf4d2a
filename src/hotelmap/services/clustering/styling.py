"""Marker styling hints handed to the map client alongside each cluster."""

from __future__ import annotations

from typing import Literal

HIGH_RATING_THRESHOLD = 8.7
MEDIUM_RATING_THRESHOLD = 8.0

CLUSTER_HIGH_COLOR = "#10b981"
CLUSTER_MEDIUM_COLOR = "#f59e0b"
CLUSTER_LOW_COLOR = "#6b7280"

SizeCategory = Literal["small", "medium", "large"]


def cluster_color(mean_rating: float) -> str:
    if mean_rating >= HIGH_RATING_THRESHOLD:
        return CLUSTER_HIGH_COLOR
    if mean_rating >= MEDIUM_RATING_THRESHOLD:
        return CLUSTER_MEDIUM_COLOR
    return CLUSTER_LOW_COLOR


def cluster_size(count: int) -> tuple[int, SizeCategory]:
    """Marker diameter in pixels and its size bucket."""
    if count <= 5:
        return 30, "small"
    if count <= 15:
        return 40, "medium"
    return 50, "large"
