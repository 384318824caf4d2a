"""Cache keys for clustering results.

A key must change whenever anything that affects the clustering output
changes, and must not change for inputs that produce the same output:

* the hotel set, by id and position rounded to 4 decimals (about 11 m), in
  any array order; string ids are quoted so `1` and `"1"` never collide;
* the zoom, rounded to one decimal place ("zoom bucket");
* the configuration values the grouping pass reads (radius and cap).
"""

from __future__ import annotations

from typing import Iterable

from ...models.domain import ClusterConfig, Hotel

KEY_SEPARATOR = "#"


def point_fingerprint(point: Hotel) -> str:
    return f"{point.hotel_id!r}:{point.latitude:.4f},{point.longitude:.4f}"


def point_set_fingerprint(points: Iterable[Hotel]) -> str:
    return "|".join(sorted(point_fingerprint(point) for point in points))


def zoom_bucket(zoom: float) -> float:
    return round(float(zoom), 1)


def config_fingerprint(config: ClusterConfig) -> str:
    return f"r={float(config.cluster_radius_px):g};cap={int(config.max_cluster_size)}"


def cache_key(points: Iterable[Hotel], zoom: float, config: ClusterConfig) -> str:
    return KEY_SEPARATOR.join(
        (
            point_set_fingerprint(points),
            f"z={zoom_bucket(zoom):.1f}",
            config_fingerprint(config),
        )
    )
