"""Greedy proximity grouping of hotels for a single zoom level."""

from __future__ import annotations

import logging
import numbers
from typing import Iterable, Sequence

from ...errors import InvalidArgumentError
from ...models.domain import Cluster, ClusterConfig, ClusteringResult, Hotel, HotelId
from ..geospatial import haversine_km, pixel_to_geo_distance
from . import aggregator

logger = logging.getLogger(__name__)

CLUSTER_ID_PREFIX = "cluster-"


def id_sort_key(value: HotelId) -> tuple:
    """Order numeric ids numerically, then string ids lexically."""

    if isinstance(value, numbers.Real) and not isinstance(value, bool):
        return (0, value, "")
    return (1, 0, str(value))


def cluster_id(members: Iterable[Hotel]) -> str:
    """Identity derived purely from membership, independent of any ordering."""

    ids = sorted((member.hotel_id for member in members), key=id_sort_key)
    return CLUSTER_ID_PREFIX + "-".join(str(value) for value in ids)


def _ordered(points: Sequence[Hotel]) -> list[Hotel]:
    seen: set[HotelId] = set()
    labels: set[str] = set()
    for point in points:
        label = str(point.hotel_id)
        if point.hotel_id in seen or label in labels:
            raise InvalidArgumentError(f"Duplicate hotel id {point.hotel_id!r} in clustering input")
        seen.add(point.hotel_id)
        labels.add(label)
    return sorted(points, key=lambda point: id_sort_key(point.hotel_id))


def build_cluster(members: Sequence[Hotel]) -> Cluster:
    return Cluster(
        id=cluster_id(members),
        center=aggregator.centroid(members),
        bounds=aggregator.bounds(members),
        members=tuple(members),
        mean_rating=aggregator.mean_rating(members),
        price_range=aggregator.price_range(members),
    )


def group_by_proximity(points: Sequence[Hotel], zoom: float, config: ClusterConfig) -> ClusteringResult:
    """Group hotels lying within ``config.cluster_radius_px`` of a seed hotel.

    The pixel radius is converted to kilometres once, at the mean latitude of
    the whole input. Hotels are visited in ascending id order; each unvisited
    hotel seeds a group and absorbs every unvisited hotel within the radius
    until the group reaches ``config.max_cluster_size``. Groups of one are
    returned as unclustered hotels.
    """

    ordered = _ordered(points)
    if not ordered:
        return ClusteringResult()
    if len(ordered) == 1:
        return ClusteringResult(clusters=(), unclustered=(ordered[0],))

    mean_latitude = sum(point.latitude for point in ordered) / len(ordered)
    radius_km = pixel_to_geo_distance(config.cluster_radius_px, mean_latitude, zoom)

    processed: set[HotelId] = set()
    clusters: list[Cluster] = []
    unclustered: list[Hotel] = []

    for index, seed in enumerate(ordered):
        if seed.hotel_id in processed:
            continue
        group = [seed]
        processed.add(seed.hotel_id)

        for candidate in ordered[index + 1:]:
            if len(group) >= config.max_cluster_size:
                break
            if candidate.hotel_id in processed:
                continue
            if haversine_km(seed, candidate) <= radius_km:
                group.append(candidate)
                processed.add(candidate.hotel_id)

        if len(group) == 1:
            unclustered.append(seed)
        else:
            clusters.append(build_cluster(group))

    logger.debug(
        f"Grouped {len(ordered)} hotels at zoom {zoom} (radius {radius_km:.4f} km): "
        f"{len(clusters)} clusters, {len(unclustered)} unclustered"
    )
    return ClusteringResult(clusters=tuple(clusters), unclustered=tuple(unclustered))
