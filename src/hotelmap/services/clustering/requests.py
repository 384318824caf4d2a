"""High-level orchestration for clustering requests coming from the map client."""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from ...data.hotels_repository import load_hotels
from ...models.domain import Hotel, Viewport
from ...schemas.clusters import ClusterModel, ClusterRequest, ClusterResponse, HotelModel
from .fingerprint import zoom_bucket
from .policy import filter_visible
from .service import ClusteringEngine, get_engine

logger = logging.getLogger(__name__)


def _select_hotels(payload: ClusterRequest, hotels: Sequence[Hotel]) -> list[Hotel]:
    selected = list(hotels)
    if payload.hotel_ids is not None:
        wanted = {str(value) for value in payload.hotel_ids}
        selected = [hotel for hotel in selected if str(hotel.hotel_id) in wanted]
    bounds = payload.bounds.to_domain() if payload.bounds else None
    return filter_visible(selected, bounds)


def process_cluster_request(
    payload: ClusterRequest,
    *,
    engine: Optional[ClusteringEngine] = None,
    hotels: Optional[Sequence[Hotel]] = None,
) -> ClusterResponse:
    engine = engine or get_engine()
    source = hotels if hotels is not None else load_hotels()
    config = payload.config.apply(engine.config) if payload.config else engine.config

    visible = _select_hotels(payload, source)
    viewport = Viewport(
        zoom=payload.zoom,
        center=payload.center.to_domain(),
        bounds=payload.bounds.to_domain() if payload.bounds else None,
    )
    active = engine.should_cluster(payload.zoom, config)
    result = engine.cluster(visible, viewport, config)

    logger.info(
        f"Clustered {len(visible)} visible hotels at zoom {payload.zoom}: "
        f"{len(result.clusters)} clusters, {len(result.unclustered)} individual markers"
    )
    return ClusterResponse(
        clustering_active=active,
        zoom_bucket=zoom_bucket(payload.zoom),
        total_hotels=len(visible),
        clusters=[ClusterModel.from_domain(item) for item in result.clusters],
        unclustered=[HotelModel.from_domain(item) for item in result.unclustered],
    )
