"""Clustering endpoints."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, status

from ...errors import DatasetError, InvalidArgumentError
from ...schemas.clusters import CacheStatsResponse, ClusterRequest, ClusterResponse
from ...services.clustering import get_engine
from ...services.clustering.requests import process_cluster_request

router = APIRouter(prefix="/clusters", tags=["clusters"])


@router.post("", response_model=ClusterResponse, status_code=status.HTTP_200_OK)
def compute_clusters(payload: ClusterRequest) -> ClusterResponse:
    """Group the visible hotels into clusters for the requested viewport.

    When clustering fails the client is expected to render every hotel as an
    individual marker.
    """
    try:
        return process_cluster_request(payload)
    except InvalidArgumentError as exc:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(exc)) from exc
    except DatasetError as exc:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(exc)) from exc


@router.get("/cache", response_model=CacheStatsResponse, status_code=status.HTTP_200_OK)
def cache_stats() -> CacheStatsResponse:
    stats = get_engine().cache_stats()
    return CacheStatsResponse(
        hits=stats.hits,
        misses=stats.misses,
        evictions=stats.evictions,
        size=stats.size,
        capacity=stats.capacity,
    )


@router.post("/cache/clear", status_code=status.HTTP_200_OK)
def clear_cluster_cache() -> dict:
    get_engine().clear_cache()
    return {"status": "cleared"}
