"""Hotel dataset endpoints."""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, Query, status

from ...config import settings
from ...data.hotels_repository import load_hotels, reload_hotels
from ...errors import DatasetError, InvalidArgumentError
from ...models.domain import Coordinate, MapBounds
from ...schemas.clusters import HotelModel
from ...schemas.hotels import HotelListResponse, ReloadRequest, ReloadResponse
from ...services.clustering import clear_cache, filter_visible

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/hotels", tags=["hotels"])


@router.get("", response_model=HotelListResponse, status_code=status.HTTP_200_OK)
def list_hotels(
    north: float | None = Query(default=None, ge=-90.0, le=90.0),
    south: float | None = Query(default=None, ge=-90.0, le=90.0),
    east: float | None = Query(default=None, ge=-180.0, le=180.0),
    west: float | None = Query(default=None, ge=-180.0, le=180.0),
) -> HotelListResponse:
    """List hotels, optionally restricted to a map bounds rectangle."""
    edges = (north, south, east, west)
    if any(edge is not None for edge in edges) and not all(edge is not None for edge in edges):
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail="Bounds filtering requires north, south, east and west.",
        )

    try:
        hotels = load_hotels()
    except DatasetError as exc:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(exc)) from exc

    bounds = None
    if north is not None:
        bounds = MapBounds(northeast=Coordinate(north, east), southwest=Coordinate(south, west))
    visible = filter_visible(hotels, bounds)
    return HotelListResponse(items=[HotelModel.from_domain(hotel) for hotel in visible], total=len(visible))


@router.post("/reload", response_model=ReloadResponse, status_code=status.HTTP_200_OK)
def reload_dataset(payload: ReloadRequest | None = None) -> ReloadResponse:
    """Re-read the hotel dataset (optionally from another file under the data root) and drop cached clusters."""
    try:
        hotels = reload_hotels(payload.path if payload else None)
    except InvalidArgumentError as exc:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(exc)) from exc
    except DatasetError as exc:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(exc)) from exc

    clear_cache()
    logger.info(f"Reloaded {len(hotels)} hotels from {settings.hotels_file}")
    return ReloadResponse(status="success", hotels=len(hotels), source=str(settings.hotels_file))
