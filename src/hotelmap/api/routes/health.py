"""Health endpoints."""

from __future__ import annotations

from fastapi import APIRouter, status

from ...data.hotels_repository import load_hotels
from ...errors import DatasetError
from ...services.clustering import get_engine

router = APIRouter(tags=["health"])


@router.get("/health", status_code=status.HTTP_200_OK)
def health_root() -> dict:
    """Simple health check endpoint that doesn't require any dependencies."""
    return {"status": "ok"}


@router.get("/health/dataset", status_code=status.HTTP_200_OK)
def health_dataset() -> dict:
    """Check that the hotel dataset can be loaded."""
    try:
        hotels = load_hotels()
    except DatasetError as exc:
        return {"service": "dataset", "healthy": False, "error": str(exc)}
    return {
        "service": "dataset",
        "healthy": True,
        "hotels": len(hotels),
        "cache_entries": len(get_engine().cache),
    }
