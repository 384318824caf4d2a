"""Hotel dataset API schemas."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel

from .clusters import HotelModel


class HotelListResponse(BaseModel):
    items: List[HotelModel]
    total: int


class ReloadRequest(BaseModel):
    path: Optional[str] = None


class ReloadResponse(BaseModel):
    status: str
    hotels: int
    source: str
