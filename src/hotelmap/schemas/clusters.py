"""Pydantic request/response models for clustering endpoints."""

from __future__ import annotations

from typing import Literal, Optional, Union

from pydantic import BaseModel, Field, model_validator

from ..models.domain import (
    Cluster,
    ClusterConfig,
    Coordinate,
    Hotel,
    MapBounds,
)
from ..services.clustering.styling import cluster_color, cluster_size


class CoordinateModel(BaseModel):
    latitude: float = Field(..., ge=-90.0, le=90.0)
    longitude: float = Field(..., ge=-180.0, le=180.0)

    def to_domain(self) -> Coordinate:
        return Coordinate(self.latitude, self.longitude)


class MapBoundsModel(BaseModel):
    northeast: CoordinateModel
    southwest: CoordinateModel

    @model_validator(mode="after")
    def _check_corners(self) -> "MapBoundsModel":
        if self.southwest.latitude > self.northeast.latitude:
            raise ValueError("southwest latitude must not exceed northeast latitude")
        if self.southwest.longitude > self.northeast.longitude:
            raise ValueError("southwest longitude must not exceed northeast longitude")
        return self

    def to_domain(self) -> MapBounds:
        return MapBounds(northeast=self.northeast.to_domain(), southwest=self.southwest.to_domain())


class ClusterConfigOverrides(BaseModel):
    min_zoom: Optional[float] = None
    max_zoom: Optional[float] = None
    cluster_radius_px: Optional[float] = Field(default=None, gt=0.0)
    max_cluster_size: Optional[int] = Field(default=None, ge=1)

    def apply(self, base: ClusterConfig) -> ClusterConfig:
        return ClusterConfig(
            min_zoom=self.min_zoom if self.min_zoom is not None else base.min_zoom,
            max_zoom=self.max_zoom if self.max_zoom is not None else base.max_zoom,
            cluster_radius_px=self.cluster_radius_px if self.cluster_radius_px is not None else base.cluster_radius_px,
            max_cluster_size=self.max_cluster_size if self.max_cluster_size is not None else base.max_cluster_size,
        )


class ClusterRequest(BaseModel):
    zoom: float = Field(..., ge=0.0, description="Current map zoom level.")
    center: CoordinateModel
    bounds: Optional[MapBoundsModel] = Field(
        default=None, description="Visible map area; hotels outside it are ignored."
    )
    hotel_ids: Optional[list[Union[int, str]]] = Field(
        default=None, description="Restrict clustering to these hotels (e.g. after filtering)."
    )
    config: Optional[ClusterConfigOverrides] = Field(default=None, description="Per-request config overrides.")


class HotelModel(BaseModel):
    hotel_id: Union[int, str]
    name: str
    latitude: float
    longitude: float
    rating: float
    price: Union[float, str]
    star_rating: Optional[float] = None
    currency: Optional[str] = None
    address: Optional[str] = None
    review_count: Optional[int] = None
    image_url: Optional[str] = None
    room_type: Optional[str] = None
    amenities: list[str] = Field(default_factory=list)

    @classmethod
    def from_domain(cls, hotel: Hotel) -> "HotelModel":
        return cls(
            hotel_id=hotel.hotel_id,
            name=hotel.name,
            latitude=hotel.latitude,
            longitude=hotel.longitude,
            rating=hotel.rating,
            price=hotel.price,
            star_rating=hotel.star_rating,
            currency=hotel.currency,
            address=hotel.address,
            review_count=hotel.review_count,
            image_url=hotel.image_url,
            room_type=hotel.room_type,
            amenities=list(hotel.amenities),
        )


class BoundingBoxModel(BaseModel):
    north: float
    south: float
    east: float
    west: float


class PriceRangeModel(BaseModel):
    min: float
    max: float


class MarkerStyleModel(BaseModel):
    color: str
    size: int
    category: Literal["small", "medium", "large"]


class ClusterModel(BaseModel):
    id: str
    count: int
    center: CoordinateModel
    bounds: BoundingBoxModel
    mean_rating: float
    price_range: PriceRangeModel
    hotel_ids: list[Union[int, str]]
    style: MarkerStyleModel

    @classmethod
    def from_domain(cls, cluster: Cluster) -> "ClusterModel":
        size, category = cluster_size(cluster.count)
        return cls(
            id=cluster.id,
            count=cluster.count,
            center=CoordinateModel(latitude=cluster.center.latitude, longitude=cluster.center.longitude),
            bounds=BoundingBoxModel(
                north=cluster.bounds.north,
                south=cluster.bounds.south,
                east=cluster.bounds.east,
                west=cluster.bounds.west,
            ),
            mean_rating=cluster.mean_rating,
            price_range=PriceRangeModel(min=cluster.price_range.min, max=cluster.price_range.max),
            hotel_ids=cluster.member_ids(),
            style=MarkerStyleModel(color=cluster_color(cluster.mean_rating), size=size, category=category),
        )


class ClusterResponse(BaseModel):
    clustering_active: bool
    zoom_bucket: float
    total_hotels: int
    clusters: list[ClusterModel]
    unclustered: list[HotelModel]


class CacheStatsResponse(BaseModel):
    hits: int
    misses: int
    evictions: int
    size: int
    capacity: int
