"""Domain models for hotels, viewports and clustering results."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Union

from ..errors import InvalidArgumentError

HotelId = Union[int, str]


@dataclass(frozen=True, slots=True)
class Coordinate:
    latitude: float
    longitude: float


@dataclass(frozen=True, slots=True)
class BoundingBox:
    """Extent of a set of locations: north/south are latitudes, east/west longitudes."""

    north: float
    south: float
    east: float
    west: float


@dataclass(frozen=True, slots=True)
class MapBounds:
    """Visible map area as reported by the map widget."""

    northeast: Coordinate
    southwest: Coordinate


@dataclass(frozen=True, slots=True)
class Hotel:
    """A geolocated hotel record, validated before it reaches the engine.

    ``price`` is kept as delivered by the dataset (number or numeric string);
    the aggregator coerces it when computing price ranges.
    """

    hotel_id: HotelId
    latitude: float
    longitude: float
    rating: float
    price: Union[float, str]
    name: str = ""
    address: Optional[str] = None
    star_rating: Optional[float] = None
    currency: Optional[str] = None
    review_count: Optional[int] = None
    image_url: Optional[str] = None
    room_type: Optional[str] = None
    amenities: tuple[str, ...] = field(default_factory=tuple)

    @property
    def id(self) -> HotelId:
        return self.hotel_id

    @property
    def coordinate(self) -> Coordinate:
        return Coordinate(self.latitude, self.longitude)


@dataclass(frozen=True, slots=True)
class ClusterConfig:
    """Zoom range and grouping limits for the clustering engine."""

    min_zoom: float = 8.0
    max_zoom: float = 14.0
    cluster_radius_px: float = 50.0
    max_cluster_size: int = 50

    def __post_init__(self) -> None:
        if self.min_zoom > self.max_zoom:
            raise InvalidArgumentError(
                f"min_zoom ({self.min_zoom}) must not exceed max_zoom ({self.max_zoom})"
            )
        if self.cluster_radius_px <= 0:
            raise InvalidArgumentError(f"cluster_radius_px must be > 0, got {self.cluster_radius_px}")
        if self.max_cluster_size <= 0:
            raise InvalidArgumentError(f"max_cluster_size must be > 0, got {self.max_cluster_size}")

    @classmethod
    def from_settings(cls, source: Optional[object] = None) -> "ClusterConfig":
        if source is None:
            from ..config import settings as source
        return cls(
            min_zoom=source.cluster_min_zoom,
            max_zoom=source.cluster_max_zoom,
            cluster_radius_px=source.cluster_radius_px,
            max_cluster_size=source.cluster_max_size,
        )


@dataclass(frozen=True, slots=True)
class Viewport:
    zoom: float
    center: Coordinate
    bounds: Optional[MapBounds] = None


@dataclass(frozen=True, slots=True)
class PriceRange:
    min: float
    max: float


@dataclass(frozen=True, slots=True)
class Cluster:
    """Two or more nearby hotels rendered as a single marker."""

    id: str
    center: Coordinate
    bounds: BoundingBox
    members: tuple[Hotel, ...]
    mean_rating: float
    price_range: PriceRange

    @property
    def count(self) -> int:
        return len(self.members)

    def member_ids(self) -> list[HotelId]:
        return [member.hotel_id for member in self.members]


@dataclass(frozen=True, slots=True)
class ClusteringResult:
    """Partition of the input hotels into clusters and standalone markers."""

    clusters: tuple[Cluster, ...] = ()
    unclustered: tuple[Hotel, ...] = ()

    @property
    def total_points(self) -> int:
        return sum(cluster.count for cluster in self.clusters) + len(self.unclustered)

    def cluster_ids(self) -> list[str]:
        return [cluster.id for cluster in self.clusters]
