"""Geospatial helper functions."""

from __future__ import annotations

import math
from typing import Protocol

from shapely.geometry import Point, box

from ..errors import InvalidArgumentError
from ..models.domain import MapBounds

EARTH_RADIUS_KM = 6371.0
# Web-Mercator ground resolution at the equator for zoom 0 (256px tiles).
EQUATOR_METERS_PER_PIXEL = 156543.03392


class HasCoordinates(Protocol):
    latitude: float
    longitude: float


def meters_per_pixel(latitude_deg: float, zoom: float) -> float:
    """Ground distance covered by one screen pixel at the given latitude and zoom."""

    if zoom < 0:
        raise InvalidArgumentError(f"zoom must be >= 0, got {zoom}")
    return EQUATOR_METERS_PER_PIXEL * math.cos(math.radians(latitude_deg)) / math.pow(2, zoom)


def geo_to_pixel_distance(geo_km: float, latitude_deg: float, zoom: float) -> float:
    """Convert a ground distance in kilometres into on-screen pixels."""

    return (geo_km * 1000.0) / meters_per_pixel(latitude_deg, zoom)


def pixel_to_geo_distance(px: float, latitude_deg: float, zoom: float) -> float:
    """Convert an on-screen pixel distance into kilometres on the ground."""

    return (px * meters_per_pixel(latitude_deg, zoom)) / 1000.0


def haversine_km(a: HasCoordinates, b: HasCoordinates) -> float:
    """Compute distance between two coordinates using the Haversine formula."""

    phi1, phi2 = math.radians(a.latitude), math.radians(b.latitude)
    d_phi = math.radians(b.latitude - a.latitude)
    d_lambda = math.radians(b.longitude - a.longitude)

    h = math.sin(d_phi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(d_lambda / 2) ** 2
    c = 2 * math.atan2(math.sqrt(h), math.sqrt(1 - h))
    return EARTH_RADIUS_KM * c


def point_in_bounds(latitude: float, longitude: float, bounds: MapBounds) -> bool:
    """Return True if the location lies inside (or on the edge of) the map bounds."""

    area = box(
        bounds.southwest.longitude,
        bounds.southwest.latitude,
        bounds.northeast.longitude,
        bounds.northeast.latitude,
    )
    return area.covers(Point(longitude, latitude))
