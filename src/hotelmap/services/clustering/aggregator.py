"""Summary statistics for a group of hotels."""

from __future__ import annotations

import logging
import math
import numbers
import warnings
from typing import Any, Sequence

from ...errors import DataQualityWarning, InvalidArgumentError
from ...models.domain import BoundingBox, Coordinate, Hotel, PriceRange

logger = logging.getLogger(__name__)


def _require_points(points: Sequence[Hotel], operation: str) -> None:
    if not points:
        raise InvalidArgumentError(f"{operation} requires at least one hotel")


def coerce_price(value: Any, *, hotel_id: Any = None) -> float:
    """Return a numeric nightly price, substituting 0.0 when the value is unusable.

    Numbers pass through; strings are parsed after trimming whitespace. Anything
    else (including NaN) is reported with a ``DataQualityWarning`` and counted
    as 0.0 so one bad record cannot break a whole clustering pass.
    """

    price: float | None = None
    if isinstance(value, numbers.Real) and not isinstance(value, bool):
        price = float(value)
    elif isinstance(value, str):
        try:
            price = float(value.strip())
        except ValueError:
            price = None

    if price is None or math.isnan(price):
        message = f"Hotel {hotel_id!r} has a non-numeric price {value!r}; using 0"
        logger.warning(message)
        warnings.warn(message, DataQualityWarning, stacklevel=2)
        return 0.0
    return price


def centroid(points: Sequence[Hotel]) -> Coordinate:
    """Arithmetic mean of latitudes and longitudes (no spherical correction)."""

    _require_points(points, "centroid")
    lat = sum(p.latitude for p in points) / len(points)
    lon = sum(p.longitude for p in points) / len(points)
    return Coordinate(lat, lon)


def bounds(points: Sequence[Hotel]) -> BoundingBox:
    _require_points(points, "bounds")
    latitudes = [p.latitude for p in points]
    longitudes = [p.longitude for p in points]
    return BoundingBox(
        north=max(latitudes),
        south=min(latitudes),
        east=max(longitudes),
        west=min(longitudes),
    )


def mean_rating(points: Sequence[Hotel]) -> float:
    _require_points(points, "mean_rating")
    return sum(float(p.rating) for p in points) / len(points)


def price_range(points: Sequence[Hotel]) -> PriceRange:
    _require_points(points, "price_range")
    prices = [coerce_price(p.price, hotel_id=p.hotel_id) for p in points]
    return PriceRange(min=min(prices), max=max(prices))
