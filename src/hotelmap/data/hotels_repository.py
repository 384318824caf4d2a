"""Data access helpers for loading hotel records."""

from __future__ import annotations

import functools
import json
import logging
import math
import numbers
from pathlib import Path
from typing import Any, Iterable, Mapping, Optional

from ..config import settings
from ..errors import DatasetError, InvalidArgumentError
from ..models.domain import Hotel

logger = logging.getLogger(__name__)

KNOWN_AMENITIES = frozenset(
    {"WiFi", "Parking", "Gym", "Pool", "Restaurant", "Bar", "Spa", "Business Center"}
)


def _require_number(record: Mapping[str, Any], field: str, low: float, high: float) -> float:
    value = record.get(field)
    if not isinstance(value, numbers.Real) or isinstance(value, bool) or not math.isfinite(value):
        raise ValueError(f"{field} must be a finite number")
    if value < low or value > high:
        raise ValueError(f"{field} must be between {low:g} and {high:g}")
    return float(value)


def _optional_str(record: Mapping[str, Any], field: str) -> Optional[str]:
    value = record.get(field)
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def parse_hotel(record: Any) -> Hotel:
    """Validate one raw dataset record and build a ``Hotel`` from it."""

    if not isinstance(record, Mapping):
        raise ValueError("hotel must be an object")

    hotel_id = record.get("hotel_id")
    if isinstance(hotel_id, bool) or hotel_id is None:
        raise ValueError("hotel_id is required")
    if isinstance(hotel_id, numbers.Integral):
        if hotel_id <= 0:
            raise ValueError("hotel_id must be a positive number")
        hotel_id = int(hotel_id)
    elif isinstance(hotel_id, str) and hotel_id.strip():
        hotel_id = hotel_id.strip()
    else:
        raise ValueError("hotel_id must be a positive integer or a non-empty string")

    name = record.get("name")
    if not isinstance(name, str) or not name.strip():
        raise ValueError("name must be a non-empty string")

    latitude = _require_number(record, "latitude", -90.0, 90.0)
    longitude = _require_number(record, "longitude", -180.0, 180.0)
    rating = _require_number(record, "rating", 0.0, 10.0)

    price = record.get("price_per_night", record.get("price"))
    if price is None:
        raise ValueError("price_per_night is required")
    if not isinstance(price, (numbers.Real, str)) or isinstance(price, bool):
        raise ValueError("price_per_night must be a number or a numeric string")

    star_rating = record.get("star_rating")
    review_count = record.get("review_count")
    amenities = record.get("amenities") or []
    if not isinstance(amenities, list):
        raise ValueError("amenities must be an array")

    return Hotel(
        hotel_id=hotel_id,
        latitude=latitude,
        longitude=longitude,
        rating=rating,
        price=price if isinstance(price, str) else float(price),
        name=name.strip(),
        address=_optional_str(record, "address"),
        star_rating=float(star_rating) if isinstance(star_rating, numbers.Real) else None,
        currency=_optional_str(record, "currency"),
        review_count=int(review_count) if isinstance(review_count, numbers.Real) else None,
        image_url=_optional_str(record, "image_url"),
        room_type=_optional_str(record, "room_type"),
        amenities=tuple(item for item in amenities if item in KNOWN_AMENITIES),
    )


def parse_hotels(records: Iterable[Any]) -> tuple[Hotel, ...]:
    """Validate a batch of records, skipping (and logging) invalid or duplicate ones."""

    hotels: list[Hotel] = []
    seen_ids: set = set()
    skipped = 0
    for index, record in enumerate(records):
        try:
            hotel = parse_hotel(record)
        except ValueError as exc:
            skipped += 1
            logger.warning(f"Skipping hotel record {index}: {exc}")
            continue
        if hotel.hotel_id in seen_ids:
            skipped += 1
            logger.warning(f"Skipping hotel record {index}: duplicate hotel_id {hotel.hotel_id!r}")
            continue
        seen_ids.add(hotel.hotel_id)
        hotels.append(hotel)

    if skipped:
        logger.warning(f"Skipped {skipped} invalid hotel records")
    return tuple(hotels)


@functools.lru_cache(maxsize=1)
def load_hotels(source: Optional[Path] = None) -> tuple[Hotel, ...]:
    """Load hotels from the configured JSON file."""

    json_path = source or settings.hotels_file
    if not json_path.exists():
        raise DatasetError(f"Hotel file not found: {json_path}")

    try:
        with json_path.open(mode="r", encoding="utf-8") as handle:
            payload = json.load(handle)
    except (OSError, json.JSONDecodeError) as exc:
        raise DatasetError(f"Unable to read hotel file '{json_path}': {exc}") from exc

    if isinstance(payload, Mapping) and isinstance(payload.get("hotels"), list):
        payload = payload["hotels"]
    if not isinstance(payload, list):
        raise DatasetError(f"Hotel file '{json_path}' must contain a JSON array of hotels.")

    hotels = parse_hotels(payload)
    if not hotels:
        raise DatasetError(f"No valid hotels found in '{json_path}'.")
    logger.info(f"Loaded {len(hotels)} hotels from {json_path}")
    return hotels


def set_active_hotel_file(path: Path) -> None:
    """Update the active hotel file and clear the loader cache."""

    settings.hotels_file = path
    load_hotels.cache_clear()


def resolve_hotel_file(path: Optional[Path | str] = None) -> Path:
    """Resolve a dataset path, relative to ``settings.data_root``, refusing anything outside it."""

    if path is None:
        return settings.hotels_file
    candidate = Path(path).expanduser()
    if not candidate.is_absolute():
        candidate = settings.data_root / candidate
    candidate = candidate.resolve()
    if not candidate.is_relative_to(settings.data_root.resolve()):
        raise InvalidArgumentError(f"Hotel file must live under {settings.data_root}: {path}")
    return candidate


def reload_hotels(path: Optional[Path | str] = None) -> tuple[Hotel, ...]:
    """Validate a dataset file and, only once it loads, make it the active one.

    A file that is missing or holds no valid hotels raises ``DatasetError`` and
    leaves the current dataset in place.
    """

    candidate = resolve_hotel_file(path)
    hotels = load_hotels.__wrapped__(candidate)
    set_active_hotel_file(candidate)
    return hotels
