import json
from pathlib import Path

import pytest

from src.hotelmap.data.hotels_repository import load_hotels, parse_hotel, reload_hotels, set_active_hotel_file
from src.hotelmap.errors import DatasetError, InvalidArgumentError


def _record(hotel_id, lat: float = 47.61, lon: float = -122.33, **overrides) -> dict:
    record = {
        "hotel_id": hotel_id,
        "name": f"Hotel {hotel_id}",
        "latitude": lat,
        "longitude": lon,
        "address": "1 Main St",
        "star_rating": 4,
        "price_per_night": 180,
        "currency": "USD",
        "rating": 8.2,
        "review_count": 12,
        "image_url": "hotel.jpg",
        "room_type": "Standard",
        "amenities": ["WiFi", "Helipad"],
    }
    record.update(overrides)
    return record


def _write(path: Path, payload) -> Path:
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


def test_parse_hotel_builds_domain_object():
    hotel = parse_hotel(_record(5, price_per_night="219"))

    assert hotel.hotel_id == 5
    assert hotel.price == "219"
    assert hotel.amenities == ("WiFi",)
    assert hotel.star_rating == 4.0


@pytest.mark.parametrize(
    "overrides",
    [
        {"hotel_id": 0},
        {"hotel_id": True},
        {"name": "  "},
        {"latitude": 91.0},
        {"longitude": -181.0},
        {"latitude": "47.6"},
        {"rating": 11},
        {"price_per_night": None},
        {"amenities": "WiFi"},
    ],
)
def test_parse_hotel_rejects_invalid_records(overrides):
    with pytest.raises(ValueError):
        parse_hotel(_record(1, **overrides))


def test_load_hotels_skips_invalid_and_duplicate_records(tmp_path: Path):
    source = _write(
        tmp_path / "hotels.json",
        [_record(1), _record(2, latitude=120.0), _record(1, lat=47.7), "garbage", _record("h-3")],
    )

    hotels = load_hotels(source)

    assert [hotel.hotel_id for hotel in hotels] == [1, "h-3"]


def test_load_hotels_accepts_wrapped_payload(tmp_path: Path):
    source = _write(tmp_path / "hotels.json", {"hotels": [_record(1), _record(2)]})

    assert len(load_hotels(source)) == 2


def test_load_hotels_is_cached(tmp_path: Path):
    source = _write(tmp_path / "hotels.json", [_record(1)])

    assert load_hotels(source) is load_hotels(source)


@pytest.mark.parametrize("payload", [[], [_record(0)], {"not": "a list"}])
def test_load_hotels_without_valid_hotels_fails(tmp_path: Path, payload):
    source = _write(tmp_path / "hotels.json", payload)

    with pytest.raises(DatasetError):
        load_hotels(source)


def test_load_hotels_missing_file(tmp_path: Path):
    with pytest.raises(DatasetError):
        load_hotels(tmp_path / "missing.json")


def test_load_hotels_malformed_json(tmp_path: Path):
    source = tmp_path / "hotels.json"
    source.write_text("[{", encoding="utf-8")

    with pytest.raises(DatasetError):
        load_hotels(source)


def test_set_active_hotel_file_switches_default_source(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    from src.hotelmap.config import settings

    monkeypatch.setattr(settings, "hotels_file", settings.hotels_file)
    first = _write(tmp_path / "first.json", [_record(1)])
    second = _write(tmp_path / "second.json", [_record(1), _record(2)])

    set_active_hotel_file(first)
    assert len(load_hotels()) == 1

    set_active_hotel_file(second)
    assert len(load_hotels()) == 2


@pytest.fixture
def data_root(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    from src.hotelmap.config import settings

    root = tmp_path.resolve()
    monkeypatch.setattr(settings, "data_root", root)
    monkeypatch.setattr(settings, "hotels_file", _write(root / "hotels.json", [_record(1)]))
    return root


def test_reload_hotels_switches_to_file_under_data_root(data_root: Path):
    from src.hotelmap.config import settings

    _write(data_root / "more.json", [_record(1), _record(2)])

    hotels = reload_hotels("more.json")

    assert len(hotels) == 2
    assert settings.hotels_file == data_root / "more.json"
    assert len(load_hotels()) == 2


def test_reload_hotels_keeps_active_file_when_candidate_is_invalid(data_root: Path):
    from src.hotelmap.config import settings

    _write(data_root / "empty.json", [])
    assert len(load_hotels()) == 1

    with pytest.raises(DatasetError):
        reload_hotels("missing.json")
    with pytest.raises(DatasetError):
        reload_hotels(data_root / "empty.json")

    assert settings.hotels_file == data_root / "hotels.json"
    assert len(load_hotels()) == 1


def test_reload_hotels_refuses_paths_outside_data_root(data_root: Path, tmp_path_factory: pytest.TempPathFactory):
    outside = _write(tmp_path_factory.mktemp("elsewhere") / "hotels.json", [_record(1), _record(2)])

    with pytest.raises(InvalidArgumentError):
        reload_hotels(outside)
    with pytest.raises(InvalidArgumentError):
        reload_hotels("../hotels.json")
