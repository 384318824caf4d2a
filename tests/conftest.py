import pytest

from src.hotelmap.models.domain import Hotel


@pytest.fixture
def seattle_hotels() -> list[Hotel]:
    return [
        Hotel(hotel_id=1, latitude=47.6089, longitude=-122.3345, rating=8.5, price=200, name="Test Hotel A"),
        Hotel(hotel_id=2, latitude=47.6095, longitude=-122.3340, rating=7.8, price="150", name="Test Hotel B"),
        Hotel(hotel_id=3, latitude=47.6200, longitude=-122.3500, rating=9.2, price=300, name="Test Hotel C"),
    ]


@pytest.fixture(autouse=True)
def reset_shared_state():
    from src.hotelmap.data.hotels_repository import load_hotels
    from src.hotelmap.services.clustering.service import get_engine

    load_hotels.cache_clear()
    get_engine.cache_clear()
    yield
    load_hotels.cache_clear()
    get_engine.cache_clear()
