from src.hotelmap.models.domain import ClusterConfig, Hotel
from src.hotelmap.services.clustering.fingerprint import (
    cache_key,
    config_fingerprint,
    point_set_fingerprint,
    zoom_bucket,
)


def _hotel(hotel_id, lat: float, lon: float) -> Hotel:
    return Hotel(hotel_id=hotel_id, latitude=lat, longitude=lon, rating=8.0, price=100.0)


def test_point_set_fingerprint_format_and_order_independence():
    hotels = [_hotel(2, 47.6095, -122.334), _hotel(1, 47.6089, -122.3345)]

    fingerprint = point_set_fingerprint(hotels)

    assert fingerprint == "1:47.6089,-122.3345|2:47.6095,-122.3340"
    assert point_set_fingerprint(list(reversed(hotels))) == fingerprint


def test_point_set_fingerprint_tracks_membership_and_position():
    base = [_hotel(1, 47.6089, -122.3345), _hotel(2, 47.6095, -122.3340)]
    moved = [_hotel(1, 47.6090, -122.3345), _hotel(2, 47.6095, -122.3340)]
    renamed = [_hotel(1, 47.6089, -122.3345), _hotel(3, 47.6095, -122.3340)]
    fewer = base[:1]

    fingerprints = {point_set_fingerprint(points) for points in (base, moved, renamed, fewer)}

    assert len(fingerprints) == 4


def test_point_set_fingerprint_ignores_sub_rounding_movement():
    assert point_set_fingerprint([_hotel(1, 47.60891, -122.33451)]) == point_set_fingerprint(
        [_hotel(1, 47.60894, -122.33454)]
    )


def test_zoom_bucket_rounds_to_one_decimal():
    assert zoom_bucket(12.01) == 12.0
    assert zoom_bucket(12.04) == 12.0
    assert zoom_bucket(12.06) == 12.1
    assert zoom_bucket(9) == 9.0


def test_config_fingerprint_covers_radius_and_cap_only():
    base = ClusterConfig()

    assert config_fingerprint(base) == "r=50;cap=50"
    assert config_fingerprint(ClusterConfig(cluster_radius_px=60)) != config_fingerprint(base)
    assert config_fingerprint(ClusterConfig(max_cluster_size=10)) != config_fingerprint(base)
    assert config_fingerprint(ClusterConfig(min_zoom=5, max_zoom=16)) == config_fingerprint(base)


def test_cache_key_combines_all_parts(seattle_hotels):
    config = ClusterConfig()
    key = cache_key(seattle_hotels, 12.02, config)

    assert key == cache_key(list(reversed(seattle_hotels)), 11.98, config)
    assert key != cache_key(seattle_hotels, 12.3, config)
    assert key != cache_key(seattle_hotels, 12.02, ClusterConfig(cluster_radius_px=80))
    assert key != cache_key(seattle_hotels[:2], 12.02, config)
    assert key.endswith("#z=12.0#r=50;cap=50")


def test_point_set_fingerprint_distinguishes_numeric_and_string_ids():
    numeric = point_set_fingerprint([_hotel(1, 47.6089, -122.3345)])
    text = point_set_fingerprint([_hotel("1", 47.6089, -122.3345)])

    assert numeric == "1:47.6089,-122.3345"
    assert text == "'1':47.6089,-122.3345"
