"""Tests for haversine distance helpers."""

import pytest

from match_engine.domain.geo import GeoPoint, calculate_distance, distance_between

POINTS = [
    (51.5074, -0.1278),
    (48.8566, 2.3522),
    (-33.8688, 151.2093),
    (40.7128, -74.0060),
    (0.0, 0.0),
]


def test_one_degree_of_latitude_is_about_111_km() -> None:
    assert calculate_distance(0.0, 0.0, 1.0, 0.0) == pytest.approx(111.195, abs=0.01)


def test_london_to_paris() -> None:
    assert calculate_distance(51.5074, -0.1278, 48.8566, 2.3522) == pytest.approx(343.5, abs=1.0)


@pytest.mark.parametrize("a", POINTS)
@pytest.mark.parametrize("b", POINTS)
def test_distance_is_symmetric(a: tuple[float, float], b: tuple[float, float]) -> None:
    assert calculate_distance(*a, *b) == pytest.approx(calculate_distance(*b, *a))


@pytest.mark.parametrize("point", POINTS)
def test_distance_to_self_is_zero(point: tuple[float, float]) -> None:
    assert calculate_distance(*point, *point) == 0.0


def test_distance_between_unknown_when_either_location_missing() -> None:
    here = GeoPoint(latitude=51.5, longitude=-0.1)

    assert distance_between(here, None) is None
    assert distance_between(None, here) is None
    assert distance_between(None, None) is None


def test_distance_between_known_locations() -> None:
    a = GeoPoint(latitude=0.0, longitude=0.0)
    b = GeoPoint(latitude=1.0, longitude=0.0)

    assert distance_between(a, b) == pytest.approx(111.195, abs=0.01)
