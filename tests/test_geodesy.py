"""Mini README: Tests for the great-circle distance helpers."""

from __future__ import annotations

import math

import pytest

from skyroutes.routing import EARTH_RADIUS_KM, airport_distance_km, haversine_km

from conftest import make_airport


def test_same_point_is_zero() -> None:
    assert haversine_km(51.47, -0.45, 51.47, -0.45) == 0.0


def test_quarter_meridian_matches_radius() -> None:
    """Equator to pole spans a quarter of the circumference."""

    assert haversine_km(0.0, 0.0, 90.0, 0.0) == pytest.approx(math.pi * EARTH_RADIUS_KM / 2)


def test_known_city_pair() -> None:
    """London Heathrow to New York JFK is roughly 5,550 km."""

    distance = haversine_km(51.4700, -0.4543, 40.6413, -73.7781)
    assert distance == pytest.approx(5550, rel=0.01)


def test_distance_is_symmetric() -> None:
    forward = haversine_km(-33.9399, 151.1753, 35.5494, 139.7798)
    backward = haversine_km(35.5494, 139.7798, -33.9399, 151.1753)
    assert forward == pytest.approx(backward)


def test_antipodal_points_do_not_fail() -> None:
    assert haversine_km(0.0, 0.0, 0.0, 180.0) == pytest.approx(math.pi * EARTH_RADIUS_KM)


def test_nan_input_propagates() -> None:
    assert math.isnan(haversine_km(float("nan"), 0.0, 10.0, 10.0))


def test_airport_distance_uses_coordinates() -> None:
    first = make_airport("X", 10.0, 20.0)
    second = make_airport("Y", -5.0, 40.0)
    assert airport_distance_km(first, second) == pytest.approx(haversine_km(10.0, 20.0, -5.0, 40.0))


@pytest.mark.parametrize(
    "coordinates",
    [
        (float("inf"), 0.0, 10.0, 10.0),
        (0.0, float("-inf"), 10.0, 10.0),
        (0.0, 0.0, 10.0, float("inf")),
    ],
)
def test_infinite_input_yields_nan(coordinates) -> None:
    assert math.isnan(haversine_km(*coordinates))
