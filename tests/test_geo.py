"""Great-circle distance tests."""

import math

import pytest

from tovo_delivery.schemas.delivery import Coordinate
from tovo_delivery.services.geo import EARTH_RADIUS_KM, great_circle_distance_km

SANTIAGO = Coordinate(latitude=-33.4489, longitude=-70.6693)
VALPARAISO = Coordinate(latitude=-33.0472, longitude=-71.6127)


def test_identical_points_are_zero_km_apart() -> None:
    """Same coordinate twice should give exactly zero distance."""
    assert great_circle_distance_km(SANTIAGO, SANTIAGO) == 0


def test_distance_is_symmetric() -> None:
    """Swapping origin and destination should not change distance."""
    pairs = [
        (SANTIAGO, VALPARAISO),
        (Coordinate(latitude=89.9, longitude=179.9), Coordinate(latitude=-89.9, longitude=-179.9)),
        (Coordinate(latitude=0, longitude=0), Coordinate(latitude=0.0001, longitude=-0.0001)),
    ]

    for first, second in pairs:
        assert great_circle_distance_km(first, second) == pytest.approx(
            great_circle_distance_km(second, first), abs=1e-9
        )


def test_one_degree_of_latitude_matches_earth_radius() -> None:
    """One degree along a meridian spans 6371 * pi / 180 km."""
    start = Coordinate(latitude=10, longitude=20)
    end = Coordinate(latitude=11, longitude=20)

    assert great_circle_distance_km(start, end) == pytest.approx(EARTH_RADIUS_KM * math.pi / 180)


def test_santiago_to_valparaiso_is_about_one_hundred_km() -> None:
    distance = great_circle_distance_km(SANTIAGO, VALPARAISO)

    assert 95 < distance < 105


def test_antipodal_points_are_half_circumference_apart() -> None:
    distance = great_circle_distance_km(Coordinate(latitude=0, longitude=0), Coordinate(latitude=0, longitude=180))

    assert distance == pytest.approx(EARTH_RADIUS_KM * math.pi)
