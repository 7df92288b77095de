"""Great-circle distance helpers."""

import math

from tovo_delivery.schemas.delivery import Coordinate

EARTH_RADIUS_KM: float = 6371.0


def great_circle_distance_km(origin: Coordinate, destination: Coordinate) -> float:
    """Return Haversine distance between two points in kilometers.

    Coordinates are not range-checked here; request validation owns that.
    """
    lat1: float = math.radians(origin.latitude)
    lat2: float = math.radians(destination.latitude)
    d_lat: float = math.radians(destination.latitude - origin.latitude)
    d_lon: float = math.radians(destination.longitude - origin.longitude)

    a: float = math.sin(d_lat / 2) ** 2 + math.cos(lat1) * math.cos(lat2) * math.sin(d_lon / 2) ** 2
    c: float = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_KM * c
