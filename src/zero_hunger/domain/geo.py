"""Great-circle distance helpers."""

from math import asin, cos, radians, sin, sqrt

from zero_hunger.domain.listings import Coordinate

EARTH_RADIUS_KM = 6371.0


def haversine_km(origin: Coordinate, target: Coordinate) -> float:
    """Return the great-circle distance between two coordinates in km."""
    d_lat = radians(target.latitude - origin.latitude)
    d_lon = radians(target.longitude - origin.longitude)
    value = (
        sin(d_lat / 2) ** 2
        + cos(radians(origin.latitude))
        * cos(radians(target.latitude))
        * sin(d_lon / 2) ** 2
    )
    return EARTH_RADIUS_KM * 2 * asin(sqrt(value))
