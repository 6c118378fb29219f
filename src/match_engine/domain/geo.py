"""Great-circle distance helpers.

Usage example:
    from match_engine.domain.geo import GeoPoint, distance_between

    london = GeoPoint(latitude=51.5074, longitude=-0.1278)
    paris = GeoPoint(latitude=48.8566, longitude=2.3522)
    km = distance_between(london, paris)  # ~343.6
"""

from __future__ import annotations

import math
from dataclasses import dataclass

EARTH_RADIUS_KM = 6371.0


@dataclass(frozen=True)
class GeoPoint:
    """A shared location in decimal degrees."""

    latitude: float
    longitude: float


def calculate_distance(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Return the haversine distance in kilometres between two coordinates."""
    d_lat = math.radians(lat2 - lat1)
    d_lon = math.radians(lon2 - lon1)
    a = (
        math.sin(d_lat / 2) ** 2
        + math.cos(math.radians(lat1)) * math.cos(math.radians(lat2)) * math.sin(d_lon / 2) ** 2
    )
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_KM * c


def distance_between(a: GeoPoint | None, b: GeoPoint | None) -> float | None:
    """Distance between two optional locations; None when either is unknown."""
    if a is None or b is None:
        return None
    return calculate_distance(a.latitude, a.longitude, b.latitude, b.longitude)
