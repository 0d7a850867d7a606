"""
Purpose: Straight-line distance helpers for store discovery.
Used to turn (lat, lon) pairs from the map API into distance_km.
"""

import math

from .models import LatLon

EARTH_RADIUS_KM = 6371.0


def haversine_km(origin: LatLon, destination: LatLon) -> float:
    """
    Great-circle distance in kilometres between two (lat, lon) points.
    """
    lat1, lon1 = origin
    lat2, lon2 = destination

    d_lat = math.radians(lat2 - lat1)
    d_lon = math.radians(lon2 - lon1)

    a = (
        math.sin(d_lat / 2) ** 2
        + math.cos(math.radians(lat1)) * math.cos(math.radians(lat2)) * math.sin(d_lon / 2) ** 2
    )
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_KM * c
