"""Great-circle distance helpers."""

from __future__ import annotations

from math import asin, cos, radians, sin, sqrt

from ridestate.models.driver import Coordinate

#: Mean Earth radius in kilometres.
EARTH_RADIUS_KM: float = 6371.0


def haversine_km(a: Coordinate, b: Coordinate) -> float:
    """Haversine distance between two points in kilometres."""
    lat1, lon1, lat2, lon2 = map(radians, (a.latitude, a.longitude, b.latitude, b.longitude))
    dlat = lat2 - lat1
    dlon = lon2 - lon1
    h = sin(dlat / 2) ** 2 + cos(lat1) * cos(lat2) * sin(dlon / 2) ** 2
    # Rounding can push h just outside [0, 1] for near-antipodal points.
    h = min(1.0, max(0.0, h))
    return 2 * EARTH_RADIUS_KM * asin(sqrt(h))
