"""Great-circle distance helpers used as the A* heuristic."""

from __future__ import annotations

import math

from .records import Airport

EARTH_RADIUS_KM = 6371.0


def haversine_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Return the great-circle distance in kilometres between two points.

    Inputs are degrees and are not range checked; NaN or infinite inputs
    yield NaN.
    """

    if not all(map(math.isfinite, (lat1, lon1, lat2, lon2))):
        return math.nan

    phi1, phi2 = math.radians(lat1), math.radians(lat2)
    dphi = math.radians(lat2 - lat1)
    dlambda = math.radians(lon2 - lon1)

    a = math.sin(dphi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(dlambda / 2) ** 2
    # Rounding can push ``a`` a hair above 1 for antipodal points.
    return 2 * EARTH_RADIUS_KM * math.asin(math.sqrt(min(a, 1.0)))


def airport_distance_km(first: Airport, second: Airport) -> float:
    """Great-circle distance between two airports."""

    return haversine_km(first.latitude, first.longitude, second.latitude, second.longitude)
