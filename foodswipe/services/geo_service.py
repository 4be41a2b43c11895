# foodswipe/services/geo_service.py

from math import radians, sin, cos, atan2, sqrt

EARTH_RADIUS_KM = 6371.0


def distance_km(lat1: float, lng1: float, lat2: float, lng2: float) -> float:
    """Haversine formula → great-circle distance in kilometers.

    No validation: callers default missing coordinates to 0 beforehand,
    and NaN inputs come back out as NaN.
    """
    dlat = radians(lat2 - lat1)
    dlng = radians(lng2 - lng1)

    a = sin(dlat / 2) ** 2 + cos(radians(lat1)) * cos(radians(lat2)) * sin(
        dlng / 2
    ) ** 2
    # rounding can push a just outside [0, 1]; NaN passes through both checks
    if a > 1.0:
        a = 1.0
    elif a < 0.0:
        a = 0.0
    c = 2 * atan2(sqrt(a), sqrt(1 - a))

    return EARTH_RADIUS_KM * c
