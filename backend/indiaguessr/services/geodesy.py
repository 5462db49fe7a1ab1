from math import radians, degrees, sin, cos, asin, sqrt, atan2
from typing import List

from ..models.geo import GeoPoint

# Earth's mean radius in kilometers (spherical model)
EARTH_RADIUS_KM = 6371.0


def _normalize_lng(lng: float) -> float:
    """Wrap a longitude into (-180, 180]."""
    lng = (lng + 180.0) % 360.0 - 180.0
    if lng <= -180.0:
        lng += 360.0
    return lng


def destination_point(origin: GeoPoint, bearing_deg: float, distance_km: float) -> GeoPoint:
    """
    Point reached by travelling along a great circle from origin.

    Args:
        origin: Starting point
        bearing_deg: Initial compass bearing (0 = north, clockwise)
        distance_km: Distance to travel in kilometers

    Returns:
        Destination point
    """
    delta = distance_km / EARTH_RADIUS_KM
    theta = radians(bearing_deg)
    lat1 = radians(origin.lat)
    lng1 = radians(origin.lng)

    sin_lat2 = sin(lat1) * cos(delta) + cos(lat1) * sin(delta) * cos(theta)
    lat2 = asin(max(-1.0, min(1.0, sin_lat2)))
    lng2 = lng1 + atan2(
        sin(theta) * sin(delta) * cos(lat1),
        cos(delta) - sin(lat1) * sin(lat2)
    )

    return GeoPoint(
        lat=max(-90.0, min(90.0, degrees(lat2))),
        lng=_normalize_lng(degrees(lng2))
    )


def haversine_distance(a: GeoPoint, b: GeoPoint) -> float:
    """
    Calculate the great circle distance between two points on Earth.

    Args:
        a, b: Points in degrees

    Returns:
        Distance in kilometers
    """
    lat1_rad = radians(a.lat)
    lat2_rad = radians(b.lat)
    dlat = lat2_rad - lat1_rad
    dlon = radians(b.lng - a.lng)

    h = sin(dlat / 2)**2 + cos(lat1_rad) * cos(lat2_rad) * sin(dlon / 2)**2
    # rounding can push h a hair past 1 for antipodal points
    h = min(1.0, h)
    c = 2 * atan2(sqrt(h), sqrt(1 - h))

    return EARTH_RADIUS_KM * c


def region_polygon(center: GeoPoint, radius_km: float, points: int = 48) -> List[List[float]]:
    """
    Regular polygon approximating a circle around center.

    Coordinates are [lng, lat] pairs (GeoJSON order) and the ring is closed,
    so the result has points + 1 entries.
    """
    if points < 3:
        raise ValueError("A polygon needs at least 3 points")

    ring = []
    for i in range(points):
        vertex = destination_point(center, i / points * 360, radius_km)
        ring.append([vertex.lng, vertex.lat])
    ring.append(list(ring[0]))
    return ring
