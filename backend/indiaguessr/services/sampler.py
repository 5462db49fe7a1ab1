import random
from math import sqrt
from typing import Optional

from ..models.geo import GeoPoint
from .geodesy import destination_point


def sample_uniform_point_in_disk(
    center: GeoPoint,
    radius_km: float,
    shrink_factor: float = 0.95,
    rng: Optional[random.Random] = None
) -> GeoPoint:
    """
    Draw a point uniformly (by area) from the disk around center.

    The disk radius is radius_km * shrink_factor, so samples stay strictly
    inside the region outline drawn at radius_km.

    Args:
        center: Disk center
        radius_km: Nominal region radius in kilometers
        shrink_factor: Fraction of the radius actually sampled
        rng: Optional seeded generator; module-level random otherwise

    Returns:
        Sampled point
    """
    rng = rng or random
    # sqrt so radial density grows with the area element
    r = sqrt(rng.random()) * radius_km * shrink_factor
    bearing = rng.random() * 360
    return destination_point(center, bearing, r)
