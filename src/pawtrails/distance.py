"""Great-circle distance calculations.

Haversine on a spherical Earth is accurate enough at hiking distances, and
the asin/sqrt form stays stable for the few-metre gaps between consecutive
GPS fixes.
"""

from __future__ import annotations
import math
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pawtrails.models import GeoSample

# Earth's mean radius in miles
EARTH_RADIUS_MI = 3959


def distance_miles(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Calculate distance between two points using Haversine formula.

    Args:
        lat1, lon1: First point coordinates in degrees
        lat2, lon2: Second point coordinates in degrees

    Returns:
        Distance in miles
    """
    lat1_rad = math.radians(lat1)
    lat2_rad = math.radians(lat2)
    dlat = math.radians(lat2 - lat1)
    dlon = math.radians(lon2 - lon1)

    a = math.sin(dlat / 2) ** 2 + math.cos(lat1_rad) * math.cos(lat2_rad) * math.sin(dlon / 2) ** 2
    # Float rounding can leave a slightly above 1 for antipodal points
    c = 2 * math.asin(math.sqrt(min(a, 1.0)))

    return EARTH_RADIUS_MI * c


def total_distance(samples: list[GeoSample]) -> float:
    """Sum of segment distances between consecutive samples, in miles."""
    total = 0.0
    for i in range(1, len(samples)):
        total += distance_miles(
            samples[i - 1].latitude, samples[i - 1].longitude,
            samples[i].latitude, samples[i].longitude,
        )
    return total
