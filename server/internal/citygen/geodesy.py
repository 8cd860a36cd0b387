"""
Conversion from local tile offsets in meters to geodetic deltas in radians.
"""

import math
from typing import Optional

# Radians per meter along the equator and along a meridian
RADIANS_PER_METER_LONGITUDE = 0.000000156785
RADIANS_PER_METER_LATITUDE = 0.000000157891


def meters_to_longitude(meters: float, latitude: float) -> float:
    """
    Convert an east-west distance to a longitude delta.

    Args:
        meters: Distance in meters
        latitude: Latitude in radians where the distance is measured

    Returns:
        Longitude delta in radians
    """
    return meters * RADIANS_PER_METER_LONGITUDE / math.cos(latitude)


def meters_to_latitude(meters: float, longitude: Optional[float] = None) -> float:
    """Convert a north-south distance to a latitude delta in radians."""
    # Meridian arcs don't depend on longitude
    return meters * RADIANS_PER_METER_LATITUDE
