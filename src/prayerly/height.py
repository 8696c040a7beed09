"""Horizon-height correction of sunrise and sunset.

A raised eastern or western horizon (hills, a valley floor) delays sunrise and
advances sunset. The obstruction height is turned into an extra depression of
the horizon and the resulting hour-angle difference is reported in hours.
"""

import math

from prayerly.constants import (
    EARTH_RADIUS_M,
    HEIGHT_CORRECTION_LATITUDE,
    HEIGHT_RATIO,
    SUNRISE_ARC_ANGLE,
)
from prayerly.formulae import cos_hour_angle
from prayerly.models import HeightCorrection


def horizon_angle(height_m: float) -> float:
    """Solar elevation (radians) of the visible horizon for a height difference."""
    dip = 0.5 * math.pi - math.asin(EARTH_RADIUS_M / (EARTH_RADIUS_M + height_m))
    return SUNRISE_ARC_ANGLE + dip


def _hour_angle(angle: float, sin_term: float, cos_term: float) -> float:
    ch = cos_hour_angle(angle, sin_term, cos_term)
    return math.acos(max(-1.0, min(1.0, ch)))


def correction_needed(
    success: bool, latitude: float, height_west: float, height_east: float
) -> bool:
    """Height correction applies only to non-degenerate days below 45° latitude."""
    return (
        success
        and abs(latitude) < HEIGHT_CORRECTION_LATITUDE
        and (height_west != 0 or height_east != 0)
    )


def correct(
    sin_term: float, cos_term: float, height_west: float, height_east: float
) -> HeightCorrection:
    """Compute the eastern and western corrections independently.

    Args:
        sin_term: sin δ·sin φ of the day being corrected.
        cos_term: cos δ·cos φ of the day being corrected.
        height_west: Western horizon height difference in meters.
        height_east: Eastern horizon height difference in meters.

    Returns:
        HeightCorrection in fractional hours.
    """
    initial = _hour_angle(SUNRISE_ARC_ANGLE, sin_term, cos_term)
    west = _hour_angle(horizon_angle(height_west), sin_term, cos_term)
    east = _hour_angle(horizon_angle(height_east), sin_term, cos_term)
    return HeightCorrection(
        east=(initial - east) * HEIGHT_RATIO,
        west=(initial - west) * HEIGHT_RATIO,
    )
