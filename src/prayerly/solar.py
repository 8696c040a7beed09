"""Solar calculator — one full solar-position computation for a date and place."""

import logging
import math
from datetime import date

from prayerly import formulae, height
from prayerly.constants import (
    HOURS_PER_DAY,
    MAX_CH_VALUE,
    MAX_NIGHT_HOURS,
    MIN_NIGHT_HOURS,
    REFERENCE_LATITUDE,
)
from prayerly.julian import julian_date
from prayerly.models import GeoLocation, HeightCorrection, SolarPosition

logger = logging.getLogger(__name__)


def reference_latitude(latitude: float) -> float:
    """The clamped ±45° latitude, signed like the observer's hemisphere."""
    return -REFERENCE_LATITUDE if latitude < 0 else REFERENCE_LATITUDE


def solar_position(
    day: date, longitude: float, latitude: float, tz: float
) -> tuple[SolarPosition, bool]:
    """Run the formulae once for a latitude.

    Args:
        day: Calendar day of interest.
        longitude: Observer longitude, east positive (radians).
        latitude: Latitude to compute at (radians).
        tz: Hours of UT elapsed at local midnight, i.e. -(utc_offset + dst).

    Returns:
        (position, success). success is False when the sun neither rises nor
        sets at this latitude; the hour-angle cosine is then clamped to 1.
    """
    t = formulae.centuries_since_2000(julian_date(day), tz)
    mean_longitude = formulae.sun_mean_longitude(t)
    mean_anomaly = formulae.sun_mean_anomaly(t)
    e = formulae.earth_eccentricity(t)
    y = formulae.obliquity_factor(formulae.ecliptic_obliquity(t))
    eot = formulae.eot_hours(formulae.equation_of_time(y, mean_longitude, mean_anomaly, e))
    eccentric = formulae.eccentric_anomaly(mean_anomaly, e)
    v = formulae.true_anomaly(e, eccentric)
    theta = formulae.apparent_longitude(mean_longitude, v, mean_anomaly)
    declination, right_ascension = formulae.equatorial_coordinates(0.0, theta)
    noon = formulae.noon_time(longitude, eot, tz)

    ch = formulae.sunrise_cos_hour_angle(latitude, declination)
    success = -MAX_CH_VALUE <= ch <= MAX_CH_VALUE
    if not success:
        ch = MAX_CH_VALUE
    h = formulae.hour_angle_hours(ch)

    position = SolarPosition(
        declination=declination,
        right_ascension=right_ascension,
        noon=noon,
        sunrise=noon - h,
        sunset=noon + h,
        latitude=latitude,
    )
    return position, success


def compute(
    day: date,
    location: GeoLocation,
    dst_offset: float,
    height_east: float = 0.0,
    height_west: float = 0.0,
) -> tuple[SolarPosition, bool]:
    """Solar position for a day, retrying at the reference latitude if degenerate.

    The retry happens when the sun does not rise or set at the true latitude,
    or when the day or the night is shorter than an hour. The returned
    position is then flagged `problematic` and carries the reference latitude.

    Returns:
        (position, success) where success describes the first computation.
    """
    tz = -(location.utc_offset + dst_offset)
    position, success = solar_position(day, location.longitude, location.latitude, tz)

    correction = HeightCorrection()
    if height.correction_needed(success, location.latitude, height_west, height_east):
        correction = height.correct(
            position.sin_declination(),
            position.cos_declination(),
            height_west,
            height_east,
        )

    daylight = abs(position.sunset - position.sunrise)
    problematic = (
        not success or daylight <= MIN_NIGHT_HOURS or daylight >= MAX_NIGHT_HOURS
    )
    if problematic:
        ref = reference_latitude(location.latitude)
        logger.debug(
            "Degenerate day at latitude %.4f on %s (success=%s, daylight=%.3fh), "
            "recomputing at %.1f°",
            location.lat_deg,
            day,
            success,
            daylight,
            math.degrees(ref),
        )
        position, _ = solar_position(day, location.longitude, ref, tz)

    return (
        SolarPosition(
            declination=position.declination,
            right_ascension=position.right_ascension,
            noon=position.noon % HOURS_PER_DAY,
            sunrise=position.sunrise,
            sunset=position.sunset,
            latitude=position.latitude,
            problematic=problematic,
            height=correction,
        ),
        success,
    )
