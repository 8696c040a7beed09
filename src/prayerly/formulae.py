"""Solar position formulae.

Low-precision expressions for the handful of quantities the prayer times need:
mean longitude and anomaly of the sun, orbital eccentricity, obliquity, the
equation of time, declination and the hour angle of a given solar elevation.
Most expressions follow Smith, "Illustrating Shadows" (2005) and Smith,
"Easy PC Astronomy" (1996).

All angles are radians and all times fractional hours unless stated otherwise.
"""

import logging
import math

from prayerly.constants import (
    AXIAL_TILT,
    DAYS_PER_CENTURY,
    HEIGHT_RATIO,
    J2000,
    KEPLER_MAX_ITERATIONS,
    KEPLER_TOLERANCE,
    SINGULAR_EPSILON,
    SUNRISE_ARC_ANGLE,
)

logger = logging.getLogger(__name__)


def _normalized_radians(degrees: float) -> float:
    """Reduce an angle in degrees into [0, 360) and convert it to radians."""
    return math.radians(degrees % 360.0)


def centuries_since_2000(julian_date: float, tz: float) -> float:
    """Julian centuries between J2000.0 and the instant of interest.

    Args:
        julian_date: Julian date of the previous midnight UT (ends in .5).
        tz: Hours of UT elapsed since that midnight.
    """
    return (julian_date + tz / 24.0 - J2000) / DAYS_PER_CENTURY


def sun_mean_longitude(t: float) -> float:
    """Geometric mean longitude of the sun, measured from the vernal equinox."""
    return _normalized_radians(279.6966778 + 36000.76892 * t + 0.0003025 * t**2)


def sun_mean_anomaly(t: float) -> float:
    return _normalized_radians(
        358.47583 + 35999.04975 * t - 15e-5 * t**2 - 33e-7 * t**3
    )


def earth_eccentricity(t: float) -> float:
    """Eccentricity of the Earth's orbit (about 0.0167 today)."""
    return 0.01675104 - 418e-7 * t - 126e-9 * t**2


def ecliptic_obliquity(t: float) -> float:
    """Obliquity of the ecliptic, Newcomb's expression."""
    return math.radians(
        23.452294 - 0.0130125 * t - 164e-8 * t**2 + 503e-9 * t**3
    )


def obliquity_factor(obliquity: float) -> float:
    """tan²(ε/2), the y term of the equation of time series."""
    return math.tan(obliquity * 0.5) ** 2


def equation_of_time(y: float, mean_longitude: float, mean_anomaly: float, e: float) -> float:
    """Apparent minus mean solar time, as an angle in radians."""
    big_l, m = mean_longitude, mean_anomaly
    return (
        y * math.sin(2 * big_l)
        - 2 * e * math.sin(m)
        + 4 * e * y * math.sin(m) * math.cos(2 * big_l)
        - 0.5 * y * y * math.sin(4 * big_l)
        - 1.25 * e * e * math.sin(2 * m)
    )


def eot_hours(eot: float) -> float:
    """Convert the equation of time from radians to hours (15° per hour)."""
    return math.degrees(eot / 15)


def eccentric_anomaly(mean_anomaly: float, e: float) -> float:
    """Solve Kepler's equation M = E - e·sin(E) by Newton-Raphson.

    Iterates until the residual drops below KEPLER_TOLERANCE or
    KEPLER_MAX_ITERATIONS is reached; the last estimate is returned either way.
    """
    ecc = mean_anomaly
    for _ in range(KEPLER_MAX_ITERATIONS):
        residual = ecc - e * math.sin(ecc) - mean_anomaly
        if abs(residual) <= KEPLER_TOLERANCE:
            return ecc
        ecc -= residual / (1 - e * math.cos(ecc))
    logger.warning(
        "Kepler solve did not converge after %d iterations (M=%r, e=%r)",
        KEPLER_MAX_ITERATIONS,
        mean_anomaly,
        e,
    )
    return ecc


def true_anomaly(e: float, eccentric: float) -> float:
    """The V term: true anomaly from the eccentric anomaly (half-angle formula)."""
    x = math.sqrt((1 + e) / (1 - e))
    return 2 * math.atan(x * math.tan(0.5 * eccentric))


def apparent_longitude(mean_longitude: float, v: float, mean_anomaly: float) -> float:
    """Theta: the sun's ecliptic longitude, L + V - M."""
    return mean_longitude + v - mean_anomaly


def equatorial_coordinates(beta: float, lamda: float) -> tuple[float, float]:
    """Ecliptic (latitude beta, longitude lamda) to (declination, right ascension).

    Right ascension is returned in [0, 2π).
    """
    sin_delta = math.sin(beta) * math.cos(AXIAL_TILT) + math.cos(beta) * math.sin(
        AXIAL_TILT
    ) * math.sin(lamda)
    declination = math.asin(sin_delta)
    y = math.sin(lamda) * math.cos(AXIAL_TILT) - math.tan(beta) * math.sin(AXIAL_TILT)
    x = math.cos(lamda)
    right_ascension = math.atan2(y, x) % (2 * math.pi)
    return declination, right_ascension


def noon_time(longitude: float, eot: float, tz: float) -> float:
    """Local clock time at which the sun crosses the meridian.

    Args:
        longitude: Observer longitude, east positive (radians).
        eot: Equation of time in hours.
        tz: Hours of UT elapsed at local midnight (the negated UTC offset).
    """
    return 12 - eot - tz - longitude * HEIGHT_RATIO


def cos_hour_angle(angle: float, sin_term: float, cos_term: float) -> float:
    """Cosine of the hour angle at which the sun reaches elevation `angle`.

    `sin_term` and `cos_term` are sin δ·sin φ and cos δ·cos φ. When `cos_term`
    vanishes (observer on a pole) the result is ±inf, which every caller
    treats as "outside [-1, 1]".
    """
    numerator = math.sin(angle) - sin_term
    if abs(cos_term) < SINGULAR_EPSILON:
        return math.copysign(math.inf, numerator)
    return numerator / cos_term


def sunrise_cos_hour_angle(latitude: float, declination: float) -> float:
    return cos_hour_angle(
        SUNRISE_ARC_ANGLE,
        math.sin(declination) * math.sin(latitude),
        math.cos(declination) * math.cos(latitude),
    )


def hour_angle_hours(ch: float) -> float:
    """H: the hour angle for cosine `ch`, in hours. Clamped to [-1, 1] first."""
    return math.acos(max(-1.0, min(1.0, ch))) * HEIGHT_RATIO
