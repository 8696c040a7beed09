"""High-latitude approximations for the twilight-bounded prayers.

Above 48° the sun may not sink far enough below the horizon in summer for the
Fajr/Isha twilight angles to be reached at all. For those days the prayer is
placed at the same fraction of the night that it occupies at the reference
latitude (45°, as suggested by the Muslim World League's Rabita) on the
solstice, June 21 in the north and December 21 in the south.
"""

import logging
from dataclasses import dataclass
from datetime import date

from prayerly import solar
from prayerly.constants import (
    HIGH_LATITUDE,
    LINEAR_RATIO,
    MAX_CH_VALUE,
    MINUTES_PER_HOUR,
    MULTIPLIER,
    SAFETY_TIME,
    SOLSTICE_DAY,
)
from prayerly.formulae import cos_hour_angle, hour_angle_hours
from prayerly.models import CalculationSettings, GeoLocation, SolarPosition

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TwilightRatios:
    """Fajr and Isha offsets from sunrise/sunset as fractions of the night."""

    fajr: float
    isha: float
    reference: SolarPosition  # The solstice computation the ratios come from


@dataclass(frozen=True)
class IshaResolution:
    """Isha at this location, and the reference-latitude (Rabita) variant."""

    time: float
    reference_time: float


def reference_day(day: date, latitude: float) -> date:
    """The solstice of `day`'s year on which the observer's hemisphere leans sunward."""
    month = 12 if latitude < 0 else 6
    return date(day.year, month, SOLSTICE_DAY)


def exceeds_threshold(ch: float, twilight: float) -> bool:
    """The linear rule marking days whose twilight angle is unusable.

    Args:
        ch: Hour-angle cosine for the twilight angle.
        twilight: Twilight angle in radians.
    """
    return abs(ch) > LINEAR_RATIO + MULTIPLIER * twilight


def twilight_ratios(
    day: date, location: GeoLocation, dst_offset: float, settings: CalculationSettings
) -> TwilightRatios:
    """Compute the Fajr/Isha night fractions at the reference latitude and solstice."""
    ref_lat = solar.reference_latitude(location.latitude)
    ref_day = reference_day(day, location.latitude)
    tz = -(location.utc_offset + dst_offset)
    position, _ = solar.solar_position(ref_day, location.longitude, ref_lat, tz)
    night = position.night_length
    sin_term = position.sin_declination(ref_lat)
    cos_term = position.cos_declination(ref_lat)

    angles = settings.angles
    ch = cos_hour_angle(-angles.fajr, sin_term, cos_term)
    fajr_reference = position.noon - hour_angle_hours(ch) - SAFETY_TIME

    if angles.isha_deg != 0:
        ch = cos_hour_angle(-angles.isha, sin_term, cos_term)
        isha_reference = position.noon + hour_angle_hours(ch) + SAFETY_TIME
    else:
        isha_reference = position.sunset + settings.intervals.isha / MINUTES_PER_HOUR

    return TwilightRatios(
        fajr=(position.sunrise - fajr_reference) / night,
        isha=(isha_reference - position.sunset) / night,
        reference=position,
    )


def resolve_isha(
    today: SolarPosition,
    location: GeoLocation,
    settings: CalculationSettings,
    maghrib: float,
    ratios: TwilightRatios | None = None,
) -> IshaResolution:
    """Isha onset in fractional hours.

    With a zero Isha angle Isha is a fixed interval after Maghrib. Below 48°
    the twilight angle is used directly. Above it, each variant picks between
    the direct angle and the night-fraction rule: the primary time uses the
    linear threshold, the reference variant switches only when the twilight
    angle is never reached at all.

    Args:
        today: Today's solar position.
        location: Observer location.
        settings: Calculation convention.
        maghrib: Maghrib time in fractional hours.
        ratios: Solstice ratios; required above 48°.
    """
    angles = settings.angles
    if angles.isha_deg == 0:
        isha = maghrib + settings.intervals.isha / MINUTES_PER_HOUR
        return IshaResolution(isha, isha)

    ch = cos_hour_angle(-angles.isha, today.sin_declination(), today.cos_declination())
    direct = today.noon + hour_angle_hours(ch) + today.height.west + SAFETY_TIME

    if not is_high_latitude(location):
        return IshaResolution(direct, direct)

    if ratios is None:
        raise ValueError("Twilight ratios are required above the high-latitude limit")
    by_ratio = today.sunset + today.night_length * ratios.isha

    if exceeds_threshold(ch, angles.isha):
        logger.debug("Isha on night-fraction rule (cH=%.4f, ratio=%.4f)", ch, ratios.isha)
        isha = by_ratio
    else:
        isha = direct
    reference = by_ratio if abs(ch) > MAX_CH_VALUE else direct
    return IshaResolution(isha, reference)


def is_high_latitude(location: GeoLocation) -> bool:
    return abs(location.latitude) >= HIGH_LATITUDE
