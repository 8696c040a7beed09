"""Prayer time adjuster — turns solar positions into the seven event times."""

import logging
import math
from dataclasses import dataclass
from datetime import date

from prayerly import highlat
from prayerly.constants import DEFAULT_ASR_H, MAX_CH_VALUE, SAFETY_TIME
from prayerly.formulae import cos_hour_angle, hour_angle_hours
from prayerly.models import (
    CalculationSettings,
    EventKind,
    GeoLocation,
    PrayerSchedule,
    SolarPosition,
    TimeOfDay,
)
from prayerly.timefmt import field_sum, fixed_zone, format_time

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EventHours:
    """Unformatted event times of one day, in fractional hours."""

    fajr: float
    sunrise: float
    dhuhr: float
    asr: float
    maghrib: float
    isha: float
    isha_reference: float  # Rabita variant of Isha


def asr_hour_angle(ch: float) -> float:
    """H for Asr; a shadow cosine outside [-1, 1] falls back to DEFAULT_ASR_H."""
    if abs(ch) <= MAX_CH_VALUE:
        return hour_angle_hours(ch)
    return DEFAULT_ASR_H


def asr_time(position: SolarPosition, location: GeoLocation, shadow_ratio: int) -> float:
    """Asr: the shadow of an object reaches `shadow_ratio` times its length plus its noon shadow."""
    latitude = position.latitude if position.problematic else location.latitude
    difference = position.declination - latitude
    angle = math.atan(1.0 / (shadow_ratio + math.tan(abs(difference))))
    ch = cos_hour_angle(angle, position.sin_declination(), position.cos_declination())
    return position.noon + asr_hour_angle(ch) + SAFETY_TIME


def fajr_time(
    position: SolarPosition,
    location: GeoLocation,
    settings: CalculationSettings,
    ratios: highlat.TwilightRatios | None = None,
) -> float:
    twilight = settings.angles.fajr
    ch = cos_hour_angle(-twilight, position.sin_declination(), position.cos_declination())
    direct = position.noon - (hour_angle_hours(ch) + position.height.east) + SAFETY_TIME
    if not highlat.is_high_latitude(location):
        return direct
    if ratios is None:
        raise ValueError("Twilight ratios are required above the high-latitude limit")
    if highlat.exceeds_threshold(ch, twilight):
        logger.debug("Fajr on night-fraction rule (cH=%.4f, ratio=%.4f)", ch, ratios.fajr)
        return position.sunrise - position.night_length * ratios.fajr
    return direct


def event_hours(
    day: date,
    location: GeoLocation,
    position: SolarPosition,
    dst_offset: float,
    settings: CalculationSettings,
) -> EventHours:
    """Compute every event of a day from its solar position.

    The solstice ratios are only computed when the location is at or above
    the high-latitude limit.
    """
    ratios = None
    if highlat.is_high_latitude(location):
        ratios = highlat.twilight_ratios(day, location, dst_offset, settings)

    maghrib = position.sunset + position.height.west + SAFETY_TIME
    isha = highlat.resolve_isha(position, location, settings, maghrib, ratios)
    return EventHours(
        fajr=fajr_time(position, location, settings, ratios),
        sunrise=position.sunrise - position.height.east,
        dhuhr=position.noon + SAFETY_TIME,
        asr=asr_time(position, location, settings.asr_ratio),
        maghrib=maghrib,
        isha=isha.time,
        isha_reference=isha.reference_time,
    )


def build_schedule(
    day: date,
    location: GeoLocation,
    today: EventHours,
    dst_offset: float,
    tomorrow_fajr: TimeOfDay,
    settings: CalculationSettings,
) -> PrayerSchedule:
    """Format a day's event hours and attach the half-night marker.

    Args:
        day: Day the schedule is for.
        location: Observer location.
        today: Unformatted events of `day`.
        dst_offset: Daylight saving hours in force on `day`.
        tomorrow_fajr: Formatted Fajr of the following day.
        settings: Calculation convention (intervals).
    """
    tz = fixed_zone(location.utc_offset + dst_offset)
    intervals = settings.intervals
    times: dict[EventKind, TimeOfDay] = {
        EventKind.FAJR: format_time(today.fajr, 0, day, tz),
        EventKind.DHUHR: format_time(today.dhuhr, intervals.dhuhr, day, tz),
        EventKind.ASR: format_time(today.asr, 0, day, tz),
        EventKind.MAGHRIB: format_time(today.maghrib, intervals.maghrib, day, tz),
        EventKind.ISHA: format_time(today.isha, 0, day, tz),
        EventKind.SUNRISE: format_time(today.sunrise, 0, day, tz),
    }
    times[EventKind.HALF_NIGHT] = field_sum(times[EventKind.MAGHRIB], tomorrow_fajr)
    return PrayerSchedule(day=day, times=tuple(times[kind] for kind in EventKind))
