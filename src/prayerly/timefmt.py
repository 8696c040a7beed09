"""Fractional-hour to clock-time conversion."""

from datetime import date, datetime, time, timedelta, tzinfo

import pytz

from prayerly.constants import HOURS_PER_DAY, MINUTES_PER_HOUR, SECONDS_PER_MINUTE
from prayerly.models import TimeOfDay

MAX_HOUR_VALUE = HOURS_PER_DAY - 1
MAX_MINUTE_VALUE = MINUTES_PER_HOUR - 1


def fixed_zone(utc_offset: float) -> tzinfo:
    """A pytz fixed-offset zone for an offset in hours (DST already folded in)."""
    return pytz.FixedOffset(round(utc_offset * MINUTES_PER_HOUR))


def wrap(
    hour: int, minute: int, second: int, day: date, tz: tzinfo | None = None
) -> TimeOfDay:
    """Anchor normalised clock fields to a calendar day."""
    instant = datetime.combine(day, time(hour, minute, second), tzinfo=tz)
    return TimeOfDay(hour=hour, minute=minute, second=second, instant=instant)


def from_instant(instant: datetime) -> TimeOfDay:
    return TimeOfDay(
        hour=instant.hour, minute=instant.minute, second=instant.second, instant=instant
    )


def format_time(
    value: float,
    interval: int = 0,
    day: date | None = None,
    tz: tzinfo | None = None,
) -> TimeOfDay:
    """Convert fractional hours into a TimeOfDay.

    4.5 becomes 04:30:00. Seconds of 30 or more round into the next minute,
    except in the last minute of the day, which keeps its truncated seconds
    and never passes 23:59:59.
    `interval` minutes are added after rounding; the hour then wraps modulo 24
    without moving to the next day.

    Args:
        value: Time in fractional hours.
        interval: Minutes to add to the rounded time.
        day: Day to anchor the instant to. Defaults to today.
        tz: Zone of the instant.
    """
    hour = int(value)
    minute = int(MINUTES_PER_HOUR * (value - hour))
    second = int(3600.0 * (value - hour - minute / MINUTES_PER_HOUR))
    if hour == MAX_HOUR_VALUE and minute == MAX_MINUTE_VALUE:
        # No carry out of the last minute of the day.
        second = min(second, SECONDS_PER_MINUTE - 1)
    elif second >= SECONDS_PER_MINUTE // 2:
        minute += 1
        second = 0

    hour, minute, second = abs(hour), abs(minute), abs(second)
    minute += interval
    while minute > MAX_MINUTE_VALUE:
        minute -= MINUTES_PER_HOUR
        hour += 1
    while hour > MAX_HOUR_VALUE:
        hour -= HOURS_PER_DAY

    return wrap(hour, minute, second, day or date.today(), tz)


def field_sum(first: TimeOfDay, second: TimeOfDay) -> TimeOfDay:
    """Add the hour, minute and second fields of two times independently.

    The sum is laid out from midnight of `first`'s day with the usual carries,
    so it may land on the following day.
    """
    midnight = first.instant.replace(hour=0, minute=0, second=0, microsecond=0)
    instant = midnight + timedelta(
        hours=first.hour + second.hour,
        minutes=first.minute + second.minute,
        seconds=first.second + second.second,
    )
    return from_instant(instant)
