"""Daylight saving time adjusters.

An adjuster is any callable taking the local moment of interest and returning
the number of hours to add to the standard UTC offset. The default follows the
North American rule in force since 2007: clocks go forward at 02:00 on the
second Sunday of March and back at 02:00 on the first Sunday of November.
"""

from datetime import date, datetime, time
from typing import Callable

import pytz

DST_OFFSET = 1  # Hours

DstAdjuster = Callable[[datetime], float]


def nth_sunday(year: int, month: int, n: int) -> date:
    """Return the n-th Sunday of a month, scanning from the first day upward."""
    found = 0
    current = 1
    while True:
        day = date(year, month, current)
        if day.weekday() == 6:
            found += 1
            if found == n:
                return day
        current += 1


def _as_local(moment: date | datetime) -> datetime:
    if isinstance(moment, datetime):
        return moment.replace(tzinfo=None)
    return datetime.combine(moment, time())


def dst_window(year: int) -> tuple[datetime, datetime]:
    """[start, end) of daylight saving time for a year, local wall clock."""
    start = datetime.combine(nth_sunday(year, 3, 2), time(2))
    end = datetime.combine(nth_sunday(year, 11, 1), time(2))
    return start, end


def dst_offset(moment: date | datetime) -> int:
    """North American rule: 1 inside the DST window, 0 outside.

    Plain dates are taken at local midnight.
    """
    local = _as_local(moment)
    start, end = dst_window(local.year)
    return DST_OFFSET if start <= local < end else 0


def no_dst(moment: date | datetime) -> int:
    """Adjuster for locations that never observe daylight saving time."""
    return 0


class ZoneDst:
    """Adjuster backed by the pytz rules of an IANA time zone."""

    def __init__(self, tz_name: str):
        self.zone = pytz.timezone(tz_name)

    def __call__(self, moment: date | datetime) -> float:
        """DST in hours; fractional for zones such as Australia/Lord_Howe (0.5)."""
        local = self.zone.localize(_as_local(moment), is_dst=False)
        delta = local.dst()
        if not delta:
            return 0
        return delta.total_seconds() / 3600.0

    def standard_offset(self, moment: date | datetime) -> float:
        """UTC offset in hours with any daylight saving removed."""
        local = self.zone.localize(_as_local(moment), is_dst=False)
        offset = local.utcoffset() - local.dst()
        return offset.total_seconds() / 3600.0

    def __repr__(self) -> str:
        return f"ZoneDst({self.zone.zone!r})"
