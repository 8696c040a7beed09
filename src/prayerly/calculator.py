"""Calculation strategies: location + date in, PrayerSchedule out."""

import logging
from abc import ABC, abstractmethod
from datetime import date, datetime, timedelta

from prayerly import adjuster, solar
from prayerly.dst import DstAdjuster, dst_offset
from prayerly.models import CalculationSettings, GeoLocation, PrayerSchedule
from prayerly.timefmt import fixed_zone, format_time

logger = logging.getLogger(__name__)


class Calculator(ABC):
    """A way of obtaining prayer times.

    The astronomical engine is the only implementation shipped; schedules
    published by a mosque or fetched from a third-party service can be plugged
    in behind the same interface.
    """

    @abstractmethod
    def calculate(self, location: GeoLocation, moment: date | datetime) -> PrayerSchedule:
        """Return the schedule of the day containing `moment` at `location`."""


class AstronomicalCalculator(Calculator):
    """Computes prayer times from the sun's position.

    Args:
        settings: Calculation convention. Defaults to ISNA with no intervals.
        dst: Daylight saving adjuster. Defaults to the North American rule.
    """

    def __init__(
        self,
        settings: CalculationSettings | None = None,
        dst: DstAdjuster = dst_offset,
    ):
        self.settings = settings or CalculationSettings()
        self.dst = dst

    def _event_hours(
        self, day: date, location: GeoLocation, offset: float
    ) -> adjuster.EventHours:
        position, success = solar.compute(
            day,
            location,
            offset,
            self.settings.height_east,
            self.settings.height_west,
        )
        if position.problematic:
            logger.debug(
                "Solar position for %s at %.4f° flagged problematic (success=%s)",
                day,
                location.lat_deg,
                success,
            )
        return adjuster.event_hours(day, location, position, offset, self.settings)

    def calculate(self, location: GeoLocation, moment: date | datetime) -> PrayerSchedule:
        day = moment.date() if isinstance(moment, datetime) else moment
        offset = self.dst(moment)
        today = self._event_hours(day, location, offset)

        # Tomorrow is only needed for its Fajr, which closes the half night.
        next_day = day + timedelta(days=1)
        next_offset = self.dst(moment + timedelta(days=1))
        tomorrow = self._event_hours(next_day, location, next_offset)
        tomorrow_fajr = format_time(
            tomorrow.fajr, 0, next_day, fixed_zone(location.utc_offset + next_offset)
        )

        return adjuster.build_schedule(
            day, location, today, offset, tomorrow_fajr, self.settings
        )

    def __repr__(self) -> str:
        return f"AstronomicalCalculator(settings={self.settings!r}, dst={self.dst!r})"


def calculate(
    location: GeoLocation,
    moment: date | datetime,
    settings: CalculationSettings | None = None,
) -> PrayerSchedule:
    """Schedule for one day with the default astronomical strategy."""
    return AstronomicalCalculator(settings).calculate(location, moment)
