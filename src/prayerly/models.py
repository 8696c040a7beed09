"""Data model definitions — explicit boundaries between input, compute, and render layers."""

import math
from dataclasses import dataclass, field
from datetime import date, datetime
from enum import IntEnum
from typing import Iterator


class EventKind(IntEnum):
    """Index of each time-critical event inside a PrayerSchedule."""

    FAJR = 0
    DHUHR = 1
    ASR = 2
    MAGHRIB = 3
    ISHA = 4
    SUNRISE = 5  # End of the Fajr window
    HALF_NIGHT = 6  # Recommended end of the Isha window


@dataclass(frozen=True)
class QueryInput:
    """Raw user input. Not yet validated."""

    address: str  # Free-form address string ("Ottawa, Canada")
    when: str  # "YYYY-MM-DD" format string


@dataclass(frozen=True)
class GeoLocation:
    """Observer position. Angles in radians, offset in hours east of UTC."""

    latitude: float
    longitude: float
    utc_offset: float  # Standard time, without daylight saving (-5.0 for Ottawa)

    def __post_init__(self) -> None:
        if not all(map(math.isfinite, (self.latitude, self.longitude, self.utc_offset))):
            raise ValueError("GeoLocation values must be finite")
        if abs(self.latitude) > math.pi / 2:
            raise ValueError(f"Latitude out of range: {math.degrees(self.latitude)}")
        if abs(self.longitude) > math.pi:
            raise ValueError(f"Longitude out of range: {math.degrees(self.longitude)}")

    @classmethod
    def from_degrees(cls, lat: float, lng: float, utc_offset: float) -> "GeoLocation":
        return cls(math.radians(lat), math.radians(lng), utc_offset)

    @property
    def lat_deg(self) -> float:
        return math.degrees(self.latitude)

    @property
    def lng_deg(self) -> float:
        return math.degrees(self.longitude)


@dataclass(frozen=True)
class TwilightAngles:
    """Solar depression angles for Fajr and Isha, given in degrees.

    An Isha angle of zero means Isha follows Maghrib by a fixed interval instead.
    """

    fajr_deg: float
    isha_deg: float

    def __post_init__(self) -> None:
        if not (math.isfinite(self.fajr_deg) and math.isfinite(self.isha_deg)):
            raise ValueError("Twilight angles must be finite")

    @property
    def fajr(self) -> float:
        return math.radians(self.fajr_deg)

    @property
    def isha(self) -> float:
        return math.radians(self.isha_deg)


@dataclass(frozen=True)
class Intervals:
    """Minutes added to Dhuhr and Maghrib, and Isha's distance from Maghrib."""

    dhuhr: int = 0
    maghrib: int = 0
    isha: int = 0


@dataclass(frozen=True)
class CalculationSettings:
    """Convention used for one calculation. Immutable, safe to share."""

    angles: TwilightAngles = field(default_factory=lambda: TwilightAngles(15.0, 15.0))
    intervals: Intervals = field(default_factory=Intervals)
    asr_ratio: int = 1  # Juristic shadow ratio: 1 standard, 2 Hanafi
    height_east: float = 0.0  # Eastern horizon height difference (meters)
    height_west: float = 0.0  # Western horizon height difference (meters)

    def __post_init__(self) -> None:
        for name in ("height_east", "height_west"):
            value = getattr(self, name)
            if not math.isfinite(value) or value < 0:
                raise ValueError(f"{name} must be a finite height of at least 0 m, got {value}")


@dataclass(frozen=True)
class HeightCorrection:
    """Horizon-obstruction corrections to sunrise/sunset, in fractional hours."""

    east: float = 0.0
    west: float = 0.0


@dataclass(frozen=True)
class SolarPosition:
    """One solar-position computation for a date and latitude.

    `latitude` is the latitude the values were computed at: the observer's own,
    or the clamped reference latitude when `problematic` is set.
    """

    declination: float  # Radians
    right_ascension: float  # Radians
    noon: float  # Fractional hours, local clock
    sunrise: float  # Fractional hours, may be negative before wrapping
    sunset: float
    latitude: float  # Radians
    problematic: bool = False
    height: HeightCorrection = field(default_factory=HeightCorrection)

    @property
    def night_length(self) -> float:
        return 24 - (self.sunset - self.sunrise)

    def sin_declination(self, latitude: float | None = None) -> float:
        """sin(declination) * sin(latitude), the numerator term of an hour-angle cosine."""
        lat = self.latitude if latitude is None else latitude
        return math.sin(self.declination) * math.sin(lat)

    def cos_declination(self, latitude: float | None = None) -> float:
        """cos(declination) * cos(latitude), the denominator of an hour-angle cosine."""
        lat = self.latitude if latitude is None else latitude
        return math.cos(self.declination) * math.cos(lat)


@dataclass(frozen=True)
class TimeOfDay:
    """A normalised clock time anchored to an absolute instant."""

    hour: int  # 0-23
    minute: int  # 0-59
    second: int  # 0-59
    instant: datetime  # Local time, tz-aware when the offset is known

    @property
    def display(self) -> str:
        """Short clock string, e.g. '5:12 AM'."""
        return self.instant.strftime("%I:%M %p").lstrip("0")

    @property
    def date_display(self) -> str:
        """Calendar date string, e.g. 'Oct 17, 2026'."""
        return f"{self.instant.strftime('%b')} {self.instant.day}, {self.instant.year}"

    def __str__(self) -> str:
        return self.display


@dataclass(frozen=True)
class PrayerSchedule:
    """The seven event times of one day, indexed by EventKind."""

    day: date
    times: tuple[TimeOfDay, ...]

    def __post_init__(self) -> None:
        if len(self.times) != len(EventKind):
            raise ValueError(
                f"PrayerSchedule needs {len(EventKind)} times, got {len(self.times)}"
            )

    def __getitem__(self, kind: EventKind) -> TimeOfDay:
        return self.times[kind]

    def __iter__(self) -> Iterator[TimeOfDay]:
        return iter(self.times)

    def __len__(self) -> int:
        return len(self.times)

    def items(self) -> Iterator[tuple[EventKind, TimeOfDay]]:
        for kind in EventKind:
            yield kind, self.times[kind]


@dataclass(frozen=True)
class ObserverContext:
    """Result of geocoding + timezone lookup. Input to the schedule computation."""

    lat: float  # Latitude (decimal degrees)
    lng: float  # Longitude (decimal degrees)
    tz_name: str  # IANA zone name ("America/Toronto") or a fixed-offset label ("UTC-5")
    day: date  # Requested calendar day
    address_display: str  # Normalized address returned by geocoder (for display)


@dataclass(frozen=True)
class DaySchedule:
    """The sole input to renderers. Fully computed state."""

    context: ObserverContext
    location: GeoLocation
    schedule: PrayerSchedule
