"""Address front end — geocoding, timezone lookup, and the schedule computation."""

import logging
from datetime import datetime

import httpx
from timezonefinder import TimezoneFinder

from prayerly.calculator import AstronomicalCalculator
from prayerly.dst import ZoneDst
from prayerly.models import (
    CalculationSettings,
    DaySchedule,
    GeoLocation,
    ObserverContext,
    QueryInput,
)

logger = logging.getLogger(__name__)

_tf = TimezoneFinder()


class GeocodingError(Exception):
    """Geocoder call failure."""


def _geocode_nominatim(address: str) -> tuple[float, float, str] | None:
    """Nominatim (OpenStreetMap) geocoder. Returns (lat, lng, display_name) or None."""
    params = {"q": address, "format": "json", "limit": 1}
    headers = {"User-Agent": "Prayerly/1.0"}
    resp = httpx.get(
        "https://nominatim.openstreetmap.org/search",
        params=params,
        headers=headers,
        timeout=10,
    )
    resp.raise_for_status()
    results = resp.json()
    if not results:
        return None
    r = results[0]
    return float(r["lat"]), float(r["lon"]), r["display_name"]


def geocode_address(address: str, when: str) -> ObserverContext:
    """Resolve an address string and date string to an ObserverContext.

    Args:
        address: Address string in any language.
        when: Local date string in "YYYY-MM-DD" format.

    Returns:
        ObserverContext containing lat/lng, IANA zone, day and normalized address.

    Raises:
        GeocodingError: On API error or when address or timezone cannot be found.
    """
    try:
        result = _geocode_nominatim(address)
    except httpx.HTTPError as e:
        raise GeocodingError(f"Geocoder request failed: {e}") from e
    if result is None:
        raise GeocodingError(f"Address not found: {address}")
    lat, lng, address_display = result

    day = datetime.strptime(when, "%Y-%m-%d").date()
    tz_str = _tf.timezone_at(lat=lat, lng=lng)
    if tz_str is None:
        raise GeocodingError(f"Timezone not found: lat={lat}, lng={lng}")
    logger.debug("Geocoded %r to (%.4f, %.4f) in %s", address, lat, lng, tz_str)

    return ObserverContext(
        lat=lat, lng=lng, tz_name=tz_str, day=day, address_display=address_display
    )


def compute_day_schedule(
    context: ObserverContext,
    settings: CalculationSettings | None = None,
) -> DaySchedule:
    """Compute the prayer schedule for a geocoded context.

    The location carries the zone's standard offset; daylight saving follows
    the zone's own rules rather than the North American default.

    Args:
        context: Geocoding result (lat/lng, zone, day).
        settings: Calculation convention. Defaults to ISNA.

    Returns:
        DaySchedule containing the location and its seven event times.
    """
    zone = ZoneDst(context.tz_name)
    location = GeoLocation.from_degrees(
        context.lat, context.lng, zone.standard_offset(context.day)
    )
    calculator = AstronomicalCalculator(settings, dst=zone)
    schedule = calculator.calculate(location, context.day)
    return DaySchedule(context=context, location=location, schedule=schedule)


def run(query: QueryInput, settings: CalculationSettings | None = None) -> DaySchedule:
    """Top-level entry point: takes a QueryInput and returns a DaySchedule.

    Args:
        query: User input (address, date string).
        settings: Calculation convention.

    Returns:
        Fully computed DaySchedule.
    """
    context = geocode_address(query.address, query.when)
    return compute_day_schedule(context, settings)
