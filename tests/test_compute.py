"""Tests for the address front end, with the geocoder stubbed out."""
from datetime import date, timedelta

import httpx
import pytest

from prayerly import compute
from prayerly.models import DaySchedule, EventKind, ObserverContext, QueryInput

_OTTAWA_HIT = (45.4215, -75.6972, "Ottawa, Ontario, Canada")


# ── Geocoding ────────────────────────────────────────────────────────

class TestGeocodeAddress:

    def test_resolves_zone(self, monkeypatch):
        monkeypatch.setattr(compute, "_geocode_nominatim", lambda address: _OTTAWA_HIT)
        context = compute.geocode_address("Ottawa", "2026-10-17")
        assert context.tz_name == "America/Toronto"
        assert context.day == date(2026, 10, 17)
        assert context.address_display == "Ottawa, Ontario, Canada"

    def test_not_found(self, monkeypatch):
        monkeypatch.setattr(compute, "_geocode_nominatim", lambda address: None)
        with pytest.raises(compute.GeocodingError, match="Address not found"):
            compute.geocode_address("Atlantis", "2026-10-17")

    def test_http_failure(self, monkeypatch):
        def boom(address):
            raise httpx.ConnectError("offline")

        monkeypatch.setattr(compute, "_geocode_nominatim", boom)
        with pytest.raises(compute.GeocodingError, match="Geocoder request failed"):
            compute.geocode_address("Ottawa", "2026-10-17")

    def test_bad_date(self, monkeypatch):
        monkeypatch.setattr(compute, "_geocode_nominatim", lambda address: _OTTAWA_HIT)
        with pytest.raises(ValueError):
            compute.geocode_address("Ottawa", "17/10/2026")


# ── Schedule ─────────────────────────────────────────────────────────

class TestComputeDaySchedule:

    def test_zone_rules_applied(self):
        context = ObserverContext(
            lat=45.4215,
            lng=-75.6972,
            tz_name="America/Toronto",
            day=date(2026, 10, 17),
            address_display="Ottawa",
        )
        result = compute.compute_day_schedule(context)
        assert isinstance(result, DaySchedule)
        assert result.location.utc_offset == pytest.approx(-5.0)
        assert result.schedule[EventKind.DHUHR].instant.utcoffset() == timedelta(hours=-4)

    def test_zone_without_dst(self):
        context = ObserverContext(
            lat=21.4225,
            lng=39.8262,
            tz_name="Asia/Riyadh",
            day=date(2026, 6, 21),
            address_display="Mecca",
        )
        result = compute.compute_day_schedule(context)
        assert result.schedule[EventKind.DHUHR].instant.utcoffset() == timedelta(hours=3)
        assert result.schedule[EventKind.DHUHR].hour == 12

    def test_run(self, monkeypatch):
        monkeypatch.setattr(compute, "_geocode_nominatim", lambda address: _OTTAWA_HIT)
        result = compute.run(QueryInput(address="Ottawa", when="2026-10-17"))
        assert result.context.address_display == "Ottawa, Ontario, Canada"
        assert len(result.schedule) == 7
