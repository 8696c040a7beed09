"""Tests for daylight saving time adjusters."""
from datetime import date, datetime

import pytest

from prayerly.dst import DST_OFFSET, ZoneDst, dst_offset, dst_window, no_dst, nth_sunday


# ── Sunday lookup ────────────────────────────────────────────────────

class TestNthSunday:

    def test_second_sunday_of_march(self):
        assert nth_sunday(2026, 3, 2) == date(2026, 3, 8)

    def test_first_sunday_when_month_starts_on_sunday(self):
        assert nth_sunday(2026, 11, 1) == date(2026, 11, 1)

    def test_first_sunday_later_in_week(self):
        assert nth_sunday(2025, 11, 1) == date(2025, 11, 2)

    def test_result_is_sunday(self):
        for year in range(2020, 2031):
            assert nth_sunday(year, 3, 2).weekday() == 6


# ── North American rule ──────────────────────────────────────────────

class TestDstOffset:

    def test_window(self):
        start, end = dst_window(2026)
        assert start == datetime(2026, 3, 8, 2, 0)
        assert end == datetime(2026, 11, 1, 2, 0)

    def test_spring_forward_boundary(self):
        assert dst_offset(datetime(2026, 3, 8, 1, 59)) == 0
        assert dst_offset(datetime(2026, 3, 8, 2, 0)) == DST_OFFSET

    def test_fall_back_boundary(self):
        assert dst_offset(datetime(2026, 11, 1, 1, 59)) == DST_OFFSET
        assert dst_offset(datetime(2026, 11, 1, 2, 0)) == 0

    def test_plain_date_is_midnight(self):
        assert dst_offset(date(2026, 3, 8)) == 0
        assert dst_offset(date(2026, 11, 1)) == DST_OFFSET

    def test_summer_and_winter(self):
        assert dst_offset(date(2026, 7, 1)) == 1
        assert dst_offset(date(2026, 1, 15)) == 0
        assert dst_offset(date(2026, 12, 25)) == 0

    def test_aware_datetime_uses_wall_clock(self):
        import pytz

        moment = pytz.timezone("America/Toronto").localize(datetime(2026, 3, 8, 1, 30))
        assert dst_offset(moment) == 0

    def test_no_dst(self):
        assert no_dst(date(2026, 7, 1)) == 0


# ── Zone-backed adjuster ─────────────────────────────────────────────

class TestZoneDst:

    def test_toronto_summer(self):
        zone = ZoneDst("America/Toronto")
        assert zone(date(2026, 7, 1)) == 1
        assert zone.standard_offset(date(2026, 7, 1)) == pytest.approx(-5.0)

    def test_toronto_winter(self):
        zone = ZoneDst("America/Toronto")
        assert zone(date(2026, 1, 15)) == 0
        assert zone.standard_offset(date(2026, 1, 15)) == pytest.approx(-5.0)

    def test_zone_without_dst(self):
        zone = ZoneDst("Asia/Riyadh")
        assert zone(date(2026, 7, 1)) == 0
        assert zone.standard_offset(date(2026, 7, 1)) == pytest.approx(3.0)

    def test_european_rule_differs(self):
        # Europe changes on the last Sunday of March, after North America
        zone = ZoneDst("Europe/London")
        assert zone(date(2026, 3, 20)) == 0
        assert dst_offset(date(2026, 3, 20)) == 1

    def test_southern_hemisphere(self):
        zone = ZoneDst("Australia/Sydney")
        assert zone(date(2026, 1, 15)) == 1
        assert zone(date(2026, 7, 1)) == 0
        assert zone.standard_offset(date(2026, 1, 15)) == pytest.approx(10.0)

    def test_unknown_zone(self):
        import pytz

        with pytest.raises(pytz.UnknownTimeZoneError):
            ZoneDst("Nowhere/Special")

    def test_repr(self):
        assert repr(ZoneDst("America/Toronto")) == "ZoneDst('America/Toronto')"

    def test_half_hour_saving(self):
        zone = ZoneDst("Australia/Lord_Howe")
        assert zone(date(2026, 1, 15)) == pytest.approx(0.5)
        assert zone(date(2026, 7, 15)) == 0
        assert zone.standard_offset(date(2026, 1, 15)) == pytest.approx(10.5)
