"""Tests for the solar calculator."""
import math
from datetime import date

import pytest

from prayerly import solar
from prayerly.constants import REFERENCE_LATITUDE
from prayerly.models import GeoLocation

_OTTAWA = GeoLocation.from_degrees(45.356, -75.7579, -5)


# ── Reference latitude ───────────────────────────────────────────────

class TestReferenceLatitude:

    def test_north(self):
        assert solar.reference_latitude(math.radians(70)) == REFERENCE_LATITUDE

    def test_south(self):
        assert solar.reference_latitude(math.radians(-70)) == -REFERENCE_LATITUDE

    def test_equator_counts_as_north(self):
        assert solar.reference_latitude(0.0) == REFERENCE_LATITUDE


# ── Single computation ───────────────────────────────────────────────

class TestSolarPosition:

    def test_equinox_at_equator(self):
        pos, success = solar.solar_position(date(2026, 3, 21), 0.0, 0.0, 0.0)
        assert success
        assert abs(math.degrees(pos.declination)) < 0.5
        assert pos.sunset - pos.sunrise == pytest.approx(12.1, abs=0.1)

    def test_june_declination(self):
        pos, _ = solar.solar_position(date(2026, 6, 21), 0.0, 0.0, 0.0)
        assert math.degrees(pos.declination) == pytest.approx(23.44, abs=0.05)

    def test_symmetric_about_noon(self):
        pos, _ = solar.solar_position(date(2026, 10, 17), 0.0, math.radians(30), 0.0)
        assert pos.noon - pos.sunrise == pytest.approx(pos.sunset - pos.noon)

    def test_midnight_sun_clamps(self):
        pos, success = solar.solar_position(date(2026, 6, 21), 0.0, math.radians(75), 0.0)
        assert not success
        assert pos.sunrise == pos.noon == pos.sunset

    def test_right_ascension_in_range(self):
        pos, _ = solar.solar_position(date(2026, 1, 1), 0.0, 0.0, 0.0)
        assert 0 <= pos.right_ascension < 2 * math.pi


# ── Full computation ─────────────────────────────────────────────────

class TestCompute:

    def test_ottawa_not_problematic(self):
        pos, success = solar.compute(date(2026, 10, 17), _OTTAWA, 1)
        assert success
        assert not pos.problematic
        assert pos.latitude == _OTTAWA.latitude

    def test_ottawa_noon_on_daylight_time(self):
        pos, _ = solar.compute(date(2026, 10, 17), _OTTAWA, 1)
        # Solar noon is about 12:48 EDT in mid-October
        assert 12.7 < pos.noon < 12.9

    def test_dst_shifts_noon_one_hour(self):
        summer, _ = solar.compute(date(2026, 10, 17), _OTTAWA, 1)
        standard, _ = solar.compute(date(2026, 10, 17), _OTTAWA, 0)
        assert summer.noon - standard.noon == pytest.approx(1.0, abs=0.001)

    def test_noon_wrapped_into_day(self):
        far_east = GeoLocation.from_degrees(0.0, 179.0, -12)
        pos, _ = solar.compute(date(2026, 10, 17), far_east, 0)
        assert 0 <= pos.noon < 24

    def test_polar_day_uses_reference_latitude(self):
        north = GeoLocation.from_degrees(70.0, 0.0, 0)
        pos, success = solar.compute(date(2026, 6, 21), north, 0)
        assert not success
        assert pos.problematic
        assert pos.latitude == REFERENCE_LATITUDE
        assert pos.sunset > pos.sunrise

    def test_polar_night_south(self):
        south = GeoLocation.from_degrees(-70.0, 0.0, 0)
        pos, success = solar.compute(date(2026, 6, 21), south, 0)
        assert not success
        assert pos.problematic
        assert pos.latitude == -REFERENCE_LATITUDE

    def test_near_polar_day_is_problematic(self):
        # The sun still sets, but for well under an hour
        north = GeoLocation.from_degrees(65.65, 0.0, 0)
        pos, _ = solar.compute(date(2026, 6, 21), north, 0)
        assert pos.problematic

    def test_height_correction_applied_below_45(self):
        mecca = GeoLocation.from_degrees(21.4225, 39.8262, 3)
        pos, _ = solar.compute(date(2026, 10, 17), mecca, 0, height_east=0.0, height_west=300.0)
        assert pos.height.west > 0
        assert pos.height.east == pytest.approx(0.0)

    def test_height_correction_skipped_above_45(self):
        pos, _ = solar.compute(date(2026, 10, 17), _OTTAWA, 1, 300.0, 300.0)
        assert pos.height.east == pos.height.west == 0.0

    def test_height_correction_does_not_mark_problematic(self):
        mecca = GeoLocation.from_degrees(21.4225, 39.8262, 3)
        pos, _ = solar.compute(date(2026, 10, 17), mecca, 0, height_east=300.0, height_west=300.0)
        assert pos.height.east > 0
        assert not pos.problematic
