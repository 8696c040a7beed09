"""Tests for horizon-height correction."""
import math

import pytest

from prayerly.constants import SUNRISE_ARC_ANGLE
from prayerly.height import correct, correction_needed, horizon_angle


# ── Horizon angle ────────────────────────────────────────────────────

class TestHorizonAngle:

    def test_flat_horizon(self):
        assert horizon_angle(0.0) == pytest.approx(SUNRISE_ARC_ANGLE)

    def test_grows_with_height(self):
        assert SUNRISE_ARC_ANGLE < horizon_angle(100.0) < horizon_angle(1000.0)

    def test_dip_magnitude(self):
        # About 0.32° for a 100 m difference
        dip = horizon_angle(100.0) - SUNRISE_ARC_ANGLE
        assert math.degrees(dip) == pytest.approx(0.32, abs=0.01)


# ── Gate ─────────────────────────────────────────────────────────────

class TestCorrectionNeeded:

    def test_applies_at_mid_latitude(self):
        assert correction_needed(True, math.radians(30), 100.0, 0.0)

    def test_skipped_without_heights(self):
        assert not correction_needed(True, math.radians(30), 0.0, 0.0)

    def test_skipped_on_failed_day(self):
        assert not correction_needed(False, math.radians(30), 100.0, 100.0)

    def test_skipped_at_45_and_above(self):
        assert not correction_needed(True, math.radians(45), 100.0, 100.0)
        assert not correction_needed(True, math.radians(-50), 100.0, 100.0)


# ── Correction ───────────────────────────────────────────────────────

class TestCorrect:

    @staticmethod
    def _terms(decl_deg=10.0, lat_deg=30.0):
        decl, lat = math.radians(decl_deg), math.radians(lat_deg)
        return math.sin(decl) * math.sin(lat), math.cos(decl) * math.cos(lat)

    def test_zero_heights(self):
        corr = correct(*self._terms(), 0.0, 0.0)
        assert corr.east == pytest.approx(0.0)
        assert corr.west == pytest.approx(0.0)

    def test_sides_independent(self):
        corr = correct(*self._terms(), 200.0, 0.0)
        assert corr.west > 0
        assert corr.east == pytest.approx(0.0)

    def test_equal_heights_equal_corrections(self):
        corr = correct(*self._terms(), 150.0, 150.0)
        assert corr.east == pytest.approx(corr.west)

    def test_magnitude_in_minutes(self):
        corr = correct(*self._terms(), 100.0, 0.0)
        assert 0.5 < corr.west * 60 < 3.0
