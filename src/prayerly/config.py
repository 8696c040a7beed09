"""Calculation settings from environment variables.

Entry points call `load_dotenv()` first, so a `.env` file in the working
directory works the same as exported variables:

    PRAYERLY_METHOD=MWL            # ISNA, MWL, Egyptian, Makkah
    PRAYERLY_FAJR_ANGLE=18         # overrides the method's angle (degrees)
    PRAYERLY_ISHA_ANGLE=17         # 0 means Maghrib + PRAYERLY_ISHA_INTERVAL
    PRAYERLY_ISHA_INTERVAL=90      # minutes
    PRAYERLY_DHUHR_INTERVAL=0      # minutes
    PRAYERLY_MAGHRIB_INTERVAL=0    # minutes
    PRAYERLY_ASR_RATIO=1           # 1 standard, 2 Hanafi
    PRAYERLY_HEIGHT_EAST=0         # eastern horizon height difference (meters)
    PRAYERLY_HEIGHT_WEST=0         # western horizon height difference (meters)
"""

import math
import os
from collections.abc import Mapping
from dataclasses import replace

from prayerly.constants import HANAFI_SHADOW_RATIO, SHAFII_SHADOW_RATIO
from prayerly.models import CalculationSettings, Intervals, TwilightAngles

_PREFIX = "PRAYERLY_"


class ConfigError(Exception):
    """Invalid calculation setting."""


METHODS: dict[str, dict] = {
    "ISNA": {
        "name": "Islamic Society of North America",
        "angles": TwilightAngles(15.0, 15.0),
        "intervals": Intervals(),
    },
    "MWL": {
        "name": "Muslim World League",
        "angles": TwilightAngles(18.0, 17.0),
        "intervals": Intervals(),
    },
    "Egyptian": {
        "name": "Egyptian General Authority",
        "angles": TwilightAngles(19.5, 17.5),
        "intervals": Intervals(),
    },
    "Makkah": {
        "name": "Umm al-Qura",
        "angles": TwilightAngles(18.5, 0.0),
        "intervals": Intervals(isha=90),
    },
}

DEFAULT_METHOD = "ISNA"


def method_settings(method_key: str) -> CalculationSettings:
    method = METHODS.get(method_key)
    if not method:
        raise ConfigError(f"Unknown method: {method_key}")
    return CalculationSettings(angles=method["angles"], intervals=method["intervals"])


def _number(env: Mapping[str, str], name: str, cast=float):
    raw = env.get(_PREFIX + name)
    if raw is None or raw.strip() == "":
        return None
    try:
        value = cast(raw)
    except ValueError as e:
        raise ConfigError(f"{_PREFIX}{name} must be a number, got {raw!r}") from e
    if not math.isfinite(value):
        raise ConfigError(f"{_PREFIX}{name} must be finite, got {raw!r}")
    return value


def load_settings(env: Mapping[str, str] | None = None) -> CalculationSettings:
    """Build CalculationSettings from `env` (defaults to os.environ).

    Raises:
        ConfigError: On an unknown method, a malformed or non-finite number,
            or a negative horizon height.
    """
    if env is None:
        env = os.environ
    settings = method_settings(env.get(_PREFIX + "METHOD") or DEFAULT_METHOD)

    angles = settings.angles
    fajr = _number(env, "FAJR_ANGLE")
    isha = _number(env, "ISHA_ANGLE")
    if fajr is not None or isha is not None:
        angles = TwilightAngles(
            angles.fajr_deg if fajr is None else fajr,
            angles.isha_deg if isha is None else isha,
        )

    intervals = settings.intervals
    for field_name in ("dhuhr", "maghrib", "isha"):
        value = _number(env, f"{field_name.upper()}_INTERVAL", int)
        if value is not None:
            intervals = replace(intervals, **{field_name: value})

    asr_ratio = _number(env, "ASR_RATIO", int)
    if asr_ratio is None:
        asr_ratio = SHAFII_SHADOW_RATIO
    if asr_ratio not in (SHAFII_SHADOW_RATIO, HANAFI_SHADOW_RATIO):
        raise ConfigError(f"{_PREFIX}ASR_RATIO must be 1 or 2, got {asr_ratio}")

    heights = {}
    for side in ("east", "west"):
        value = _number(env, f"HEIGHT_{side.upper()}") or 0.0
        if value < 0:
            raise ConfigError(f"{_PREFIX}HEIGHT_{side.upper()} must be at least 0, got {value}")
        heights[f"height_{side}"] = value

    return CalculationSettings(
        angles=angles, intervals=intervals, asr_ratio=asr_ratio, **heights
    )
