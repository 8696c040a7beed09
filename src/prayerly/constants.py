"""Domain constants for the prayer-time engine.

Angles are stored in radians unless the name says otherwise. Pinned by the
regression tests, so change them only together with the expected values.
"""

import math

# Solar elevation at sunrise/sunset: refraction plus the upper limb of the disc.
SUNRISE_ARC_ANGLE = math.radians(-5.0 / 6.0)

# Axial tilt used for the ecliptic -> equatorial conversion.
AXIAL_TILT = math.radians(23.439281)

# J2000.0 epoch and the length of a Julian century in days.
J2000 = 2451545.0
DAYS_PER_CENTURY = 36525.0

# Converts an hour angle in radians to fractional hours.
HEIGHT_RATIO = 12 / math.pi

# Added to every computed event so the event has certainly begun (59 seconds).
SAFETY_TIME = 0.016389

# Reference latitude used when the true latitude produces a degenerate day.
REFERENCE_LATITUDE = math.radians(45)

# Above this latitude Fajr/Isha fall back to the night-length ratio method.
HIGH_LATITUDE = math.radians(48)

# Height correction is only applied below this latitude.
HEIGHT_CORRECTION_LATITUDE = math.radians(45)

# Linear threshold |cH| > LINEAR_RATIO + MULTIPLIER * twilight for the ratio method.
LINEAR_RATIO = 0.45
MULTIPLIER = 1.3369

# Asr hour angle used when the shadow cosine leaves [-1, 1].
DEFAULT_ASR_H = 3.5

# Maximum cosine of an hour angle; beyond it the sun does not rise or set.
MAX_CH_VALUE = 1.0

# Night lengths at or beyond these bounds (hours) trigger the reference latitude.
MIN_NIGHT_HOURS = 1.0
MAX_NIGHT_HOURS = 23.0

# Day of June/December used as the solstice reference date.
SOLSTICE_DAY = 21

# Equatorial radius of the Earth in meters.
EARTH_RADIUS_M = 6378137.0

# Kepler solve.
KEPLER_TOLERANCE = 1e-9
KEPLER_MAX_ITERATIONS = 50

# Juristic shadow ratios for Asr.
SHAFII_SHADOW_RATIO = 1
HANAFI_SHADOW_RATIO = 2

# Below this, cos(declination) * cos(latitude) is treated as zero.
SINGULAR_EPSILON = 1e-12

HOURS_PER_DAY = 24
MINUTES_PER_HOUR = 60
SECONDS_PER_MINUTE = 60
