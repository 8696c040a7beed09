"""Calendar date to Julian day conversion."""

from datetime import date


def julian_date(day: date) -> float:
    """Return the Julian day number at 0h UT of `day`.

    Standard day-count algorithm with the Gregorian century correction always
    applied, so it is only valid for dates after the Gregorian adoption. The
    result always ends in .5.
    """
    year, month = day.year, day.month
    if month <= 2:
        year -= 1
        month += 12
    a = year // 100
    b = 2 - a + a // 4
    return int(365.25 * (year + 4716)) + int(30.6001 * (month + 1)) + day.day + b - 1524.5
