"""Named constructors for each calendar and time unit.

These are convenience shorthands for building typed values from plain integers, e.g.
``cal2mjd(yearOf(2024), monthOf(2), dayOfMonthOf(29))``.
"""

from __future__ import annotations

# Local Imports
from .calendar import DayOfMonth, DayOfYear, Month, Year
from .durations import Hours, Microseconds, Milliseconds, Minutes, Seconds
from .mjd import ModifiedJulianDay


def yearOf(value: int) -> Year:
    """Build a :class:`.Year`."""
    return Year(value)


def monthOf(value: int) -> Month:
    """Build a :class:`.Month`."""
    return Month(value)


def dayOfMonthOf(value: int) -> DayOfMonth:
    """Build a :class:`.DayOfMonth`."""
    return DayOfMonth(value)


def dayOfYearOf(value: int) -> DayOfYear:
    """Build a :class:`.DayOfYear`."""
    return DayOfYear(value)


def mjdOf(value: int) -> ModifiedJulianDay:
    """Build a :class:`.ModifiedJulianDay`."""
    return ModifiedJulianDay(value)


def hoursOf(value: int) -> Hours:
    """Build :class:`.Hours`."""
    return Hours(value)


def minutesOf(value: int) -> Minutes:
    """Build :class:`.Minutes`."""
    return Minutes(value)


def secondsOf(value: int) -> Seconds:
    """Build :class:`.Seconds`."""
    return Seconds(value)


def millisecondsOf(value: int) -> Milliseconds:
    """Build :class:`.Milliseconds`."""
    return Milliseconds(value)


def microsecondsOf(value: int) -> Microseconds:
    """Build :class:`.Microseconds`."""
    return Microseconds(value)
