"""Contains the date & time value types and the conversions between them.

Calendar components (:class:`.Year`, :class:`.Month`, :class:`.DayOfMonth`, :class:`.DayOfYear`)
and the :class:`.ModifiedJulianDay` are separate ``int`` subclasses, so a value always reveals
what it was constructed as. Time of day lives in the integer durations (:class:`.Seconds`,
:class:`.Milliseconds`, :class:`.Microseconds`), which keep a date and a time of day apart: a
full instant is an MJD plus a duration within that day.
"""

from __future__ import annotations

# Local Imports
from .calendar import DayOfMonth, DayOfYear, Month, YdoyDate, Year, YmdDate, isLeap
from .durations import (
    Hours,
    Microseconds,
    Milliseconds,
    Minutes,
    Seconds,
    SecondsDuration,
    mjdDurationDiff,
)
from .mjd import ModifiedJulianDay, cal2mjd, ydoy2mjd

__all__ = [
    "DayOfMonth",
    "DayOfYear",
    "Hours",
    "Microseconds",
    "Milliseconds",
    "Minutes",
    "ModifiedJulianDay",
    "Month",
    "Seconds",
    "SecondsDuration",
    "YdoyDate",
    "Year",
    "YmdDate",
    "cal2mjd",
    "isLeap",
    "mjdDurationDiff",
    "ydoy2mjd",
]
