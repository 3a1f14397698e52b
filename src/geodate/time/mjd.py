"""Defines :class:`.ModifiedJulianDay` and the calendar date to MJD conversions.

A Modified Julian Day is an integral day count since 1858-11-17; it represents a date, never a
date-time. Subclassing ``int`` keeps it usable as an integer, while arithmetic between MJDs keeps
the type:

.. code-block:: python

    mjd = cal2mjd(2000, 1, 1)  # ModifiedJulianDay(51544)
    mjd -= 1                   # ModifiedJulianDay(51543)
    mjd.toYmd()                # YmdDate(year=Year(1999), month=Month(12), day_of_month=DayOfMonth(31))

All divisions in this module truncate toward zero and are evaluated in the exact order of the
reference formulas, since integer truncation is order-sensitive.
"""

from __future__ import annotations

# Local Imports
from .. import constants as const
from ..common.behavioral_config import BehavioralConfig
from ..common.exceptions import InvalidRangeError
from ..common.logger import geodateLogError, geodateLogWarning
from ..maths import truncDiv, truncMod
from .calendar import (
    MONTH_LENGTHS,
    DayOfMonth,
    DayOfYear,
    Month,
    YdoyDate,
    Year,
    YmdDate,
    isLeap,
)

_BLOCK_MODEL_START: int = const.JAN11901
"""``int``: first MJD handled exactly by the 4-year block algorithm of :meth:`.ModifiedJulianDay.toYdoy`."""
_BLOCK_MODEL_END: int = 88434
"""``int``: MJD of 2101-01-01, the first date the 4-year block algorithm gets wrong."""


def cal2mjd(year: int, month: int, day: int) -> ModifiedJulianDay:
    """Convert a Gregorian calendar date to a :class:`.ModifiedJulianDay`.

    The algorithm is valid for proleptic Gregorian dates from year -4800, March 1.

    References:
        #. Fliegel, H. F. & van Flandern, T. C., "A Machine Algorithm for Processing Calendar
           Dates", Communications of the ACM, 11, 657, 1968.
        #. SOFA routine ``iauCal2jd``

    Args:
        year (``int``): calendar year
        month (``int``): month of the year, (1-12)
        day (``int``): day of the month

    Returns:
        :class:`.ModifiedJulianDay`: the date's Modified Julian Day

    Raises:
        :class:`.InvalidRangeError`: if the month, or the day of month, is invalid
    """
    year, month, day = int(year), int(month), int(day)

    if month < 1 or month > 12:
        msg = f"cal2mjd: Invalid month {month}."
        geodateLogError(msg)
        raise InvalidRangeError(msg)

    # If February in a leap year, 1, otherwise 0
    leap_day = int(month == 2 and isLeap(year))

    if day < 1 or day > MONTH_LENGTHS[month - 1] + leap_day:
        msg = f"cal2mjd: Invalid day of month {day} for {year:d}-{month:02d}."
        geodateLogError(msg)
        raise InvalidRangeError(msg)

    my = truncDiv(month - 14, 12)
    iypmy = year + my

    return ModifiedJulianDay(
        truncDiv(1461 * (iypmy + 4800), 4)
        + truncDiv(367 * (month - 2 - 12 * my), 12)
        - truncDiv(3 * truncDiv(iypmy + 4900, 100), 4)
        + day
        - 2432076,
    )


def ydoy2mjd(year: int, day_of_year: int) -> ModifiedJulianDay:
    """Convert a year & day of year to a :class:`.ModifiedJulianDay`.

    No check is performed on the inputs; an out-of-range day of year silently yields a date
    outside of `year`.

    References:
        Remondi, B., "Date/Time Algorithms", NGS GPS Toolbox

    Args:
        year (``int``): calendar year
        day_of_year (``int``): 1-based day of the year

    Returns:
        :class:`.ModifiedJulianDay`: the date's Modified Julian Day
    """
    years = int(year) - 1901
    return ModifiedJulianDay(
        truncDiv(years, 4) * 1461
        + truncMod(years, 4) * 365
        + int(day_of_year)
        - 1
        + const.JAN11901,
    )


class ModifiedJulianDay(int):
    """An integral Modified Julian Day.

    There is no fractional part; time of day lives in the duration types of
    :mod:`geodate.time.durations`. Addition & subtraction with other MJDs (or plain integers)
    return a :class:`.ModifiedJulianDay`, so the difference of two MJDs is always an integral
    number of days.
    """

    def __new__(cls, value: int = 0):
        """Create a new MJD, defaulting to zero."""
        return super().__new__(cls, value)

    @classmethod
    def fromYdoy(cls, year: int, day_of_year: int) -> ModifiedJulianDay:
        """Construct from a year & day of year, see :func:`.ydoy2mjd`."""
        return cls(ydoy2mjd(year, day_of_year))

    def asUnderlyingType(self) -> int:
        """Return the MJD as a plain ``int``."""
        return int(self)

    def __add__(self, other):
        """Add a number of days, or another MJD."""
        if not isinstance(other, int):
            return NotImplemented
        return ModifiedJulianDay(int(self) + int(other))

    __radd__ = __add__

    def __sub__(self, other):
        """Subtract a number of days, or another MJD."""
        if not isinstance(other, int):
            return NotImplemented
        return ModifiedJulianDay(int(self) - int(other))

    def __rsub__(self, other):
        """Subtract this MJD from a number of days."""
        if not isinstance(other, int):
            return NotImplemented
        return ModifiedJulianDay(int(other) - int(self))

    def __hash__(self):
        """Override hash to return just the integer representation of the class."""
        return hash(int(self))

    def toYdoy(self) -> YdoyDate:
        """Convert to year & day of year.

        Uses 4-year blocks of 1461 days counted from 1901-01-01, which is exact from 1901-01-01
        through 2100-12-31. No validation is performed.

        References:
            Remondi, B., "Date/Time Algorithms", NGS GPS Toolbox

        Returns:
            :class:`.YdoyDate`: the year and day of year
        """
        if BehavioralConfig.getConfig().debugging.CheckTableBounds and not (
            _BLOCK_MODEL_START <= self < _BLOCK_MODEL_END
        ):
            geodateLogWarning(f"MJD {int(self)} is outside of the 1901-2100 day of year window")

        days_fr_jan1_1901 = int(self) - const.JAN11901
        num_four_yrs = truncDiv(days_fr_jan1_1901, 1461)
        years_so_far = 1901 + 4 * num_four_yrs
        days_left = days_fr_jan1_1901 - 1461 * num_four_yrs
        delta_yrs = truncDiv(days_left, 365) - truncDiv(days_left, 1460)

        return YdoyDate(
            Year(years_so_far + delta_yrs),
            DayOfYear(days_left - 365 * delta_yrs + 1),
        )

    def toYmd(self) -> YmdDate:
        """Convert to a Gregorian calendar date.

        No validation is performed; any MJD produces a result through the same formula.

        References:
            Remondi, B., "Date/Time Algorithms", NGS GPS Toolbox

        Returns:
            :class:`.YmdDate`: the year, month & day of month
        """
        # Shift to a Julian Day Number, offset so the 400-year cycles start on a March 1st
        ell = int(self) + (68569 + 2400000 + 1)
        n = truncDiv(4 * ell, 146097)
        ell -= truncDiv(146097 * n + 3, 4)
        i = truncDiv(4000 * (ell + 1), 1461001)
        ell -= truncDiv(1461 * i, 4) - 31
        k = truncDiv(80 * ell, 2447)
        day = ell - truncDiv(2447 * k, 80)
        ell = truncDiv(k, 11)

        return YmdDate(
            Year(100 * (n - 49) + i + ell),
            Month(k + 2 - 12 * ell),
            DayOfMonth(day),
        )

    def toJulianDate(self) -> float:
        """Return the Julian Date at 0h of this day."""
        return int(self) + const.MJD0_JD

    def __repr__(self):
        """Return a string representation of this :class:`.ModifiedJulianDay`."""
        return f"ModifiedJulianDay({int(self)})"
