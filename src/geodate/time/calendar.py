"""Defines the calendar value types :class:`.Year`, :class:`.Month`, :class:`.DayOfMonth` & :class:`.DayOfYear`.

Each type is a thin subclass of ``int``: it can be used wherever an ``int`` is expected, but
calling ``type`` on a value reveals which calendar component it was constructed as. No range
checks are performed on construction; validation is opt-in through the ``isValid`` methods, so
that building a value never carries a hidden cost.

.. code-block:: python

    month = Month("feb")
    day = DayOfMonth(29)

    day.isValid(Year(2020), month)  # True
    day.isValid(Year(2021), month)  # False

The date tuples :class:`.YmdDate` & :class:`.YdoyDate` convert into each other through a
cumulative days-per-month table.
"""

from __future__ import annotations

# Standard Library Imports
from typing import TYPE_CHECKING, NamedTuple

# Local Imports
from ..common.behavioral_config import BehavioralConfig
from ..common.exceptions import InvalidArgumentError, InvalidRangeError
from ..common.logger import geodateLogError

# Type Checking Imports
if TYPE_CHECKING:
    # Local Imports
    from .mjd import ModifiedJulianDay


MONTH_LENGTHS: tuple[int, ...] = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)
"""``tuple``: number of days in each month of a non-leap year."""

MONTH_DAY: tuple[tuple[int, ...], tuple[int, ...]] = (
    (0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334, 365),
    (0, 31, 60, 91, 121, 152, 182, 213, 244, 274, 305, 335, 366),
)
"""``tuple``: days elapsed at the end of each month, for non-leap (row 0) and leap (row 1) years."""

SHORT_NAMES: tuple[str, ...] = (
    "Jan",
    "Feb",
    "Mar",
    "Apr",
    "May",
    "Jun",
    "Jul",
    "Aug",
    "Sep",
    "Oct",
    "Nov",
    "Dec",
)
"""``tuple``: three character month names."""

LONG_NAMES: tuple[str, ...] = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)
"""``tuple``: full month names."""

_DOY_TO_MONTH: float = 0.032
"""``float``: empirical multiplier; ``int(doy * 0.032)`` is the 0-based month index or the one before it."""


def isLeap(year: int) -> bool:
    """Check if a year is a leap year, according to the Gregorian rule.

    Args:
        year (``int``): the year to check

    Returns:
        ``bool``: whether `year` is a leap year
    """
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


class Year(int):
    """A calendar year.

    There are no limits to the range of the year; negative (proleptic) years are allowed.
    """

    def __new__(cls, value: int = 0):
        """Create a new year, defaulting to zero."""
        return super().__new__(cls, value)

    def asUnderlyingType(self) -> int:
        """Return the year as a plain ``int``."""
        return int(self)

    def isLeap(self) -> bool:
        """Check if this is a leap year."""
        return isLeap(int(self))

    def __repr__(self):
        """Return a string representation of this :class:`.Year`."""
        return f"Year({int(self)})"


class Month(int):
    """A month of the year, in the range [1, 12].

    The range is not checked on construction, so ``Month(200)`` works fine; use
    :meth:`.isValid` to check it. A month can also be constructed from its name.
    """

    def __new__(cls, value: int | str = 1):
        """Create a new month from either an integer or a month name.

        A three character name is matched against the short names (e.g. "Jan"), while a longer
        one is matched against the long names (e.g. "January"). Matching is case-insensitive.

        Args:
            value (``int | str``): month number, or month name

        Raises:
            :class:`.InvalidArgumentError`: if `value` is a string that matches no month name, or
                is shorter than three characters.
        """
        if isinstance(value, str):
            value = _monthFromName(value)
        return super().__new__(cls, value)

    def asUnderlyingType(self) -> int:
        """Return the month as a plain ``int``."""
        return int(self)

    def isValid(self) -> bool:
        """Check if the month is within the interval [1, 12]."""
        return 0 < self <= 12

    def shortName(self) -> str:
        """Return the three character name of this month, e.g. "Jan".

        Raises:
            :class:`.InvalidRangeError`: if the month is not within [1, 12]
        """
        return SHORT_NAMES[self._nameIndex()]

    def longName(self) -> str:
        """Return the full name of this month, e.g. "January".

        Raises:
            :class:`.InvalidRangeError`: if the month is not within [1, 12]
        """
        return LONG_NAMES[self._nameIndex()]

    def _nameIndex(self) -> int:
        """Return the index of this month in the name tables, only for valid months."""
        if not self.isValid():
            msg = f"No name for invalid month {int(self)}"
            geodateLogError(msg)
            raise InvalidRangeError(msg)
        return self - 1

    def __repr__(self):
        """Return a string representation of this :class:`.Month`."""
        return f"Month({int(self)})"


def _monthFromName(name: str) -> int:
    """Resolve a month name to its number in [1, 12]."""
    if len(name) == 3:
        names = SHORT_NAMES
    elif len(name) > 3:
        names = LONG_NAMES
    else:
        names = ()

    lowered = name.lower()
    for number, candidate in enumerate(names, start=1):
        if candidate.lower() == lowered:
            return number

    msg = f'Failed to set month from string "{name}"'
    geodateLogError(msg)
    raise InvalidArgumentError(msg, name)


class DayOfMonth(int):
    """A day of the month.

    No limits are set on construction, so negative numbers work too. Use :meth:`.isValid` to
    check a day against its month and year.
    """

    def __new__(cls, value: int = 0):
        """Create a new day of month, defaulting to zero."""
        return super().__new__(cls, value)

    def asUnderlyingType(self) -> int:
        """Return the day of month as a plain ``int``."""
        return int(self)

    def isValid(self, year: int, month: int) -> bool:
        """Check whether this day exists in the given month & year.

        Args:
            year (``int``): calendar year, needed to resolve February in leap years
            month (``int``): month of the year

        Returns:
            ``bool``: ``False`` if `month` is invalid or the day doesn't exist in it
        """
        if self <= 0 or self >= 32:
            return False
        if not Month(month).isValid():
            return False

        # If February in a leap year, 1, otherwise 0
        leap_day = int(month == 2 and isLeap(year))
        return self <= MONTH_LENGTHS[month - 1] + leap_day

    def __repr__(self):
        """Return a string representation of this :class:`.DayOfMonth`."""
        return f"DayOfMonth({int(self)})"


class DayOfYear(int):
    """A 1-based day of the year.

    Any integer will do, negative ones included; no check is performed on construction.
    """

    def __new__(cls, value: int = 0):
        """Create a new day of year, defaulting to zero."""
        return super().__new__(cls, value)

    def asUnderlyingType(self) -> int:
        """Return the day of year as a plain ``int``."""
        return int(self)

    def isValid(self, year: int) -> bool:
        """Check whether this day lies within [1, 365] (or [1, 366] in a leap `year`)."""
        return 0 < self <= 365 + int(isLeap(year))

    def __repr__(self):
        """Return a string representation of this :class:`.DayOfYear`."""
        return f"DayOfYear({int(self)})"


def _checkTableIndex(index: int, upper: int, what: str) -> None:
    """Raise if `index` falls outside [0, upper] and table bounds checking is turned on."""
    if not BehavioralConfig.getConfig().debugging.CheckTableBounds:
        return
    if not 0 <= index <= upper:
        msg = f"Cumulative day table lookup out of range for {what}"
        geodateLogError(msg)
        raise InvalidRangeError(msg)


class YmdDate(NamedTuple):
    """A calendar date: year, month & day of month."""

    year: Year
    month: Month
    day_of_month: DayOfMonth

    def toYdoy(self) -> YdoyDate:
        """Convert to year & day of year, using the cumulative days-per-month table.

        No validation is performed. A month outside of [1, 12] carries whole years of this
        year's length, so month 0 is December of the year before and month 14 is February of
        the year after, counted from this year's January 1st.
        """
        leap = int(isLeap(self.year))
        _checkTableIndex(int(self.month) - 1, 11, f"month {int(self.month)}")
        years, month_index = divmod(int(self.month) - 1, 12)

        return YdoyDate(
            Year(self.year),
            DayOfYear(years * MONTH_DAY[leap][12] + MONTH_DAY[leap][month_index] + self.day_of_month),
        )

    def toMjd(self) -> ModifiedJulianDay:
        """Convert to a :class:`.ModifiedJulianDay`, see :func:`.cal2mjd`."""
        # Local Imports
        from .mjd import cal2mjd

        return cal2mjd(self.year, self.month, self.day_of_month)


class YdoyDate(NamedTuple):
    """A date expressed as year & day of year."""

    year: Year
    day_of_year: DayOfYear

    def toYmd(self) -> YmdDate:
        """Convert to a calendar date.

        The month is first estimated as ``int(doy * 0.032)``, which is either the correct
        0-based month or the one before it, then corrected against the cumulative table.
        No validation is performed on the day of year: days past the end of the year fall in
        month 13, and days before its start in month 1, e.g. a day of year of -40 gives
        ``(1, -40)``.
        """
        doy = int(self.day_of_year)
        leap = int(isLeap(self.year))
        guess = int(doy * _DOY_TO_MONTH)
        _checkTableIndex(guess, 11, f"day of year {doy}")
        guess = min(max(guess, 0), 11)

        more = int(doy - MONTH_DAY[leap][guess + 1] > 0)
        return YmdDate(
            Year(self.year),
            Month(guess + more + 1),
            DayOfMonth(doy - MONTH_DAY[leap][guess + more]),
        )

    def toMjd(self) -> ModifiedJulianDay:
        """Convert to a :class:`.ModifiedJulianDay`, see :func:`.ydoy2mjd`."""
        # Local Imports
        from .mjd import ydoy2mjd

        return ydoy2mjd(self.year, self.day_of_year)
