"""Defines the time of day types :class:`.Hours`, :class:`.Minutes` and the fixed-point durations.

:class:`.Seconds`, :class:`.Milliseconds` & :class:`.Microseconds` each store a signed integer
count of their own unit, so there is never any floating point error when accumulating time.
They share one implementation, parameterized by the class constant ``RESOLUTION`` (units per
second), and only ever operate with values of the same resolution:

.. code-block:: python

    elapsed = Microseconds(86_400_000_001)
    elapsed.moreThanDay()  # True
    elapsed.removeDays()   # 1, elapsed is now Microseconds(1)

    Microseconds(5) + Milliseconds(5)  # throws TypeError
    Microseconds(5_000).toMilliseconds() + Milliseconds(5)  # works

Converting to a coarser resolution is explicit and truncates toward zero.
"""

from __future__ import annotations

# Standard Library Imports
from typing import TYPE_CHECKING, ClassVar, TypeVar

# Local Imports
from ..maths import truncDiv, truncMod

# Type Checking Imports
if TYPE_CHECKING:
    # Local Imports
    from .mjd import ModifiedJulianDay


DurationT = TypeVar("DurationT", bound="SecondsDuration")


class Hours(int):
    """Integral hours, normally the hour of the day; there is no valid range and no fractional part."""

    def __new__(cls, value: int = 0):
        """Create new hours, defaulting to zero."""
        return super().__new__(cls, value)

    def asUnderlyingType(self) -> int:
        """Return the hours as a plain ``int``."""
        return int(self)

    def __repr__(self):
        """Return a string representation of these :class:`.Hours`."""
        return f"Hours({int(self)})"


class Minutes(int):
    """Integral minutes, normally the minute of the hour; there is no valid range and no fractional part."""

    def __new__(cls, value: int = 0):
        """Create new minutes, defaulting to zero."""
        return super().__new__(cls, value)

    def asUnderlyingType(self) -> int:
        """Return the minutes as a plain ``int``."""
        return int(self)

    def __repr__(self):
        """Return a string representation of these :class:`.Minutes`."""
        return f"Minutes({int(self)})"


class SecondsDuration:
    """Base class of the integer durations; a count of ``1 / RESOLUTION`` second units.

    There is no overflow detection, nor automatic normalization: a duration may hold more than a
    day (see :meth:`.removeDays`), or be negative.
    """

    RESOLUTION: ClassVar[int]
    """``int``: number of units per second."""
    MAX_IN_DAY: ClassVar[int]
    """``int``: number of units in one calendar day."""
    SECONDS_FACTOR: ClassVar[float]
    """``float``: seconds per unit."""

    __slots__ = ("_count",)

    def __init__(self, count: int = 0):
        """Create a duration from an integer count of units.

        Args:
            count (``int``): number of units of this resolution
        """
        self._count = int(count)

    @classmethod
    def fromHms(
        cls: type[DurationT],
        hours: int,
        minutes: int,
        seconds: DurationT | float,
    ) -> DurationT:
        """Construct from hours, minutes and either seconds of this type, or fractional seconds.

        Args:
            hours (``int``): hours
            minutes (``int``): minutes
            seconds (``SecondsDuration | float``): a duration of the same type, added as-is, or
                a number of seconds which is scaled & truncated to this resolution

        Returns:
            :class:`.SecondsDuration`: the total duration
        """
        if isinstance(seconds, cls):
            sub_minute = seconds.asUnderlyingType()
        elif isinstance(seconds, (int, float)) and not isinstance(seconds, SecondsDuration):
            sub_minute = int(seconds * cls.RESOLUTION)
        else:
            raise TypeError(
                f"{cls.__name__}: Cannot construct from {type(seconds).__name__} seconds, use conversion methods.",
            )

        return cls(sub_minute + (int(minutes) * 60 + int(hours) * 3600) * cls.RESOLUTION)

    def _checkType(self, other: SecondsDuration) -> None:
        """Raise if `other` is a duration of a different resolution."""
        if type(other) is not type(self):
            raise TypeError(
                f"{type(self).__name__}: Cannot perform operations between "
                f"{type(self).__name__}/{type(other).__name__} objects, use conversion methods.",
            )

    def asUnderlyingType(self) -> int:
        """Return the number of units as a plain ``int``."""
        return self._count

    def __add__(self, other):
        """Add two durations of the same resolution."""
        if not isinstance(other, SecondsDuration):
            return NotImplemented
        self._checkType(other)
        return type(self)(self._count + other._count)

    def __sub__(self, other):
        """Subtract two durations of the same resolution."""
        if not isinstance(other, SecondsDuration):
            return NotImplemented
        self._checkType(other)
        return type(self)(self._count - other._count)

    def __iadd__(self, other):
        """Add a duration of the same resolution in place."""
        if not isinstance(other, SecondsDuration):
            return NotImplemented
        self._checkType(other)
        self._count += other._count
        return self

    def __isub__(self, other):
        """Subtract a duration of the same resolution in place."""
        if not isinstance(other, SecondsDuration):
            return NotImplemented
        self._checkType(other)
        self._count -= other._count
        return self

    def __floordiv__(self, other):
        """Integer division between durations of the same resolution, truncating toward zero."""
        if not isinstance(other, SecondsDuration):
            return NotImplemented
        self._checkType(other)
        return type(self)(truncDiv(self._count, other._count))

    def __eq__(self, other):
        """."""
        if not isinstance(other, SecondsDuration):
            return NotImplemented
        self._checkType(other)
        return self._count == other._count

    def __lt__(self, other):
        """."""
        if not isinstance(other, SecondsDuration):
            return NotImplemented
        self._checkType(other)
        return self._count < other._count

    def __le__(self, other):
        """."""
        if not isinstance(other, SecondsDuration):
            return NotImplemented
        self._checkType(other)
        return self._count <= other._count

    def __gt__(self, other):
        """."""
        if not isinstance(other, SecondsDuration):
            return NotImplemented
        self._checkType(other)
        return self._count > other._count

    def __ge__(self, other):
        """."""
        if not isinstance(other, SecondsDuration):
            return NotImplemented
        self._checkType(other)
        return self._count >= other._count

    __hash__ = None

    def moreThanDay(self) -> bool:
        """Check if the duration sums up to more than one day.

        Exactly one day, ``MAX_IN_DAY``, is not more than a day.
        """
        return self._count > self.MAX_IN_DAY

    def removeDays(self) -> int:
        """Remove the integral days from this duration, and return them.

        Afterwards, the duration only holds the time of the (new) day. Both the days and the
        remaining units keep the sign of the original count.

        Returns:
            ``int``: number of whole days removed
        """
        days = truncDiv(self._count, self.MAX_IN_DAY)
        self._count = truncMod(self._count, self.MAX_IN_DAY)
        return days

    def toDays(self) -> int:
        """Return the number of whole days in this duration, without modifying it."""
        return truncDiv(self._count, self.MAX_IN_DAY)

    def fractionalDays(self) -> float:
        """Interpret the duration as fractional days."""
        return float(self._count) / float(self.MAX_IN_DAY)

    def toFractionalSeconds(self) -> float:
        """Interpret the duration as fractional seconds."""
        return float(self._count) * self.SECONDS_FACTOR

    def resolveSeconds(self) -> tuple[Seconds, float]:
        """Split into integral :class:`.Seconds` and the remaining fraction of a second."""
        return (
            Seconds(truncDiv(self._count, self.RESOLUTION)),
            truncMod(self._count, self.RESOLUTION) * self.SECONDS_FACTOR,
        )

    def toHmsf(self) -> tuple[Hours, Minutes, Seconds, int]:
        """Decompose into hours, minutes, seconds and the remaining units of this resolution.

        Returns:
            ``tuple``: (:class:`.Hours`, :class:`.Minutes`, :class:`.Seconds`, ``int``)
        """
        units_in_hour = 3600 * self.RESOLUTION
        units_in_minute = 60 * self.RESOLUTION

        hours = truncDiv(self._count, units_in_hour)
        minutes = truncDiv(truncMod(self._count, units_in_hour), units_in_minute)
        seconds = truncDiv(
            truncMod(truncMod(self._count, units_in_hour), units_in_minute),
            self.RESOLUTION,
        )
        remainder = self._count - ((hours * 60 + minutes) * 60 + seconds) * self.RESOLUTION

        return Hours(hours), Minutes(minutes), Seconds(seconds), remainder

    def _narrowTo(self, target: type[DurationT]) -> DurationT:
        """Convert to a coarser resolution, truncating toward zero."""
        return target(truncDiv(self._count, self.RESOLUTION // target.RESOLUTION))

    def __repr__(self):
        """Return a string representation of this duration."""
        return f"{type(self).__name__}({self._count})"


class Seconds(SecondsDuration):
    """Integral seconds."""

    RESOLUTION = 1
    MAX_IN_DAY = 86400
    SECONDS_FACTOR = 1.0

    __slots__ = ()


class Milliseconds(SecondsDuration):
    """Integral milliseconds, i.e. 10**-3 seconds."""

    RESOLUTION = 1000
    MAX_IN_DAY = 86400 * 1000
    SECONDS_FACTOR = 1.0e-3

    __slots__ = ()

    def toSeconds(self) -> Seconds:
        """Convert to :class:`.Seconds`, losing the sub-second part."""
        return self._narrowTo(Seconds)


class Microseconds(SecondsDuration):
    """Integral microseconds, i.e. 10**-6 seconds."""

    RESOLUTION = 1000000
    MAX_IN_DAY = 86400 * 1000000
    SECONDS_FACTOR = 1.0e-6

    __slots__ = ()

    def toMilliseconds(self) -> Milliseconds:
        """Convert to :class:`.Milliseconds`, losing the sub-millisecond part."""
        return self._narrowTo(Milliseconds)

    def toSeconds(self) -> Seconds:
        """Convert to :class:`.Seconds`, losing the sub-second part."""
        return self._narrowTo(Seconds)


def mjdDurationDiff(
    duration_type: type[DurationT],
    mjd1: ModifiedJulianDay,
    mjd2: ModifiedJulianDay,
) -> DurationT:
    """Express the difference ``mjd1 - mjd2`` as a duration of the given type.

    The difference between two Modified Julian Days is always an integral number of days, so it
    is exactly representable at any resolution.

    Args:
        duration_type (``type``): one of :class:`.Seconds`, :class:`.Milliseconds` or
            :class:`.Microseconds`
        mjd1 (:class:`.ModifiedJulianDay`): minuend
        mjd2 (:class:`.ModifiedJulianDay`): subtrahend

    Returns:
        :class:`.SecondsDuration`: the difference, in units of `duration_type`
    """
    return duration_type((int(mjd1) - int(mjd2)) * duration_type.MAX_IN_DAY)
