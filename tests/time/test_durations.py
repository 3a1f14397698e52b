from __future__ import annotations

# Third Party Imports
import pytest

# geodate Imports
from geodate.time.durations import (
    Hours,
    Microseconds,
    Milliseconds,
    Minutes,
    Seconds,
    SecondsDuration,
    mjdDurationDiff,
)
from geodate.time.mjd import ModifiedJulianDay, cal2mjd

DURATION_TYPES: tuple[type[SecondsDuration], ...] = (Seconds, Milliseconds, Microseconds)


@pytest.mark.parametrize(
    ("duration_type", "resolution"),
    [(Seconds, 1), (Milliseconds, 1_000), (Microseconds, 1_000_000)],
)
def testResolution(duration_type: type[SecondsDuration], resolution: int):
    """Test the units per second and per day of each resolution."""
    assert duration_type.RESOLUTION == resolution
    assert duration_type.MAX_IN_DAY == 86400 * resolution
    assert duration_type(duration_type.MAX_IN_DAY).fractionalDays() == 1.0
    assert duration_type(resolution).toFractionalSeconds() == pytest.approx(1.0)


def testTimeOfDayUnits():
    """Test the thin hours & minutes types."""
    assert Hours() == 0
    assert Minutes() == 0
    assert Hours(25) == 25
    assert Minutes(-3).asUnderlyingType() == -3
    assert repr(Hours(1)) == "Hours(1)"
    assert repr(Minutes(2)) == "Minutes(2)"


class TestDayBoundary:
    """Test normalizing durations to a time within the day."""

    @pytest.mark.parametrize("duration_type", DURATION_TYPES)
    def testRemoveDays(self, duration_type: type[SecondsDuration]):
        """Test one day and one unit splits into the day and the unit."""
        duration = duration_type(duration_type.MAX_IN_DAY + 1)
        assert duration.moreThanDay()
        assert duration.toDays() == 1
        assert duration.asUnderlyingType() == duration_type.MAX_IN_DAY + 1

        assert duration.removeDays() == 1
        assert duration.asUnderlyingType() == 1
        assert not duration.moreThanDay()

    @pytest.mark.parametrize("duration_type", DURATION_TYPES)
    def testExactlyOneDay(self, duration_type: type[SecondsDuration]):
        """Test that exactly one day is not more than a day, but still holds one whole day."""
        duration = duration_type(duration_type.MAX_IN_DAY)
        assert not duration.moreThanDay()
        assert duration.toDays() == 1
        assert duration.removeDays() == 1
        assert duration.asUnderlyingType() == 0

    def testManyDays(self):
        """Test removing several days at once."""
        duration = Milliseconds(3 * Milliseconds.MAX_IN_DAY + 1_234)
        assert duration.removeDays() == 3
        assert duration == Milliseconds(1_234)
        assert duration.removeDays() == 0
        assert duration == Milliseconds(1_234)

    def testNegative(self):
        """Test that negative durations keep their sign when removing days."""
        duration = Seconds(-86401)
        assert not duration.moreThanDay()
        assert duration.toDays() == -1
        assert duration.removeDays() == -1
        assert duration == Seconds(-1)

    def testAccumulator(self):
        """Test rolling a running time of day over into a separate day counter."""
        mjd = cal2mjd(2023, 12, 31)
        time_of_day = Microseconds.fromHms(Hours(23), Minutes(0), 0.0)
        step = Microseconds.fromHms(Hours(0), Minutes(30), 0.0)

        for _ in range(4):
            time_of_day += step
            if time_of_day.moreThanDay() or time_of_day.toDays():
                mjd += time_of_day.removeDays()

        assert mjd.toYmd() == (2024, 1, 1)
        assert time_of_day == Microseconds.fromHms(Hours(1), Minutes(0), 0.0)


class TestConstruction:
    """Test building durations from hours, minutes & seconds."""

    def testSameType(self):
        """Test the sub-minute part given in the same type."""
        assert Seconds.fromHms(Hours(1), Minutes(1), Seconds(1)) == Seconds(3661)
        assert Milliseconds.fromHms(Hours(1), Minutes(1), Milliseconds(1)) == Milliseconds(3_660_001)
        assert Microseconds.fromHms(1, 1, Microseconds(1)) == Microseconds(3_660_000_001)

    def testFractionalSeconds(self):
        """Test the sub-minute part given as fractional seconds, truncated to the resolution."""
        assert Seconds.fromHms(Hours(1), Minutes(2), 3.5) == Seconds(3723)
        assert Milliseconds.fromHms(Hours(1), Minutes(2), 3.5) == Milliseconds(3_723_500)
        assert Microseconds.fromHms(Hours(0), Minutes(0), 0.25) == Microseconds(250_000)
        assert Milliseconds.fromHms(Hours(0), Minutes(0), 1.0009) == Milliseconds(1_000)

    def testWrongResolution(self):
        """Test that the sub-minute part can't be a different duration type."""
        with pytest.raises(TypeError):
            Seconds.fromHms(Hours(0), Minutes(0), Milliseconds(1))
        with pytest.raises(TypeError):
            Microseconds.fromHms(Hours(0), Minutes(0), Seconds(1))

    def testDefault(self):
        """Test the default count is zero."""
        for duration_type in DURATION_TYPES:
            assert duration_type().asUnderlyingType() == 0
            assert repr(duration_type(5)) == f"{duration_type.__name__}(5)"


class TestArithmetic:
    """Test arithmetic & comparisons."""

    def testAddSubtract(self):
        """Test addition & subtraction between the same resolution."""
        assert Seconds(5) + Seconds(7) == Seconds(12)
        assert Seconds(5) - Seconds(7) == Seconds(-2)
        assert isinstance(Milliseconds(1) + Milliseconds(1), Milliseconds)

    def testInPlace(self):
        """Test the in-place operators modify the same object."""
        duration = Microseconds(10)
        alias = duration
        duration += Microseconds(5)
        assert duration is alias
        assert alias == Microseconds(15)

        duration -= Microseconds(20)
        assert duration is alias
        assert alias == Microseconds(-5)

    def testDivision(self):
        """Test integer division, truncating toward zero."""
        assert Seconds(7) // Seconds(2) == Seconds(3)
        assert Seconds(-7) // Seconds(2) == Seconds(-3)
        assert Microseconds(Microseconds.MAX_IN_DAY) // Microseconds(1_000_000) == Microseconds(86400)

    def testComparisons(self):
        """Test the total order."""
        assert Milliseconds(1) < Milliseconds(2)
        assert Milliseconds(2) <= Milliseconds(2)
        assert Milliseconds(3) > Milliseconds(2)
        assert Milliseconds(3) >= Milliseconds(3)
        assert Milliseconds(3) != Milliseconds(4)
        assert sorted([Seconds(3), Seconds(-1), Seconds(2)]) == [Seconds(-1), Seconds(2), Seconds(3)]

    def testMixedResolutions(self):
        """Test that operations between resolutions need an explicit conversion."""
        with pytest.raises(TypeError):
            _ = Microseconds(5) + Milliseconds(5)
        with pytest.raises(TypeError):
            _ = Seconds(5) < Milliseconds(5)
        with pytest.raises(TypeError):
            _ = Seconds(5) == Milliseconds(5_000)

        duration = Seconds(1)
        with pytest.raises(TypeError):
            duration += Milliseconds(1)

        assert Microseconds(5_000).toMilliseconds() + Milliseconds(5) == Milliseconds(10)

    def testNotADuration(self):
        """Test plain numbers are not durations."""
        assert Seconds(1) != 1
        with pytest.raises(TypeError):
            _ = Seconds(1) + 1

    def testUnhashable(self):
        """Test that mutable durations can't be hashed."""
        with pytest.raises(TypeError):
            hash(Seconds(1))


class TestDecomposition:
    """Test splitting durations into their components."""

    def testMicroseconds(self):
        """Test one hour, one minute & one second."""
        hours, minutes, seconds, remainder = Microseconds(3_661_000_000).toHmsf()
        assert (hours, minutes, remainder) == (1, 1, 0)
        assert seconds == Seconds(1)
        assert isinstance(hours, Hours)
        assert isinstance(minutes, Minutes)
        assert isinstance(seconds, Seconds)

    def testMilliseconds(self):
        """Test the millisecond remainder."""
        hours, minutes, seconds, remainder = Milliseconds(3_723_456).toHmsf()
        assert (hours, minutes, remainder) == (1, 2, 456)
        assert seconds == Seconds(3)

    def testSeconds(self):
        """Test the whole seconds have no remainder."""
        hours, minutes, seconds, remainder = Seconds(86399).toHmsf()
        assert (hours, minutes, remainder) == (23, 59, 0)
        assert seconds == Seconds(59)

    def testNegative(self):
        """Test every component carries the sign of a negative duration."""
        hours, minutes, seconds, remainder = Milliseconds(-3_661_001).toHmsf()
        assert (hours, minutes, remainder) == (-1, -1, -1)
        assert seconds == Seconds(-1)

    def testRecompose(self):
        """Test the components add back up to the original count."""
        for count in (0, 1, 59_999_999, 3_600_000_000, 86_399_999_999, 123_456_789_012):
            hours, minutes, seconds, remainder = Microseconds(count).toHmsf()
            assert Microseconds.fromHms(hours, minutes, Microseconds(remainder)) + Microseconds(
                seconds.asUnderlyingType() * Microseconds.RESOLUTION,
            ) == Microseconds(count)

    def testResolveSeconds(self):
        """Test splitting off whole seconds."""
        seconds, fraction = Milliseconds(2_250).resolveSeconds()
        assert seconds == Seconds(2)
        assert fraction == pytest.approx(0.25)

        seconds, fraction = Seconds(7).resolveSeconds()
        assert seconds == Seconds(7)
        assert fraction == 0.0

    def testFractional(self):
        """Test the lossy floating point conversions."""
        assert Seconds(43200).fractionalDays() == 0.5
        assert Milliseconds(1_500).toFractionalSeconds() == pytest.approx(1.5)
        assert Microseconds(2_500_000).toFractionalSeconds() == pytest.approx(2.5)
        assert Microseconds(Microseconds.MAX_IN_DAY // 4).fractionalDays() == 0.25


class TestNarrowing:
    """Test explicit, lossy conversion to coarser resolutions."""

    def testTruncation(self):
        """Test conversions truncate toward zero."""
        assert Microseconds(1_999).toMilliseconds() == Milliseconds(1)
        assert Microseconds(1_999_999).toSeconds() == Seconds(1)
        assert Milliseconds(1_999).toSeconds() == Seconds(1)
        assert Microseconds(-1_500_000).toSeconds() == Seconds(-1)
        assert Milliseconds(-1_500).toSeconds() == Seconds(-1)

    def testTypes(self):
        """Test the converted types."""
        assert isinstance(Microseconds(1).toMilliseconds(), Milliseconds)
        assert isinstance(Microseconds(1).toSeconds(), Seconds)
        assert isinstance(Milliseconds(1).toSeconds(), Seconds)


class TestMjdDifference:
    """Test expressing MJD differences as durations."""

    @pytest.mark.parametrize("duration_type", DURATION_TYPES)
    def testOneDay(self, duration_type: type[SecondsDuration]):
        """Test a one day difference, both ways."""
        later, earlier = ModifiedJulianDay(51545), ModifiedJulianDay(51544)

        diff = mjdDurationDiff(duration_type, later, earlier)
        assert isinstance(diff, duration_type)
        assert diff == duration_type(duration_type.MAX_IN_DAY)
        assert mjdDurationDiff(duration_type, earlier, later) == duration_type(-duration_type.MAX_IN_DAY)

    def testLongSpan(self):
        """Test a long span at the finest resolution is exact."""
        diff = mjdDurationDiff(Microseconds, cal2mjd(2100, 1, 1), cal2mjd(1900, 1, 1))
        assert diff.toDays() == 73049
        assert diff.removeDays() == 73049
        assert diff == Microseconds(0)
