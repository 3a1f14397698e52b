"""Helper functions that convert between different forms of time.

Fraction-of-day helpers interoperate with floating point time math, while the ``*Array``
functions apply the calendar algorithms of :mod:`.mjd` element-wise over ``numpy`` arrays, giving
bit-identical results to their scalar counterparts.
"""

from __future__ import annotations

# Third Party Imports
from numpy import array, asarray, broadcast_arrays, flatnonzero, int64, ndarray, rint

# Local Imports
from .. import constants as const
from ..common.exceptions import InvalidRangeError
from ..common.logger import geodateLogError
from ..maths import truncDivArray
from .calendar import MONTH_LENGTHS


def hms2fd(hours: int, minutes: int, seconds: float) -> float:
    """Convert hours, minutes & seconds into fractional days.

    Args:
        hours (``int``): hours
        minutes (``int``): minutes
        seconds (``float``): seconds

    Returns:
        ``float``: fraction of a day; no normalization is applied
    """
    return (float(seconds) + 60.0 * (int(minutes) + 60.0 * int(hours))) / const.SEC_PER_DAY


def fd2hms(fraction: float, ndp: int = 0) -> tuple[int, int, int, int]:
    """Decompose fractional days into hours, minutes, seconds & fractional seconds.

    The input is rounded to `ndp` decimal places of a second first, so the result can read
    24 hours when `fraction` rounds up to a whole day. A negative `fraction` is decomposed by
    magnitude and every component carries its sign.

    A negative `ndp` rounds to coarser steps instead, leaving the fractional seconds at zero:

    ====== ===== ===== ====== ====== ======
    ndp    -1    -2    -3     -4     -5
    step   10 s  1 m   10 m   1 h    10 h
    ====== ===== ===== ====== ====== ======

    References:
        SOFA routine ``iauD2tf``

    Args:
        fraction (``float``): fraction of a day
        ndp (``int``, optional): number of decimal places of the seconds, or the rounding step
            if negative. Defaults to 0.

    Returns:
        ``tuple``: hours, minutes, seconds & fraction of second, in units of ``10**-ndp`` seconds
    """
    sign = -1 if fraction < 0 else 1
    seconds_in = abs(fraction) * const.SEC_PER_DAY

    if ndp < 0:
        resolution = 1
        step = 1
        for place in range(1, 1 - ndp):
            step *= 6 if place in (2, 4) else 10
        units = int(rint(seconds_in / step)) * step
    else:
        resolution = 10**ndp
        units = int(rint(seconds_in * resolution))

    hours, units = divmod(units, 3600 * resolution)
    minutes, units = divmod(units, 60 * resolution)
    seconds, units = divmod(units, resolution)

    return sign * hours, sign * minutes, sign * seconds, sign * units


def cal2mjdArray(years: ndarray, months: ndarray, days: ndarray) -> ndarray:
    """Vectorized :func:`.cal2mjd`.

    Args:
        years (``ndarray``): calendar years
        months (``ndarray``): months of the year, (1-12)
        days (``ndarray``): days of the month

    Returns:
        ``ndarray``: ``int64`` Modified Julian Days, broadcast to a common shape

    Raises:
        :class:`.InvalidRangeError`: if any month, or day of month, is invalid
    """
    years, months, days = broadcast_arrays(
        asarray(years, dtype=int64),
        asarray(months, dtype=int64),
        asarray(days, dtype=int64),
    )

    bad_months = flatnonzero((months < 1) | (months > 12))
    if bad_months.size:
        msg = f"cal2mjdArray: Invalid month {months.flat[bad_months[0]]} at index {bad_months[0]}."
        geodateLogError(msg)
        raise InvalidRangeError(msg)

    # Month lengths, with February in leap years extended by a day
    leap = (years % 4 == 0) & ((years % 100 != 0) | (years % 400 == 0))
    lengths = array(MONTH_LENGTHS, dtype=int64)[months - 1] + ((months == 2) & leap)

    bad_days = flatnonzero((days < 1) | (days > lengths))
    if bad_days.size:
        msg = f"cal2mjdArray: Invalid day of month {days.flat[bad_days[0]]} at index {bad_days[0]}."
        geodateLogError(msg)
        raise InvalidRangeError(msg)

    my = truncDivArray(months - 14, 12)
    iypmy = years + my

    return (
        truncDivArray(1461 * (iypmy + 4800), 4)
        + truncDivArray(367 * (months - 2 - 12 * my), 12)
        - truncDivArray(3 * truncDivArray(iypmy + 4900, 100), 4)
        + days
        - 2432076
    )


def mjd2ymdArray(mjds: ndarray) -> tuple[ndarray, ndarray, ndarray]:
    """Vectorized :meth:`.ModifiedJulianDay.toYmd`.

    Args:
        mjds (``ndarray``): Modified Julian Days

    Returns:
        ``tuple``: ``int64`` arrays of years, months & days of month
    """
    ell = asarray(mjds, dtype=int64) + (68569 + 2400000 + 1)
    n = truncDivArray(4 * ell, 146097)
    ell = ell - truncDivArray(146097 * n + 3, 4)
    i = truncDivArray(4000 * (ell + 1), 1461001)
    ell = ell - (truncDivArray(1461 * i, 4) - 31)
    k = truncDivArray(80 * ell, 2447)
    days = ell - truncDivArray(2447 * k, 80)
    ell = truncDivArray(k, 11)

    return 100 * (n - 49) + i + ell, k + 2 - 12 * ell, days
