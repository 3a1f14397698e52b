"""Integer arithmetic helpers for the calendar algorithms.

Python's ``//`` and ``%`` round toward negative infinity, while the published calendar
formulas assume division that truncates toward zero. Since integer truncation is not
associative, every algorithm in :mod:`geodate.time` evaluates its formula step by step through
these helpers, in the same order as the reference formula.

* `numpy docs <https://numpy.org/doc/stable/>`_
"""

from __future__ import annotations

# Third Party Imports
from numpy import abs as np_abs
from numpy import asarray, int64, ndarray, sign


def truncDiv(numerator: int, denominator: int) -> int:
    """Integer division rounding toward zero.

    Args:
        numerator (``int``): dividend
        denominator (``int``): divisor, must be non-zero

    Returns:
        ``int``: quotient, truncated toward zero
    """
    quotient = abs(numerator) // abs(denominator)
    if (numerator < 0) != (denominator < 0):
        return -quotient
    return quotient


def truncMod(numerator: int, denominator: int) -> int:
    """Remainder paired with :func:`.truncDiv`, carrying the sign of the numerator.

    Satisfies ``numerator == truncDiv(numerator, denominator) * denominator + truncMod(numerator, denominator)``.
    """
    return numerator - truncDiv(numerator, denominator) * denominator


def truncDivArray(numerator: ndarray, denominator: ndarray | int) -> ndarray:
    """Element-wise :func:`.truncDiv` over integer arrays.

    Args:
        numerator (``ndarray``): dividends, cast to ``int64``
        denominator (``ndarray | int``): divisor(s), must be non-zero

    Returns:
        ``ndarray``: ``int64`` quotients, truncated toward zero
    """
    numerator = asarray(numerator, dtype=int64)
    denominator = asarray(denominator, dtype=int64)
    return sign(numerator) * sign(denominator) * (np_abs(numerator) // np_abs(denominator))

