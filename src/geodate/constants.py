"""Fundamental date & time reference constants.

These are fixed reference values, exposed for downstream code that composes full
instants (date + time of day) out of the types in :mod:`geodate.time`.

References:
    #. IERS Conventions (2010), Chapter 10
    #. SOFA Time Scale and Calendar Tools, "Constants"
"""

from __future__ import annotations

SEC_PER_DAY: float = 86400.0
"""``float``: seconds per day."""

DAYS_IN_JULIAN_YEAR: float = 365.25
"""``float``: days per Julian year."""

DAYS_IN_JULIAN_CENT: float = 36525.0
"""``float``: days per Julian century."""

J2000_JD: float = 2451545.0
"""``float``: reference epoch (J2000.0) as a Julian Date."""

J2000_MJD: float = 51544.5
"""``float``: reference epoch (J2000.0) as a Modified Julian Date."""

MJD0_JD: float = 2400000.5
"""``float``: Julian Date of Modified Julian Date zero."""

TT_MINUS_TAI: float = 32.184
"""``float``: TT minus TAI, (sec)."""

JAN11901: int = 15385
"""``int``: Modified Julian Day of 1901-01-01, anchor of the 4-year block day-of-year algorithm."""

JAN61980: int = 44244
"""``int``: Modified Julian Day of 1980-01-06, origin of GPS time."""
