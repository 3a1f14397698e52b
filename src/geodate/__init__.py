"""Main Module Documentation.

Fundamental date & time value types for GNSS and geodetic computation: calendar dates,
day-of-year dates, Modified Julian Days and integer time-of-day durations, with exact conversions
between them. See :mod:`geodate.time` for the types themselves and :mod:`geodate.constants` for
reference epochs.
"""

from __future__ import annotations

__version__ = "1.0.0"
