"""Contains all the custom-defined exceptions used in geodate."""

from __future__ import annotations


class DateTimeError(Exception):
    """Base exception for failed date/time construction or conversion."""


class InvalidRangeError(DateTimeError, ValueError):
    """A calendar component lies outside of its valid range.

    Raised when a month is not in [1, 12], or a day of month does not exist for
    the given (possibly leap) month and year.
    """


class InvalidArgumentError(DateTimeError, ValueError):
    """A textual argument could not be resolved, e.g. an unknown month name."""

    def __init__(self, message: str, text: str):
        """Store the rejected text alongside the message.

        Args:
            message (``str``): human readable description of the failure
            text (``str``): the offending input, kept for diagnostics
        """
        super().__init__(message)
        self.text = text
