"""Contains the configuration, logging & error plumbing shared by the whole package."""

from __future__ import annotations

# Standard Library Imports
from datetime import datetime


def pathSafeTime(dt: datetime | None = None) -> str:
    """Return a time stamp of `dt`, usable in a file name on every platform.

    Args:
        dt: time to stamp. Defaults to the current local time.

    Returns:
        ISO 8601 representation of `dt`, without colons or periods.
    """
    stamp = (dt or datetime.now()).isoformat()
    return stamp.replace(":", "-").replace(".", "")
