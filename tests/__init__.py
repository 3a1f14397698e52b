"""Configure importable things that aren't pytest fixtures."""

from __future__ import annotations

# Standard Library Imports
from pathlib import Path

# Common file paths
FIXTURE_DATA_DIR = Path(__file__).parent / "datafiles"
CUSTOM_CONFIG_FILE = FIXTURE_DATA_DIR / "custom_behavior.config"

# Known calendar date & MJD pairs
KNOWN_DATES: tuple[tuple[tuple[int, int, int], int], ...] = (
    ((1858, 11, 17), 0),
    ((1900, 1, 1), 15020),
    ((1901, 1, 1), 15385),
    ((1980, 1, 6), 44244),
    ((2000, 1, 1), 51544),
    ((2000, 2, 29), 51603),
    ((2000, 3, 1), 51604),
    ((2017, 12, 31), 58118),
    ((2020, 2, 29), 58908),
    ((2024, 1, 1), 60310),
)
