from __future__ import annotations

# Standard Library Imports
import logging
import sys

# Third Party Imports
import pytest

# geodate Imports
from geodate.common.behavioral_config import BehavioralConfig


@pytest.fixture(scope="session", name="test_logger")
def getTestLoggerObject() -> logging.Logger:
    """Create a custom :class:`logging.Logger` object."""
    logger = logging.getLogger("Unit Test Logger")
    logger.setLevel(logging.DEBUG)
    handler = logging.StreamHandler(stream=sys.stdout)
    handler.setFormatter(logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s"))
    logger.addHandler(handler)
    return logger


@pytest.fixture(autouse=True)
def _resetConfig() -> None:
    """Restore the default configuration after each test function."""
    yield
    BehavioralConfig()


@pytest.fixture(name="check_table_bounds")
def _checkTableBounds() -> None:
    """Turn on the opt-in table bounds checks for a single test."""
    BehavioralConfig.getConfig().debugging.CheckTableBounds = True


def pytest_addoption(parser: pytest.Parser) -> None:
    """Add command line options."""
    parser.addoption("--runslow", action="store_true", default=False, help="run slow tests")


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest options without an .ini file."""
    config.addinivalue_line("markers", "slow: mark test as slow to run")


def pytest_collection_modifyitems(
    session: pytest.Session,
    config: pytest.Config,
    items: list[pytest.Item],
) -> None:
    """Collect pytest modifiers."""
    if config.getoption("--runslow"):
        # --runslow given in cli: do not skip slow tests
        return
    skip_slow = pytest.mark.skip(reason="need --runslow option to run")
    for item in items:
        if "slow" in item.keywords:
            item.add_marker(skip_slow)
