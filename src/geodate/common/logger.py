"""Defines the :class:`.Logger` class, plus one-liners that write to the package's logger.

Library code only ever emits records through :func:`.geodateLogError` &
:func:`.geodateLogWarning`, onto the top-level ``"geodate"`` logger. Applications opt into
seeing them by attaching a handler, for example:

.. code-block:: python

    Logger()  # stdout, or a rotating log file, depending on BehavioralConfig
    cal2mjd(2021, 2, 29)  # the InvalidRangeError is also logged at ERROR level
"""

from __future__ import annotations

# Standard Library Imports
import logging
import sys
from logging.handlers import RotatingFileHandler
from os import makedirs
from os.path import exists, join

# Local Imports
from . import pathSafeTime
from .behavioral_config import BehavioralConfig

PACKAGE_LOGGER: str = "geodate"
"""``str``: name of the top-level logger that all library records are written to."""

LOG_FORMAT: str = "%(asctime)s - %(module)s - %(levelname)s - %(message)s"
"""``str``: format of every record written by a :class:`.Logger` handler."""


class Logger:
    """Attach a stdout or rotating file handler to a named logger, configured from :class:`.BehavioralConfig`.

    Any attribute not defined here (``debug``, ``error``, ``setLevel``, ...) resolves on the
    wrapped :class:`logging.Logger`.
    """

    def __init__(self, name=PACKAGE_LOGGER, level=None, path=None, allow_multiple_handlers=None):
        """Configure the logging information for this Logger instance.

        Args:
            name (``str``, optional): name of the logger. Defaults to the package's logger.
            level (``int``, optional): lowest level of published records. Defaults to the
                ``logging.Level`` config value.
            path (``str``, optional): ``"stdout"``, or the directory that log files are written
                into. Defaults to the ``logging.OutputLocation`` config value.
            allow_multiple_handlers (``bool``, optional): attach a handler even if the logger
                already has one. Defaults to the ``logging.AllowMultipleHandlers`` config value.
        """
        settings = BehavioralConfig.getConfig().logging
        level = level or settings.Level
        path = path or settings.OutputLocation
        allow_multiple_handlers = allow_multiple_handlers or settings.AllowMultipleHandlers

        self.logger = logging.getLogger(name)
        self.filename = None
        if self.logger.handlers and allow_multiple_handlers is not True:
            return

        if path == "stdout":
            self.filename = "stdout"
            handler = logging.StreamHandler(sys.stdout)
        else:
            if not exists(path):
                self.logger.info(f"Creating log directory: {path!r}")
                makedirs(path)

            self.filename = join(path, f"{name}_{pathSafeTime()}.log")
            handler = RotatingFileHandler(
                self.filename,
                maxBytes=settings.MaxFileSize,
                backupCount=settings.MaxFileCount,
            )

        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        self.logger.setLevel(level)
        self.logger.addHandler(handler)

    def __getattr__(self, name):
        """Forward everything else to the wrapped :class:`logging.Logger`."""
        return getattr(self.logger, name)


def _geodateLog(message: str, level: int):
    """Record `message` on the package's logger at `level`, without a :class:`.Logger` instance."""
    logging.getLogger(PACKAGE_LOGGER).log(level, message)


def geodateLogError(message: str):
    """Log an ERROR message, e.g. just before raising on invalid input.

    See Also:
        :func:`._geodateLog`
    """
    _geodateLog(message, logging.ERROR)


def geodateLogWarning(message: str):
    """Log a WARNING message, e.g. for a result of doubtful accuracy.

    See Also:
        :func:`._geodateLog`
    """
    _geodateLog(message, logging.WARNING)
