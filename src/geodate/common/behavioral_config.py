"""Defines the global, file-backed settings that control how the library behaves.

Settings are read with :mod:`configparser` from the packaged ``default_behavior.config``, or
from a user supplied file, and are exposed as attributes of one shared object:

.. code-block:: python

    BehavioralConfig.getConfig().debugging.CheckTableBounds = True

Options absent from a loaded file keep their default value.
"""

from __future__ import annotations

# Standard Library Imports
from configparser import ConfigParser
from configparser import Error as ConfigError
from importlib import resources
from logging import CRITICAL, DEBUG, ERROR, INFO, NOTSET, WARNING
from pathlib import Path
from typing import TYPE_CHECKING

# Type Checking Imports
if TYPE_CHECKING:
    # Standard Library Imports
    from typing import Any, Final


class SubConfig:
    """One section of the configuration, with its options set as attributes.

    Enforce improved config convention:
        `BehavioralConfig.section.value` rather than something like `BehavioralConfig["section"]["value"]`.
    """

    def __init__(self, section: str):
        """Instantiate an empty `SubConfig`.

        Args:
            section (``str``): name of the section that this SubConfig represents
        """
        if not isinstance(section, str):
            raise TypeError("Config section must be a string")
        self.section = section

    def setonce(self, name: str, value: Any):
        """Set an option while loading, but raise an error if the option was already loaded.

        Args:
            name (``str``): name of the option
            value (``any``): loaded or default value of the option
        """
        if name in vars(self):
            raise AttributeError(
                f"SubConfig {self.section!r} already has a value set for {name!r}:{getattr(self, name)!r}",
            )
        setattr(self, name, value)


class CustomConfigParser(ConfigParser):
    """:class:`.ConfigParser` that also understands logging level names."""

    LOGGING_LEVELS: Final[dict[str, int]] = {
        "CRITICAL": CRITICAL,
        "ERROR": ERROR,
        "WARNING": WARNING,
        "INFO": INFO,
        "DEBUG": DEBUG,
        "NOTSET": NOTSET,
    }

    def getlogginglevel(self, section: str, option: str) -> int:
        """Return the logging level named by an option, or ``NOTSET`` if the name is unknown."""
        return self.LOGGING_LEVELS.get(self.get(section, option).upper(), NOTSET)


class BehavioralConfig:
    """Singleton, config settings class."""

    DEFAULT_CONFIG_FILE: Final[str] = "default_behavior.config"

    DEFAULT_SECTIONS: Final[dict[str, dict[str, tuple[str, Any]]]] = {
        "logging": {
            "OutputLocation": ("get", "stdout"),
            "Level": ("getlogginglevel", DEBUG),
            "MaxFileSize": ("getint", 1048576),
            "MaxFileCount": ("getint", 50),
            "AllowMultipleHandlers": ("getboolean", False),
        },
        "debugging": {
            "CheckTableBounds": ("getboolean", False),
        },
    }
    """``dict``: parser getter & default value of every option, per section."""

    __shared_inst: BehavioralConfig | None = None

    def __init__(self, config_file_path: str | None = None):
        """Load the configuration, and make it the shared instance.

        Args:
            config_file_path (``str``, optional): config file to load. Defaults to the packaged
                file. A path that doesn't exist loads only the default values.
        """
        self._parser = CustomConfigParser()

        if config_file_path is None:
            packaged = resources.files("geodate.common").joinpath(self.DEFAULT_CONFIG_FILE)
            self._parser.read_string(packaged.read_text(encoding="utf-8"))

        elif Path(config_file_path).exists():
            with open(config_file_path, encoding="utf-8") as config_file:
                self._parser.read_file(config_file)

        for section, options in self.DEFAULT_SECTIONS.items():
            sub = SubConfig(section)
            for option, (getter_name, default) in options.items():
                try:
                    value = getattr(self._parser, getter_name)(section, option)
                except ConfigError:
                    value = default
                sub.setonce(option, value)

            setattr(self, section, sub)

        BehavioralConfig.__shared_inst = self

    @classmethod
    def getConfig(cls, config_file_path: str | None = None) -> BehavioralConfig:
        """Return the shared config, loading it first if it doesn't exist yet."""
        if cls.__shared_inst is None:
            cls.__shared_inst = BehavioralConfig(config_file_path=config_file_path or None)

        return cls.__shared_inst
