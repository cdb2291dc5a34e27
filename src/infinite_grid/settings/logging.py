"""
Logging preferences for infinite-grid.

Besides console and file output, two knobs are specific to the grid:
the level of the engine loggers (which report every rejected pan event)
and how often the transform engine logs its pass counter.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from PySide6.QtCore import QSettings

logger = logging.getLogger(__name__)

LOG_FILE_PATH = "logs/infinite_grid.csv"
VALID_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

# Every 600 passes is about every ten seconds of continuous dragging at 60 fps
DEFAULT_FRAME_LOG_INTERVAL = 600

_KEYS = {
    "console": "logging/console_enabled",
    "console_level": "logging/console_level",
    "colors": "logging/console_use_colors",
    "file": "logging/file_enabled",
    "engine_level": "logging/engine_level",
    "frame_interval": "logging/frame_log_interval",
}


@dataclass(frozen=True)
class LoggingOptions:
    """Snapshot of the logging preferences applied at startup."""
    console_enabled: bool
    console_level: str
    use_colors: bool
    file_enabled: bool
    file_path: str
    engine_level: str
    frame_log_interval: int


def _as_bool(value: Any, default: bool) -> bool:
    # INI storage hands booleans back as strings
    if isinstance(value, str):
        return value.lower() in ("true", "1", "yes")
    return default if value is None else bool(value)


class LoggingSettings:
    """Logging preferences stored under the logging/ group."""

    def __init__(self, settings: "QSettings"):
        self.settings = settings

    def _store(self, name: str, value: Any) -> None:
        self.settings.setValue(_KEYS[name], value)
        self.settings.sync()

    def _level(self, name: str, default: str) -> str:
        return str(self.settings.value(_KEYS[name], default) or default).upper()

    def _set_level(self, name: str, value: str) -> None:
        if value.upper() not in VALID_LEVELS:
            logger.warning(f"Ignoring unknown log level {value!r} for {_KEYS[name]}")
            return
        self._store(name, value.upper())

    @property
    def console_logging(self) -> bool:
        return _as_bool(self.settings.value(_KEYS["console"], True), True)

    @console_logging.setter
    def console_logging(self, value: bool) -> None:
        self._store("console", value)

    @property
    def console_log_level(self) -> str:
        """Threshold of the console handler."""
        return self._level("console_level", "INFO")

    @console_log_level.setter
    def console_log_level(self, value: str) -> None:
        self._set_level("console_level", value)

    @property
    def console_use_colors(self) -> bool:
        return _as_bool(self.settings.value(_KEYS["colors"], True), True)

    @console_use_colors.setter
    def console_use_colors(self, value: bool) -> None:
        self._store("colors", value)

    @property
    def file_logging(self) -> bool:
        return _as_bool(self.settings.value(_KEYS["file"], False), False)

    @file_logging.setter
    def file_logging(self, value: bool) -> None:
        self._store("file", value)

    @property
    def engine_log_level(self) -> str:
        """Level of the infinite_grid.engine loggers.

        Per-pass and per-throw debug messages come from the engine; raising
        this keeps them out of both handlers without touching the GUI loggers.
        """
        return self._level("engine_level", "INFO")

    @engine_log_level.setter
    def engine_log_level(self, value: str) -> None:
        self._set_level("engine_level", value)

    @property
    def frame_log_interval(self) -> int:
        """Passes between two transform engine progress messages (0 disables them)."""
        value = self.settings.value(_KEYS["frame_interval"], DEFAULT_FRAME_LOG_INTERVAL)
        try:
            interval = int(value)
        except (ValueError, TypeError):
            logger.warning(f"Invalid frame log interval {value!r}, using {DEFAULT_FRAME_LOG_INTERVAL}")
            return DEFAULT_FRAME_LOG_INTERVAL
        return max(0, interval)

    @frame_log_interval.setter
    def frame_log_interval(self, value: int) -> None:
        self._store("frame_interval", int(value))

    @property
    def log_file_path(self) -> str:
        """Relative path of the CSV log (fixed)."""
        return LOG_FILE_PATH

    @property
    def log_file_absolute_path(self) -> Path:
        return Path(LOG_FILE_PATH).resolve()

    def options(self) -> LoggingOptions:
        """Read every logging preference at once."""
        return LoggingOptions(
            console_enabled=self.console_logging,
            console_level=self.console_log_level,
            use_colors=self.console_use_colors,
            file_enabled=self.file_logging,
            file_path=self.log_file_path,
            engine_level=self.engine_log_level,
            frame_log_interval=self.frame_log_interval,
        )
