"""
Core settings management for infinite-grid.
"""

import logging
from pathlib import Path
from typing import Optional, Union

from PySide6.QtCore import QSettings
from PySide6.QtWidgets import QWidget, QMainWindow

from ..engine.layout import GridConfig
from .types import ConfigError, ValidationResult
from .validation import SettingsValidator
from .grid import GridSettings
from .ui import UISettings
from .logging import LoggingSettings

logger = logging.getLogger(__name__)

ORGANIZATION = "infinite-grid"
APPLICATION = "infinite_grid"


class AppSettings:
    """
    Configuration management using QSettings.

    Provides type-safe access to application settings with automatic
    cross-platform storage and validation.
    """

    def __init__(self, profile: str = "default", storage: Optional[QSettings] = None):
        """Initialize settings with organization, application name, and profile.

        Args:
            profile: Settings profile name (default: "default")
            storage: Preconfigured QSettings to use instead of the platform store
        """
        self.settings = storage if storage is not None else QSettings(ORGANIZATION, APPLICATION)
        self.profile = profile

        if self.settings.status() != QSettings.Status.NoError:
            raise ConfigError(
                f"Cannot read settings from {self.settings.fileName()}: {self.settings.status()}"
            )

        # Use profile as a group to create hierarchy: infinite-grid/infinite_grid/default/...
        self.settings.beginGroup(profile)

        # Initialize subsystems
        self._validator = SettingsValidator(self)
        self._grid = GridSettings(self.settings)
        self._ui = UISettings(self.settings)
        self._logging = LoggingSettings(self.settings)

        logger.debug(
            f"Settings initialized for profile '{profile}', stored at: {self.settings.fileName()}"
        )

    # === SUBSYSTEM ACCESS ===

    @property
    def grid(self) -> GridSettings:
        """Access grid settings subsystem."""
        return self._grid

    @property
    def ui(self) -> UISettings:
        """Access UI settings subsystem."""
        return self._ui

    @property
    def logging(self) -> LoggingSettings:
        """Access logging settings subsystem."""
        return self._logging

    # === GRID SETTINGS (DELEGATED) ===

    def grid_config(self) -> GridConfig:
        """Build the immutable grid configuration (raises InvalidGridConfig)."""
        return self._grid.grid_config()

    # === UI SETTINGS (DELEGATED) ===

    def save_window_geometry(self, widget: Union[QWidget, QMainWindow]) -> None:
        """Save window geometry and state."""
        self._ui.save_window_geometry(widget)

    def restore_window_geometry(self, widget: Union[QWidget, QMainWindow]) -> bool:
        """Restore window geometry and state. Returns True if restored."""
        return self._ui.restore_window_geometry(widget)

    # === LOGGING SETTINGS (DELEGATED) ===

    @property
    def console_logging(self) -> bool:
        """Check if console logging is enabled."""
        return self._logging.console_logging

    @console_logging.setter
    def console_logging(self, value: bool) -> None:
        """Set console logging enabled state."""
        self._logging.console_logging = value

    @property
    def console_log_level(self) -> str:
        """Get console logging level."""
        return self._logging.console_log_level

    @console_log_level.setter
    def console_log_level(self, value: str) -> None:
        """Set console logging level."""
        self._logging.console_log_level = value

    @property
    def console_use_colors(self) -> bool:
        """Check if console should use colors."""
        return self._logging.console_use_colors

    @console_use_colors.setter
    def console_use_colors(self, value: bool) -> None:
        """Set console color usage."""
        self._logging.console_use_colors = value

    @property
    def file_logging(self) -> bool:
        """Check if file logging is enabled."""
        return self._logging.file_logging

    @file_logging.setter
    def file_logging(self, value: bool) -> None:
        """Set file logging enabled state."""
        self._logging.file_logging = value

    @property
    def log_file_path(self) -> str:
        """Get log file path."""
        return self._logging.log_file_path

    @property
    def log_file_absolute_path(self) -> Path:
        """Get absolute path to log file."""
        return self._logging.log_file_absolute_path

    # === VALIDATION ===

    def validate(self) -> ValidationResult:
        """Validate current configuration."""
        return self._validator.validate()

    # === UTILITY METHODS ===

    def get_settings_file_path(self) -> str:
        """Get the file path where settings are stored."""
        return self.settings.fileName()

    def sync(self) -> None:
        """Force synchronization of settings to storage."""
        self.settings.sync()
