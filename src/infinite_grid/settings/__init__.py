"""
Settings package for infinite-grid.

This package provides a modular, type-safe configuration management system
using Qt's QSettings for cross-platform storage.

Usage:
    from infinite_grid.settings import AppSettings, ValidationResult

    settings = AppSettings()
    result = settings.validate()
    config = settings.grid_config()
"""

from .core import AppSettings
from .types import ConfigError, ValidationResult
from .grid import GridSettings
from .logging import LoggingSettings

__all__ = [
    "AppSettings",
    "ConfigError",
    "ValidationResult",
    "GridSettings",
    "LoggingSettings",
]
