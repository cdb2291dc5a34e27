"""
Settings validation system for infinite-grid.
"""

import logging
from typing import List, TYPE_CHECKING

from ..engine.layout import grid_problems
from .logging import VALID_LEVELS
from .types import ValidationResult

if TYPE_CHECKING:
    from .core import AppSettings

logger = logging.getLogger(__name__)

# Grids smaller than a common screen show their wrap seam while panning
MIN_COMFORTABLE_WIDTH = 1920
MIN_COMFORTABLE_HEIGHT = 1080


class SettingsValidator:
    """Validates configuration settings."""

    def __init__(self, settings: "AppSettings"):
        self.settings = settings

    def validate(self) -> ValidationResult:
        """Validate current configuration."""
        errors: List[str] = []
        warnings: List[str] = []

        grid = self.settings.grid
        warnings.extend(f"Grid: {problem}" for problem in grid.unparsable_values())

        tile_size, gap, columns, rows = grid.tile_size, grid.gap, grid.columns, grid.rows

        problems = grid_problems(tile_size, gap, columns, rows)
        errors.extend(f"Grid: {problem}" for problem in problems)

        if not problems:
            grid_width = columns * (tile_size + gap)
            grid_height = rows * (tile_size + gap)
            if grid_width < MIN_COMFORTABLE_WIDTH:
                warnings.append(
                    f"Grid width {grid_width:g}px is narrower than "
                    f"{MIN_COMFORTABLE_WIDTH}px, tiles may visibly wrap"
                )
            if grid_height < MIN_COMFORTABLE_HEIGHT:
                warnings.append(
                    f"Grid height {grid_height:g}px is shorter than "
                    f"{MIN_COMFORTABLE_HEIGHT}px, tiles may visibly wrap"
                )

        logging_settings = self.settings.logging
        for name, level in (
            ("console", logging_settings.console_log_level),
            ("engine", logging_settings.engine_log_level),
        ):
            if level not in VALID_LEVELS:
                warnings.append(f"Unknown {name} log level: {level}")

        if errors:
            logger.debug(f"Validation found {len(errors)} error(s)")

        return ValidationResult(
            is_valid=len(errors) == 0, errors=errors, warnings=warnings
        )
