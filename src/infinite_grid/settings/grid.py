"""
Grid layout settings for infinite-grid.
"""

import logging
from typing import TYPE_CHECKING, Any, Callable, TypeVar

from ..engine.layout import GridConfig

if TYPE_CHECKING:
    from PySide6.QtCore import QSettings

logger = logging.getLogger(__name__)

T = TypeVar("T", int, float)

DEFAULT_GRID = GridConfig()


def _to_count(value: Any) -> int:
    """Parse a whole number, refusing fractional values instead of truncating."""
    if isinstance(value, float) and not value.is_integer():
        raise ValueError(f"{value} is not a whole number")
    return int(value)


class GridSettings:
    """Manages tile grid settings.

    Values are read once at startup; the running grid never changes size.
    """

    def __init__(self, settings: "QSettings"):
        self.settings = settings

    def _get_float(self, key: str, default: float = 0.0) -> float:
        """Type-safe float retrieval from settings."""
        return self._get(key, float, default)

    def _get_int(self, key: str, default: int = 0) -> int:
        """Type-safe integer retrieval from settings."""
        return self._get(key, _to_count, default)

    def _get(self, key: str, convert: Callable[[Any], T], default: T) -> T:
        value = self.settings.value(key, default)
        if value is None:
            return default
        try:
            return convert(value)
        except (ValueError, TypeError):
            logger.warning(f"Invalid value for {key}: {value!r}, using {default}")
            return default

    def unparsable_values(self) -> list[str]:
        """Describe stored values that cannot be read and fall back to defaults."""
        problems: list[str] = []
        for key, convert, kind, default in (
            ("grid/tile_size", float, "number", DEFAULT_GRID.tile_size),
            ("grid/gap", float, "number", DEFAULT_GRID.gap),
            ("grid/columns", _to_count, "whole number", DEFAULT_GRID.columns),
            ("grid/rows", _to_count, "whole number", DEFAULT_GRID.rows),
        ):
            if not self.settings.contains(key):
                continue
            value = self.settings.value(key)
            try:
                convert(value)
            except (ValueError, TypeError):
                problems.append(f"{key}={value!r} is not a {kind}, using {default}")
        return problems

    @property
    def tile_size(self) -> float:
        """Get tile edge length in pixels."""
        return self._get_float("grid/tile_size", DEFAULT_GRID.tile_size)

    @tile_size.setter
    def tile_size(self, value: float) -> None:
        """Set tile edge length in pixels."""
        self.settings.setValue("grid/tile_size", value)
        self.settings.sync()

    @property
    def gap(self) -> float:
        """Get spacing between tiles in pixels."""
        return self._get_float("grid/gap", DEFAULT_GRID.gap)

    @gap.setter
    def gap(self, value: float) -> None:
        """Set spacing between tiles in pixels."""
        self.settings.setValue("grid/gap", value)
        self.settings.sync()

    @property
    def columns(self) -> int:
        """Get number of tile columns."""
        return self._get_int("grid/columns", DEFAULT_GRID.columns)

    @columns.setter
    def columns(self, value: int) -> None:
        """Set number of tile columns."""
        self.settings.setValue("grid/columns", value)
        self.settings.sync()

    @property
    def rows(self) -> int:
        """Get number of tile rows."""
        return self._get_int("grid/rows", DEFAULT_GRID.rows)

    @rows.setter
    def rows(self, value: int) -> None:
        """Set number of tile rows."""
        self.settings.setValue("grid/rows", value)
        self.settings.sync()

    def grid_config(self) -> GridConfig:
        """Build the grid configuration.

        Raises:
            InvalidGridConfig: if any stored value is out of range
        """
        return GridConfig(
            tile_size=self.tile_size,
            gap=self.gap,
            columns=self.columns,
            rows=self.rows,
        )
