"""Static grid layout.

This module computes base (unwrapped) tile positions and the total
grid extent from the grid configuration.
"""

import logging
import math
from dataclasses import dataclass

from .types import InvalidGridConfig

logger = logging.getLogger(__name__)


def _is_count(value: int) -> bool:
    # bool is an int subclass but never a tile count
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


def grid_problems(tile_size: float, gap: float, columns: int, rows: int) -> list[str]:
    """List every violated grid constraint (empty when the values are valid)."""
    errors: list[str] = []
    if not (math.isfinite(tile_size) and tile_size > 0):
        errors.append(f"tile_size must be positive, got {tile_size}")
    if not (math.isfinite(gap) and gap >= 0):
        errors.append(f"gap must not be negative, got {gap}")
    if not _is_count(columns):
        errors.append(f"columns must be a positive integer, got {columns}")
    if not _is_count(rows):
        errors.append(f"rows must be a positive integer, got {rows}")
    return errors


@dataclass(frozen=True)
class GridConfig:
    """Static grid configuration, read once at startup.

    Attributes:
        tile_size: Edge length of a square tile in pixels
        gap: Spacing between neighbouring tiles in pixels
        columns: Number of tile columns
        rows: Number of tile rows
    """
    tile_size: float = 200.0
    gap: float = 50.0
    columns: int = 15
    rows: int = 10

    def __post_init__(self):
        errors = grid_problems(self.tile_size, self.gap, self.columns, self.rows)
        if errors:
            raise InvalidGridConfig("; ".join(errors))

    @property
    def cell_stride(self) -> float:
        return self.tile_size + self.gap

    @property
    def grid_width(self) -> float:
        return self.columns * self.cell_stride

    @property
    def grid_height(self) -> float:
        return self.rows * self.cell_stride

    @property
    def tile_count(self) -> int:
        return self.columns * self.rows


@dataclass(frozen=True)
class TileDescriptor:
    """Fixed identity of one tile in the arena.

    Attributes:
        index: Linear index in [0, columns * rows)
        column: Column in the grid
        row: Row in the grid
        base_x: Unwrapped X position
        base_y: Unwrapped Y position
        label: Number displayed on the tile
        hue: Fill hue in degrees [0, 360)
    """
    index: int
    column: int
    row: int
    base_x: float
    base_y: float
    label: str
    hue: int


def tile_hue(index: int) -> int:
    """Hue for a tile, spread around the color wheel by its 1-based number."""
    return ((index + 1) * 13) % 360


class GridLayout:
    """Row-major layout of a fixed number of tiles."""

    def __init__(self, config: GridConfig):
        """Initialize the layout and build the tile arena.

        Args:
            config: Validated grid configuration
        """
        self.config = config
        self.tiles: tuple[TileDescriptor, ...] = tuple(
            self._describe(index) for index in range(config.tile_count)
        )
        logger.debug(
            f"Grid layout built: {config.columns}x{config.rows} tiles, "
            f"extent {config.grid_width}x{config.grid_height}"
        )

    def base_position(self, index: int) -> tuple[float, float]:
        """Return the unwrapped position of a tile.

        Args:
            index: Tile index, 0 <= index < columns * rows

        Returns:
            (x, y) of the tile's top-left corner before panning
        """
        stride = self.config.cell_stride
        column = index % self.config.columns
        row = index // self.config.columns
        return (column * stride, row * stride)

    def _describe(self, index: int) -> TileDescriptor:
        base_x, base_y = self.base_position(index)
        return TileDescriptor(
            index=index,
            column=index % self.config.columns,
            row=index // self.config.columns,
            base_x=base_x,
            base_y=base_y,
            label=str(index + 1),
            hue=tile_hue(index),
        )

    def __len__(self) -> int:
        return len(self.tiles)
