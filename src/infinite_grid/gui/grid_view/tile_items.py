"""Tile items and the render sink that positions them.

This module creates one QGraphicsItem per tile and applies each frame's
TileTransform batch to them.
"""

import logging
import math
from typing import Optional, Sequence

from PySide6.QtCore import QRectF, Qt
from PySide6.QtGui import QColor, QFont, QPainter, QTransform
from PySide6.QtWidgets import QGraphicsItem, QGraphicsScene, QStyleOptionGraphicsItem, QWidget

from infinite_grid.engine import GridLayout, TileDescriptor, TileTransform


class TileItem(QGraphicsItem):
    """Rounded, colored square with its number in the middle."""

    CORNER_RADIUS = 12
    SATURATION = 0.7
    LIGHTNESS = 0.5
    LABEL_COLOR = QColor(255, 255, 255, 204)

    def __init__(self, tile: TileDescriptor, size: float):
        super().__init__()
        self.tile = tile
        self.size = size
        self.fill = QColor.fromHslF(tile.hue / 360, self.SATURATION, self.LIGHTNESS)
        self.font = QFont()
        self.font.setBold(True)
        self.font.setPixelSize(max(1, int(size * 0.16)))

    def boundingRect(self) -> QRectF:
        return QRectF(0, 0, self.size, self.size)

    def paint(
        self,
        painter: QPainter,
        option: QStyleOptionGraphicsItem,
        widget: Optional[QWidget] = None,
    ) -> None:
        rect = self.boundingRect()
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)
        painter.setPen(Qt.PenStyle.NoPen)
        painter.setBrush(self.fill)
        painter.drawRoundedRect(rect, self.CORNER_RADIUS, self.CORNER_RADIUS)

        painter.setFont(self.font)
        painter.setPen(self.LABEL_COLOR)
        painter.drawText(rect, Qt.AlignmentFlag.AlignCenter, self.tile.label)


def tile_qtransform(transform: TileTransform, size: float) -> QTransform:
    """Build the skew/stretch transform of a tile, pivoting on its center.

    Args:
        transform: Frame transform of the tile (skew in degrees)
        size: Tile edge length

    Returns:
        Item-local QTransform
    """
    half = size / 2
    qtransform = QTransform()
    qtransform.translate(half, half)
    qtransform.shear(
        math.tan(math.radians(transform.skew_x)),
        math.tan(math.radians(transform.skew_y)),
    )
    qtransform.scale(transform.scale_x, transform.scale_y)
    qtransform.translate(-half, -half)
    return qtransform


class TileItemRenderer:
    """Render sink applying transform batches to the tile items."""

    def __init__(self, scene: QGraphicsScene, layout: GridLayout):
        """Create one item per tile and add it to the scene.

        Args:
            scene: Scene to populate
            layout: Grid layout with the tile arena
        """
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self.scene = scene
        self.tile_size = layout.config.tile_size
        self.items: list[TileItem] = []

        for tile in layout.tiles:
            item = TileItem(tile, self.tile_size)
            item.setPos(tile.base_x, tile.base_y)
            scene.addItem(item)
            self.items.append(item)

        self.logger.debug(f"Created {len(self.items)} tile items")

    def __call__(self, batch: Sequence[TileTransform]) -> None:
        """Apply a transform batch to the items (one transform per tile)."""
        for transform in batch:
            item = self.items[transform.index]
            item.setPos(transform.x, transform.y)
            item.setOpacity(transform.opacity)
            item.setTransform(tile_qtransform(transform, self.tile_size))
