"""Main view widget for the infinite grid.

This module provides the GridView widget wiring the input proxy, the pan
offset tracker, the transform engine and the tile items together.
"""

import logging
from typing import Optional, Sequence

import qtawesome as qta  # type: ignore
from PySide6.QtCore import Qt
from PySide6.QtGui import QColor, QPainter
from PySide6.QtWidgets import QFrame, QGraphicsScene, QGraphicsView, QPushButton, QWidget

from infinite_grid.engine import DragProxy, GridConfig, PanOffsetTracker, TileTransform, TransformEngine

from .events import GridViewEventHandlers
from .throw_controller import ThrowController
from .tile_items import TileItemRenderer


class GridView(GridViewEventHandlers, QGraphicsView):
    """Graphics view showing an endlessly pannable grid of tiles.

    Scene coordinates equal viewport pixels; panning moves the tiles,
    never the view.
    """

    BACKGROUND = QColor("#111111")

    def __init__(
        self,
        config: GridConfig,
        parent: Optional[QWidget] = None,
        frame_log_interval: int = 0,
    ):
        """Initialize the grid view.

        Args:
            config: Grid configuration
            parent: Parent widget
            frame_log_interval: Engine passes between two progress log messages
        """
        super().__init__(parent)

        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self.config = config

        self._scene = QGraphicsScene(self)
        self.setScene(self._scene)

        # Configure view
        self.setDragMode(QGraphicsView.DragMode.NoDrag)
        self.setRenderHint(QPainter.RenderHint.Antialiasing)
        self.setHorizontalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
        self.setVerticalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
        self.setAlignment(Qt.AlignmentFlag.AlignLeft | Qt.AlignmentFlag.AlignTop)
        self.setViewportUpdateMode(QGraphicsView.ViewportUpdateMode.FullViewportUpdate)
        self.setFrameShape(QFrame.Shape.NoFrame)
        self.setBackgroundBrush(self.BACKGROUND)
        self.setCursor(Qt.CursorShape.OpenHandCursor)
        self.setFocusPolicy(Qt.FocusPolicy.StrongFocus)

        # Pipeline: proxy -> tracker -> engine -> tile items
        self.proxy = DragProxy()
        self.tracker = PanOffsetTracker()
        self.tracker.add_sync_listener(self.proxy.sync)

        self.engine = TransformEngine(
            config, self._sink, self.viewport_size, log_interval=frame_log_interval
        )
        self.renderer = TileItemRenderer(self._scene, self.engine.layout)
        self.engine.attach(self.tracker)

        self.throw_controller = ThrowController(self.proxy, self.tracker)

        self._setup_overlay_ui()

        self.engine.start()
        self.logger.debug(f"Grid view initialized with {config.tile_count} tiles")

    def _setup_overlay_ui(self) -> None:
        """Setup the recenter button overlay."""
        self.center_button = QPushButton("", self)
        self.center_button.setIcon(qta.icon("mdi.crosshairs-gps", color="white"))  # type: ignore[arg-type]
        self.center_button.setFixedSize(32, 32)
        self.center_button.setIconSize(self.center_button.size() * 0.8)
        self.center_button.setFlat(True)
        self.center_button.setCursor(Qt.CursorShape.PointingHandCursor)
        self.center_button.setFocusPolicy(Qt.FocusPolicy.NoFocus)
        self.center_button.clicked.connect(self.recenter)
        self.center_button.setToolTip("Recenter [ Home ]")
        self.center_button.raise_()

    def viewport_size(self) -> tuple[float, float]:
        """Current viewport size in pixels, read on every engine pass."""
        size = self.viewport().size()
        return (float(size.width()), float(size.height()))

    def recenter(self) -> None:
        """Stop any throw and jump back to the origin."""
        self.throw_controller.stop()
        self.tracker.recenter()
        self.logger.info("View recentered")

    def _sink(self, batch: Sequence[TileTransform]) -> None:
        self.renderer(batch)
