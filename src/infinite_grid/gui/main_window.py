"""
Main application window for infinite-grid.
"""

import logging
from typing import Optional

import qtawesome as qta  # type: ignore
from PySide6.QtGui import QCloseEvent
from PySide6.QtWidgets import QMainWindow, QWidget

from ..engine import GridConfig
from ..settings import AppSettings
from .grid_view import GridView


class MainWindow(QMainWindow):
    """Main application window hosting the grid view."""

    def __init__(
        self,
        settings: AppSettings,
        config: GridConfig,
        parent: Optional[QWidget] = None,
    ) -> None:
        super().__init__(parent)

        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

        self.setObjectName("main_window")
        self.settings = settings

        self.grid_view = GridView(
            config, self, frame_log_interval=settings.logging.frame_log_interval
        )
        self.setCentralWidget(self.grid_view)
        self.setup_status_bar()

        # Restore window geometry from settings
        if not self.settings.restore_window_geometry(self):
            # Default size if no saved geometry
            self.resize(1280, 800)

        self.setWindowTitle("Infinite Drag Grid")
        self.setWindowIcon(qta.icon("mdi.view-grid"))  # type: ignore[arg-type]

        self.logger.info("Main window initialized")

    def setup_status_bar(self) -> None:
        """Setup the status bar."""
        self.status_bar = self.statusBar()
        self.status_bar.showMessage("Drag anywhere to explore", 10000)
        self.logger.debug("Status bar created")

    def closeEvent(self, event: QCloseEvent) -> None:
        """Stop the throw timer and remember the window geometry."""
        self.grid_view.throw_controller.stop()
        self.settings.save_window_geometry(self)
        self.logger.info("Main window closed")
        super().closeEvent(event)
