"""Timer-driven inertial throw.

Steps the drag proxy at display rate after release and feeds the
resulting ThrowUpdate events to the tracker until the proxy comes to rest.
"""

import logging

from PySide6.QtCore import QTimer

from infinite_grid.engine import DragProxy, PanOffsetTracker


class ThrowController:
    """Runs the proxy's throw on a QTimer on the GUI thread."""

    # ~60 ticks per second
    TICK_INTERVAL_MS = 16

    def __init__(self, proxy: DragProxy, tracker: PanOffsetTracker):
        """Initialize the throw controller.

        Args:
            proxy: Drag proxy providing throw samples
            tracker: Tracker receiving the samples
        """
        self.proxy = proxy
        self.tracker = tracker
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

        self.timer = QTimer()
        self.timer.setSingleShot(False)
        self.timer.setInterval(self.TICK_INTERVAL_MS)
        self.timer.timeout.connect(self.handle_tick)

        self._ticks = 0

    def start(self) -> None:
        """Start ticking if the proxy has a throw in progress."""
        if not self.proxy.is_throwing:
            return
        self._ticks = 0
        if not self.timer.isActive():
            self.timer.start()

    def stop(self) -> None:
        """Stop the throw immediately."""
        self.proxy.cancel_throw()
        if self.timer.isActive():
            self.timer.stop()
            self.logger.debug(f"Throw stopped after {self._ticks} ticks")

    def is_active(self) -> bool:
        return self.timer.isActive()

    def handle_tick(self) -> None:
        """Advance the throw by one step."""
        update = self.proxy.step()
        if update is None:
            self.timer.stop()
            self.logger.debug(f"Throw finished after {self._ticks} ticks")
            return

        self._ticks += 1
        if not self.tracker.throw_update(update):
            self.logger.warning("Throw sample rejected, stopping throw")
            self.stop()
