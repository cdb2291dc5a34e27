"""Event handlers for GridView.

This module provides input handling for GridView: pointer dragging with
inertial release, wheel/touchpad scrolling, keyboard shortcuts and resize.
"""

from PySide6.QtCore import Qt
from PySide6.QtGui import QKeyEvent, QMouseEvent, QResizeEvent, QWheelEvent

from infinite_grid.engine import ScrollDelta

# Pixels scrolled per wheel notch (angleDelta of 120)
WHEEL_NOTCH_PIXELS = 100
WHEEL_NOTCH_ANGLE = 120


def wheel_scroll_delta(event: QWheelEvent) -> ScrollDelta:
    """Convert a wheel event into a ScrollDelta.

    Qt reports positive deltas when scrolling up/left; a scroll delta is
    positive when scrolling down/right, so the sign is flipped here.
    Precise touchpad pixel deltas are used when the platform provides them.
    """
    pixel_delta = event.pixelDelta()
    if not pixel_delta.isNull():
        return ScrollDelta(-float(pixel_delta.x()), -float(pixel_delta.y()))

    angle_delta = event.angleDelta()
    scale = WHEEL_NOTCH_PIXELS / WHEEL_NOTCH_ANGLE
    return ScrollDelta(-angle_delta.x() * scale, -angle_delta.y() * scale)


class GridViewEventHandlers:
    """Mixin class for GridView event handling.

    Handles:
    - Left or middle button drag (pans the grid, throws on release)
    - Wheel and touchpad scrolling
    - Home key (recenter)
    - Window resize (scene rect and overlay UI)
    """

    def resizeEvent(self, event: QResizeEvent) -> None:
        """Keep the scene rect in sync with the viewport and refresh tiles."""
        super().resizeEvent(event)  # type: ignore

        size = self.viewport().size()  # type: ignore
        self.setSceneRect(0, 0, size.width(), size.height())  # type: ignore

        margin = 10
        button_x = self.width() - self.center_button.width() - margin  # type: ignore
        self.center_button.move(button_x, margin)  # type: ignore

        # Fade thresholds follow the new size on the next pass
        if not self.throw_controller.is_active() and not self.proxy.is_dragging:  # type: ignore
            self.tracker.emit_current()  # type: ignore

    def mousePressEvent(self, event: QMouseEvent) -> None:
        """Start dragging; interrupts a running throw."""
        if event.button() in (Qt.MouseButton.LeftButton, Qt.MouseButton.MiddleButton):
            self.throw_controller.stop()  # type: ignore
            position = event.position()
            self.proxy.press(position.x(), position.y())  # type: ignore
            self.setCursor(Qt.CursorShape.ClosedHandCursor)  # type: ignore
            event.accept()
        else:
            super().mousePressEvent(event)  # type: ignore

    def mouseMoveEvent(self, event: QMouseEvent) -> None:
        """Move the proxy with the pointer and forward the drag sample."""
        if self.proxy.is_dragging:  # type: ignore
            position = event.position()
            drag = self.proxy.move(position.x(), position.y())  # type: ignore
            if drag is not None:
                self.tracker.drag_move(drag)  # type: ignore
            event.accept()
        else:
            super().mouseMoveEvent(event)  # type: ignore

    def mouseReleaseEvent(self, event: QMouseEvent) -> None:
        """Release the drag and start an inertial throw if fast enough."""
        if self.proxy.is_dragging and event.button() in (  # type: ignore
            Qt.MouseButton.LeftButton,
            Qt.MouseButton.MiddleButton,
        ):
            if self.proxy.release():  # type: ignore
                self.throw_controller.start()  # type: ignore
            self.setCursor(Qt.CursorShape.OpenHandCursor)  # type: ignore
            event.accept()
        else:
            super().mouseReleaseEvent(event)  # type: ignore

    def wheelEvent(self, event: QWheelEvent) -> None:
        """Scroll the grid; the tracker resyncs the proxy."""
        self.tracker.scroll(wheel_scroll_delta(event))  # type: ignore
        event.accept()

    def keyPressEvent(self, event: QKeyEvent) -> None:
        """Handle key press events for view control."""
        if event.key() == Qt.Key.Key_Home:
            self.recenter()  # type: ignore
            event.accept()
        else:
            super().keyPressEvent(event)  # type: ignore
