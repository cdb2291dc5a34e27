"""
UI-related settings for infinite-grid.
"""

from typing import Any, Union, TYPE_CHECKING

from PySide6.QtCore import QByteArray
from PySide6.QtWidgets import QWidget, QMainWindow

if TYPE_CHECKING:
    from PySide6.QtCore import QSettings


def _to_byte_array(value: Any) -> Any:
    """Coerce a stored geometry blob to QByteArray, or None if impossible."""
    if isinstance(value, QByteArray):
        return value
    if isinstance(value, bytes):
        return QByteArray(value)
    try:
        return QByteArray(bytes(value))
    except (TypeError, ValueError):
        return None


class UISettings:
    """Manages UI-related settings."""

    def __init__(self, settings: "QSettings"):
        self.settings = settings

    def save_window_geometry(self, widget: Union[QWidget, QMainWindow]) -> None:
        """Save window geometry and state."""
        if hasattr(widget, "saveGeometry"):
            self.settings.setValue("ui/window_geometry", widget.saveGeometry())
        # Only QMainWindow has saveState
        if isinstance(widget, QMainWindow):
            self.settings.setValue("ui/window_state", widget.saveState())
        self.settings.sync()

    def restore_window_geometry(self, widget: Union[QWidget, QMainWindow]) -> bool:
        """Restore window geometry and state. Returns True if restored."""
        geometry: Any = self.settings.value("ui/window_geometry")
        state: Any = self.settings.value("ui/window_state")

        restored = False
        if geometry and hasattr(widget, "restoreGeometry"):
            geometry = _to_byte_array(geometry)
            if geometry:
                restored = widget.restoreGeometry(geometry) or restored

        if state and isinstance(widget, QMainWindow):
            state = _to_byte_array(state)
            if state:
                restored = widget.restoreState(state) or restored

        return restored
