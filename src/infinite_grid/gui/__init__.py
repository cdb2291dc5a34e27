"""Qt user interface for infinite-grid."""

from .main_window import MainWindow

__all__ = ["MainWindow"]
