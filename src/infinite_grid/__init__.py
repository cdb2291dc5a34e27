"""
infinite-grid: endlessly pannable grid of tiles with motion effects

Drag, fling or scroll a seamlessly wrapping grid; every tile fades with its
distance from the center of the window and skews with the pan velocity.
"""

__version__ = "0.1.0"
__author__ = "infinite-grid Contributors"

from .engine import (
    GridConfig,
    GridLayout,
    EffectModel,
    PanOffsetTracker,
    TransformEngine,
    DragProxy,
    wrap,
)
from .utils.logging_config import setup_logging

__all__ = [
    # Engine
    "GridConfig",
    "GridLayout",
    "EffectModel",
    "PanOffsetTracker",
    "TransformEngine",
    "DragProxy",
    "wrap",

    # Logging
    "setup_logging",
]
