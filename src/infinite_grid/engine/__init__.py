"""Transform engine for the infinite grid.

This package has no GUI dependencies:
- GridConfig / GridLayout: static tile layout
- wrap: periodic wrap-around per axis
- EffectModel: opacity, skew and stretch per tile
- PanOffsetTracker: single source of truth for the pan offset
- DragProxy: pointer-following proxy with inertial throw
- TransformEngine: per-update recomputation of every tile
"""

from .types import InvalidGridConfig, PanOffset, Velocity, TileTransform
from .layout import GridConfig, GridLayout, TileDescriptor
from .wrap import wrap
from .effects import EffectModel, TileEffect
from .events import DragMove, ThrowUpdate, ScrollDelta
from .tracker import PanOffsetTracker
from .proxy import DragProxy
from .transform_engine import TransformEngine

__all__ = [
    "InvalidGridConfig",
    "PanOffset",
    "Velocity",
    "TileTransform",
    "GridConfig",
    "GridLayout",
    "TileDescriptor",
    "wrap",
    "EffectModel",
    "TileEffect",
    "DragMove",
    "ThrowUpdate",
    "ScrollDelta",
    "PanOffsetTracker",
    "DragProxy",
    "TransformEngine",
]
