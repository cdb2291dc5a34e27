"""Grid view package.

This package provides the Qt side of the infinite grid:
- GridView: view widget wiring input, tracker, engine and tiles
- TileItemRenderer: render sink applying transforms to tile items
- ThrowController: timer driving the inertial throw
"""

from .grid_view import GridView
from .tile_items import TileItem, TileItemRenderer
from .throw_controller import ThrowController

__all__ = [
    "GridView",
    "TileItem",
    "TileItemRenderer",
    "ThrowController",
]
