"""Transform engine.

Turns the current pan offset and velocity into one transform per tile
and hands the whole batch to the render sink.
"""

import logging
from typing import Callable, Sequence

from .effects import EffectModel
from .layout import GridConfig, GridLayout
from .tracker import PanOffsetTracker
from .types import PanOffset, TileTransform, Velocity, ZERO_OFFSET, ZERO_VELOCITY
from .wrap import wrap

RenderSink = Callable[[Sequence[TileTransform]], None]
ViewportProvider = Callable[[], tuple[float, float]]


class TransformEngine:
    """Recomputes every tile on every offset change.

    The output buffer is allocated once; each pass overwrites it in place,
    so a sink must consume the batch before returning and must not keep it.
    """

    def __init__(
        self,
        config: GridConfig,
        sink: RenderSink,
        viewport: ViewportProvider,
        log_interval: int = 0,
    ):
        """Initialize the engine.

        Args:
            config: Grid configuration
            sink: Callable receiving the transform batch
            viewport: Callable returning the current (width, height); read on every pass
            log_interval: Log the pass counter every N passes (0 disables it)
        """
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self.config = config
        self.layout = GridLayout(config)
        self.effects = EffectModel(config.tile_size)
        self.sink = sink
        self.viewport = viewport
        self.log_interval = log_interval

        self._wrap_x = wrap(config.grid_width)
        self._wrap_y = wrap(config.grid_height)
        self._buffer: list[TileTransform] = [TileTransform(index=tile.index) for tile in self.layout.tiles]
        self.frame_count = 0

    def attach(self, tracker: PanOffsetTracker) -> None:
        """Subscribe to offset changes of a tracker."""
        tracker.add_listener(self.update)

    def start(self) -> None:
        """Run the initial layout pass at zero offset and velocity."""
        self.logger.debug(f"Initial layout pass for {len(self._buffer)} tiles")
        self.update(ZERO_OFFSET, ZERO_VELOCITY)

    def update(self, offset: PanOffset, velocity: Velocity) -> None:
        """Recompute all tiles and emit the batch.

        Args:
            offset: Current pan offset
            velocity: Velocity of the current sample
        """
        viewport_width, viewport_height = self.viewport()

        for tile, transform in zip(self.layout.tiles, self._buffer):
            transform.x = self._wrap_x(tile.base_x + offset.x)
            transform.y = self._wrap_y(tile.base_y + offset.y)
            self.effects.apply(transform, viewport_width, viewport_height, velocity)

        self.frame_count += 1
        if self.log_interval and self.frame_count % self.log_interval == 0:
            self.logger.debug(
                f"{self.frame_count} passes, offset ({offset.x:.1f}, {offset.y:.1f}), "
                f"viewport {viewport_width}x{viewport_height}"
            )

        self.sink(self._buffer)
