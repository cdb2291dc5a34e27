"""Per-tile visual effects.

Opacity fades with a tile's distance from the viewport center; skew and
stretch follow the instantaneous pan velocity. Everything is recomputed
from the current sample, nothing carries over between frames.
"""

from dataclasses import dataclass

from .types import TileTransform, Velocity


@dataclass(frozen=True, slots=True)
class TileEffect:
    """Visual effect for one tile in one frame."""
    opacity: float
    skew_x: float
    skew_y: float
    scale_x: float
    scale_y: float


def map_range(in_min: float, in_max: float, out_min: float, out_max: float, value: float) -> float:
    """Linearly map value from [in_min, in_max] onto [out_min, out_max] (unclamped)."""
    return out_min + (value - in_min) / (in_max - in_min) * (out_max - out_min)


def clamp(low: float, high: float, value: float) -> float:
    return max(low, min(high, value))


class EffectModel:
    """Computes opacity, skew and stretch for a tile."""

    MIN_OPACITY = 0.4
    MAX_OPACITY = 1.0

    # Fade window as fractions of half the viewport dimension
    FADE_START = 0.30
    FADE_END = 0.90

    SKEW_FACTOR = 0.2
    STRETCH_FACTOR = 0.005

    def __init__(self, tile_size: float):
        """Initialize the effect model.

        Args:
            tile_size: Edge length of a tile in pixels
        """
        self.tile_size = tile_size
        self._half_tile = tile_size / 2

    def axis_opacity(self, distance: float, viewport_dimension: float) -> float:
        """Opacity contributed by one axis.

        Args:
            distance: Absolute distance between tile center and viewport center
            viewport_dimension: Viewport width or height

        Returns:
            1.0 up to the fade start, 0.4 past the fade end, linear in between
        """
        threshold = viewport_dimension / 2
        fade_start = threshold * self.FADE_START
        fade_end = threshold * self.FADE_END

        if fade_end <= fade_start:
            # Zero-size viewport: no ramp to interpolate over
            return self.MAX_OPACITY if distance <= fade_start else self.MIN_OPACITY

        opacity = map_range(fade_start, fade_end, self.MAX_OPACITY, self.MIN_OPACITY, distance)
        return clamp(self.MIN_OPACITY, self.MAX_OPACITY, opacity)

    def opacity(self, x: float, y: float, viewport_width: float, viewport_height: float) -> float:
        """Opacity of a tile at a wrapped position.

        The axes are combined with min rather than a product so corner tiles
        do not fade twice as fast.
        """
        dx = abs(x + self._half_tile - viewport_width / 2)
        dy = abs(y + self._half_tile - viewport_height / 2)

        opacity_x = self.axis_opacity(dx, viewport_width)
        opacity_y = self.axis_opacity(dy, viewport_height)
        return clamp(self.MIN_OPACITY, self.MAX_OPACITY, min(opacity_x, opacity_y))

    def motion(self, velocity: Velocity) -> tuple[float, float, float, float]:
        """Skew (degrees) and stretch shared by every tile of a sample.

        Returns:
            (skew_x, skew_y, scale_x, scale_y)
        """
        return (
            velocity.vx * self.SKEW_FACTOR,
            velocity.vy * self.SKEW_FACTOR,
            1 + abs(velocity.vx) * self.STRETCH_FACTOR,
            1 + abs(velocity.vy) * self.STRETCH_FACTOR,
        )

    def compute(
        self,
        x: float,
        y: float,
        viewport_width: float,
        viewport_height: float,
        velocity: Velocity,
    ) -> TileEffect:
        """Compute the full effect for a tile.

        Args:
            x: Wrapped X position of the tile
            y: Wrapped Y position of the tile
            viewport_width: Current viewport width
            viewport_height: Current viewport height
            velocity: Pan velocity of the current sample

        Returns:
            TileEffect with opacity, skew (degrees) and scale
        """
        return TileEffect(self.opacity(x, y, viewport_width, viewport_height), *self.motion(velocity))

    def apply(
        self,
        transform: TileTransform,
        viewport_width: float,
        viewport_height: float,
        velocity: Velocity,
    ) -> None:
        """Write the effect for transform's wrapped position into it in place."""
        transform.opacity = self.opacity(transform.x, transform.y, viewport_width, viewport_height)
        transform.skew_x, transform.skew_y, transform.scale_x, transform.scale_y = self.motion(velocity)
