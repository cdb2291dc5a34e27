"""Value types shared by the transform engine.

Offsets and velocities are immutable and passed explicitly through every
call. Tile transforms are mutable records living in the engine's reusable
output buffer.
"""

from dataclasses import dataclass


class InvalidGridConfig(ValueError):
    """Raised when a grid configuration would produce a degenerate layout."""
    pass


@dataclass(frozen=True, slots=True)
class PanOffset:
    """Accumulated pan displacement in pixels (unbounded)."""
    x: float = 0.0
    y: float = 0.0


@dataclass(frozen=True, slots=True)
class Velocity:
    """Instantaneous pan delta of the latest input sample."""
    vx: float = 0.0
    vy: float = 0.0


ZERO_OFFSET = PanOffset(0.0, 0.0)
ZERO_VELOCITY = Velocity(0.0, 0.0)


@dataclass(slots=True)
class TileTransform:
    """Rendered state of a single tile for one frame.

    Attributes:
        index: Linear tile index (row-major)
        x: Wrapped X position of the tile's top-left corner
        y: Wrapped Y position of the tile's top-left corner
        opacity: Visibility in [0.4, 1.0]
        skew_x: Horizontal skew in degrees
        skew_y: Vertical skew in degrees
        scale_x: Horizontal stretch (>= 1)
        scale_y: Vertical stretch (>= 1)
    """
    index: int
    x: float = 0.0
    y: float = 0.0
    opacity: float = 1.0
    skew_x: float = 0.0
    skew_y: float = 0.0
    scale_x: float = 1.0
    scale_y: float = 1.0

    def as_tuple(self) -> tuple[int, float, float, float, float, float, float, float]:
        """Return a detached copy of the record as a plain tuple."""
        return (
            self.index,
            self.x,
            self.y,
            self.opacity,
            self.skew_x,
            self.skew_y,
            self.scale_x,
            self.scale_y,
        )
