"""Drag proxy with inertial release.

The proxy is an invisible point in pan space that follows the pointer
while dragging and keeps gliding after release, slowing down by a fixed
friction factor per tick. It produces the DragMove and ThrowUpdate events
fed to the tracker.
"""

import logging
import math
import time
from typing import Callable, Optional

from .events import DragMove, ThrowUpdate
from .types import PanOffset


class DragProxy:
    """Pointer-following proxy position with inertial throw."""

    # Fraction of velocity kept per throw tick
    FRICTION = 0.92
    # Speed (pixels per tick) below which the proxy is at rest
    REST_SPEED = 0.1
    # A pointer held still this long (seconds) before release does not throw
    RELEASE_WINDOW = 0.08

    def __init__(
        self,
        x: float = 0.0,
        y: float = 0.0,
        clock: Callable[[], float] = time.monotonic,
    ):
        """Initialize the proxy.

        Args:
            x: Initial X position in pan space
            y: Initial Y position in pan space
            clock: Monotonic time source in seconds
        """
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self.x = x
        self.y = y

        self._pointer: Optional[tuple[float, float]] = None
        self._release_vx = 0.0
        self._release_vy = 0.0
        self._last_move_time = 0.0
        self.clock = clock
        self._throw_vx = 0.0
        self._throw_vy = 0.0
        self._is_throwing = False

    @property
    def is_dragging(self) -> bool:
        return self._pointer is not None

    @property
    def is_throwing(self) -> bool:
        return self._is_throwing

    def press(self, pointer_x: float, pointer_y: float) -> None:
        """Start a drag at a pointer position, interrupting any throw."""
        if self._is_throwing:
            self.logger.debug("Throw interrupted by new drag")
        self._is_throwing = False
        self._pointer = (pointer_x, pointer_y)
        self._release_vx = 0.0
        self._release_vy = 0.0

    def move(self, pointer_x: float, pointer_y: float) -> Optional[DragMove]:
        """Follow the pointer.

        Args:
            pointer_x: Pointer X in widget coordinates
            pointer_y: Pointer Y in widget coordinates

        Returns:
            DragMove for the tracker, or None when no drag is in progress
        """
        if self._pointer is None:
            return None

        delta_x = pointer_x - self._pointer[0]
        delta_y = pointer_y - self._pointer[1]
        self._pointer = (pointer_x, pointer_y)

        self.x += delta_x
        self.y += delta_y
        self._release_vx = delta_x
        self._release_vy = delta_y
        self._last_move_time = self.clock()
        return DragMove(self.x, self.y, delta_x, delta_y)

    def release(self) -> bool:
        """End the drag.

        Returns:
            True if the release was fast enough to start a throw
        """
        if self._pointer is None:
            return False

        self._pointer = None
        idle = self.clock() - self._last_move_time
        if idle > self.RELEASE_WINDOW:
            self.logger.debug(f"Pointer idle for {idle:.3f}s before release, no throw")
            return False

        speed = math.hypot(self._release_vx, self._release_vy)
        if speed < self.REST_SPEED:
            return False

        self._throw_vx = self._release_vx
        self._throw_vy = self._release_vy
        self._is_throwing = True
        self.logger.debug(f"Throw started at {speed:.1f} px/tick")
        return True

    def step(self) -> Optional[ThrowUpdate]:
        """Advance the throw by one tick.

        Returns:
            ThrowUpdate for the tracker, or None once the proxy is at rest
        """
        if not self._is_throwing:
            return None

        self._throw_vx *= self.FRICTION
        self._throw_vy *= self.FRICTION
        if math.hypot(self._throw_vx, self._throw_vy) < self.REST_SPEED:
            self._is_throwing = False
            self.logger.debug(f"Throw came to rest at ({self.x:.1f}, {self.y:.1f})")
            return None

        self.x += self._throw_vx
        self.y += self._throw_vy
        return ThrowUpdate(self.x, self.y, self._throw_vx, self._throw_vy)

    def cancel_throw(self) -> None:
        self._is_throwing = False

    def sync(self, offset: PanOffset) -> None:
        """Move the proxy to an offset written by someone else (scroll, recenter)."""
        self.x = offset.x
        self.y = offset.y
