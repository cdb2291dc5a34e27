"""Pan offset tracking.

The tracker owns the single pan offset shared by drag, inertial throw and
scroll input, and forwards every accepted change together with the
sample's velocity to its listeners.
"""

import logging
import math
from typing import Callable

from .events import DragMove, PanEvent, PositionSample, ScrollDelta, ThrowUpdate, is_finite_event
from .types import PanOffset, Velocity, ZERO_OFFSET, ZERO_VELOCITY

OffsetListener = Callable[[PanOffset, Velocity], None]
SyncListener = Callable[[PanOffset], None]


class PanOffsetTracker:
    """Accumulates pan input into one offset plus an instantaneous velocity.

    Events are processed synchronously, one at a time. Listeners are called
    before the mutating method returns; a listener feeding another event back
    into the tracker is a programming error.
    """

    def __init__(self, offset: PanOffset = ZERO_OFFSET):
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self._offset = offset
        self._velocity = ZERO_VELOCITY
        self._listeners: list[OffsetListener] = []
        self._sync_listeners: list[SyncListener] = []
        self._dispatching = False
        self.rejected_count = 0

    @property
    def offset(self) -> PanOffset:
        """Current pan offset."""
        return self._offset

    @property
    def velocity(self) -> Velocity:
        """Velocity of the latest accepted sample."""
        return self._velocity

    def add_listener(self, listener: OffsetListener) -> None:
        """Register a callback receiving (offset, velocity) for every accepted event."""
        self._listeners.append(listener)

    def add_sync_listener(self, listener: SyncListener) -> None:
        """Register a callback told about offsets written out-of-band.

        The drag proxy uses this to move its own absolute position after a
        scroll so the next throw starts from the right origin.
        """
        self._sync_listeners.append(listener)

    # === INPUT ENTRY POINTS ===

    def drag_move(self, event: DragMove) -> bool:
        """Apply a drag sample. Returns False if the event was rejected."""
        return self._apply_position(event)

    def throw_update(self, event: ThrowUpdate) -> bool:
        """Apply an inertial throw sample. Returns False if the event was rejected."""
        return self._apply_position(event)

    def scroll(self, event: ScrollDelta) -> bool:
        """Apply a wheel/touch scroll.

        Scrolling down moves content up, so the delta is subtracted from the
        current offset and the reported velocity is the negated delta.

        Returns:
            False if the event was rejected
        """
        if not self._accept(event):
            return False

        offset = PanOffset(self._offset.x - event.delta_x, self._offset.y - event.delta_y)
        if not (math.isfinite(offset.x) and math.isfinite(offset.y)):
            return self._reject(f"{event} overflows the offset")
        velocity = Velocity(-event.delta_x, -event.delta_y)
        self._commit(offset, velocity, sync=True)
        return True

    def handle(self, event: PanEvent) -> bool:
        """Dispatch any supported event to its entry point."""
        if isinstance(event, DragMove):
            return self.drag_move(event)
        if isinstance(event, ThrowUpdate):
            return self.throw_update(event)
        if isinstance(event, ScrollDelta):
            return self.scroll(event)
        raise TypeError(f"Unsupported pan event: {type(event).__name__}")

    def recenter(self) -> None:
        """Jump back to the origin with zero velocity."""
        self.logger.debug(f"Recentering from ({self._offset.x:.1f}, {self._offset.y:.1f})")
        self._commit(ZERO_OFFSET, ZERO_VELOCITY, sync=True)

    def emit_current(self) -> None:
        """Re-emit the current offset at rest (initial layout pass)."""
        self._commit(self._offset, ZERO_VELOCITY, sync=False)

    # === INTERNALS ===

    def _apply_position(self, event: PositionSample) -> bool:
        if not self._accept(event):
            return False

        self._commit(
            PanOffset(event.x, event.y),
            Velocity(event.delta_x, event.delta_y),
            sync=False,
        )
        return True

    def _accept(self, event: PanEvent) -> bool:
        if is_finite_event(event):
            return True
        return self._reject(f"non-finite {type(event).__name__}: {event}")

    def _reject(self, reason: str) -> bool:
        self.rejected_count += 1
        self.logger.warning(
            f"Rejected {reason}, keeping offset ({self._offset.x}, {self._offset.y})"
        )
        return False

    def _commit(self, offset: PanOffset, velocity: Velocity, sync: bool) -> None:
        if self._dispatching:
            raise RuntimeError("PanOffsetTracker is not reentrant")

        self._dispatching = True
        try:
            self._offset = offset
            self._velocity = velocity
            if sync:
                for sync_listener in self._sync_listeners:
                    sync_listener(offset)
            for listener in self._listeners:
                listener(offset, velocity)
        finally:
            self._dispatching = False
