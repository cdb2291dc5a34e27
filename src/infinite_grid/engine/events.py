"""Input events consumed by the pan offset tracker."""

import math
from dataclasses import dataclass, fields
from typing import Union


@dataclass(frozen=True, slots=True)
class PositionSample:
    """Absolute proxy position plus the delta since the previous sample."""
    x: float
    y: float
    delta_x: float
    delta_y: float


@dataclass(frozen=True, slots=True)
class DragMove(PositionSample):
    """Pointer moved while dragging."""


@dataclass(frozen=True, slots=True)
class ThrowUpdate(PositionSample):
    """Inertial position update after the pointer was released."""


@dataclass(frozen=True, slots=True)
class ScrollDelta:
    """Wheel or touch scroll; carries no absolute position."""
    delta_x: float
    delta_y: float


PanEvent = Union[DragMove, ThrowUpdate, ScrollDelta]


def is_finite_event(event: PanEvent) -> bool:
    """Check that every numeric field of an event is finite."""
    try:
        return all(math.isfinite(getattr(event, f.name)) for f in fields(event))
    except TypeError:
        return False
