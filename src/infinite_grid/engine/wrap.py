"""Periodic wrap-around for tile positions."""

from typing import Callable


def wrap(period: float) -> Callable[[float], float]:
    """Build a function folding any value into [-period/2, period/2).

    Uses true modulo, so negative values and values many periods away
    land in the same window. With the period equal to the grid extent
    the tiling repeats seamlessly.

    Args:
        period: Length of the repeating range, must be positive

    Returns:
        Function mapping a value to its wrapped equivalent
    """
    if not period > 0:
        raise ValueError(f"Wrap period must be positive, got {period}")

    low = -period / 2
    high = period / 2

    def wrap_value(value: float) -> float:
        if low <= value < high:
            return value
        wrapped = low + (value - low) % period
        # Float modulo of a tiny negative rounds up to the period itself
        if wrapped >= high:
            wrapped -= period
        return wrapped

    return wrap_value
