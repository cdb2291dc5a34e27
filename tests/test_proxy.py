"""Tests for the drag proxy and its inertial throw."""

import math

import pytest

from infinite_grid.engine import DragMove, DragProxy, PanOffset, PanOffsetTracker, ScrollDelta, ThrowUpdate


class FakeClock:
    """Manually advanced time source."""

    def __init__(self) -> None:
        self.now = 100.0

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class TestDragging:
    """Pointer following."""

    def test_move_without_press_is_ignored(self) -> None:
        proxy = DragProxy()
        assert proxy.move(10, 10) is None
        assert (proxy.x, proxy.y) == (0, 0)

    def test_moves_accumulate_pointer_deltas(self) -> None:
        proxy = DragProxy()
        proxy.press(100, 100)

        first = proxy.move(110, 95)
        second = proxy.move(130, 95)

        assert first == DragMove(10, -5, 10, -5)
        assert second == DragMove(30, -5, 20, 0)
        assert proxy.is_dragging

    def test_slow_release_does_not_throw(self) -> None:
        proxy = DragProxy()
        proxy.press(0, 0)
        proxy.move(0.05, 0)

        assert proxy.release() is False
        assert not proxy.is_throwing
        assert not proxy.is_dragging

    def test_release_without_drag(self) -> None:
        assert DragProxy().release() is False

    def test_release_after_pause_does_not_throw(self) -> None:
        clock = FakeClock()
        proxy = DragProxy(clock=clock)
        proxy.press(0, 0)
        proxy.move(20, 0)

        clock.advance(1.0)

        assert proxy.release() is False
        assert not proxy.is_throwing
        assert proxy.step() is None

    def test_release_right_after_move_throws(self) -> None:
        clock = FakeClock()
        proxy = DragProxy(clock=clock)
        proxy.press(0, 0)
        proxy.move(20, 0)

        clock.advance(DragProxy.RELEASE_WINDOW / 2)

        assert proxy.release() is True
        assert proxy.is_throwing


class TestThrow:
    """Inertial release."""

    def _thrown(self, speed: float = 20.0) -> DragProxy:
        proxy = DragProxy(clock=FakeClock())
        proxy.press(0, 0)
        proxy.move(speed, 0)
        assert proxy.release()
        return proxy

    def test_throw_continues_in_release_direction(self) -> None:
        proxy = self._thrown()

        update = proxy.step()

        assert isinstance(update, ThrowUpdate)
        assert update.delta_x == pytest.approx(20 * DragProxy.FRICTION)
        assert update.x == pytest.approx(20 + 20 * DragProxy.FRICTION)
        assert update.delta_y == 0

    def test_throw_decays_to_rest(self) -> None:
        proxy = self._thrown()
        speeds: list[float] = []

        for _ in range(500):
            update = proxy.step()
            if update is None:
                break
            speeds.append(abs(update.delta_x))

        assert not proxy.is_throwing
        assert proxy.step() is None
        assert speeds == sorted(speeds, reverse=True)
        assert speeds[-1] >= DragProxy.REST_SPEED
        # geometric series bound on the total glide
        assert proxy.x < 20 + 20 * DragProxy.FRICTION / (1 - DragProxy.FRICTION)

    def test_press_interrupts_throw(self) -> None:
        proxy = self._thrown()
        proxy.step()

        proxy.press(5, 5)

        assert not proxy.is_throwing
        assert proxy.step() is None

    def test_cancel_throw(self) -> None:
        proxy = self._thrown()
        proxy.cancel_throw()
        assert proxy.step() is None


class TestResync:
    """Out-of-band offset changes."""

    def test_sync_moves_origin_of_next_drag(self) -> None:
        proxy = DragProxy()
        proxy.press(0, 0)
        proxy.move(10, 10)

        proxy.sync(PanOffset(-40, 60))
        drag = proxy.move(15, 10)

        assert drag == DragMove(-35, 60, 5, 0)

    def test_scroll_during_throw_keeps_gliding_from_new_position(self) -> None:
        tracker = PanOffsetTracker()
        proxy = DragProxy(clock=FakeClock())
        tracker.add_sync_listener(proxy.sync)

        proxy.press(0, 0)
        tracker.drag_move(proxy.move(30, 0))
        assert proxy.release()

        tracker.scroll(ScrollDelta(100, 0))
        assert (proxy.x, proxy.y) == (-70, 0)

        update = proxy.step()
        assert update is not None
        assert tracker.throw_update(update)
        assert tracker.offset.x == pytest.approx(-70 + 30 * DragProxy.FRICTION)
        assert math.isclose(tracker.velocity.vx, 30 * DragProxy.FRICTION)
