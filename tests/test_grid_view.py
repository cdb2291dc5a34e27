"""Tests for the grid view: input conversion, tile transforms and wiring."""

import math

import pytest
from PySide6.QtCore import QEvent, QPoint, QPointF, QSize, Qt
from PySide6.QtGui import QKeyEvent, QMouseEvent, QResizeEvent, QWheelEvent

from infinite_grid.engine import GridConfig, PanOffset, ScrollDelta, TileTransform, Velocity
from infinite_grid.gui.grid_view import GridView
from infinite_grid.gui.grid_view.events import wheel_scroll_delta
from infinite_grid.gui.grid_view.tile_items import tile_qtransform

TILE = 100.0
HALF = TILE / 2


def wheel_event(pixel: tuple[int, int] = (0, 0), angle: tuple[int, int] = (0, 0)) -> QWheelEvent:
    return QWheelEvent(
        QPointF(10, 10),
        QPointF(10, 10),
        QPoint(*pixel),
        QPoint(*angle),
        Qt.MouseButton.NoButton,
        Qt.KeyboardModifier.NoModifier,
        Qt.ScrollPhase.NoScrollPhase,
        False,
    )


def mouse_event(kind: QEvent.Type, x: float, y: float) -> QMouseEvent:
    buttons = Qt.MouseButton.NoButton if kind == QEvent.Type.MouseButtonRelease else Qt.MouseButton.LeftButton
    return QMouseEvent(
        kind,
        QPointF(x, y),
        QPointF(x, y),
        Qt.MouseButton.LeftButton,
        buttons,
        Qt.KeyboardModifier.NoModifier,
    )


def mapped(transform: TileTransform, x: float, y: float) -> tuple[float, float]:
    point = tile_qtransform(transform, TILE).map(QPointF(x, y))
    return (point.x(), point.y())


class TestWheelConversion:
    """Wheel and touchpad deltas become scroll deltas."""

    def test_notch_down_scrolls_down_by_100(self, qapp) -> None:
        # Qt reports a negative angle when the wheel turns towards the user
        assert wheel_scroll_delta(wheel_event(angle=(0, -120))) == ScrollDelta(0, 100)

    def test_partial_notch_is_proportional(self, qapp) -> None:
        assert wheel_scroll_delta(wheel_event(angle=(60, 60))) == ScrollDelta(-50, -50)

    def test_pixel_delta_wins_over_angle(self, qapp) -> None:
        event = wheel_event(pixel=(3, -7), angle=(0, -120))
        assert wheel_scroll_delta(event) == ScrollDelta(-3, 7)


class TestTileTransform:
    """Skew and stretch as an item-local QTransform."""

    def test_rest_is_identity(self) -> None:
        transform = TileTransform(index=0)
        assert mapped(transform, 10, 90) == (10, 90)

    def test_center_is_fixed(self) -> None:
        transform = TileTransform(index=0, skew_x=20, skew_y=-10, scale_x=1.5, scale_y=1.2)
        x, y = mapped(transform, HALF, HALF)
        assert (x, y) == (pytest.approx(HALF), pytest.approx(HALF))

    def test_skew_is_in_degrees(self) -> None:
        transform = TileTransform(index=0, skew_x=45)
        x, y = mapped(transform, HALF, HALF + 10)
        assert (x, y) == (pytest.approx(HALF + 10), pytest.approx(HALF + 10))

    def test_vertical_skew(self) -> None:
        transform = TileTransform(index=0, skew_y=30)
        x, y = mapped(transform, HALF + 10, HALF)
        assert x == pytest.approx(HALF + 10)
        assert y == pytest.approx(HALF + 10 * math.tan(math.radians(30)))

    def test_stretch_applies_before_skew(self) -> None:
        # local (10, 10) -> stretched (20, 10) -> sheared (30, 10)
        transform = TileTransform(index=0, skew_x=45, scale_x=2.0)
        x, y = mapped(transform, HALF + 10, HALF + 10)
        assert (x, y) == (pytest.approx(HALF + 30), pytest.approx(HALF + 10))


@pytest.fixture
def view(qtbot) -> GridView:
    grid_view = GridView(GridConfig(tile_size=TILE, gap=10, columns=4, rows=3))
    qtbot.addWidget(grid_view)
    grid_view.resize(400, 300)
    yield grid_view
    grid_view.throw_controller.stop()


class TestGridView:
    """Input wiring from Qt events to the tracker and tile items."""

    def test_tiles_are_rendered_on_creation(self, view: GridView) -> None:
        assert len(view.renderer.items) == 12
        assert len(view.scene().items()) >= 12

    def test_drag_moves_tiles(self, view: GridView) -> None:
        view.mousePressEvent(mouse_event(QEvent.Type.MouseButtonPress, 50, 50))
        view.mouseMoveEvent(mouse_event(QEvent.Type.MouseMove, 80, 60))

        assert view.tracker.offset == PanOffset(30, 10)
        assert view.tracker.velocity == Velocity(30, 10)
        first = view.renderer.items[0]
        assert (first.pos().x(), first.pos().y()) == (30, 10)
        assert first.transform().m11() > 1

    def test_wheel_scrolls_content_up(self, view: GridView) -> None:
        view.wheelEvent(wheel_event(angle=(0, -120)))
        assert view.tracker.offset == PanOffset(0, -100)

    def test_home_key_recenters(self, view: GridView) -> None:
        view.wheelEvent(wheel_event(angle=(120, 120)))
        view.keyPressEvent(QKeyEvent(QEvent.Type.KeyPress, Qt.Key.Key_Home, Qt.KeyboardModifier.NoModifier))
        assert view.tracker.offset == PanOffset(0, 0)
        assert (view.proxy.x, view.proxy.y) == (0, 0)


class TestResize:
    """A resize at rest refreshes the fade without moving anything."""

    def _resize(self, view: GridView) -> None:
        view.resizeEvent(QResizeEvent(QSize(500, 400), QSize(400, 300)))

    def test_resize_at_rest_re_emits_offset(self, view: GridView, listener) -> None:
        view.tracker.scroll(ScrollDelta(5, 5))
        view.tracker.add_listener(listener)

        self._resize(view)

        assert listener.calls == [(PanOffset(-5, -5), Velocity(0, 0))]

    def test_resize_while_dragging_does_not_re_emit(self, view: GridView, listener) -> None:
        view.tracker.add_listener(listener)
        view.proxy.press(0, 0)

        self._resize(view)

        assert listener.calls == []

    def test_resize_during_throw_does_not_re_emit(self, view: GridView, listener) -> None:
        view.proxy.press(0, 0)
        view.tracker.drag_move(view.proxy.move(40, 0))
        assert view.proxy.release()
        view.throw_controller.start()
        view.tracker.add_listener(listener)

        self._resize(view)

        assert view.throw_controller.is_active()
        assert listener.calls == []
