"""Shared fixtures for infinite-grid tests."""

import os
from pathlib import Path

# Widgets are created without a display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PySide6.QtCore import QSettings

from infinite_grid.engine import GridConfig, PanOffset, TileTransform, Velocity


@pytest.fixture
def qsettings(tmp_path: Path) -> QSettings:
    """INI-backed QSettings isolated in a temporary directory."""
    return QSettings(str(tmp_path / "infinite_grid.ini"), QSettings.Format.IniFormat)


@pytest.fixture
def app_settings(qsettings: QSettings):
    """AppSettings on top of the isolated store."""
    from infinite_grid.settings import AppSettings

    return AppSettings(storage=qsettings)


@pytest.fixture
def config() -> GridConfig:
    """The default 15x10 grid of 200px tiles with 50px gaps."""
    return GridConfig(tile_size=200, gap=50, columns=15, rows=10)


class RecordingSink:
    """Render sink keeping detached copies of every batch."""

    def __init__(self) -> None:
        self.batches: list[list[tuple]] = []
        self.buffer_ids: set[int] = set()

    def __call__(self, batch: list[TileTransform]) -> None:
        self.buffer_ids.add(id(batch))
        self.batches.append([transform.as_tuple() for transform in batch])

    @property
    def last(self) -> list[tuple]:
        return self.batches[-1]


class RecordingListener:
    """Tracker listener keeping every (offset, velocity) notification."""

    def __init__(self) -> None:
        self.calls: list[tuple[PanOffset, Velocity]] = []

    def __call__(self, offset: PanOffset, velocity: Velocity) -> None:
        self.calls.append((offset, velocity))


@pytest.fixture
def sink() -> RecordingSink:
    return RecordingSink()


@pytest.fixture
def listener() -> RecordingListener:
    return RecordingListener()
