"""Shared fixtures: offscreen Qt application and in-memory host collaborators."""

import os
from typing import Iterator

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PySide6.QtGui import QGuiApplication  # noqa: E402

from envsettings.display import ResolutionCatalog  # noqa: E402
from envsettings.settings import SettingsStore  # noqa: E402

from fakes import FakeAudio, FakeDisplay, LADDER_MODES, MemoryFileStore, SETTINGS_PATH  # noqa: E402


@pytest.fixture(scope="session")
def qapp() -> Iterator[QGuiApplication]:
    app = QGuiApplication.instance() or QGuiApplication([])
    yield app  # type: ignore[misc]


@pytest.fixture
def display() -> FakeDisplay:
    return FakeDisplay(LADDER_MODES)


@pytest.fixture
def audio() -> FakeAudio:
    return FakeAudio()


@pytest.fixture
def files() -> MemoryFileStore:
    return MemoryFileStore()


@pytest.fixture
def store(qapp, display, audio, files) -> SettingsStore:
    catalog = ResolutionCatalog(display)
    return SettingsStore(SETTINGS_PATH, display, audio, catalog, file_store=files)
