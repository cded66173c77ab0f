"""Tests for the Qt display and audio adapters (offscreen platform)."""

import math
from typing import List, Tuple

import pytest
from PySide6.QtGui import QWindow
from PySide6.QtMultimedia import QAudioOutput

from envsettings.display import Resolution, build_ladder
from envsettings.host.qt_audio import QtAudioHost, decibels_to_volume
from envsettings.host.qt_display import QtDisplayHost


@pytest.fixture
def window(qapp):
    window = QWindow()
    yield window
    window.destroy()


class TestQtDisplayHost:
    """Test the QWindow-based display host."""

    def test_native_size_last(self, window: QWindow) -> None:
        host = QtDisplayHost(window)
        modes = host.supported_resolutions()
        assert modes[-1] == host.current_resolution()
        assert all(mode.width <= modes[-1].width and mode.height <= modes[-1].height for mode in modes)

    def test_ladder_from_host(self, window: QWindow) -> None:
        host = QtDisplayHost(window)
        ladder = build_ladder(host.supported_resolutions())
        assert ladder[0] == host.current_resolution()

    def test_apply_windowed_resolution(self, window: QWindow) -> None:
        host = QtDisplayHost(window)
        applied: List[Tuple[int, int]] = []
        host.resolution_applied.connect(lambda w, h: applied.append((w, h)))

        host.apply_resolution(640, 480, False)

        assert applied == [(640, 480)]
        assert host.is_full_screen() is False

    def test_full_screen_flag(self, window: QWindow) -> None:
        host = QtDisplayHost(window)
        host.set_full_screen(True)
        assert host.is_full_screen() is True
        host.set_full_screen(False)
        assert host.is_full_screen() is False

    def test_brightness_signal(self, window: QWindow) -> None:
        host = QtDisplayHost(window)
        values: List[float] = []
        host.brightness_changed.connect(values.append)
        host.set_brightness(0.4)
        assert host.brightness() == pytest.approx(0.4)
        assert values == [pytest.approx(0.4)]


class TestQtAudioHost:
    """Test dB to QAudioOutput volume routing."""

    def test_decibels_to_volume(self) -> None:
        assert decibels_to_volume(0.0) == 1.0
        assert decibels_to_volume(-20.0) == pytest.approx(0.1)
        assert decibels_to_volume(-math.inf) == 0.0
        assert decibels_to_volume(6.0) == 1.0

    def test_channel_volume(self, qapp) -> None:
        music = QAudioOutput()
        host = QtAudioHost({"Music": music})
        host.set_channel_level("Music", -20.0)
        assert music.volume() == pytest.approx(0.1, abs=1e-3)

    def test_unknown_channel_ignored(self, qapp) -> None:
        host = QtAudioHost({})
        host.set_channel_level("Voice", -6.0)

    def test_undefined_level_ignored(self, qapp) -> None:
        music = QAudioOutput()
        music.setVolume(0.5)
        host = QtAudioHost({"Music": music})
        host.set_channel_level("Music", math.nan)
        assert music.volume() == pytest.approx(0.5)
