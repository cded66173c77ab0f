"""
Qt implementation of the DisplayHost protocol.

Qt does not expose the display modes of a monitor, so the supported list is
a table of common window sizes that fit on the primary screen, plus the
screen's own size as the last (largest) entry.
"""

import logging
from typing import List, Optional

from PySide6.QtCore import QObject, Signal
from PySide6.QtGui import QGuiApplication, QScreen, QWindow

from ..display.models import Resolution

logger = logging.getLogger(__name__)

# Ascending by area
COMMON_MODES: List[Resolution] = [
    Resolution(640, 480),
    Resolution(800, 600),
    Resolution(1024, 768),
    Resolution(1280, 720),
    Resolution(1280, 800),
    Resolution(1280, 1024),
    Resolution(1366, 768),
    Resolution(1440, 900),
    Resolution(1600, 900),
    Resolution(1680, 1050),
    Resolution(1600, 1200),
    Resolution(1920, 1080),
    Resolution(1920, 1200),
    Resolution(2560, 1080),
    Resolution(2560, 1440),
    Resolution(2560, 1600),
    Resolution(3440, 1440),
    Resolution(3840, 2160),
]


class QtDisplayHost(QObject):
    """Applies display settings to a top-level QWindow.

    Brightness has no Qt API; the value is kept here and announced through
    ``brightness_changed`` for the renderer to apply.
    """

    resolution_applied = Signal(int, int)
    brightness_changed = Signal(float)

    def __init__(self, window: QWindow, screen: Optional[QScreen] = None):
        super().__init__(window)
        self.window = window
        self._screen = screen
        self._full_screen = window.visibility() == QWindow.Visibility.FullScreen
        self._brightness = 1.0

    @property
    def screen(self) -> QScreen:
        """Screen the window lives on (primary screen by default)."""
        if self._screen is not None:
            return self._screen
        return self.window.screen() or QGuiApplication.primaryScreen()

    def current_resolution(self) -> Resolution:
        size = self.screen.size()
        return Resolution(size.width(), size.height())

    def supported_resolutions(self) -> List[Resolution]:
        """Common modes that fit the screen, ascending, native size last."""
        native = self.current_resolution()
        modes = [
            mode for mode in COMMON_MODES
            if mode.width <= native.width and mode.height <= native.height and mode != native
        ]
        modes.sort(key=lambda mode: (mode.area, mode.width))
        modes.append(native)
        return modes

    def apply_resolution(self, width: int, height: int, full_screen: bool) -> None:
        self.set_full_screen(full_screen)
        if not full_screen:
            self.window.resize(width, height)
        self.resolution_applied.emit(width, height)
        logger.debug(f"Applied resolution {width} x {height} (full screen: {full_screen})")

    def is_full_screen(self) -> bool:
        return self._full_screen

    def set_full_screen(self, on: bool) -> None:
        self._full_screen = on
        if on:
            self.window.showFullScreen()
        else:
            self.window.showNormal()

    def brightness(self) -> float:
        return self._brightness

    def set_brightness(self, value: float) -> None:
        self._brightness = value
        self.brightness_changed.emit(value)
