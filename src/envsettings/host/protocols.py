"""
Host collaborators used by the settings store.

The store only calls into these; it never polls or subscribes. Concrete Qt
adapters live in :mod:`envsettings.host.qt_display` and
:mod:`envsettings.host.qt_audio`.
"""

from pathlib import Path
from typing import Protocol, Sequence

from ..display.models import Resolution


class DisplayHost(Protocol):
    """Display subsystem of the running application."""

    def supported_resolutions(self) -> Sequence[Resolution]:
        """All resolutions the device supports, expected in ascending order."""
        ...

    def current_resolution(self) -> Resolution: ...

    def apply_resolution(self, width: int, height: int, full_screen: bool) -> None: ...

    def is_full_screen(self) -> bool: ...

    def set_full_screen(self, on: bool) -> None: ...

    def brightness(self) -> float: ...

    def set_brightness(self, value: float) -> None: ...


class AudioHost(Protocol):
    """Audio mixer owning named channels."""

    def set_channel_level(self, channel: str, decibels: float) -> None: ...


class FileStore(Protocol):
    """Byte-oriented file access."""

    def exists(self, path: Path) -> bool: ...

    def read_all(self, path: Path) -> bytes: ...

    def write_all(self, path: Path, data: bytes) -> None: ...

    def ensure_directory(self, path: Path) -> None: ...
