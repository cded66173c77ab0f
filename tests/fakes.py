"""In-memory host collaborators for tests."""

from pathlib import Path
from typing import Dict, List, Optional, Sequence, Tuple

from envsettings.display import Resolution


class FakeDisplay:
    """DisplayHost that records every call."""

    def __init__(
        self,
        resolutions: Sequence[Resolution] = (),
        current: Resolution = Resolution(1280, 720),
        full_screen: bool = False,
    ):
        self.resolutions = list(resolutions)
        self.current = current
        self.full_screen = full_screen
        self.level = 1.0
        self.calls: List[Tuple[str, tuple]] = []

    def supported_resolutions(self) -> List[Resolution]:
        return list(self.resolutions)

    def current_resolution(self) -> Resolution:
        return self.current

    def apply_resolution(self, width: int, height: int, full_screen: bool) -> None:
        self.calls.append(("apply_resolution", (width, height, full_screen)))

    def is_full_screen(self) -> bool:
        return self.full_screen

    def set_full_screen(self, on: bool) -> None:
        self.full_screen = on
        self.calls.append(("set_full_screen", (on,)))

    def brightness(self) -> float:
        return self.level

    def set_brightness(self, value: float) -> None:
        self.level = value
        self.calls.append(("set_brightness", (value,)))


class FakeAudio:
    """AudioHost that remembers the last level per channel."""

    def __init__(self):
        self.levels: Dict[str, float] = {}

    def set_channel_level(self, channel: str, decibels: float) -> None:
        self.levels[channel] = decibels


class MemoryFileStore:
    """FileStore kept in a dict; can be told to fail writes."""

    def __init__(self, files: Optional[Dict[Path, bytes]] = None):
        self.files: Dict[Path, bytes] = dict(files or {})
        self.directories: List[Path] = []
        self.fail_writes = False
        self.writes = 0

    def exists(self, path: Path) -> bool:
        return path in self.files

    def read_all(self, path: Path) -> bytes:
        return self.files[path]

    def write_all(self, path: Path, data: bytes) -> None:
        if self.fail_writes:
            raise OSError("disk full")
        self.writes += 1
        self.files[path] = data

    def ensure_directory(self, path: Path) -> None:
        self.directories.append(path)


LADDER_MODES = [
    Resolution(800, 600),
    Resolution(1024, 576),
    Resolution(1280, 720),
    Resolution(1280, 1024),
    Resolution(1600, 900),
    Resolution(1920, 1080),
]

SETTINGS_PATH = Path("config") / "EnviromentSettings.json"
