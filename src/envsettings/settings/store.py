"""
Settings state store for envsettings.

Single owner of the persisted settings record. Every setter runs the same
pipeline::

    mutate record -> host side effect -> save -> typed signal -> changed

Brightness is the exception: it is applied and signalled but never saved,
and it does not emit ``changed``.
"""

import logging
import math
from contextlib import contextmanager
from pathlib import Path
from typing import TYPE_CHECKING, Callable, Iterator, Optional

from PySide6.QtCore import QObject, Signal, SignalInstance

from ..host.file_store import LocalFileStore
from .record import SettingsRecord
from .types import DetailLevel, SettingsError, SettingsSaveError

if TYPE_CHECKING:
    from ..display.catalog import ResolutionCatalog
    from ..host.protocols import AudioHost, DisplayHost, FileStore

logger = logging.getLogger(__name__)

MUSIC_CHANNEL = "Music"
SOUND_CHANNEL = "Sound"


def volume_to_decibels(volume: float) -> float:
    """Convert a linear 0-1 volume to mixer attenuation in dB.

    ``0`` maps to ``-inf``; negative input yields ``nan``. Keeping volume
    sliders above zero is up to the caller.
    """
    if volume == 0:
        return -math.inf
    if volume < 0:
        return math.nan
    return 20 * math.log10(volume)


class SettingsStore(QObject):
    """
    Loads, saves and applies presentation settings.

    The store is created by the composition root and passed to whoever needs
    it. Listeners connect to the signals below and must disconnect when torn
    down; :meth:`subscribe` does both for the generic ``changed`` signal.
    """

    music_volume_changed = Signal(float)
    sound_volume_changed = Signal(float)
    resolution_level_changed = Signal(object)  # DetailLevel
    full_screen_changed = Signal(bool)
    post_processing_changed = Signal(bool)
    brightness_changed = Signal(float)
    changed = Signal()

    def __init__(
        self,
        path: Path,
        display: "DisplayHost",
        audio: "AudioHost",
        catalog: "ResolutionCatalog",
        file_store: Optional["FileStore"] = None,
        parent: Optional[QObject] = None,
    ):
        """Initialize the store with its collaborators.

        The record starts out as defaults; call :meth:`load` to read the file.

        Args:
            path: Settings file location
            display: Host display subsystem
            audio: Host audio mixer
            catalog: Resolution catalog of the same display
            file_store: File access (default: local filesystem)
            parent: Optional Qt parent
        """
        super().__init__(parent)
        self.path = Path(path)
        self.display = display
        self.audio = audio
        self.catalog = catalog
        self.file_store = file_store or LocalFileStore()
        self._record = self._default_record()

    @property
    def record(self) -> SettingsRecord:
        """Current in-memory settings (authoritative over the file)."""
        return self._record

    def _default_record(self) -> SettingsRecord:
        return SettingsRecord.default(full_screen=self.display.is_full_screen())

    # === PERSISTENCE ===

    def load(self) -> SettingsRecord:
        """Read the settings file, falling back to defaults.

        Never raises: a missing, unreadable or malformed file yields a fresh
        default record.
        """
        try:
            if not self.file_store.exists(self.path):
                logger.info(f"No settings file at {self.path}, using defaults")
                self._record = self._default_record()
                return self._record

            raw = self.file_store.read_all(self.path)
            self._record = SettingsRecord.from_json(raw)
            logger.debug(f"Settings loaded from {self.path}")
        except SettingsError as e:
            logger.warning(f"Corrupt settings file {self.path}: {e}, using defaults")
            self._record = self._default_record()
        except Exception as e:
            logger.warning(f"Could not read settings file {self.path}: {e}, using defaults")
            self._record = self._default_record()
        return self._record

    def save(self, record: Optional[SettingsRecord] = None) -> None:
        """Write the full record to the settings file.

        Args:
            record: Record to write (default: current record)

        Raises:
            SettingsSaveError: If the file cannot be written
        """
        data = (record or self._record).to_json()
        try:
            self.file_store.ensure_directory(self.path.parent)
            self.file_store.write_all(self.path, data)
        except Exception as e:
            raise SettingsSaveError(f"Error while saving settings to {self.path}: {e}") from e
        logger.debug(f"Settings saved to {self.path}")

    # === AUDIO ===

    def set_music_volume(self, volume: float) -> None:
        """Set music volume (0-1, stored verbatim)."""
        self._record.music_volume = volume
        self.audio.set_channel_level(MUSIC_CHANNEL, volume_to_decibels(volume))
        self._value_changed(self.music_volume_changed, volume)

    def set_sound_volume(self, volume: float) -> None:
        """Set sound effects volume (0-1, stored verbatim)."""
        self._record.sound_volume = volume
        self.audio.set_channel_level(SOUND_CHANNEL, volume_to_decibels(volume))
        self._value_changed(self.sound_volume_changed, volume)

    # === SCREEN ===

    def set_resolution_level(self, level: DetailLevel) -> None:
        """Switch to the resolution of a detail level."""
        level = DetailLevel(level)
        resolution = self.catalog.resolution_for(level)
        self._record.resolution_level = level
        self.display.apply_resolution(
            resolution.width, resolution.height, self.display.is_full_screen()
        )
        logger.debug(f"Resolution level {level.label}: {resolution}")
        self._value_changed(self.resolution_level_changed, level)

    def set_full_screen(self, on: bool) -> None:
        self._record.full_screen = on
        self.display.set_full_screen(on)
        self._value_changed(self.full_screen_changed, on)

    def set_post_processing(self, on: bool) -> None:
        self._record.post_processing = on
        self._value_changed(self.post_processing_changed, on)

    def set_brightness(self, value: float) -> None:
        """Apply screen brightness, clamped to 0-1. Not persisted."""
        value = max(0.0, min(1.0, value))
        self.display.set_brightness(value)
        self.brightness_changed.emit(value)

    def brightness(self) -> float:
        """Current host brightness."""
        return self.display.brightness()

    def _value_changed(self, signal: SignalInstance, value: object) -> None:
        """Persist, then emit the typed signal and ``changed``."""
        try:
            self.save()
        except SettingsSaveError as e:
            logger.error(str(e))
        signal.emit(value)
        self.changed.emit()

    # === LIFECYCLE ===

    def apply(self) -> None:
        """Push every stored value to the host (startup sequence)."""
        record = self._record
        self.set_music_volume(record.music_volume)
        self.set_sound_volume(record.sound_volume)
        self.set_resolution_level(record.resolution_level)
        self.set_full_screen(record.full_screen)
        self.set_post_processing(record.post_processing)

    @contextmanager
    def subscribe(self, callback: Callable[[], None]) -> Iterator[None]:
        """Connect ``callback`` to ``changed`` for the duration of a block."""
        self.changed.connect(callback)
        try:
            yield
        finally:
            self.changed.disconnect(callback)
