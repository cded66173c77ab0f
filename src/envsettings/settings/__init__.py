"""
Settings package for envsettings.

Usage:
    from envsettings.settings import SettingsStore, DetailLevel

    store = SettingsStore(path, display, audio, catalog)
    store.load()
    store.apply()
    store.set_resolution_level(DetailLevel.HIGH)
"""

from .types import (
    DetailLevel,
    RecordFormatError,
    SettingsError,
    SettingsSaveError,
    ValidationResult,
)
from .record import SettingsRecord
from .store import SettingsStore
from .validation import SettingsValidator
from .logging import LoggingSettings

__all__ = [
    "DetailLevel",
    "RecordFormatError",
    "SettingsError",
    "SettingsSaveError",
    "ValidationResult",
    "SettingsRecord",
    "SettingsStore",
    "SettingsValidator",
    "LoggingSettings",
]
