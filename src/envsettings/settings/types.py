"""
Settings type definitions and exceptions for envsettings.
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import List


class DetailLevel(IntEnum):
    """Resolution quality tier, ordered from highest to lowest quality."""
    MAX = 0
    HIGH = 1
    MIDDLE = 2
    LOW = 3

    @property
    def label(self) -> str:
        """Human-readable name ("Max", "High", ...)."""
        return self.name.capitalize()


class SettingsError(Exception):
    """Base error for settings storage."""
    pass


class SettingsSaveError(SettingsError):
    """Raised when the settings file cannot be written."""
    pass


class RecordFormatError(SettingsError):
    """Raised when a persisted document does not describe a settings record."""
    pass


@dataclass
class ValidationResult:
    """Result of settings validation."""
    is_valid: bool
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
