"""
Persisted settings record and its JSON encoding.

The file holds a single JSON object with exactly these keys::

    {"musicVolume": 1.0, "soundVolume": 1.0, "resolutionLevel": 0,
     "fullScreen": true, "postProcessing": true}

Any other shape is rejected as a whole; there is no partial recovery.
"""

from dataclasses import dataclass
from typing import Any, Dict

import orjson

from .types import DetailLevel, RecordFormatError

# JSON key -> record attribute
FIELD_NAMES: Dict[str, str] = {
    "musicVolume": "music_volume",
    "soundVolume": "sound_volume",
    "resolutionLevel": "resolution_level",
    "fullScreen": "full_screen",
    "postProcessing": "post_processing",
}


@dataclass
class SettingsRecord:
    """User presentation preferences that survive restarts."""
    music_volume: float = 1.0
    sound_volume: float = 1.0
    resolution_level: DetailLevel = DetailLevel.MAX
    full_screen: bool = False
    post_processing: bool = True

    @classmethod
    def default(cls, full_screen: bool = False) -> "SettingsRecord":
        """Fresh record with safe defaults.

        Args:
            full_screen: Host's current full-screen state
        """
        return cls(full_screen=full_screen)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "musicVolume": self.music_volume,
            "soundVolume": self.sound_volume,
            "resolutionLevel": int(self.resolution_level),
            "fullScreen": self.full_screen,
            "postProcessing": self.post_processing,
        }

    @classmethod
    def from_dict(cls, data: Any) -> "SettingsRecord":
        """Build a record from a decoded JSON object.

        Values are taken verbatim; only the document shape and value types
        are checked.

        Raises:
            RecordFormatError: If keys are missing, unknown or mistyped
        """
        if not isinstance(data, dict):
            raise RecordFormatError(f"Expected a JSON object, got {type(data).__name__}")

        keys = set(data)
        expected = set(FIELD_NAMES)
        if keys != expected:
            missing = sorted(expected - keys)
            unknown = sorted(keys - expected)
            raise RecordFormatError(f"Bad settings keys (missing: {missing}, unknown: {unknown})")

        for key in ("musicVolume", "soundVolume"):
            value = data[key]
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise RecordFormatError(f"{key} must be a number, got {value!r}")
        for key in ("fullScreen", "postProcessing"):
            if not isinstance(data[key], bool):
                raise RecordFormatError(f"{key} must be a boolean, got {data[key]!r}")

        level = data["resolutionLevel"]
        if isinstance(level, bool) or not isinstance(level, int):
            raise RecordFormatError(f"resolutionLevel must be an integer, got {level!r}")
        try:
            resolution_level = DetailLevel(level)
        except ValueError as e:
            raise RecordFormatError(f"resolutionLevel out of range: {level}") from e

        return cls(
            music_volume=float(data["musicVolume"]),
            sound_volume=float(data["soundVolume"]),
            resolution_level=resolution_level,
            full_screen=data["fullScreen"],
            post_processing=data["postProcessing"],
        )

    def to_json(self) -> bytes:
        """Serialize to UTF-8 JSON bytes."""
        return orjson.dumps(self.to_dict(), option=orjson.OPT_INDENT_2)

    @classmethod
    def from_json(cls, raw: bytes) -> "SettingsRecord":
        """Parse UTF-8 JSON bytes.

        Raises:
            RecordFormatError: If the bytes are not valid JSON or not a record
        """
        try:
            data = orjson.loads(raw)
        except orjson.JSONDecodeError as e:
            raise RecordFormatError(f"Invalid JSON: {e}") from e
        return cls.from_dict(data)
