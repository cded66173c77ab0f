"""
Settings validation for envsettings.

Loading never validates values; this report is for callers that want to
surface suspicious data (e.g. in a log at startup).
"""

import logging
import math
from typing import List

from .record import SettingsRecord
from .types import ValidationResult

logger = logging.getLogger(__name__)


class SettingsValidator:
    """Validates a settings record without modifying it."""

    def validate(self, record: SettingsRecord) -> ValidationResult:
        """Check value ranges of a record."""
        errors: List[str] = []
        warnings: List[str] = []

        for name, value in (
            ("music_volume", record.music_volume),
            ("sound_volume", record.sound_volume),
        ):
            if math.isnan(value):
                errors.append(f"{name} is not a number")
            elif value <= 0:
                warnings.append(f"{name} is {value}, channel will be muted (-inf dB)")
            elif value > 1:
                warnings.append(f"{name} is {value}, above the 0-1 range")

        if errors or warnings:
            logger.debug(f"Settings validation: {len(errors)} errors, {len(warnings)} warnings")

        return ValidationResult(
            is_valid=len(errors) == 0, errors=errors, warnings=warnings
        )
