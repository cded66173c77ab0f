"""
Qt Multimedia implementation of the AudioHost protocol.
"""

import logging
import math
from typing import Dict

from PySide6.QtMultimedia import QAudioOutput

logger = logging.getLogger(__name__)


def decibels_to_volume(decibels: float) -> float:
    """Convert mixer attenuation in dB back to a linear 0-1 volume."""
    if decibels == -math.inf:
        return 0.0
    return min(1.0, 10 ** (decibels / 20))


class QtAudioHost:
    """Routes named channels to QAudioOutput instances."""

    def __init__(self, outputs: Dict[str, QAudioOutput]):
        self.outputs = dict(outputs)

    def set_channel_level(self, channel: str, decibels: float) -> None:
        output = self.outputs.get(channel)
        if output is None:
            logger.warning(f"Unknown audio channel: {channel}")
            return
        if math.isnan(decibels):
            logger.warning(f"Ignoring undefined level for channel {channel}")
            return
        output.setVolume(decibels_to_volume(decibels))
