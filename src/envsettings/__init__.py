"""
envsettings: persisted presentation settings for Qt applications

Music/sound volume, resolution detail level, full screen, post-processing
and brightness, applied to the running application and saved as JSON.
"""

__version__ = "0.1.0"
__author__ = "envsettings Contributors"

from .display import AspectRatio, Resolution, ResolutionCatalog
from .settings import DetailLevel, SettingsRecord, SettingsStore
from .utils.logging_config import setup_logging

__all__ = [
    # Display
    'AspectRatio',
    'Resolution',
    'ResolutionCatalog',

    # Settings
    'DetailLevel',
    'SettingsRecord',
    'SettingsStore',

    # Logging
    'setup_logging',
]
