"""
Settings file location for envsettings.
"""

from pathlib import Path
from typing import Optional

from PySide6.QtCore import QStandardPaths

SETTINGS_FILE_NAME = "EnviromentSettings.json"


def data_directory() -> Path:
    """Per-user writable data directory for the running application."""
    location = QStandardPaths.writableLocation(
        QStandardPaths.StandardLocation.AppDataLocation
    )
    return Path(location) if location else Path.home() / ".envsettings"


def default_settings_path(directory: Optional[Path] = None) -> Path:
    """Path of the persisted settings file.

    Args:
        directory: Override for the data directory (default: app data location)
    """
    return (directory or data_directory()) / SETTINGS_FILE_NAME
