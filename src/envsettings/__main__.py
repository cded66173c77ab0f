"""
Entry point for envsettings.
Usage: python -m envsettings

Opens an empty window, applies the persisted settings to it and logs the
resolution ladder. Closing the window exits.
"""

import sys
import logging

from PySide6.QtGui import QGuiApplication, QWindow
from PySide6.QtMultimedia import QAudioOutput

from . import __version__
from .display import ResolutionCatalog
from .host.qt_audio import QtAudioHost
from .host.qt_display import QtDisplayHost
from .settings import LoggingSettings, SettingsStore, SettingsValidator
from .settings.paths import default_settings_path
from .settings.store import MUSIC_CHANNEL, SOUND_CHANNEL
from .utils.logging_config import setup_logging


def main() -> int:
    """Main application entry point."""
    logger = logging.getLogger(f"{__name__}.main")

    app = QGuiApplication(sys.argv)
    app.setApplicationName("envsettings")
    app.setApplicationVersion(__version__)
    app.setOrganizationName("pospec")

    setup_logging(LoggingSettings())

    try:
        window = QWindow()
        window.setTitle(f"envsettings {__version__}")

        display = QtDisplayHost(window)
        audio = QtAudioHost({
            MUSIC_CHANNEL: QAudioOutput(app),
            SOUND_CHANNEL: QAudioOutput(app),
        })
        catalog = ResolutionCatalog(display)
        store = SettingsStore(default_settings_path(), display, audio, catalog, parent=app)

        record = store.load()
        logger.info(f"Settings loaded from {store.path}")

        validation = SettingsValidator().validate(record)
        for warning in validation.warnings:
            logger.warning(f"  {warning}")
        for error in validation.errors:
            logger.error(f"  {error}")

        if catalog.is_empty:
            logger.warning(f"No resolution ladder, using {display.current_resolution()}")
        for label in catalog.level_labels():
            logger.info(f"  {label}")

        window.show()
        store.apply()
        store.set_brightness(display.brightness())

        logger.info("Settings applied")
        return app.exec()

    except Exception:
        logger.exception("Unhandled exception in main")
        return 1


if __name__ == "__main__":
    sys.exit(main())
