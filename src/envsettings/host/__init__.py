"""
Host collaborators: protocols and their local/Qt implementations.

The Qt adapters are imported from their modules directly so that the core
does not pull in QtGui or QtMultimedia.
"""

from .protocols import AudioHost, DisplayHost, FileStore
from .file_store import LocalFileStore

__all__ = ["AudioHost", "DisplayHost", "FileStore", "LocalFileStore"]
