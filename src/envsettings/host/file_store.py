"""
Local filesystem implementation of the FileStore protocol.
"""

from pathlib import Path


class LocalFileStore:
    """Reads and writes whole files on the local disk.

    Writes go straight to the target path (no temp file and rename).
    """

    def exists(self, path: Path) -> bool:
        return path.is_file()

    def read_all(self, path: Path) -> bytes:
        with path.open("rb") as f:
            return f.read()

    def write_all(self, path: Path, data: bytes) -> None:
        with path.open("wb") as f:
            f.write(data)

    def ensure_directory(self, path: Path) -> None:
        """Create the directory (and parents) if missing."""
        path.mkdir(parents=True, exist_ok=True)
