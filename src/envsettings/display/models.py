"""
Display value types for envsettings.
"""

from typing import NamedTuple


class Resolution(NamedTuple):
    """A width/height pair as reported by the host display subsystem."""

    width: int
    height: int

    @property
    def area(self) -> int:
        """Surface in pixels."""
        return self.width * self.height

    def __str__(self) -> str:
        return f"{self.width} x {self.height}"
