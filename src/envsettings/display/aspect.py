"""
Aspect ratio classification for display resolutions.

Ratios are kept in lowest terms. Matching a resolution against a ratio uses
truncating integer division, which is a heuristic: a resolution passes when
``width // ratio.width == height // ratio.height``. Unusual sizes near a ratio
boundary can be misclassified; no floating point tolerance is applied.
"""

from dataclasses import dataclass

from .models import Resolution


def gcd(a: int, b: int) -> int:
    """Greatest common divisor by repeated modulo of the larger operand."""
    while a != 0 and b != 0:
        if a > b:
            a %= b
        else:
            b %= a
    return a | b


@dataclass(frozen=True)
class AspectRatio:
    """Width:height pair in lowest integer terms."""

    width: int
    height: int

    @classmethod
    def reduce(cls, width: int, height: int) -> "AspectRatio":
        """Reduce a width/height pair to its canonical ratio.

        Args:
            width: Horizontal size in pixels
            height: Vertical size in pixels

        Returns:
            AspectRatio with co-prime components

        Raises:
            ValueError: If either dimension is zero
        """
        if width <= 0 or height <= 0:
            raise ValueError(f"Cannot reduce degenerate resolution {width}x{height}")
        divisor = gcd(width, height)
        return cls(width // divisor, height // divisor)

    @classmethod
    def of(cls, resolution: Resolution) -> "AspectRatio":
        """Ratio of a resolution."""
        return cls.reduce(resolution.width, resolution.height)

    def matches(self, candidate: Resolution) -> bool:
        """Check whether a resolution shares this ratio (integer heuristic)."""
        return candidate.width // self.width == candidate.height // self.height

    def to_float(self) -> float:
        return self.width / self.height

    def __str__(self) -> str:
        return f"{self.width}:{self.height}"


def reduce(width: int, height: int) -> AspectRatio:
    """Module-level shortcut for :meth:`AspectRatio.reduce`."""
    return AspectRatio.reduce(width, height)


def matches(ratio: AspectRatio, candidate: Resolution) -> bool:
    """Module-level shortcut for :meth:`AspectRatio.matches`."""
    return ratio.matches(candidate)
