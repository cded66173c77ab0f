"""
Resolution handling: aspect ratios and the detail-level ladder.
"""

from .models import Resolution
from .aspect import AspectRatio
from .catalog import (
    ResolutionCatalog,
    ResolutionLadder,
    build_ladder,
    resolve_index,
    resolution_for,
)

__all__ = [
    "Resolution",
    "AspectRatio",
    "ResolutionCatalog",
    "ResolutionLadder",
    "build_ladder",
    "resolve_index",
    "resolution_for",
]
