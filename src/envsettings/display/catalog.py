"""
Resolution ladder and detail-level mapping.

The ladder is the subset of the host's supported resolutions that share the
native aspect ratio, ordered from largest to smallest. The four detail levels
are spread over the ladder by integer interpolation so that ``MAX`` always
lands on the first entry and ``LOW`` on the last.
"""

import logging
from typing import TYPE_CHECKING, List, Optional, Sequence, Tuple

from ..settings.types import DetailLevel
from .aspect import AspectRatio
from .models import Resolution

if TYPE_CHECKING:
    from ..host.protocols import DisplayHost

logger = logging.getLogger(__name__)

ResolutionLadder = Tuple[Resolution, ...]


def build_ladder(resolutions: Sequence[Resolution]) -> ResolutionLadder:
    """Filter resolutions down to those matching the native aspect ratio.

    The last entry is taken as the native (largest) resolution; hosts report
    their modes in ascending order. The input is scanned back to front so the
    ladder comes out descending. Duplicates are kept.

    Args:
        resolutions: Raw resolutions reported by the host

    Returns:
        Ladder of matching resolutions, empty on empty input or build error
    """
    if not resolutions:
        return ()

    try:
        ratio = AspectRatio.of(resolutions[-1])
        ladder = tuple(
            Resolution(res.width, res.height)
            for res in reversed(resolutions)
            if ratio.matches(res)
        )
    except (ValueError, ZeroDivisionError, TypeError, AttributeError) as e:
        logger.error(f"Error while building resolution ladder: {e}")
        return ()

    logger.debug(f"Built resolution ladder for {ratio}: {len(ladder)} of {len(resolutions)} modes")
    return ladder


def resolve_index(level: DetailLevel, ladder_size: int) -> int:
    """Map a detail level onto a ladder index.

    ``index = level * (ladder_size - 1) // LOW``

    Raises:
        ValueError: If the ladder is empty
    """
    if ladder_size < 1:
        raise ValueError("Cannot resolve a detail level on an empty ladder")
    return int(level) * (ladder_size - 1) // int(DetailLevel.LOW)


def resolution_for(
    level: DetailLevel, ladder: ResolutionLadder, fallback: Resolution
) -> Resolution:
    """Resolution for a detail level, or ``fallback`` when the ladder is empty."""
    if not ladder:
        return fallback
    return ladder[resolve_index(level, len(ladder))]


class ResolutionCatalog:
    """Caches the resolution ladder of a display host.

    The ladder is built on first use and kept until :meth:`invalidate` or
    :meth:`rebuild` is called, e.g. when the host reports a display change.
    """

    def __init__(self, display: "DisplayHost"):
        self.display = display
        self._ladder: Optional[ResolutionLadder] = None

    @property
    def ladder(self) -> ResolutionLadder:
        """Current ladder, built lazily."""
        if self._ladder is None:
            return self.rebuild()
        return self._ladder

    @property
    def is_empty(self) -> bool:
        return len(self.ladder) == 0

    def invalidate(self) -> None:
        """Drop the cached ladder; the next access rebuilds it."""
        self._ladder = None
        logger.debug("Resolution ladder invalidated")

    def rebuild(self) -> ResolutionLadder:
        """Rebuild the ladder from the host's supported resolutions."""
        try:
            resolutions = list(self.display.supported_resolutions())
        except Exception as e:
            logger.error(f"Error while querying supported resolutions: {e}")
            resolutions = []

        self._ladder = build_ladder(resolutions)
        if not self._ladder:
            logger.warning("No usable resolutions reported, using current resolution")
        return self._ladder

    def resolution_for(self, level: DetailLevel) -> Resolution:
        """Resolution for a detail level, falling back to the current one."""
        ladder = self.ladder
        if not ladder:
            return self.display.current_resolution()
        return resolution_for(level, ladder, ladder[0])

    def level_labels(self) -> List[str]:
        """Dropdown entries such as ``"Max (1920 x 1080)"``, one per level.

        Empty when no ladder is available.
        """
        if self.is_empty:
            return []
        return [f"{level.label} ({self.resolution_for(level)})" for level in DetailLevel]
