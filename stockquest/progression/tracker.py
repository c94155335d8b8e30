"""Experience and level bookkeeping."""

import logging
from typing import Optional

from stockquest.events import LevelUp
from stockquest.models import Progression

logger = logging.getLogger(__name__)


class ProgressionTracker:
    """Accumulates experience points and reports level increases.

    How many points an action is worth is decided by the caller.
    """

    def __init__(self, experience: int = 0):
        self._progression = Progression(experience=experience)

    @property
    def progression(self) -> Progression:
        return self._progression

    @property
    def experience(self) -> int:
        return self._progression.experience

    @property
    def level(self) -> int:
        return self._progression.level

    def grant_experience(self, points: int) -> Optional[LevelUp]:
        """Add experience points.

        Args:
            points: Positive number of points to add.

        Returns:
            A LevelUp event if the level increased, otherwise None.

        Raises:
            ValueError: If points is not a positive integer.
        """
        if isinstance(points, bool) or not isinstance(points, int) or points <= 0:
            raise ValueError(f"points must be a positive integer, got {points!r}")

        previous_level = self._progression.level
        self._progression = Progression(experience=self._progression.experience + points)

        if self._progression.level > previous_level:
            logger.info("Level up: %d -> %d", previous_level, self._progression.level)
            return LevelUp(previous_level=previous_level, level=self._progression.level)
        return None

    def reset(self) -> None:
        self._progression = Progression()
