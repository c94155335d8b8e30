"""Notifications emitted by a session for the presentation layer."""

from collections import deque
from typing import Iterator, Optional, Union

from pydantic import BaseModel, Field

from stockquest.models import Achievement


class AchievementUnlocked(BaseModel):
    """An achievement was earned."""

    achievement: Achievement = Field(..., description="The unlocked achievement")

    model_config = {"frozen": True}

    @property
    def text(self) -> str:
        return f"{self.achievement.icon} Achievement unlocked: {self.achievement.title}".strip()


class LevelUp(BaseModel):
    """The player's level increased."""

    previous_level: int = Field(..., ge=1, description="Level before the grant")
    level: int = Field(..., ge=1, description="Level after the grant")

    model_config = {"frozen": True}

    @property
    def text(self) -> str:
        return f"Level up! You reached level {self.level}"


Notification = Union[AchievementUnlocked, LevelUp]


class NotificationQueue:
    """FIFO of notifications, shown to the player one at a time.

    The head of the queue is the notification currently on display;
    ``dismiss`` clears it and promotes the next one.
    """

    def __init__(self) -> None:
        self._queue: deque[Notification] = deque()

    def push(self, notification: Notification) -> None:
        self._queue.append(notification)

    @property
    def current(self) -> Optional[Notification]:
        """The notification on display, or None when the queue is empty."""
        return self._queue[0] if self._queue else None

    def dismiss(self) -> Optional[Notification]:
        """Remove the displayed notification and return the next one."""
        if self._queue:
            self._queue.popleft()
        return self.current

    def drain(self) -> list[Notification]:
        """Remove and return every pending notification in order."""
        drained = list(self._queue)
        self._queue.clear()
        return drained

    def clear(self) -> None:
        self._queue.clear()

    def __len__(self) -> int:
        return len(self._queue)

    def __iter__(self) -> Iterator[Notification]:
        return iter(list(self._queue))
