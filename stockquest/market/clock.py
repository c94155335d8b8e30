"""Interval clock that decides when the market should tick."""

import time
from typing import Callable, Optional


class MarketClock:
    """Cancellable fixed-interval tick trigger.

    The clock does not run anything by itself. Its owner polls
    ``due_ticks`` from the single execution context and applies that many
    ticks, so ticks and orders stay ordered by arrival.
    """

    def __init__(self, interval: float, clock: Callable[[], float] = time.monotonic):
        """Initialize the clock.

        Args:
            interval: Seconds between ticks.
            clock: Monotonic time source in seconds.
        """
        if interval <= 0:
            raise ValueError("interval must be positive")
        self._interval = interval
        self._clock = clock
        self._last: Optional[float] = None

    @property
    def interval(self) -> float:
        return self._interval

    @property
    def running(self) -> bool:
        return self._last is not None

    def start(self) -> None:
        """Start counting intervals from now."""
        self._last = self._clock()

    def due_ticks(self) -> int:
        """Consume and return the number of whole intervals elapsed.

        Returns:
            Ticks owed since the previous call, or 0 when stopped.
        """
        if self._last is None:
            return 0
        now = self._clock()
        ticks = int((now - self._last) // self._interval)
        if ticks > 0:
            self._last += ticks * self._interval
        return ticks

    def stop(self) -> None:
        """Cancel the clock. A stopped clock never reports due ticks."""
        self._last = None
