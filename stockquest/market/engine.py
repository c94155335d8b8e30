"""Stochastic price engine for simulated instruments."""

import logging
import random
from typing import Iterable, Optional

from stockquest.models import Instrument

logger = logging.getLogger(__name__)

# Largest relative move a single tick may apply, in either direction
MAX_STEP = 0.5

# Prices never drop below one cent
PRICE_FLOOR = 0.01


class PriceEngine:
    """Advances instrument prices by one random step per tick.

    Each step is a zero-mean Gaussian draw scaled by the instrument's
    volatility, clamped to ``MAX_STEP`` and applied multiplicatively. The
    next price depends only on the current one.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        """Initialize the engine.

        Args:
            rng: Source of randomness. Pass a seeded ``random.Random`` for
                reproducible paths.
        """
        self._rng = rng or random.Random()

    def step(self, instrument: Instrument) -> Instrument:
        """Return the instrument after one tick."""
        old_price = instrument.price
        move = self._rng.gauss(0.0, 1.0) * instrument.volatility
        move = max(-MAX_STEP, min(MAX_STEP, move))

        new_price = max(round(old_price * (1 + move), 2), PRICE_FLOOR)
        change = round(new_price - old_price, 2)
        change_percent = change / old_price * 100

        return instrument.model_copy(
            update={
                "price": new_price,
                "change": change,
                "change_percent": change_percent,
            }
        )

    def advance(self, instruments: Iterable[Instrument]) -> list[Instrument]:
        """Advance every instrument by one tick.

        Args:
            instruments: Current instrument set.

        Returns:
            New instrument records in the same order. The inputs are not modified.
        """
        advanced = [self.step(instrument) for instrument in instruments]
        logger.debug("Advanced %d instruments", len(advanced))
        return advanced
