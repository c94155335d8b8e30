"""Game session orchestrating the market, ledger and rewards.

A session owns all mutable state of one playthrough. Every operation runs
to completion before the next one starts; the caller decides when ticks
happen.
"""

import logging
import random
from datetime import datetime
from typing import Callable, Iterable, Optional, Sequence

from stockquest.achievements import AchievementEngine, CatalogEntry, default_catalog
from stockquest.config import SessionConfig
from stockquest.events import AchievementUnlocked, NotificationQueue
from stockquest.market import PriceEngine, default_instruments
from stockquest.models import Achievement, Instrument, Portfolio, Progression, TradeResult, Transaction
from stockquest.portfolio import Ledger
from stockquest.progression import ProgressionTracker

logger = logging.getLogger(__name__)


class Session:
    """One running simulation.

    Routes buy and sell requests to the ledger, grants experience for
    executed trades, re-evaluates achievements after each trade, and queues
    the resulting notifications.
    """

    def __init__(
        self,
        config: Optional[SessionConfig] = None,
        instruments: Optional[Iterable[Instrument]] = None,
        catalog: Optional[Sequence[CatalogEntry]] = None,
        rng: Optional[random.Random] = None,
        clock: Callable[[], datetime] = datetime.now,
    ):
        """Initialize a session.

        Args:
            config: Session settings. Defaults to ``SessionConfig()``.
            instruments: Starting instruments. Defaults to the built-in market.
            catalog: Achievement catalog. Defaults to ``default_catalog``.
            rng: Randomness for the price engine. Seeded from ``config.seed``
                when omitted.
            clock: Source of timestamps for trades and unlocks.

        Raises:
            ValueError: If two instruments share a symbol.
            CatalogError: If the catalog is malformed.
        """
        self._config = config or SessionConfig()
        self._clock = clock

        self._instruments: dict[str, Instrument] = {}
        for instrument in (instruments if instruments is not None else default_instruments()):
            if instrument.symbol in self._instruments:
                raise ValueError(f"Duplicate instrument symbol: {instrument.symbol}")
            self._instruments[instrument.symbol] = instrument

        self._engine = PriceEngine(rng or random.Random(self._config.seed))
        self._ledger = Ledger(self._config.initial_capital, self.instrument, clock=clock)
        self._tracker = ProgressionTracker()
        self._achievement_engine = AchievementEngine(
            catalog if catalog is not None else default_catalog(self._config.initial_capital),
            sectors={s: i.sector for s, i in self._instruments.items()},
        )
        self._achievements = list(self._achievement_engine.initial_state())
        self._notifications = NotificationQueue()

    @property
    def config(self) -> SessionConfig:
        return self._config

    @property
    def instruments(self) -> tuple[Instrument, ...]:
        return tuple(self._instruments.values())

    def instrument(self, symbol: str) -> Optional[Instrument]:
        """Look up an instrument by symbol."""
        return self._instruments.get(symbol)

    def portfolio(self) -> Portfolio:
        """Current portfolio valued at the latest prices."""
        return self._ledger.valuation()

    @property
    def transactions(self) -> tuple[Transaction, ...]:
        """Transaction log, newest first."""
        return self._ledger.transactions

    @property
    def achievements(self) -> tuple[Achievement, ...]:
        return tuple(self._achievements)

    @property
    def catalog(self) -> tuple[CatalogEntry, ...]:
        return self._achievement_engine.catalog

    @property
    def progression(self) -> Progression:
        return self._tracker.progression

    @property
    def notifications(self) -> NotificationQueue:
        return self._notifications

    def tick(self) -> None:
        """Advance every instrument price by one step.

        Holdings are untouched; valuation picks up the new prices on read.
        Achievements are not evaluated here, so a value milestone crossed
        by a price move unlocks on the next executed trade.
        """
        advanced = self._engine.advance(self._instruments.values())
        self._instruments = {i.symbol: i for i in advanced}
        logger.debug("Market ticked")

    def buy(self, symbol: str, quantity: int) -> TradeResult:
        """Buy shares and apply rewards on success."""
        result = self._ledger.buy(symbol, quantity)
        if result.success:
            self._reward(self._config.buy_experience)
        return result

    def sell(self, symbol: str, quantity: int) -> TradeResult:
        """Sell shares and apply rewards on success."""
        result = self._ledger.sell(symbol, quantity)
        if result.success:
            self._reward(self._config.sell_experience)
        return result

    def _reward(self, points: int) -> None:
        level_up = self._tracker.grant_experience(points)
        if level_up is not None:
            self._notifications.push(level_up)
        self.check_achievements()

    def check_achievements(self) -> list[Achievement]:
        """Evaluate achievements and queue a notification per new unlock.

        Returns:
            Achievements unlocked by this check, in catalog order.
        """
        evaluation = self._achievement_engine.evaluate(
            self._ledger.transactions,
            self._ledger.valuation(),
            self._achievements,
            now=self._clock(),
        )
        self._achievements = list(evaluation.state)
        for achievement in evaluation.newly_unlocked:
            self._notifications.push(AchievementUnlocked(achievement=achievement))
        return list(evaluation.newly_unlocked)

    def reset(self) -> None:
        """Start over with the initial cash, no trades and nothing unlocked.

        Market prices keep their current values.
        """
        self._ledger.reset()
        self._tracker.reset()
        self._achievements = list(self._achievement_engine.initial_state())
        self._notifications.clear()
        logger.info("Session reset")
