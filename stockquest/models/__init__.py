"""Data models for StockQuest."""

from stockquest.models.achievement import Achievement
from stockquest.models.holding import Holding
from stockquest.models.instrument import Instrument
from stockquest.models.portfolio import Portfolio
from stockquest.models.progression import Progression
from stockquest.models.transaction import TradeResult, Transaction

__all__ = [
    "Achievement",
    "Holding",
    "Instrument",
    "Portfolio",
    "Progression",
    "TradeResult",
    "Transaction",
]
