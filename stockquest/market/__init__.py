"""Simulated market for StockQuest."""

from stockquest.market.clock import MarketClock
from stockquest.market.engine import PriceEngine
from stockquest.market.universe import default_instruments

__all__ = [
    "MarketClock",
    "PriceEngine",
    "default_instruments",
]
