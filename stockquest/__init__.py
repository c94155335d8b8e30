"""StockQuest - an educational stock market simulator."""

__version__ = "0.1.0"
