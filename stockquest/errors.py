"""Exception types for StockQuest.

Trading rejections are not exceptions; they come back as ``TradeResult``
objects. These types cover configuration problems found at startup.
"""


class StockQuestError(Exception):
    """Base class for StockQuest errors."""


class ConfigError(StockQuestError):
    """Raised when the configuration file cannot be loaded or is invalid."""


class CatalogError(StockQuestError):
    """Raised when an achievement catalog is malformed."""
