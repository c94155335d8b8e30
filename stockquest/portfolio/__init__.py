"""Portfolio ledger and valuation for StockQuest."""

from stockquest.portfolio.ledger import Ledger, to_money
from stockquest.portfolio.valuation import derive_valuation

__all__ = [
    "Ledger",
    "derive_valuation",
    "to_money",
]
