"""Portfolio snapshot model."""

from decimal import Decimal

from pydantic import BaseModel, Field

from stockquest.models.holding import Holding


class Portfolio(BaseModel):
    """Point-in-time valuation of cash plus holdings.

    Built by ``derive_valuation``; total value and gain/loss are projections
    of the ledger against the latest prices and are never stored on their own.
    """

    cash: Decimal = Field(..., ge=0, description="Cash balance")
    holdings: tuple[Holding, ...] = Field(default=(), description="Open positions")
    total_value: Decimal = Field(..., description="Cash plus marked-to-market holdings")
    total_gain_loss: Decimal = Field(..., description="Total value minus initial capital")
    initial_capital: Decimal = Field(..., gt=0, description="Starting cash of the session")

    model_config = {"frozen": True}

    @property
    def holdings_value(self) -> Decimal:
        """Market value of all holdings."""
        return self.total_value - self.cash

    @property
    def gain_loss_percent(self) -> float:
        """Total gain/loss as a percentage of initial capital."""
        return float(self.total_gain_loss / self.initial_capital * 100)

    def holding(self, symbol: str) -> Holding | None:
        """Return the holding for a symbol, if any."""
        return next((h for h in self.holdings if h.symbol == symbol), None)
