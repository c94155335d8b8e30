"""Holding data model."""

from decimal import Decimal

from pydantic import BaseModel, Field


class Holding(BaseModel):
    """Represents the player's open position in one instrument."""

    symbol: str = Field(..., min_length=1, description="Ticker symbol")
    quantity: int = Field(..., gt=0, description="Shares held")
    average_price: Decimal = Field(..., gt=0, description="Weighted-average cost per share")

    model_config = {"frozen": True}

    @property
    def cost_basis(self) -> Decimal:
        """Total cost of the shares still held."""
        return self.average_price * self.quantity
