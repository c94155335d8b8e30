"""Transaction and TradeResult data models."""

from datetime import datetime
from decimal import Decimal
from typing import Literal, Optional

from pydantic import BaseModel, Field


class Transaction(BaseModel):
    """Represents an executed buy or sell. Never modified once recorded."""

    id: str = Field(..., min_length=1, description="Unique transaction identifier")
    side: Literal["buy", "sell"] = Field(..., description="Trade side")
    symbol: str = Field(..., min_length=1, description="Ticker symbol")
    quantity: int = Field(..., gt=0, description="Shares traded")
    price: Decimal = Field(..., gt=0, description="Execution price")
    total: Decimal = Field(..., gt=0, description="Price times quantity")
    timestamp: datetime = Field(..., description="Execution timestamp")

    model_config = {"frozen": True}


class TradeResult(BaseModel):
    """Outcome of a buy or sell request, suitable for display."""

    success: bool = Field(..., description="Whether the order executed")
    message: str = Field(..., description="Human-readable outcome")
    transaction: Optional[Transaction] = Field(default=None, description="Recorded trade on success")

    model_config = {"frozen": True}
