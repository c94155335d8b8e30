"""Instrument data model."""

from pydantic import BaseModel, Field


class Instrument(BaseModel):
    """Represents one simulated tradable stock."""

    symbol: str = Field(..., min_length=1, description="Ticker symbol")
    name: str = Field(..., min_length=1, description="Display name")
    price: float = Field(..., gt=0, description="Current price")
    change: float = Field(default=0.0, description="Absolute change on the last tick")
    change_percent: float = Field(default=0.0, description="Percentage change on the last tick")
    sector: str = Field(..., min_length=1, description="Sector tag")
    volatility: float = Field(..., ge=0, description="Relative step magnitude per tick")
    description: str = Field(default="", description="Company blurb")

    model_config = {"frozen": True}
