"""Shared fixtures for StockQuest tests."""

from datetime import datetime, timedelta

import pytest

from stockquest.models import Instrument


def make_instrument(symbol: str, price: float, sector: str = "Technology", volatility: float = 0.02) -> Instrument:
    """Build an instrument with sensible defaults."""
    return Instrument(
        symbol=symbol,
        name=f"{symbol} Corp",
        price=price,
        sector=sector,
        volatility=volatility,
    )


class FakeClock:
    """Deterministic datetime source that advances on demand."""

    def __init__(self, start: datetime = datetime(2024, 1, 2, 9, 30)):
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += timedelta(seconds=seconds)


@pytest.fixture
def fake_clock():
    return FakeClock()


@pytest.fixture
def instruments():
    """A small market with three sectors."""
    return [
        make_instrument("AAA", 100.0, "Technology"),
        make_instrument("BBB", 50.0, "Healthcare"),
        make_instrument("CCC", 20.0, "Energy"),
        make_instrument("DDD", 10.0, "Energy"),
    ]
