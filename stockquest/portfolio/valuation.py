"""Portfolio valuation as a pure projection of ledger state."""

from decimal import Decimal
from typing import Iterable, Mapping

from stockquest.models import Holding, Portfolio


def derive_valuation(
    cash: Decimal,
    holdings: Iterable[Holding],
    prices: Mapping[str, Decimal],
    initial_capital: Decimal,
) -> Portfolio:
    """Mark holdings to market and build a portfolio snapshot.

    Args:
        cash: Current cash balance.
        holdings: Open positions.
        prices: Latest price per symbol. Holdings without a price count as zero.
        initial_capital: Starting cash the gain/loss is measured against.

    Returns:
        Portfolio with total value and total gain/loss derived from the inputs.
    """
    holdings = tuple(holdings)
    holdings_value = sum(
        (prices.get(h.symbol, Decimal("0")) * h.quantity for h in holdings),
        Decimal("0"),
    )
    total_value = cash + holdings_value

    return Portfolio(
        cash=cash,
        holdings=holdings,
        total_value=total_value,
        total_gain_loss=total_value - initial_capital,
        initial_capital=initial_capital,
    )
