"""Cash and holdings ledger for paper trading.

Orders execute immediately at the instrument's current price. Rejections
are returned as failed ``TradeResult`` objects and leave the ledger
untouched.
"""

import logging
import uuid
from datetime import datetime
from decimal import Decimal
from typing import Callable, Optional, Union

from stockquest.models import Holding, Instrument, Portfolio, TradeResult, Transaction
from stockquest.portfolio.valuation import derive_valuation

logger = logging.getLogger(__name__)


def to_money(value: Union[float, Decimal, str]) -> Decimal:
    """Convert a float price or amount to an exact Decimal."""
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


class Ledger:
    """Owns the cash balance, holdings and transaction log of a player.

    Holdings use weighted-average cost: buys fold into the average, sells
    reduce quantity and leave the average alone.
    """

    def __init__(
        self,
        initial_capital: Decimal,
        quote: Callable[[str], Optional[Instrument]],
        clock: Callable[[], datetime] = datetime.now,
    ):
        """Initialize the ledger.

        Args:
            initial_capital: Starting cash balance.
            quote: Looks up the current instrument for a symbol, or None if unknown.
            clock: Source of transaction timestamps.
        """
        self._initial_capital = to_money(initial_capital)
        if self._initial_capital <= 0:
            raise ValueError("initial_capital must be positive")
        self._quote = quote
        self._clock = clock
        self._cash = self._initial_capital
        self._holdings: dict[str, Holding] = {}
        self._transactions: list[Transaction] = []

    @property
    def initial_capital(self) -> Decimal:
        return self._initial_capital

    @property
    def cash(self) -> Decimal:
        return self._cash

    @property
    def holdings(self) -> tuple[Holding, ...]:
        return tuple(self._holdings.values())

    @property
    def transactions(self) -> tuple[Transaction, ...]:
        """Transaction log, newest first."""
        return tuple(reversed(self._transactions))

    def holding(self, symbol: str) -> Optional[Holding]:
        return self._holdings.get(symbol)

    def _validate(self, symbol: str, quantity) -> tuple[Optional[Instrument], Optional[TradeResult]]:
        if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity <= 0:
            return None, TradeResult(
                success=False,
                message="Quantity must be a positive whole number",
            )
        instrument = self._quote(symbol)
        if instrument is None:
            return None, TradeResult(success=False, message=f"Unknown symbol: {symbol}")
        return instrument, None

    def _record(self, side: str, symbol: str, quantity: int, price: Decimal, total: Decimal) -> Transaction:
        transaction = Transaction(
            id=f"TXN_{uuid.uuid4().hex[:12].upper()}",
            side=side,
            symbol=symbol,
            quantity=quantity,
            price=price,
            total=total,
            timestamp=self._clock(),
        )
        self._transactions.append(transaction)
        return transaction

    def _check_invariants(self) -> None:
        assert self._cash >= 0, f"cash went negative: {self._cash}"
        assert all(h.quantity > 0 for h in self._holdings.values()), "empty holding left in ledger"

    def buy(self, symbol: str, quantity: int) -> TradeResult:
        """Buy shares at the current market price.

        Args:
            symbol: Ticker symbol.
            quantity: Number of shares.

        Returns:
            TradeResult; on success it carries the recorded transaction.
        """
        instrument, rejection = self._validate(symbol, quantity)
        if rejection is not None:
            logger.warning("Rejected buy of %s x%s: %s", symbol, quantity, rejection.message)
            return rejection

        price = to_money(instrument.price)
        total_cost = price * quantity

        if total_cost > self._cash:
            logger.warning(
                "Rejected buy of %s x%d: cost %s exceeds cash %s",
                symbol, quantity, total_cost, self._cash,
            )
            return TradeResult(success=False, message="Insufficient funds!")

        existing = self._holdings.get(symbol)
        if existing:
            total_qty = existing.quantity + quantity
            new_avg = (existing.average_price * existing.quantity + total_cost) / total_qty
            self._holdings[symbol] = Holding(symbol=symbol, quantity=total_qty, average_price=new_avg)
        else:
            self._holdings[symbol] = Holding(symbol=symbol, quantity=quantity, average_price=price)

        self._cash -= total_cost
        transaction = self._record("buy", symbol, quantity, price, total_cost)
        self._check_invariants()

        logger.info("Bought %d %s at %s", quantity, symbol, price)
        return TradeResult(
            success=True,
            message=f"Successfully bought {quantity} shares of {symbol}!",
            transaction=transaction,
        )

    def sell(self, symbol: str, quantity: int) -> TradeResult:
        """Sell shares at the current market price.

        Args:
            symbol: Ticker symbol.
            quantity: Number of shares; must not exceed the held quantity.

        Returns:
            TradeResult; on success it carries the recorded transaction.
        """
        instrument, rejection = self._validate(symbol, quantity)
        if rejection is not None:
            logger.warning("Rejected sell of %s x%s: %s", symbol, quantity, rejection.message)
            return rejection

        existing = self._holdings.get(symbol)
        if existing is None or existing.quantity < quantity:
            held = existing.quantity if existing else 0
            logger.warning("Rejected sell of %s x%d: only %d held", symbol, quantity, held)
            return TradeResult(success=False, message="Insufficient shares to sell!")

        price = to_money(instrument.price)
        total_revenue = price * quantity

        remaining_qty = existing.quantity - quantity
        if remaining_qty == 0:
            del self._holdings[symbol]
        else:
            self._holdings[symbol] = existing.model_copy(update={"quantity": remaining_qty})

        self._cash += total_revenue
        transaction = self._record("sell", symbol, quantity, price, total_revenue)
        self._check_invariants()

        logger.info("Sold %d %s at %s", quantity, symbol, price)
        return TradeResult(
            success=True,
            message=f"Successfully sold {quantity} shares of {symbol}!",
            transaction=transaction,
        )

    def prices(self) -> dict[str, Decimal]:
        """Latest price of every held symbol that is still quoted."""
        prices = {}
        for symbol in self._holdings:
            instrument = self._quote(symbol)
            if instrument is not None:
                prices[symbol] = to_money(instrument.price)
        return prices

    def valuation(self) -> Portfolio:
        """Value the ledger against the latest prices."""
        return derive_valuation(self._cash, self.holdings, self.prices(), self._initial_capital)

    def reset(self) -> None:
        """Reset to the initial state.

        Clears all holdings and transactions and restores the starting cash.
        """
        self._cash = self._initial_capital
        self._holdings.clear()
        self._transactions.clear()
        logger.info("Ledger reset to %s", self._initial_capital)
