"""Achievement rule variants and the dispatcher that evaluates them.

Every rule is a tagged pydantic model discriminated on ``kind``. Rules are
evaluated from scratch against the full transaction history and the
current portfolio, so the result does not depend on how often or in what
order evaluation happens.
"""

from datetime import datetime
from decimal import Decimal
from typing import Annotated, Callable, Literal, Optional, Union

from pydantic import BaseModel, Field

from stockquest.models import Portfolio, Transaction


class TradeCountRule(BaseModel):
    """Execute a number of trades, optionally on one side only."""

    kind: Literal["trade_count"] = "trade_count"
    target: int = Field(..., gt=0, description="Trades required")
    side: Optional[Literal["buy", "sell"]] = Field(default=None, description="Only count this side")

    model_config = {"frozen": True}


class PortfolioValueRule(BaseModel):
    """Reach a total portfolio value."""

    kind: Literal["portfolio_value"] = "portfolio_value"
    min_total_value: Decimal = Field(..., gt=0, description="Total value required")

    model_config = {"frozen": True}


class DiversificationRule(BaseModel):
    """Hold a number of different stocks at the same time."""

    kind: Literal["diversification"] = "diversification"
    target: int = Field(..., gt=0, description="Distinct symbols required")

    model_config = {"frozen": True}


class SectorCoverageRule(BaseModel):
    """Hold stocks from a number of different sectors at the same time."""

    kind: Literal["sector_coverage"] = "sector_coverage"
    target: int = Field(..., gt=0, description="Distinct sectors required")

    model_config = {"frozen": True}


class HoldingDurationRule(BaseModel):
    """Keep a position open for a minimum amount of time."""

    kind: Literal["holding_duration"] = "holding_duration"
    min_seconds: float = Field(..., gt=0, description="Seconds a position must stay open")

    model_config = {"frozen": True}


class ProfitableSalesRule(BaseModel):
    """Sell above the average cost a number of times."""

    kind: Literal["profitable_sales"] = "profitable_sales"
    target: int = Field(..., gt=0, description="Profitable sells required")

    model_config = {"frozen": True}


Rule = Annotated[
    Union[
        TradeCountRule,
        PortfolioValueRule,
        DiversificationRule,
        SectorCoverageRule,
        HoldingDurationRule,
        ProfitableSalesRule,
    ],
    Field(discriminator="kind"),
]


class RuleContext(BaseModel):
    """Snapshot a rule is evaluated against."""

    transactions: tuple[Transaction, ...] = Field(..., description="Trade history, oldest first")
    portfolio: Portfolio = Field(..., description="Current portfolio valuation")
    sectors: dict[str, str] = Field(default_factory=dict, description="Sector per symbol")
    now: datetime = Field(..., description="Evaluation time")

    model_config = {"frozen": True}


class RuleOutcome(BaseModel):
    """Result of evaluating one rule."""

    satisfied: bool
    progress: Optional[int] = None
    target: Optional[int] = None

    model_config = {"frozen": True}


def _counted(value: int, target: int) -> RuleOutcome:
    return RuleOutcome(satisfied=value >= target, progress=min(value, target), target=target)


def _spread(held: int, peak: int, target: int) -> RuleOutcome:
    return RuleOutcome(satisfied=held >= target, progress=min(peak, target), target=target)


def open_since(transactions: tuple[Transaction, ...]) -> dict[str, datetime]:
    """Replay the history and return when each open position was opened.

    A position opens on the buy that takes its quantity above zero and
    closes when a sell brings it back to zero.
    """
    quantities: dict[str, int] = {}
    opened: dict[str, datetime] = {}
    for txn in transactions:
        held = quantities.get(txn.symbol, 0)
        if txn.side == "buy":
            if held == 0:
                opened[txn.symbol] = txn.timestamp
            quantities[txn.symbol] = held + txn.quantity
        else:
            quantities[txn.symbol] = held - txn.quantity
            if quantities[txn.symbol] <= 0:
                quantities.pop(txn.symbol)
                opened.pop(txn.symbol, None)
    return opened


def peak_held(transactions: tuple[Transaction, ...], group: Callable[[str], Optional[str]] = str) -> int:
    """Replay the history and return the most groups held at one time.

    Args:
        transactions: Trade history, oldest first.
        group: Maps a symbol to the group it counts towards. Symbols mapped
            to None are not counted.
    """
    quantities: dict[str, int] = {}
    peak = 0
    for txn in transactions:
        held = quantities.get(txn.symbol, 0)
        held += txn.quantity if txn.side == "buy" else -txn.quantity
        if held > 0:
            quantities[txn.symbol] = held
        else:
            quantities.pop(txn.symbol, None)
        groups = {group(symbol) for symbol in quantities} - {None}
        peak = max(peak, len(groups))
    return peak


def profitable_sales(transactions: tuple[Transaction, ...]) -> int:
    """Count sells executed above the running weighted-average cost."""
    positions: dict[str, tuple[int, Decimal]] = {}
    count = 0
    for txn in transactions:
        qty, avg = positions.get(txn.symbol, (0, Decimal("0")))
        if txn.side == "buy":
            total_qty = qty + txn.quantity
            positions[txn.symbol] = (total_qty, (avg * qty + txn.total) / total_qty)
        else:
            if qty > 0 and txn.price > avg:
                count += 1
            remaining = qty - txn.quantity
            if remaining > 0:
                positions[txn.symbol] = (remaining, avg)
            else:
                positions.pop(txn.symbol, None)
    return count


def evaluate_rule(rule: Rule, context: RuleContext) -> RuleOutcome:
    """Evaluate a rule against a snapshot.

    Args:
        rule: Any rule variant.
        context: Transactions, portfolio and clock to evaluate against.

    Returns:
        Whether the rule is satisfied and, for counting rules, the progress.

    Raises:
        TypeError: If the rule is not a known variant.
    """
    holdings = context.portfolio.holdings

    if isinstance(rule, TradeCountRule):
        trades = [t for t in context.transactions if rule.side is None or t.side == rule.side]
        return _counted(len(trades), rule.target)

    if isinstance(rule, PortfolioValueRule):
        return RuleOutcome(satisfied=context.portfolio.total_value >= rule.min_total_value)

    # Breadth rules unlock on what is held now; progress is the historical peak
    if isinstance(rule, DiversificationRule):
        held = len({h.symbol for h in holdings})
        peak = max(held, peak_held(context.transactions))
        return _spread(held, peak, rule.target)

    if isinstance(rule, SectorCoverageRule):
        held = len({context.sectors[h.symbol] for h in holdings if h.symbol in context.sectors})
        peak = max(held, peak_held(context.transactions, context.sectors.get))
        return _spread(held, peak, rule.target)

    if isinstance(rule, HoldingDurationRule):
        held = {h.symbol for h in holdings}
        opened = open_since(context.transactions)
        satisfied = any(
            (context.now - opened_at).total_seconds() >= rule.min_seconds
            for symbol, opened_at in opened.items()
            if symbol in held
        )
        return RuleOutcome(satisfied=satisfied)

    if isinstance(rule, ProfitableSalesRule):
        return _counted(profitable_sales(context.transactions), rule.target)

    raise TypeError(f"Unknown achievement rule: {rule!r}")
