"""Achievement catalog definitions."""

from decimal import Decimal
from typing import Any, Iterable, Mapping

from pydantic import BaseModel, Field, ValidationError

from stockquest.achievements.rules import (
    DiversificationRule,
    HoldingDurationRule,
    PortfolioValueRule,
    ProfitableSalesRule,
    Rule,
    SectorCoverageRule,
    TradeCountRule,
)
from stockquest.errors import CatalogError


class CatalogEntry(BaseModel):
    """Static definition of an achievement and the rule that unlocks it."""

    id: str = Field(..., min_length=1, description="Unique identifier")
    title: str = Field(..., min_length=1, description="Display title")
    description: str = Field(default="", description="What the player has to do")
    icon: str = Field(default="", description="Display icon")
    rule: Rule = Field(..., description="Unlock condition")

    model_config = {"frozen": True}


def check_catalog(entries: Iterable[Any]) -> list[CatalogEntry]:
    """Verify catalog entries are well-formed and uniquely identified.

    Raises:
        CatalogError: On a non-entry object or a duplicate id.
    """
    checked = []
    seen: set[str] = set()
    for entry in entries:
        if not isinstance(entry, CatalogEntry):
            raise CatalogError(f"Not a catalog entry: {entry!r}")
        if entry.id in seen:
            raise CatalogError(f"Duplicate achievement id: {entry.id}")
        seen.add(entry.id)
        checked.append(entry)
    return checked


def load_catalog(entries: Iterable[Mapping[str, Any]]) -> list[CatalogEntry]:
    """Build a catalog from plain mappings, e.g. parsed from TOML.

    Args:
        entries: One mapping per achievement with ``id``, ``title``,
            ``description``, ``icon`` and a ``rule`` mapping tagged by ``kind``.

    Returns:
        Validated catalog entries in the given order.

    Raises:
        CatalogError: If an entry is malformed, names an unknown rule kind,
            or repeats an id.
    """
    parsed = []
    for raw in entries:
        try:
            parsed.append(CatalogEntry.model_validate(raw))
        except ValidationError as e:
            raise CatalogError(f"Invalid achievement entry {raw!r}: {e}") from e
    return check_catalog(parsed)


def default_catalog(initial_capital: Decimal = Decimal("10000")) -> list[CatalogEntry]:
    """The achievements every session ships with.

    Portfolio value milestones scale with the starting capital.
    """
    capital = Decimal(str(initial_capital))
    return [
        CatalogEntry(
            id="first_trade",
            title="First Trade",
            description="Make your first trade.",
            icon="🎯",
            rule=TradeCountRule(target=1),
        ),
        CatalogEntry(
            id="diversified",
            title="Diversified",
            description="Own 3 different stocks at the same time.",
            icon="🧺",
            rule=DiversificationRule(target=3),
        ),
        CatalogEntry(
            id="sector_explorer",
            title="Sector Explorer",
            description="Own stocks from 3 different sectors at the same time.",
            icon="🧭",
            rule=SectorCoverageRule(target=3),
        ),
        CatalogEntry(
            id="seasoned_seller",
            title="Seasoned Seller",
            description="Sell stocks 5 times.",
            icon="💰",
            rule=TradeCountRule(target=5, side="sell"),
        ),
        CatalogEntry(
            id="buy_low_sell_high",
            title="Buy Low, Sell High",
            description="Sell shares for more than you paid for them.",
            icon="🏆",
            rule=ProfitableSalesRule(target=1),
        ),
        CatalogEntry(
            id="active_trader",
            title="Active Trader",
            description="Make 10 trades.",
            icon="📈",
            rule=TradeCountRule(target=10),
        ),
        CatalogEntry(
            id="patient_investor",
            title="Patient Investor",
            description="Keep a position open for 5 minutes.",
            icon="⏳",
            rule=HoldingDurationRule(min_seconds=300),
        ),
        CatalogEntry(
            id="growing_wealth",
            title="Growing Wealth",
            description="Grow your portfolio to 110% of your starting cash.",
            icon="🌱",
            rule=PortfolioValueRule(min_total_value=capital * Decimal("1.1")),
        ),
        CatalogEntry(
            id="big_league",
            title="Big League",
            description="Grow your portfolio to 150% of your starting cash.",
            icon="💎",
            rule=PortfolioValueRule(min_total_value=capital * Decimal("1.5")),
        ),
    ]
