"""Achievement rules and evaluation for StockQuest."""

from stockquest.achievements.catalog import CatalogEntry, default_catalog, load_catalog
from stockquest.achievements.engine import AchievementEngine, Evaluation
from stockquest.achievements.rules import (
    DiversificationRule,
    HoldingDurationRule,
    PortfolioValueRule,
    ProfitableSalesRule,
    Rule,
    RuleContext,
    RuleOutcome,
    SectorCoverageRule,
    TradeCountRule,
    evaluate_rule,
)

__all__ = [
    "AchievementEngine",
    "CatalogEntry",
    "DiversificationRule",
    "Evaluation",
    "HoldingDurationRule",
    "PortfolioValueRule",
    "ProfitableSalesRule",
    "Rule",
    "RuleContext",
    "RuleOutcome",
    "SectorCoverageRule",
    "TradeCountRule",
    "default_catalog",
    "evaluate_rule",
    "load_catalog",
]
