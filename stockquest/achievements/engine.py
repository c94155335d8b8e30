"""Achievement evaluation engine."""

import logging
from datetime import datetime
from typing import Iterable, Mapping, Optional, Sequence

from pydantic import BaseModel, Field

from stockquest.achievements.catalog import CatalogEntry, check_catalog
from stockquest.achievements.rules import RuleContext, evaluate_rule
from stockquest.models import Achievement, Portfolio, Transaction

logger = logging.getLogger(__name__)


class Evaluation(BaseModel):
    """Result of one evaluation pass."""

    state: tuple[Achievement, ...] = Field(..., description="Achievement state in catalog order")
    newly_unlocked: tuple[Achievement, ...] = Field(
        default=(), description="Achievements unlocked by this pass, in catalog order"
    )

    model_config = {"frozen": True}


class AchievementEngine:
    """Evaluates a fixed catalog of rules against trade history.

    Unlocking is one-way: an unlocked achievement is never relocked or
    reported again. Progress of a locked achievement is a function of the
    history and portfolio alone and never goes down as the history grows.
    """

    def __init__(self, catalog: Sequence[CatalogEntry], sectors: Optional[Mapping[str, str]] = None):
        """Initialize the engine.

        Args:
            catalog: Achievement definitions, in display order.
            sectors: Sector of each tradable symbol, for sector rules.

        Raises:
            CatalogError: If the catalog is malformed.
        """
        self._catalog = tuple(check_catalog(catalog))
        self._sectors = dict(sectors or {})

    @property
    def catalog(self) -> tuple[CatalogEntry, ...]:
        return self._catalog

    def _locked(self, entry: CatalogEntry) -> Achievement:
        target = getattr(entry.rule, "target", None)
        return Achievement(
            id=entry.id,
            title=entry.title,
            description=entry.description,
            icon=entry.icon,
            progress=0 if target is not None else None,
            target=target,
        )

    def initial_state(self) -> list[Achievement]:
        """All achievements locked with no progress."""
        return [self._locked(entry) for entry in self._catalog]

    def evaluate(
        self,
        transactions: Iterable[Transaction],
        portfolio: Portfolio,
        state: Iterable[Achievement],
        now: Optional[datetime] = None,
    ) -> Evaluation:
        """Re-evaluate every rule against the current snapshot.

        Args:
            transactions: Transaction log, newest first.
            portfolio: Current portfolio valuation.
            state: Achievement state from the previous pass.
            now: Evaluation time, also used as the unlock timestamp.

        Returns:
            Updated state and the achievements that unlocked in this pass.
        """
        now = now or datetime.now()
        context = RuleContext(
            transactions=tuple(reversed(list(transactions))),
            portfolio=portfolio,
            sectors=self._sectors,
            now=now,
        )
        previous = {a.id: a for a in state}

        updated = []
        unlocked = []
        for entry in self._catalog:
            current = previous.get(entry.id) or self._locked(entry)
            if current.unlocked:
                updated.append(current)
                continue

            outcome = evaluate_rule(entry.rule, context)
            if outcome.satisfied:
                current = current.model_copy(
                    update={"unlocked": True, "unlocked_at": now, "progress": outcome.target}
                )
                unlocked.append(current)
                logger.info("Achievement unlocked: %s", entry.id)
            elif outcome.progress is not None:
                progress = max(current.progress or 0, outcome.progress)
                current = current.model_copy(update={"progress": progress, "target": outcome.target})
            updated.append(current)

        return Evaluation(state=tuple(updated), newly_unlocked=tuple(unlocked))
