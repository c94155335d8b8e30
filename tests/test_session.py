"""Tests for the session orchestrator.

**Feature: stockquest**
"""

import random
from decimal import Decimal

import pytest

from conftest import make_instrument
from stockquest.achievements import CatalogEntry, TradeCountRule
from stockquest.config import SessionConfig
from stockquest.errors import CatalogError
from stockquest.events import AchievementUnlocked, LevelUp
from stockquest.session import Session
from stockquest.portfolio import to_money


@pytest.fixture
def session(instruments, fake_clock):
    return Session(SessionConfig(seed=1), instruments=instruments, clock=fake_clock)


class TestTrading:
    """Orders route through the ledger and earn experience when they execute."""

    def test_buy_grants_experience(self, session):
        result = session.buy("AAA", 2)

        assert result.success
        assert session.progression.experience == 10
        assert session.portfolio().cash == Decimal("9800")

    def test_sell_grants_experience(self, session):
        session.buy("AAA", 2)
        session.sell("AAA", 1)

        assert session.progression.experience == 25
        assert len(session.transactions) == 2
        assert session.transactions[0].side == "sell"

    def test_rejected_order_grants_nothing(self, session):
        result = session.sell("AAA", 1)

        assert not result.success
        assert session.progression.experience == 0
        assert len(session.notifications) == 0
        assert session.transactions == ()

    def test_experience_policy_from_config(self, instruments):
        session = Session(SessionConfig(buy_experience=40, sell_experience=5), instruments=instruments)

        session.buy("AAA", 1)
        session.sell("AAA", 1)

        assert session.progression.experience == 45


class TestNotifications:
    """Unlocks and level-ups reach the notification queue in order."""

    def test_first_trade_notification(self, session):
        session.buy("AAA", 1)

        notice = session.notifications.current
        assert isinstance(notice, AchievementUnlocked)
        assert notice.achievement.id == "first_trade"

    def test_level_up_then_unlock(self, session):
        for _ in range(10):
            session.buy("DDD", 1)

        drained = session.notifications.drain()

        assert isinstance(drained[0], AchievementUnlocked)
        assert drained[0].achievement.id == "first_trade"
        assert drained[1] == LevelUp(previous_level=1, level=2)
        assert isinstance(drained[2], AchievementUnlocked)
        assert drained[2].achievement.id == "active_trader"
        assert session.progression.level == 2

    def test_achievement_state_exposed(self, session):
        session.buy("AAA", 1)
        session.buy("BBB", 1)
        session.buy("CCC", 1)

        unlocked = {a.id for a in session.achievements if a.unlocked}
        assert {"first_trade", "diversified", "sector_explorer"} <= unlocked

    def test_patient_investor_uses_session_clock(self, session, fake_clock):
        session.buy("AAA", 1)
        fake_clock.advance(301)
        session.buy("BBB", 1)

        unlocked = {a.id for a in session.achievements if a.unlocked}
        assert "patient_investor" in unlocked


class TestTicks:
    """Ticks move prices and revalue the portfolio without touching the ledger."""

    def test_tick_revalues_portfolio(self, session):
        session.buy("AAA", 10)
        cash = session.portfolio().cash
        transactions = session.transactions

        for _ in range(5):
            session.tick()

        portfolio = session.portfolio()
        price = to_money(session.instrument("AAA").price)
        assert portfolio.cash == cash
        assert session.transactions == transactions
        assert portfolio.total_value == cash + price * 10
        assert portfolio.total_gain_loss == portfolio.total_value - Decimal("10000")

    def test_orders_execute_at_latest_price(self, session):
        session.tick()
        price = to_money(session.instrument("BBB").price)

        result = session.buy("BBB", 3)

        assert result.transaction.price == price

    def test_value_milestone_unlocks_on_next_trade(self, fake_clock):
        # One tick takes a volatile stock from 100 to 150
        rng = random.Random()
        rng.gauss = lambda mu, sigma: 1.0
        volatile = [make_instrument("AAA", 100.0, volatility=0.5), make_instrument("BBB", 50.0)]
        session = Session(instruments=volatile, rng=rng, clock=fake_clock)
        session.buy("AAA", 99)

        session.tick()

        assert session.portfolio().total_value == Decimal("14950")
        assert not any(a.unlocked for a in session.achievements if a.id == "growing_wealth")

        session.buy("BBB", 1)

        unlocked = {a.id for a in session.achievements if a.unlocked}
        assert "growing_wealth" in unlocked
        assert "big_league" not in unlocked

    def test_seeded_sessions_share_a_market(self, instruments):
        first = Session(SessionConfig(seed=7), instruments=instruments)
        second = Session(SessionConfig(seed=7), instruments=instruments)
        for _ in range(10):
            first.tick()
            second.tick()

        assert first.instruments == second.instruments


class TestSetup:
    """Session construction and reset."""

    def test_default_market(self):
        session = Session(rng=random.Random(0))

        assert len(session.instruments) >= 5
        assert session.portfolio().total_value == Decimal("10000")

    def test_configured_capital(self, instruments):
        session = Session(SessionConfig(initial_capital=Decimal("2500")), instruments=instruments)

        portfolio = session.portfolio()
        assert portfolio.cash == Decimal("2500")
        assert portfolio.total_gain_loss == Decimal("0")

    def test_duplicate_symbols_rejected(self):
        with pytest.raises(ValueError):
            Session(instruments=[make_instrument("AAA", 1.0), make_instrument("AAA", 2.0)])

    def test_custom_catalog(self, instruments):
        catalog = [CatalogEntry(id="two", title="Two Trades", rule=TradeCountRule(target=2))]
        session = Session(instruments=instruments, catalog=catalog)

        session.buy("AAA", 1)
        assert session.notifications.current is None
        session.buy("AAA", 1)

        assert session.notifications.current.achievement.id == "two"

    def test_bad_catalog_fails_at_startup(self, instruments):
        with pytest.raises(CatalogError):
            Session(instruments=instruments, catalog=["not an entry"])

    def test_reset(self, session):
        session.buy("AAA", 5)
        session.tick()

        session.reset()

        assert session.portfolio().cash == Decimal("10000")
        assert session.portfolio().holdings == ()
        assert session.transactions == ()
        assert session.progression.experience == 0
        assert not any(a.unlocked for a in session.achievements)
        assert len(session.notifications) == 0
