"""Unit tests for plan comparisons and the debt-free date."""

from datetime import date

import pytest

from cardpayoff.model.cards import CreditCard
from cardpayoff.planner.comparison import (
    compare_strategies,
    compare_to_minimum_only,
    estimate_debt_free_date,
)
from cardpayoff.planner.sampler import PortfolioSampler
from cardpayoff.planner.simulator import simulate
from cardpayoff.strategies import PayoffStrategy


@pytest.fixture
def cards() -> list[CreditCard]:
    return PortfolioSampler.preset("easy_3card")


class TestMinimumOnlyComparison:

    def test_extra_payment_saves_time_and_interest(self, cards):
        comparison = compare_to_minimum_only(cards, "avalanche", 200.0)
        assert comparison.baseline.extra_payment == 0.0
        assert comparison.plan.extra_payment == 200.0
        assert comparison.months_saved > 0
        assert comparison.interest_saved > 0

    def test_zero_extra_saves_nothing(self, cards):
        comparison = compare_to_minimum_only(cards, "snowball", 0.0)
        assert comparison.months_saved == 0
        assert comparison.interest_saved == pytest.approx(0.0)


class TestStrategyComparison:

    def test_avalanche_is_cheaper(self):
        two = [
            CreditCard(id="A", name="A", balance=500.0, apr=10.0, minimum_payment=25.0, currency="USD"),
            CreditCard(id="B", name="B", balance=2000.0, apr=25.0, minimum_payment=50.0, currency="USD"),
        ]
        comparison = compare_strategies(two, 100.0)
        assert comparison.avalanche.strategy is PayoffStrategy.AVALANCHE
        assert comparison.snowball.strategy is PayoffStrategy.SNOWBALL
        assert comparison.interest_difference >= 0
        assert comparison.cheaper is PayoffStrategy.AVALANCHE

    def test_tie_prefers_avalanche(self):
        single = PortfolioSampler.preset("single_high_apr")
        comparison = compare_strategies(single, 50.0)
        assert comparison.interest_difference == pytest.approx(0.0)
        assert comparison.cheaper is PayoffStrategy.AVALANCHE


class TestDebtFreeDate:

    def test_adds_calendar_months(self):
        flat = [CreditCard(id="f", name="F", balance=1100.0, apr=0.0, minimum_payment=100.0, currency="USD")]
        result = simulate(flat, "avalanche", 0.0)
        assert result.total_months == 11
        assert estimate_debt_free_date(result, date(2026, 1, 31)) == date(2026, 12, 31)

    def test_month_end_clamped(self):
        flat = [CreditCard(id="f", name="F", balance=100.0, apr=0.0, minimum_payment=100.0, currency="USD")]
        result = simulate(flat, "avalanche", 0.0)
        assert estimate_debt_free_date(result, date(2026, 1, 31)) == date(2026, 2, 28)

    def test_impossible_plan_has_no_date(self):
        growing = [CreditCard(id="g", name="G", balance=1000.0, apr=36.0, minimum_payment=20.0, currency="USD")]
        assert estimate_debt_free_date(simulate(growing, "avalanche", 0.0)) is None

    def test_nothing_owed_is_debt_free_today(self):
        result = simulate([], "avalanche", 0.0)
        assert estimate_debt_free_date(result, date(2026, 10, 19)) == date(2026, 10, 19)
