"""Unit tests for solving the extra payment needed to hit a payoff horizon."""

import pytest

from cardpayoff.exceptions import InvalidInputError
from cardpayoff.model.cards import CreditCard
from cardpayoff.planner.goal_solver import meets_target, solve_for_extra
from cardpayoff.planner.sampler import PortfolioSampler
from cardpayoff.planner.simulator import simulate
from cardpayoff.utils.config import PlannerConfig


@pytest.fixture
def flat_card() -> list[CreditCard]:
    """$1200 at 0% APR with a $100 minimum: 12 months on minimums alone."""
    return [
        CreditCard(
            id="flat",
            name="Flat",
            balance=1200.0,
            apr=0.0,
            minimum_payment=100.0,
            currency="USD",
        )
    ]


class TestSolveForExtra:

    def test_six_month_goal(self, flat_card):
        extra = solve_for_extra(flat_card, "avalanche", 6)
        assert extra == pytest.approx(100.0)
        assert not meets_target(flat_card, "avalanche", extra - 0.01, 6)

        result = simulate(flat_card, "avalanche", extra)
        assert result.is_payoff_possible is True
        assert result.total_months <= 6

    def test_minimums_already_enough(self, flat_card):
        assert solve_for_extra(flat_card, "avalanche", 12) == 0.0
        assert solve_for_extra(flat_card, "avalanche", 24) == 0.0

    def test_no_cards(self):
        assert solve_for_extra([], "snowball", 3) == 0.0

    def test_one_month_goal_needs_whole_balance(self, flat_card):
        extra = solve_for_extra(flat_card, "avalanche", 1)
        assert extra == pytest.approx(1100.0, abs=0.02)
        assert meets_target(flat_card, "avalanche", extra, 1)
        assert not meets_target(flat_card, "avalanche", extra - 0.01, 1)

    @pytest.mark.parametrize("strategy", ["avalanche", "snowball"])
    def test_multi_card_result_is_minimal(self, strategy):
        cards = PortfolioSampler.preset("easy_3card")
        extra = solve_for_extra(cards, strategy, 12)

        assert extra > 0
        assert meets_target(cards, strategy, extra, 12)
        assert not meets_target(cards, strategy, extra - 0.01, 12)
        assert round(extra * 100) == pytest.approx(extra * 100)

    def test_expands_upper_bound_when_interest_outpaces_minimums(self):
        # Minimums far below interest, so the total balance alone is not enough in 1 month
        cards = [
            CreditCard(
                id="hot",
                name="Hot",
                balance=1000.0,
                apr=120.0,
                minimum_payment=1.0,
                currency="USD",
            )
        ]
        extra = solve_for_extra(cards, "avalanche", 1)
        assert extra == pytest.approx(1000.0 * 1.1 - 1.0, abs=0.02)
        assert meets_target(cards, "avalanche", extra, 1)
        assert not meets_target(cards, "avalanche", extra - 0.01, 1)

    def test_unreachable_goal_returns_largest_tried(self, flat_card):
        cfg = PlannerConfig(solver_max_expansions=3)
        extra = solve_for_extra(flat_card, "avalanche", 0, cfg)
        assert extra == pytest.approx(1200.0 * 2 ** 3)

        result = simulate(flat_card, "avalanche", extra, cfg)
        assert result.total_months > 0  # caller detects the miss by re-simulating

    def test_negative_target_rejected(self, flat_card):
        with pytest.raises(InvalidInputError):
            solve_for_extra(flat_card, "avalanche", -1)
