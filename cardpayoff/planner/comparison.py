"""Plan comparisons: savings against minimum-only, avalanche vs snowball."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Sequence

from dateutil.relativedelta import relativedelta

from cardpayoff.model.cards import CreditCard
from cardpayoff.planner.simulator import PayoffResult, simulate
from cardpayoff.strategies.ordering import PayoffStrategy
from cardpayoff.utils.config import PlannerConfig


@dataclass(frozen=True)
class PlanComparison:
    """A plan next to the minimum-payments-only baseline for the same cards."""

    baseline: PayoffResult
    plan: PayoffResult

    @property
    def months_saved(self) -> int:
        return self.baseline.total_months - self.plan.total_months

    @property
    def interest_saved(self) -> float:
        return self.baseline.total_interest_paid - self.plan.total_interest_paid


@dataclass(frozen=True)
class StrategyComparison:
    avalanche: PayoffResult
    snowball: PayoffResult

    @property
    def interest_difference(self) -> float:
        """Snowball interest minus avalanche interest (≥ 0 when avalanche wins)."""
        return self.snowball.total_interest_paid - self.avalanche.total_interest_paid

    @property
    def cheaper(self) -> PayoffStrategy:
        """Strategy with less total interest; avalanche on a tie."""
        if self.snowball.total_interest_paid < self.avalanche.total_interest_paid:
            return PayoffStrategy.SNOWBALL
        return PayoffStrategy.AVALANCHE


def compare_to_minimum_only(
    cards: Sequence[CreditCard],
    strategy: PayoffStrategy | str,
    extra_payment: float,
    config: PlannerConfig | None = None,
) -> PlanComparison:
    return PlanComparison(
        baseline=simulate(cards, strategy, 0.0, config),
        plan=simulate(cards, strategy, extra_payment, config),
    )


def compare_strategies(
    cards: Sequence[CreditCard],
    extra_payment: float,
    config: PlannerConfig | None = None,
) -> StrategyComparison:
    return StrategyComparison(
        avalanche=simulate(cards, PayoffStrategy.AVALANCHE, extra_payment, config),
        snowball=simulate(cards, PayoffStrategy.SNOWBALL, extra_payment, config),
    )


def estimate_debt_free_date(result: PayoffResult, start: date | None = None) -> date | None:
    """Calendar date ``total_months`` after ``start`` (today by default).

    Returns None when the plan never pays everything off.
    """
    if not result.is_payoff_possible:
        return None
    start = start or date.today()
    return start + relativedelta(months=result.total_months)
