"""Payoff simulation, goal solving and plan comparison."""

from cardpayoff.planner.comparison import (
    PlanComparison,
    StrategyComparison,
    compare_strategies,
    compare_to_minimum_only,
    estimate_debt_free_date,
)
from cardpayoff.planner.goal_solver import meets_target, solve_for_extra
from cardpayoff.planner.sampler import PortfolioSampler
from cardpayoff.planner.simulator import MonthlyPayment, MonthSnapshot, PayoffResult, simulate

__all__ = [
    "MonthSnapshot",
    "MonthlyPayment",
    "PayoffResult",
    "PlanComparison",
    "PortfolioSampler",
    "StrategyComparison",
    "compare_strategies",
    "compare_to_minimum_only",
    "estimate_debt_free_date",
    "meets_target",
    "simulate",
    "solve_for_extra",
]
