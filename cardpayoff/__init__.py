"""Credit card payoff planning: card normalization, portfolio summaries,
avalanche/snowball amortization and goal-based extra-payment solving."""

from cardpayoff.model.cards import AccountRecord, CreditCard, build_cards
from cardpayoff.model.summary import CreditSummary, summarize
from cardpayoff.planner.goal_solver import solve_for_extra
from cardpayoff.planner.simulator import MonthlyPayment, MonthSnapshot, PayoffResult, simulate
from cardpayoff.strategies.ordering import PayoffStrategy

__version__ = "0.1.0"

__all__ = [
    "AccountRecord",
    "CreditCard",
    "CreditSummary",
    "MonthSnapshot",
    "MonthlyPayment",
    "PayoffResult",
    "PayoffStrategy",
    "build_cards",
    "simulate",
    "solve_for_extra",
    "summarize",
]
