"""Goal solver: the smallest extra monthly payment that meets a payoff horizon."""

from __future__ import annotations

import logging
import math
from typing import Sequence

from cardpayoff.exceptions import InvalidInputError
from cardpayoff.model.cards import CreditCard
from cardpayoff.model.financial_model import round_up_to_cents
from cardpayoff.planner.simulator import simulate
from cardpayoff.strategies.ordering import PayoffStrategy
from cardpayoff.utils.config import PlannerConfig

logger = logging.getLogger(__name__)


def meets_target(
    cards: Sequence[CreditCard],
    strategy: PayoffStrategy | str,
    extra_payment: float,
    target_months: int,
    config: PlannerConfig | None = None,
) -> bool:
    """True if paying ``extra_payment`` clears every card within ``target_months``."""
    result = simulate(cards, strategy, extra_payment, config)
    return result.is_payoff_possible and result.total_months <= target_months


def solve_for_extra(
    cards: Sequence[CreditCard],
    strategy: PayoffStrategy | str,
    target_months: int,
    config: PlannerConfig | None = None,
) -> float:
    """Binary-search the minimal extra payment that pays everything off in time.

    The search starts from [0, total balance], doubling the upper bound while
    it is still too small, then bisects until the interval is narrower than
    ``config.solver_tolerance`` or ``config.solver_max_iterations`` is hit.

    An unreachable target is not an error: the largest amount tried is
    returned, and the caller re-simulates with it to see that the goal is
    missed.

    The bisection result is then stepped down cent by cent while the cheaper
    amount still meets the target.

    Returns:
        The smallest whole-cent extra monthly payment that meets the target.

    Raises:
        InvalidInputError: If ``target_months`` is negative.
    """
    cfg = config or PlannerConfig()
    strategy = PayoffStrategy.parse(strategy)
    if target_months < 0:
        raise InvalidInputError(f"target_months must be >= 0, got {target_months}")

    if meets_target(cards, strategy, 0.0, target_months, cfg):
        return 0.0

    high = max(sum(c.balance for c in cards), cfg.solver_tolerance)
    expansions = 0
    while not meets_target(cards, strategy, high, target_months, cfg):
        if expansions >= cfg.solver_max_expansions:
            logger.debug(
                "Target of %d months unreachable; largest extra tried %.2f",
                target_months,
                high,
            )
            return round_up_to_cents(high)
        high *= 2
        expansions += 1

    low = 0.0
    iterations = 0
    while high - low > cfg.solver_tolerance and iterations < cfg.solver_max_iterations:
        mid = (low + high) / 2
        if meets_target(cards, strategy, mid, target_months, cfg):
            high = mid
        else:
            low = mid
        iterations += 1

    # ``high`` is feasible but may sit up to a tolerance above the minimum
    cents = math.ceil(round(high * 100.0, 6))
    while cents > 0 and meets_target(cards, strategy, (cents - 1) / 100.0, target_months, cfg):
        cents -= 1

    logger.debug(
        "Solved %s goal of %d months: extra=%.2f after %d iterations, %d expansions",
        strategy.value,
        target_months,
        cents / 100.0,
        iterations,
        expansions,
    )
    return cents / 100.0
