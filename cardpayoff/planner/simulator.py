"""Payoff simulator: month-by-month amortization of a set of credit cards.

Each month:
  1. Interest accrues on every active card (reducing-balance method)
  2. Every active card receives its minimum, capped at what it owes
  3. The extra pool goes to the strategy's top-ranked card; whatever that
     card cannot absorb cascades to the next-ranked card in the same month
  4. Balances are updated, sub-cent remainders are cleared, and the month
     is recorded as a MonthSnapshot

Snapshots list only cards that were active at the start of the month, in
input order. The simulator works on private CardState copies and never
mutates the cards it is given.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Sequence

from cardpayoff.exceptions import InvalidInputError
from cardpayoff.model.cards import CreditCard
from cardpayoff.model.financial_model import (
    CardState,
    compute_interest,
    compute_min_payment,
    smallest_cent_above,
    update_balance,
)
from cardpayoff.strategies.ordering import PayoffStrategy
from cardpayoff.utils.config import PlannerConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MonthlyPayment:
    """One card's activity within one simulated month."""

    card_id: str
    card_name: str
    payment: float              # Interest + principal actually paid this month
    interest_accrued: float     # Charged before the payment
    principal_paid: float       # payment − interest, floored at 0
    remaining_balance: float    # After payment, floored at 0


@dataclass(frozen=True)
class MonthSnapshot:
    month: int                  # 1-based
    payments: tuple[MonthlyPayment, ...]
    total_payment: float
    total_interest: float
    total_remaining: float


@dataclass(frozen=True)
class PayoffResult:
    """Outcome of one (cards, strategy, extra payment) simulation."""

    strategy: PayoffStrategy
    extra_payment: float
    is_payoff_possible: bool
    total_months: int
    total_interest_paid: float
    total_paid: float
    payoff_order: tuple[str, ...]
    timeline: tuple[MonthSnapshot, ...]
    negative_amortization: bool = False
    minimum_extra_required: float | None = None

    def payoff_month(self, card_id: str) -> int | None:
        """Month in which ``card_id`` reached zero.

        0 for cards that started at zero, None if the card was never paid off
        (or is not part of this result).
        """
        if card_id not in self.payoff_order:
            return None
        for snapshot in self.timeline:
            for p in snapshot.payments:
                if p.card_id == card_id and p.remaining_balance <= 0:
                    return snapshot.month
        return 0

    def ordered_cards(self, cards: Sequence[CreditCard]) -> list[CreditCard]:
        """Cards in payoff order; cards never paid off follow in input order."""
        position = {card_id: i for i, card_id in enumerate(self.payoff_order)}
        return sorted(cards, key=lambda c: position.get(c.id, len(position)))


def _validate_extra(extra_payment: float) -> float:
    extra = float(extra_payment)
    if not math.isfinite(extra) or extra < 0:
        raise InvalidInputError(
            f"extra_payment must be a finite non-negative amount, got {extra_payment!r}"
        )
    return extra


def simulate(
    cards: Sequence[CreditCard],
    strategy: PayoffStrategy | str = PayoffStrategy.AVALANCHE,
    extra_payment: float = 0.0,
    config: PlannerConfig | None = None,
) -> PayoffResult:
    """Project month-by-month balances until every card is paid or the ceiling hits.

    Args:
        cards: Cards in a single currency. Their minimum payments are trusted
            as-is; gating on ``minimum_payment_provided`` is the caller's job.
        strategy: Which card gets the extra payment first.
        extra_payment: Amount paid each month on top of the minimums (≥ 0).
        config: Month ceiling, payoff threshold and rollover policy.

    Returns:
        A fresh PayoffResult. Identical inputs give equal results.

    Raises:
        InvalidInputError: On a negative or non-finite extra payment, or an
            unknown strategy name.
    """
    cfg = config or PlannerConfig()
    strategy = PayoffStrategy.parse(strategy)
    extra = _validate_extra(extra_payment)

    states = [
        CardState(
            card_id=c.id,
            name=c.name,
            apr=c.apr,
            balance=c.balance,
            minimum_payment=c.minimum_payment,
        )
        for c in cards
    ]

    def rank(items: list[CardState]) -> list[CardState]:
        return strategy.rank(
            items,
            card_id=lambda s: s.card_id,
            apr=lambda s: s.apr,
            balance=lambda s: s.balance,
        )

    # Cards owing nothing are settled before month 1
    payoff_order: list[str] = []
    for state in rank(states):
        if state.balance < cfg.paid_off_threshold:
            state.balance = 0.0
            state.is_paid_off = True
            payoff_order.append(state.card_id)

    timeline: list[MonthSnapshot] = []
    total_interest_paid = 0.0
    total_paid = 0.0
    freed_minimums = 0.0
    negative_amortization = False
    minimum_extra_required: float | None = None
    month = 0

    while month < cfg.max_months and any(not s.is_paid_off for s in states):
        month += 1

        # ── 1. Rank on start-of-month balances, accrue interest ──────────
        active = [s for s in states if not s.is_paid_off]
        ranked = rank(active)
        interests = {s.card_id: compute_interest(s) for s in active}

        # ── 2. Minimums ──────────────────────────────────────────────────
        paid = {s.card_id: compute_min_payment(s, interests[s.card_id]) for s in active}
        total_minimums = sum(paid.values())

        # ── 3. Extra pool, cascading down the ranking ────────────────────
        pool = extra + (freed_minimums if cfg.rollover_freed_minimums else 0.0)
        for state in ranked:
            if pool <= 0:
                break
            room = state.balance + interests[state.card_id] - paid[state.card_id]
            if room <= 0:
                continue
            applied = min(pool, room)
            paid[state.card_id] += applied
            pool -= applied

        # ── 4. Balances and snapshot ─────────────────────────────────────
        newly_paid: set[str] = set()
        payments = []
        for state in active:
            interest = interests[state.card_id]
            payment = paid[state.card_id]
            update_balance(state, payment, interest, cfg.paid_off_threshold)
            if state.is_paid_off:
                newly_paid.add(state.card_id)
                freed_minimums += state.minimum_payment
            payments.append(
                MonthlyPayment(
                    card_id=state.card_id,
                    card_name=state.name,
                    payment=payment,
                    interest_accrued=interest,
                    principal_paid=max(0.0, payment - interest),
                    remaining_balance=state.balance,
                )
            )

        payoff_order.extend(s.card_id for s in ranked if s.card_id in newly_paid)

        month_payment = sum(p.payment for p in payments)
        month_interest = sum(p.interest_accrued for p in payments)
        timeline.append(
            MonthSnapshot(
                month=month,
                payments=tuple(payments),
                total_payment=month_payment,
                total_interest=month_interest,
                total_remaining=sum(p.remaining_balance for p in payments),
            )
        )
        total_paid += month_payment
        total_interest_paid += month_interest

        # ── 5. Debt that grows under these inputs ────────────────────────
        if month == 1 and month_payment < month_interest:
            negative_amortization = True
            minimum_extra_required = smallest_cent_above(month_interest - total_minimums)

    is_payoff_possible = all(s.is_paid_off for s in states)

    logger.debug(
        "Simulated %s with extra=%.2f: %d months, interest=%.2f, possible=%s, negative=%s",
        strategy.value,
        extra,
        month,
        total_interest_paid,
        is_payoff_possible,
        negative_amortization,
    )

    return PayoffResult(
        strategy=strategy,
        extra_payment=extra,
        is_payoff_possible=is_payoff_possible,
        total_months=month,
        total_interest_paid=total_interest_paid,
        total_paid=total_paid,
        payoff_order=tuple(payoff_order),
        timeline=tuple(timeline),
        negative_amortization=negative_amortization,
        minimum_extra_required=minimum_extra_required,
    )
