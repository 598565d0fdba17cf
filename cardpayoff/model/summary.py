"""Portfolio-level totals for a set of cards."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from cardpayoff.model.cards import CreditCard


@dataclass(frozen=True)
class CreditSummary:
    total_balance: float = 0.0
    total_minimum_payments: float = 0.0
    average_apr: float = 0.0
    weighted_average_apr: float = 0.0
    card_count: int = 0
    cards_missing_apr: tuple[str, ...] = ()
    cards_missing_min_payment: tuple[str, ...] = ()

    @property
    def has_missing_data(self) -> bool:
        return bool(self.cards_missing_apr or self.cards_missing_min_payment)


def compute_weighted_avg_apr(cards: Sequence[CreditCard]) -> float:
    """Balance-weighted average APR across all cards.

    Returns 0 if total balance is 0.
    """
    total_balance = sum(c.balance for c in cards)
    if total_balance <= 0:
        return 0.0
    return sum(c.apr * c.balance for c in cards) / total_balance


def summarize(cards: Sequence[CreditCard]) -> CreditSummary:
    if not cards:
        return CreditSummary()

    return CreditSummary(
        total_balance=sum(c.balance for c in cards),
        total_minimum_payments=sum(c.minimum_payment for c in cards),
        average_apr=sum(c.apr for c in cards) / len(cards),
        weighted_average_apr=compute_weighted_avg_apr(cards),
        card_count=len(cards),
        cards_missing_apr=tuple(c.id for c in cards if not c.apr_provided),
        cards_missing_min_payment=tuple(
            c.id for c in cards if not c.minimum_payment_provided
        ),
    )
