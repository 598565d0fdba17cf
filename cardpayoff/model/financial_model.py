"""Per-card financial math for payoff simulation.

Implements:
- APR (percentage) → monthly periodic rate conversion
- Interest accrual on the reducing balance
- Minimum payment due, capped at what is owed
- Balance update with a sub-cent payoff threshold
- Fallback minimum payment policy for cards without one
"""

from __future__ import annotations

import math
from dataclasses import dataclass

PAID_OFF_THRESHOLD = 0.01


@dataclass
class CardState:
    """Mutable working state for a single card during one simulation run.

    Built fresh from an immutable ``CreditCard`` on every run; the input
    card itself is never touched.
    """

    card_id: str
    name: str
    apr: float                  # Annual percentage rate as a percentage (24.99 = 24.99%)
    balance: float              # Current outstanding balance
    minimum_payment: float      # Required monthly payment floor
    is_paid_off: bool = False

    @property
    def monthly_rate(self) -> float:
        return monthly_rate(self.apr)


def monthly_rate(apr: float) -> float:
    """APR percentage ÷ 100 ÷ 12: the simple periodic rate used by issuers."""
    return apr / 100.0 / 12.0


def compute_interest(card: CardState) -> float:
    """Compute one month of interest on the current balance.

    Formula: I_t = B_t × (APR / 100 / 12)

    Returns:
        Interest amount (≥ 0). Zero if the card is paid off.
    """
    if card.is_paid_off or card.balance <= 0:
        return 0.0
    return card.balance * card.monthly_rate


def compute_min_payment(card: CardState, interest: float) -> float:
    """Minimum due this month: the card's minimum, capped at balance + interest.

    The cap keeps a near-zero balance from being overpaid.
    """
    if card.is_paid_off or card.balance <= 0:
        return 0.0
    total_owed = card.balance + interest
    return max(0.0, min(card.minimum_payment, total_owed))


def update_balance(
    card: CardState,
    payment: float,
    interest: float,
    threshold: float = PAID_OFF_THRESHOLD,
) -> float:
    """Advance one month: add interest and subtract the payment.

    Formula: B_{t+1} = B_t + I_t − P_t  (floored at 0)

    Args:
        card: Current card state (mutated: balance, is_paid_off updated).
        payment: Total payment applied to this card.
        interest: Interest accrued this cycle.
        threshold: Balances below this are treated as fully paid.

    Returns:
        The new balance after update.
    """
    new_balance = card.balance + interest - payment
    card.balance = max(0.0, new_balance)

    if card.balance < threshold:
        card.balance = 0.0
        card.is_paid_off = True

    return card.balance


def default_minimum_payment(balance: float, rate: float = 0.02, floor: float = 25.0) -> float:
    """Fallback minimum payment for cards whose issuer minimum is unknown.

    Rule: max(rate × balance, floor)
    """
    return max(rate * max(balance, 0.0), floor)


def round_up_to_cents(amount: float) -> float:
    """Round a currency amount up to the next cent.

    The inner round() absorbs float noise so 10.000000000000004 stays 10.00.
    """
    return math.ceil(round(amount * 100.0, 6)) / 100.0


def smallest_cent_above(amount: float) -> float:
    """The smallest whole-cent amount strictly greater than ``amount``."""
    return (math.floor(round(amount * 100.0, 6)) + 1) / 100.0
