"""Card model builder: raw account records → uniform CreditCard values.

Account records come from the account store with loosely typed, optional
numeric fields. Presence is decided once, here, and recorded on the card as
provenance flags so nothing downstream re-checks raw fields.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Any, Iterable, Mapping

from cardpayoff.exceptions import InvalidInputError
from cardpayoff.model.financial_model import default_minimum_payment
from cardpayoff.utils.config import PlannerConfig

logger = logging.getLogger(__name__)

CREDIT_ACCOUNT_TYPE = "credit"


def _to_amount(value: Any) -> float | None:
    """Coerce a raw numeric field; anything absent or malformed is None."""
    if value is None or isinstance(value, bool):
        return None
    try:
        amount = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(amount):
        return None
    return amount


@dataclass(frozen=True)
class AccountRecord:
    """One account as supplied by the account store."""

    id: str
    name: str
    account_type: str
    currency: str
    balance: float | None = None
    credit_limit: float | None = None
    available_balance: float | None = None
    due_balance: float | None = None
    apr: float | None = None
    minimum_payment: float | None = None
    payment_due_date: str | None = None

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> "AccountRecord":
        due_date = raw.get("payment_due_date")
        return cls(
            id=str(raw.get("id", "")),
            name=str(raw.get("name", "")),
            account_type=str(raw.get("account_type", "")),
            currency=str(raw.get("currency", "")),
            balance=_to_amount(raw.get("balance")),
            credit_limit=_to_amount(raw.get("credit_limit")),
            available_balance=_to_amount(raw.get("available_balance")),
            due_balance=_to_amount(raw.get("due_balance")),
            apr=_to_amount(raw.get("apr")),
            minimum_payment=_to_amount(raw.get("minimum_payment")),
            payment_due_date=str(due_date) if due_date is not None else None,
        )

    @property
    def is_credit(self) -> bool:
        return self.account_type.strip().lower() == CREDIT_ACCOUNT_TYPE

    def outstanding_balance(self) -> float:
        """Amount owed.

        Precedence: explicit due balance > (limit − available) > raw balance > 0.
        """
        if self.due_balance is not None:
            owed = self.due_balance
        elif self.credit_limit is not None and self.available_balance is not None:
            owed = self.credit_limit - self.available_balance
        elif self.balance is not None:
            owed = self.balance
        else:
            owed = 0.0
        return max(0.0, owed)


@dataclass(frozen=True)
class CreditCard:
    """A credit card as seen by the planner. Immutable for a simulation run."""

    id: str
    name: str
    balance: float
    apr: float                      # Percentage, e.g. 24.99
    minimum_payment: float
    currency: str
    apr_provided: bool = True
    minimum_payment_provided: bool = True

    def __post_init__(self) -> None:
        if self.balance < 0:
            raise InvalidInputError(
                f"Card {self.id!r} has negative balance {self.balance}"
            )

    @property
    def has_missing_data(self) -> bool:
        return not (self.apr_provided and self.minimum_payment_provided)


def card_from_record(record: AccountRecord, config: PlannerConfig | None = None) -> CreditCard:
    """Normalize a single account record into a CreditCard."""
    cfg = config or PlannerConfig()
    balance = record.outstanding_balance()

    apr_provided = record.apr is not None and record.apr > 0
    apr = record.apr if apr_provided else 0.0

    min_provided = record.minimum_payment is not None and record.minimum_payment > 0
    if min_provided:
        minimum_payment = record.minimum_payment
    else:
        minimum_payment = default_minimum_payment(
            balance,
            rate=cfg.default_min_payment_rate,
            floor=cfg.default_min_payment_floor,
        )

    return CreditCard(
        id=record.id,
        name=record.name,
        balance=balance,
        apr=apr,
        minimum_payment=minimum_payment,
        currency=record.currency,
        apr_provided=apr_provided,
        minimum_payment_provided=min_provided,
    )


def build_cards(
    account_records: Iterable[AccountRecord | Mapping[str, Any]],
    currency_filter: str | None = None,
    include_zero_balance: bool = False,
    config: PlannerConfig | None = None,
) -> list[CreditCard]:
    """Build the card list for one currency from raw account records.

    Args:
        account_records: AccountRecord instances or raw mappings with the
            account store's field names.
        currency_filter: Keep only accounts in this currency. None keeps all,
            leaving currency homogeneity to the caller.
        include_zero_balance: Keep cards that owe nothing.
        config: Supplies the fallback minimum-payment policy.

    Returns:
        Cards in input order. Never raises for absent or malformed numbers.
    """
    cards = []
    for raw in account_records:
        record = raw if isinstance(raw, AccountRecord) else AccountRecord.from_dict(raw)
        if not record.is_credit:
            continue
        if currency_filter is not None and record.currency != currency_filter:
            continue

        card = card_from_record(record, config)
        if card.balance <= 0 and not include_zero_balance:
            continue
        cards.append(card)

    logger.debug(
        "Built %d credit cards (currency=%s, missing data on %d)",
        len(cards),
        currency_filter,
        sum(1 for c in cards if c.has_missing_data),
    )
    return cards
