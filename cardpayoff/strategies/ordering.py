"""Payoff strategies and the orderings they impose on active cards.

Each strategy is a pure sort key over (card id, APR, current balance).
Lower keys are paid first: they receive the extra payment, and when several
cards reach zero in the same month they are listed in key order.
"""

from __future__ import annotations

from enum import Enum
from typing import Callable, Iterable, TypeVar

from cardpayoff.exceptions import InvalidInputError

T = TypeVar("T")

SortKey = tuple


def avalanche_key(card_id: str, apr: float, balance: float) -> SortKey:
    """Highest APR first; ties → larger balance, then card id."""
    return (-apr, -balance, str(card_id))


def snowball_key(card_id: str, apr: float, balance: float) -> SortKey:
    """Smallest balance first; ties → higher APR, then card id."""
    return (balance, -apr, str(card_id))


class PayoffStrategy(str, Enum):
    """Debt repayment ordering policy.

    - avalanche: pay highest-APR cards first (least total interest)
    - snowball: pay smallest balances first (earliest individual payoffs)
    """

    AVALANCHE = "avalanche"
    SNOWBALL = "snowball"

    @classmethod
    def parse(cls, value: "PayoffStrategy | str") -> "PayoffStrategy":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            valid = ", ".join(s.value for s in cls)
            raise InvalidInputError(
                f"Unknown strategy {value!r}. Valid: {valid}"
            ) from None

    @property
    def key(self) -> Callable[[str, float, float], SortKey]:
        return _KEYS[self]

    def rank(
        self,
        items: Iterable[T],
        card_id: Callable[[T], str],
        apr: Callable[[T], float],
        balance: Callable[[T], float],
    ) -> list[T]:
        """Return ``items`` sorted into this strategy's payoff priority."""
        key = self.key
        return sorted(items, key=lambda item: key(card_id(item), apr(item), balance(item)))


_KEYS = {
    PayoffStrategy.AVALANCHE: avalanche_key,
    PayoffStrategy.SNOWBALL: snowball_key,
}
