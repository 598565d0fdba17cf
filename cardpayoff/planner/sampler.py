"""PortfolioSampler generates card portfolios for benchmarking strategies.

Produces random card lists with varied numbers of cards (1–5), APRs
(12%–29%), balances ($500–$15,000) and issuer-style minimum payments.
Also provides named presets for reproducible comparisons.
"""

from __future__ import annotations

import numpy as np

from cardpayoff.exceptions import ConfigurationError
from cardpayoff.model.cards import CreditCard
from cardpayoff.model.financial_model import default_minimum_payment


_CARD_NAMES = [
    "Visa Platinum", "Mastercard Gold", "Store Card", "Rewards Card",
    "Travel Card", "Gas Card", "Medical Card", "Cash Back Card",
    "Student Card", "Department Store", "Airline Card", "Hotel Card",
]


class PortfolioSampler:
    """Generate randomized or preset credit card portfolios."""

    def __init__(
        self,
        num_cards_range: tuple[int, int] = (1, 5),
        apr_range: tuple[float, float] = (12.0, 29.0),
        balance_range: tuple[float, float] = (500.0, 15000.0),
        min_payment_rate: float = 0.02,
        min_payment_floor: float = 25.0,
        currency: str = "USD",
    ):
        if num_cards_range[1] > len(_CARD_NAMES):
            raise ConfigurationError(
                f"At most {len(_CARD_NAMES)} cards per portfolio are supported"
            )
        self.num_cards_range = num_cards_range
        self.apr_range = apr_range
        self.balance_range = balance_range
        self.min_payment_rate = min_payment_rate
        self.min_payment_floor = min_payment_floor
        self.currency = currency

    def sample(self, rng: np.random.Generator | None = None) -> list[CreditCard]:
        """Sample a random portfolio.

        Args:
            rng: Numpy random Generator for reproducibility.

        Returns:
            Cards with ids ``card-0`` … ``card-{n-1}``, all in one currency.
        """
        if rng is None:
            rng = np.random.default_rng()

        num_cards = int(rng.integers(self.num_cards_range[0], self.num_cards_range[1] + 1))
        name_indices = rng.choice(len(_CARD_NAMES), size=num_cards, replace=False)

        cards = []
        for i, name_idx in enumerate(name_indices):
            apr = round(float(rng.uniform(*self.apr_range)), 2)
            balance = round(float(rng.uniform(*self.balance_range)), 2)
            minimum = round(
                default_minimum_payment(balance, self.min_payment_rate, self.min_payment_floor),
                2,
            )
            cards.append(
                CreditCard(
                    id=f"card-{i}",
                    name=_CARD_NAMES[name_idx],
                    balance=balance,
                    apr=apr,
                    minimum_payment=minimum,
                    currency=self.currency,
                )
            )
        return cards

    @staticmethod
    def preset(name: str) -> list[CreditCard]:
        """Return a named preset portfolio.

        Available presets:
            - "easy_3card": Low APRs, moderate balances
            - "hard_5card": High APRs, high balances
            - "single_high_apr": One card at 28.9% APR

        Raises:
            ConfigurationError: If preset name is unknown.
        """
        def card(card_id: str, card_name: str, apr: float, balance: float, minimum: float) -> CreditCard:
            return CreditCard(
                id=card_id,
                name=card_name,
                balance=balance,
                apr=apr,
                minimum_payment=minimum,
                currency="USD",
            )

        presets = {
            "easy_3card": [
                card("visa", "Visa Basic", 13.9, 2000, 40),
                card("mc", "MC Standard", 15.9, 1500, 30),
                card("store", "Store Card", 19.9, 800, 25),
            ],
            "hard_5card": [
                card("platinum", "Platinum", 28.9, 12000, 240),
                card("medical", "Medical", 24.9, 8500, 170),
                card("rewards", "Rewards", 19.9, 5000, 100),
                card("dept", "Dept Store", 26.9, 3000, 60),
                card("gas", "Gas Card", 22.9, 1500, 30),
            ],
            "single_high_apr": [
                card("high", "High APR Card", 28.9, 10000, 200),
            ],
        }

        if name not in presets:
            valid = ", ".join(sorted(presets.keys()))
            raise ConfigurationError(f"Unknown preset {name!r}. Valid: {valid}")

        return presets[name]
