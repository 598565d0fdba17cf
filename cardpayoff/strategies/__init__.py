"""Payoff ordering strategies."""

from cardpayoff.strategies.ordering import PayoffStrategy, avalanche_key, snowball_key

ALL_STRATEGIES = list(PayoffStrategy)

__all__ = [
    "PayoffStrategy",
    "avalanche_key",
    "snowball_key",
    "ALL_STRATEGIES",
]
