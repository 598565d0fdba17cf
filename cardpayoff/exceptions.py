"""Exception hierarchy for cardpayoff.

Degraded account data (missing APR, missing minimum payment) is never an
error here; it is carried on the card's provenance flags instead.
"""


class PayoffError(Exception):
    """Base exception for all cardpayoff errors."""


class ConfigurationError(PayoffError):
    """Raised when a configuration or portfolio file is invalid."""


class InvalidInputError(PayoffError, ValueError):
    """Raised when a caller violates an operation's contract.

    Examples: a negative extra payment, a negative target horizon, or an
    unknown strategy name.
    """
