"""Tabular views of payoff results for scripts, CSV export and plotting.

Values are left unrounded; round at display time.
"""

from __future__ import annotations

import pandas as pd

from cardpayoff.planner.comparison import StrategyComparison
from cardpayoff.planner.simulator import PayoffResult

TIMELINE_COLUMNS = [
    "month",
    "card_id",
    "card_name",
    "payment",
    "interest_accrued",
    "principal_paid",
    "remaining_balance",
]

MONTHLY_COLUMNS = [
    "month",
    "total_payment",
    "total_interest",
    "total_remaining",
]


def timeline_to_frame(result: PayoffResult) -> pd.DataFrame:
    """One row per (month, card) payment."""
    rows = [
        {
            "month": snapshot.month,
            "card_id": p.card_id,
            "card_name": p.card_name,
            "payment": p.payment,
            "interest_accrued": p.interest_accrued,
            "principal_paid": p.principal_paid,
            "remaining_balance": p.remaining_balance,
        }
        for snapshot in result.timeline
        for p in snapshot.payments
    ]
    return pd.DataFrame(rows, columns=TIMELINE_COLUMNS)


def monthly_totals_frame(result: PayoffResult) -> pd.DataFrame:
    """One row per simulated month."""
    rows = [
        {
            "month": s.month,
            "total_payment": s.total_payment,
            "total_interest": s.total_interest,
            "total_remaining": s.total_remaining,
        }
        for s in result.timeline
    ]
    return pd.DataFrame(rows, columns=MONTHLY_COLUMNS)


def balance_matrix(result: PayoffResult) -> pd.DataFrame:
    """Remaining balance per card (columns) by month (index), 0 once paid.

    Cards absent from a month's snapshot are already paid off, so gaps are
    filled with 0.
    """
    frame = timeline_to_frame(result)
    if frame.empty:
        return pd.DataFrame()
    matrix = frame.pivot(index="month", columns="card_id", values="remaining_balance")
    return matrix.fillna(0.0)


def comparison_row(comparison: StrategyComparison, **labels) -> dict:
    """Flatten a StrategyComparison into a benchmark row."""
    row = dict(labels)
    for name, result in (
        ("avalanche", comparison.avalanche),
        ("snowball", comparison.snowball),
    ):
        row[f"{name}_months"] = result.total_months
        row[f"{name}_interest"] = result.total_interest_paid
        row[f"{name}_paid_off"] = result.is_payoff_possible
    row["interest_difference"] = comparison.interest_difference
    row["cheaper"] = comparison.cheaper.value
    return row
