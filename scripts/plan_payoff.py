"""Plan a payoff for a YAML portfolio and print the month-by-month statement.

Usage:
    python scripts/plan_payoff.py
    python scripts/plan_payoff.py --portfolio configs/portfolios/example.yaml --extra 200
    python scripts/plan_payoff.py --strategy snowball --target-months 18 --csv results/timeline.csv
"""

import argparse
import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from cardpayoff.exceptions import PayoffError
from cardpayoff.model.cards import build_cards
from cardpayoff.model.summary import summarize
from cardpayoff.planner.comparison import compare_to_minimum_only, estimate_debt_free_date
from cardpayoff.planner.goal_solver import solve_for_extra
from cardpayoff.planner.simulator import PayoffResult, simulate
from cardpayoff.evaluation.reporting import timeline_to_frame
from cardpayoff.utils.config import load_planner_config, load_portfolio
from cardpayoff.utils.logging import setup_logging

logger = logging.getLogger("cardpayoff.scripts.plan_payoff")


def render_month(result: PayoffResult, index: int) -> str:
    """Human-readable statement for one simulated month."""
    snapshot = result.timeline[index]
    lines = [
        f"\n{'='*60}",
        f"  Month {snapshot.month} / {result.total_months}",
        f"{'='*60}",
    ]
    for p in snapshot.payments:
        status = "✓ PAID OFF" if p.remaining_balance <= 0 else f"${p.remaining_balance:,.2f}"
        lines.append(
            f"  {p.card_name:.<25s} Balance: {status:>12s}  "
            f"Interest: ${p.interest_accrued:>8,.2f}  "
            f"Payment: ${p.payment:>8,.2f}"
        )
    lines.append(f"  {'─'*56}")
    lines.append(
        f"  Paid: ${snapshot.total_payment:>10,.2f}  "
        f"Remaining: ${snapshot.total_remaining:>10,.2f}"
    )
    return "\n".join(lines)


def main():
    parser = argparse.ArgumentParser(description="Plan a credit card payoff")
    parser.add_argument("--portfolio", type=str, default="configs/portfolios/example.yaml")
    parser.add_argument("--planner-config", type=str, default=None, help="Override planner YAML")
    parser.add_argument("--strategy", type=str, default=None, help="avalanche or snowball")
    parser.add_argument("--extra", type=float, default=None, help="Extra monthly payment")
    parser.add_argument("--target-months", type=int, default=None, help="Solve for this horizon")
    parser.add_argument("--months", type=int, default=12, help="Statement months to print")
    parser.add_argument("--csv", type=str, default=None, help="Write the timeline to CSV")
    parser.add_argument("--log-level", type=str, default="WARNING")
    args = parser.parse_args()

    setup_logging(args.log_level)

    try:
        portfolio = load_portfolio(args.portfolio)
        planner_cfg = (
            load_planner_config(args.planner_config) if args.planner_config else portfolio.planner
        )
        cards = build_cards(portfolio.accounts, portfolio.currency, config=planner_cfg)
        strategy = args.strategy or portfolio.strategy
        extra = args.extra if args.extra is not None else portfolio.extra_payment
        target = args.target_months if args.target_months is not None else portfolio.target_months

        summary = summarize(cards)
        print(f"\n{'#'*60}")
        print(f"  {summary.card_count} cards  |  strategy = {strategy}  |  extra = ${extra:,.2f}")
        print(f"{'#'*60}")
        print(f"  Total balance:      ${summary.total_balance:>12,.2f}")
        print(f"  Minimum payments:   ${summary.total_minimum_payments:>12,.2f} /month")
        print(f"  Weighted avg APR:   {summary.weighted_average_apr:>12.2f}%")

        if summary.cards_missing_min_payment:
            # Simulating on fallback minimums would mislead; stop like the planner UI does
            print(
                "\n  Missing minimum payment for: "
                + ", ".join(summary.cards_missing_min_payment)
            )
            print("  Add the issuer minimums before planning.")
            return 1
        if summary.cards_missing_apr:
            print("  Missing APR (treated as 0%): " + ", ".join(summary.cards_missing_apr))

        if target is not None:
            extra = solve_for_extra(cards, strategy, target, planner_cfg)
            print(f"\n  To be debt-free in {target} months, pay ${extra:,.2f}/month extra.")

        comparison = compare_to_minimum_only(cards, strategy, extra, planner_cfg)
        result = comparison.plan

        for i in range(min(args.months, len(result.timeline))):
            print(render_month(result, i))

        print()
        if result.negative_amortization:
            print("  ⚠️ Payments do not cover interest; the debt grows every month.")
            print(f"  Pay at least ${result.minimum_extra_required:,.2f}/month extra to start paying it down.")
        elif not result.is_payoff_possible:
            print(f"  ✗ Not paid off within {planner_cfg.max_months} months.")
        else:
            debt_free = estimate_debt_free_date(result)
            print(f"  ✓ Debt-free in {result.total_months} months ({debt_free:%b %Y})")
            print(f"  Total interest: ${result.total_interest_paid:,.2f}")
            print(f"  Payoff order:   {' → '.join(c.name for c in result.ordered_cards(cards))}")
            if comparison.months_saved > 0 or comparison.interest_saved > 0:
                print(
                    f"  vs minimums only: save {comparison.months_saved} months "
                    f"and ${comparison.interest_saved:,.2f} in interest"
                )

        if args.csv:
            out_path = Path(args.csv)
            out_path.parent.mkdir(parents=True, exist_ok=True)
            timeline_to_frame(result).to_csv(out_path, index=False)
            print(f"\n  Timeline saved to {out_path}")
    except PayoffError as exc:
        logger.error("%s", exc)
        return 2

    return 0


if __name__ == "__main__":
    sys.exit(main())
