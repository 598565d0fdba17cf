"""Benchmark avalanche vs snowball on randomized portfolios and produce a CSV.

Usage:
    python scripts/compare_strategies.py                     # 1000 portfolios × 5 seeds
    python scripts/compare_strategies.py --quick             # 50 portfolios × 1 seed
    python scripts/compare_strategies.py --extra 100 250 500
"""

import argparse
import logging
import sys
import time
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

import numpy as np
import pandas as pd

from cardpayoff.evaluation.reporting import comparison_row
from cardpayoff.planner.comparison import compare_strategies
from cardpayoff.planner.sampler import PortfolioSampler
from cardpayoff.utils.logging import setup_logging

logger = logging.getLogger("cardpayoff.scripts.compare_strategies")


def run_benchmark(
    num_portfolios: int = 1000,
    seeds: list[int] | None = None,
    extra_payments: list[float] | None = None,
    output_dir: str = "results",
) -> pd.DataFrame:
    """Simulate both strategies over seeds × portfolios × extra payments.

    Returns:
        DataFrame with one row per (seed, portfolio, extra_payment).
    """
    if seeds is None:
        seeds = [42]
    if extra_payments is None:
        extra_payments = [0.0, 100.0, 250.0, 500.0]

    sampler = PortfolioSampler()
    rows: list[dict] = []

    total_runs = len(seeds) * num_portfolios * len(extra_payments)
    completed = 0
    t0 = time.time()

    for seed in seeds:
        # Same portfolios for every extra payment level under this seed
        rng = np.random.default_rng(seed)
        portfolios = [sampler.sample(rng) for _ in range(num_portfolios)]

        for idx, cards in enumerate(portfolios):
            for extra in extra_payments:
                comparison = compare_strategies(cards, extra)
                rows.append(
                    comparison_row(
                        comparison,
                        seed=seed,
                        portfolio=idx,
                        num_cards=len(cards),
                        total_balance=round(sum(c.balance for c in cards), 2),
                        extra_payment=extra,
                    )
                )

                completed += 1
                if completed % 500 == 0:
                    elapsed = time.time() - t0
                    rate = completed / elapsed if elapsed > 0 else 0
                    eta = (total_runs - completed) / rate if rate > 0 else 0
                    logger.info(
                        "[%d/%d] %.0fs elapsed, ~%.0fs remaining",
                        completed, total_runs, elapsed, eta,
                    )

    df = pd.DataFrame(rows)

    out_path = Path(output_dir)
    out_path.mkdir(parents=True, exist_ok=True)
    csv_path = out_path / "strategy_comparison.csv"
    df.to_csv(csv_path, index=False)
    print(f"\nPer-portfolio results saved to {csv_path}")

    return df


def print_summary(df: pd.DataFrame) -> None:
    """Print summary stats grouped by extra payment level."""
    summary_rows = []
    for extra, group in df.groupby("extra_payment", sort=True):
        paid = group[group["avalanche_paid_off"] & group["snowball_paid_off"]]
        summary_rows.append({
            "Extra": f"${extra:,.0f}",
            "Avalanche interest (mean)": f"${paid['avalanche_interest'].mean():,.0f}",
            "Snowball interest (mean)": f"${paid['snowball_interest'].mean():,.0f}",
            "Avalanche months": f"{paid['avalanche_months'].mean():.1f}",
            "Snowball months": f"{paid['snowball_months'].mean():.1f}",
            "Paid Off %": f"{group['avalanche_paid_off'].mean() * 100:.1f}%",
            "Avalanche cheaper %": f"{(group['cheaper'] == 'avalanche').mean() * 100:.1f}%",
        })
    summary = pd.DataFrame(summary_rows)
    print("\n" + "=" * 110)
    print("  AVALANCHE vs SNOWBALL: Summary Statistics")
    print("=" * 110)
    print(summary.to_string(index=False))
    print()


def sanity_checks(df: pd.DataFrame) -> None:
    """Avalanche should never cost more interest than snowball on average."""
    print("Sanity checks:")
    paid = df[df["avalanche_paid_off"] & df["snowball_paid_off"]]
    aval = paid["avalanche_interest"].mean()
    snow = paid["snowball_interest"].mean()
    if aval <= snow:
        print(f"  [PASS] Avalanche (${aval:,.0f}) <= Snowball (${snow:,.0f}) on interest")
    else:
        print(
            f"  [FAIL] Avalanche (${aval:,.0f}) > Snowball (${snow:,.0f}) on interest!\n"
            f"    This violates a known financial truth. Possible simulator bug."
        )
    print()


def main():
    parser = argparse.ArgumentParser(description="Benchmark payoff strategies")
    parser.add_argument("--quick", action="store_true", help="Quick run: 50 portfolios, 1 seed")
    parser.add_argument("--portfolios", type=int, default=1000)
    parser.add_argument("--seeds", type=int, nargs="+", default=[42, 123, 456, 789, 1024])
    parser.add_argument("--extra", type=float, nargs="+", default=None, help="Extra payment levels")
    parser.add_argument("--output", type=str, default="results", help="Output directory")
    parser.add_argument("--log-level", type=str, default="INFO")
    args = parser.parse_args()

    setup_logging(args.log_level)

    if args.quick:
        num_portfolios = 50
        seeds = [42]
        print("Quick mode: 50 portfolios × 1 seed")
    else:
        num_portfolios = args.portfolios
        seeds = args.seeds
        print(f"Full mode: {num_portfolios} portfolios × {len(seeds)} seeds")

    df = run_benchmark(
        num_portfolios=num_portfolios,
        seeds=seeds,
        extra_payments=args.extra,
        output_dir=args.output,
    )

    print_summary(df)
    sanity_checks(df)


if __name__ == "__main__":
    main()
