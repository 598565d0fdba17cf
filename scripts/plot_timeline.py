"""Plot remaining balances for both strategies on one portfolio.

Usage:
    python scripts/plot_timeline.py
    python scripts/plot_timeline.py --portfolio configs/portfolios/example.yaml --extra 300
    python scripts/plot_timeline.py --preset hard_5card --output results/hard_5card.png
"""

import argparse
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

import matplotlib
matplotlib.use("Agg")  # Non-interactive backend
import matplotlib.pyplot as plt

from cardpayoff.evaluation.reporting import balance_matrix
from cardpayoff.model.cards import build_cards
from cardpayoff.planner.comparison import compare_strategies
from cardpayoff.planner.sampler import PortfolioSampler
from cardpayoff.utils.config import load_portfolio


def make_balance_plots(comparison, cards, output_path: str = "results/payoff_timeline.png") -> None:
    """Two stacked-area panels: avalanche and snowball remaining balances."""
    names = {c.id: c.name for c in cards}

    fig, axes = plt.subplots(1, 2, figsize=(14, 5), sharey=True)
    fig.suptitle("Remaining Balance by Card", fontsize=16, fontweight="bold", y=0.98)

    for ax, (title, result) in zip(
        axes,
        [("Avalanche", comparison.avalanche), ("Snowball", comparison.snowball)],
    ):
        matrix = balance_matrix(result)
        if not matrix.empty:
            ax.stackplot(
                matrix.index,
                [matrix[col].values for col in matrix.columns],
                labels=[names.get(col, col) for col in matrix.columns],
                alpha=0.7,
            )
        ax.set_title(
            f"{title}: {result.total_months} months, "
            f"${result.total_interest_paid:,.0f} interest",
            fontsize=12,
            fontweight="bold",
        )
        ax.set_xlabel("Month")
        ax.grid(axis="y", alpha=0.3)

    axes[0].set_ylabel("Balance ($)")
    axes[0].legend(loc="upper right", fontsize=8)
    plt.tight_layout(rect=[0, 0, 1, 0.95])

    out = Path(output_path)
    out.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(str(out), dpi=150, bbox_inches="tight")
    plt.close(fig)
    print(f"Timeline plot saved to {out}")


def main():
    parser = argparse.ArgumentParser(description="Plot payoff timelines")
    parser.add_argument("--portfolio", type=str, default="configs/portfolios/example.yaml")
    parser.add_argument("--preset", type=str, default=None, help="Use a sampler preset instead")
    parser.add_argument("--extra", type=float, default=None, help="Extra monthly payment")
    parser.add_argument("--output", type=str, default="results/payoff_timeline.png")
    args = parser.parse_args()

    if args.preset:
        cards = PortfolioSampler.preset(args.preset)
        extra = args.extra if args.extra is not None else 0.0
    else:
        portfolio = load_portfolio(args.portfolio)
        cards = build_cards(portfolio.accounts, portfolio.currency, config=portfolio.planner)
        extra = args.extra if args.extra is not None else portfolio.extra_payment

    if not cards:
        print("Error: no credit cards with outstanding balances.")
        sys.exit(1)

    make_balance_plots(compare_strategies(cards, extra), cards, args.output)


if __name__ == "__main__":
    main()
