# simulations/compare.py

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

import matplotlib.pyplot as plt
from tabulate import tabulate

from .common import (
    Comparison,
    GachaSpec,
    Statistics,
    TrialDidNotTerminate,
    common_x_range,
    format_number,
    format_stats_line,
)
from .run import run_all


# No seed by default: every invocation is a fresh Monte Carlo run.
DEFAULT_SEED = None
DEFAULT_TRIALS = GachaSpec().trials

GROUPS = ("Paid", "Free", "Total")
COLUMNS = ("avg", "min", "max", "median")


def _cells(s: Statistics) -> List[str]:
    return [f"{s.average:.1f}", str(s.min), str(s.max), format_number(s.median)]


def format_report(
    stats_a: Statistics,
    stats_b_paid: Statistics,
    stats_b_free: Statistics,
    stats_b_total: Statistics,
) -> str:
    """
    Render the A/B comparison table. Pattern A has no free draws, so its
    Free and Total groups are shown as dashes.
    """
    headers = ["Pattern"] + [f"{g} {c}" for g in GROUPS for c in COLUMNS]
    placeholder = ["-"] * len(COLUMNS)

    rows = [
        ["A"] + _cells(stats_a) + placeholder + placeholder,
        ["B"] + _cells(stats_b_paid) + _cells(stats_b_free) + _cells(stats_b_total),
    ]
    return tabulate(rows, headers=headers, tablefmt="simple", disable_numparse=True)


def plot_comparison(cmp: Comparison) -> None:
    """
    Histogram of draws-to-target for both patterns on the same x-axis.
    Pattern A uses paid draws, Pattern B uses paid + free.
    """
    a = cmp.stats_a
    b = cmp.stats_b_total
    xmin, xmax = common_x_range([a, b])

    plt.figure(figsize=(12, 4))

    plt.subplot(1, 2, 1)
    plt.hist(a.results, bins=60, range=(xmin, xmax))
    plt.title("Pattern A (paid)")
    plt.xlabel("Draws to target")
    plt.ylabel("Number of trials")
    plt.xlim(xmin, xmax)

    plt.subplot(1, 2, 2)
    plt.hist(b.results, bins=60, range=(xmin, xmax))
    plt.title("Pattern B (paid + free)")
    plt.xlabel("Draws to target")
    plt.xlim(xmin, xmax)

    spec = cmp.pattern_a.spec
    plt.suptitle(
        f"Draws to {spec.target_count} rares  "
        f"(p={spec.probability}, trials={spec.trials})"
    )
    plt.tight_layout(rect=[0, 0.02, 1, 0.92])
    plt.show()


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Compare plain ten-pulls against RNG adjustment via Monte Carlo."
    )
    parser.add_argument("--trials", type=int, default=DEFAULT_TRIALS,
                        help=f"trials per pattern (default: {DEFAULT_TRIALS:,})")
    parser.add_argument("--seed", type=int, default=DEFAULT_SEED,
                        help="base RNG seed (default: unseeded)")
    parser.add_argument("--max-paid-batches", type=int, default=None,
                        help="abort a trial after this many paid ten-pulls")
    parser.add_argument("--plot", action="store_true",
                        help="show histograms of draws-to-target")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="log progress and per-pattern summaries")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        spec = GachaSpec(trials=args.trials, max_paid_batches=args.max_paid_batches)
    except ValueError as e:
        parser.error(str(e))

    print("Simulation started...")
    try:
        cmp = run_all(spec, seed=args.seed)
    except TrialDidNotTerminate as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    print(format_report(cmp.stats_a, cmp.stats_b_paid, cmp.stats_b_free, cmp.stats_b_total))

    if args.verbose:
        print()
        print(format_stats_line(cmp.pattern_a))
        print(format_stats_line(cmp.pattern_b))

    if args.plot:
        plot_comparison(cmp)

    print("\nSimulation finished")
    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
