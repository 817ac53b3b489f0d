# simulations/common.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence, Tuple
import time


@dataclass(frozen=True)
class GachaSpec:
    """
    Shared parameters for every pattern and every run.

    Defaults reproduce the reference scenario: a 0.5% rare rate, five rares
    wanted, ten-pulls, and three free ten-pulls burned per adjustment.
    """
    probability: float = 0.005
    target_count: int = 5
    trials: int = 100_000
    adjustment_batches: int = 3  # free ten-pulls burned after a hit
    batch_size: int = 10
    max_paid_batches: Optional[int] = None  # None = no cap

    def __post_init__(self) -> None:
        if not 0.0 <= self.probability <= 1.0:
            raise ValueError("probability must be in [0, 1]")
        if self.target_count <= 0:
            raise ValueError("target_count must be > 0")
        if self.trials < 0:
            raise ValueError("trials must be >= 0")
        if self.adjustment_batches < 0:
            raise ValueError("adjustment_batches must be >= 0")
        if self.batch_size <= 0:
            raise ValueError("batch_size must be > 0")
        if self.max_paid_batches is not None and self.max_paid_batches <= 0:
            raise ValueError("max_paid_batches must be > 0")
        if self.probability == 0.0 and self.max_paid_batches is None:
            raise ValueError(
                "probability 0 never reaches the target; set max_paid_batches"
            )

    @property
    def burn_draws(self) -> int:
        """Free draws charged for one adjustment."""
        return self.adjustment_batches * self.batch_size


class TrialDidNotTerminate(RuntimeError):
    """
    Raised when a trial hits GachaSpec.max_paid_batches before the target.
    """

    def __init__(self, method: str, acquired: int, paid: int, free: int) -> None:
        self.method = method
        self.acquired = acquired
        self.paid = paid
        self.free = free
        super().__init__(
            f"{method}: target not reached after {paid} paid draws "
            f"(acquired={acquired}, free={free})"
        )


@dataclass(frozen=True)
class TrialResult:
    """
    Draw volume spent by one trial, from zero rares to the target.
    """
    paid: int
    free: int = 0

    def __post_init__(self) -> None:
        if self.paid < 0:
            raise ValueError("paid must be >= 0")
        if self.free < 0:
            raise ValueError("free must be >= 0")

    @property
    def total(self) -> int:
        return self.paid + self.free


@dataclass(frozen=True)
class Statistics:
    """
    Summary of per-trial draw counts. `results` is sorted ascending.
    """
    average: float
    min: int
    max: int
    median: float
    results: List[int]


def summarize_values(values: Sequence[int]) -> Statistics:
    """
    Compute average/min/max/median over integer values.

    Works on a sorted copy; the caller's sequence is left untouched.
    Empty input is not an error and yields all-zero statistics.
    """
    if not values:
        return Statistics(average=0.0, min=0, max=0, median=0.0, results=[])

    ordered = sorted(values)
    n = len(ordered)

    total = 0
    for v in ordered:
        total += v
    average = total / n

    mid = n // 2
    if n % 2:
        median = float(ordered[mid])
    else:
        median = (ordered[mid - 1] + ordered[mid]) / 2

    return Statistics(
        average=average,
        min=ordered[0],
        max=ordered[-1],
        median=median,
        results=ordered,
    )


@dataclass
class StrategyRun:
    """
    Common return type for one pattern run over spec.trials trials.
    """
    method: str
    spec: GachaSpec
    trials: List[TrialResult]

    paid: Statistics = field(init=False)
    free: Statistics = field(init=False)
    total: Statistics = field(init=False)
    runtime_s: Optional[float] = None
    meta: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        paid = [t.paid for t in self.trials]
        free = [t.free for t in self.trials]
        total = [t.total for t in self.trials]

        # Sanity: every trial accounts for all of its draws
        for p, f, t in zip(paid, free, total):
            if p + f != t:
                raise ValueError(f"total mismatch: {p} + {f} != {t}")

        self.paid = summarize_values(paid)
        self.free = summarize_values(free)
        self.total = summarize_values(total)


@dataclass(frozen=True)
class Comparison:
    """
    Pattern A against Pattern B under the same spec.
    """
    pattern_a: StrategyRun
    pattern_b: StrategyRun

    @property
    def stats_a(self) -> Statistics:
        return self.pattern_a.paid

    @property
    def stats_b_paid(self) -> Statistics:
        return self.pattern_b.paid

    @property
    def stats_b_free(self) -> Statistics:
        return self.pattern_b.free

    @property
    def stats_b_total(self) -> Statistics:
        return self.pattern_b.total


class Timer:
    """
    Tiny timing helper for simulations.
    Usage:
        with Timer() as t:
            ...
        elapsed = t.elapsed_s
    """
    def __init__(self) -> None:
        self._start: Optional[float] = None
        self.elapsed_s: Optional[float] = None

    def __enter__(self) -> "Timer":
        self._start = time.time()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if self._start is not None:
            self.elapsed_s = time.time() - self._start


def common_x_range(stats: List[Statistics]) -> Tuple[int, int]:
    """
    Shared (xmin, xmax) across several distributions, for histograms drawn
    on the same x-axis.
    """
    if not stats:
        raise ValueError("stats must be non-empty")

    xmin = stats[0].min
    xmax = stats[0].max
    for s in stats[1:]:
        if s.min < xmin:
            xmin = s.min
        if s.max > xmax:
            xmax = s.max
    return xmin, xmax


def format_number(value: float) -> str:
    """
    Print integral floats without a trailing '.0' (medians are often whole).
    """
    if float(value).is_integer():
        return str(int(value))
    return str(value)


def format_stats_line(r: StrategyRun) -> str:
    """
    Human-friendly one-liner for printing in compare tools.
    """
    s = r.total
    return (
        f"{r.method}: trials={len(r.trials)}, mean={s.average:.1f}, "
        f"min={s.min}, max={s.max}, median={format_number(s.median)}"
        + (f", runtime={r.runtime_s:.3f}s" if r.runtime_s is not None else "")
    )
