# simulations/methods.py

from __future__ import annotations

from typing import Callable, Dict

from .common import GachaSpec, TrialDidNotTerminate, TrialResult

from rng_adjustment.rare_event_draw import RareEventDraw


TrialFn = Callable[[GachaSpec, RareEventDraw], TrialResult]


def _check_cap(spec: GachaSpec, method: str, batches: int, acquired: int,
               paid: int, free: int) -> None:
    if spec.max_paid_batches is not None and batches >= spec.max_paid_batches:
        raise TrialDidNotTerminate(method, acquired=acquired, paid=paid, free=free)


def simulate_pattern_a(spec: GachaSpec, draw: RareEventDraw) -> TrialResult:
    """
    Pattern A: keep buying ten-pulls until target_count rares are in hand.
    """
    acquired = 0
    paid = 0
    batches = 0

    while acquired < spec.target_count:
        _check_cap(spec, "pattern_a", batches, acquired, paid, 0)
        acquired += draw.draw_batch()
        paid += spec.batch_size
        batches += 1

    return TrialResult(paid=paid, free=0)


def simulate_pattern_b(spec: GachaSpec, draw: RareEventDraw) -> TrialResult:
    """
    Pattern B: RNG adjustment.

    Same paid loop as Pattern A, but after a paid ten-pull that produced at
    least one rare, and only while the target is still unmet, burn
    adjustment_batches free ten-pulls before paying again. The burned
    batches advance the random stream but never count toward the target.
    """
    acquired = 0
    paid = 0
    free = 0
    batches = 0

    while acquired < spec.target_count:
        _check_cap(spec, "pattern_b", batches, acquired, paid, free)
        hits = draw.draw_batch()
        paid += spec.batch_size
        batches += 1
        acquired += hits

        if hits > 0 and acquired < spec.target_count:
            draw.burn(spec.adjustment_batches)
            free += spec.burn_draws

    return TrialResult(paid=paid, free=free)


# --- Registry / dispatch -----------------------------------------------------

def get_method(name: str) -> TrialFn:
    name = name.strip().lower()
    if name not in METHODS:
        raise ValueError(f"unknown method '{name}'. Available: {sorted(METHODS.keys())}")
    return METHODS[name]


METHODS: Dict[str, TrialFn] = {
    "pattern_a": simulate_pattern_a,
    "pattern_b": simulate_pattern_b,
}
