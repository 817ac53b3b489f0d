# simulations/run.py

from __future__ import annotations

import logging
from typing import List, Optional

from .common import Comparison, GachaSpec, StrategyRun, Timer, TrialResult
from .methods import get_method

from rng_adjustment.rare_event_draw import RareEventDraw


logger = logging.getLogger(__name__)

# Pattern B draws from its own stream, offset from Pattern A's seed.
SEED_OFFSET = 1000


def run_strategy(
    method: str,
    spec: GachaSpec,
    seed: Optional[int] = None,
    source=None,
) -> StrategyRun:
    """
    Run one pattern spec.trials times and return a StrategyRun.

    Parameters
    ----------
    method:
        Registered pattern name ('pattern_a' or 'pattern_b').
    spec:
        Shared simulation parameters.
    seed:
        Seed for a fresh UniformSource. None draws from OS entropy.
    source:
        Optional pre-built random source (anything with next()); takes
        precedence over `seed`.

    Returns
    -------
    StrategyRun
    """
    fn = get_method(method)
    draw = RareEventDraw(
        spec.probability,
        batch_size=spec.batch_size,
        source=source,
        seed=seed,
    )

    logger.info("running %s: %d trials (seed=%s)", method, spec.trials, seed)
    step = max(spec.trials // 10, 1)

    trials: List[TrialResult] = []
    with Timer() as t:
        for i in range(spec.trials):
            trials.append(fn(spec, draw))
            if (i + 1) % step == 0:
                logger.info("%s: %d/%d trials", method, i + 1, spec.trials)

    logger.info("%s finished in %.2fs", method, t.elapsed_s)

    return StrategyRun(
        method=method,
        spec=spec,
        trials=trials,
        runtime_s=t.elapsed_s,
        meta={"seed": seed, "draws": draw.draws_consumed()},
    )


def run_all(spec: GachaSpec, seed: Optional[int] = None) -> Comparison:
    """
    Run Pattern A then Pattern B under the same spec.

    Each pattern gets an independent stream; with a seed both are
    reproducible.
    """
    seed_b = seed + SEED_OFFSET if seed is not None else None
    ra = run_strategy("pattern_a", spec, seed=seed)
    rb = run_strategy("pattern_b", spec, seed=seed_b)
    return Comparison(pattern_a=ra, pattern_b=rb)
