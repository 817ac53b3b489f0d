import random
from typing import Optional


class UniformSource:
    """
    UniformSource

    Thin wrapper around random.Random exposing a single next() call that
    returns a float in [0, 1). Draw code depends only on next(), so any
    object with the same method (seeded, scripted, replayed) can stand in.

    Each instance owns its generator. Share one instance per run, never
    across concurrently running trials.
    """

    def __init__(self, seed: Optional[int] = None):
        self.seed = seed
        self._rng = random.Random(seed)

    def next(self) -> float:
        return self._rng.random()
