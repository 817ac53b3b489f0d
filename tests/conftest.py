# tests/conftest.py

from __future__ import annotations

from typing import List

import matplotlib

matplotlib.use("Agg")

import pytest

from simulations.common import GachaSpec


class ScriptedSource:
    """
    Deterministic stand-in for UniformSource: replays a fixed list of
    values and fails loudly if asked for more than it holds.
    """

    def __init__(self, values: List[float]):
        self.values = list(values)
        self.calls = 0

    def next(self) -> float:
        if self.calls >= len(self.values):
            raise IndexError(f"script exhausted after {self.calls} values")
        v = self.values[self.calls]
        self.calls += 1
        return v


def batch(hits: int, size: int = 10) -> List[float]:
    """One scripted batch with exactly `hits` successes at p > 0."""
    return [0.0] * hits + [0.9] * (size - hits)


@pytest.fixture
def small_spec() -> GachaSpec:
    # Higher rare rate so seeded runs stay fast.
    return GachaSpec(probability=0.05, trials=200)


@pytest.fixture
def sure_spec() -> GachaSpec:
    return GachaSpec(probability=1.0, trials=20)
