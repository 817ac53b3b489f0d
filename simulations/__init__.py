# simulations/__init__.py
"""
Monte Carlo simulations comparing plain ten-pulls (Pattern A) against
RNG adjustment (Pattern B).

Run the comparison via:
    python -m simulations.compare [--trials N] [--seed S] [--plot]
"""
