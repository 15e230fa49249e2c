"""Monte Carlo estimates of pi and their spread over repeated experiments."""

from __future__ import annotations

import math
import random
from collections.abc import Callable, Iterable

from carlo.stats import RunningStats

Estimator = Callable[[random.Random, int], float]

SAMPLE_SIZES = (10, 100, 1000, 10000, 100000)
N_EXPERIMENTS = 100


def _check_iterations(n_iter: int) -> None:
    if n_iter <= 0:
        raise ValueError("n_iter must be positive")


def estimate_pi_area(rng: random.Random, n_iter: int = 10000) -> float:
    """Estimate pi from the share of random points in the unit square inside the quarter circle."""
    _check_iterations(n_iter)
    inside = 0
    for _ in range(n_iter):
        x = rng.random()
        y = rng.random()
        if x * x + y * y < 1.0:
            inside += 1
    return inside / n_iter * 4


def estimate_pi_integral(rng: random.Random, n_iter: int = 10000) -> float:
    """Estimate pi as four times the mean of sqrt(1 - x^2) over uniform x in [0, 1)."""
    _check_iterations(n_iter)
    total = sum(math.sqrt(1.0 - x * x) for x in (rng.random() for _ in range(n_iter)))
    return total / n_iter * 4


def repeat_experiment(
    estimator: Estimator,
    rng: random.Random,
    n_iter: int,
    n_experiments: int = N_EXPERIMENTS,
) -> RunningStats:
    """Run ``estimator`` ``n_experiments`` times and collect the statistics of its results."""
    if n_experiments <= 0:
        raise ValueError("n_experiments must be positive")
    stats = RunningStats()
    stats.extend(estimator(rng, n_iter) for _ in range(n_experiments))
    return stats


def pi_stats(
    estimator: Estimator,
    rng: random.Random,
    sample_sizes: Iterable[int] = SAMPLE_SIZES,
    n_experiments: int = N_EXPERIMENTS,
) -> dict[int, RunningStats]:
    """Map each sample size to the statistics of repeated estimates at that size."""
    return {
        size: repeat_experiment(estimator, rng, size, n_experiments)
        for size in sample_sizes
    }