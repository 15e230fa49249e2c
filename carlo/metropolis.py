"""Metropolis sampling of a one-dimensional action and its jackknife error."""

from __future__ import annotations

import csv
import math
import os
import random
from collections.abc import Callable, Iterable, Iterator, Sequence

Action = Callable[[float], float]


def gaussian_action(x: float) -> float:
    """Action of a standard Gaussian, S(x) = x^2 / 2."""
    return 0.5 * x * x


def metropolis_step(
    rng: random.Random,
    current: float,
    step_size: float = 3.0,
    action: Action = gaussian_action,
) -> float:
    """Propose a uniform move within ``step_size`` and accept it with probability min(1, e^-dS)."""
    if step_size <= 0:
        raise ValueError("step_size must be positive")
    proposed = current + rng.uniform(-step_size, step_size)
    diff = action(current) - action(proposed)
    r = rng.random()
    if diff >= 0 or r < math.exp(diff):
        return proposed
    return current


def metropolis_chain(
    rng: random.Random,
    start: float = 0.0,
    step_size: float = 3.0,
    n_samples: int = 100,
    action: Action = gaussian_action,
) -> Iterator[float]:
    """Yield the ``n_samples`` states a Metropolis chain visits after ``start``."""
    if step_size <= 0:
        raise ValueError("step_size must be positive")
    if n_samples < 0:
        raise ValueError("n_samples must not be negative")

    def _run() -> Iterator[float]:
        current = start
        for _ in range(n_samples):
            current = metropolis_step(rng, current, step_size, action)
            yield current

    return _run()


def jackknife_error(
    samples: Sequence[float], window: int = 50, mean: float | None = None
) -> float:
    """Statistical error from the spread of the averages of consecutive full windows.

    ``mean`` defaults to the mean of all samples.
    """
    if window <= 0:
        raise ValueError("window must be positive")
    n_groups = len(samples) // window
    if n_groups < 2:
        raise ValueError("need at least two full windows of samples")
    if mean is None:
        mean = math.fsum(samples) / len(samples)
    averages = [
        math.fsum(samples[start : start + window]) / window
        for start in range(0, n_groups * window, window)
    ]
    sse = math.fsum((avg - mean) ** 2 for avg in averages)
    return math.sqrt(sse / (n_groups * (n_groups - 1)))


def write_samples_csv(path: str | os.PathLike[str], samples: Iterable[float]) -> None:
    """Write samples to a one-column CSV file headed ``sample``."""
    with open(path, "w", newline="", encoding="utf-8") as handle:
        writer = csv.writer(handle)
        writer.writerow(["sample"])
        writer.writerows([repr(float(value))] for value in samples)