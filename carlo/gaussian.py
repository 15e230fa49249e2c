"""Naive Monte Carlo integration of the standard normal density."""

from __future__ import annotations

import math
import random

BOUNDARIES = (2, 10, 100, 1000)

_NORM = 1.0 / math.sqrt(2.0 * math.pi)


def gaussian_density(x: float) -> float:
    """Standard normal probability density at ``x``."""
    return math.exp(-(x * x) / 2.0) * _NORM


def naive_gaussian_integral(
    rng: random.Random, half_width: float, n_iter: int = 100000
) -> float:
    """Integrate the normal density over [-half_width, half_width] with uniform samples."""
    if half_width <= 0:
        raise ValueError("half_width must be positive")
    if n_iter <= 0:
        raise ValueError("n_iter must be positive")
    total = sum(
        gaussian_density(rng.uniform(-half_width, half_width)) for _ in range(n_iter)
    )
    return total / n_iter * 2 * half_width