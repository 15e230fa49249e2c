"""Gaussian sampling with the Box-Muller transform."""

from __future__ import annotations

import math
import random
from collections.abc import Iterator

from carlo.stats import RunningStats


def box_muller(p: float, q: float) -> tuple[float, float]:
    """Map two uniforms, ``p`` in (0, 1] and ``q`` in [0, 1], to two standard normals."""
    if not 0.0 < p <= 1.0:
        raise ValueError(f"p must lie in (0, 1], got {p}")
    radius = math.sqrt(-2.0 * math.log(p))
    angle = 2.0 * math.pi * q
    return math.sin(angle) * radius, math.cos(angle) * radius


def gaussian_pairs(rng: random.Random, count: int) -> Iterator[tuple[float, float]]:
    """Yield ``count`` pairs of independent standard normal samples."""
    if count < 0:
        raise ValueError("count must not be negative")
    for _ in range(count):
        p = 1.0 - rng.random()  # (0, 1], keeps log(p) finite
        q = rng.random()
        yield box_muller(p, q)


def estimate_gaussian_moments(rng: random.Random, count: int = 10000) -> RunningStats:
    """Estimate mean and variance of the first Box-Muller output from ``count`` samples."""
    if count <= 0:
        raise ValueError("count must be positive")
    stats = RunningStats()
    stats.extend(x for x, _ in gaussian_pairs(rng, count))
    return stats