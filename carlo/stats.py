"""Online mean and variance with Welford's algorithm."""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass


@dataclass
class RunningStats:
    """Running count, mean and sum of squared deviations of a stream of values."""

    count: int = 0
    mean: float = 0.0
    m2: float = 0.0

    def push(self, value: float) -> None:
        """Add one value to the statistics."""
        self.count += 1
        err = value - self.mean
        self.mean += err / self.count
        self.m2 += err * (value - self.mean)

    def extend(self, values: Iterable[float]) -> None:
        """Add every value of an iterable to the statistics."""
        for value in values:
            self.push(value)

    @property
    def variance(self) -> float:
        """Population variance of the values seen so far."""
        if self.count == 0:
            raise ValueError("variance of an empty sample is undefined")
        return self.m2 / self.count

    @property
    def stddev(self) -> float:
        """Population standard deviation of the values seen so far."""
        return math.sqrt(self.variance)


def welford(values: Iterable[float]) -> tuple[float, float]:
    """Return the mean and population variance of ``values`` in one pass."""
    stats = RunningStats()
    stats.extend(values)
    if stats.count == 0:
        raise ValueError("welford() needs at least one value")
    return stats.mean, stats.variance