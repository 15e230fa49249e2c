"""Small Markov chains: a running dice tally, a Gaussian random walk and an urn."""

from __future__ import annotations

import random
from dataclasses import dataclass
from itertools import accumulate

RED = 0
BLUE = 1


def _check_count(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative")


def dice_tally(rng: random.Random, rolls: int = 10) -> list[int]:
    """Roll a six-sided die ``rolls`` times and return the running total after each roll."""
    _check_count("rolls", rolls)
    return list(accumulate(rng.randint(1, 6) for _ in range(rolls)))


def gaussian_walk(rng: random.Random, steps: int = 100) -> list[float]:
    """Return a walk whose each position is drawn from N(previous position, 1), starting at 0."""
    _check_count("steps", steps)
    return list(accumulate(rng.gauss(0.0, 1.0) for _ in range(steps)))


@dataclass
class Urn:
    """An urn of red and blue balls drawn without replacement."""

    red: int = 5
    blue: int = 5

    def __post_init__(self) -> None:
        _check_count("red", self.red)
        _check_count("blue", self.blue)

    @property
    def total(self) -> int:
        """Number of balls left in the urn."""
        return self.red + self.blue

    def draw(self, rng: random.Random) -> int:
        """Take one ball at random and return ``RED`` or ``BLUE``."""
        if self.total == 0:
            raise ValueError("cannot draw from an empty urn")
        if rng.random() * self.total < self.red:
            self.red -= 1
            return RED
        self.blue -= 1
        return BLUE


def urn_draws(
    rng: random.Random, red: int = 5, blue: int = 5, draws: int = 10
) -> list[int]:
    """Draw ``draws`` balls from a fresh urn and return the colours in order."""
    _check_count("draws", draws)
    urn = Urn(red, blue)
    if draws > urn.total:
        raise ValueError("cannot draw more balls than the urn holds")
    return [urn.draw(rng) for _ in range(draws)]