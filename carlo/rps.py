"""Rock, paper, scissors played as a Markov chain between two strategies."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from enum import IntEnum


class Move(IntEnum):
    ROCK = 1
    PAPER = 2
    SCISSORS = 3

    def beats(self, other: Move) -> bool:
        """True when this move wins against ``other``."""
        return _BEATS[self] is other


_BEATS = {
    Move.ROCK: Move.SCISSORS,
    Move.PAPER: Move.ROCK,
    Move.SCISSORS: Move.PAPER,
}


class Outcome(IntEnum):
    """Result of a throw from the first player's side."""

    LOSS = -1
    DRAW = 0
    WIN = 1


@dataclass
class GameResult:
    """Tallies, per-throw outcomes and moves of a game."""

    wins_a: int = 0
    wins_b: int = 0
    history: list[Outcome] = field(default_factory=list)
    moves: list[tuple[Move, Move]] = field(default_factory=list)

    def record(self, a: Move, b: Move, result: Outcome) -> None:
        """Add one throw; a draw counts for both players."""
        self.moves.append((a, b))
        self.history.append(result)
        if result is not Outcome.LOSS:
            self.wins_a += 1
        if result is not Outcome.WIN:
            self.wins_b += 1


def outcome(a: Move, b: Move) -> Outcome:
    """Outcome of move ``a`` played against move ``b``."""
    if a == b:
        return Outcome.DRAW
    return Outcome.WIN if Move(a).beats(Move(b)) else Outcome.LOSS


def _random_move(rng: random.Random) -> Move:
    return Move(rng.randint(1, 3))


def _check_throws(throws: int) -> None:
    if throws < 0:
        raise ValueError("throws must not be negative")


def play_adaptive_vs_random(rng: random.Random, throws: int = 10) -> GameResult:
    """A keeps her move after a win or draw and picks at random after a loss; B always picks at random."""
    _check_throws(throws)
    result = GameResult()
    a: Move | None = None
    keep_a = False
    for _ in range(throws):
        if a is None or not keep_a:
            a = _random_move(rng)
        b = _random_move(rng)
        res = outcome(a, b)
        result.record(a, b, res)
        keep_a = res is not Outcome.LOSS
    return result


def play_adaptive_vs_adaptive(rng: random.Random, throws: int = 10) -> GameResult:
    """Both players keep their move after a win or draw and pick at random after a loss."""
    _check_throws(throws)
    result = GameResult()
    a: Move | None = None
    b: Move | None = None
    keep_a = keep_b = False
    for _ in range(throws):
        if a is None or not keep_a:
            a = _random_move(rng)
        if b is None or not keep_b:
            b = _random_move(rng)
        res = outcome(a, b)
        result.record(a, b, res)
        keep_a = res is not Outcome.LOSS
        keep_b = res is not Outcome.WIN
    return result