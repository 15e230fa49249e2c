"""Command line entry point for the Monte Carlo experiments."""

from __future__ import annotations

import argparse
import random
from collections.abc import Sequence

from carlo.metropolis import metropolis_chain, write_samples_csv
from carlo.pi import estimate_pi_area, estimate_pi_integral
from carlo.rps import play_adaptive_vs_adaptive
from carlo.stats import RunningStats

_PI_METHODS = {
    "area": estimate_pi_area,
    "integral": estimate_pi_integral,
}


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="carlo", description="Run small Monte Carlo experiments."
    )
    parser.add_argument(
        "--seed", type=int, default=None, help="seed for the random generator"
    )
    commands = parser.add_subparsers(dest="command", required=True)

    pi = commands.add_parser("pi", help="estimate pi by random sampling")
    pi.add_argument("--samples", type=int, default=10000)
    pi.add_argument("--method", choices=sorted(_PI_METHODS), default="area")

    rps = commands.add_parser(
        "rps", help="play rock, paper, scissors between two adaptive players"
    )
    rps.add_argument("--throws", type=int, default=10)

    metro = commands.add_parser(
        "metropolis", help="sample a Gaussian with the Metropolis algorithm"
    )
    metro.add_argument("--samples", type=int, default=50000)
    metro.add_argument("--start", type=float, default=100.0)
    metro.add_argument("--step", type=float, default=1.0)
    metro.add_argument("--report-every", type=int, default=100)
    metro.add_argument("--csv", default="metropolis_samples.csv")
    return parser


def _run_pi(rng: random.Random, args: argparse.Namespace) -> None:
    estimate = _PI_METHODS[args.method](rng, args.samples)
    print(f"The final approximation to pi is: {estimate}")


def _run_rps(rng: random.Random, args: argparse.Namespace) -> None:
    game = play_adaptive_vs_adaptive(rng, args.throws)
    print(f"Total wins a: {game.wins_a}")
    print(f"Total wins b: {game.wins_b}")
    print("The history of wins was:")
    for result in game.history:
        print(f" {int(result)} ")


def _run_metropolis(rng: random.Random, args: argparse.Namespace) -> None:
    if args.report_every <= 0:
        raise ValueError("report-every must be positive")
    stats = RunningStats()
    samples = []
    chain = metropolis_chain(rng, args.start, args.step, args.samples)
    for index, value in enumerate(chain):
        stats.push(value)
        samples.append(value)
        if index % args.report_every == 0:
            print(f"Current avg is: {stats.mean}")
            print(f"Current var is: {stats.variance}")
    write_samples_csv(args.csv, samples)


_COMMANDS = {
    "pi": _run_pi,
    "rps": _run_rps,
    "metropolis": _run_metropolis,
}


def main(argv: Sequence[str] | None = None) -> int:
    """Parse ``argv`` and run the chosen experiment; return the exit status."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    rng = random.Random(args.seed)
    try:
        _COMMANDS[args.command](rng, args)
    except ValueError as exc:
        parser.error(str(exc))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())