# carlo

Small, self-contained experiments in stochastic simulation:

- plain Monte Carlo estimates of pi (hit-or-miss area and curve integral),
  and the mean and variance of those estimates as the sample size grows;
- the Box-Muller transform for Gaussian samples, with running moments
  kept by Welford's algorithm;
- a naive Monte Carlo integral of the Gaussian density, which shows how
  uniform sampling wastes effort over wide intervals;
- toy Markov chains: dice tallies, a Gaussian random walk, drawing balls
  from an urn without replacement, and two rock-paper-scissors strategies;
- the Metropolis algorithm with a Gaussian action, a jackknife estimate of
  the statistical error, and writing the chain to a CSV file.

Every function takes the random number generator as an argument, so runs
are reproducible when you pass a seeded `random.Random`.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

Installing the package provides a `carlo` command with three
sub-commands. `--seed N` (given before the sub-command) seeds the random
generator.

```
carlo --help
carlo --seed 1 pi --samples 10000 --method area
carlo --seed 1 pi --method integral
carlo --seed 1 rps --throws 10
carlo --seed 1 metropolis --samples 50000 --start 100 --step 1 --csv metropolis_samples.csv
```

- `pi` prints one estimate of pi, by the area (`area`, the default) or the
  curve-integral (`integral`) method.
- `rps` plays rock, paper, scissors between two players who both keep
  their move after a win or draw, and prints each player's tally and the
  outcome of every throw (1 win, 0 draw, -1 loss, from the first player's
  side).
- `metropolis` runs a Metropolis chain for a standard Gaussian, prints the
  running mean and variance every 100 samples, and writes all samples to
  the CSV file.

## Library use

```python
import random

from carlo.pi import estimate_pi_area, estimate_pi_integral, pi_stats
from carlo.sampling import box_muller, estimate_gaussian_moments
from carlo.stats import RunningStats, welford
from carlo.metropolis import (
    gaussian_action,
    jackknife_error,
    metropolis_chain,
    write_samples_csv,
)

rng = random.Random(42)

# Two ways of estimating pi from 10,000 uniform samples.
print(estimate_pi_area(rng, 10_000))
print(estimate_pi_integral(rng, 10_000))

# Statistics of each estimator over 100 repeats per sample size.
for size, stats in pi_stats(estimate_pi_area, rng, [10, 100, 1000], 100).items():
    print(size, stats.mean, stats.variance)

# Gaussian samples from a pair of uniforms.
x, y = box_muller(0.5, 0.25)
moments = estimate_gaussian_moments(rng, 10_000)

# Running mean and variance.
stats = RunningStats()
stats.extend([1.0, 2.0, 3.0])
mean, variance = welford([1.0, 2.0, 3.0])

# A Metropolis chain for a standard Gaussian, its jackknife error,
# and the samples written out for later analysis.
samples = list(metropolis_chain(rng, 0.0, 3.0, 10_000, gaussian_action))
print(jackknife_error(samples, 50))
write_samples_csv("metropolis_samples.csv", samples)
```

`metropolis_chain` returns an iterator; wrap it in `list()` when the
samples are needed more than once.

The naive Gaussian integral lives in `carlo.gaussian`
(`gaussian_density`, `naive_gaussian_integral`), the Markov chain toys in
`carlo.chains` (`dice_tally`, `gaussian_walk`, `Urn`, `urn_draws`) and the
rock-paper-scissors games in `carlo.rps` (`Move`, `Outcome`, `GameResult`,
`outcome`, `play_adaptive_vs_random`, `play_adaptive_vs_adaptive`).

## What it does not do

The command line covers only the pi, rock-paper-scissors and Metropolis
experiments; the other experiments are available from Python only. There
is no plotting: the CSV file is meant for analysis with other tools.