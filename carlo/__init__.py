"""Monte Carlo, Markov chain and Metropolis sampling experiments."""

__version__ = "0.1.0"