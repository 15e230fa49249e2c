[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "carlo"
version = "0.1.0"
description = "Monte Carlo, Markov chain and Metropolis experiments: pi estimates, Box-Muller sampling, random walks and jackknife errors."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "monte-carlo",
    "markov-chain",
    "mcmc",
    "metropolis",
    "box-muller",
    "jackknife",
    "welford",
    "simulation",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
carlo = "carlo.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["carlo"]

[tool.pytest.ini_options]
addopts = "-ra"
