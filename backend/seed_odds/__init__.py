"""Playoff seed probabilities by Monte Carlo season simulation."""

__version__ = "1.0.0"
