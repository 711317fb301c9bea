"""
Point total sampling from team projections.

Each draw is an inverse-transform sample: a uniform quantile is pushed
through the normal percent-point function for the team's projection.
"""

import math
from typing import Optional

import numpy as np
from scipy.special import ndtri

from .models import Team


def round_half_up(value: float) -> int:
    """Round to the nearest integer, with halves rounded toward +inf."""
    return math.floor(value + 0.5)


class OutcomeSampler:
    """Draws simulated point totals using a numpy random generator."""

    def __init__(self, rng: Optional[np.random.Generator] = None):
        self.rng = rng if rng is not None else np.random.default_rng()

    @classmethod
    def from_seed(cls, seed) -> 'OutcomeSampler':
        return cls(np.random.default_rng(seed))

    def quantile(self) -> float:
        """Uniform draw in (0, 1); a draw of exactly 0 would map to -inf."""
        u = self.rng.random()
        while u == 0.0:
            u = self.rng.random()
        return u

    def sample(self, mean: float, variance: float) -> int:
        return self._draw(mean, math.sqrt(variance))

    def sample_team(self, team: Team) -> int:
        return self._draw(team.mean, team.std_dev)

    def _draw(self, mean: float, std_dev: float) -> int:
        u = self.quantile()
        if std_dev == 0:
            return round_half_up(mean)
        return round_half_up(mean + std_dev * float(ndtri(u)))
