"""
Shared league fixtures.
"""

import pytest

from seed_odds.simulator import LeagueConfig, Matchup, Team


def make_league(projections, divisions, matchups, wildcards=0) -> LeagueConfig:
    """Build a league from {team_id: (mean, variance)} in declaration order."""
    return LeagueConfig(
        teams={tid: Team(id=tid, mean=mean, variance=var) for tid, (mean, var) in projections.items()},
        divisions=[tuple(d) for d in divisions],
        matchups=[Matchup(a, b) for a, b in matchups],
        wildcards=wildcards
    )


@pytest.fixture
def fixed_league() -> LeagueConfig:
    """Two divisions of two teams with zero variance (scores equal projections)."""
    return make_league(
        {"A": (100, 0), "B": (90, 0), "C": (80, 0), "D": (120, 0)},
        divisions=[["A", "B"], ["C", "D"]],
        matchups=[("A", "B"), ("C", "D")],
        wildcards=0
    )


@pytest.fixture
def random_league() -> LeagueConfig:
    """Three divisions of four teams playing a round robin, three wildcards."""
    names = [f"T{i}" for i in range(12)]
    projections = {name: (100 + 3 * i, 225 + 10 * i) for i, name in enumerate(names)}
    divisions = [names[0:4], names[4:8], names[8:12]]
    matchups = [(a, b) for i, a in enumerate(names) for b in names[i + 1:]]
    return make_league(projections, divisions, matchups, wildcards=3)
