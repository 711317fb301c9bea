"""
Data models for the playoff seed simulator.
"""

import math
from dataclasses import dataclass, field
from typing import Dict, List, Tuple

from .exceptions import ConfigurationError


@dataclass(frozen=True)
class Team:
    """A team and its weekly scoring projection."""

    id: str
    mean: float
    variance: float

    @property
    def std_dev(self) -> float:
        return math.sqrt(self.variance)


@dataclass(frozen=True)
class Matchup:
    """A scheduled contest between two teams."""

    team1_id: str
    team2_id: str

    @property
    def team_ids(self) -> Tuple[str, str]:
        return (self.team1_id, self.team2_id)


@dataclass
class TeamResult:
    """Standings for one team within a single simulated season."""

    team_id: str
    declaration_index: int
    wins: float = 0.0
    division_wins: float = 0.0
    points: int = 0


@dataclass
class LeagueConfig:
    """
    Static league data shared by every trial.

    Teams are kept in declaration order; that order is the tie-break of
    last resort when ranking teams.
    """

    teams: Dict[str, Team]
    divisions: List[Tuple[str, ...]]
    matchups: List[Matchup]
    wildcards: int = 0
    team_index: Dict[str, int] = field(init=False, repr=False)
    division_of: Dict[str, int] = field(init=False, repr=False)

    def __post_init__(self):
        self.divisions = [tuple(division) for division in self.divisions]
        self.team_index = {team_id: i for i, team_id in enumerate(self.teams)}
        self.division_of = {}
        for div_idx, division in enumerate(self.divisions):
            for team_id in division:
                self.division_of.setdefault(team_id, div_idx)

    @property
    def team_ids(self) -> List[str]:
        return list(self.teams)

    @property
    def num_divisions(self) -> int:
        return len(self.divisions)

    @property
    def total_seeds(self) -> int:
        return self.num_divisions + self.wildcards

    def same_division(self, team1_id: str, team2_id: str) -> bool:
        try:
            return self.division_of[team1_id] == self.division_of[team2_id]
        except KeyError as e:
            raise ConfigurationError(f"Team {e.args[0]} is not in any division") from e

    def new_results(self) -> Dict[str, TeamResult]:
        """Create zeroed standings for the start of a trial."""
        return {
            team_id: TeamResult(team_id=team_id, declaration_index=idx)
            for team_id, idx in self.team_index.items()
        }

    def validate(self) -> None:
        """
        Check that the league can be simulated.

        Raises:
            ConfigurationError: If any division, matchup or team is malformed,
                or there are not enough teams to fill every wildcard slot.
        """
        if not self.teams:
            raise ConfigurationError("League has no teams")

        for team in self.teams.values():
            if not (math.isfinite(team.mean) and math.isfinite(team.variance)):
                raise ConfigurationError(
                    f"Team {team.id} has a non-finite projection (mean={team.mean}, variance={team.variance})"
                )
            if team.variance < 0:
                raise ConfigurationError(f"Team {team.id} has negative variance {team.variance}")

        if not self.divisions:
            raise ConfigurationError("League has no divisions")

        seen: Dict[str, int] = {}
        for div_idx, division in enumerate(self.divisions):
            if not division:
                raise ConfigurationError(f"Division {div_idx} is empty")
            for team_id in division:
                if team_id not in self.teams:
                    raise ConfigurationError(f"Division {div_idx} references unknown team {team_id}")
                if team_id in seen:
                    raise ConfigurationError(
                        f"Team {team_id} is in divisions {seen[team_id]} and {div_idx}"
                    )
                seen[team_id] = div_idx

        unassigned = [team_id for team_id in self.teams if team_id not in seen]
        if unassigned:
            raise ConfigurationError(f"Teams not in any division: {', '.join(unassigned)}")

        for matchup in self.matchups:
            for team_id in matchup.team_ids:
                if team_id not in self.teams:
                    raise ConfigurationError(f"Matchup references unknown team {team_id}")
            if matchup.team1_id == matchup.team2_id:
                raise ConfigurationError(f"Team {matchup.team1_id} is scheduled against itself")

        if self.wildcards < 0:
            raise ConfigurationError(f"Wildcard count must be non-negative, got {self.wildcards}")

        wildcard_pool = len(self.teams) - self.num_divisions
        if self.wildcards > wildcard_pool:
            raise ConfigurationError(
                f"{self.wildcards} wildcard slots but only {wildcard_pool} teams are eligible"
            )


@dataclass
class TeamSeedStats:
    """Seed histogram for one team across all trials."""

    team_id: str
    seeds: Dict[int, int]
    missed: int = 0

    @classmethod
    def empty(cls, team_id: str, total_seeds: int) -> 'TeamSeedStats':
        return cls(team_id=team_id, seeds={seed: 0 for seed in range(1, total_seeds + 1)})

    @property
    def made_playoffs(self) -> int:
        return sum(self.seeds.values())

    @property
    def trials(self) -> int:
        return self.made_playoffs + self.missed

    def bye_count(self, bye_seeds: int = 2) -> int:
        """Trials in which the team earned one of the top ``bye_seeds`` seeds."""
        return sum(count for seed, count in self.seeds.items() if seed <= bye_seeds)

    def to_dict(self, bye_seeds: int = 2) -> dict:
        return {
            "team_id": self.team_id,
            "made_playoffs": self.made_playoffs,
            "bye": self.bye_count(bye_seeds),
            "seeds": dict(self.seeds),
            "missed": self.missed
        }


@dataclass
class AggregateStats:
    """Per-team seed tallies accumulated over many trials."""

    total_seeds: int
    teams: Dict[str, TeamSeedStats]
    n_trials: int = 0

    @classmethod
    def for_league(cls, league: LeagueConfig) -> 'AggregateStats':
        return cls(
            total_seeds=league.total_seeds,
            teams={
                team_id: TeamSeedStats.empty(team_id, league.total_seeds)
                for team_id in league.teams
            }
        )

    def record(self, seed_list: List[str]) -> None:
        """Tally one trial's seed list."""
        positions = {team_id: idx for idx, team_id in enumerate(seed_list)}
        for team_id, stats in self.teams.items():
            idx = positions.get(team_id)
            if idx is None:
                stats.missed += 1
            else:
                stats.seeds[idx + 1] += 1
        self.n_trials += 1

    def merge(self, other: 'AggregateStats') -> 'AggregateStats':
        """Add another run's tallies into this one and return self."""
        if other.total_seeds != self.total_seeds or set(other.teams) != set(self.teams):
            raise ValueError("Cannot merge stats from different leagues")

        for team_id, stats in self.teams.items():
            other_stats = other.teams[team_id]
            for seed, count in other_stats.seeds.items():
                stats.seeds[seed] += count
            stats.missed += other_stats.missed
        self.n_trials += other.n_trials
        return self

    def to_dict(self, bye_seeds: int = 2) -> dict:
        return {
            "n_trials": self.n_trials,
            "total_seeds": self.total_seeds,
            "teams": {
                team_id: stats.to_dict(bye_seeds)
                for team_id, stats in self.teams.items()
            }
        }
