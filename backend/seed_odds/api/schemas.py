"""
Pydantic schemas for API request/response validation.
"""

from typing import Optional, List, Dict, Tuple
from pydantic import BaseModel, Field

from ..simulator.exceptions import ConfigurationError
from ..simulator.models import LeagueConfig, Matchup, Team


# ============== Simulation Schemas ==============

class TeamProjectionIn(BaseModel):
    """Scoring projection for one team."""
    id: str = Field(..., min_length=1, max_length=100)
    mean: float = Field(..., allow_inf_nan=False)
    variance: float = Field(..., ge=0, allow_inf_nan=False)


class SimulationRunRequest(BaseModel):
    """Run a simulation request. Teams are listed in declaration order."""
    teams: List[TeamProjectionIn] = Field(..., min_length=1)
    divisions: List[List[str]] = Field(..., min_length=1)
    matchups: List[Tuple[str, str]]
    wildcards: int = Field(default=0, ge=0)
    n_simulations: int = Field(default=10000, ge=1)
    bye_seeds: int = Field(default=2, ge=0)
    seed: Optional[int] = Field(default=None, ge=0)

    def to_league(self) -> LeagueConfig:
        ids = [t.id for t in self.teams]
        if len(set(ids)) != len(ids):
            raise ConfigurationError("Team IDs must be unique")
        return LeagueConfig(
            teams={t.id: Team(id=t.id, mean=t.mean, variance=t.variance) for t in self.teams},
            divisions=[tuple(division) for division in self.divisions],
            matchups=[Matchup(team1_id, team2_id) for team1_id, team2_id in self.matchups],
            wildcards=self.wildcards
        )


class TeamResult(BaseModel):
    """Simulation results for a single team."""
    id: str
    made_playoffs: int
    bye: int
    missed: int
    seeds: Dict[int, int]
    made_playoffs_pct: float
    bye_pct: float
    missed_pct: float
    seed_pcts: Dict[int, float]


class SimulationResultsResponse(BaseModel):
    """Full simulation results response."""
    n_simulations: int
    total_seeds: int
    teams: List[TeamResult]
