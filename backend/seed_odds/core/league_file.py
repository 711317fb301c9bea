"""
Loading league definitions from JSON.

Expected layout::

    {
        "teams": {"Alpha": {"projected": 110.5, "variance": 400}, ...},
        "divisions": [["Alpha", "Beta"], ["Gamma", "Delta"]],
        "matchups": [["Alpha", "Beta"], ["Gamma", "Delta"]],
        "wildcards": 2
    }

Team order in the file is the declaration order used for tie-breaks.
"""

import json
from typing import Any, Dict, List, Tuple

from pydantic import AliasChoices, BaseModel, Field, ValidationError

from ..simulator.exceptions import ConfigurationError
from ..simulator.models import LeagueConfig, Matchup, Team


class TeamProjection(BaseModel):
    """Scoring projection for one team."""
    mean: float = Field(..., validation_alias=AliasChoices("projected", "mean"), allow_inf_nan=False)
    variance: float = Field(..., ge=0, allow_inf_nan=False)


class LeagueFile(BaseModel):
    """Schema of a league definition file."""
    teams: Dict[str, TeamProjection]
    divisions: List[List[str]]
    matchups: List[Tuple[str, str]]
    wildcards: int = Field(default=0, ge=0)

    def to_league(self) -> LeagueConfig:
        league = LeagueConfig(
            teams={
                team_id: Team(id=team_id, mean=proj.mean, variance=proj.variance)
                for team_id, proj in self.teams.items()
            },
            divisions=[tuple(division) for division in self.divisions],
            matchups=[Matchup(team1_id, team2_id) for team1_id, team2_id in self.matchups],
            wildcards=self.wildcards
        )
        league.validate()
        return league


def parse_league(data: Dict[str, Any]) -> LeagueConfig:
    """
    Build a validated league from decoded JSON.

    Raises:
        ConfigurationError: If the data does not describe a valid league
    """
    try:
        league_file = LeagueFile.model_validate(data)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid league definition: {e}") from e
    return league_file.to_league()


def load_league(path: str) -> LeagueConfig:
    """
    Read and validate a league definition file.

    Raises:
        ConfigurationError: If the file is unreadable or invalid
    """
    try:
        with open(path, "r") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigurationError(f"Could not read league file {path}: {e}") from e
    return parse_league(data)
