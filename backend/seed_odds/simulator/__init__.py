"""
Playoff Seed Simulator

Monte Carlo simulation of playoff seed probabilities from scoring projections.
"""

from .models import Team, Matchup, LeagueConfig, TeamResult, TeamSeedStats, AggregateStats
from .exceptions import SimulatorError, ConfigurationError, NoWinnerFoundError
from .sampling import OutcomeSampler, round_half_up
from .ranking import DIVISION_CRITERIA, WILDCARD_CRITERIA, beats, find_winner, rank_teams
from .engine import (
    TOTAL_TRIALS,
    resolve_matchup,
    determine_seeds,
    simulate_trial,
    run_simulations,
    run_simulations_parallel,
    partition_trials,
)
from .report import TeamSummary, summarize, format_report, format_percent

__all__ = [
    # Models
    "Team",
    "Matchup",
    "LeagueConfig",
    "TeamResult",
    "TeamSeedStats",
    "AggregateStats",
    # Exceptions
    "SimulatorError",
    "ConfigurationError",
    "NoWinnerFoundError",
    # Sampling
    "OutcomeSampler",
    "round_half_up",
    # Ranking
    "DIVISION_CRITERIA",
    "WILDCARD_CRITERIA",
    "beats",
    "find_winner",
    "rank_teams",
    # Engine
    "TOTAL_TRIALS",
    "resolve_matchup",
    "determine_seeds",
    "simulate_trial",
    "run_simulations",
    "run_simulations_parallel",
    "partition_trials",
    # Report
    "TeamSummary",
    "summarize",
    "format_report",
    "format_percent",
]
