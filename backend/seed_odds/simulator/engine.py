"""
Monte Carlo simulation engine for playoff seed probabilities.
"""

import logging
from concurrent.futures import ProcessPoolExecutor
from typing import Callable, Dict, List, Optional, Tuple

import numpy as np

from .models import AggregateStats, LeagueConfig, Matchup, TeamResult
from .ranking import DIVISION_CRITERIA, WILDCARD_CRITERIA, find_winner, rank_teams
from .sampling import OutcomeSampler


logger = logging.getLogger(__name__)

TOTAL_TRIALS = 1_000_000
PROGRESS_INTERVAL = 100


def resolve_matchup(
    matchup: Matchup,
    results: Dict[str, TeamResult],
    league: LeagueConfig,
    sampler: OutcomeSampler
) -> Tuple[int, int]:
    """
    Simulate one matchup and apply it to the trial standings.

    The league must already have passed ``LeagueConfig.validate()``.

    Args:
        matchup: The matchup to play
        results: Trial standings, updated in place
        league: League configuration
        sampler: Source of simulated point totals

    Returns:
        Tuple of (team1 points, team2 points)
    """
    team1_id, team2_id = matchup.team_ids
    points1 = sampler.sample_team(league.teams[team1_id])
    points2 = sampler.sample_team(league.teams[team2_id])

    result1 = results[team1_id]
    result2 = results[team2_id]
    result1.points += points1
    result2.points += points2

    is_division_game = league.same_division(team1_id, team2_id)

    if points1 == points2:
        result1.wins += 0.5
        result2.wins += 0.5
        if is_division_game:
            result1.division_wins += 0.5
            result2.division_wins += 0.5
    else:
        winner = result1 if points1 > points2 else result2
        winner.wins += 1
        if is_division_game:
            winner.division_wins += 1

    return points1, points2


def determine_seeds(results: Dict[str, TeamResult], league: LeagueConfig) -> List[str]:
    """
    Select and order the playoff field from final standings.

    Division winners take the top seeds, ordered among themselves by the
    wildcard criteria. Wildcards fill the remaining seeds.

    Args:
        results: Final standings for the trial
        league: League configuration

    Returns:
        Team IDs in seed order (index 0 is the #1 seed)
    """
    division_winners = [
        find_winner(division, results, DIVISION_CRITERIA)
        for division in league.divisions
    ]

    sorted_division_winners = rank_teams(division_winners, results, WILDCARD_CRITERIA)

    winner_set = set(division_winners)
    wildcard_pool = [team_id for team_id in league.teams if team_id not in winner_set]
    wildcard_winners = rank_teams(wildcard_pool, results, WILDCARD_CRITERIA, limit=league.wildcards)

    return sorted_division_winners + wildcard_winners


def simulate_trial(league: LeagueConfig, sampler: OutcomeSampler) -> List[str]:
    """Play one full season and return its seed list. Expects a validated league."""
    results = league.new_results()

    for matchup in league.matchups:
        resolve_matchup(matchup, results, league, sampler)

    return determine_seeds(results, league)


def run_simulations(
    league: LeagueConfig,
    n_trials: int = TOTAL_TRIALS,
    sampler: Optional[OutcomeSampler] = None,
    progress_callback: Optional[Callable[[float], None]] = None,
    should_stop: Optional[Callable[[], bool]] = None
) -> AggregateStats:
    """
    Run the season repeatedly and tally each team's seed.

    Args:
        league: League configuration
        n_trials: Number of seasons to simulate
        sampler: Source of simulated point totals (unseeded if omitted)
        progress_callback: Optional callback for progress updates (receives percent complete)
        should_stop: Optional check run between trials; returning True ends the run early

    Returns:
        Seed tallies for every team. ``n_trials`` on the result counts the
        trials actually completed.

    Raises:
        ConfigurationError: If the league cannot be simulated
    """
    league.validate()
    if sampler is None:
        sampler = OutcomeSampler()

    stats = AggregateStats.for_league(league)

    for trial_idx in range(n_trials):
        if progress_callback and trial_idx % PROGRESS_INTERVAL == 0:
            progress_callback(trial_idx / n_trials * 100)

        if should_stop is not None and should_stop():
            logger.info("Simulation stopped after %d of %d trials", trial_idx, n_trials)
            break

        stats.record(simulate_trial(league, sampler))

    if progress_callback:
        progress_callback(100)

    return stats


def partition_trials(n_trials: int, workers: int) -> List[int]:
    """Split a trial count as evenly as possible across workers."""
    if workers < 1:
        raise ValueError(f"workers must be at least 1, got {workers}")

    base, extra = divmod(n_trials, workers)
    return [base + (1 if i < extra else 0) for i in range(workers)]


def _run_partition(league: LeagueConfig, n_trials: int, seed_seq: np.random.SeedSequence) -> AggregateStats:
    sampler = OutcomeSampler(np.random.default_rng(seed_seq))
    return run_simulations(league, n_trials, sampler)


def run_simulations_parallel(
    league: LeagueConfig,
    n_trials: int = TOTAL_TRIALS,
    workers: int = 1,
    seed: Optional[int] = None
) -> AggregateStats:
    """
    Run the simulation split across worker processes.

    Each worker gets its own generator spawned from one SeedSequence and
    keeps private tallies, which are summed once every worker is done.

    Args:
        league: League configuration
        n_trials: Total number of seasons to simulate
        workers: Number of worker processes (1 runs in this process)
        seed: Optional seed for reproducible runs

    Returns:
        Merged seed tallies for every team
    """
    league.validate()

    counts = [count for count in partition_trials(n_trials, workers) if count > 0]
    seed_seqs = np.random.SeedSequence(seed).spawn(max(len(counts), 1))

    if len(counts) <= 1:
        stats = _run_partition(league, n_trials, seed_seqs[0])
    else:
        logger.debug("Splitting %d trials across %d workers: %s", n_trials, len(counts), counts)

        stats = AggregateStats.for_league(league)
        with ProcessPoolExecutor(max_workers=len(counts)) as executor:
            futures = [
                executor.submit(_run_partition, league, count, seed_seq)
                for count, seed_seq in zip(counts, seed_seqs)
            ]
            for future in futures:
                stats.merge(future.result())

    logger.info("Completed %d trials for %d teams", stats.n_trials, len(league.teams))
    return stats
