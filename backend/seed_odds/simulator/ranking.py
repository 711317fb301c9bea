"""
Tie-break ranking of teams within a simulated season.

Teams are compared on an ordered list of criteria, each a function that
extracts a scalar from a TeamResult. Higher values rank better. A team
beats another when it is ahead on the first criterion where they differ,
so each criterion only breaks ties left by the ones before it.

Division criteria:
1. Wins
2. Division wins
3. Points scored
4. Declaration index (later-declared team wins)

Wildcard criteria:
1. Wins
2. Points scored
3. Declaration index
"""

from typing import Callable, Dict, Iterable, List, Optional, Sequence

from .exceptions import ConfigurationError, NoWinnerFoundError
from .models import TeamResult


Criterion = Callable[[TeamResult], float]


def by_wins(result: TeamResult) -> float:
    return result.wins


def by_division_wins(result: TeamResult) -> float:
    return result.division_wins


def by_points(result: TeamResult) -> float:
    return result.points


def by_declaration_index(result: TeamResult) -> float:
    return result.declaration_index


DIVISION_CRITERIA: Sequence[Criterion] = (by_wins, by_division_wins, by_points, by_declaration_index)
WILDCARD_CRITERIA: Sequence[Criterion] = (by_wins, by_points, by_declaration_index)


def beats(result: TeamResult, other: TeamResult, criteria: Sequence[Criterion]) -> bool:
    """
    Check whether ``result`` ranks strictly ahead of ``other``.

    Equivalent to: for some k, ``result`` is >= on every criterion before k
    and strictly > on criterion k.
    """
    for criterion in criteria:
        mine = criterion(result)
        theirs = criterion(other)
        if mine > theirs:
            return True
        if mine < theirs:
            return False
    return False


def find_winner(
    candidates: Iterable[str],
    results: Dict[str, TeamResult],
    criteria: Sequence[Criterion]
) -> str:
    """
    Find the candidate that beats every other candidate.

    Args:
        candidates: Team IDs to choose from
        results: Standings for the current trial
        criteria: Ordered tie-break criteria

    Returns:
        The winning team ID

    Raises:
        ConfigurationError: If there are no candidates
        NoWinnerFoundError: If no candidate beats all the others
    """
    candidates = list(candidates)
    if not candidates:
        raise ConfigurationError("Cannot rank an empty set of teams")

    for team_id in candidates:
        result = results[team_id]
        if all(
            other_id == team_id or beats(result, results[other_id], criteria)
            for other_id in candidates
        ):
            return team_id

    raise NoWinnerFoundError(f"No team beats all others among: {', '.join(candidates)}")


def rank_teams(
    candidates: Iterable[str],
    results: Dict[str, TeamResult],
    criteria: Sequence[Criterion],
    limit: Optional[int] = None
) -> List[str]:
    """
    Order teams best-first by repeatedly picking the winner of the rest.

    Args:
        candidates: Team IDs to rank
        results: Standings for the current trial
        criteria: Ordered tie-break criteria
        limit: Stop after this many teams (defaults to all of them)

    Returns:
        Ranked team IDs

    Raises:
        ConfigurationError: If ``limit`` exceeds the number of candidates
    """
    remaining = list(candidates)
    if limit is None:
        limit = len(remaining)

    ranked = []
    while len(ranked) < limit:
        if not remaining:
            raise ConfigurationError(
                f"Ran out of teams after {len(ranked)} of {limit} places"
            )
        winner = find_winner(remaining, results, criteria)
        ranked.append(winner)
        remaining.remove(winner)

    return ranked
