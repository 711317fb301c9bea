"""
Tests for tie-break ranking.
"""

import itertools

import numpy as np
import pytest

from seed_odds.simulator import (
    DIVISION_CRITERIA,
    WILDCARD_CRITERIA,
    ConfigurationError,
    NoWinnerFoundError,
    TeamResult,
    beats,
    find_winner,
    rank_teams,
)
from seed_odds.simulator.ranking import by_points, by_wins


def result(team_id, index, wins=0.0, division_wins=0.0, points=0):
    return TeamResult(
        team_id=team_id,
        declaration_index=index,
        wins=wins,
        division_wins=division_wins,
        points=points
    )


class TestBeats:
    """Tests for the pairwise tie-break cascade."""

    def test_more_wins_beats_everything_else(self):
        a = result("A", 0, wins=5, division_wins=0, points=100)
        b = result("B", 1, wins=4, division_wins=4, points=900)
        assert beats(a, b, DIVISION_CRITERIA)
        assert not beats(b, a, DIVISION_CRITERIA)

    def test_division_wins_break_win_ties(self):
        a = result("A", 0, wins=5, division_wins=3, points=100)
        b = result("B", 1, wins=5, division_wins=2, points=900)
        assert beats(a, b, DIVISION_CRITERIA)
        assert not beats(b, a, DIVISION_CRITERIA)

    def test_wildcard_criteria_skip_division_wins(self):
        a = result("A", 0, wins=5, division_wins=3, points=100)
        b = result("B", 1, wins=5, division_wins=2, points=900)
        assert beats(b, a, WILDCARD_CRITERIA)

    def test_points_break_remaining_ties(self):
        a = result("A", 0, wins=5, division_wins=2, points=901)
        b = result("B", 1, wins=5, division_wins=2, points=900)
        assert beats(a, b, DIVISION_CRITERIA)

    def test_later_declared_team_wins_full_tie(self):
        a = result("A", 0, wins=5, division_wins=2, points=900)
        b = result("B", 1, wins=5, division_wins=2, points=900)
        assert beats(b, a, DIVISION_CRITERIA)
        assert not beats(a, b, DIVISION_CRITERIA)

    def test_half_wins_compare_exactly(self):
        a = result("A", 0, wins=4.5, points=0)
        b = result("B", 1, wins=4, points=1000)
        assert beats(a, b, WILDCARD_CRITERIA)

    def test_identical_results_do_not_beat(self):
        a = result("A", 0, wins=1)
        assert not beats(a, a, DIVISION_CRITERIA)

    def test_transitivity(self):
        rng = np.random.default_rng(11)
        results = [
            result(
                f"T{i}", i,
                wins=float(rng.integers(0, 4)) / 2,
                division_wins=float(rng.integers(0, 3)) / 2,
                points=int(rng.integers(0, 3))
            )
            for i in range(9)
        ]

        for criteria in (DIVISION_CRITERIA, WILDCARD_CRITERIA):
            for a, b, c in itertools.permutations(results, 3):
                if beats(a, b, criteria) and beats(b, c, criteria):
                    assert beats(a, c, criteria)

    def test_exactly_one_direction_between_distinct_teams(self):
        rng = np.random.default_rng(5)
        results = [
            result(f"T{i}", i, wins=float(rng.integers(0, 3)), points=int(rng.integers(0, 2)))
            for i in range(6)
        ]
        for a, b in itertools.combinations(results, 2):
            assert beats(a, b, WILDCARD_CRITERIA) != beats(b, a, WILDCARD_CRITERIA)


class TestFindWinner:
    """Tests for find_winner."""

    def test_single_candidate(self):
        results = {"A": result("A", 0)}
        assert find_winner(["A"], results, DIVISION_CRITERIA) == "A"

    def test_best_candidate(self):
        results = {
            "A": result("A", 0, wins=3, points=300),
            "B": result("B", 1, wins=4, points=200),
            "C": result("C", 2, wins=4, points=100),
        }
        assert find_winner(["A", "B", "C"], results, WILDCARD_CRITERIA) == "B"

    def test_only_considers_candidates(self):
        results = {
            "A": result("A", 0, wins=3),
            "B": result("B", 1, wins=9),
            "C": result("C", 2, wins=1),
        }
        assert find_winner(["A", "C"], results, WILDCARD_CRITERIA) == "A"

    def test_empty_candidates(self):
        with pytest.raises(ConfigurationError):
            find_winner([], {}, WILDCARD_CRITERIA)

    def test_no_winner_without_unique_criterion(self):
        results = {
            "A": result("A", 0, wins=2, points=100),
            "B": result("B", 1, wins=2, points=100),
        }
        with pytest.raises(NoWinnerFoundError):
            find_winner(["A", "B"], results, (by_wins, by_points))


class TestRankTeams:
    """Tests for rank_teams."""

    @pytest.fixture
    def results(self):
        return {
            "A": result("A", 0, wins=2, points=250),
            "B": result("B", 1, wins=3, points=200),
            "C": result("C", 2, wins=2, points=250),
            "D": result("D", 3, wins=1, points=500),
        }

    def test_full_ranking(self, results):
        assert rank_teams(["A", "B", "C", "D"], results, WILDCARD_CRITERIA) == ["B", "C", "A", "D"]

    def test_limit(self, results):
        assert rank_teams(["A", "B", "C", "D"], results, WILDCARD_CRITERIA, limit=2) == ["B", "C"]

    def test_zero_limit(self, results):
        assert rank_teams(["A", "B"], results, WILDCARD_CRITERIA, limit=0) == []

    def test_limit_beyond_pool(self, results):
        with pytest.raises(ConfigurationError):
            rank_teams(["A", "B"], results, WILDCARD_CRITERIA, limit=3)
