"""
Turns seed tallies into per-team percentages and a text report.
"""

from dataclasses import dataclass
from typing import Dict, List

from .models import AggregateStats


DEFAULT_BYE_SEEDS = 2


@dataclass
class TeamSummary:
    """Playoff odds for one team."""

    team_id: str
    n_trials: int
    made_playoffs: int
    bye: int
    seeds: Dict[int, int]
    missed: int

    def _pct(self, count: int) -> float:
        if self.n_trials == 0:
            return 0.0
        return count / self.n_trials

    @property
    def made_playoffs_pct(self) -> float:
        return self._pct(self.made_playoffs)

    @property
    def bye_pct(self) -> float:
        return self._pct(self.bye)

    @property
    def missed_pct(self) -> float:
        return self._pct(self.missed)

    @property
    def seed_pcts(self) -> Dict[int, float]:
        return {seed: self._pct(count) for seed, count in self.seeds.items()}

    def to_dict(self) -> dict:
        return {
            "team_id": self.team_id,
            "made_playoffs": self.made_playoffs,
            "bye": self.bye,
            "seeds": dict(self.seeds),
            "missed": self.missed,
            "made_playoffs_pct": self.made_playoffs_pct,
            "bye_pct": self.bye_pct,
            "missed_pct": self.missed_pct,
            "seed_pcts": self.seed_pcts
        }


def summarize(stats: AggregateStats, bye_seeds: int = DEFAULT_BYE_SEEDS) -> List[TeamSummary]:
    """Build summaries in the league's team order."""
    bye_seeds = min(bye_seeds, stats.total_seeds)
    return [
        TeamSummary(
            team_id=team_id,
            n_trials=stats.n_trials,
            made_playoffs=team_stats.made_playoffs,
            bye=team_stats.bye_count(bye_seeds),
            seeds=dict(team_stats.seeds),
            missed=team_stats.missed
        )
        for team_id, team_stats in stats.teams.items()
    ]


def format_percent(value: float) -> str:
    return f"{value * 100:.2f}%"


def format_report(stats: AggregateStats, bye_seeds: int = DEFAULT_BYE_SEEDS) -> str:
    """Render the per-team odds as plain text."""
    lines = []
    for summary in summarize(stats, bye_seeds):
        lines.append(f"--- {summary.team_id} ---")
        lines.append("")
        lines.append(f"Made playoffs: {format_percent(summary.made_playoffs_pct)}")
        lines.append(f"First round bye: {format_percent(summary.bye_pct)}")
        lines.append("")
        for seed, pct in summary.seed_pcts.items():
            lines.append(f"Seed {seed}: {format_percent(pct)}")
        lines.append("")
    return "\n".join(lines)
