"""
Core utilities: settings and league loading.
"""

from .config import Settings, get_settings, configure_logging
from .league_file import LeagueFile, TeamProjection, parse_league, load_league

__all__ = [
    "Settings",
    "get_settings",
    "configure_logging",
    "LeagueFile",
    "TeamProjection",
    "parse_league",
    "load_league",
]
