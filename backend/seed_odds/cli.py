"""
Command-line entry point: simulate a league file and print seed odds.
"""

import argparse
import logging
import sys
from typing import List, Optional

from .core.config import configure_logging, get_settings
from .core.league_file import load_league
from .simulator import SimulatorError, format_report, run_simulations_parallel


logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    settings = get_settings()
    parser = argparse.ArgumentParser(
        prog="seed_odds",
        description="Playoff seed probabilities by Monte Carlo season simulation",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Full run with the default trial count
  python -m seed_odds league.json

  # Quick reproducible run on four processes
  python -m seed_odds league.json --trials 10000 --workers 4 --seed 7
"""
    )

    parser.add_argument(
        "league",
        help="Path to the league JSON file"
    )
    parser.add_argument(
        "--trials", "-n",
        type=int,
        default=settings.total_trials,
        help=f"Number of seasons to simulate (default: {settings.total_trials})"
    )
    parser.add_argument(
        "--workers", "-w",
        type=int,
        default=settings.workers,
        help="Worker processes (default: %(default)s)"
    )
    parser.add_argument(
        "--seed", "-s",
        type=int,
        default=None,
        help="Random seed for a reproducible run"
    )
    parser.add_argument(
        "--bye-seeds",
        type=int,
        default=settings.bye_seeds,
        help="Seeds that earn a first-round bye (default: %(default)s)"
    )
    parser.add_argument(
        "--log-level",
        default=settings.log_level,
        help="Logging level (default: %(default)s)"
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)

    if args.trials < 1:
        logger.error("--trials must be at least 1")
        return 2

    try:
        league = load_league(args.league)
        logger.info(
            "Simulating %d seasons: %d teams, %d divisions, %d wildcards",
            args.trials, len(league.teams), league.num_divisions, league.wildcards
        )
        stats = run_simulations_parallel(league, args.trials, args.workers, args.seed)
    except (SimulatorError, ValueError) as e:
        logger.error(str(e))
        return 1

    print(format_report(stats, args.bye_seeds))
    return 0


if __name__ == "__main__":
    sys.exit(main())
