"""
Simulation API routes.
"""

import asyncio
import logging
from fastapi import APIRouter, Depends, HTTPException, status

from ..schemas import (
    SimulationRunRequest,
    SimulationResultsResponse,
    TeamResult
)
from ...core.config import Settings, get_settings
from ...simulator import (
    ConfigurationError,
    NoWinnerFoundError,
    run_simulations_parallel,
    summarize
)


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/simulations", tags=["simulations"])


@router.post("/run", response_model=SimulationResultsResponse)
async def run_simulation(
    request: SimulationRunRequest,
    settings: Settings = Depends(get_settings)
) -> SimulationResultsResponse:
    """
    Simulate the season and return each team's seed odds.

    The simulation runs in a worker thread so the event loop stays free.
    """
    if request.n_simulations > settings.max_api_trials:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"n_simulations may not exceed {settings.max_api_trials}"
        )

    try:
        league = request.to_league()
        stats = await asyncio.to_thread(
            run_simulations_parallel,
            league,
            request.n_simulations,
            settings.workers,
            request.seed
        )
    except ConfigurationError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        )
    except NoWinnerFoundError as e:
        logger.error(f"Ranking failed during simulation: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Simulation failed to rank teams"
        )

    team_results = [
        TeamResult(
            id=summary.team_id,
            made_playoffs=summary.made_playoffs,
            bye=summary.bye,
            missed=summary.missed,
            seeds=summary.seeds,
            made_playoffs_pct=summary.made_playoffs_pct,
            bye_pct=summary.bye_pct,
            missed_pct=summary.missed_pct,
            seed_pcts=summary.seed_pcts
        )
        for summary in summarize(stats, request.bye_seeds)
    ]

    return SimulationResultsResponse(
        n_simulations=stats.n_trials,
        total_seeds=stats.total_seeds,
        teams=team_results
    )
