"""
Player API Routes

Career averages for a player and head-to-head records between two players.

Routes:
    GET /v1/players                               first rows of player_games
    GET /v1/players/search/{name}                 career summary
    GET /v1/players/matchup/{player1}/{player2}   player vs. player
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from api.deps import get_store, run_query
from core.settings import settings
from schemas.common import ApiStatus
from schemas.query import (
    PlayerGameData,
    PlayerGameListResponse,
    PlayerMatchupData,
    PlayerMatchupResponse,
    PlayerSummaryData,
    PlayerSummaryResponse,
)
from services.aggregation import career_summary, check_limit
from services.matchup import player_matchup
from services.record_store import RecordStore

router = APIRouter(prefix="/players", tags=["players"])


@router.get("", response_model=PlayerGameListResponse)
async def list_player_games(
    limit: Optional[int] = Query(None, description="Number of rows to return (default 20)."),
    store: RecordStore = Depends(get_store),
) -> PlayerGameListResponse:
    """A sample of raw player box score rows, in load order."""
    limit = check_limit(
        settings.player_sample_limit if limit is None else limit,
        settings.max_player_sample_limit,
    )
    rows = await run_query(store, RecordStore.player_games_sample, limit)
    return PlayerGameListResponse(
        status=ApiStatus.SUCCESS,
        message=f"{len(rows)} player rows",
        data=[PlayerGameData.from_record(row) for row in rows],
    )


@router.get("/search/{name}", response_model=PlayerSummaryResponse)
async def search_player(
    name: str,
    store: RecordStore = Depends(get_store),
) -> PlayerSummaryResponse:
    """
    Career averages and team history for the player matching ``name``.

    Matching is a case- and accent-insensitive substring match; when
    several players match, the one with the most games played is returned.
    """
    summary = await run_query(store, career_summary, name)
    return PlayerSummaryResponse(
        status=ApiStatus.SUCCESS,
        message=f"Career averages for {summary.name}",
        data=PlayerSummaryData.from_summary(summary),
    )


@router.get("/matchup/{player1}/{player2}", response_model=PlayerMatchupResponse)
async def get_player_matchup(
    player1: str,
    player2: str,
    store: RecordStore = Depends(get_store),
) -> PlayerMatchupResponse:
    """Wins and scoring for two players in games they played against each other."""
    summary = await run_query(store, player_matchup, player1, player2)
    return PlayerMatchupResponse(
        status=ApiStatus.SUCCESS,
        message=(
            f"{summary.player1.name} vs. {summary.player2.name}: "
            f"{summary.games_played} games"
        ),
        data=PlayerMatchupData.from_summary(summary),
    )
