"""
Team API Routes

Routes:
    GET /v1/teams                        team directory
    GET /v1/teams/search/{team_name}     all-time top scorers
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from api.deps import get_store, run_query
from schemas.common import ApiStatus
from schemas.query import TeamEntryData, TeamListResponse, TeamSummaryData, TeamSummaryResponse
from services.aggregation import top_scorers
from services.record_store import RecordStore

router = APIRouter(prefix="/teams", tags=["teams"])


@router.get("", response_model=TeamListResponse)
async def list_teams(store: RecordStore = Depends(get_store)) -> TeamListResponse:
    """Every directory entry in load order."""
    entries = await run_query(store, RecordStore.directory)
    return TeamListResponse(
        status=ApiStatus.SUCCESS,
        message=f"{len(entries)} teams",
        data=[TeamEntryData.from_entry(entry) for entry in entries],
    )


@router.get("/search/{team_name}", response_model=TeamSummaryResponse)
async def search_team(
    team_name: str,
    limit: Optional[int] = Query(None, description="Number of players to return (default 10)."),
    store: RecordStore = Depends(get_store),
) -> TeamSummaryResponse:
    """
    A team's all-time leading scorers by points per game.

    ``team_name`` may be a full name, part of one ("Lakers", "Los Angeles")
    or an exact abbreviation ("LAL"). Every abbreviation that matches is
    folded into one ranking.
    """
    summary = await run_query(store, top_scorers, team_name, limit)
    return TeamSummaryResponse(
        status=ApiStatus.SUCCESS,
        message=f"Top {len(summary.players)} scorers for {summary.team_name}",
        data=TeamSummaryData.from_summary(summary),
    )
