"""
Team Matchup API Routes

Routes:
    GET /v1/matchup/{team1}/{team2}   head-to-head record and top performers
"""

from fastapi import APIRouter, Depends

from api.deps import get_store, run_query
from schemas.common import ApiStatus
from schemas.query import MatchupData, MatchupResponse
from services.matchup import matchup
from services.record_store import RecordStore

router = APIRouter(prefix="/matchup", tags=["matchup"])


@router.get("/{team1}/{team2}", response_model=MatchupResponse)
async def get_matchup(
    team1: str,
    team2: str,
    store: RecordStore = Depends(get_store),
) -> MatchupResponse:
    """
    Historical head-to-head record between two teams and each side's top
    five scorers in those games.
    """
    summary = await run_query(store, matchup, team1, team2)
    return MatchupResponse(
        status=ApiStatus.SUCCESS,
        message=(
            f"{summary.team1.entry.name} {summary.team1.wins} - "
            f"{summary.team2.wins} {summary.team2.entry.name}"
        ),
        data=MatchupData.from_summary(summary),
    )
