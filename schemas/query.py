"""
Query Response Schemas

Pydantic models for the player, team and matchup endpoints. Python
attribute names are snake_case; JSON keys keep the box score spelling
(avgPTS, avg3P_PCT, gamesPlayed, ...) through aliases.
"""

import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from schemas.common import BaseResponse
from services.aggregation import PlayerSummary, ScorerLine, TeamSummary
from services.matchup import MatchupSide, MatchupSummary, PlayerMatchupSide, PlayerMatchupSummary
from services.records import STAT_FIELDS, PlayerGameRecord, TeamDirectoryEntry


class AliasedModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


# ------------------------------- Players ------------------------------- #

class PlayerSummaryData(AliasedModel):
    """Career averages for one player."""

    name: str
    player_id: Optional[int] = Field(None, alias="playerId")
    teams: list[str]
    games_played: int = Field(alias="gamesPlayed")

    avg_min: float = Field(alias="avgMIN")
    avg_pts: float = Field(alias="avgPTS")
    avg_fgm: float = Field(alias="avgFGM")
    avg_fga: float = Field(alias="avgFGA")
    avg_fg_pct: float = Field(alias="avgFG_PCT")
    avg_fg3m: float = Field(alias="avg3PM")
    avg_fg3a: float = Field(alias="avg3PA")
    avg_fg3_pct: float = Field(alias="avg3P_PCT")
    avg_ftm: float = Field(alias="avgFTM")
    avg_fta: float = Field(alias="avgFTA")
    avg_ft_pct: float = Field(alias="avgFT_PCT")
    avg_oreb: float = Field(alias="avgOREB")
    avg_dreb: float = Field(alias="avgDREB")
    avg_reb: float = Field(alias="avgREB")
    avg_ast: float = Field(alias="avgAST")
    avg_stl: float = Field(alias="avgSTL")
    avg_blk: float = Field(alias="avgBLK")
    avg_tov: float = Field(alias="avgTOV")
    avg_pf: float = Field(alias="avgPF")
    avg_plus_minus: float = Field(alias="avgPLUS_MINUS")

    @classmethod
    def from_summary(cls, summary: PlayerSummary) -> "PlayerSummaryData":
        return cls(
            name=summary.name,
            playerId=summary.player_id,
            teams=list(summary.teams),
            gamesPlayed=summary.games_played,
            **{f"avg{label}": value for label, value in summary.averages.items()},
        )


class PlayerSummaryResponse(BaseResponse):
    """Response for GET /v1/players/search/{name}."""

    data: PlayerSummaryData


class PlayerGameData(AliasedModel):
    """One raw player box score row; stats keyed by box score label."""

    game_id: int = Field(alias="gameId")
    date: Optional[datetime.date] = None
    season: Optional[str] = None
    name: str
    player_id: Optional[int] = Field(None, alias="playerId")
    team: str
    home: str
    away: str
    win: bool
    stats: dict[str, Optional[float]]

    @classmethod
    def from_record(cls, record: PlayerGameRecord) -> "PlayerGameData":
        return cls(
            gameId=record.game_id,
            date=record.date,
            season=record.season,
            name=record.player_name,
            playerId=record.player_id,
            team=record.team,
            home=record.home,
            away=record.away,
            win=record.win,
            stats={label: getattr(record, attr) for attr, label in STAT_FIELDS},
        )


class PlayerGameListResponse(BaseResponse):
    """Response for GET /v1/players."""

    data: list[PlayerGameData]


class PlayerMatchupSideData(AliasedModel):
    name: str
    player_id: Optional[int] = Field(None, alias="playerId")
    wins: int
    avg_pts: float = Field(alias="avgPTS")

    @classmethod
    def from_side(cls, side: PlayerMatchupSide) -> "PlayerMatchupSideData":
        return cls(name=side.name, playerId=side.player_id, wins=side.wins, avgPTS=side.avg_pts)


class PlayerMatchupData(AliasedModel):
    player1: PlayerMatchupSideData
    player2: PlayerMatchupSideData
    games_played: int = Field(alias="gamesPlayed")

    @classmethod
    def from_summary(cls, summary: PlayerMatchupSummary) -> "PlayerMatchupData":
        return cls(
            player1=PlayerMatchupSideData.from_side(summary.player1),
            player2=PlayerMatchupSideData.from_side(summary.player2),
            gamesPlayed=summary.games_played,
        )


class PlayerMatchupResponse(BaseResponse):
    """Response for GET /v1/players/matchup/{player1}/{player2}."""

    data: PlayerMatchupData


# ------------------------------- Teams ------------------------------- #

class ScorerData(AliasedModel):
    name: str
    player_id: Optional[int] = Field(None, alias="playerId")
    avg_pts: float = Field(alias="avgPTS")
    games_played: int = Field(alias="gamesPlayed")

    @classmethod
    def from_line(cls, line: ScorerLine) -> "ScorerData":
        return cls(
            name=line.name,
            playerId=line.player_id,
            avgPTS=line.avg_pts,
            gamesPlayed=line.games_played,
        )


class TeamSummaryData(AliasedModel):
    team_name: str = Field(alias="teamName")
    abbreviations: list[str]
    players: list[ScorerData]

    @classmethod
    def from_summary(cls, summary: TeamSummary) -> "TeamSummaryData":
        return cls(
            teamName=summary.team_name,
            abbreviations=list(summary.abbreviations),
            players=[ScorerData.from_line(line) for line in summary.players],
        )


class TeamSummaryResponse(BaseResponse):
    """Response for GET /v1/teams/search/{team_name}."""

    data: TeamSummaryData


class TeamEntryData(AliasedModel):
    abbreviation: str
    name: str
    team_id: Optional[int] = Field(None, alias="teamId")

    @classmethod
    def from_entry(cls, entry: TeamDirectoryEntry) -> "TeamEntryData":
        return cls(abbreviation=entry.abbreviation, name=entry.name, teamId=entry.team_id)


class TeamListResponse(BaseResponse):
    """Response for GET /v1/teams."""

    data: list[TeamEntryData]


# ------------------------------- Matchups ------------------------------- #

class MatchupSideData(TeamEntryData):
    abbreviations: list[str]
    wins: int

    @classmethod
    def from_side(cls, side: MatchupSide) -> "MatchupSideData":
        return cls(
            abbreviation=side.entry.abbreviation,
            name=side.entry.name,
            teamId=side.entry.team_id,
            abbreviations=list(side.abbreviations),
            wins=side.wins,
        )


class MatchupData(AliasedModel):
    team1: MatchupSideData
    team2: MatchupSideData
    team1_top_players: list[ScorerData] = Field(alias="team1TopPlayers")
    team2_top_players: list[ScorerData] = Field(alias="team2TopPlayers")
    games_played: int = Field(alias="gamesPlayed")

    @classmethod
    def from_summary(cls, summary: MatchupSummary) -> "MatchupData":
        return cls(
            team1=MatchupSideData.from_side(summary.team1),
            team2=MatchupSideData.from_side(summary.team2),
            team1TopPlayers=[ScorerData.from_line(line) for line in summary.team1.top_players],
            team2TopPlayers=[ScorerData.from_line(line) for line in summary.team2.top_players],
            gamesPlayed=summary.games_played,
        )


class MatchupResponse(BaseResponse):
    """Response for GET /v1/matchup/{team1}/{team2}."""

    data: MatchupData


# ------------------------------- Health ------------------------------- #

class HealthResponse(BaseModel):
    status: str
    timestamp: str
    counts: dict[str, int]
