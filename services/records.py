"""
Box Score Records

Immutable row types handed out by the record store. Everything in the
query core operates on these, never on peewee model instances.
"""

from dataclasses import dataclass
import datetime
from typing import Optional


# (record attribute, output key) for every averaged statistic, in box score order
STAT_FIELDS: tuple[tuple[str, str], ...] = (
    ("min", "MIN"),
    ("pts", "PTS"),
    ("fgm", "FGM"),
    ("fga", "FGA"),
    ("fg_pct", "FG_PCT"),
    ("fg3m", "3PM"),
    ("fg3a", "3PA"),
    ("fg3_pct", "3P_PCT"),
    ("ftm", "FTM"),
    ("fta", "FTA"),
    ("ft_pct", "FT_PCT"),
    ("oreb", "OREB"),
    ("dreb", "DREB"),
    ("reb", "REB"),
    ("ast", "AST"),
    ("stl", "STL"),
    ("blk", "BLK"),
    ("tov", "TOV"),
    ("pf", "PF"),
    ("plus_minus", "PLUS_MINUS"),
)

STAT_ATTRS: tuple[str, ...] = tuple(attr for attr, _ in STAT_FIELDS)


@dataclass(frozen=True, kw_only=True)
class BoxScoreLine:
    """Statistic columns shared by player and team rows. All nullable."""

    min: Optional[float] = None
    pts: Optional[float] = None
    fgm: Optional[float] = None
    fga: Optional[float] = None
    fg_pct: Optional[float] = None
    fg3m: Optional[float] = None
    fg3a: Optional[float] = None
    fg3_pct: Optional[float] = None
    ftm: Optional[float] = None
    fta: Optional[float] = None
    ft_pct: Optional[float] = None
    oreb: Optional[float] = None
    dreb: Optional[float] = None
    reb: Optional[float] = None
    ast: Optional[float] = None
    stl: Optional[float] = None
    blk: Optional[float] = None
    tov: Optional[float] = None
    pf: Optional[float] = None
    plus_minus: Optional[float] = None


@dataclass(frozen=True, kw_only=True)
class PlayerGameRecord(BoxScoreLine):
    """One player's box score line for one game."""

    game_id: int
    player_name: str
    team: str
    home: str
    away: str
    win: bool = False
    player_id: Optional[int] = None
    date: Optional[datetime.date] = None
    game_type: Optional[str] = None
    season: Optional[str] = None

    @property
    def opponent(self) -> str:
        """Abbreviation of the other side of the game."""
        return self.away if self.team == self.home else self.home


@dataclass(frozen=True, kw_only=True)
class TeamGameRecord(BoxScoreLine):
    """One team's box score line for one game."""

    game_id: int
    team: str
    home: str
    away: str
    win: bool = False
    team_id: Optional[int] = None
    date: Optional[datetime.date] = None
    game_type: Optional[str] = None
    season: Optional[str] = None

    @property
    def opponent(self) -> str:
        return self.away if self.team == self.home else self.home


@dataclass(frozen=True, kw_only=True)
class TeamDirectoryEntry:
    abbreviation: str
    name: str
    team_id: Optional[int] = None
