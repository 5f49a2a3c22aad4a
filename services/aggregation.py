"""
Aggregation Engine

Turns tens of thousands of per-game rows into per-player summaries. The
work is split into small stages so each can be tested on its own:

    filter (RecordStore) -> join_team_names -> group_by_player
        -> summarize_career / summarize_scoring -> rank_scorers

Averages skip missing values: a row without PTS counts towards
games_played but not towards avg PTS. A statistic missing from every
row of a group averages to 0.
"""

import datetime
from collections import defaultdict
from dataclasses import dataclass, field
from typing import Iterable, Optional, Sequence

from core.exceptions import MalformedQuery, PlayerNotFound
from core.logging import get_logger
from core.settings import settings
from services.disambiguation import DisambiguationPolicy, get_policy
from services.name_resolver import resolve_player_candidates, resolve_teams
from services.record_store import RecordStore
from services.records import STAT_FIELDS, PlayerGameRecord, TeamDirectoryEntry

log = get_logger("aggregation")


@dataclass(frozen=True)
class PlayerSummary:
    """
    Career summary for one player name.

    Attributes:
        name: Player name exactly as stored
        player_id: ID from the first row of the group
        teams: Full team names, deduplicated, in first-seen order
        games_played: Rows in the group
        averages: Mean per statistic keyed by box score label ('PTS', '3P_PCT', ...)
        last_game: Date of the most recent game, if dates were loaded
    """

    name: str
    player_id: Optional[int]
    teams: tuple[str, ...]
    games_played: int
    averages: dict[str, float] = field(default_factory=dict)
    last_game: Optional[datetime.date] = None


@dataclass(frozen=True)
class ScorerLine:
    name: str
    player_id: Optional[int]
    avg_pts: float
    games_played: int


@dataclass(frozen=True)
class TeamSummary:
    team_name: str
    abbreviations: tuple[str, ...]
    players: list[ScorerLine]


# -----------------------------------------------------------------------------
# Stages
# -----------------------------------------------------------------------------


def join_team_names(
    rows: Iterable[PlayerGameRecord],
    directory: Iterable[TeamDirectoryEntry],
) -> list[tuple[PlayerGameRecord, str]]:
    """
    Pair each row with its team's full name.

    Rows whose team has no directory entry are dropped, not left unlabeled.
    """
    names = {entry.abbreviation: entry.name for entry in directory}
    return [(row, names[row.team]) for row in rows if row.team in names]


def group_by_player(rows: Iterable[PlayerGameRecord]) -> dict[str, list[PlayerGameRecord]]:
    """Group rows by exact player name, keeping first-seen order."""
    groups: dict[str, list[PlayerGameRecord]] = defaultdict(list)
    for row in rows:
        groups[row.player_name].append(row)
    return dict(groups)


def mean_of(values: Iterable[Optional[float]]) -> float:
    """Mean of the non-null values; 0.0 when there are none."""
    present = [v for v in values if v is not None]
    if not present:
        return 0.0
    return sum(present) / len(present)


def summarize_career(name: str, joined: Sequence[tuple[PlayerGameRecord, str]]) -> PlayerSummary:
    """Reduce one player's joined rows to a PlayerSummary."""
    rows = [row for row, _ in joined]
    dates = [row.date for row in rows if row.date is not None]
    return PlayerSummary(
        name=name,
        player_id=rows[0].player_id,
        teams=tuple(dict.fromkeys(team_name for _, team_name in joined)),
        games_played=len(rows),
        averages={
            label: mean_of(getattr(row, attr) for row in rows)
            for attr, label in STAT_FIELDS
        },
        last_game=max(dates) if dates else None,
    )


def summarize_scoring(name: str, rows: Sequence[PlayerGameRecord]) -> ScorerLine:
    return ScorerLine(
        name=name,
        player_id=rows[0].player_id,
        avg_pts=mean_of(row.pts for row in rows),
        games_played=len(rows),
    )


def rank_scorers(lines: Iterable[ScorerLine], limit: int) -> list[ScorerLine]:
    """Highest average first; ties by more games, then by name."""
    ranked = sorted(lines, key=lambda line: (-line.avg_pts, -line.games_played, line.name))
    return ranked[:limit]


# -----------------------------------------------------------------------------
# Operations
# -----------------------------------------------------------------------------


def career_summaries(store: RecordStore, query: str) -> list[PlayerSummary]:
    """
    One summary per player name matching ``query``.

    Raises:
        MalformedQuery: empty query
        PlayerNotFound: no name matches, or every matching row was dropped
            by the directory join
    """
    candidates = resolve_player_candidates(store, query)
    joined = join_team_names(store.player_games(names=candidates), store.directory())

    grouped: dict[str, list[tuple[PlayerGameRecord, str]]] = defaultdict(list)
    for row, team_name in joined:
        grouped[row.player_name].append((row, team_name))

    summaries = [summarize_career(name, rows) for name, rows in grouped.items()]
    if not summaries:
        raise PlayerNotFound(query)
    return summaries


def career_summary(
    store: RecordStore,
    query: str,
    policy: Optional[str | DisambiguationPolicy] = None,
) -> PlayerSummary:
    """
    Career averages and team history for the player matching ``query``.

    Several matching players are disambiguated by ``policy`` (default from
    settings: most games played).
    """
    summaries = career_summaries(store, query)
    chosen = get_policy(policy).pick(summaries)
    log.info(
        "career_summary_built",
        query=query,
        player=chosen.name,
        games_played=chosen.games_played,
        candidates=len(summaries),
    )
    return chosen


def scorers_in_scope(
    store: RecordStore,
    teams: Iterable[str],
    limit: int,
    opponents: Optional[Iterable[str]] = None,
) -> list[ScorerLine]:
    """Top ``limit`` scorers among rows for ``teams`` (optionally only against ``opponents``)."""
    rows = store.player_games(teams=teams, opponents=opponents)
    if opponents is not None:
        # home/away prefilter also matches the row's own side when the scopes overlap
        opponents = set(opponents)
        rows = [row for row in rows if row.opponent in opponents]
    lines = [summarize_scoring(name, group) for name, group in group_by_player(rows).items()]
    return rank_scorers(lines, limit)


def check_limit(limit: int, maximum: int) -> int:
    if limit < 1 or limit > maximum:
        raise MalformedQuery(f"limit must be between 1 and {maximum}", query=str(limit))
    return limit


def top_scorers(store: RecordStore, query: str, limit: Optional[int] = None) -> TeamSummary:
    """
    A team's all-time leading scorers, across every abbreviation the
    query resolves to.

    Raises:
        MalformedQuery: empty query or limit out of range
        TeamNotFound: no directory entry matches
    """
    limit = check_limit(
        settings.top_scorers_limit if limit is None else limit,
        settings.max_top_scorers_limit,
    )
    scope = resolve_teams(store, query)
    players = scorers_in_scope(store, scope.abbreviations, limit)

    log.info(
        "top_scorers_built",
        query=query,
        abbreviations=sorted(scope.abbreviations),
        player_count=len(players),
    )
    return TeamSummary(
        team_name=scope.primary.name,
        abbreviations=tuple(entry.abbreviation for entry in scope.entries),
        players=players,
    )
