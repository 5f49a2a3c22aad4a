"""
Matchup Calculator

Head-to-head records restricted to games between two specific teams (or
two specific players).

For teams, each side's wins come from its own team_games rows against the
other side. The two scans are independent: a game missing one side's row
only drops out of that side's count. Each side's computation touches
nothing the other reads, so both run on a small thread pool and are
joined before the summary is composed.
"""

import contextvars
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Optional

from core.exceptions import MatchupTeamsNotFound
from core.logging import get_logger
from core.settings import settings
from services.aggregation import ScorerLine, career_summary, mean_of, scorers_in_scope
from services.disambiguation import DisambiguationPolicy
from services.name_resolver import TeamScope, match_teams
from services.names import normalize_query
from services.record_store import RecordStore
from services.records import TeamDirectoryEntry

log = get_logger("matchup")


@dataclass(frozen=True)
class MatchupSide:
    """
    One team's half of a matchup.

    Attributes:
        entry: Directory metadata of the side's first matching entry
        abbreviations: Every abbreviation folded into this side
        wins: Wins against the other side
        games_played: Rows scanned for this side's win count
        top_players: Top scorers in games against the other side
    """

    entry: TeamDirectoryEntry
    abbreviations: tuple[str, ...]
    wins: int
    games_played: int
    top_players: list[ScorerLine]


@dataclass(frozen=True)
class MatchupSummary:
    team1: MatchupSide
    team2: MatchupSide

    @property
    def games_played(self) -> int:
        return self.team1.games_played


@dataclass(frozen=True)
class PlayerMatchupSide:
    name: str
    player_id: Optional[int]
    wins: int
    avg_pts: float


@dataclass(frozen=True)
class PlayerMatchupSummary:
    player1: PlayerMatchupSide
    player2: PlayerMatchupSide
    games_played: int


# -----------------------------------------------------------------------------
# Teams
# -----------------------------------------------------------------------------


def resolve_sides(
    store: RecordStore,
    team1_query: str,
    team2_query: str,
    fold_franchise: bool = True,
) -> tuple[TeamScope, TeamScope]:
    """
    Resolve both sides against one directory read.

    With ``fold_franchise`` off each side narrows to a single entry (see
    TeamScope.narrowed), which ignores other abbreviations of a relocated
    franchise.

    Raises:
        MalformedQuery: either query is empty
        MatchupTeamsNotFound: either side matches no entry
    """
    for query in (team1_query, team2_query):
        normalize_query(query, "team name")

    directory = store.directory()
    scopes: list[TeamScope] = []
    missing: list[str] = []
    for query in (team1_query, team2_query):
        entries = match_teams(query, directory)
        if not entries:
            missing.append(query)
            continue
        scope = TeamScope(query, entries)
        scopes.append(scope if fold_franchise else scope.narrowed())

    if missing:
        raise MatchupTeamsNotFound(missing)
    return scopes[0], scopes[1]


def count_wins(
    store: RecordStore, own: frozenset[str], other: frozenset[str]
) -> tuple[int, int]:
    """(wins, games) for ``own`` in team_games rows against ``other``."""
    rows = [row for row in store.team_games(own, opponents=other) if row.opponent in other]
    return sum(1 for row in rows if row.win), len(rows)


def compute_side(
    store: RecordStore, own: TeamScope, other: TeamScope, top_n: int
) -> MatchupSide:
    """Wins and top scorers for ``own`` against ``other``."""
    with store.session():
        wins, games = count_wins(store, own.abbreviations, other.abbreviations)
        players = scorers_in_scope(
            store, own.abbreviations, top_n, opponents=other.abbreviations
        )
    return MatchupSide(
        entry=own.primary,
        abbreviations=tuple(entry.abbreviation for entry in own.entries),
        wins=wins,
        games_played=games,
        top_players=players,
    )


def matchup(
    store: RecordStore,
    team1_query: str,
    team2_query: str,
    top_n: Optional[int] = None,
    fold_franchise: Optional[bool] = None,
    concurrent: Optional[bool] = None,
) -> MatchupSummary:
    """
    Head-to-head record and top performers between two teams.

    Raises:
        MalformedQuery: either query is empty
        MatchupTeamsNotFound: either side fails to resolve
    """
    top_n = settings.matchup_top_n if top_n is None else top_n
    fold_franchise = settings.matchup_fold_franchise if fold_franchise is None else fold_franchise
    concurrent = settings.matchup_concurrent if concurrent is None else concurrent

    side1, side2 = resolve_sides(store, team1_query, team2_query, fold_franchise)

    if concurrent:
        with ThreadPoolExecutor(max_workers=2, thread_name_prefix="matchup") as pool:
            # each side runs in a copy of the caller's context (correlation id)
            future1 = pool.submit(
                contextvars.copy_context().run, compute_side, store, side1, side2, top_n
            )
            future2 = pool.submit(
                contextvars.copy_context().run, compute_side, store, side2, side1, top_n
            )
            team1, team2 = future1.result(), future2.result()
    else:
        team1 = compute_side(store, side1, side2, top_n)
        team2 = compute_side(store, side2, side1, top_n)

    log.info(
        "matchup_built",
        team1=sorted(side1.abbreviations),
        team2=sorted(side2.abbreviations),
        team1_wins=team1.wins,
        team2_wins=team2.wins,
        games_played=team1.games_played,
    )
    return MatchupSummary(team1=team1, team2=team2)


# -----------------------------------------------------------------------------
# Players
# -----------------------------------------------------------------------------


def player_matchup(
    store: RecordStore,
    player1_query: str,
    player2_query: str,
    policy: Optional[str | DisambiguationPolicy] = None,
) -> PlayerMatchupSummary:
    """
    Record of two players in games where both played on opposite sides.

    Each query resolves to one player the same way career_summary does.
    No shared games is a valid answer (games_played == 0).

    Raises:
        MalformedQuery: either query is empty
        PlayerNotFound: either player does not resolve
    """
    for query in (player1_query, player2_query):
        normalize_query(query, "player name")

    first = career_summary(store, player1_query, policy)
    second = career_summary(store, player2_query, policy)

    second_games = {row.game_id: row for row in store.player_games(names=[second.name])}
    pairs = []
    for row in store.player_games(names=[first.name]):
        other = second_games.get(row.game_id)
        if other is not None and other.team != row.team:
            pairs.append((row, other))

    summary = PlayerMatchupSummary(
        player1=PlayerMatchupSide(
            name=first.name,
            player_id=first.player_id,
            wins=sum(1 for row, _ in pairs if row.win),
            avg_pts=mean_of(row.pts for row, _ in pairs),
        ),
        player2=PlayerMatchupSide(
            name=second.name,
            player_id=second.player_id,
            wins=sum(1 for _, other in pairs if other.win),
            avg_pts=mean_of(other.pts for _, other in pairs),
        ),
        games_played=len(pairs),
    )
    log.info(
        "player_matchup_built",
        player1=first.name,
        player2=second.name,
        games_played=summary.games_played,
    )
    return summary
