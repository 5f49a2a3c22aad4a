"""
Record Store

Read-only access layer over the three box score tables. The store is
constructed around an explicit peewee database handle so callers (and
tests) decide which database a query runs against; nothing here touches
process-global connection state.

Every read returns immutable records from services.records. Connection
and driver failures surface as StoreUnavailable and are never retried.
"""

from contextlib import contextmanager
from functools import wraps
from typing import Any, Callable, Iterable, Iterator, Optional, TypeVar

from peewee import Database, InterfaceError, OperationalError, chunked
from playhouse.pool import MaxConnectionsExceeded

from core.exceptions import StoreUnavailable
from core.logging import get_logger
from db.models import PlayerGame, TeamGame, TeamName
from services.records import (
    STAT_ATTRS,
    PlayerGameRecord,
    TeamDirectoryEntry,
    TeamGameRecord,
)

log = get_logger("record_store")

T = TypeVar("T")

# Keeps IN (...) lists under SQLite's bound-parameter limit
IN_CLAUSE_CHUNK = 500

_STORE_ERRORS = (OperationalError, InterfaceError, MaxConnectionsExceeded)


def store_access(func: Callable[..., T]) -> Callable[..., T]:
    """Translate driver/connection failures into StoreUnavailable."""

    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> T:
        try:
            return func(*args, **kwargs)
        except _STORE_ERRORS as e:
            log.error(
                "store_unavailable",
                operation=func.__name__,
                error=str(e),
                error_type=type(e).__name__,
            )
            raise StoreUnavailable(f"Record store unavailable: {e}") from e

    return wrapper


def _player_record(row: dict) -> PlayerGameRecord:
    return PlayerGameRecord(
        game_id=row["game_id"],
        date=row["date"],
        game_type=row["game_type"],
        season=row["season"],
        player_id=row["player_id"],
        player_name=row["player"],
        team=row["team"],
        home=row["home"],
        away=row["away"],
        win=bool(row["win"]),
        **{attr: row[attr] for attr in STAT_ATTRS},
    )


def _team_record(row: dict) -> TeamGameRecord:
    return TeamGameRecord(
        game_id=row["game_id"],
        date=row["date"],
        game_type=row["game_type"],
        season=row["season"],
        team_id=row["team_id"],
        team=row["team"],
        home=row["home"],
        away=row["away"],
        win=bool(row["win"]),
        **{attr: row[attr] for attr in STAT_ATTRS},
    )


class RecordStore:
    """
    Query access to player_games, team_games and team_directory.

    Example:
        store = RecordStore(SqliteDatabase("boxscores.db"))
        with store.session():
            rows = store.player_games(teams={"LAL"})
    """

    def __init__(self, database: Database):
        self.database = database

    def __repr__(self) -> str:
        return f"<RecordStore(database={type(self.database).__name__})>"

    @contextmanager
    def session(self) -> Iterator["RecordStore"]:
        """
        Hold a connection for the duration of the block.

        peewee connections are per thread; the block opens one if this
        thread has none and closes only the connection it opened.
        """
        opened = False
        try:
            if self.database.is_closed():
                self.database.connect()
                opened = True
        except _STORE_ERRORS as e:
            log.error("store_connect_failed", error=str(e), error_type=type(e).__name__)
            raise StoreUnavailable(f"Record store unavailable: {e}") from e

        try:
            yield self
        finally:
            if opened and not self.database.is_closed():
                self.database.close()

    # ------------------------------------------------------------------
    # Directory
    # ------------------------------------------------------------------

    @store_access
    def directory(self) -> list[TeamDirectoryEntry]:
        """All directory entries in load order."""
        query = (
            TeamName.select()
            .order_by(TeamName.position, TeamName.abbreviation)
            .bind(self.database)
            .dicts()
        )
        return [
            TeamDirectoryEntry(
                abbreviation=row["abbreviation"],
                name=row["name"],
                team_id=row["team_id"],
            )
            for row in query
        ]

    # ------------------------------------------------------------------
    # Player games
    # ------------------------------------------------------------------

    @store_access
    def player_names(self) -> list[str]:
        """Distinct player names, sorted."""
        query = (
            PlayerGame.select(PlayerGame.player)
            .distinct()
            .order_by(PlayerGame.player)
            .bind(self.database)
            .tuples()
        )
        return [name for (name,) in query]

    @store_access
    def player_games(
        self,
        names: Optional[Iterable[str]] = None,
        teams: Optional[Iterable[str]] = None,
        opponents: Optional[Iterable[str]] = None,
    ) -> list[PlayerGameRecord]:
        """
        Player rows filtered by exact name, by own team and/or by opponent.

        Args:
            names: Exact player names to keep (None = no name filter)
            teams: Keep rows whose ``team`` is in this set
            opponents: Keep rows where ``home`` or ``away`` is in this set

        Returns:
            Matching rows in load order
        """
        query = PlayerGame.select().order_by(PlayerGame.id)

        if teams is not None:
            teams = sorted(set(teams))
            if not teams:
                return []
            query = query.where(PlayerGame.team.in_(teams))

        if opponents is not None:
            opponents = sorted(set(opponents))
            if not opponents:
                return []
            query = query.where(
                PlayerGame.home.in_(opponents) | PlayerGame.away.in_(opponents)
            )

        if names is None:
            return self._fetch(query, _player_record)

        rows: list[PlayerGameRecord] = []
        for batch in chunked(sorted(set(names)), IN_CLAUSE_CHUNK):
            rows.extend(self._fetch(query.where(PlayerGame.player.in_(batch)), _player_record))
        return rows

    @store_access
    def player_games_sample(self, limit: int) -> list[PlayerGameRecord]:
        """The first ``limit`` player rows in load order."""
        query = PlayerGame.select().order_by(PlayerGame.id).limit(limit)
        return self._fetch(query, _player_record)

    # ------------------------------------------------------------------
    # Team games
    # ------------------------------------------------------------------

    @store_access
    def team_games(
        self,
        teams: Iterable[str],
        opponents: Optional[Iterable[str]] = None,
    ) -> list[TeamGameRecord]:
        """Team rows for ``teams``, optionally only against ``opponents``."""
        teams = sorted(set(teams))
        if not teams:
            return []
        query = (
            TeamGame.select()
            .where(TeamGame.team.in_(teams))
            .order_by(TeamGame.id)
        )
        if opponents is not None:
            opponents = sorted(set(opponents))
            if not opponents:
                return []
            query = query.where(
                TeamGame.home.in_(opponents) | TeamGame.away.in_(opponents)
            )
        return self._fetch(query, _team_record)

    # ------------------------------------------------------------------
    # Stats
    # ------------------------------------------------------------------

    @store_access
    def counts(self) -> dict[str, int]:
        """Row count per table."""
        return {
            model._meta.table_name: model.select().bind(self.database).count()
            for model in (PlayerGame, TeamGame, TeamName)
        }

    def _fetch(self, query, build: Callable[[dict], T]) -> list[T]:
        return [build(row) for row in query.bind(self.database).dicts()]
