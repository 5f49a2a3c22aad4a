"""
Name Resolver

Maps free-text queries to canonical identifiers:

- team queries resolve to every directory entry whose full name contains
  the query, or whose abbreviation equals it, so a relocated franchise
  answers under one human-friendly name with all of its abbreviations;
- player queries resolve to every distinct player name containing the
  query. Picking one of several candidates is left to a disambiguation
  policy (services.disambiguation).

All comparisons ignore case and diacritics.
"""

from dataclasses import dataclass

from core.exceptions import PlayerNotFound, TeamNotFound
from core.logging import get_logger
from services.names import contains, normalize_name, normalize_query
from services.record_store import RecordStore
from services.records import TeamDirectoryEntry

log = get_logger("name_resolver")


@dataclass(frozen=True)
class TeamScope:
    """
    The directory entries a team query resolved to.

    Attributes:
        query: The query as received
        entries: Matching entries in directory order (never empty)
    """

    query: str
    entries: tuple[TeamDirectoryEntry, ...]

    @property
    def primary(self) -> TeamDirectoryEntry:
        """First matching entry; supplies the display name."""
        return self.entries[0]

    @property
    def abbreviations(self) -> frozenset[str]:
        return frozenset(entry.abbreviation for entry in self.entries)

    def narrowed(self) -> "TeamScope":
        """
        Collapse to a single entry.

        An entry whose abbreviation equals the query wins; otherwise the
        first entry in directory order.
        """
        wanted = normalize_name(self.query)
        for entry in self.entries:
            if normalize_name(entry.abbreviation) == wanted:
                return TeamScope(self.query, (entry,))
        return TeamScope(self.query, (self.primary,))


def match_teams(
    query: str, directory: list[TeamDirectoryEntry]
) -> tuple[TeamDirectoryEntry, ...]:
    """Entries whose name contains ``query`` or whose abbreviation equals it."""
    wanted = normalize_query(query, "team name")
    return tuple(
        entry
        for entry in directory
        if contains(wanted, entry.name) or normalize_name(entry.abbreviation) == wanted
    )


def resolve_teams(store: RecordStore, query: str) -> TeamScope:
    """
    Resolve a team query against the directory.

    Raises:
        MalformedQuery: empty query
        TeamNotFound: no entry matches
    """
    entries = match_teams(query, store.directory())
    if not entries:
        raise TeamNotFound(query)

    scope = TeamScope(query, entries)
    log.debug(
        "team_resolved",
        query=query,
        abbreviations=sorted(scope.abbreviations),
        display_name=scope.primary.name,
    )
    return scope


def match_players(query: str, names: list[str]) -> list[str]:
    """Player names containing ``query``, in the order given."""
    wanted = normalize_query(query, "player name")
    return [name for name in names if contains(wanted, name)]


def resolve_player_candidates(store: RecordStore, query: str) -> list[str]:
    """
    Every distinct player name matching ``query``.

    Raises:
        MalformedQuery: empty query
        PlayerNotFound: no player name matches
    """
    candidates = match_players(query, store.player_names())
    if not candidates:
        raise PlayerNotFound(query)

    log.debug("player_candidates_resolved", query=query, candidate_count=len(candidates))
    return candidates
