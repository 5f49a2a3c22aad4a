"""
Query Errors

Error kinds surfaced by the query core. All of them propagate unchanged to
the HTTP boundary, where core.middleware maps them to status codes.
"""

from typing import Optional

from schemas.common import ApiStatus


class QueryError(Exception):
    """Base class for errors raised by the query core."""

    status_code: int = 500
    api_status: ApiStatus = ApiStatus.ERROR
    error_code: str = "QUERY_ERROR"

    def __init__(self, message: str, query: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.query = query


# -----------------------------------------------------------------------------
# Not found
# -----------------------------------------------------------------------------


class NotFound(QueryError):
    """Resolution or filtering produced an empty result. Not a fault."""

    status_code = 404
    api_status = ApiStatus.NOT_FOUND
    error_code = "NOT_FOUND"


class PlayerNotFound(NotFound):
    error_code = "PLAYER_NOT_FOUND"

    def __init__(self, query: str):
        super().__init__(f'Player "{query}" not found.', query=query)


class TeamNotFound(NotFound):
    error_code = "TEAM_NOT_FOUND"

    def __init__(self, query: str):
        super().__init__(f'Team "{query}" not found.', query=query)


class MatchupTeamsNotFound(NotFound):
    """One or both sides of a team matchup failed to resolve."""

    error_code = "MATCHUP_TEAMS_NOT_FOUND"

    def __init__(self, missing: list[str]):
        super().__init__(
            "One or both teams not found: " + ", ".join(f'"{q}"' for q in missing),
            query=" / ".join(missing),
        )
        self.missing = missing


# -----------------------------------------------------------------------------
# Client input
# -----------------------------------------------------------------------------


class MalformedQuery(QueryError):
    """Empty/whitespace query string or out-of-range parameter."""

    status_code = 400
    api_status = ApiStatus.VALIDATION_ERROR
    error_code = "MALFORMED_QUERY"


# -----------------------------------------------------------------------------
# Store
# -----------------------------------------------------------------------------


class StoreUnavailable(QueryError):
    """
    The record store could not be reached.

    Fatal for the current request. The core never retries; callers may
    retry the whole request since every query is a read.
    """

    status_code = 503
    api_status = ApiStatus.SERVER_ERROR
    error_code = "STORE_UNAVAILABLE"
