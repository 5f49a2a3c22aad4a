"""
Box Score Transformers

Pure functions turning raw CSV rows (all values as strings) into column
dicts for the box score tables. Blank or unparseable numbers become None,
never 0, so they stay out of averages.
"""

import math
from datetime import date
from typing import Any, Optional

import pandas as pd


# Raw CSV header -> table column, for every statistic column
STAT_COLUMNS: dict[str, str] = {
    "MIN": "min",
    "PTS": "pts",
    "FGM": "fgm",
    "FGA": "fga",
    "FG%": "fg_pct",
    "3PM": "fg3m",
    "3PA": "fg3a",
    "3P%": "fg3_pct",
    "FTM": "ftm",
    "FTA": "fta",
    "FT%": "ft_pct",
    "OREB": "oreb",
    "DREB": "dreb",
    "REB": "reb",
    "AST": "ast",
    "STL": "stl",
    "BLK": "blk",
    "TOV": "tov",
    "PF": "pf",
    "+/-": "plus_minus",
}

WIN_VALUES = {"1", "1.0", "true"}


class RowRejected(ValueError):
    """A raw row is missing a required key and must not be loaded."""


def _clean(value: Any) -> Optional[str]:
    if value is None:
        return None
    if isinstance(value, float) and math.isnan(value):
        return None
    text = str(value).strip()
    return text or None


def to_float(value: Any) -> Optional[float]:
    """Parse a number; None for blanks, NaN and garbage."""
    text = _clean(value)
    if text is None:
        return None
    try:
        number = float(text)
    except ValueError:
        return None
    return None if math.isnan(number) else number


def to_int(value: Any) -> Optional[int]:
    """Parse an integer ID; accepts '1610612747' and '1610612747.0'."""
    number = to_float(value)
    return None if number is None else int(number)


def to_date(value: Any) -> Optional[date]:
    text = _clean(value)
    if text is None:
        return None
    parsed = pd.to_datetime(text, errors="coerce")
    return None if pd.isna(parsed) else parsed.date()


def to_win(value: Any) -> bool:
    """'1', '1.0' and 'true' (any case) are wins; anything else is not."""
    text = _clean(value)
    return text is not None and text.lower() in WIN_VALUES


def _require(raw: dict, key: str) -> str:
    text = _clean(raw.get(key))
    if text is None:
        raise RowRejected(f"missing required column {key!r}")
    return text


def _game_columns(raw: dict) -> dict:
    game_id = to_int(_require(raw, "gameid"))
    if game_id is None:
        raise RowRejected(f"unparseable gameid {raw.get('gameid')!r}")
    return {
        "game_id": game_id,
        "date": to_date(raw.get("date")),
        "game_type": _clean(raw.get("type")),
        "season": _clean(raw.get("season")),
        "team": _require(raw, "team"),
        "home": _require(raw, "home"),
        "away": _require(raw, "away"),
        "win": to_win(raw.get("win")),
        **{column: to_float(raw.get(header)) for header, column in STAT_COLUMNS.items()},
    }


def transform_player_row(raw: dict) -> dict:
    """
    Map one row of the player traditional export to player_games columns.

    Raises:
        RowRejected: gameid, player, team, home or away is missing
    """
    return {
        **_game_columns(raw),
        "player_id": to_int(raw.get("playerid")),
        "player": _require(raw, "player"),
    }


def transform_team_row(raw: dict) -> dict:
    """Map one row of the team traditional export to team_games columns."""
    return {
        **_game_columns(raw),
        "team_id": to_int(raw.get("teamid")),
    }


def transform_team_name_row(raw: dict) -> dict:
    """Map one row of the team names file to team_directory columns."""
    return {
        "abbreviation": _require(raw, "abbreviation"),
        "name": _require(raw, "name"),
        "team_id": to_int(raw.get("teamid")),
    }
