"""
Data Transformers

Pure functions for transforming raw export rows.
"""

from pipelines.transformers.box_scores import (
    RowRejected,
    STAT_COLUMNS,
    to_date,
    to_float,
    to_int,
    to_win,
    transform_player_row,
    transform_team_name_row,
    transform_team_row,
)

__all__ = [
    "RowRejected",
    "STAT_COLUMNS",
    "to_date",
    "to_float",
    "to_int",
    "to_win",
    "transform_player_row",
    "transform_team_name_row",
    "transform_team_row",
]
