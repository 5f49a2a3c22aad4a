"""
Box Score Models

The three read-only tables behind the query service.
"""

from db.models.player_games import PlayerGame
from db.models.team_games import TeamGame
from db.models.team_directory import TeamName

__all__ = [
    "PlayerGame",
    "TeamGame",
    "TeamName",
]
