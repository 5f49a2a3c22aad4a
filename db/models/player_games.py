"""
Player Games Table

One row per player per game, loaded in bulk from the traditional player
box score export.
"""

from peewee import CharField, IntegerField

from db.models.box_score import BoxScoreModel


class PlayerGame(BoxScoreModel):
    """
    Per-game box score for a single player.

    ``player`` is the display spelling and is the grouping key;
    ``player_id`` is only carried through for headshot lookups and may be
    missing from some feeds.
    """

    player_id = IntegerField(null=True)
    player = CharField(max_length=100, index=True)

    class Meta:
        table_name = "player_games"
        indexes = (
            # Head-to-head scans: team plus either side of the game
            (("team", "home", "away"), False),
        )

    def __repr__(self) -> str:
        return f"<PlayerGame(game_id={self.game_id}, player='{self.player}', team='{self.team}')>"
