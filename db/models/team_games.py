"""
Team Games Table

One row per team per game. Used for win/loss tallies.
"""

from peewee import IntegerField

from db.models.box_score import BoxScoreModel


class TeamGame(BoxScoreModel):
    team_id = IntegerField(null=True)

    class Meta:
        table_name = "team_games"
        indexes = (
            (("team", "home", "away"), False),
        )

    def __repr__(self) -> str:
        return f"<TeamGame(game_id={self.game_id}, team='{self.team}', win={self.win})>"
