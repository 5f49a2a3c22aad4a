"""
Box Score Base Model

Columns shared by the per-player and per-team game tables. Statistic
columns are nullable: an absent value is excluded from averages rather
than counted as zero.
"""

from peewee import (
    BooleanField,
    CharField,
    DateField,
    FloatField,
    IntegerField,
)

from db.base import BaseModel


class BoxScoreModel(BaseModel):
    """
    Abstract box score row. Concrete tables subclass this.

    Attributes:
        game_id: Game identifier, shared by every row of the same game
        date: Game date
        game_type: e.g. 'regular', 'playoff'
        season: Season label as loaded (e.g. '2016')
        team: Abbreviation of the side this row belongs to
        home, away: Abbreviations of the two sides; one of them equals team
        win: Whether ``team`` won the game
        min .. plus_minus: Traditional box score statistics
    """

    game_id = IntegerField(index=True)
    date = DateField(null=True)
    game_type = CharField(max_length=20, null=True)
    season = CharField(max_length=10, null=True)
    team = CharField(max_length=3, index=True)
    home = CharField(max_length=3)
    away = CharField(max_length=3)
    win = BooleanField(default=False)

    # Traditional stats
    min = FloatField(null=True)
    pts = FloatField(null=True)
    fgm = FloatField(null=True)
    fga = FloatField(null=True)
    fg_pct = FloatField(null=True)
    fg3m = FloatField(null=True)
    fg3a = FloatField(null=True)
    fg3_pct = FloatField(null=True)
    ftm = FloatField(null=True)
    fta = FloatField(null=True)
    ft_pct = FloatField(null=True)
    oreb = FloatField(null=True)
    dreb = FloatField(null=True)
    reb = FloatField(null=True)
    ast = FloatField(null=True)
    stl = FloatField(null=True)
    blk = FloatField(null=True)
    tov = FloatField(null=True)
    pf = FloatField(null=True)
    plus_minus = FloatField(null=True)
