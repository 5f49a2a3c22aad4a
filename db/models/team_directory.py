"""
Team Directory Table

Maps each abbreviation to a full team name. A franchise that relocated or
rebranded owns several rows (e.g. 'CHH' and 'CHA' both read
'Charlotte Hornets').
"""

from peewee import CharField, IntegerField

from db.base import BaseModel


class TeamName(BaseModel):
    """
    Attributes:
        abbreviation: Abbreviation as it appears in the game tables (primary key)
        name: Full team name (e.g., 'Los Angeles Lakers')
        team_id: Stable NBA team ID, if known
        position: Load order; resolution returns entries in this order
    """

    abbreviation = CharField(max_length=3, primary_key=True)
    name = CharField(max_length=50)
    team_id = IntegerField(null=True)
    position = IntegerField(index=True)

    class Meta:
        table_name = "team_directory"

    def __repr__(self) -> str:
        return f"<TeamName(abbreviation='{self.abbreviation}', name='{self.name}')>"
