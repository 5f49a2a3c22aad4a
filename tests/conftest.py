"""
Shared fixtures: a temporary SQLite record store with a small, hand-built
box score dataset.

Games (home listed first):

    g1  2020-01-01  LAL-BOS  LAL won
    g2  2020-02-01  BOS-LAL  BOS won
    g3  2020-03-01  LAL-BOS  LAL won
    g4  2020-04-01  LAL-DEN  DEN won
    g5  2020-05-01  CHH-LAL  CHH won
    g6  2020-06-01  CHA-BOS  CHA won
    g7  2020-07-01  SEA-LAL  LAL won   (SEA has no directory entry)
    g8  2020-08-01  SEA-DEN  SEA won
"""

from datetime import date

import pytest
from fastapi.testclient import TestClient

from db.base import bind_database, create_database
from db.models import PlayerGame, TeamGame, TeamName
from main import create_app
from services.record_store import RecordStore
from services.records import STAT_ATTRS


DIRECTORY = [
    ("LAL", "Los Angeles Lakers", 1610612747),
    ("BOS", "Boston Celtics", 1610612738),
    ("CHH", "Charlotte Hornets", 1610612766),
    ("CHA", "Charlotte Hornets", 1610612766),
    ("DEN", "Denver Nuggets", 1610612743),
    ("NOP", "New Orleans Pelicans", 1610612740),
]

# game_id -> (date, home, away, winner)
GAMES = {
    1: (date(2020, 1, 1), "LAL", "BOS", "LAL"),
    2: (date(2020, 2, 1), "BOS", "LAL", "BOS"),
    3: (date(2020, 3, 1), "LAL", "BOS", "LAL"),
    4: (date(2020, 4, 1), "LAL", "DEN", "DEN"),
    5: (date(2020, 5, 1), "CHH", "LAL", "CHH"),
    6: (date(2020, 6, 1), "CHA", "BOS", "CHA"),
    7: (date(2020, 7, 1), "SEA", "LAL", "LAL"),
    8: (date(2020, 8, 1), "SEA", "DEN", "SEA"),
}

# (game_id, player, player_id, team, pts, extra stats)
PLAYER_LINES = [
    (1, "LeBron James", 2544, "LAL", 30, {"reb": 8, "ast": 10}),
    (2, "LeBron James", 2544, "LAL", 25, {"reb": 6, "ast": 7}),
    (3, "LeBron James", 2544, "LAL", 35, {"reb": 10, "ast": 9}),
    (4, "LeBron James", 2544, "LAL", 20, {"reb": 7}),
    (5, "LeBron James", 2544, "LAL", 28, {"reb": 9}),
    (7, "LeBron James", 2544, "LAL", 22, {"reb": 5}),
    (1, "Anthony Davis", 203076, "LAL", 24, {}),
    (3, "Anthony Davis", 203076, "LAL", 26, {}),
    (4, "Gary Payton", 56, "LAL", 8, {}),
    (7, "Gary Payton", 56, "SEA", 20, {}),
    (8, "Gary Payton", 56, "SEA", 18, {}),
    (7, "Shawn Kemp", 431, "SEA", 15, {}),
    (1, "Mike James", 1628455, "BOS", 10, {}),
    (2, "Mike James", 1628455, "BOS", 12, {}),
    (1, "John Doe", 9001, "BOS", 10, {}),
    (2, "John Doe", 9001, "BOS", None, {}),
    (3, "John Doe", 9001, "BOS", 20, {}),
    (6, "Jane Doe", 9002, "BOS", 5, {}),
    (1, "Paul Pierce", 1718, "BOS", 26, {}),
    (2, "Paul Pierce", 1718, "BOS", 30, {}),
    (3, "Paul Pierce", 1718, "BOS", None, {}),
    (6, "Paul Pierce", 1718, "BOS", 20, {}),
    (4, "Nikola Jokić", 203999, "DEN", 27, {"reb": 12, "fg3_pct": None}),
    (5, "Larry Johnson", 913, "CHH", 18, {}),
    (6, "Kemba Walker", 202689, "CHA", 24, {}),
]


def _game_columns(game_id: int, team: str) -> dict:
    game_date, home, away, winner = GAMES[game_id]
    return {
        "game_id": game_id,
        "date": game_date,
        "game_type": "regular",
        "season": str(game_date.year),
        "team": team,
        "home": home,
        "away": away,
        "win": team == winner,
        **{attr: None for attr in STAT_ATTRS},
    }


def player_rows() -> list[dict]:
    rows = []
    for game_id, player, player_id, team, pts, extra in PLAYER_LINES:
        row = _game_columns(game_id, team)
        row.update(player=player, player_id=player_id, pts=pts, **extra)
        rows.append(row)
    return rows


def team_rows() -> list[dict]:
    rows = []
    for game_id, (_, home, away, _) in GAMES.items():
        for team in (home, away):
            row = _game_columns(game_id, team)
            row["team_id"] = None
            rows.append(row)
    return rows


def directory_rows() -> list[dict]:
    return [
        {"abbreviation": abbreviation, "name": name, "team_id": team_id, "position": position}
        for position, (abbreviation, name, team_id) in enumerate(DIRECTORY)
    ]


@pytest.fixture
def database(tmp_path):
    database = create_database(f"sqlite:///{tmp_path / 'boxscores.db'}")
    bind_database(database)
    with database.atomic():
        TeamName.insert_many(directory_rows()).execute()
        PlayerGame.insert_many(player_rows()).execute()
        TeamGame.insert_many(team_rows()).execute()
    yield database
    if not database.is_closed():
        database.close()


@pytest.fixture
def store(database) -> RecordStore:
    return RecordStore(database)


@pytest.fixture
def client(store):
    with TestClient(create_app(store)) as test_client:
        yield test_client
