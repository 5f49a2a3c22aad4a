import pytest
from fastapi.testclient import TestClient
from peewee import SqliteDatabase

from main import create_app
from services.record_store import RecordStore


def test_player_search(client):
    response = client.get("/v1/players/search/lebron")
    assert response.status_code == 200

    body = response.json()
    assert body["status"] == "success"
    data = body["data"]
    assert data["name"] == "LeBron James"
    assert data["playerId"] == 2544
    assert data["teams"] == ["Los Angeles Lakers"]
    assert data["gamesPlayed"] == 6
    assert data["avgPTS"] == pytest.approx(160 / 6)
    assert data["avg3P_PCT"] == 0
    assert "avgPLUS_MINUS" in data


def test_player_search_accents(client):
    response = client.get("/v1/players/search/jokic")
    assert response.status_code == 200
    assert response.json()["data"]["name"] == "Nikola Jokić"


def test_player_not_found(client):
    response = client.get("/v1/players/search/Kemp")
    assert response.status_code == 404

    body = response.json()
    assert body["status"] == "not_found"
    assert body["error_code"] == "PLAYER_NOT_FOUND"
    assert "Kemp" in body["message"]


def test_blank_query_is_rejected(client):
    response = client.get("/v1/players/search/%20%20")
    assert response.status_code == 400
    assert response.json()["error_code"] == "MALFORMED_QUERY"


def test_player_matchup(client):
    response = client.get("/v1/players/matchup/LeBron/Pierce")
    assert response.status_code == 200

    data = response.json()["data"]
    assert data["gamesPlayed"] == 3
    assert data["player1"]["wins"] == 2
    assert data["player2"]["avgPTS"] == 28


def test_player_rows_listing(client):
    response = client.get("/v1/players")
    assert response.status_code == 200

    data = response.json()["data"]
    assert len(data) == 20
    assert data[0]["name"] == "LeBron James"
    assert data[0]["gameId"] == 1
    assert data[0]["date"] == "2020-01-01"
    assert data[0]["win"] is True
    assert data[0]["stats"]["PTS"] == 30
    assert data[0]["stats"]["3P_PCT"] is None


def test_player_rows_listing_limit(client):
    assert len(client.get("/v1/players", params={"limit": 5}).json()["data"]) == 5

    response = client.get("/v1/players", params={"limit": 0})
    assert response.status_code == 400
    assert response.json()["error_code"] == "MALFORMED_QUERY"


def test_team_list(client):
    response = client.get("/v1/teams")
    assert response.status_code == 200

    data = response.json()["data"]
    assert len(data) == 6
    assert data[0] == {
        "abbreviation": "LAL",
        "name": "Los Angeles Lakers",
        "teamId": 1610612747,
    }


def test_top_scorers(client):
    response = client.get("/v1/teams/search/Lakers")
    assert response.status_code == 200

    data = response.json()["data"]
    assert data["teamName"] == "Los Angeles Lakers"
    assert data["abbreviations"] == ["LAL"]
    assert [p["name"] for p in data["players"]] == [
        "LeBron James",
        "Anthony Davis",
        "Gary Payton",
    ]
    assert data["players"][1]["avgPTS"] == 25


def test_top_scorers_limit(client):
    response = client.get("/v1/teams/search/Celtics", params={"limit": 1})
    assert response.status_code == 200
    assert [p["name"] for p in response.json()["data"]["players"]] == ["Paul Pierce"]


@pytest.mark.parametrize("limit", [0, 51])
def test_top_scorers_limit_out_of_range(client, limit):
    response = client.get("/v1/teams/search/Celtics", params={"limit": limit})
    assert response.status_code == 400
    assert response.json()["error_code"] == "MALFORMED_QUERY"


def test_top_scorers_limit_not_a_number(client):
    response = client.get("/v1/teams/search/Celtics", params={"limit": "ten"})
    assert response.status_code == 422
    assert response.json()["error_code"] == "VALIDATION_ERROR"


def test_team_not_found(client):
    response = client.get("/v1/teams/search/Sonics")
    assert response.status_code == 404
    assert response.json()["error_code"] == "TEAM_NOT_FOUND"


def test_team_matchup(client):
    response = client.get("/v1/matchup/Lakers/Celtics")
    assert response.status_code == 200

    data = response.json()["data"]
    assert data["team1"]["abbreviation"] == "LAL"
    assert data["team2"]["name"] == "Boston Celtics"
    assert (data["team1"]["wins"], data["team2"]["wins"]) == (2, 1)
    assert data["gamesPlayed"] == 3
    assert data["team1TopPlayers"][0]["name"] == "LeBron James"
    assert data["team2TopPlayers"][0] == {
        "name": "Paul Pierce",
        "playerId": 1718,
        "avgPTS": 28,
        "gamesPlayed": 3,
    }


def test_team_matchup_missing_side(client):
    response = client.get("/v1/matchup/Lakers/Sonics")
    assert response.status_code == 404
    assert response.json()["error_code"] == "MATCHUP_TEAMS_NOT_FOUND"


def test_health_reports_counts(client):
    response = client.get("/health")
    assert response.status_code == 200

    body = response.json()
    assert body["status"] == "healthy"
    assert body["counts"]["team_directory"] == 6


def test_ping(client):
    assert client.get("/ping").json() == {"message": "Pong!"}


def test_correlation_id_is_echoed(client):
    response = client.get("/ping", headers={"X-Correlation-ID": "abc-123"})
    assert response.headers["X-Correlation-ID"] == "abc-123"


def test_correlation_id_is_generated(client):
    response = client.get("/ping")
    assert response.headers["X-Correlation-ID"]


def test_store_unavailable(tmp_path):
    store = RecordStore(SqliteDatabase(str(tmp_path / "missing" / "boxscores.db")))
    with TestClient(create_app(store)) as client:
        response = client.get("/v1/teams")

    assert response.status_code == 503
    body = response.json()
    assert body["status"] == "server_error"
    assert body["error_code"] == "STORE_UNAVAILABLE"
