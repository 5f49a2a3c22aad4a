import pytest

from core.exceptions import MalformedQuery, PlayerNotFound, TeamNotFound
from services.aggregation import (
    ScorerLine,
    career_summaries,
    career_summary,
    group_by_player,
    join_team_names,
    mean_of,
    rank_scorers,
    top_scorers,
)
from services.records import PlayerGameRecord, TeamDirectoryEntry


def _row(player: str, team: str, pts=None, game_id: int = 1) -> PlayerGameRecord:
    return PlayerGameRecord(
        game_id=game_id, player_name=player, team=team, home=team, away="XXX", pts=pts
    )


# ---------------------------------------------------------------------------
# Stages
# ---------------------------------------------------------------------------


@pytest.mark.parametrize(
    ("values", "expected"),
    [
        ([10, None, 20], 15.0),
        ([None, None], 0.0),
        ([], 0.0),
        ([0, 0, 3], 1.0),
    ],
)
def test_mean_of_skips_missing_values(values, expected):
    assert mean_of(values) == expected


def test_join_drops_rows_without_directory_entry():
    rows = [_row("A", "LAL"), _row("B", "SEA"), _row("C", "BOS")]
    directory = [
        TeamDirectoryEntry(abbreviation="LAL", name="Los Angeles Lakers"),
        TeamDirectoryEntry(abbreviation="BOS", name="Boston Celtics"),
    ]

    joined = join_team_names(rows, directory)

    assert [(row.player_name, name) for row, name in joined] == [
        ("A", "Los Angeles Lakers"),
        ("C", "Boston Celtics"),
    ]


def test_group_by_player_keeps_first_seen_order():
    rows = [_row("B", "LAL"), _row("A", "LAL"), _row("B", "BOS", game_id=2)]
    groups = group_by_player(rows)
    assert list(groups) == ["B", "A"]
    assert [row.team for row in groups["B"]] == ["LAL", "BOS"]


def test_rank_scorers_breaks_ties_by_games_then_name():
    lines = [
        ScorerLine(name="Zed", player_id=1, avg_pts=20.0, games_played=5),
        ScorerLine(name="Amy", player_id=2, avg_pts=20.0, games_played=5),
        ScorerLine(name="Bob", player_id=3, avg_pts=20.0, games_played=9),
        ScorerLine(name="Top", player_id=4, avg_pts=31.5, games_played=1),
    ]
    ranked = rank_scorers(lines, limit=3)
    assert [line.name for line in ranked] == ["Top", "Bob", "Amy"]


# ---------------------------------------------------------------------------
# Career summaries
# ---------------------------------------------------------------------------


def test_career_summary_averages(store):
    summary = career_summary(store, "LeBron James")

    assert summary.name == "LeBron James"
    assert summary.player_id == 2544
    assert summary.games_played == 6
    assert summary.teams == ("Los Angeles Lakers",)
    assert summary.averages["PTS"] == pytest.approx(160 / 6)
    assert summary.averages["REB"] == pytest.approx(7.5)
    # assists only recorded in three of six games
    assert summary.averages["AST"] == pytest.approx(26 / 3)


def test_null_points_are_excluded_from_the_average(store):
    summary = career_summary(store, "Doe")
    assert summary.name == "John Doe"
    assert summary.games_played == 3
    assert summary.averages["PTS"] == 15


def test_statistic_missing_everywhere_averages_to_zero(store):
    summary = career_summary(store, "jokic")
    assert summary.name == "Nikola Jokić"
    assert summary.averages["3P_PCT"] == 0
    assert summary.averages["REB"] == 12


def test_ambiguous_query_returns_player_with_most_games(store):
    summary = career_summary(store, "James")
    assert summary.name == "LeBron James"
    assert summary.games_played == 6


def test_ambiguous_query_never_blends_players(store):
    summaries = {s.name: s.games_played for s in career_summaries(store, "James")}
    assert summaries == {"LeBron James": 6, "Mike James": 2}


def test_rows_for_unknown_teams_are_dropped(store):
    summary = career_summary(store, "Payton")
    assert summary.games_played == 1
    assert summary.teams == ("Los Angeles Lakers",)
    assert summary.averages["PTS"] == 8


def test_player_whose_rows_are_all_dropped_is_not_found(store):
    with pytest.raises(PlayerNotFound):
        career_summary(store, "Kemp")


def test_unknown_player_is_not_found(store):
    with pytest.raises(PlayerNotFound):
        career_summary(store, "Bill Russell")


@pytest.mark.parametrize("query", ["  ", "\u0301"])
def test_blank_player_query_is_malformed(store, query):
    with pytest.raises(MalformedQuery):
        career_summary(store, query)


def test_accent_only_team_query_is_malformed(store):
    with pytest.raises(MalformedQuery):
        top_scorers(store, "\u0301")


@pytest.mark.parametrize(
    "player",
    ["LeBron James", "Anthony Davis", "Mike James", "John Doe", "Paul Pierce", "Kemba Walker"],
)
def test_games_played_matches_row_count_for_exact_name(store, player):
    expected = len(store.player_games(names=[player]))
    assert expected > 0
    assert career_summary(store, player).games_played == expected


# ---------------------------------------------------------------------------
# Top scorers
# ---------------------------------------------------------------------------


def test_top_scorers_ranked_by_average_points(store):
    summary = top_scorers(store, "Lakers")

    assert summary.team_name == "Los Angeles Lakers"
    assert summary.abbreviations == ("LAL",)
    assert [p.name for p in summary.players] == ["LeBron James", "Anthony Davis", "Gary Payton"]
    assert summary.players[0].avg_pts == pytest.approx(160 / 6)
    assert summary.players[0].games_played == 6
    assert summary.players[0].player_id == 2544


def test_top_scorers_same_for_abbreviation_and_full_name(store):
    assert top_scorers(store, "LAL") == top_scorers(store, "Los Angeles Lakers")


def test_top_scorers_fold_every_franchise_abbreviation(store):
    summary = top_scorers(store, "Hornets", limit=10)

    assert summary.team_name == "Charlotte Hornets"
    assert summary.abbreviations == ("CHH", "CHA")
    assert [(p.name, p.avg_pts) for p in summary.players] == [
        ("Kemba Walker", 24),
        ("Larry Johnson", 18),
    ]


def test_top_scorers_null_points_and_limit(store):
    summary = top_scorers(store, "Celtics", limit=2)
    assert [(p.name, p.games_played) for p in summary.players] == [
        ("Paul Pierce", 4),
        ("John Doe", 3),
    ]
    assert summary.players[0].avg_pts == pytest.approx(76 / 3)
    assert summary.players[1].avg_pts == 15


def test_team_without_games_has_empty_ranking(store):
    summary = top_scorers(store, "Pelicans")
    assert summary.team_name == "New Orleans Pelicans"
    assert summary.players == []


def test_unknown_team_is_not_found(store):
    with pytest.raises(TeamNotFound):
        top_scorers(store, "ZZZ-nonexistent")


@pytest.mark.parametrize("limit", [0, -1, 51])
def test_limit_out_of_range_is_malformed(store, limit):
    with pytest.raises(MalformedQuery):
        top_scorers(store, "Lakers", limit=limit)
