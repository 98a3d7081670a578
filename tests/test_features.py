from datetime import datetime, timedelta, timezone
from typing import List, Optional

from match_reporting.features import (
    _percentage,
    _round2,
    compute_player_performance,
    compute_summary,
    compute_team_performance,
)
from match_reporting.normalize import MatchEvent, MatchRecord, Participant, TeamRef

TEAM_A = TeamRef(id="teamA", name="Riverside FC")
TEAM_B = TeamRef(id="teamB", name="Hillcrest United")
TEAM_C = TeamRef(id="teamC", name="Lakeside Rovers")


def _match(
    match_id: str,
    home_score: Optional[int],
    away_score: Optional[int],
    day: int,
    status: str = "COMPLETED",
    home: Optional[TeamRef] = TEAM_A,
    away: Optional[TeamRef] = TEAM_B,
    minutes: Optional[int] = 90,
    participants: Optional[List[Participant]] = None,
    events: Optional[List[MatchEvent]] = None,
) -> MatchRecord:
    start = datetime(2025, 3, day, 10, 0, tzinfo=timezone.utc)
    return MatchRecord(
        id=match_id,
        status=status,
        home_team=home,
        away_team=away,
        home_score=home_score,
        away_score=away_score,
        start_time=start,
        end_time=start + timedelta(minutes=minutes) if minutes is not None else None,
        participants=participants or [],
        events=events or [],
    )


def _team(rows, team_id):
    return next(r for r in rows if r["team_id"] == team_id)


def test_rounding_is_half_up() -> None:
    assert _round2(0.125) == 0.13
    assert _percentage(1, 3) == 33.33
    assert _percentage(2, 3) == 66.67
    assert _percentage(1, 0) == 0.0


def test_summary_counts_and_averages() -> None:
    matches = [
        _match("m1", 2, 1, 1),
        _match("m2", 1, 1, 8, minutes=95),
        _match("m3", None, None, 15, status="CANCELLED", minutes=None),
        _match("m4", 0, 3, 22, status="POSTPONED", minutes=None),
    ]
    summary = compute_summary(matches)
    assert summary["total_matches"] == 4
    assert summary["completed_matches"] == 2
    assert summary["cancelled_matches"] == 1
    assert summary["postponed_matches"] == 1
    # Scored non-completed matches still count towards goals.
    assert summary["total_goals"] == 8
    assert summary["average_goals_per_match"] == 2.0
    assert summary["total_duration"] == 185
    assert summary["average_match_duration"] == 46.25
    assert summary["win_percentage"] == 50.0
    assert summary["draw_percentage"] == 50.0
    assert summary["loss_percentage"] == 0.0


def test_summary_duration_rounds_to_whole_minutes() -> None:
    m = _match("m1", 1, 0, 1)
    m.end_time = m.start_time + timedelta(minutes=89, seconds=30)
    assert compute_summary([m])["total_duration"] == 90


def test_summary_percentages_zero_without_completed_scored_matches() -> None:
    matches = [
        _match("m1", 1, 0, 1, status="CANCELLED"),
        _match("m2", None, None, 2, status="CANCELLED"),
        _match("m3", 2, 2, 3, status="CANCELLED"),
    ]
    summary = compute_summary(matches)
    assert summary["total_matches"] == 3
    assert summary["completed_matches"] == 0
    assert summary["win_percentage"] == 0
    assert summary["draw_percentage"] == 0
    assert summary["loss_percentage"] == 0


def test_summary_percentages_over_thirds() -> None:
    matches = [_match("m1", 3, 0, 1), _match("m2", 1, 1, 2), _match("m3", 0, 0, 3)]
    summary = compute_summary(matches)
    assert summary["win_percentage"] == 33.33
    assert summary["draw_percentage"] == 66.67
    assert summary["loss_percentage"] == 0.0


def test_team_performance_win_then_draw() -> None:
    m1 = _match("m1", 2, 1, 1)
    m2 = _match("m2", 1, 1, 8)
    rows = compute_team_performance([m1, m2])

    a = _team(rows, "teamA")
    assert a["team_name"] == "Riverside FC"
    assert a["matches_played"] == 2
    assert (a["wins"], a["draws"], a["losses"]) == (1, 1, 0)
    assert a["points"] == 4
    assert a["goals_for"] == 3
    assert a["goals_against"] == 2
    assert a["goal_difference"] == 1
    assert a["form"] == "DW"
    assert a["win_percentage"] == 50.0
    assert a["last_match"] == m2.start_time
    assert [o["match_id"] for o in a["last_five_matches"]] == ["m2", "m1"]

    b = _team(rows, "teamB")
    assert (b["wins"], b["draws"], b["losses"]) == (0, 1, 1)
    assert b["points"] == 1
    assert b["form"] == "DL"


def test_team_performance_skips_incomplete_and_one_sided_matches() -> None:
    matches = [
        _match("m1", 3, 0, 1, status="SCHEDULED"),
        _match("m2", 3, 0, 2, away=None),
        _match("m3", 0, 2, 3),
    ]
    rows = compute_team_performance(matches)
    assert len(rows) == 2
    a = _team(rows, "teamA")
    assert a["matches_played"] == 1
    assert a["losses"] == 1
    assert a["goals_for"] == 0


def test_team_form_keeps_five_most_recent() -> None:
    matches = [_match(f"m{d}", 1 if d % 2 else 0, 0, d) for d in range(1, 8)]
    a = _team(compute_team_performance(matches), "teamA")
    assert a["matches_played"] == 7
    assert len(a["form"]) == 5
    # Days 7, 6, 5, 4, 3: odd days are wins.
    assert a["form"] == "WDWDW"


def test_team_invariants_hold() -> None:
    matches = [
        _match("m1", 2, 1, 1),
        _match("m2", 0, 0, 2, home=TEAM_B, away=TEAM_C),
        _match("m3", 1, 4, 3, home=TEAM_C, away=TEAM_A),
        _match("m4", None, 2, 4),
    ]
    for row in compute_team_performance(matches):
        assert row["goal_difference"] == row["goals_for"] - row["goals_against"]
        assert row["points"] == 3 * row["wins"] + row["draws"]
        assert 0 <= row["win_percentage"] <= 100
        assert row["matches_played"] == row["wins"] + row["draws"] + row["losses"]


def test_player_performance_counts_goals_and_minutes() -> None:
    player = Participant(user_id="p1", role="PLAYER", team=TEAM_A, user_name="Sam Carter")
    m1 = _match(
        "m1", 2, 0, 1,
        participants=[player],
        events=[
            MatchEvent(type="goal", minute=10, player_id="p1"),
            MatchEvent(type="goal", minute=55, player_id="p1"),
            MatchEvent(type="goal", minute=60, player_id="p9"),
        ],
    )
    m2 = _match(
        "m2", 1, 1, 8,
        participants=[player],
        events=[
            MatchEvent(type="assist", minute=30, player_id="p1"),
            MatchEvent(type="yellow_card", minute=70, player_id="p1"),
            MatchEvent(type="substitution", minute=75, player_id="p1"),
        ],
    )
    rows = compute_player_performance([m1, m2])
    assert len(rows) == 1
    p = rows[0]
    assert p["player_name"] == "Sam Carter"
    assert p["team_name"] == "Riverside FC"
    assert p["matches_played"] == 2
    assert p["goals"] == 2
    assert p["assists"] == 1
    assert p["yellow_cards"] == 1
    assert p["red_cards"] == 0
    assert p["goal_contribution"] == 3
    assert p["total_minutes"] == 180
    assert p["average_minutes"] == 90
    assert p["average_rating"] == 0


def test_player_performance_only_counts_completed_players() -> None:
    referee = Participant(user_id="r1", role="REFEREE")
    anonymous = Participant(user_id="p2", role="PLAYER")
    matches = [
        _match("m1", 1, 0, 1, participants=[referee, anonymous]),
        _match("m2", 1, 0, 2, status="CANCELLED", participants=[anonymous]),
    ]
    rows = compute_player_performance(matches)
    assert [r["player_id"] for r in rows] == ["p2"]
    assert rows[0]["player_name"] == "Unknown Player"
    assert rows[0]["team_name"] == "Unknown Team"
    assert rows[0]["matches_played"] == 1


def test_player_minutes_per_match_is_configurable() -> None:
    player = Participant(user_id="p1", role="PLAYER")
    rows = compute_player_performance([_match("m1", 0, 0, 1, participants=[player])], minutes_per_match=60)
    assert rows[0]["total_minutes"] == 60
