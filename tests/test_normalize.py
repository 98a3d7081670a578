from datetime import datetime, timezone

import pytest

from match_reporting.errors import InputError
from match_reporting.features import compute_summary, compute_team_performance
from match_reporting.normalize import normalize_matches, parse_time


def _raw_match():
    return {
        "id": "match-1",
        "status": "completed",
        "homeTeam": {"id": "teamA", "name": "Riverside FC", "logo": "/logos/riverside.png"},
        "awayTeam": {"id": "teamB", "name": "Hillcrest United"},
        "homeScore": 2,
        "awayScore": "1",
        "startTime": "2025-03-01T10:00:00Z",
        "endTime": "2025-03-01T11:32:00.000Z",
        "location": "Riverside Park",
        "participants": [
            {
                "userId": "p1",
                "role": "PLAYER",
                "user": {"id": "p1", "displayName": "Sam Carter"},
                "team": {"id": "teamA", "name": "Riverside FC"},
            },
            {"userId": "r1", "role": "referee", "user": {"firstName": "Jo", "lastName": "Banks"}},
        ],
        "events": [
            {
                "type": "goal",
                "minute": 23,
                "playerId": "p1",
                "teamId": "teamA",
                "player": {"displayName": "Sam Carter"},
                "team": {"name": "Riverside FC"},
            },
            {"type": "yellow_card", "minute": None},
        ],
        "tournamentMatches": [{"tournamentId": "spring-cup"}],
    }


def test_normalize_maps_api_shape() -> None:
    matches = normalize_matches([_raw_match()])
    assert len(matches) == 1
    m = matches[0]
    assert m.id == "match-1"
    assert m.status == "COMPLETED"
    assert m.home_team.name == "Riverside FC"
    assert m.home_team.logo == "/logos/riverside.png"
    assert m.away_team.id == "teamB"
    assert (m.home_score, m.away_score) == (2, 1)
    assert m.start_time == datetime(2025, 3, 1, 10, 0, tzinfo=timezone.utc)
    assert (m.end_time - m.start_time).total_seconds() == 92 * 60
    assert m.location == "Riverside Park"
    assert m.tournament_ids == ["spring-cup"]

    player, referee = m.participants
    assert player.user_id == "p1"
    assert player.user_name == "Sam Carter"
    assert player.team.name == "Riverside FC"
    assert referee.role == "REFEREE"
    assert referee.user_name == "Jo Banks"

    goal, card = m.events
    assert goal.player_id == "p1"
    assert goal.player_name == "Sam Carter"
    assert goal.team_name == "Riverside FC"
    assert card.minute is None
    assert card.player_id is None


def test_normalize_missing_fields() -> None:
    m = normalize_matches([{"id": 7, "status": "SCHEDULED", "homeScore": None, "startTime": "not-a-date"}])[0]
    assert m.id == "7"
    assert m.home_team is None
    assert m.home_score is None
    assert m.start_time is None
    assert m.participants == []
    assert m.events == []


def test_normalize_envelopes_and_none() -> None:
    assert normalize_matches(None) == []
    assert len(normalize_matches({"success": True, "data": [_raw_match()]})) == 1
    assert len(normalize_matches({"matches": [_raw_match(), _raw_match()]})) == 2


@pytest.mark.parametrize("payload", ["matches", 42, {"items": []}, [["not", "a", "match"]]])
def test_normalize_rejects_malformed_payloads(payload) -> None:
    with pytest.raises(InputError):
        normalize_matches(payload)


def test_parse_time_treats_offsetless_values_as_utc() -> None:
    assert parse_time("2025-03-01T11:30:00") == datetime(2025, 3, 1, 11, 30, tzinfo=timezone.utc)
    assert parse_time(datetime(2025, 3, 1, 11, 30)).tzinfo is timezone.utc
    assert parse_time("2025-03-01T11:30:00+02:00").utcoffset().total_seconds() == 7200


def test_mixed_offset_timestamps_still_aggregate() -> None:
    raw = [
        {
            "id": "m1",
            "status": "COMPLETED",
            "homeTeam": {"id": "teamA", "name": "Riverside FC"},
            "awayTeam": {"id": "teamB", "name": "Hillcrest United"},
            "homeScore": 1,
            "awayScore": 0,
            "startTime": "2025-03-01T10:00:00Z",
            "endTime": "2025-03-01T11:30:00",
        },
        {
            "id": "m2",
            "status": "COMPLETED",
            "homeTeam": {"id": "teamA", "name": "Riverside FC"},
            "awayTeam": {"id": "teamB", "name": "Hillcrest United"},
            "homeScore": 0,
            "awayScore": 2,
            "startTime": "2025-03-08T10:00:00",
        },
    ]
    matches = normalize_matches(raw)
    assert compute_summary(matches)["total_duration"] == 90

    team_a = next(t for t in compute_team_performance(matches) if t["team_id"] == "teamA")
    assert [o["match_id"] for o in team_a["last_five_matches"]] == ["m2", "m1"]
    assert team_a["form"] == "LW"
