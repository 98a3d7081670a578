from __future__ import annotations

import math
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Tuple

from .config import (
    DEFAULT_MINUTES_PER_MATCH,
    FORM_LENGTH,
    POINTS_FOR_DRAW,
    POINTS_FOR_LOSS,
    POINTS_FOR_WIN,
)
from .normalize import MatchRecord, TeamRef
from .types import MatchStatus, ParticipantRole

RESULT_POINTS = {"win": POINTS_FOR_WIN, "draw": POINTS_FOR_DRAW, "loss": POINTS_FOR_LOSS}


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _round2(value: float) -> float:
    return math.floor(value * 100 + 0.5) / 100


def _percentage(part: float, whole: float) -> float:
    if whole <= 0:
        return 0.0
    return math.floor(part / whole * 10000 + 0.5) / 100


def _average(total: float, count: int) -> float:
    return _round2(total / count) if count > 0 else 0.0


def _duration_minutes(match: MatchRecord) -> Optional[int]:
    if not match.start_time or not match.end_time:
        return None
    return _round_half_up((match.end_time - match.start_time).total_seconds() / 60)


def _sort_ts(dt: Optional[datetime]) -> float:
    return dt.timestamp() if dt else float("-inf")


def _is_completed(match: MatchRecord) -> bool:
    return match.status == MatchStatus.COMPLETED.value


def _result_for(goals_for: int, goals_against: int) -> str:
    if goals_for > goals_against:
        return "win"
    if goals_for < goals_against:
        return "loss"
    return "draw"


def compute_summary(matches: List[MatchRecord]) -> Dict[str, Any]:
    total = len(matches)
    by_status: Dict[str, int] = {}
    for m in matches:
        by_status[m.status] = by_status.get(m.status, 0) + 1

    total_goals = sum((m.home_score or 0) + (m.away_score or 0) for m in matches)
    total_participants = sum(len(m.participants) for m in matches)
    total_duration = 0
    for m in matches:
        minutes = _duration_minutes(m)
        if minutes is not None:
            total_duration += minutes

    # Home-side perspective over completed, fully scored matches.
    wins = draws = losses = 0
    for m in matches:
        if not _is_completed(m) or m.home_score is None or m.away_score is None:
            continue
        result = _result_for(m.home_score, m.away_score)
        if result == "win":
            wins += 1
        elif result == "loss":
            losses += 1
        else:
            draws += 1
    decided = wins + draws + losses

    return {
        "total_matches": total,
        "completed_matches": by_status.get(MatchStatus.COMPLETED.value, 0),
        "cancelled_matches": by_status.get(MatchStatus.CANCELLED.value, 0),
        "postponed_matches": by_status.get(MatchStatus.POSTPONED.value, 0),
        "total_goals": total_goals,
        "average_goals_per_match": _average(total_goals, total),
        "total_participants": total_participants,
        "average_participants_per_match": _average(total_participants, total),
        "total_duration": total_duration,
        "average_match_duration": _average(total_duration, total),
        "win_percentage": _percentage(wins, decided),
        "draw_percentage": _percentage(draws, decided),
        "loss_percentage": _percentage(losses, decided),
    }


def _qualifying_fixtures(matches: List[MatchRecord]) -> List[Tuple[MatchRecord, TeamRef, TeamRef]]:
    out: List[Tuple[MatchRecord, TeamRef, TeamRef]] = []
    for m in matches:
        if not _is_completed(m) or not m.home_team or not m.away_team:
            continue
        out.append((m, m.home_team, m.away_team))
    return out


def collect_team_outcomes(
    matches: List[MatchRecord],
) -> Dict[str, Dict[str, Any]]:
    """Per-team outcome lists for completed matches with both sides known.

    Missing scores count as 0. Teams appear in first-seen order.
    """
    teams: Dict[str, Dict[str, Any]] = {}
    for m, home, away in _qualifying_fixtures(matches):
        home_score = m.home_score or 0
        away_score = m.away_score or 0
        for team, gf, ga in ((home, home_score, away_score), (away, away_score, home_score)):
            entry = teams.setdefault(team.id, {"team_id": team.id, "team_name": team.name, "outcomes": []})
            entry["outcomes"].append(
                {
                    "match_id": m.id,
                    "result": _result_for(gf, ga),
                    "goals_for": gf,
                    "goals_against": ga,
                    "date": m.start_time,
                }
            )
    return teams


def last_outcomes(outcomes: List[Dict[str, Any]], limit: int = FORM_LENGTH) -> List[Dict[str, Any]]:
    return sorted(outcomes, key=lambda o: _sort_ts(o["date"]), reverse=True)[:limit]


def form_string(outcomes: List[Dict[str, Any]]) -> str:
    return "".join(o["result"][0].upper() for o in outcomes)


def compute_team_performance(matches: List[MatchRecord]) -> List[Dict[str, Any]]:
    rows: List[Dict[str, Any]] = []
    for team_id, entry in collect_team_outcomes(matches).items():
        outcomes = entry["outcomes"]
        wins = sum(1 for o in outcomes if o["result"] == "win")
        draws = sum(1 for o in outcomes if o["result"] == "draw")
        losses = sum(1 for o in outcomes if o["result"] == "loss")
        goals_for = sum(o["goals_for"] for o in outcomes)
        goals_against = sum(o["goals_against"] for o in outcomes)
        played = len(outcomes)
        recent = last_outcomes(outcomes)
        last_match = recent[0]["date"] if recent and recent[0]["date"] else datetime.now(timezone.utc)

        rows.append(
            {
                "team_id": team_id,
                "team_name": entry["team_name"],
                "matches_played": played,
                "wins": wins,
                "draws": draws,
                "losses": losses,
                "points": wins * POINTS_FOR_WIN + draws * POINTS_FOR_DRAW + losses * POINTS_FOR_LOSS,
                "goals_for": goals_for,
                "goals_against": goals_against,
                "goal_difference": goals_for - goals_against,
                "win_percentage": _percentage(wins, played),
                "form": form_string(recent),
                "last_match": last_match,
                "last_five_matches": recent,
            }
        )
    return rows


def compute_player_performance(
    matches: List[MatchRecord],
    minutes_per_match: int = DEFAULT_MINUTES_PER_MATCH,
) -> List[Dict[str, Any]]:
    stats: Dict[str, Dict[str, Any]] = {}
    for m in matches:
        if not _is_completed(m):
            continue
        for p in m.participants:
            if p.role != ParticipantRole.PLAYER.value:
                continue
            s = stats.get(p.user_id)
            if s is None:
                s = {
                    "player_id": p.user_id,
                    "player_name": p.user_name or "Unknown Player",
                    "team_name": (p.team.name if p.team else None) or "Unknown Team",
                    "matches_played": 0,
                    "goals": 0,
                    "assists": 0,
                    "yellow_cards": 0,
                    "red_cards": 0,
                    "total_rating": 0.0,
                    "total_minutes": 0,
                }
                stats[p.user_id] = s
            s["matches_played"] += 1

            for e in m.events:
                if e.player_id != p.user_id:
                    continue
                if e.type == "goal":
                    s["goals"] += 1
                elif e.type == "assist":
                    s["assists"] += 1
                elif e.type == "yellow_card":
                    s["yellow_cards"] += 1
                elif e.type == "red_card":
                    s["red_cards"] += 1

            s["total_minutes"] += minutes_per_match

    rows: List[Dict[str, Any]] = []
    for s in stats.values():
        played = s["matches_played"]
        total_rating = s.pop("total_rating")
        rows.append(
            {
                **s,
                # No ratings source is wired in yet; stays 0.
                "average_rating": _average(total_rating, played),
                "average_minutes": _average(s["total_minutes"], played),
                "goal_contribution": s["goals"] + s["assists"],
            }
        )
    return rows
