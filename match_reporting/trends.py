from __future__ import annotations

from typing import Any, Dict, List

from .config import DEFAULT_GROUP_BY, FORM_RECENT_WINDOW, FORM_TREND_MARGIN
from .features import (
    RESULT_POINTS,
    _average,
    _duration_minutes,
    _is_completed,
    _percentage,
    collect_team_outcomes,
    form_string,
    last_outcomes,
)
from .normalize import MatchRecord
from .periods import period_key
from .types import FormTrend


def _points_average(outcomes: List[Dict[str, Any]]) -> float:
    return sum(RESULT_POINTS[o["result"]] for o in outcomes) / len(outcomes)


def analyze_form_trend(last_five: List[Dict[str, Any]]) -> str:
    if len(last_five) < FORM_RECENT_WINDOW:
        return FormTrend.STABLE.value

    recent = last_five[:FORM_RECENT_WINDOW]
    older = last_five[FORM_RECENT_WINDOW:]
    if not recent or not older:
        return FormTrend.STABLE.value

    recent_avg = _points_average(recent)
    older_avg = _points_average(older)
    if recent_avg > older_avg + FORM_TREND_MARGIN:
        return FormTrend.IMPROVING.value
    if recent_avg < older_avg - FORM_TREND_MARGIN:
        return FormTrend.DECLINING.value
    return FormTrend.STABLE.value


def compute_team_form_trends(matches: List[MatchRecord]) -> List[Dict[str, Any]]:
    rows: List[Dict[str, Any]] = []
    for team_id, entry in collect_team_outcomes(matches).items():
        recent = last_outcomes(entry["outcomes"])
        rows.append(
            {
                "team_id": team_id,
                "team_name": entry["team_name"],
                "form": form_string(recent),
                "trend": analyze_form_trend(recent),
                "last_five_matches": recent,
            }
        )
    return rows


def compute_trends(matches: List[MatchRecord], group_by: str = DEFAULT_GROUP_BY) -> Dict[str, Any]:
    periods: Dict[str, Dict[str, Any]] = {}

    for m in matches:
        if not _is_completed(m) or m.start_time is None:
            continue
        key = period_key(m.start_time, group_by)
        stats = periods.setdefault(
            key,
            {
                "count": 0,
                "total_goals": 0,
                "total_duration": 0,
                "decisive": 0,
                "total_events": 0,
                "total_participants": 0,
            },
        )
        stats["count"] += 1
        stats["total_goals"] += (m.home_score or 0) + (m.away_score or 0)
        stats["total_events"] += len(m.events)
        stats["total_participants"] += len(m.participants)
        minutes = _duration_minutes(m)
        if minutes is not None:
            stats["total_duration"] += minutes
        # A "win" here is any non-drawn match, regardless of which side took it.
        if m.home_score != m.away_score:
            stats["decisive"] += 1

    matches_by_period: List[Dict[str, Any]] = []
    performance_by_period: List[Dict[str, Any]] = []
    for key, stats in periods.items():
        count = stats["count"]
        average_goals = _average(stats["total_goals"], count)
        average_duration = _average(stats["total_duration"], count)
        win_percentage = _percentage(stats["decisive"], count)
        matches_by_period.append(
            {
                "period": key,
                "count": count,
                "average_goals": average_goals,
                "average_duration": average_duration,
                "win_percentage": win_percentage,
                "total_participants": stats["total_participants"],
            }
        )
        performance_by_period.append(
            {
                "period": key,
                "average_goals": average_goals,
                "average_duration": average_duration,
                "win_percentage": win_percentage,
                "total_events": stats["total_events"],
            }
        )

    return {
        "matches_by_period": matches_by_period,
        "performance_by_period": performance_by_period,
        "team_form_trends": compute_team_form_trends(matches),
    }
