from __future__ import annotations

import json
from datetime import date, datetime
from enum import Enum
from typing import Any, Dict


def _json_default(value: Any) -> Any:
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, Enum):
        return value.value
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def to_json(report: Dict[str, Any]) -> str:
    return json.dumps(report, indent=2, default=_json_default)


def render_text(report: Dict[str, Any]) -> str:
    summary = report.get("summary", {})
    teams = report.get("team_performance", [])
    players = report.get("player_performance", [])
    events = report.get("event_analysis", {})
    insights = report.get("insights", {})

    lines = []
    lines.append("MATCH REPORT")
    lines.append(
        f"Matches: {summary.get('total_matches', 0)} | Completed: {summary.get('completed_matches', 0)} | "
        f"Cancelled: {summary.get('cancelled_matches', 0)} | Postponed: {summary.get('postponed_matches', 0)}"
    )
    lines.append(
        f"Goals: {summary.get('total_goals', 0)} ({summary.get('average_goals_per_match', 0):.2f}/match) | "
        f"Avg duration: {summary.get('average_match_duration', 0):.2f} min"
    )
    lines.append(
        f"Home W/D/L: {summary.get('win_percentage', 0):.2f}% / "
        f"{summary.get('draw_percentage', 0):.2f}% / {summary.get('loss_percentage', 0):.2f}%"
    )
    lines.append("")

    lines.append("Standings")
    ordered = sorted(teams, key=lambda t: (t.get("points", 0), t.get("goal_difference", 0)), reverse=True)
    for pos, t in enumerate(ordered, start=1):
        lines.append(
            f"{pos:>2}. {t.get('team_name')}: P{t.get('matches_played', 0)} "
            f"W{t.get('wins', 0)} D{t.get('draws', 0)} L{t.get('losses', 0)} "
            f"GD {t.get('goal_difference', 0):+d} | {t.get('points', 0)} pts | form {t.get('form') or '-'}"
        )
    lines.append("")

    lines.append("Top Scorers")
    scorers = sorted(players, key=lambda p: p.get("goals", 0), reverse=True)
    for p in scorers[:5]:
        lines.append(
            f"- {p.get('player_name')} ({p.get('team_name')}): {p.get('goals', 0)} goals, "
            f"{p.get('assists', 0)} assists"
        )
    lines.append("")

    lines.append(f"Events: {events.get('total_events', 0)}")
    for event_type, count in sorted((events.get("events_by_type") or {}).items()):
        lines.append(f"  {event_type}: {count}")

    findings = (insights.get("key_findings") or []) + (insights.get("performance_highlights") or [])
    if findings:
        lines.append("")
        lines.append("Insights")
        for item in findings:
            lines.append(f"- {item}")

    return "\n".join(lines)
