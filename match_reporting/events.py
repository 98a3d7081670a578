from __future__ import annotations

from typing import Any, Dict, List

from .config import MOST_ACTIVE_PLAYERS_LIMIT
from .features import _percentage
from .normalize import MatchRecord


def _bump(bucket: Dict[str, Any], event_type: str) -> None:
    bucket["event_count"] += 1
    bucket["event_types"][event_type] = bucket["event_types"].get(event_type, 0) + 1


def analyze_events(matches: List[MatchRecord]) -> Dict[str, Any]:
    """Event distribution across every match, whatever its status."""
    total_events = 0
    by_type: Dict[str, int] = {}
    by_minute: Dict[int, int] = {}
    by_team: Dict[str, Dict[str, Any]] = {}
    by_player: Dict[str, Dict[str, Any]] = {}

    for m in matches:
        for e in m.events:
            total_events += 1
            by_type[e.type] = by_type.get(e.type, 0) + 1

            if e.minute is not None:
                by_minute[e.minute] = by_minute.get(e.minute, 0) + 1

            if e.team_id:
                team = by_team.setdefault(
                    e.team_id,
                    {
                        "team_id": e.team_id,
                        "team_name": e.team_name or "Unknown Team",
                        "event_count": 0,
                        "event_types": {},
                    },
                )
                _bump(team, e.type)

            if e.player_id:
                player = by_player.setdefault(
                    e.player_id,
                    {
                        "player_id": e.player_id,
                        "player_name": e.player_name or "Unknown Player",
                        "event_count": 0,
                        "event_types": {},
                    },
                )
                _bump(player, e.type)

    events_by_minute = [
        {"minute": minute, "count": count, "percentage": _percentage(count, total_events)}
        for minute, count in sorted(by_minute.items())
    ]
    events_by_team = sorted(by_team.values(), key=lambda t: t["event_count"], reverse=True)
    most_active = sorted(by_player.values(), key=lambda p: p["event_count"], reverse=True)

    return {
        "total_events": total_events,
        "events_by_type": by_type,
        "events_by_minute": events_by_minute,
        "events_by_team": events_by_team,
        "most_active_players": most_active[:MOST_ACTIVE_PLAYERS_LIMIT],
    }
