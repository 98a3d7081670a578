from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from .errors import InputError


@dataclass(frozen=True)
class TeamRef:
    id: str
    name: str
    logo: Optional[str] = None


@dataclass
class Participant:
    user_id: str
    role: str
    team: Optional[TeamRef] = None
    user_name: Optional[str] = None


@dataclass
class MatchEvent:
    type: str
    minute: Optional[int] = None
    player_id: Optional[str] = None
    team_id: Optional[str] = None
    player_name: Optional[str] = None
    team_name: Optional[str] = None


@dataclass
class MatchRecord:
    id: str
    status: str
    home_team: Optional[TeamRef] = None
    away_team: Optional[TeamRef] = None
    home_score: Optional[int] = None
    away_score: Optional[int] = None
    start_time: Optional[datetime] = None
    end_time: Optional[datetime] = None
    participants: List[Participant] = field(default_factory=list)
    events: List[MatchEvent] = field(default_factory=list)
    location: Optional[str] = None
    tournament_ids: List[str] = field(default_factory=list)


def parse_time(value: Any) -> Optional[datetime]:
    """Parse an ISO-8601 timestamp; values without an offset are taken as UTC."""
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        dt = value
    else:
        try:
            dt = datetime.fromisoformat(str(value).replace("Z", "+00:00"))
        except ValueError:
            return None
    return dt if dt.tzinfo else dt.replace(tzinfo=timezone.utc)


def _optional_int(value: Any) -> Optional[int]:
    if value is None or value == "":
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def _optional_str(value: Any) -> Optional[str]:
    if value is None or value == "":
        return None
    return str(value)


def _display_name(entry: Any) -> Optional[str]:
    if not isinstance(entry, dict):
        return None
    name = entry.get("displayName") or entry.get("name")
    if not name:
        first = entry.get("firstName") or ""
        last = entry.get("lastName") or ""
        name = f"{first} {last}".strip()
    return name or None


def _team_ref(entry: Any) -> Optional[TeamRef]:
    if not isinstance(entry, dict) or entry.get("id") is None:
        return None
    return TeamRef(
        id=str(entry["id"]),
        name=str(entry.get("name") or ""),
        logo=entry.get("logo"),
    )


def _normalize_participant(p: Dict[str, Any]) -> Participant:
    return Participant(
        user_id=str(p.get("userId") or (p.get("user") or {}).get("id") or ""),
        role=str(p.get("role") or "").upper(),
        team=_team_ref(p.get("team")),
        user_name=_display_name(p.get("user")),
    )


def _normalize_event(e: Dict[str, Any]) -> MatchEvent:
    player = e.get("player")
    team = e.get("team")
    return MatchEvent(
        type=str(e.get("type") or ""),
        minute=_optional_int(e.get("minute")),
        player_id=_optional_str(e.get("playerId")),
        team_id=_optional_str(e.get("teamId")),
        player_name=_display_name(player),
        team_name=team.get("name") if isinstance(team, dict) else None,
    )


def _tournament_ids(m: Dict[str, Any]) -> List[str]:
    ids: List[str] = []
    for link in m.get("tournamentMatches") or []:
        if isinstance(link, dict) and link.get("tournamentId"):
            ids.append(str(link["tournamentId"]))
    if m.get("tournamentId"):
        ids.append(str(m["tournamentId"]))
    return list(dict.fromkeys(ids))


def normalize_match(m: Dict[str, Any]) -> MatchRecord:
    if not isinstance(m, dict):
        raise InputError(f"Match entry must be an object, got {type(m).__name__}")
    return MatchRecord(
        id=str(m.get("id") or ""),
        status=str(m.get("status") or "").upper(),
        home_team=_team_ref(m.get("homeTeam")),
        away_team=_team_ref(m.get("awayTeam")),
        home_score=_optional_int(m.get("homeScore")),
        away_score=_optional_int(m.get("awayScore")),
        start_time=parse_time(m.get("startTime")),
        end_time=parse_time(m.get("endTime")),
        participants=[
            _normalize_participant(p) for p in (m.get("participants") or []) if isinstance(p, dict)
        ],
        events=[_normalize_event(e) for e in (m.get("events") or []) if isinstance(e, dict)],
        location=m.get("location"),
        tournament_ids=_tournament_ids(m),
    )


def normalize_matches(raw: Any) -> List[MatchRecord]:
    """Turn an API payload into match records.

    Accepts ``None``, a bare list, or an envelope carrying the list under
    ``data`` or ``matches``.
    """
    if raw is None:
        return []
    if isinstance(raw, dict):
        for key in ("data", "matches"):
            if isinstance(raw.get(key), list):
                raw = raw[key]
                break
        else:
            raise InputError("Match payload object has no 'data' or 'matches' list")
    if not isinstance(raw, list):
        raise InputError(f"Match payload must be a list, got {type(raw).__name__}")
    return [normalize_match(m) for m in raw]
