from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from .normalize import MatchRecord


@dataclass
class ReportFilters:
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    team_id: Optional[str] = None
    player_id: Optional[str] = None
    tournament_id: Optional[str] = None
    match_status: List[str] = field(default_factory=list)
    # Accepted for parity with the league API; not used to narrow matches.
    event_types: List[str] = field(default_factory=list)
    location: Optional[str] = None


def _comparable(dt: datetime) -> datetime:
    return dt if dt.tzinfo else dt.replace(tzinfo=timezone.utc)


def _in_window(match: MatchRecord, filters: ReportFilters) -> bool:
    if not filters.start_date and not filters.end_date:
        return True
    if match.start_time is None:
        return False
    start = _comparable(match.start_time)
    if filters.start_date and start < _comparable(filters.start_date):
        return False
    if filters.end_date and start > _comparable(filters.end_date):
        return False
    return True


def _matches(match: MatchRecord, filters: ReportFilters) -> bool:
    if not _in_window(match, filters):
        return False
    if filters.team_id:
        team_ids = {t.id for t in (match.home_team, match.away_team) if t}
        if filters.team_id not in team_ids:
            return False
    if filters.player_id and not any(p.user_id == filters.player_id for p in match.participants):
        return False
    if filters.tournament_id and filters.tournament_id not in match.tournament_ids:
        return False
    if filters.match_status:
        wanted = {s.upper() for s in filters.match_status}
        if match.status not in wanted:
            return False
    if filters.location:
        if not match.location or filters.location.lower() not in match.location.lower():
            return False
    return True


def apply_filters(matches: List[MatchRecord], filters: Optional[ReportFilters]) -> List[MatchRecord]:
    """In-memory equivalent of the league API's match history query."""
    if filters is None:
        return list(matches)
    return [m for m in matches if _matches(m, filters)]


def filters_to_dict(filters: ReportFilters) -> Dict[str, Any]:
    out: Dict[str, Any] = {}
    if filters.start_date:
        out["startDate"] = filters.start_date.isoformat()
    if filters.end_date:
        out["endDate"] = filters.end_date.isoformat()
    for key, value in (
        ("teamId", filters.team_id),
        ("playerId", filters.player_id),
        ("tournamentId", filters.tournament_id),
        ("location", filters.location),
    ):
        if value:
            out[key] = value
    if filters.match_status:
        out["matchStatus"] = list(filters.match_status)
    if filters.event_types:
        out["eventTypes"] = list(filters.event_types)
    return out
