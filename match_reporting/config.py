from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional


POINTS_FOR_WIN = 3
POINTS_FOR_DRAW = 1
POINTS_FOR_LOSS = 0

# No lineup data exists, so every PLAYER participant is credited a full match.
DEFAULT_MINUTES_PER_MATCH = 90

FORM_LENGTH = 5
FORM_RECENT_WINDOW = 3
FORM_TREND_MARGIN = 0.5

MOST_ACTIVE_PLAYERS_LIMIT = 10
PLAYER_RANKINGS_LIMIT = 10

DEFAULT_GROUP_BY = "month"

DEFAULT_TIMEOUT_S = 30
DEFAULT_REPORT_TIMEOUT_S = 30.0


@dataclass(frozen=True)
class SourceConfig:
    base_url: str
    token: Optional[str]
    timeout_s: int


def source_config_from_env() -> SourceConfig:
    base_url = os.environ.get("LEAGUE_API_URL", "http://localhost:3001/api")
    token = os.environ.get("LEAGUE_API_TOKEN") or None
    timeout_s = int(os.environ.get("LEAGUE_API_TIMEOUT", str(DEFAULT_TIMEOUT_S)))
    return SourceConfig(base_url=base_url.rstrip("/"), token=token, timeout_s=timeout_s)


def report_timeout_from_env() -> float:
    return float(os.environ.get("REPORT_TIMEOUT_SECONDS", str(DEFAULT_REPORT_TIMEOUT_S)))
