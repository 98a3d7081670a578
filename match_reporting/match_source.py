from __future__ import annotations

import json
import logging
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional

import requests

from .config import SourceConfig, source_config_from_env
from .errors import MatchSourceError
from .filters import ReportFilters, filters_to_dict
from .normalize import MatchRecord, normalize_matches

logger = logging.getLogger(__name__)

RETRY_STATUSES = (429, 500, 502, 503, 504)
MATCH_HISTORY_PATH = "/matches/history"


def filters_to_params(filters: Optional[ReportFilters]) -> Dict[str, Any]:
    return filters_to_dict(filters) if filters else {}


@dataclass
class LeagueApiClient:
    base_url: str
    token: Optional[str] = None
    timeout_s: int = 30

    def __post_init__(self) -> None:
        self.base_url = self.base_url.rstrip("/")
        self.session = requests.Session()
        self.session.headers.update({"accept": "application/json"})
        if self.token:
            self.session.headers["authorization"] = f"Bearer {self.token}"

    @classmethod
    def from_config(cls, config: Optional[SourceConfig] = None) -> "LeagueApiClient":
        config = config or source_config_from_env()
        return cls(base_url=config.base_url, token=config.token, timeout_s=config.timeout_s)

    def get_json(
        self,
        path: str,
        params: Optional[Dict[str, Any]] = None,
        retries: int = 3,
        backoff_s: float = 0.6,
    ) -> Any:
        url = f"{self.base_url}{path}"
        last_err: Optional[Exception] = None
        for attempt in range(retries):
            try:
                resp = self.session.get(url, params=params or {}, timeout=self.timeout_s)
            except requests.RequestException as exc:
                last_err = exc
                logger.warning("League API request failed (attempt %d/%d): %s", attempt + 1, retries, exc)
            else:
                if resp.status_code not in RETRY_STATUSES:
                    return self._decode(resp, url)
                last_err = MatchSourceError(f"HTTP {resp.status_code} from {url}")
                logger.warning("League API returned %d (attempt %d/%d)", resp.status_code, attempt + 1, retries)

            if attempt + 1 < retries:
                time.sleep(backoff_s * (attempt + 1))

        raise MatchSourceError(f"Failed after {retries} attempts. Last error: {last_err}")

    @staticmethod
    def _decode(resp: requests.Response, url: str) -> Any:
        try:
            resp.raise_for_status()
        except requests.HTTPError as exc:
            raise MatchSourceError(f"HTTP {resp.status_code} from {url}") from exc
        try:
            return resp.json()
        except ValueError as exc:
            raise MatchSourceError(f"Invalid JSON from {url}") from exc

    def fetch_matches(self, filters: Optional[ReportFilters] = None) -> List[MatchRecord]:
        body = self.get_json(MATCH_HISTORY_PATH, params=filters_to_params(filters))
        if isinstance(body, dict) and body.get("success") is False:
            raise MatchSourceError(body.get("message") or "League API reported failure")
        matches = normalize_matches(body)
        logger.info("Fetched %d matches from %s", len(matches), self.base_url)
        return matches


def load_matches_file(path: str | Path) -> List[MatchRecord]:
    with Path(path).open("r", encoding="utf-8") as f:
        return normalize_matches(json.load(f))
