"""Adapters supplying match records to the report use case."""

from pathlib import Path
from typing import List

from match_reporting.filters import ReportFilters, apply_filters
from match_reporting.match_source import LeagueApiClient, load_matches_file
from match_reporting.normalize import MatchRecord

from ...application.ports.match_data import MatchDataPort


class LeagueApiMatchAdapter(MatchDataPort):
    """Adapter for fetching match history from the league REST API."""

    def __init__(self, client: LeagueApiClient | None = None):
        """Initialize with an API client.

        Args:
            client: League API client. If None, one is built from environment.
        """
        self._client = client or LeagueApiClient.from_config()

    def fetch_matches(self, filters: ReportFilters) -> List[MatchRecord]:
        # Filtering happens server-side.
        return self._client.fetch_matches(filters)


class JsonFileMatchAdapter(MatchDataPort):
    """Adapter reading a JSON dump of matches and filtering in memory."""

    def __init__(self, path: str | Path):
        self._path = Path(path)

    def fetch_matches(self, filters: ReportFilters) -> List[MatchRecord]:
        return apply_filters(load_matches_file(self._path), filters)


class InlineMatchAdapter(MatchDataPort):
    """Adapter over matches supplied directly in a request body."""

    def __init__(self, matches: List[MatchRecord]):
        self._matches = matches

    def fetch_matches(self, filters: ReportFilters) -> List[MatchRecord]:
        return apply_filters(self._matches, filters)
