"""Ports for match data retrieval and report notifications."""

from abc import ABC, abstractmethod
from typing import Any, Dict, List

from match_reporting.filters import ReportFilters
from match_reporting.normalize import MatchRecord


class MatchDataPort(ABC):
    """Port for fetching already-joined match records."""

    @abstractmethod
    def fetch_matches(self, filters: ReportFilters) -> List[MatchRecord]:
        """Fetch matches narrowed by ``filters``.

        Args:
            filters: Date range, team, player, tournament, status and
                location criteria

        Returns:
            Match records with teams, participants and events attached
        """
        ...


class ReportListenerPort(ABC):
    """Port notified after a report has been generated."""

    @abstractmethod
    def on_report_generated(self, event: Dict[str, Any]) -> None:
        """Receive a completed report.

        Args:
            event: Mapping with ``filters``, ``options`` and ``report``
        """
        ...
