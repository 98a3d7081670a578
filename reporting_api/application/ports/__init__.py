"""Application ports (interfaces)."""

from .match_data import MatchDataPort, ReportListenerPort

__all__ = [
    "MatchDataPort",
    "ReportListenerPort",
]
