"""Infrastructure adapters."""

from .match_data_adapters import InlineMatchAdapter, JsonFileMatchAdapter, LeagueApiMatchAdapter
from .report_listener import LoggingReportListener

__all__ = [
    "InlineMatchAdapter",
    "JsonFileMatchAdapter",
    "LeagueApiMatchAdapter",
    "LoggingReportListener",
]
