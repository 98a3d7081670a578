"""Domain enums."""

from enum import Enum


class MatchStatus(str, Enum):
    """Lifecycle status of a match."""

    SCHEDULED = "SCHEDULED"
    IN_PROGRESS = "IN_PROGRESS"
    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"
    POSTPONED = "POSTPONED"


class ParticipantRole(str, Enum):
    """Role a user holds in a match."""

    PLAYER = "PLAYER"
    REFEREE = "REFEREE"
    COACH = "COACH"
    SPECTATOR = "SPECTATOR"


class GroupBy(str, Enum):
    """Period granularity for trend bucketing."""

    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    QUARTER = "quarter"
    YEAR = "year"


class FormTrend(str, Enum):
    """Direction of a team's recent form."""

    IMPROVING = "improving"
    DECLINING = "declining"
    STABLE = "stable"


class ExportFormat(str, Enum):
    """Supported report export formats."""

    JSON = "json"
    HTML = "html"
    PDF = "pdf"
    CSV = "csv"
    TEXT = "text"
