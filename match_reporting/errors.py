"""Exceptions raised by the reporting engine."""


class ReportingError(Exception):
    """Base class for reporting failures."""


class InputError(ReportingError, ValueError):
    """Match payload has an unusable shape."""


class ReportGenerationError(ReportingError):
    """Aggregation failed; the cause is logged, never exposed."""

    def __init__(self, message: str = "Failed to generate match report"):
        super().__init__(message)


class ExportError(ReportingError, ValueError):
    """Requested export format is not supported."""


class MatchSourceError(ReportingError, RuntimeError):
    """The external match data source could not be read."""
