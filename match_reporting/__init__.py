"""Match reporting and analytics package."""

__all__ = [
    "config",
    "errors",
    "types",
    "normalize",
    "filters",
    "match_source",
    "features",
    "events",
    "periods",
    "trends",
    "insights",
    "report",
    "render",
    "export",
]
