"""Application use cases."""

from .generate_report import (
    GenerateReportRequest,
    GenerateReportResult,
    GenerateReportUseCase,
)

__all__ = [
    "GenerateReportRequest",
    "GenerateReportResult",
    "GenerateReportUseCase",
]
