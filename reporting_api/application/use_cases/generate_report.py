"""Use case for generating match reports."""

import asyncio
import logging
import threading
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from functools import partial
from typing import Any, Dict

from match_reporting.config import report_timeout_from_env
from match_reporting.errors import InputError, MatchSourceError, ReportGenerationError
from match_reporting.filters import ReportFilters, filters_to_dict
from match_reporting.report import ReportOptions, generate_report

from ..ports.match_data import MatchDataPort, ReportListenerPort

logger = logging.getLogger(__name__)

# Thread pool for blocking fetches and CPU-bound aggregation
_executor = ThreadPoolExecutor(max_workers=4)


@dataclass
class GenerateReportRequest:
    """Request to generate a report."""

    filters: ReportFilters = field(default_factory=ReportFilters)
    options: ReportOptions = field(default_factory=ReportOptions)


@dataclass
class GenerateReportResult:
    """Result of report generation."""

    success: bool
    report: Dict[str, Any] | None = None
    error: str | None = None
    error_code: str | None = None
    metadata: Dict[str, Any] | None = None


class GenerateReportUseCase:
    """Use case for generating match reports.

    This orchestrates the process of:
    1. Fetching matches from the configured data source
    2. Aggregating them into a report, bounded by a timeout
    3. Notifying the report listener
    """

    def __init__(
        self,
        match_data: MatchDataPort,
        listener: ReportListenerPort | None = None,
        timeout_s: float | None = None,
    ):
        self._match_data = match_data
        self._listener = listener
        self._timeout_s = timeout_s if timeout_s is not None else report_timeout_from_env()

    def _notifier(self, abandoned: threading.Event):
        def notify(event: Dict[str, Any]) -> None:
            if abandoned.is_set():
                logger.warning("Report finished after the %.1fs deadline; listener not notified", self._timeout_s)
                return
            self._listener.on_report_generated(event)

        return notify

    async def execute(self, request: GenerateReportRequest) -> GenerateReportResult:
        """Execute the report generation use case.

        Args:
            request: Filters and options for the report

        Returns:
            Report generation result
        """
        loop = asyncio.get_running_loop()

        try:
            fetch_func = partial(self._match_data.fetch_matches, request.filters)
            matches = await loop.run_in_executor(_executor, fetch_func)
        except InputError as e:
            return GenerateReportResult(success=False, error=str(e), error_code="INVALID_REQUEST")
        except MatchSourceError as e:
            logger.error("Match data source failed: %s", e)
            return GenerateReportResult(
                success=False,
                error="Match data source unavailable",
                error_code="SOURCE_UNAVAILABLE",
            )

        abandoned = threading.Event()
        on_generated = self._notifier(abandoned) if self._listener else None
        build_func = partial(
            generate_report,
            matches,
            request.options,
            request.filters,
            on_generated,
        )

        try:
            report = await asyncio.wait_for(
                loop.run_in_executor(_executor, build_func),
                timeout=self._timeout_s,
            )
        except asyncio.TimeoutError:
            # The worker thread cannot be cancelled; it must not notify once the caller has given up.
            abandoned.set()
            logger.error("Report generation exceeded %.1fs for %d matches", self._timeout_s, len(matches))
            return GenerateReportResult(
                success=False,
                error="Report generation timed out",
                error_code="TIMEOUT",
            )
        except ReportGenerationError as e:
            return GenerateReportResult(success=False, error=str(e), error_code="REPORT_FAILED")

        metadata = {
            "filters": filters_to_dict(request.filters),
            "group_by": request.options.group_by,
            "matches_analyzed": len(matches),
        }
        return GenerateReportResult(success=True, report=report, metadata=metadata)
