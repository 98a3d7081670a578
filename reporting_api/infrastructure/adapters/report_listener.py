"""Report listener that records generated reports in the service log."""

import logging
from typing import Any, Dict

from ...application.ports.match_data import ReportListenerPort

logger = logging.getLogger(__name__)


class LoggingReportListener(ReportListenerPort):
    def on_report_generated(self, event: Dict[str, Any]) -> None:
        summary = event.get("report", {}).get("summary", {})
        logger.info(
            "reportGenerated filters=%s group_by=%s matches=%s completed=%s",
            event.get("filters"),
            event.get("options", {}).get("group_by"),
            summary.get("total_matches"),
            summary.get("completed_matches"),
        )
