from __future__ import annotations

import csv
import html
import io
import logging
from datetime import datetime, timezone
from typing import Any, Dict, Union

from .errors import ExportError
from .render import render_text, to_json
from .report_pdf import build_pdf_bytes
from .types import ExportFormat

logger = logging.getLogger(__name__)

MEDIA_TYPES = {
    ExportFormat.JSON.value: "application/json",
    ExportFormat.HTML.value: "text/html",
    ExportFormat.PDF.value: "application/pdf",
    ExportFormat.CSV.value: "text/csv",
    ExportFormat.TEXT.value: "text/plain",
}


def to_html(report: Dict[str, Any]) -> str:
    return f"<html><body><h1>Report</h1><pre>{html.escape(to_json(report))}</pre></body></html>"


def to_csv(report: Dict[str, Any]) -> str:
    buf = io.StringIO()
    writer = csv.writer(buf, lineterminator="\n")
    writer.writerow(["Report", "Data"])
    writer.writerow(["Generated", datetime.now(timezone.utc).isoformat()])
    for key, value in (report.get("summary") or {}).items():
        writer.writerow([key, value])
    return buf.getvalue()


def export_report(report: Dict[str, Any], fmt: str) -> Union[str, bytes]:
    fmt = (fmt.value if isinstance(fmt, ExportFormat) else str(fmt or "")).lower()
    if fmt == ExportFormat.JSON.value:
        out: Union[str, bytes] = to_json(report)
    elif fmt == ExportFormat.HTML.value:
        out = to_html(report)
    elif fmt == ExportFormat.PDF.value:
        out = build_pdf_bytes(report)
    elif fmt == ExportFormat.CSV.value:
        out = to_csv(report)
    elif fmt == ExportFormat.TEXT.value:
        out = render_text(report)
    else:
        raise ExportError(f"Unsupported export format: {fmt!r}")
    logger.info("Exported report as %s (%d bytes)", fmt, len(out))
    return out
