from __future__ import annotations

import argparse
import io
import json
from datetime import datetime, timezone
from typing import Any, Dict, List

from reportlab.lib import colors
from reportlab.lib.pagesizes import letter
from reportlab.lib.styles import getSampleStyleSheet
from reportlab.lib.units import inch
from reportlab.platypus import Paragraph, Preformatted, SimpleDocTemplate, Spacer, Table, TableStyle

from .render import to_json


def _table_style() -> TableStyle:
    return TableStyle(
        [
            ("BACKGROUND", (0, 0), (-1, 0), colors.lightgrey),
            ("GRID", (0, 0), (-1, -1), 0.5, colors.grey),
            ("FONT", (0, 0), (-1, -1), "Helvetica", 8),
        ]
    )


def _build_summary_table(report: Dict[str, Any]) -> Table:
    summary = report.get("summary") or {}
    rows = [["Metric", "Value"]]
    for key, value in summary.items():
        rows.append([key.replace("_", " ").capitalize(), str(value)])
    table = Table(rows, colWidths=[3.0 * inch, 1.5 * inch])
    table.setStyle(_table_style())
    return table


def _build_standings_table(report: Dict[str, Any]) -> Table:
    teams = sorted(report.get("team_performance") or [], key=lambda t: t.get("points", 0), reverse=True)
    rows = [["Team", "P", "W", "D", "L", "GF", "GA", "GD", "Pts", "Form"]]
    for t in teams:
        rows.append(
            [
                t.get("team_name") or t.get("team_id"),
                t.get("matches_played", 0),
                t.get("wins", 0),
                t.get("draws", 0),
                t.get("losses", 0),
                t.get("goals_for", 0),
                t.get("goals_against", 0),
                t.get("goal_difference", 0),
                t.get("points", 0),
                t.get("form") or "-",
            ]
        )
    table = Table([[str(c) for c in row] for row in rows])
    table.setStyle(_table_style())
    return table


def build_pdf_bytes(report: Dict[str, Any]) -> bytes:
    styles = getSampleStyleSheet()
    story: List[Any] = []
    story.append(Paragraph("Match Report", styles["Title"]))
    story.append(Paragraph(f"Generated on {datetime.now(timezone.utc).isoformat()}", styles["BodyText"]))
    story.append(Spacer(1, 0.2 * inch))

    story.append(Paragraph("Summary", styles["Heading3"]))
    story.append(_build_summary_table(report))
    story.append(Spacer(1, 0.2 * inch))

    if report.get("team_performance"):
        story.append(Paragraph("Standings", styles["Heading3"]))
        story.append(_build_standings_table(report))
        story.append(Spacer(1, 0.2 * inch))

    story.append(Paragraph("Full Report Data", styles["Heading3"]))
    story.append(Preformatted(to_json(report), styles["Code"]))

    buf = io.BytesIO()
    doc = SimpleDocTemplate(buf, pagesize=letter)
    doc.build(story)
    return buf.getvalue()


def main() -> None:
    parser = argparse.ArgumentParser(description="Render match report JSON to PDF.")
    parser.add_argument("--input", required=True, help="Path to report.json")
    parser.add_argument("--output", required=True, help="Path to output PDF")
    args = parser.parse_args()
    with open(args.input, "r", encoding="utf-8") as f:
        report = json.load(f)
    with open(args.output, "wb") as f:
        f.write(build_pdf_bytes(report))


if __name__ == "__main__":
    main()
