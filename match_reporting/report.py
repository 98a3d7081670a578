from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from typing import Any, Callable, Dict, List, Optional

from .config import DEFAULT_GROUP_BY, DEFAULT_MINUTES_PER_MATCH
from .errors import ReportGenerationError
from .events import analyze_events
from .features import compute_player_performance, compute_summary, compute_team_performance
from .filters import ReportFilters, filters_to_dict
from .insights import build_charts, empty_charts, empty_insights, generate_insights
from .normalize import MatchRecord
from .trends import compute_trends

logger = logging.getLogger(__name__)

ReportListener = Callable[[Dict[str, Any]], None]


@dataclass
class ReportOptions:
    include_insights: bool = False
    include_charts: bool = False
    include_recommendations: bool = False
    group_by: str = DEFAULT_GROUP_BY
    minutes_per_match: int = DEFAULT_MINUTES_PER_MATCH


def empty_report() -> Dict[str, Any]:
    return {
        "summary": compute_summary([]),
        "team_performance": [],
        "player_performance": [],
        "event_analysis": analyze_events([]),
        "trends": compute_trends([]),
        "insights": empty_insights(),
        "charts": empty_charts(),
    }


def build_report(matches: List[MatchRecord], options: ReportOptions) -> Dict[str, Any]:
    summary = compute_summary(matches)
    team_performance = compute_team_performance(matches)
    player_performance = compute_player_performance(matches, options.minutes_per_match)
    event_analysis = analyze_events(matches)
    trends = compute_trends(matches, options.group_by or DEFAULT_GROUP_BY)

    if options.include_insights:
        insights = generate_insights(summary, team_performance, player_performance)
    else:
        insights = empty_insights()

    if options.include_charts:
        charts = build_charts(trends, team_performance, player_performance, event_analysis)
    else:
        charts = empty_charts()

    return {
        "summary": summary,
        "team_performance": team_performance,
        "player_performance": player_performance,
        "event_analysis": event_analysis,
        "trends": trends,
        "insights": insights,
        "charts": charts,
    }


def generate_report(
    matches: Optional[List[MatchRecord]],
    options: Optional[ReportOptions] = None,
    filters: Optional[ReportFilters] = None,
    on_generated: Optional[ReportListener] = None,
) -> Dict[str, Any]:
    """Aggregate ``matches`` into a full report.

    Empty (or ``None``) input yields :func:`empty_report`. ``on_generated``
    receives ``{"filters", "options", "report"}`` once a non-empty report has
    been built. Any failure surfaces as :class:`ReportGenerationError`.
    """
    options = options or ReportOptions()
    try:
        if not matches:
            return empty_report()

        report = build_report(matches, options)
        logger.info(
            "Generated match report: %d matches, %d teams, %d players",
            len(matches),
            len(report["team_performance"]),
            len(report["player_performance"]),
        )
        if on_generated is not None:
            on_generated(
                {
                    "filters": filters_to_dict(filters) if filters else {},
                    "options": asdict(options),
                    "report": report,
                }
            )
        return report
    except Exception as exc:
        logger.exception(
            "Error generating match report (matches=%d, options=%s)",
            len(matches or []),
            options,
        )
        raise ReportGenerationError() from exc
