"""REST API routes for match reports."""

import os
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import Response
from pydantic import BaseModel, Field

from match_reporting.errors import ExportError, InputError
from match_reporting.export import MEDIA_TYPES, export_report
from match_reporting.filters import ReportFilters
from match_reporting.normalize import normalize_matches, parse_time
from match_reporting.report import ReportOptions
from match_reporting.types import ExportFormat, GroupBy

from ..transformers.report_transformer import transform_report_to_frontend
from ...application.ports.match_data import MatchDataPort, ReportListenerPort
from ...application.use_cases.generate_report import (
    GenerateReportRequest,
    GenerateReportResult,
    GenerateReportUseCase,
)
from ...infrastructure.adapters import (
    InlineMatchAdapter,
    JsonFileMatchAdapter,
    LeagueApiMatchAdapter,
    LoggingReportListener,
)

router = APIRouter(prefix="/api/reports", tags=["reports"])

_STATUS_BY_CODE = {
    "INVALID_REQUEST": 400,
    "SOURCE_UNAVAILABLE": 502,
    "TIMEOUT": 504,
    "REPORT_FAILED": 500,
}


class ReportRequest(BaseModel):
    """Request body carrying match data inline."""

    matches: List[Dict[str, Any]] = Field(
        default_factory=list,
        description="Match records in league API shape",
    )
    include_insights: bool = Field(default=False, alias="includeInsights")
    include_charts: bool = Field(default=False, alias="includeCharts")
    include_recommendations: bool = Field(default=False, alias="includeRecommendations")
    group_by: GroupBy = Field(default=GroupBy.MONTH, alias="groupBy")

    class Config:
        populate_by_name = True

    def to_options(self) -> ReportOptions:
        return ReportOptions(
            include_insights=self.include_insights,
            include_charts=self.include_charts,
            include_recommendations=self.include_recommendations,
            group_by=self.group_by.value,
        )


def get_match_data_port() -> MatchDataPort:
    """Pick the configured match source: a JSON dump if set, else the league API."""
    data_file = os.environ.get("MATCH_DATA_FILE")
    if data_file:
        return JsonFileMatchAdapter(data_file)
    return LeagueApiMatchAdapter()


def get_report_listener() -> ReportListenerPort:
    return LoggingReportListener()


def _error(status_code: int, code: str, message: str, details: Dict[str, Any] | None = None) -> HTTPException:
    return HTTPException(
        status_code=status_code,
        detail={
            "error": {
                "code": code,
                "message": message,
                "details": details or {},
            }
        },
    )


def _raise_for_result(result: GenerateReportResult) -> None:
    if result.success:
        return
    code = result.error_code or "REPORT_FAILED"
    raise _error(_STATUS_BY_CODE.get(code, 500), code, result.error or "Failed to generate match report")


def _parse_date_param(value: Optional[str], name: str):
    if not value:
        return None
    parsed = parse_time(value)
    if parsed is None:
        raise _error(400, "INVALID_REQUEST", f"Invalid {name}: {value!r}", {name: value})
    return parsed


def _inline_adapter(body: ReportRequest) -> InlineMatchAdapter:
    try:
        return InlineMatchAdapter(normalize_matches(body.matches))
    except InputError as e:
        raise _error(400, "INVALID_REQUEST", str(e))


@router.get("/matches")
async def get_match_report(
    start_date: Optional[str] = Query(None, alias="startDate"),
    end_date: Optional[str] = Query(None, alias="endDate"),
    team_id: Optional[str] = Query(None, alias="teamId"),
    player_id: Optional[str] = Query(None, alias="playerId"),
    tournament_id: Optional[str] = Query(None, alias="tournamentId"),
    match_status: Optional[List[str]] = Query(None, alias="matchStatus"),
    event_types: Optional[List[str]] = Query(None, alias="eventTypes"),
    location: Optional[str] = Query(None),
    include_insights: bool = Query(False, alias="includeInsights"),
    include_charts: bool = Query(False, alias="includeCharts"),
    group_by: GroupBy = Query(GroupBy.MONTH, alias="groupBy"),
    match_data: MatchDataPort = Depends(get_match_data_port),
    listener: ReportListenerPort = Depends(get_report_listener),
):
    """Generate a match report from the configured match source.

    Returns:
        Match report in frontend format
    """
    filters = ReportFilters(
        start_date=_parse_date_param(start_date, "startDate"),
        end_date=_parse_date_param(end_date, "endDate"),
        team_id=team_id,
        player_id=player_id,
        tournament_id=tournament_id,
        match_status=match_status or [],
        event_types=event_types or [],
        location=location,
    )
    options = ReportOptions(
        include_insights=include_insights,
        include_charts=include_charts,
        group_by=group_by.value,
    )

    use_case = GenerateReportUseCase(match_data, listener)
    result = await use_case.execute(GenerateReportRequest(filters=filters, options=options))
    _raise_for_result(result)
    return transform_report_to_frontend(result.report, result.metadata)


@router.post("/generate")
async def generate_match_report(
    body: ReportRequest,
    listener: ReportListenerPort = Depends(get_report_listener),
):
    """Generate a match report from matches supplied in the request body."""
    use_case = GenerateReportUseCase(_inline_adapter(body), listener)
    result = await use_case.execute(GenerateReportRequest(options=body.to_options()))
    _raise_for_result(result)
    return transform_report_to_frontend(result.report, result.metadata)


@router.post("/export")
async def export_match_report(
    body: ReportRequest,
    format: ExportFormat = Query(ExportFormat.JSON),
    listener: ReportListenerPort = Depends(get_report_listener),
):
    """Generate a report from inline matches and return it as a download."""
    use_case = GenerateReportUseCase(_inline_adapter(body), listener)
    result = await use_case.execute(GenerateReportRequest(options=body.to_options()))
    _raise_for_result(result)

    try:
        content = export_report(result.report, format.value)
    except ExportError as e:
        raise _error(400, "UNSUPPORTED_FORMAT", str(e), {"format": format.value})

    return Response(
        content=content,
        media_type=MEDIA_TYPES[format.value],
        headers={"Content-Disposition": f'attachment; filename="match-report.{format.value}"'},
    )
