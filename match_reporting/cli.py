from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from dotenv import load_dotenv

from .config import DEFAULT_GROUP_BY, SourceConfig, source_config_from_env
from .errors import ReportingError
from .export import export_report
from .filters import ReportFilters, apply_filters
from .match_source import LeagueApiClient, load_matches_file
from .normalize import parse_time
from .report import ReportOptions, generate_report
from .types import ExportFormat, GroupBy


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="League match report generator")
    source = parser.add_mutually_exclusive_group()
    source.add_argument("--input", default=None, help="Path to a JSON dump of matches")
    source.add_argument("--api-url", default=None, help="League API base URL (default: $LEAGUE_API_URL)")
    parser.add_argument("--start-date", default=None, help="Earliest match start (ISO 8601)")
    parser.add_argument("--end-date", default=None, help="Latest match start (ISO 8601)")
    parser.add_argument("--team-id", default=None, help="Only matches involving this team")
    parser.add_argument("--player-id", default=None, help="Only matches this user took part in")
    parser.add_argument("--tournament-id", default=None, help="Only matches in this tournament")
    parser.add_argument("--status", action="append", default=[], help="Match status (repeatable)")
    parser.add_argument("--location", default=None, help="Location substring")
    parser.add_argument(
        "--group-by",
        choices=[g.value for g in GroupBy],
        default=DEFAULT_GROUP_BY,
        help="Trend period granularity",
    )
    parser.add_argument("--insights", action="store_true", help="Include heuristic insights")
    parser.add_argument("--charts", action="store_true", help="Include chart payloads")
    parser.add_argument(
        "--format",
        choices=[f.value for f in ExportFormat],
        default=ExportFormat.JSON.value,
        help="Output format",
    )
    parser.add_argument("--output", default=None, help="Output path (stdout when omitted)")
    parser.add_argument("--debug", action="store_true", help="Print debug logs")
    return parser.parse_args(argv)


def _filters_from_args(args: argparse.Namespace) -> ReportFilters:
    return ReportFilters(
        start_date=parse_time(args.start_date),
        end_date=parse_time(args.end_date),
        team_id=args.team_id,
        player_id=args.player_id,
        tournament_id=args.tournament_id,
        match_status=list(args.status),
        location=args.location,
    )


def main(argv: Optional[List[str]] = None) -> None:
    load_dotenv()
    args = _parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.debug else logging.INFO)

    filters = _filters_from_args(args)
    options = ReportOptions(
        include_insights=args.insights,
        include_charts=args.charts,
        group_by=args.group_by,
    )

    try:
        if args.input:
            matches = apply_filters(load_matches_file(args.input), filters)
        else:
            config = source_config_from_env()
            if args.api_url:
                config = SourceConfig(base_url=args.api_url, token=config.token, timeout_s=config.timeout_s)
            matches = LeagueApiClient.from_config(config).fetch_matches(filters)

        report = generate_report(matches, options, filters)
        output = export_report(report, args.format)
    except (ReportingError, OSError) as exc:
        raise SystemExit(f"error: {exc}")

    if args.output:
        mode = "wb" if isinstance(output, bytes) else "w"
        encoding = None if isinstance(output, bytes) else "utf-8"
        with open(args.output, mode, encoding=encoding) as f:
            f.write(output)
    elif isinstance(output, bytes):
        sys.stdout.buffer.write(output)
    else:
        print(output)


if __name__ == "__main__":
    main()
