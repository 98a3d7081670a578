from __future__ import annotations

from typing import Any, Dict, List

from .config import PLAYER_RANKINGS_LIMIT

HIGH_SCORING_THRESHOLD = 3
HIGH_WIN_RATE_THRESHOLD = 60
SHORT_MATCH_THRESHOLD = 80

STANDING_RECOMMENDATIONS = [
    "Focus on maintaining competitive balance",
    "Consider implementing performance tracking systems",
]

CHART_KEYS = (
    "match_trends",
    "team_performance",
    "player_rankings",
    "event_distribution",
    "goal_scoring_patterns",
)


def empty_insights() -> Dict[str, Any]:
    return {
        "key_findings": [],
        "performance_highlights": [],
        "areas_for_improvement": [],
        "recommendations": [],
        "statistical_significance": {"high": [], "medium": [], "low": []},
    }


def empty_charts() -> Dict[str, Any]:
    return {key: {} for key in CHART_KEYS}


def generate_insights(
    summary: Dict[str, Any],
    team_performance: List[Dict[str, Any]],
    player_performance: List[Dict[str, Any]],
) -> Dict[str, Any]:
    """Fixed-threshold findings over an already computed report."""
    insights = empty_insights()

    if summary.get("average_goals_per_match", 0) > HIGH_SCORING_THRESHOLD:
        insights["key_findings"].append("High scoring matches indicate offensive gameplay dominance")
    if summary.get("win_percentage", 0) > HIGH_WIN_RATE_THRESHOLD:
        insights["key_findings"].append("High win rate suggests competitive balance")

    if team_performance:
        top_team = sorted(team_performance, key=lambda t: t["points"], reverse=True)[0]
        insights["performance_highlights"].append(
            f"{top_team['team_name']} leads with {top_team['points']} points"
        )
    if player_performance:
        top_player = sorted(player_performance, key=lambda p: p["goals"], reverse=True)[0]
        insights["performance_highlights"].append(
            f"{top_player['player_name']} is top scorer with {top_player['goals']} goals"
        )

    if summary.get("average_match_duration", 0) < SHORT_MATCH_THRESHOLD:
        insights["areas_for_improvement"].append("Match duration below expected levels")

    insights["recommendations"].extend(STANDING_RECOMMENDATIONS)
    return insights


def build_charts(
    trends: Dict[str, Any],
    team_performance: List[Dict[str, Any]],
    player_performance: List[Dict[str, Any]],
    event_analysis: Dict[str, Any],
) -> Dict[str, Any]:
    distribution = [
        {"type": event_type, "count": count}
        for event_type, count in (event_analysis.get("events_by_type") or {}).items()
    ]
    return {
        "match_trends": {"type": "line", "data": trends.get("matches_by_period", [])},
        "team_performance": {"type": "bar", "data": team_performance},
        "player_rankings": {"type": "bar", "data": player_performance[:PLAYER_RANKINGS_LIMIT]},
        "event_distribution": {"type": "pie", "data": distribution},
        "goal_scoring_patterns": {"type": "line", "data": trends.get("performance_by_period", [])},
    }
