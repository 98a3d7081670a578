from match_reporting.insights import build_charts, empty_charts, generate_insights


def _summary(avg_goals: float = 2.0, win_pct: float = 50.0, duration: float = 90.0):
    return {
        "average_goals_per_match": avg_goals,
        "win_percentage": win_pct,
        "average_match_duration": duration,
    }


def test_insights_above_thresholds() -> None:
    teams = [
        {"team_name": "Riverside FC", "points": 4},
        {"team_name": "Hillcrest United", "points": 7},
    ]
    players = [
        {"player_name": "Sam Carter", "goals": 2},
        {"player_name": "Alex Moreno", "goals": 5},
    ]
    insights = generate_insights(_summary(3.5, 61.0, 70.0), teams, players)

    assert insights["key_findings"] == [
        "High scoring matches indicate offensive gameplay dominance",
        "High win rate suggests competitive balance",
    ]
    assert insights["performance_highlights"] == [
        "Hillcrest United leads with 7 points",
        "Alex Moreno is top scorer with 5 goals",
    ]
    assert insights["areas_for_improvement"] == ["Match duration below expected levels"]
    assert insights["recommendations"] == [
        "Focus on maintaining competitive balance",
        "Consider implementing performance tracking systems",
    ]
    assert insights["statistical_significance"] == {"high": [], "medium": [], "low": []}
    # Inputs keep their order.
    assert teams[0]["team_name"] == "Riverside FC"


def test_insights_thresholds_are_strict() -> None:
    insights = generate_insights(_summary(3.0, 60.0, 80.0), [], [])
    assert insights["key_findings"] == []
    assert insights["performance_highlights"] == []
    assert insights["areas_for_improvement"] == []
    assert len(insights["recommendations"]) == 2


def test_top_team_tie_keeps_first() -> None:
    teams = [{"team_name": "First", "points": 6}, {"team_name": "Second", "points": 6}]
    insights = generate_insights(_summary(), teams, [])
    assert insights["performance_highlights"] == ["First leads with 6 points"]


def test_charts_payloads() -> None:
    trends = {"matches_by_period": [{"period": "2025-03"}], "performance_by_period": [{"period": "2025-03"}]}
    players = [{"player_id": f"p{i}"} for i in range(12)]
    events = {"events_by_type": {"goal": 4, "foul": 2}}
    charts = build_charts(trends, [{"team_id": "t1"}], players, events)

    assert charts["match_trends"] == {"type": "line", "data": [{"period": "2025-03"}]}
    assert charts["team_performance"]["type"] == "bar"
    assert len(charts["player_rankings"]["data"]) == 10
    assert charts["event_distribution"] == {
        "type": "pie",
        "data": [{"type": "goal", "count": 4}, {"type": "foul", "count": 2}],
    }
    assert charts["goal_scoring_patterns"]["type"] == "line"
    assert set(charts) == set(empty_charts())
