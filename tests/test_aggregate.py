from __future__ import annotations

import math

from beat_the_bots.core.aggregate import (
    aggregate_summary_standing,
    aggregate_today_standing,
    games_played_from_games,
    normalize_games,
    safe_div,
    total_points_from_games,
)


def test_safe_div() -> None:
    assert safe_div(10, 4) == 2.5
    assert safe_div(10, 0) == 0
    assert safe_div(10, -2) == 0
    assert safe_div(float("inf"), 2) == 0
    assert safe_div(3, float("nan")) == 0
    assert safe_div("abc", 2) == 0
    assert safe_div(0, 5) == 0


def test_normalize_games_covers_the_four_games() -> None:
    games = normalize_games({"wordle": {"solved": True, "attempts_used": 1}, "sudoku": {"points": 3}})
    assert set(games) == {"wordle", "connections", "strands", "keyword"}
    assert games["wordle"]["points"] == 10
    assert games["connections"] is None
    assert normalize_games(None) == {"wordle": None, "connections": None, "strands": None, "keyword": None}


def test_games_played_counts_present_games_even_at_zero() -> None:
    games = {"wordle": {"points": 0}, "connections": None, "strands": {"points": None}, "keyword": {"points": 10}}
    assert games_played_from_games(games) == 3
    assert total_points_from_games(games) == 10
    assert games_played_from_games(None) == 0
    assert total_points_from_games("nope") == 0


def test_aggregate_today_standing_ignores_reported_totals() -> None:
    standing = {
        "total_points": 999,
        "games_played": 12,
        "games": {
            "wordle": {"solved": True, "attempts_used": 2},
            "connections": {"solved": True, "mistakes_used": 0},
            "strands": {"solved": True},
            "keyword": {"solved": False},
        },
    }
    result = aggregate_today_standing(standing)
    assert result["total_points"] == 29
    assert result["games_played"] == 4
    assert result["avg_points"] == 7.25


def test_aggregate_today_standing_without_games() -> None:
    result = aggregate_today_standing({"model_name": "idle"})
    assert result["games_played"] == 0
    assert result["total_points"] == 0
    assert result["avg_points"] == 0
    assert not math.isnan(result["avg_points"])


def test_aggregate_summary_prefers_explicit_games_played() -> None:
    result = aggregate_summary_standing({"games_played": 10, "days_played": 5, "total_points": 70})
    assert result == {"games_played": 10, "total_points": 70, "avg_points": 7.0}


def test_aggregate_summary_derives_games_from_days() -> None:
    result = aggregate_summary_standing({"days_played": 3, "total_points": 60})
    assert result["games_played"] == 12
    assert result["avg_points"] == 5.0


def test_aggregate_summary_degrades_bad_input() -> None:
    assert aggregate_summary_standing({}) == {"games_played": 0, "total_points": 0, "avg_points": 0.0}
    result = aggregate_summary_standing({"games_played": "many", "total_points": "lots"})
    assert result == {"games_played": 0, "total_points": 0, "avg_points": 0.0}
    assert aggregate_summary_standing({"games_played": "8", "total_points": "20"})["avg_points"] == 2.5
