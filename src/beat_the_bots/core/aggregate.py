from typing import Any, Dict, Mapping, Optional

from .models import GAME_KEYS, GAMES_PER_DAY, Number
from .scoring import normalize_game, tidy_number, to_number


def safe_div(num: Any, den: Any) -> float:
    """Divide, defining every degenerate case (zero, negative or non-finite input) as 0."""
    n = to_number(num)
    d = to_number(den)
    if n is None or d is None or d <= 0:
        return 0.0
    return n / d


def normalize_games(games: Any) -> Dict[str, Optional[Dict[str, Any]]]:
    """Score the four daily games; a game the model did not report maps to ``None``."""
    if not isinstance(games, Mapping):
        games = {}
    return {key: normalize_game(key, games.get(key)) for key in GAME_KEYS}


def games_played_from_games(games: Any) -> int:
    # a present game counts even when it scored 0 or could not be scored
    if not isinstance(games, Mapping):
        return 0
    return sum(1 for g in games.values() if g is not None)


def total_points_from_games(games: Any) -> Number:
    if not isinstance(games, Mapping):
        return 0
    total = 0.0
    for g in games.values():
        if not isinstance(g, Mapping):
            continue
        total += to_number(g.get("points")) or 0.0
    return tidy_number(total)


def aggregate_today_standing(standing: Mapping[str, Any]) -> Dict[str, Any]:
    """Per-model totals for a today payload, recomputed from the raw ``games`` detail.

    Any ``total_points``/``games_played`` already on the standing is ignored.
    """
    games = normalize_games(standing.get("games"))
    games_played = games_played_from_games(games)
    total_points = total_points_from_games(games)
    return {
        "games": games,
        "games_played": games_played,
        "total_points": total_points,
        "avg_points": safe_div(total_points, games_played),
    }


def _count(value: Any) -> Optional[Number]:
    if value is None:
        return None
    n = to_number(value)
    if n is None:
        return 0
    return tidy_number(max(0.0, n))


def aggregate_summary_standing(standing: Mapping[str, Any]) -> Dict[str, Any]:
    """Per-model totals for an aggregate payload.

    ``games_played`` comes from the standing when supplied, otherwise from
    ``days_played`` at four games a day, otherwise 0. ``total_points`` is taken
    as already summed upstream.
    """
    games_played = _count(standing.get("games_played"))
    if games_played is None:
        days_played = _count(standing.get("days_played"))
        games_played = days_played * GAMES_PER_DAY if days_played is not None else 0

    total_points = tidy_number(to_number(standing.get("total_points")) or 0.0)
    return {
        "games_played": games_played,
        "total_points": total_points,
        "avg_points": safe_div(total_points, games_played),
    }


__all__ = [
    "aggregate_summary_standing",
    "aggregate_today_standing",
    "games_played_from_games",
    "normalize_games",
    "safe_div",
    "total_points_from_games",
]
