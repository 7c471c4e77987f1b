"""Per-game scoring onto the common 0-10 scale.

Each game is scored by an ordered list of ``(applies, score)`` rules; the first
rule whose predicate matches the raw record decides the points. A record that no
rule matches is present but unscored (``points`` is ``None``).

Three states are kept apart throughout:

* absent game: ``normalize_game`` returns ``None``
* present but unscorable: the returned record has ``points=None``
* scored: ``points`` is a number in [0, 10]
"""
from __future__ import annotations

import math
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple

from .models import Number


MAX_POINTS = 10
LEGACY_SCALE_MAX = 7

WORDLE_POINTS: Dict[int, int] = {1: 10, 2: 9, 3: 8, 4: 7, 5: 6, 6: 5}
CONNECTIONS_POINTS: Dict[int, int] = {0: 10, 1: 8, 2: 6, 3: 4}

Game = Mapping[str, Any]
Rule = Tuple[Callable[[Game], bool], Callable[[Game], Optional[Number]]]


def to_number(value: Any) -> Optional[float]:
    """Coerce JSON-ish input to a finite float, or ``None`` when that is not possible."""
    if value is None or isinstance(value, bool):
        return None
    if not isinstance(value, (int, float, str)):
        return None
    try:
        n = float(value.strip() if isinstance(value, str) else value)
    except (ValueError, OverflowError):
        return None
    if not math.isfinite(n):
        return None
    return n


def tidy_number(n: float) -> Number:
    return int(n) if n.is_integer() else n


def clamp(value: Any, lo: Number, hi: Number) -> Optional[Number]:
    n = to_number(value)
    if n is None:
        return None
    return tidy_number(max(float(lo), min(float(hi), n)))


def _lookup(table: Dict[int, int], value: Any) -> int:
    n = to_number(value)
    if n is None or not n.is_integer():
        return 0
    return table.get(int(n), 0)


def wordle_points(attempts_used: Any, solved: bool) -> int:
    if not solved:
        return 0
    return _lookup(WORDLE_POINTS, attempts_used)


def connections_points(mistakes_used: Any, solved: bool) -> int:
    if not solved:
        return 0
    return _lookup(CONNECTIONS_POINTS, mistakes_used)


def scaled_points_from_legacy(points: Any) -> Optional[Number]:
    """Rescale an old-format ``points`` value to 0-10.

    Values up to 7 are read as the old 0-7 scale and scaled up; anything larger
    is assumed to already be on 0-10 and only clamped.
    """
    p = to_number(points)
    if p is None:
        return None
    if p <= LEGACY_SCALE_MAX:
        # halves round up, not to even
        return clamp(math.floor(p / LEGACY_SCALE_MAX * MAX_POINTS + 0.5), 0, MAX_POINTS)
    return clamp(p, 0, MAX_POINTS)


# --- rule predicates -------------------------------------------------------

def _always(game: Game) -> bool:
    return True


def _has(field: str) -> Callable[[Game], bool]:
    def check(game: Game) -> bool:
        return game.get(field) is not None
    return check


def _solved_is(flag: bool) -> Callable[[Game], bool]:
    def check(game: Game) -> bool:
        return game.get("solved") is flag
    return check


def _failed_without_legacy(game: Game) -> bool:
    return game.get("solved") is False and game.get("points") is None


# --- rule scorers ----------------------------------------------------------

def _fixed(points: int) -> Callable[[Game], Number]:
    def score(game: Game) -> Number:
        return points
    return score


def _wordle(game: Game) -> Number:
    return wordle_points(game.get("attempts_used"), bool(game.get("solved")))


def _wordle_as_solved(game: Game) -> Number:
    return wordle_points(game.get("attempts_used"), True)


def _connections(game: Game) -> Number:
    return connections_points(game.get("mistakes_used"), bool(game.get("solved")))


def _connections_solved_only(game: Game) -> Number:
    return MAX_POINTS if game.get("solved") else 0


def _legacy(game: Game) -> Optional[Number]:
    # overwrites points, so a second normalization pass rescales a value <= 7 again
    return scaled_points_from_legacy(game.get("points"))


SCORING_RULES: Dict[str, List[Rule]] = {
    "wordle": [
        (_always, _wordle),
    ],
    "connections": [
        (_has("mistakes_used"), _connections),
        (_has("points"), _legacy),
        (_always, _connections_solved_only),
    ],
    "strands": [
        (_solved_is(True), _fixed(MAX_POINTS)),
        (_failed_without_legacy, _fixed(0)),
        (_has("points"), _legacy),
    ],
    "keyword": [
        (_solved_is(False), _fixed(0)),
        (_has("attempts_used"), _wordle_as_solved),
        (_has("points"), _legacy),
        (_solved_is(True), _fixed(MAX_POINTS)),
    ],
}


def score_game(game_key: str, game: Game) -> Optional[Number]:
    """Apply the first matching rule for ``game_key``; ``None`` if none applies."""
    for applies, score in SCORING_RULES.get(game_key, []):
        if applies(game):
            return score(game)
    return None


def strands_points(game: Optional[Game]) -> Optional[Number]:
    if not isinstance(game, Mapping):
        return None
    return score_game("strands", game)


def keyword_points(game: Optional[Game]) -> Optional[Number]:
    if not isinstance(game, Mapping):
        return None
    return score_game("keyword", game)


def normalize_game(game_key: str, game: Any) -> Optional[Dict[str, Any]]:
    """Return a copy of ``game`` with ``points`` set on the 0-10 scale.

    A missing (or non-object) record stays missing. Unknown game keys only get
    an existing numeric ``points`` clamped.
    """
    if not isinstance(game, Mapping):
        return None
    out = dict(game)
    if game_key not in SCORING_RULES:
        if game.get("points") is not None:
            out["points"] = clamp(game.get("points"), 0, MAX_POINTS)
        return out
    out["points"] = score_game(game_key, game)
    return out


__all__ = [
    "SCORING_RULES",
    "clamp",
    "connections_points",
    "keyword_points",
    "normalize_game",
    "scaled_points_from_legacy",
    "score_game",
    "strands_points",
    "tidy_number",
    "to_number",
    "wordle_points",
]
