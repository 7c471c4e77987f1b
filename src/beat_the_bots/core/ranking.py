from typing import Any, Dict, List, Mapping, Sequence, Tuple

from .models import RankRow
from .scoring import to_number


def standing_key(standing: Mapping[str, Any], index: int) -> str:
    """Canonical identity of a standing: model_id, else model_name, else list position."""
    model_id = standing.get("model_id")
    if model_id is not None:
        return f"id:{model_id}"
    model_name = standing.get("model_name")
    if model_name is not None:
        return f"name:{model_name}"
    return f"index:{index}"


def _resolve_keys(standings: Sequence[Mapping[str, Any]]) -> List[str]:
    # Repeated identities would otherwise share one rank
    keys: List[str] = []
    seen = set()
    for i, s in enumerate(standings):
        key = standing_key(s, i)
        while key in seen:
            key = f"{key}#{i}"
        seen.add(key)
        keys.append(key)
    return keys


def _rank_order(row: RankRow) -> Tuple[float, float, int]:
    return (-row.avg_points, -row.total_points, row.index)


def _output_order(standing: Mapping[str, Any]) -> Tuple[int, float]:
    rank = to_number(standing.get("rank"))
    if rank is None:
        return (1, 0.0)
    return (0, rank)


def rank_standings(standings: Sequence[Mapping[str, Any]]) -> List[Dict[str, Any]]:
    """
    Assign dense 1..N ranks and return copies of the standings ordered by rank.

    Order: avg_points desc, then total_points desc, then incoming list position.
    Each standing must already carry its recomputed avg_points/total_points.
    """
    keys = _resolve_keys(standings)
    rows = [
        RankRow(
            key=key,
            index=i,
            avg_points=to_number(s.get("avg_points")) or 0.0,
            total_points=to_number(s.get("total_points")) or 0.0,
        )
        for i, (s, key) in enumerate(zip(standings, keys))
    ]
    rows.sort(key=_rank_order)
    rank_by_key: Dict[str, int] = {row.key: rank for rank, row in enumerate(rows, start=1)}

    out: List[Dict[str, Any]] = []
    for s, key in zip(standings, keys):
        item = dict(s)
        item["rank"] = rank_by_key.get(key, s.get("rank"))
        out.append(item)
    out.sort(key=_output_order)
    return out


__all__ = ["rank_standings", "standing_key"]
