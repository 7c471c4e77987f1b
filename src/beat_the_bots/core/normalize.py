"""Payload normalization: raw results JSON in, scored and ranked JSON out.

Both entry points are total. A payload that is not an object, or whose
``standings`` is not a list, is returned as-is. Input objects are never
mutated; every level that changes is copied.
"""
from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Mapping

from .aggregate import aggregate_summary_standing, aggregate_today_standing
from .ranking import rank_standings


logger = logging.getLogger(__name__)

StandingAggregator = Callable[[Mapping[str, Any]], Dict[str, Any]]


def _normalize(data: Any, aggregate: StandingAggregator) -> Any:
    if not isinstance(data, Mapping) or not isinstance(data.get("standings"), list):
        logger.debug("Payload has no standings list; passing through unchanged")
        return data

    standings = []
    for raw in data["standings"]:
        standing = dict(raw) if isinstance(raw, Mapping) else {}
        standing.update(aggregate(standing))
        standings.append(standing)

    out = dict(data)
    out["standings"] = rank_standings(standings)
    return out


def normalize_today_payload(data: Any) -> Any:
    """Score each model's four games, total and average them, and rerank."""
    return _normalize(data, aggregate_today_standing)


def normalize_aggregate_payload(data: Any) -> Any:
    """Recompute avg_points from pre-summed multi-day totals and rerank."""
    return _normalize(data, aggregate_summary_standing)


__all__ = ["normalize_aggregate_payload", "normalize_today_payload"]
