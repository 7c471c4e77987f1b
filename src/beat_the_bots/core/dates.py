"""Calendar-date helpers for picking which day's results to load.

"Yesterday" depends on a timezone: results are labelled by the day in the
configured zone, so near midnight UTC the two disagree. These helpers resolve
the date in the target zone before any payload is requested.
"""
from __future__ import annotations

from datetime import date, datetime, timedelta, timezone
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError


def _zone(name: str) -> ZoneInfo:
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as exc:
        raise ValueError(f"Unknown timezone: {name!r}") from exc


def iso_date_in_timezone(instant: datetime, tz_name: str) -> str:
    """Return the YYYY-MM-DD calendar date of ``instant`` in ``tz_name``.

    Naive datetimes are taken to be UTC.
    """
    if instant.tzinfo is None:
        instant = instant.replace(tzinfo=timezone.utc)
    return instant.astimezone(_zone(tz_name)).date().isoformat()


def add_days_iso(iso: str, days: int) -> str:
    try:
        day = date.fromisoformat(str(iso))
    except ValueError as exc:
        raise ValueError(f"Not an ISO date: {iso!r}") from exc
    return (day + timedelta(days=int(days))).isoformat()


def yesterday_iso_in_timezone(now: Optional[datetime], tz_name: str) -> str:
    today = iso_date_in_timezone(now or datetime.now(timezone.utc), tz_name)
    return add_days_iso(today, -1)


__all__ = ["add_days_iso", "iso_date_in_timezone", "yesterday_iso_in_timezone"]
