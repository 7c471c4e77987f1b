from __future__ import annotations

import json
import logging
import pathlib
import time
from typing import Any, Callable, Optional

import requests

from ..config import get_settings


logger = logging.getLogger(__name__)

TODAY_STANDINGS_PATH = "/api/standings/today"
RESULTS_PATH_TEMPLATE = "/api/results/{date}"


class FetchError(RuntimeError):
    """Raised once every attempt at an API path has failed."""


def api_fetch(
    path: str,
    *,
    retries: Optional[int] = None,
    timeout: Optional[float] = None,
    session: Optional[requests.Session] = None,
    sleep: Callable[[float], None] = time.sleep,
) -> Any:
    """GET a results API path and return the parsed JSON.

    Makes up to ``retries + 1`` attempts with a linear backoff between them
    (``BTB_RETRY_BACKOFF * attempt`` seconds). Non-2xx responses count as failures.
    """
    settings = get_settings()
    retries = settings.BTB_FETCH_RETRIES if retries is None else retries
    timeout = settings.BTB_FETCH_TIMEOUT if timeout is None else timeout
    url = settings.BTB_API_BASE_URL.rstrip("/") + path
    get = session.get if session is not None else requests.get

    last_error: Optional[Exception] = None
    for attempt in range(retries + 1):
        if attempt > 0:
            sleep(settings.BTB_RETRY_BACKOFF * attempt)
        try:
            response = get(url, timeout=timeout)
            response.raise_for_status()
            return response.json()
        except (requests.RequestException, ValueError) as exc:
            last_error = exc
            logger.warning("API %s attempt %d/%d failed: %s", path, attempt + 1, retries + 1, exc)
    raise FetchError(f"API {path} failed after {retries + 1} attempts") from last_error


def fetch_today_standings(**kwargs: Any) -> Any:
    return api_fetch(TODAY_STANDINGS_PATH, **kwargs)


def fetch_results_for_date(iso_date: str, **kwargs: Any) -> Any:
    return api_fetch(RESULTS_PATH_TEMPLATE.format(date=iso_date), **kwargs)


def load_payload_file(path: pathlib.Path) -> Any:
    """Read a saved results payload (offline mode)."""
    return json.loads(path.read_text(encoding="utf-8"))


__all__ = [
    "FetchError",
    "api_fetch",
    "fetch_results_for_date",
    "fetch_today_standings",
    "load_payload_file",
]
