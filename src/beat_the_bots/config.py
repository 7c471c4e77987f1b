"""Runtime configuration for the beat-the-bots client."""

from __future__ import annotations

import os
from functools import lru_cache

from dotenv import load_dotenv
from pydantic import BaseModel


class Settings(BaseModel):
    BTB_API_BASE_URL: str = "http://localhost:8100"
    BTB_TIMEZONE: str = "America/New_York"
    BTB_FETCH_RETRIES: int = 2
    BTB_FETCH_TIMEOUT: float = 8.0
    BTB_RETRY_BACKOFF: float = 1.5
    LOG_LEVEL: str = "INFO"

    model_config = {"frozen": True}


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    # existing environment variables win over .env entries
    load_dotenv()
    return Settings(
        BTB_API_BASE_URL=os.getenv("BTB_API_BASE_URL", "http://localhost:8100"),
        BTB_TIMEZONE=os.getenv("BTB_TIMEZONE", "America/New_York"),
        BTB_FETCH_RETRIES=int(os.getenv("BTB_FETCH_RETRIES", "2")),
        BTB_FETCH_TIMEOUT=float(os.getenv("BTB_FETCH_TIMEOUT", "8.0")),
        BTB_RETRY_BACKOFF=float(os.getenv("BTB_RETRY_BACKOFF", "1.5")),
        LOG_LEVEL=os.getenv("LOG_LEVEL", "INFO"),
    )


__all__ = ["Settings", "get_settings"]
