"""Logging setup for CLI entrypoints."""

from __future__ import annotations

import logging

from .config import get_settings

NOISY_LIBRARY_LOGGERS = ("urllib3",)


def _resolve_level(name: str) -> int:
    return getattr(logging, name.upper(), logging.INFO)


def configure_logging(level: str | None = None) -> logging.Logger:
    logger = logging.getLogger()
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s [%(name)s] %(message)s"))
        logger.addHandler(handler)
    logger.setLevel(_resolve_level(level or get_settings().LOG_LEVEL))
    for logger_name in NOISY_LIBRARY_LOGGERS:
        logging.getLogger(logger_name).setLevel(logging.WARNING)
    return logger


__all__ = ["configure_logging"]
