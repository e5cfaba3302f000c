from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
import logging
import os

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Settings:
    host: str
    port: int
    log_level: str
    workers: int


def _parse_workers(raw_value: str) -> int:
    try:
        workers = int(raw_value)
    except ValueError:
        logger.warning("Invalid WEB_CONCURRENCY value '%s'; defaulting to 1", raw_value)
        workers = 1
    return max(1, workers)


@lru_cache
def get_settings() -> Settings:
    host = os.getenv("TODO_HOST", "0.0.0.0")
    port = int(os.getenv("PORT", "8080"))
    log_level = os.getenv("LOG_LEVEL", "INFO").upper()
    workers = _parse_workers(os.getenv("WEB_CONCURRENCY", "1"))

    return Settings(
        host=host,
        port=port,
        log_level=log_level,
        workers=workers,
    )
