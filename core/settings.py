from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from typing import Optional
import os


@dataclass(frozen=True)
class AppSettings:
    title: str
    log_level: str
    seed_file: Optional[str]
    port: int


@lru_cache
def get_settings() -> AppSettings:
    title = os.getenv("TODO_API_TITLE", "Todo API")
    log_level = os.getenv("TODO_LOG_LEVEL", "INFO").upper()
    seed_file = os.getenv("TODO_SEED_FILE") or None
    port = int(os.getenv("PORT", "8080"))

    return AppSettings(
        title=title,
        log_level=log_level,
        seed_file=seed_file,
        port=port,
    )
