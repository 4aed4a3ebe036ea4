"""Core configuration and infrastructure helpers."""

from .config import (
    ALLOWED_CORS_ORIGINS,
    APP_VERSION,
    DATABASE_URL,
    DB_RESET,
    LEADERBOARD_SIZE,
    LOG_LEVEL,
)
from .database import engine, get_session
from .log import configure_logging
from .time import isoformat_utc, utcnow

__all__ = [
    "ALLOWED_CORS_ORIGINS",
    "APP_VERSION",
    "DATABASE_URL",
    "DB_RESET",
    "LEADERBOARD_SIZE",
    "LOG_LEVEL",
    "configure_logging",
    "engine",
    "get_session",
    "isoformat_utc",
    "utcnow",
]
