"""Core configuration and infrastructure helpers."""

from .config import (
    ALLOWED_CORS_ORIGINS,
    APP_ENV,
    DATABASE_URL,
    DB_RESET,
    DOCS_ENABLED,
    HOST,
    LOG_LEVEL,
    PORT,
)
from .database import build_engine, engine, get_session, init_db
from .logging import configure_logging
from .time import as_utc, isoformat_utc, utcnow

__all__ = [
    "ALLOWED_CORS_ORIGINS",
    "APP_ENV",
    "DATABASE_URL",
    "DB_RESET",
    "DOCS_ENABLED",
    "HOST",
    "LOG_LEVEL",
    "PORT",
    "as_utc",
    "build_engine",
    "configure_logging",
    "engine",
    "get_session",
    "init_db",
    "isoformat_utc",
    "utcnow",
]
