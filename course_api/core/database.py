"""Database configuration and session helpers."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Iterator

from sqlalchemy.engine import Engine, make_url
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

from .config import DATABASE_URL

logger = logging.getLogger(__name__)


def build_engine(url: str) -> Engine:
    """Create an engine for ``url``; SQLite files get their directory created."""

    parsed = make_url(url)
    kwargs: Dict[str, Any] = {}
    if parsed.get_backend_name() == "sqlite":
        kwargs["connect_args"] = {"check_same_thread": False}
        database = parsed.database
        if not database or database == ":memory:":
            # One shared connection so every session sees the same in-memory db.
            kwargs["poolclass"] = StaticPool
        else:
            Path(database).expanduser().parent.mkdir(parents=True, exist_ok=True)
    return create_engine(url, **kwargs)


engine = build_engine(DATABASE_URL)


def init_db(reset: bool = False) -> None:
    """Create the ``courses`` table, optionally dropping it first."""

    if reset:
        logger.warning("DB_RESET enabled, dropping all tables")
        SQLModel.metadata.drop_all(engine)
    SQLModel.metadata.create_all(engine)


def get_session() -> Iterator[Session]:
    """FastAPI dependency that yields a database session."""

    with Session(engine) as session:
        yield session


__all__ = ["build_engine", "engine", "get_session", "init_db"]
