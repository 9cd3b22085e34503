"""SQLAlchemy engine and sessions behind the House Major API.

One engine is built lazily per process from ``DB_URL`` (default: a SQLite
file ``house_major.db`` at the repository root). All tables are created the
first time the engine is built. ``dispose_engine`` forgets it so the next
access rebuilds it from the current environment, which is how tests swap
in a temporary database.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy import create_engine, text
from sqlalchemy.engine import URL, Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from house_major.config import get_project_root

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    """Declarative base shared by every House Major table."""


class _Database:
    """The process-wide engine and the session factory bound to it."""

    def __init__(self) -> None:
        self.engine: Engine | None = None
        self.sessions: sessionmaker[Session] | None = None

    def connect(self) -> sessionmaker[Session]:
        if self.sessions is None:
            url = get_database_url()
            engine = create_engine(url, future=True)
            try:
                _create_tables(engine)
            except SQLAlchemyError:
                engine.dispose()
                raise
            self.engine = engine
            self.sessions = sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)
            logger.debug("Database ready at %s", engine.url.render_as_string(hide_password=True))
        return self.sessions

    def reset(self) -> None:
        if self.engine is not None:
            self.engine.dispose()
        self.engine = None
        self.sessions = None


_database = _Database()


def get_database_url() -> str:
    """``DB_URL`` when set, otherwise the SQLite file at the repository root."""
    env_url = os.getenv("DB_URL")
    if env_url:
        return env_url
    db_file = get_project_root() / "house_major.db"
    return URL.create("sqlite", database=str(db_file)).render_as_string(hide_password=False)


def _create_tables(engine: Engine) -> None:
    # Importing the models package registers every table on Base.metadata.
    import house_major.data.models  # noqa: F401

    Base.metadata.create_all(bind=engine)


def init_db() -> None:
    """Build the engine and create tables now instead of on first query."""
    _database.connect()


def dispose_engine() -> None:
    """Close pooled connections; the next session reads ``DB_URL`` afresh."""
    _database.reset()


def ping() -> bool:
    """True when the database answers a trivial query."""
    try:
        with get_session() as session:
            session.execute(text("SELECT 1"))
    except SQLAlchemyError:
        logger.exception("Database ping failed")
        return False
    return True


@contextmanager
def get_session() -> Iterator[Session]:
    """Session that commits when the block exits cleanly, else rolls back."""
    session = _database.connect()()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()
