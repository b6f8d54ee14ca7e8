# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, Session, scoped_session, sessionmaker
from sqlalchemy.pool import StaticPool

from contactgrid.shared.config import load_config
from contactgrid.shared.logging import logger

_config = load_config()


class Base(DeclarativeBase):
    pass


def _is_sqlite(url: str) -> bool:
    return url.startswith("sqlite")


def _engine_kwargs(url: str) -> dict[str, Any]:
    kwargs: dict[str, Any] = {"echo": False, "future": True, "pool_pre_ping": True}
    if _is_sqlite(url):
        kwargs["connect_args"] = {
            "check_same_thread": False,
            "timeout": int(_config.database.pool_timeout),
        }
        if url in ("sqlite://", "sqlite:///:memory:"):
            kwargs["poolclass"] = StaticPool
            return kwargs
    kwargs.update(
        pool_size=_config.database.pool_size,
        max_overflow=_config.database.max_overflow,
        pool_timeout=_config.database.pool_timeout,
    )
    return kwargs


ENGINE: Engine = create_engine(_config.database.url, **_engine_kwargs(_config.database.url))


@event.listens_for(ENGINE, "connect")
def _set_sqlite_pragmas(dbapi_conn, _):
    """Apply safety PRAGMAs when using SQLite."""

    if not _is_sqlite(_config.database.url):
        return
    cur = dbapi_conn.cursor()
    try:
        cur.execute("PRAGMA foreign_keys=ON;")
        cur.execute("PRAGMA busy_timeout=30000;")
    finally:
        cur.close()


SessionLocal = scoped_session(
    sessionmaker(bind=ENGINE, autoflush=False, autocommit=False, expire_on_commit=False)
)


@contextmanager
def session_scope() -> Iterator[Session]:
    session = SessionLocal()
    logger.debug("db.session: opened scoped session")
    try:
        yield session
        session.commit()
        logger.debug("db.session: committed scoped session")
    except Exception:
        logger.warning("db.session: error, rolling back")
        session.rollback()
        raise
    finally:
        session.close()
        SessionLocal.remove()
        logger.debug("db.session: closed scoped session")


def init_db() -> None:
    Base.metadata.create_all(bind=ENGINE)
    logger.info("Database schema ensured")
