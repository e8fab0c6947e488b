"""Async engine (connection pool) construction."""

from __future__ import annotations

import logging
from typing import Any

from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

from pantry_config.settings import Settings, get_settings

logger = logging.getLogger(__name__)


def create_engine(
    settings: Settings | None = None,
    database_url: str | None = None,
) -> AsyncEngine:
    """Create the shared async engine the repositories borrow connections from.

    ``database_url`` overrides the URL from settings. Pool sizing is only
    applied to server databases; SQLite keeps SQLAlchemy's default pool.
    """
    settings = settings or get_settings()
    url = database_url or settings.database_url

    options: dict[str, Any] = {
        "echo": settings.db_echo,
        "pool_pre_ping": settings.db_pool_pre_ping,
    }
    if not url.startswith("sqlite"):
        options.update(
            pool_size=settings.db_pool_size,
            max_overflow=settings.db_max_overflow,
            pool_timeout=settings.db_pool_timeout,
        )

    engine = create_async_engine(url, **options)
    if url.startswith("sqlite"):
        enable_sqlite_foreign_keys(engine)

    logger.debug("Created database engine for %s", engine.url.render_as_string())
    return engine


def enable_sqlite_foreign_keys(engine: AsyncEngine) -> None:
    """Turn on foreign key enforcement for every new SQLite connection."""

    @event.listens_for(engine.sync_engine, "connect")
    def _set_sqlite_pragma(dbapi_connection, _connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()
