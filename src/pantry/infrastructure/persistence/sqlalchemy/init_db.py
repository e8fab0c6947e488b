"""Database initialization utilities."""

import asyncio
import logging
import sys

from sqlalchemy.ext.asyncio import AsyncEngine

# Import models to register with Base.metadata
import pantry.infrastructure.persistence.sqlalchemy.models  # noqa: F401
from pantry.infrastructure.persistence.sqlalchemy.engine import create_engine
from pantry.infrastructure.persistence.sqlalchemy.models.base import Base
from pantry_config import configure_logging, get_settings

logger = logging.getLogger(__name__)


async def create_tables(engine: AsyncEngine) -> None:
    """
    Create all database tables (idempotent).

    Uses SQLAlchemy's create_all() which only creates missing tables.
    Existing tables and their data are never modified or deleted.
    """
    logger.info("Ensuring all database tables exist...")

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    logger.info("Database schema is up to date (missing tables created if needed)")


async def drop_tables(engine: AsyncEngine) -> None:
    """
    Drop all database tables (USE WITH CAUTION!).

    This is primarily for testing and development reset scenarios.
    """
    logger.warning("Dropping all database tables...")

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    logger.info("Database tables dropped successfully")


async def _init_database() -> None:
    engine = create_engine()
    logger.info("Initializing database at %s", engine.url.render_as_string())
    try:
        await create_tables(engine)
    finally:
        await engine.dispose()
    logger.info("Database initialized successfully!")


async def _drop_database(force: bool = False) -> None:
    engine = create_engine()
    try:
        print(f"Database: {engine.url.render_as_string()}")
        print()

        if not force:
            print("WARNING: This will DELETE ALL DATA in the database!")
            print()
            response = input("Type 'yes' to confirm: ")
            if response.lower() != "yes":
                print("Aborted.")
                sys.exit(1)
            print()

        await drop_tables(engine)
    finally:
        await engine.dispose()


def db_init() -> None:
    """Initialize database (create tables)."""
    configure_logging(get_settings().log_level)
    asyncio.run(_init_database())


def db_drop() -> None:
    """Drop all database tables."""
    configure_logging(get_settings().log_level)
    force = "--force" in sys.argv or "-f" in sys.argv
    asyncio.run(_drop_database(force=force))
