"""Database initialization utilities."""

import asyncio
import logging
import sys

from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

from pos.infrastructure.persistence.sqlalchemy.models import Base
from pos_config.settings import get_settings

logger = logging.getLogger(__name__)


def _get_engine() -> AsyncEngine:
    """Get the database engine for initialization."""
    settings = get_settings()
    return create_async_engine(
        settings.database_url,
        echo=False,
        pool_pre_ping=True,
    )


async def create_tables(engine: AsyncEngine | None = None) -> None:
    """
    Create all database tables (idempotent).

    Uses SQLAlchemy's create_all() which only creates missing tables.
    Existing tables and their data are never modified or deleted.
    """
    owned = engine is None
    engine = engine or _get_engine()
    logger.info("Ensuring all database tables exist...")

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    if owned:
        await engine.dispose()
    logger.info("Database schema is up to date")


async def drop_tables(engine: AsyncEngine | None = None) -> None:
    """
    Drop all database tables (USE WITH CAUTION!).

    This is primarily for testing and development reset scenarios.
    """
    owned = engine is None
    engine = engine or _get_engine()
    logger.warning("Dropping all database tables...")

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    if owned:
        await engine.dispose()
    logger.info("Database tables dropped")


async def _reset_database(force: bool = False):
    """Drop all tables and recreate them."""
    database_url = get_settings().database_url
    db_display = database_url.split("@")[-1] if "@" in database_url else database_url
    print(f"Database: {db_display}")

    if not force:
        print("WARNING: This will DELETE ALL DATA in the database!")
        response = input("Type 'yes' to confirm: ")
        if response.lower() != "yes":
            print("Aborted.")
            sys.exit(1)

    await drop_tables()
    await create_tables()
    logger.info("Database recreated successfully!")


def db_init():
    """Initialize database (create tables)."""
    logging.basicConfig(level=logging.INFO)
    asyncio.run(create_tables())


def db_reset():
    """Drop and recreate all database tables."""
    logging.basicConfig(level=logging.INFO)
    force = "--force" in sys.argv or "-f" in sys.argv
    asyncio.run(_reset_database(force=force))
