"""Shared pytest fixtures for all test domains."""

from tests.shared.fixtures.database import (
    async_engine,
    db_session,
    pg_session_maker,
    postgres_container,
    sqlite_session_maker,
)
from tests.shared.fixtures.factories import TestCatalogFactory, TestUserFactory

__all__ = [
    "async_engine",
    "db_session",
    "pg_session_maker",
    "postgres_container",
    "sqlite_session_maker",
    "TestCatalogFactory",
    "TestUserFactory",
]
