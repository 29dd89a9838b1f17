"""
Pytest configuration for integration tests.

Integration tests use Testcontainers for an ephemeral PostgreSQL instance.
Import the shared fixtures to make them available.
"""

from tests.shared.fixtures.database import (
    async_engine,
    db_session,
    pg_session_maker,
    postgres_container,
)

__all__ = [
    "async_engine",
    "db_session",
    "pg_session_maker",
    "postgres_container",
]
