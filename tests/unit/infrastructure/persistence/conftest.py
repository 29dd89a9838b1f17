"""
Pytest fixtures for infrastructure persistence unit tests.

Each test gets its own SQLite database file (aiosqlite), so these tests run
without Docker. PostgreSQL coverage lives in tests/integration.
"""

from unittest.mock import AsyncMock

import pytest

from pos.domain.storage import BlobStorage
from tests.shared.fixtures.database import sqlite_session_maker

__all__ = ["sqlite_session_maker"]


@pytest.fixture
def blob_storage():
    return AsyncMock(spec=BlobStorage)
