"""Shared test fixtures for SQLite database tests."""

from collections.abc import AsyncGenerator
from pathlib import Path

import pytest
import pytest_asyncio

from orm.config import DatabaseConfig
from orm.database.implementations.sqlite import SQLiteClient, SQLiteDialect


@pytest.fixture
def temp_db_path(tmp_path: Path) -> Path:
    """Create an empty database file using pytest's tmp_path."""
    db_path = tmp_path / "test.db"
    db_path.touch()
    return db_path


@pytest.fixture
def sqlite_config(temp_db_path: Path) -> DatabaseConfig:
    """Connection settings for the temporary database."""
    return DatabaseConfig(host=str(temp_db_path), type="sqlite")


@pytest.fixture
def dialect() -> SQLiteDialect:
    """Create SQLite dialect instance."""
    return SQLiteDialect()


@pytest_asyncio.fixture
async def client(sqlite_config: DatabaseConfig) -> AsyncGenerator[SQLiteClient, None]:
    """Create a connected client on the temporary database."""
    sqlite_client = SQLiteClient(sqlite_config)
    async with sqlite_client:
        yield sqlite_client
