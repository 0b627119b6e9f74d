"""Tests for the MySQL client with a mocked driver."""

from collections.abc import Generator
from unittest.mock import MagicMock, patch

import mysql.connector
import pytest
from mysql.connector.constants import FieldType

from orm.config import DatabaseConfig
from orm.database.implementations.mysql import MySQLClient
from orm.database.query import Query
from orm.exceptions import (
    DatabaseConnectionError,
    QueryExecutionError,
    ValueCoercionError,
)
from orm.models import Bind, Model, Where


def describe(name: str, type_code: int) -> tuple:
    return (name, type_code, None, None, None, None, True)


@pytest.fixture
def mysql_config() -> DatabaseConfig:
    """MySQL connection settings."""
    return DatabaseConfig(
        host="db.local",
        database="app",
        username="app_user",
        password="secret",
        type="mysql",
    )


@pytest.fixture
def cursor() -> MagicMock:
    """Mocked driver cursor."""
    mock_cursor = MagicMock()
    mock_cursor.fetchall.return_value = []
    mock_cursor.description = []
    mock_cursor.lastrowid = 0
    mock_cursor.rowcount = 0
    return mock_cursor


@pytest.fixture
def connect(cursor: MagicMock) -> Generator[MagicMock, None, None]:
    """Patch mysql.connector.connect to return a mocked connection."""
    with patch("mysql.connector.connect") as mock_connect:
        mock_connect.return_value.cursor.return_value = cursor
        yield mock_connect


@pytest.mark.asyncio
async def test_connect_parameters(mysql_config: DatabaseConfig, connect: MagicMock) -> None:
    """Test the driver receives the configured parameters."""
    async with MySQLClient(mysql_config) as client:
        assert client.is_connected

    connect.assert_called_once_with(
        host="db.local",
        port=3306,
        user="app_user",
        password="secret",
        database="app",
        autocommit=True,
    )
    connect.return_value.close.assert_called_once()
    assert not client.is_connected


@pytest.mark.asyncio
async def test_connect_custom_port(mysql_config: DatabaseConfig, connect: MagicMock) -> None:
    """Test a configured port is used."""
    mysql_config.port = 3307
    async with MySQLClient(mysql_config):
        pass

    assert connect.call_args.kwargs["port"] == 3307


@pytest.mark.asyncio
async def test_connect_failure(mysql_config: DatabaseConfig) -> None:
    """Test driver connection errors are wrapped."""
    with patch(
        "mysql.connector.connect", side_effect=mysql.connector.Error("refused")
    ):
        with pytest.raises(DatabaseConnectionError):
            await MySQLClient(mysql_config).connect()


@pytest.mark.asyncio
async def test_select_coerces_values(
    mysql_config: DatabaseConfig,
    connect: MagicMock,
    cursor: MagicMock,
    user_model: Model,
) -> None:
    """Test SELECT rows are normalized by column type."""
    cursor.description = [
        describe("id", FieldType.LONGLONG),
        describe("name", FieldType.VAR_STRING),
        describe("age", FieldType.LONG),
        describe("active", FieldType.TINY),
    ]
    cursor.fetchall.return_value = [(1, bytearray(b"kim"), b"30", b"1")]

    async with MySQLClient(mysql_config) as client:
        result = await client.execute(
            Query()
            .select(["id", "name", "age", "active"])
            .from_(user_model)
            .where(Where("id", "=", Bind(value=1)))
        )

    connect.return_value.cursor.assert_called_once_with(prepared=True)
    cursor.execute.assert_called_once_with(
        "SELECT id, name, age, active FROM users WHERE id = ?", (1,)
    )
    cursor.close.assert_called_once()
    assert [(f.name, f.type, f.value) for f in result.items[0].get_columns()] == [
        ("id", "INTEGER", 1),
        ("name", "VARCHAR", "kim"),
        ("age", "INTEGER", 30),
        ("active", "BOOL", True),
    ]


@pytest.mark.asyncio
async def test_statement_without_params_uses_plain_cursor(
    mysql_config: DatabaseConfig, connect: MagicMock, cursor: MagicMock
) -> None:
    """Test statements without bindings skip the prepared cursor."""
    async with MySQLClient(mysql_config) as client:
        await client.execute(Query().begin_transaction())

    connect.return_value.cursor.assert_called_once_with()
    cursor.execute.assert_called_once_with("START TRANSACTION;", ())


@pytest.mark.asyncio
async def test_insert_reports_last_id(
    mysql_config: DatabaseConfig,
    connect: MagicMock,
    cursor: MagicMock,
    user_model: Model,
) -> None:
    """Test INSERT returns the driver's last row id."""
    cursor.lastrowid = 7
    cursor.rowcount = 1
    user_model.set_field("name", "kim")
    user_model.set_field("age", 30)

    async with MySQLClient(mysql_config) as client:
        result = await client.execute(Query().insert(user_model))

    cursor.execute.assert_called_once_with(
        "INSERT INTO users (name, age) VALUES (?, ?)", ("kim", 30)
    )
    assert result.last_insert_id == 7
    assert result.items == []


@pytest.mark.asyncio
async def test_driver_error(
    mysql_config: DatabaseConfig, connect: MagicMock, cursor: MagicMock
) -> None:
    """Test driver errors are raised with the result attached."""
    cursor.execute.side_effect = mysql.connector.Error("boom")

    async with MySQLClient(mysql_config) as client:
        with pytest.raises(QueryExecutionError) as exc_info:
            await client.execute(Query().drop(Model(table_name="users")))

    assert exc_info.value.result.error is exc_info.value
    cursor.close.assert_called_once()


@pytest.mark.asyncio
async def test_coercion_error_discards_rows(
    mysql_config: DatabaseConfig, connect: MagicMock, cursor: MagicMock
) -> None:
    """Test an invalid integer fails the whole call."""
    cursor.description = [describe("age", FieldType.LONG)]
    cursor.fetchall.return_value = [(b"30",), (b"abc",)]

    async with MySQLClient(mysql_config) as client:
        with pytest.raises(ValueCoercionError):
            await client.execute(Query().select(["age"]).from_("users"))


@pytest.mark.asyncio
async def test_execute_without_connection(mysql_config: DatabaseConfig) -> None:
    """Test executing before connecting fails."""
    with pytest.raises(DatabaseConnectionError):
        await MySQLClient(mysql_config).execute(Query().select().from_("users"))
