"""MySQL database connection implementation."""

from typing import Any

import mysql.connector
from mysql.connector.constants import FieldType

from orm.config import DatabaseConfig
from orm.database.interfaces import CommandResult, DatabaseConnection, QueryRows
from orm.exceptions import DatabaseConnectionError, QueryExecutionError
from orm.log import get_logger
from orm.types import DatabaseParamType

logger = get_logger(__name__)

DEFAULT_PORT = 3306


class MySQLConnection(DatabaseConnection):
    """MySQL database connection implementation.

    Statements with parameters run on a prepared cursor, which takes the
    ``?`` placeholders the builders emit. Autocommit is on, so transactions
    are controlled by the START TRANSACTION, COMMIT and ROLLBACK statements
    sent to it.
    """

    def __init__(self, config: DatabaseConfig) -> None:
        """Initialize MySQL connection.

        Args:
            config: Host, port, credentials and database name
        """
        super().__init__(config)
        self.port = config.port or DEFAULT_PORT

    def _connection_params(self) -> dict[str, Any]:
        return {
            "host": self.config.host,
            "port": self.port,
            "user": self.config.username,
            "password": self.config.password,
            "database": self.config.database,
            "autocommit": True,
        }

    async def connect(self) -> None:
        """Establish MySQL database connection.

        Raises:
            DatabaseConnectionError: If the server cannot be reached or
                rejects the credentials
        """
        target = f"{self.config.host}:{self.port}/{self.config.database}"
        try:
            self._connection = mysql.connector.connect(**self._connection_params())
            logger.info(f"Connected to MySQL: {target}")
        except mysql.connector.Error as e:
            logger.error(f"Failed to connect to MySQL {target}: {e}")
            raise DatabaseConnectionError(f"Failed to connect to MySQL: {e}") from e

    async def disconnect(self) -> None:
        """Close MySQL database connection."""
        if self._connection:
            self._connection.close()
            self._connection = None
            logger.info("Disconnected from MySQL")

    async def run_query(
        self, query: str, params: DatabaseParamType = None
    ) -> QueryRows:
        """Execute a SELECT and fetch every row.

        Args:
            query: SQL query
            params: Query parameters

        Returns:
            Column names, driver column type names and rows
        """
        cursor = self._cursor(params)
        try:
            cursor.execute(query, tuple(params or ()))
            rows = cursor.fetchall()
            description = cursor.description or []
        except mysql.connector.Error as e:
            logger.error(f"Query execution failed: {e}")
            raise QueryExecutionError(f"Query execution failed: {e}") from e
        finally:
            cursor.close()

        return QueryRows(
            columns=[column[0] for column in description],
            column_types=[FieldType.get_info(column[1]) for column in description],
            rows=[tuple(row) for row in rows],
        )

    async def run_command(
        self, query: str, params: DatabaseParamType = None
    ) -> CommandResult:
        """Execute a statement that returns no rows.

        Args:
            query: SQL statement
            params: Statement parameters

        Returns:
            Last inserted id and affected row count
        """
        cursor = self._cursor(params)
        try:
            cursor.execute(query, tuple(params or ()))
            return CommandResult(
                last_insert_id=cursor.lastrowid or 0,
                row_count=max(cursor.rowcount, 0),
            )
        except mysql.connector.Error as e:
            logger.error(f"Command execution failed: {e}")
            raise QueryExecutionError(f"Command execution failed: {e}") from e
        finally:
            cursor.close()

    def _cursor(self, params: DatabaseParamType) -> Any:
        if not self._connection:
            raise DatabaseConnectionError("Database not connected")
        if params:
            return self._connection.cursor(prepared=True)
        return self._connection.cursor()
