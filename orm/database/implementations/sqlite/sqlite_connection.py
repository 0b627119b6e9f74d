"""SQLite database connection implementation."""

import sqlite3
from pathlib import Path

from orm.config import DatabaseConfig
from orm.constants import INTEGER_COLUMN_TYPE, VARCHAR_COLUMN_TYPE
from orm.database.interfaces import CommandResult, DatabaseConnection, QueryRows
from orm.exceptions import DatabaseConnectionError, QueryExecutionError
from orm.log import get_logger
from orm.types import DatabaseParamType, RawRowType

logger = get_logger(__name__)

MEMORY_DATABASE = ":memory:"
SCRIPT_SAVEPOINT = "orm_script"


class SQLiteConnection(DatabaseConnection):
    """SQLite database connection implementation.

    ``config.host`` is the path of an existing database file, or
    ``:memory:``. The connection runs in autocommit mode with no implicit
    transaction handling, so transactions are controlled by the BEGIN,
    COMMIT and ROLLBACK statements sent to it.
    """

    def __init__(self, config: DatabaseConfig) -> None:
        """Initialize SQLite connection.

        Args:
            config: Connection settings; ``host`` is the database path
        """
        super().__init__(config)
        self.db_path = config.host
        self._connection: sqlite3.Connection | None = None

    async def connect(self) -> None:
        """Establish SQLite database connection.

        Raises:
            DatabaseConnectionError: If the database file does not exist or
                cannot be opened
        """
        if self.db_path != MEMORY_DATABASE and not Path(self.db_path).is_file():
            logger.error(f"SQLite database file not found: {self.db_path}")
            raise DatabaseConnectionError(
                f"SQLite database file not found: {self.db_path}"
            )

        try:
            self._connection = sqlite3.connect(
                self.db_path,
                check_same_thread=False,
                timeout=60.0,
                autocommit=True,
            )
            self._configure_connection()
            logger.info(f"Connected to SQLite: {self.db_path}")
        except sqlite3.Error as e:
            logger.error(f"Failed to connect to SQLite database: {e}")
            raise DatabaseConnectionError(
                f"Failed to connect to SQLite database: {e}"
            ) from e

    async def disconnect(self) -> None:
        """Close SQLite database connection."""
        if self._connection:
            self._connection.close()
            self._connection = None
            logger.info("Disconnected from SQLite")

    async def run_query(
        self, query: str, params: DatabaseParamType = None
    ) -> QueryRows:
        """Execute a SELECT and fetch every row.

        SQLite reports no column types, so each column's type is taken from
        the first non-null value in it.

        Args:
            query: SQL query
            params: Query parameters

        Returns:
            Column names, inferred column types and rows
        """
        connection = self._require_connection()
        try:
            cursor = connection.execute(query, tuple(params or ()))
            rows: list[RawRowType] = cursor.fetchall()
        except sqlite3.Error as e:
            logger.error(f"Query execution failed: {e}")
            raise QueryExecutionError(f"Query execution failed: {e}") from e

        columns = [description[0] for description in cursor.description or ()]
        return QueryRows(
            columns=columns,
            column_types=[_infer_column_type(rows, i) for i in range(len(columns))],
            rows=rows,
        )

    async def run_command(
        self, query: str, params: DatabaseParamType = None
    ) -> CommandResult:
        """Execute a statement, or a script of statements without parameters.

        Args:
            query: SQL statement(s)
            params: Statement parameters

        Returns:
            Last inserted row id and affected row count
        """
        connection = self._require_connection()
        if not params and _is_script(query):
            return self._run_script(connection, query)

        try:
            cursor = connection.execute(query, tuple(params or ()))
        except sqlite3.Error as e:
            logger.error(f"Command execution failed: {e}")
            raise QueryExecutionError(f"Command execution failed: {e}") from e

        return CommandResult(
            last_insert_id=cursor.lastrowid or 0,
            row_count=max(cursor.rowcount, 0),
        )

    def _run_script(self, connection: sqlite3.Connection, script: str) -> CommandResult:
        """Run several statements as one unit inside a savepoint.

        A failing statement rolls back the ones before it. While the script
        runs, foreign key enforcement is off and ALTER TABLE uses its legacy
        rename, so swapping a rebuilt table in does not rewrite the
        references other tables hold to it. Foreign keys are checked before
        the savepoint is released.

        Foreign key enforcement cannot be switched inside a transaction, so
        inside a caller's BEGIN it stays on.
        """
        foreign_keys = connection.execute("PRAGMA foreign_keys").fetchone()[0]
        legacy_alter = connection.execute("PRAGMA legacy_alter_table").fetchone()[0]
        connection.execute("PRAGMA foreign_keys = OFF")
        connection.execute("PRAGMA legacy_alter_table = ON")
        try:
            try:
                cursor = connection.executescript(
                    f"SAVEPOINT {SCRIPT_SAVEPOINT};\n{script}"
                )
                violations = connection.execute("PRAGMA foreign_key_check").fetchall()
            except sqlite3.Error as e:
                self._rollback_script(connection)
                logger.error(f"Script execution failed: {e}")
                raise QueryExecutionError(f"Command execution failed: {e}") from e

            if violations:
                self._rollback_script(connection)
                table = violations[0][0]
                logger.error(f"Foreign key check failed for table {table}")
                raise QueryExecutionError(
                    f"Command execution failed: foreign key check failed for {table}"
                )

            connection.execute(f"RELEASE {SCRIPT_SAVEPOINT}")
        finally:
            connection.execute(f"PRAGMA legacy_alter_table = {legacy_alter}")
            connection.execute(f"PRAGMA foreign_keys = {foreign_keys}")

        return CommandResult(
            last_insert_id=cursor.lastrowid or 0,
            row_count=max(cursor.rowcount, 0),
        )

    def _rollback_script(self, connection: sqlite3.Connection) -> None:
        if not connection.in_transaction:
            return
        try:
            connection.execute(f"ROLLBACK TO {SCRIPT_SAVEPOINT}")
            connection.execute(f"RELEASE {SCRIPT_SAVEPOINT}")
        except sqlite3.Error as e:
            logger.warning(f"Failed to roll back script savepoint: {e}")

    def _require_connection(self) -> sqlite3.Connection:
        if not self._connection:
            raise DatabaseConnectionError("Database not connected")
        return self._connection

    def _configure_connection(self) -> None:
        """Configure SQLite connection settings."""
        if not self._connection:
            return

        self._connection.execute("PRAGMA foreign_keys = ON")
        self._connection.execute("PRAGMA busy_timeout = 90000")


def _is_script(query: str) -> bool:
    return ";" in query.strip().rstrip(";")


def _infer_column_type(rows: list[RawRowType], index: int) -> str:
    for row in rows:
        value = row[index]
        if value is None:
            continue
        if isinstance(value, int):
            return INTEGER_COLUMN_TYPE
        return VARCHAR_COLUMN_TYPE
    return VARCHAR_COLUMN_TYPE
