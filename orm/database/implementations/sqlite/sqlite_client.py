"""SQLite database client."""

from orm.config import DatabaseConfig
from orm.database.interfaces import DatabaseClient

from .dialect import SQLiteDialect
from .sqlite_connection import SQLiteConnection


class SQLiteClient(DatabaseClient):
    """Executes queries against a SQLite database file."""

    def __init__(self, config: DatabaseConfig) -> None:
        super().__init__(config, SQLiteConnection(config), SQLiteDialect())
