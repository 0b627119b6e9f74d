"""MySQL database client."""

from orm.config import DatabaseConfig
from orm.database.interfaces import DatabaseClient

from .dialect import MySQLDialect
from .mysql_connection import MySQLConnection


class MySQLClient(DatabaseClient):
    """Executes queries against a MySQL server."""

    def __init__(self, config: DatabaseConfig) -> None:
        super().__init__(config, MySQLConnection(config), MySQLDialect(config))
