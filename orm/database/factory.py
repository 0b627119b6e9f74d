"""Database client factory."""

from orm.config import DatabaseConfig
from orm.exceptions import UnsupportedDatabaseError
from orm.log import get_logger
from orm.types import DatabaseType

from .implementations.mysql import MySQLClient
from .implementations.sqlite import SQLiteClient
from .interfaces import DatabaseClient

logger = get_logger(__name__)


class DatabaseClientFactory:
    """Creates database clients from configuration."""

    _clients: dict[str, type[DatabaseClient]] = {
        DatabaseType.SQLITE.value: SQLiteClient,
        DatabaseType.MYSQL.value: MySQLClient,
    }

    @classmethod
    def create_client(cls, config: DatabaseConfig) -> DatabaseClient:
        """Create a client for the configured database type.

        Args:
            config: Connection settings; an empty type selects SQLite

        Returns:
            Unconnected database client

        Raises:
            UnsupportedDatabaseError: If the type has no client
        """
        db_type = config.get_type().lower()
        client_class = cls._clients.get(db_type)
        if client_class is None:
            raise UnsupportedDatabaseError(f"Unsupported database type: {db_type}")

        logger.debug(f"Creating {db_type} client")
        return client_class(config)


async def init_client(config: DatabaseConfig) -> DatabaseClient:
    """Create a client for the configured database and connect it.

    Args:
        config: Connection settings

    Returns:
        Connected database client
    """
    client = DatabaseClientFactory.create_client(config)
    await client.connect()
    return client
