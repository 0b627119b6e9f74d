"""Query building, SQL rendering and execution."""

from .factory import DatabaseClientFactory, init_client
from .implementations import MySQLClient, MySQLDialect, SQLiteClient, SQLiteDialect
from .interfaces import DatabaseClient, SQLDialect
from .query import Query

__all__ = [
    "DatabaseClient",
    "DatabaseClientFactory",
    "MySQLClient",
    "MySQLDialect",
    "Query",
    "SQLDialect",
    "SQLiteClient",
    "SQLiteDialect",
    "init_client",
]
