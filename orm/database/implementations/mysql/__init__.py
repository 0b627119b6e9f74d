"""MySQL database implementation package."""

from .dialect import MySQLDialect
from .mysql_client import MySQLClient
from .mysql_connection import MySQLConnection
from .query_builder import MySQLQueryBuilder
from .schema_builder import MySQLSchemaBuilder

__all__ = [
    "MySQLClient",
    "MySQLConnection",
    "MySQLDialect",
    "MySQLQueryBuilder",
    "MySQLSchemaBuilder",
]
