"""Database backend implementations."""

from .mysql import MySQLClient, MySQLDialect
from .sqlite import SQLiteClient, SQLiteDialect

__all__ = [
    "MySQLClient",
    "MySQLDialect",
    "SQLiteClient",
    "SQLiteDialect",
]
