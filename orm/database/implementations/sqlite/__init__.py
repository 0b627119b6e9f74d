"""SQLite database implementation package."""

from .dialect import SQLiteDialect
from .query_builder import SQLiteQueryBuilder
from .schema_builder import SQLiteSchemaBuilder
from .sqlite_client import SQLiteClient
from .sqlite_connection import SQLiteConnection

__all__ = [
    "SQLiteClient",
    "SQLiteConnection",
    "SQLiteDialect",
    "SQLiteQueryBuilder",
    "SQLiteSchemaBuilder",
]
