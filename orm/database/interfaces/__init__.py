"""Database interfaces module."""

from .client import DatabaseClient
from .connection import CommandResult, DatabaseConnection, QueryRows
from .dialect import SQLDialect
from .query_builder import QueryBuilder
from .schema_builder import SchemaBuilder

__all__ = [
    "CommandResult",
    "DatabaseClient",
    "DatabaseConnection",
    "QueryBuilder",
    "QueryRows",
    "SQLDialect",
    "SchemaBuilder",
]
