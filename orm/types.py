"""Common type definitions for the orm package."""

from enum import Enum
from typing import Any, TypeAlias

DatabaseParamType: TypeAlias = list[Any] | tuple[Any, ...] | None
RawRowType: TypeAlias = tuple[Any, ...]


class Environment(str, Enum):
    """Application environment types."""

    DEVELOPMENT = "development"
    PRODUCTION = "production"
    TESTING = "testing"


class DatabaseType(str, Enum):
    """Supported database backends."""

    SQLITE = "sqlite"
    MYSQL = "mysql"


class QueryType(str, Enum):
    """Statement kinds a query can carry."""

    CREATE = "CREATE"
    ALTER = "ALTER"
    RENAME = "RENAME"
    DROP = "DROP"
    SELECT = "SELECT"
    INSERT = "INSERT"
    UPDATE = "UPDATE"
    DELETE = "DELETE"
    BEGIN_TRANSACTION = "BEGIN_TRANSACTION"
    COMMIT_TRANSACTION = "COMMIT_TRANSACTION"
    ROLLBACK_TRANSACTION = "ROLLBACK_TRANSACTION"
