"""SQL query builder and execution layer for SQLite and MySQL."""

from .config import DatabaseConfig, Settings, load_database_config, load_settings
from .database import (
    DatabaseClient,
    DatabaseClientFactory,
    MySQLClient,
    Query,
    SQLiteClient,
    init_client,
)
from .exceptions import (
    DatabaseConnectionError,
    EmptyQueryError,
    ModelError,
    OrmError,
    QueryExecutionError,
    UnsupportedDatabaseError,
    UnsupportedValueError,
    ValueCoercionError,
)
from .log import (
    get_logger,
    setup_logging,
    setup_production_logging,
    setup_test_logging,
)
from .models import (
    Bind,
    ForeignKey,
    Index,
    Join,
    Limit,
    Model,
    ModelField,
    OrderByColumn,
    Reference,
    Result,
    Where,
)
from .types import DatabaseType, Environment, QueryType

__all__ = [
    "Bind",
    "DatabaseClient",
    "DatabaseClientFactory",
    "DatabaseConfig",
    "DatabaseConnectionError",
    "DatabaseType",
    "EmptyQueryError",
    "Environment",
    "ForeignKey",
    "Index",
    "Join",
    "Limit",
    "Model",
    "ModelError",
    "ModelField",
    "MySQLClient",
    "OrderByColumn",
    "OrmError",
    "Query",
    "QueryExecutionError",
    "QueryType",
    "Reference",
    "Result",
    "SQLiteClient",
    "Settings",
    "UnsupportedDatabaseError",
    "UnsupportedValueError",
    "ValueCoercionError",
    "Where",
    "get_logger",
    "init_client",
    "load_database_config",
    "load_settings",
    "setup_logging",
    "setup_production_logging",
    "setup_test_logging",
]
