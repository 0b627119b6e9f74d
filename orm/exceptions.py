"""Custom exceptions for the orm package."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from orm.models.result import Result


class OrmError(Exception):
    """Base exception for orm errors."""

    pass


class DatabaseConnectionError(OrmError):
    """Raised when a database connection cannot be established."""

    pass


class UnsupportedDatabaseError(OrmError):
    """Raised when the configured database type has no client."""

    pass


class ModelError(OrmError):
    """Raised when a model definition breaks its invariants."""

    pass


class UnsupportedValueError(OrmError):
    """Raised when a value cannot be rendered as an SQL literal."""

    pass


class EmptyQueryError(OrmError):
    """Raised when a query renders to an empty SQL string."""

    pass


class QueryExecutionError(OrmError):
    """Raised when the database driver fails to execute a query."""

    def __init__(self, message: str, result: "Result | None" = None) -> None:
        super().__init__(message)
        self.result = result


class ValueCoercionError(QueryExecutionError):
    """Raised when a fetched value cannot be coerced to its column type."""

    pass
