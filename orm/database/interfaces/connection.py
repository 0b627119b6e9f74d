"""Database connection interface."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from types import TracebackType
from typing import Any

from orm.config import DatabaseConfig
from orm.types import DatabaseParamType, RawRowType


@dataclass
class QueryRows:
    """Rows returned by a row-returning statement.

    ``column_types`` holds the driver's type name for each column, in the
    same order as ``columns``.
    """

    columns: list[str] = field(default_factory=list)
    column_types: list[str] = field(default_factory=list)
    rows: list[RawRowType] = field(default_factory=list)


@dataclass
class CommandResult:
    """Outcome of a statement that returns no rows."""

    last_insert_id: int = 0
    row_count: int = 0


class DatabaseConnection(ABC):
    """Abstract database connection interface."""

    def __init__(self, config: DatabaseConfig) -> None:
        """Initialize database connection.

        Args:
            config: Connection settings
        """
        self.config = config
        self._connection: Any = None

    @abstractmethod
    async def connect(self) -> None:
        """Establish database connection.

        Raises:
            DatabaseConnectionError: If the database cannot be reached
        """
        pass

    @abstractmethod
    async def disconnect(self) -> None:
        """Close database connection."""
        pass

    @abstractmethod
    async def run_query(
        self,
        query: str,
        params: DatabaseParamType = None,
    ) -> QueryRows:
        """Execute a row-returning statement.

        Args:
            query: SQL query
            params: Values for the query placeholders, in order

        Returns:
            Column names, column type names and raw rows
        """
        pass

    @abstractmethod
    async def run_command(
        self,
        query: str,
        params: DatabaseParamType = None,
    ) -> CommandResult:
        """Execute a statement that returns no rows.

        Args:
            query: SQL statement, or several separated by semicolons
            params: Values for the statement placeholders, in order

        Returns:
            Last inserted id and affected row count
        """
        pass

    @property
    def is_connected(self) -> bool:
        """Check if connection is active."""
        return self._connection is not None

    async def __aenter__(self) -> "DatabaseConnection":
        """Async context manager entry."""
        await self.connect()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        """Async context manager exit."""
        await self.disconnect()
