"""Database client interface: renders queries and executes them."""

from types import TracebackType

from orm.config import DatabaseConfig
from orm.database.query import Query
from orm.database.utils import normalize_column_type, normalize_value
from orm.exceptions import EmptyQueryError, QueryExecutionError
from orm.log import get_logger
from orm.models import Model, ModelField, Result
from orm.types import QueryType

from .connection import DatabaseConnection, QueryRows
from .dialect import SQLDialect

logger = get_logger(__name__)


class DatabaseClient:
    """Executes queries against one database through its dialect.

    Subclasses pair a backend connection with the matching dialect.
    """

    def __init__(
        self,
        config: DatabaseConfig,
        connection: DatabaseConnection,
        dialect: SQLDialect,
    ) -> None:
        """Initialize database client.

        Args:
            config: Connection settings
            connection: Backend connection used to run statements
            dialect: Renderer producing SQL for the backend
        """
        self.config = config
        self.connection = connection
        self.dialect = dialect

    async def connect(self) -> None:
        """Open the underlying connection."""
        await self.connection.connect()

    async def disconnect(self) -> None:
        """Close the underlying connection."""
        await self.connection.disconnect()

    @property
    def is_connected(self) -> bool:
        return self.connection.is_connected

    def to_sql(self, query: Query) -> str:
        """Render the query without executing it."""
        return self.dialect.to_sql(query)

    async def execute(self, query: Query) -> Result:
        """Render and execute a query.

        SELECT rows come back as models whose fields carry the column name,
        the normalized column type and the coerced value. Other statements
        report the last inserted id.

        Args:
            query: Query to execute

        Returns:
            Result of the execution

        Raises:
            EmptyQueryError: If the query renders no SQL; nothing is sent
            QueryExecutionError: If the driver fails; ``result.error`` is set
            ValueCoercionError: If a fetched value does not match its type
        """
        sql = self.to_sql(query)
        if not sql:
            raise EmptyQueryError(
                f"Query of type {query.query_type!r} rendered no SQL"
            )

        params = self.dialect.bound_values(query)
        logger.debug(f"Executing: {sql} {params}")

        result = Result()
        try:
            if query.query_type == QueryType.SELECT:
                rows = await self.connection.run_query(sql, params)
            else:
                command = await self.connection.run_command(sql, params)
        except QueryExecutionError as e:
            result.error = e
            e.result = result
            raise

        if query.query_type != QueryType.SELECT:
            result.last_insert_id = command.last_insert_id
            return result

        table_name = query.destination.get_table_name() if query.destination else ""
        for model in self._rows_to_models(table_name, rows):
            result.add_item(model)
        return result

    def _rows_to_models(self, table_name: str, rows: QueryRows) -> list[Model]:
        column_types = [normalize_column_type(name) for name in rows.column_types]
        models: list[Model] = []
        for row in rows.rows:
            model = Model(table_name=table_name)
            for name, column_type, raw in zip(rows.columns, column_types, row):
                model.append_field(
                    ModelField(
                        name=name,
                        type=column_type,
                        value=normalize_value(column_type, raw),
                    )
                )
            models.append(model)
        return models

    async def __aenter__(self) -> "DatabaseClient":
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
