"""Statement-type dispatch shared by every SQL dialect."""

from collections.abc import Callable
from typing import Any

from orm.database.query import Query
from orm.types import QueryType

from .query_builder import QueryBuilder
from .schema_builder import SchemaBuilder


class SQLDialect:
    """Turns a Query into SQL text for one backend.

    DML and transaction statements go to the query builder, DDL statements
    to the schema builder. A query whose type has no renderer, or that lacks
    the destination its type needs, renders as an empty string.
    """

    name = ""

    def __init__(self, query_builder: QueryBuilder, schema_builder: SchemaBuilder) -> None:
        self.query_builder = query_builder
        self.schema_builder = schema_builder
        self._renderers: dict[QueryType, Callable[[Query], str]] = {
            QueryType.CREATE: schema_builder.create,
            QueryType.ALTER: schema_builder.alter,
            QueryType.RENAME: schema_builder.rename,
            QueryType.DROP: schema_builder.drop,
            QueryType.SELECT: query_builder.select,
            QueryType.INSERT: query_builder.insert,
            QueryType.UPDATE: query_builder.update,
            QueryType.DELETE: query_builder.delete,
            QueryType.BEGIN_TRANSACTION: lambda _: query_builder.begin_transaction(),
            QueryType.COMMIT_TRANSACTION: lambda _: query_builder.commit_transaction(),
            QueryType.ROLLBACK_TRANSACTION: lambda _: query_builder.rollback_transaction(),
        }

    def to_sql(self, query: Query) -> str:
        """Render the query as SQL text.

        Args:
            query: Query to render

        Returns:
            SQL text, or an empty string when the query cannot be rendered
        """
        if query.query_type is None:
            return ""

        renderer = self._renderers.get(query.query_type)
        if renderer is None:
            return ""
        return renderer(query)

    def bound_values(self, query: Query) -> list[Any]:
        """Values sent to the driver with the rendered SQL.

        An INSERT whose values come from a nested SELECT binds the nested
        query's values; literal VALUES bind nothing.
        """
        payload = query.values_payload
        if query.query_type == QueryType.INSERT:
            if isinstance(payload, Query):
                return payload.binding_values()
            if isinstance(payload, (list, tuple)):
                return []
        return query.binding_values()
