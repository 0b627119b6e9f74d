"""Query builder interface: renders DML and transaction statements."""

from abc import ABC, abstractmethod

from orm.constants import BIND_PLACEHOLDER
from orm.database.query import Query
from orm.database.utils import (
    column_name,
    generate_group_by_clause,
    generate_join_clause,
    generate_limit_clause,
    generate_literal_values,
    generate_order_by_clause,
    generate_select_columns,
    generate_where_clause,
    join_sql_parts,
)


class QueryBuilder(ABC):
    """Renders SELECT, INSERT, UPDATE, DELETE and transaction control.

    Clause syntax is shared by every backend; subclasses supply the
    transaction keywords.
    """

    def select(self, query: Query) -> str:
        """Build SELECT query.

        Args:
            query: Query with a destination table

        Returns:
            SELECT statement, or an empty string without a destination
        """
        destination = query.destination
        if destination is None:
            return ""

        return join_sql_parts(
            [
                f"SELECT {generate_select_columns(query.columns)} "
                f"FROM {destination.get_table_name()}",
                generate_join_clause(query.joins),
                generate_where_clause(query.wheres),
                generate_group_by_clause(query.group_by_columns),
                generate_order_by_clause(query.order_by_columns),
                generate_limit_clause(query.limit_value),
            ]
        )

    def insert(self, query: Query) -> str:
        """Build INSERT query.

        A Query payload set with ``values`` renders as INSERT ... SELECT and a
        list payload as literal values. Otherwise every column gets a
        placeholder.

        Args:
            query: Query built with ``insert``

        Returns:
            INSERT statement, or an empty string without a destination
        """
        destination = query.destination
        if destination is None:
            return ""

        columns = ", ".join(column_name(column) for column in query.columns)
        sql = f"INSERT INTO {destination.get_table_name()} ({columns})"

        payload = query.values_payload
        if isinstance(payload, Query):
            return f"{sql} {self.select(payload)}"
        if isinstance(payload, (list, tuple)):
            return f"{sql} {generate_literal_values(payload)}"

        placeholders = ", ".join(BIND_PLACEHOLDER for _ in query.columns)
        return f"{sql} VALUES ({placeholders})"

    def update(self, query: Query) -> str:
        """Build UPDATE query.

        Columns line up with the leading bindings; a column whose binding is
        missing or empty is left out of the SET list.

        Args:
            query: Query built with ``update``

        Returns:
            UPDATE statement, or an empty string without a destination
        """
        destination = query.destination
        if destination is None:
            return ""

        bindings = query.bindings
        assignments: list[str] = []
        for i, column in enumerate(query.columns):
            if i >= len(bindings) or bindings[i].is_empty():
                continue
            assignments.append(f"{column_name(column)} = {bindings[i].field}")

        return join_sql_parts(
            [
                f"UPDATE {destination.get_table_name()} SET {', '.join(assignments)}",
                generate_join_clause(query.joins),
                generate_where_clause(query.wheres),
            ]
        )

    def delete(self, query: Query) -> str:
        """Build DELETE query.

        Args:
            query: Query with a destination table

        Returns:
            DELETE statement, or an empty string without a destination
        """
        destination = query.destination
        if destination is None:
            return ""

        return join_sql_parts(
            [
                f"DELETE FROM {destination.get_table_name()}",
                generate_join_clause(query.joins),
                generate_where_clause(query.wheres),
                generate_group_by_clause(query.group_by_columns),
                generate_order_by_clause(query.order_by_columns),
                generate_limit_clause(query.limit_value),
            ]
        )

    @abstractmethod
    def begin_transaction(self) -> str:
        """Statement opening a transaction."""
        pass

    @abstractmethod
    def commit_transaction(self) -> str:
        """Statement committing the open transaction."""
        pass

    @abstractmethod
    def rollback_transaction(self) -> str:
        """Statement rolling back the open transaction."""
        pass
