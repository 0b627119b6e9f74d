"""SQLite-specific query builder implementation."""

from orm.database.interfaces.query_builder import QueryBuilder


class SQLiteQueryBuilder(QueryBuilder):
    """SQLite-specific query builder."""

    def begin_transaction(self) -> str:
        return "BEGIN TRANSACTION;"

    def commit_transaction(self) -> str:
        return "COMMIT;"

    def rollback_transaction(self) -> str:
        return "ROLLBACK;"
