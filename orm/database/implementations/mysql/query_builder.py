"""MySQL-specific query builder implementation."""

from orm.database.interfaces.query_builder import QueryBuilder


class MySQLQueryBuilder(QueryBuilder):
    """MySQL-specific query builder."""

    def begin_transaction(self) -> str:
        return "START TRANSACTION;"

    def commit_transaction(self) -> str:
        return "COMMIT;"

    def rollback_transaction(self) -> str:
        return "ROLLBACK;"
