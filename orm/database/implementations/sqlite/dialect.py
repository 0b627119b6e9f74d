"""SQLite dialect."""

from orm.database.interfaces.dialect import SQLDialect
from orm.types import DatabaseType

from .query_builder import SQLiteQueryBuilder
from .schema_builder import SQLiteSchemaBuilder


class SQLiteDialect(SQLDialect):
    """Renders queries for SQLite."""

    name = DatabaseType.SQLITE.value

    def __init__(self) -> None:
        super().__init__(SQLiteQueryBuilder(), SQLiteSchemaBuilder())
