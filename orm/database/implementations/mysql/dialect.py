"""MySQL dialect."""

from orm.config import DatabaseConfig
from orm.database.interfaces.dialect import SQLDialect
from orm.types import DatabaseType

from .query_builder import MySQLQueryBuilder
from .schema_builder import MySQLSchemaBuilder


class MySQLDialect(SQLDialect):
    """Renders queries for MySQL."""

    name = DatabaseType.MYSQL.value

    def __init__(self, config: DatabaseConfig | None = None) -> None:
        super().__init__(MySQLQueryBuilder(), MySQLSchemaBuilder(config))
