"""MySQL-specific schema builder implementation."""

from orm.config import DatabaseConfig
from orm.database.interfaces.schema_builder import SchemaBuilder
from orm.database.query import Query
from orm.database.utils import (
    column_default_sql,
    foreign_key_to_sql,
    join_sql_parts,
    nullable_sql,
)
from orm.models import Index, ModelField


class MySQLSchemaBuilder(SchemaBuilder):
    """MySQL-specific schema builder.

    Every schema change has a native ALTER TABLE form, so no table rebuild
    is ever needed.
    """

    def __init__(self, config: DatabaseConfig | None = None) -> None:
        """Initialize MySQL schema builder.

        Args:
            config: Source of the ENGINE, CHARSET and COLLATE table options
        """
        self.config = config or DatabaseConfig()

    def create(self, query: Query) -> str:
        """Generate CREATE TABLE SQL for MySQL.

        Args:
            query: Query built with ``create``

        Returns:
            CREATE TABLE statement with keys, indexes and table options
        """
        model = query.destination
        if model is None:
            return ""

        body = ", ".join(self._column_sql(column) for column in model.get_columns())

        constraints: list[str] = []
        if model.primary_key is not None:
            constraints.append(f"PRIMARY KEY ({model.primary_key.name})")
        constraints.extend(foreign_key_to_sql(fk) for fk in query.foreign_keys_to_add)
        constraints.extend(self._key_sql(index) for index in query.indexes_to_add)
        if constraints:
            body += ",\n" + ",\n".join(constraints)

        prefix = "CREATE TABLE IF NOT EXISTS" if query.is_if_not_exists else "CREATE TABLE"
        return f"{prefix} {model.get_table_name()} ({body}){self._table_options()};"

    def alter(self, query: Query) -> str:
        """Generate a single ALTER TABLE statement for MySQL.

        Args:
            query: Query built with ``alter``

        Returns:
            ALTER TABLE statement, or an empty string when nothing changes
        """
        model = query.destination
        if model is None:
            return ""

        operations = [
            f"ADD {self._column_sql(column)}"
            for column in query.columns
            if isinstance(column, ModelField)
        ]
        operations.extend(f"DROP {column.name}" for column in query.columns_to_drop)
        operations.extend(
            f"ADD {'UNIQUE ' if index.unique else ''}INDEX {index.name} ({index.key})"
            for index in query.indexes_to_add
        )
        operations.extend(
            f"DROP INDEX {index.name or index.key}" for index in query.indexes_to_drop
        )
        operations.extend(f"ADD {foreign_key_to_sql(fk)}" for fk in query.foreign_keys_to_add)
        operations.extend(
            f"DROP FOREIGN KEY {fk.name}" for fk in query.foreign_keys_to_drop
        )
        if not operations:
            return ""

        return f"ALTER TABLE {model.get_table_name()} {', '.join(operations)}"

    def _column_sql(self, field: ModelField) -> str:
        column_type = field.type
        if field.length > 0:
            column_type = f"{column_type}({field.length})"

        return join_sql_parts(
            [
                field.name,
                column_type,
                "unsigned" if field.unsigned else "",
                column_default_sql(field),
                nullable_sql(field),
                "AUTO_INCREMENT" if field.auto_increment else "",
            ]
        )

    def _key_sql(self, index: Index) -> str:
        unique = "UNIQUE " if index.unique else ""
        return f"{unique}KEY {index.name} ({index.key})"

    def _table_options(self) -> str:
        options = ""
        if self.config.engine:
            options += f" ENGINE={self.config.engine}"
        if self.config.charset:
            options += f" DEFAULT CHARSET={self.config.charset}"
        if self.config.collate:
            options += f" COLLATE={self.config.collate}"
        return options
