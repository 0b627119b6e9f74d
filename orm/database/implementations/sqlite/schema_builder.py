"""SQLite-specific schema builder implementation."""

from dataclasses import replace

from orm.constants import OLD_TABLE_PREFIX, TEMP_TABLE_PREFIX
from orm.database.interfaces.schema_builder import SchemaBuilder
from orm.database.query import Query
from orm.database.utils import (
    column_default_sql,
    foreign_key_to_sql,
    join_sql_parts,
    nullable_sql,
)
from orm.models import ForeignKey, Index, Model, ModelField


class SQLiteSchemaBuilder(SchemaBuilder):
    """SQLite-specific schema builder.

    SQLite's ALTER TABLE can only add columns. Dropping columns and adding or
    dropping foreign keys is done by rebuilding the table: a ``temp_`` copy
    is created with the new definition, the rows are copied over, the tables
    are swapped by renaming and the old table is dropped.
    """

    def create(self, query: Query) -> str:
        """Generate CREATE TABLE SQL for SQLite.

        Args:
            query: Query built with ``create``

        Returns:
            CREATE TABLE statement followed by one CREATE INDEX per index
        """
        model = query.destination
        if model is None:
            return ""

        return self._create_table_sql(
            model.get_table_name(),
            model.primary_key,
            model.fields,
            query.foreign_keys_to_add,
            query.indexes_to_add,
            query.is_if_not_exists,
        )

    def alter(self, query: Query) -> str:
        """Generate ALTER SQL for SQLite.

        Added columns and added or dropped indexes are applied in place.
        Any dropped column or foreign key change rebuilds the table.

        Args:
            query: Query built with ``alter``

        Returns:
            Statements joined by ``;`` and newlines, or an empty string
        """
        model = query.destination
        if model is None:
            return ""

        if (
            query.columns_to_drop
            or query.foreign_keys_to_add
            or query.foreign_keys_to_drop
        ):
            return self._rebuild_table_sql(model, query)

        table_name = model.get_table_name()
        statements = [
            f"ALTER TABLE {table_name} ADD COLUMN {self._column_sql(column)}"
            for column in _added_columns(query)
        ]
        statements.extend(
            self._create_index_sql(index, table_name) for index in query.indexes_to_add
        )
        statements.extend(
            f"DROP INDEX {index.name or index.key}" for index in query.indexes_to_drop
        )
        return ";\n".join(statements)

    def _rebuild_table_sql(self, model: Model, query: Query) -> str:
        table_name = model.get_table_name()
        temp_table_name = f"{TEMP_TABLE_PREFIX}{table_name}"
        old_table_name = f"{OLD_TABLE_PREFIX}{table_name}"

        dropped = {column.name for column in query.columns_to_drop}
        added = _added_columns(query)
        added_names = {column.name for column in added}

        primary_key = model.primary_key
        if primary_key is not None and primary_key.name in dropped:
            primary_key = None
        fields = [field for field in model.fields if field.name not in dropped]
        fields.extend(added)

        create_sql = self._create_table_sql(
            temp_table_name,
            replace(primary_key) if primary_key else None,
            [replace(field) for field in fields],
            query.foreign_keys_to_add,
            [replace(index, target=temp_table_name) for index in query.indexes_to_add],
            False,
        )

        # Only columns that already exist in the original table
        copied = [
            column.name
            for column in ([primary_key] if primary_key else []) + fields
            if not column.auto_increment and column.name not in added_names
        ]
        column_list = ", ".join(copied)

        statements = [create_sql]
        if copied:
            statements.append(
                f"INSERT INTO {temp_table_name} ({column_list}) "
                f"SELECT {column_list} FROM {table_name};"
            )
        statements.append(self.rename_table(table_name, old_table_name) + ";")
        statements.append(self.rename_table(temp_table_name, table_name) + ";")
        statements.append(f"DROP TABLE {old_table_name};")
        return "\n".join(statements)

    def _create_table_sql(
        self,
        table_name: str,
        primary_key: ModelField | None,
        fields: list[ModelField],
        foreign_keys: list[ForeignKey],
        indexes: list[Index],
        if_not_exists: bool,
    ) -> str:
        columns: list[str] = []
        if primary_key is not None:
            columns.append(self._primary_key_sql(table_name, primary_key))
        columns.extend(self._column_sql(field) for field in fields)

        body = ", ".join(columns)
        if foreign_keys:
            body += ",\n" + ",\n".join(foreign_key_to_sql(fk) for fk in foreign_keys)

        prefix = "CREATE TABLE IF NOT EXISTS" if if_not_exists else "CREATE TABLE"
        sql = f"{prefix} {table_name} ({body});"
        if indexes:
            sql += " " + "\n".join(
                self._create_index_sql(index, table_name, if_not_exists) + ";"
                for index in indexes
            )
        return sql

    def _primary_key_sql(self, table_name: str, field: ModelField) -> str:
        return join_sql_parts(
            [
                field.name,
                field.type,
                f"CONSTRAINT {table_name}_pk primary key",
                "autoincrement" if field.auto_increment else "",
            ]
        )

    def _column_sql(self, field: ModelField) -> str:
        return join_sql_parts(
            [
                field.name,
                field.type,
                "unsigned" if field.unsigned else "",
                column_default_sql(field),
                nullable_sql(field),
                "autoincrement" if field.auto_increment else "",
            ]
        )

    def _create_index_sql(
        self, index: Index, table_name: str, if_not_exists: bool = False
    ) -> str:
        unique = "UNIQUE " if index.unique else ""
        guard = "IF NOT EXISTS " if if_not_exists else ""
        return (
            f"CREATE {unique}INDEX {guard}{index.name} ON {index.target or table_name} "
            f"({index.key})"
        )


def _added_columns(query: Query) -> list[ModelField]:
    return [column for column in query.columns if isinstance(column, ModelField)]
