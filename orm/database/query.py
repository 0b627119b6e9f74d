"""Fluent statement builder shared by every database dialect."""

from collections.abc import Iterable
from dataclasses import replace
from typing import Any

from orm.constants import BIND_PLACEHOLDER
from orm.models import (
    Bind,
    ForeignKey,
    Index,
    Join,
    Limit,
    Model,
    ModelField,
    OrderByColumn,
    Where,
)
from orm.types import QueryType

SelectColumn = str | ModelField


class Query:
    """Accumulates the pieces of one SQL statement.

    Every mutator returns the query itself so calls can be chained::

        Query().select(["id", "title"]).from_("paper").where(
            Where("id", "=", Bind(value=1))
        )

    Nothing is validated while building. A statement missing a piece it
    needs (for example a SELECT without a destination) renders to an empty
    string, and executing it fails.

    Models handed to the builder are copied, so mutating the caller's model
    afterwards does not change a statement that is already built.
    """

    def __init__(self) -> None:
        self._query_type: QueryType | None = None
        self._destination: Model | None = None
        self._new_table_name = ""
        self._if_not_exists = False
        self._columns: list[SelectColumn] = []
        self._columns_to_drop: list[ModelField] = []
        self._foreign_keys_to_add: list[ForeignKey] = []
        self._foreign_keys_to_drop: list[ForeignKey] = []
        self._indexes_to_add: list[Index] = []
        self._indexes_to_drop: list[Index] = []
        self._wheres: list[Where] = []
        self._joins: list[Join] = []
        self._order_by: list[OrderByColumn] = []
        self._group_by: list[str] = []
        self._limit = Limit()
        self._bindings: list[Bind] = []
        self._values: Any = None

    # Statement types

    def create(self, model: Model) -> "Query":
        """Build a CREATE TABLE statement for the model."""
        self._query_type = QueryType.CREATE
        return self.from_(model)

    def drop(self, model: Model) -> "Query":
        """Build a DROP TABLE statement for the model."""
        self._query_type = QueryType.DROP
        return self.from_(model)

    def alter(self, model: Model) -> "Query":
        """Build an ALTER TABLE statement.

        Combine with add_column, drop_column, add_index, drop_index,
        add_foreign_key and drop_foreign_key. The model's own columns are
        not added automatically.
        """
        self._query_type = QueryType.ALTER
        return self.from_(model)

    def rename(self, table: str, new_table_name: str) -> "Query":
        """Build a statement renaming ``table`` to ``new_table_name``."""
        self._query_type = QueryType.RENAME
        self._new_table_name = new_table_name
        return self.from_(table)

    def select(self, columns: SelectColumn | Iterable[SelectColumn] | None = None) -> "Query":
        """Build a SELECT statement.

        Args:
            columns: A column name, a ModelField, or a collection of either.
                None or an empty collection selects every column.
        """
        self._query_type = QueryType.SELECT
        if columns is None:
            return self
        if isinstance(columns, (str, ModelField)):
            columns = [columns]

        for column in columns:
            if isinstance(column, ModelField):
                self._columns.append(replace(column))
            else:
                self._columns.append(column)
        return self

    def insert(self, model: Model) -> "Query":
        """Build an INSERT of the model's current values.

        An auto-increment column without a value is left out, so the
        database generates it.
        """
        self._query_type = QueryType.INSERT
        self._destination = model.copy()
        for column in self._destination.get_columns():
            if column.auto_increment and column.value is None:
                continue

            self._columns.append(column)
            self.add_binding(Bind(BIND_PLACEHOLDER, column.value))
        return self

    def update(self, model: Model) -> "Query":
        """Build an UPDATE setting every non-key column to its current value."""
        self._query_type = QueryType.UPDATE
        self._destination = model.copy()
        for column in self._destination.get_columns():
            if column.primary_key:
                continue

            self._columns.append(column)
            self.add_binding(Bind(BIND_PLACEHOLDER, column.value))
        return self

    def delete(self) -> "Query":
        """Build a DELETE statement; set the table with from_."""
        self._query_type = QueryType.DELETE
        return self

    def begin_transaction(self) -> "Query":
        self._query_type = QueryType.BEGIN_TRANSACTION
        return self

    def commit_transaction(self) -> "Query":
        self._query_type = QueryType.COMMIT_TRANSACTION
        return self

    def rollback_transaction(self) -> "Query":
        self._query_type = QueryType.ROLLBACK_TRANSACTION
        return self

    # Clauses

    def from_(self, model: Model | str) -> "Query":
        """Set the destination table, from a model or a bare table name."""
        if isinstance(model, Model):
            self._destination = model.copy()
        else:
            self._destination = Model(table_name=model)
        return self

    def if_not_exists(self) -> "Query":
        """Render CREATE TABLE as CREATE TABLE IF NOT EXISTS."""
        self._if_not_exists = True
        return self

    def where(self, where: Where) -> "Query":
        """Append a predicate.

        Bind operands are replaced by the placeholder and their values are
        registered in the order they are found: left before right, nested
        predicates depth first.
        """
        self._wheres.append(self._bind_where(where))
        return self

    def _bind_where(self, where: Where) -> Where:
        return replace(
            where,
            first=self._bind_operand(where.first),
            second=self._bind_operand(where.second),
        )

    def _bind_operand(self, operand: Any) -> Any:
        if isinstance(operand, Where):
            return self._bind_where(operand)
        if isinstance(operand, Bind):
            self.add_binding(operand)
            return BIND_PLACEHOLDER
        return operand

    def join(self, join: Join) -> "Query":
        self._joins.append(join)
        return self

    def order_by(self, column: str, direction: str) -> "Query":
        self._order_by.append(OrderByColumn(column=column, direction=direction))
        return self

    def group_by(self, column: str) -> "Query":
        self._group_by.append(column)
        return self

    def limit(self, limit: Limit) -> "Query":
        self._limit = limit
        return self

    def values(self, values: Any) -> "Query":
        """Replace the default VALUES list of an INSERT.

        A Query payload renders as ``INSERT INTO t (...) SELECT ...``; a list
        or tuple renders as literal values.
        """
        self._values = values
        return self

    def add_binding(self, bind: Bind) -> "Query":
        self._bindings.append(bind)
        return self

    # Schema changes

    def add_column(self, column: ModelField) -> "Query":
        self._columns.append(replace(column))
        return self

    def drop_column(self, column: ModelField) -> "Query":
        self._columns_to_drop.append(replace(column))
        return self

    def add_foreign_key(self, foreign_key: ForeignKey) -> "Query":
        self._foreign_keys_to_add.append(foreign_key)
        return self

    def drop_foreign_key(self, foreign_key: ForeignKey) -> "Query":
        self._foreign_keys_to_drop.append(foreign_key)
        return self

    def add_index(self, index: Index) -> "Query":
        self._indexes_to_add.append(index)
        return self

    def drop_index(self, index: Index) -> "Query":
        self._indexes_to_drop.append(index)
        return self

    # Read-only view used by the dialects

    @property
    def query_type(self) -> QueryType | None:
        return self._query_type

    @property
    def destination(self) -> Model | None:
        return self._destination

    @property
    def new_table_name(self) -> str:
        return self._new_table_name

    @property
    def is_if_not_exists(self) -> bool:
        return self._if_not_exists

    @property
    def columns(self) -> list[SelectColumn]:
        return list(self._columns)

    @property
    def columns_to_drop(self) -> list[ModelField]:
        return list(self._columns_to_drop)

    @property
    def foreign_keys_to_add(self) -> list[ForeignKey]:
        return list(self._foreign_keys_to_add)

    @property
    def foreign_keys_to_drop(self) -> list[ForeignKey]:
        return list(self._foreign_keys_to_drop)

    @property
    def indexes_to_add(self) -> list[Index]:
        return list(self._indexes_to_add)

    @property
    def indexes_to_drop(self) -> list[Index]:
        return list(self._indexes_to_drop)

    @property
    def wheres(self) -> list[Where]:
        return list(self._wheres)

    @property
    def joins(self) -> list[Join]:
        return list(self._joins)

    @property
    def order_by_columns(self) -> list[OrderByColumn]:
        return list(self._order_by)

    @property
    def group_by_columns(self) -> list[str]:
        return list(self._group_by)

    @property
    def limit_value(self) -> Limit:
        return self._limit

    @property
    def bindings(self) -> list[Bind]:
        return list(self._bindings)

    @property
    def values_payload(self) -> Any:
        return self._values

    def binding_values(self) -> list[Any]:
        """Values of every binding, in placeholder order."""
        return [bind.value for bind in self._bindings]
