"""Table model: a named entity with an optional primary key and ordered fields."""

from dataclasses import replace
from typing import Any

from orm.exceptions import ModelError

from .field import ModelField


class Model:
    """Schema descriptor for one table plus the values of its current row.

    Field order is significant: it is the column order of CREATE TABLE and
    the parameter order of INSERT and UPDATE.
    """

    def __init__(
        self,
        table_name: str = "",
        primary_key: ModelField | None = None,
        fields: list[ModelField] | None = None,
    ) -> None:
        self.table_name = table_name
        self._primary_key: ModelField | None = None
        self._fields: list[ModelField] = []

        if primary_key is not None:
            self.set_primary_key(primary_key)
        for field in fields or []:
            self.add_field(field)

    def __repr__(self) -> str:
        return f"Model(table_name={self.table_name!r}, columns={self.get_columns()!r})"

    def get_table_name(self) -> str:
        return self.table_name

    def set_table_name(self, name: str) -> None:
        self.table_name = name

    @property
    def primary_key(self) -> ModelField | None:
        """The primary key field, if the model has one."""
        return self._primary_key

    @property
    def fields(self) -> list[ModelField]:
        """Non-key fields in insertion order."""
        return list(self._fields)

    def set_primary_key(self, field: ModelField) -> None:
        """Set the primary key, forcing its primary-key flag."""
        field.primary_key = True
        self._fields = [f for f in self._fields if f.name != field.name]
        self._primary_key = field

    def get_primary_key(self) -> ModelField | None:
        return self._primary_key

    def get_columns(self) -> list[ModelField]:
        """All columns: the primary key first, then the fields in order."""
        columns: list[ModelField] = []
        if self._primary_key is not None:
            columns.append(self._primary_key)
        columns.extend(self._fields)
        return columns

    def get_field(self, name: str) -> ModelField | None:
        """Find a column by name, primary key included."""
        for field in self.get_columns():
            if field.name == name:
                return field
        return None

    def add_field(self, field: ModelField) -> None:
        """Add a field, or update the value of an existing one with that name.

        Raises:
            ModelError: If the field is flagged as a primary key and the model
                already has a primary key with a different name
        """
        existing = self.get_field(field.name)
        if existing is not None:
            existing.value = field.value
            return

        if field.primary_key:
            if self._primary_key is not None:
                raise ModelError(
                    f"Model {self.table_name!r} already has primary key "
                    f"{self._primary_key.name!r}, cannot add {field.name!r}"
                )
            self._primary_key = field
            return

        self._fields.append(field)

    def append_field(self, field: ModelField) -> None:
        """Append a field even if one with that name already exists.

        Used for fetched rows, where a joined SELECT can return several
        columns with the same name.
        """
        self._fields.append(field)

    def set_field(self, name: str, value: Any) -> None:
        """Update the value of the named column.

        Raises:
            ModelError: If no column has that name
        """
        field = self.get_field(name)
        if field is None:
            raise ModelError(f"Model {self.table_name!r} has no field {name!r}")
        field.value = value

    def copy(self) -> "Model":
        """Copy the model together with its column descriptors."""
        primary_key = replace(self._primary_key) if self._primary_key else None
        return Model(
            table_name=self.table_name,
            primary_key=primary_key,
            fields=[replace(field) for field in self._fields],
        )
