"""Tests for table models."""

import pytest

from orm.exceptions import ModelError
from orm.models import Model, ModelField


def test_columns_start_with_primary_key(user_model: Model) -> None:
    """Test get_columns orders the primary key first."""
    assert [column.name for column in user_model.get_columns()] == [
        "id",
        "name",
        "age",
    ]


def test_set_primary_key_forces_flag() -> None:
    """Test set_primary_key marks the field as primary key."""
    model = Model(table_name="t")
    field = ModelField(name="id", type="INTEGER")
    model.set_primary_key(field)

    assert model.get_primary_key() is field
    assert field.primary_key is True
    assert model.fields == []


def test_set_primary_key_replaces_same_named_field() -> None:
    """Test promoting an existing field does not duplicate it."""
    model = Model(table_name="t", fields=[ModelField(name="code", type="CHAR")])
    model.set_primary_key(ModelField(name="code", type="CHAR"))

    assert [column.name for column in model.get_columns()] == ["code"]


def test_add_field_updates_existing_value(user_model: Model) -> None:
    """Test re-adding a field name updates the value in place."""
    user_model.add_field(ModelField(name="name", type="VARCHAR", value="kim"))

    assert len(user_model.fields) == 2
    assert user_model.get_field("name").value == "kim"


def test_add_field_refreshes_primary_key_value(user_model: Model) -> None:
    """Test re-adding the primary key name updates its value."""
    user_model.add_field(ModelField(name="id", value=7))

    assert user_model.primary_key.value == 7
    assert len(user_model.get_columns()) == 3


def test_add_field_rejects_second_primary_key(user_model: Model) -> None:
    """Test a second, differently named primary key is rejected."""
    with pytest.raises(ModelError):
        user_model.add_field(ModelField(name="uuid", primary_key=True))


def test_add_primary_key_field_to_model_without_key() -> None:
    """Test a primary key field becomes the key of a model without one."""
    model = Model(table_name="t")
    model.add_field(ModelField(name="id", primary_key=True))

    assert model.primary_key is not None
    assert model.primary_key.name == "id"


def test_set_field(user_model: Model) -> None:
    """Test set_field updates the named column."""
    user_model.set_field("age", 30)
    assert user_model.get_field("age").value == 30


def test_set_field_unknown_name(user_model: Model) -> None:
    """Test set_field rejects unknown columns."""
    with pytest.raises(ModelError):
        user_model.set_field("missing", 1)


def test_get_field_missing(user_model: Model) -> None:
    """Test get_field returns None for unknown columns."""
    assert user_model.get_field("missing") is None


def test_set_table_name(user_model: Model) -> None:
    """Test the table name can be changed."""
    user_model.set_table_name("members")
    assert user_model.get_table_name() == "members"


def test_copy_is_independent(user_model: Model) -> None:
    """Test copies do not share column descriptors."""
    copied = user_model.copy()
    user_model.set_field("name", "changed")

    assert copied.get_field("name").value is None
    assert copied.get_table_name() == "users"
    assert copied.primary_key is not user_model.primary_key


def test_append_field_keeps_duplicate_names() -> None:
    """Test append_field never merges columns with the same name."""
    model = Model(table_name="row")
    model.append_field(ModelField(name="id", value=2))
    model.append_field(ModelField(name="id", value=1))

    assert [(field.name, field.value) for field in model.get_columns()] == [
        ("id", 2),
        ("id", 1),
    ]
    assert model.get_field("id").value == 2
