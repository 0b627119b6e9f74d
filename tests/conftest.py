"""Global pytest configuration and fixtures."""

from logging import Logger

import pytest

from orm import Model, ModelField, setup_test_logging


@pytest.fixture(scope="session", autouse=True)
def setup_logging() -> None:
    """Setup test logging for all tests."""
    setup_test_logging()


@pytest.fixture(scope="function")
def logger() -> Logger:
    """Provide a logger instance for tests."""
    from orm import get_logger

    return get_logger("test")


@pytest.fixture
def user_model() -> Model:
    """A users table with an auto-increment key and two columns."""
    return Model(
        table_name="users",
        primary_key=ModelField(name="id", type="INTEGER", auto_increment=True),
        fields=[
            ModelField(name="name", type="VARCHAR", length=255),
            ModelField(name="age", type="INTEGER"),
        ],
    )


@pytest.fixture
def post_model() -> Model:
    """A posts table referencing users."""
    return Model(
        table_name="posts",
        primary_key=ModelField(name="id", type="INTEGER", auto_increment=True),
        fields=[
            ModelField(name="user_id", type="INTEGER"),
            ModelField(name="title", type="VARCHAR", length=100),
        ],
    )
