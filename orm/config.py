"""Configuration management for the orm package."""

import os
from typing import Any

from dotenv import load_dotenv
from pydantic import BaseModel, Field

from .types import DatabaseType, Environment


class DatabaseConfig(BaseModel):
    """Connection settings for a database client.

    For SQLite ``host`` is the path of the database file. For MySQL the
    storage ``engine``, ``charset`` and ``collate`` are appended to every
    CREATE TABLE statement when they are set.
    """

    host: str = Field(default="", description="Server host or SQLite file path")
    database: str = Field(default="", description="Database name")
    username: str = Field(default="", description="Database user")
    password: str = Field(default="", description="Database password")
    port: int = Field(default=0, ge=0, description="Server port (0 for default)")
    engine: str = Field(default="", description="MySQL storage engine")
    charset: str = Field(default="", description="MySQL default charset")
    collate: str = Field(default="", description="MySQL collation")
    type: str = Field(default="", description="Database type (sqlite or mysql)")

    def get_type(self) -> str:
        """Get the database type, falling back to SQLite."""
        if self.type:
            return self.type
        return DatabaseType.SQLITE.value


class Settings(BaseModel):
    """Application settings."""

    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Application environment (development/production/testing)",
    )
    log_level: str = Field(default="INFO", description="Logging level")
    database: DatabaseConfig = Field(
        default_factory=DatabaseConfig, description="Database connection settings"
    )

    def __init__(self, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        if self.environment == Environment.TESTING:
            self.log_level = "DEBUG"

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.environment == Environment.DEVELOPMENT

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.environment == Environment.PRODUCTION

    @property
    def is_testing(self) -> bool:
        """Check if running in testing mode."""
        return self.environment == Environment.TESTING


def load_database_config() -> DatabaseConfig:
    """Load database settings from ORM_DB_* environment variables."""
    return DatabaseConfig(
        host=os.getenv("ORM_DB_HOST", ""),
        database=os.getenv("ORM_DB_NAME", ""),
        username=os.getenv("ORM_DB_USER", ""),
        password=os.getenv("ORM_DB_PASSWORD", ""),
        port=int(os.getenv("ORM_DB_PORT", "0")),
        engine=os.getenv("ORM_DB_ENGINE", ""),
        charset=os.getenv("ORM_DB_CHARSET", ""),
        collate=os.getenv("ORM_DB_COLLATE", ""),
        type=os.getenv("ORM_DB_TYPE", "").lower(),
    )


def load_settings() -> Settings:
    """Load settings from environment variables."""

    # Load .env file if it exists
    load_dotenv()

    return Settings(
        environment=Environment(os.getenv("ORM_ENV", "development")),
        log_level=os.getenv("ORM_LOG_LEVEL", "INFO").upper(),
        database=load_database_config(),
    )
