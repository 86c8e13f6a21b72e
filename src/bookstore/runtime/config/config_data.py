"""Typed view of the ``config`` section of config.yaml."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field
from sqlalchemy.engine import make_url


class LoggingConfig(BaseModel):
    """Where and how verbosely the service logs."""

    level: str = Field(default="INFO", description="Minimum level for every sink")
    file: str = Field(default="", description="Rotating log file, empty for stderr only")
    rotation_mb: int = Field(default=10, description="Rotate the log file at this size")


class DatabaseConfig(BaseModel):
    """Book storage connection settings."""

    url: str = Field(default="sqlite:///./books.db", description="SQLAlchemy URL")
    echo: bool = Field(default=False, description="Log emitted SQL")
    pool_size: int = Field(default=5, description="Pool size for server databases")

    @property
    def backend(self) -> str:
        return make_url(self.url).get_backend_name()

    @property
    def is_sqlite(self) -> bool:
        return self.backend == "sqlite"

    @property
    def is_in_memory(self) -> bool:
        """True for SQLite URLs without a database file."""
        return self.is_sqlite and make_url(self.url).database in (None, "", ":memory:")


class AppConfig(BaseModel):
    environment: Literal["development", "production", "test"] = "development"
    host: str = "localhost"
    port: int = 8000


class ConfigData(BaseModel):
    """Root of the configuration tree."""

    app: AppConfig = Field(default_factory=AppConfig)
    database: DatabaseConfig = Field(default_factory=DatabaseConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
