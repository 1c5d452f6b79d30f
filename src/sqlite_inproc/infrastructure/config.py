"""Configuration management for the in-process SQLite bridge."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from sqlite_inproc.domain.value_objects import InMemory, Location
from sqlite_inproc.domain.value_objects import Path as PathLocation


class DatabaseConfig(BaseModel):
    """Database handle configuration."""

    path: Path | None = Field(
        default=None, description="Database file path (None for in-memory)"
    )
    statement_cache_size: int = Field(
        default=16, ge=0, description="Prepared statements cached per connection"
    )
    busy_timeout_seconds: float = Field(
        default=5.0, ge=0, description="Seconds to wait on a locked database file"
    )

    def location(self) -> Location:
        """Return the configured location."""
        if self.path is None:
            return InMemory()
        return PathLocation(self.path)


class ObservabilityConfig(BaseModel):
    """Observability configuration."""

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO", description="Log level"
    )
    log_format: Literal["json", "console"] = Field(default="json", description="Log format")
    otel_endpoint: str | None = Field(
        default=None, description="OpenTelemetry collector endpoint"
    )
    otel_service_name: str = Field(
        default="sqlite_inproc", description="Service name for tracing"
    )


class Config(BaseSettings):
    """Main configuration for the in-process SQLite bridge."""

    model_config = SettingsConfigDict(
        env_prefix="SQLITE_INPROC_",
        env_nested_delimiter="__",
        case_sensitive=False,
    )

    database: DatabaseConfig = Field(default_factory=DatabaseConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)

    def ensure_directories(self) -> None:
        """Ensure the database file's parent directory exists.

        Never called implicitly; applications that want the directory
        created call it before opening the configured location.
        """
        if self.database.path is not None:
            self.database.path.parent.mkdir(parents=True, exist_ok=True)


@lru_cache
def get_config() -> Config:
    """Get the global configuration instance. Reading it has no side effects."""
    return Config()
