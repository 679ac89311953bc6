# This file defines runtime settings for the API layer in one place.
# It exists so database coordinates, listen address, and CORS origins can be configured without code edits.
# The config loader reads `.env` plus environment variables and applies defaults for local development.
# Database settings accept either a full DATABASE_URL or the individual DB_* parts.

from __future__ import annotations

import os
from functools import lru_cache

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator
from sqlalchemy.engine import URL


class ApiConfig(BaseModel):
    """Typed API runtime configuration."""

    model_config = ConfigDict(extra="ignore")

    api_name: str = "Club Registry API"
    host: str = "0.0.0.0"
    port: int = 5000
    environment: str = "local"
    log_level: str = "INFO"
    app_version: str = "0.1.0"
    allowed_origins: list[str] = Field(default_factory=lambda: ["*"])
    # Inserts use `RETURNING id`: PostgreSQL and SQLite 3.35+ work, MySQL does not.
    db_driver: str = "postgresql+psycopg2"
    db_host: str = "localhost"
    db_port: int | None = None
    db_user: str | None = None
    db_password: str | None = None
    db_name: str | None = None
    database_url_override: str | None = None
    create_schema: bool = False

    @field_validator("port")
    @classmethod
    def validate_port(cls, value: int) -> int:
        if not 0 < value < 65536:
            raise ValueError("port must be between 1 and 65535.")
        return value

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        return value.strip().upper() or "INFO"

    @property
    def database_url(self) -> str:
        if self.database_url_override:
            return self.database_url_override
        url = URL.create(
            drivername=self.db_driver,
            username=self.db_user,
            password=self.db_password,
            host=self.db_host,
            port=self.db_port,
            database=self.db_name,
        )
        return url.render_as_string(hide_password=False)


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    value = raw.strip().lower()
    if value in {"1", "true", "yes", "y", "on"}:
        return True
    if value in {"0", "false", "no", "n", "off"}:
        return False
    raise ValueError(f"{name} must be boolean-like, got {raw!r}")


def _env_int(name: str, default: int | None) -> int | None:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return int(raw)


def _env_list(name: str, default: list[str] | None = None) -> list[str]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return list(default or [])
    return [item.strip() for item in raw.split(",") if item.strip()]


def _env_str(name: str) -> str | None:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return None
    return raw


def load_api_config(*, load_env: bool = True) -> ApiConfig:
    """Load API configuration from `.env` and process environment."""

    if load_env:
        load_dotenv()

    config_values: dict[str, object] = {
        "api_name": os.getenv("API_NAME", "Club Registry API"),
        "host": os.getenv("API_HOST", "0.0.0.0"),
        "port": _env_int("API_PORT", 5000),
        "environment": os.getenv("ENV", "local"),
        "log_level": os.getenv("LOG_LEVEL", "INFO"),
        "app_version": os.getenv("APP_VERSION", "0.1.0"),
        "allowed_origins": _env_list("API_ALLOWED_ORIGINS", ["*"]),
        "db_driver": os.getenv("DB_DRIVER", "postgresql+psycopg2"),
        "db_host": os.getenv("DB_HOST", "localhost"),
        "db_port": _env_int("DB_PORT", None),
        "db_user": _env_str("DB_USER"),
        "db_password": _env_str("DB_PASS"),
        "db_name": _env_str("DB_NAME"),
        "database_url_override": _env_str("DATABASE_URL"),
        "create_schema": _env_bool("DB_CREATE_SCHEMA", False),
    }

    return ApiConfig.model_validate(config_values)


@lru_cache(maxsize=1)
def get_api_config() -> ApiConfig:
    """Cached accessor for API config."""

    return load_api_config()
