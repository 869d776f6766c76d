"""Configuration management for Pomodoro Todo."""

from __future__ import annotations

from functools import lru_cache
from typing import Literal
from urllib.parse import quote_plus

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class PostgresSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="POSTGRES_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    host: str = "localhost"
    port: int = 5432
    database: str = "todoapp"
    user: str = "postgres"
    password: str = ""
    sslmode: str = "prefer"

    def conninfo(self, database: str | None = None) -> dict[str, object]:
        """Keyword arguments for ``psycopg.connect``."""
        return {
            "host": self.host,
            "port": self.port,
            "dbname": database or self.database,
            "user": self.user,
            "password": self.password,
            "sslmode": self.sslmode,
        }

    def sqlalchemy_url(self, database: str | None = None) -> str:
        """Build a SQLAlchemy URL for Alembic migrations."""
        return (
            f"postgresql+psycopg://{quote_plus(self.user)}:{quote_plus(self.password)}"
            f"@{self.host}:{self.port}/{database or self.database}"
            f"?sslmode={self.sslmode}"
        )


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = "INFO"
    log_json: bool = False
    service_name: str = "Pomodoro Todo API"
    store_backend: Literal["memory", "postgres"] = "memory"
    cors_allow_origins: list[str] = ["*"]
    seed_sample_data: bool = False

    @field_validator("store_backend", mode="before")
    @classmethod
    def _normalize_backend(cls, v: object) -> object:
        return v.strip().lower() if isinstance(v, str) else v

    @property
    def postgres(self) -> PostgresSettings:
        return PostgresSettings()


@lru_cache
def get_settings() -> Settings:
    return Settings()
