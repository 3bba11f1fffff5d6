from __future__ import annotations

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def normalize_database_url(url: str) -> str:
    """
    Clean up a DATABASE_URL pasted from a hosting dashboard.

    SQLite URLs pass through untouched. Postgres URLs are forced onto the
    psycopg (v3) driver:
      - postgres://
      - postgresql://
      - postgresql+psycopg2://
    """
    if not url:
        return url

    # Remove hidden whitespace/newlines that often get pasted into env vars
    url = url.strip()

    if url.startswith("sqlite") or url.startswith("postgresql+psycopg://"):
        return url

    if url.startswith("postgresql+psycopg2://"):
        return url.replace("postgresql+psycopg2://", "postgresql+psycopg://", 1)

    if url.startswith("postgres://"):
        return url.replace("postgres://", "postgresql+psycopg://", 1)

    if url.startswith("postgresql://"):
        return url.replace("postgresql://", "postgresql+psycopg://", 1)

    return url


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    service_name: str = "Customer API"

    # env: dev | prod
    env: str = "dev"

    # Single-file store by default
    database_url: str = "sqlite:///./customers.db"
    sql_echo: bool = False

    host: str = "0.0.0.0"
    port: int = 5000

    log_level: str = "INFO"

    cors_origins: list[str] = ["*"]

    # List endpoint paging
    default_page_size: int = 10
    max_page_size: int = 100

    @field_validator("database_url")
    @classmethod
    def _clean_database_url(cls, value: str) -> str:
        return normalize_database_url(value)

    @field_validator("env")
    @classmethod
    def _lower_env(cls, value: str) -> str:
        return value.strip().lower()

    @field_validator("log_level")
    @classmethod
    def _upper_log_level(cls, value: str) -> str:
        return value.strip().upper()


settings = Settings()
