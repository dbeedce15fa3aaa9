"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - Connection parameters come from environment variables or .env
    - get_settings() is cached (lru_cache) — single instance per process
    - database_url always carries an async driver (postgresql+asyncpg://)

Design Decisions:
    - Host/name/user/password as separate fields: matches how the database is
      provisioned; DATABASE_URL still wins when set (ADR: hosted platforms export a URL)
    - Defaults match a local postgres container; deployments override every DATABASE_* value
"""

from functools import lru_cache

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import URL


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Database
    database_host: str = "localhost"
    database_port: int = 5432
    database_name: str = "postgres"
    database_user: str = "postgres"
    database_password: str = "mysecretpassword"
    database_url_override: str | None = Field(
        None, validation_alias=AliasChoices("database_url", "database_url_override"),
    )

    database_pool_size: int = 20
    database_max_overflow: int = 10

    # Startup
    seed_on_startup: bool = True

    # API
    cors_origins: list[str] = ["http://localhost:3000"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    @field_validator("database_url_override", mode="before")
    @classmethod
    def convert_postgres_url(cls, v: str | None) -> str | None:
        """Platforms hand out postgresql:// but asyncpg needs postgresql+asyncpg://."""
        if isinstance(v, str) and v.startswith("postgresql://"):
            return v.replace("postgresql://", "postgresql+asyncpg://", 1)
        return v or None

    @property
    def database_url(self) -> str:
        if self.database_url_override:
            return self.database_url_override
        return URL.create(
            "postgresql+asyncpg",
            username=self.database_user,
            password=self.database_password,
            host=self.database_host,
            port=self.database_port,
            database=self.database_name,
        ).render_as_string(hide_password=False)


@lru_cache
def get_settings() -> Settings:
    return Settings()
