"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - Store credentials come from environment variables (never hardcoded)
    - get_settings() is cached (lru_cache) — single instance per process
    - DATABASE_URL, when set, wins over the DB_* parts

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Defaults provided for all non-secret settings: works out-of-the-box with docker-compose
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import URL


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Store
    db_host: str = "db"
    db_port: int = 5432
    db_username: str = "calculator"
    db_password: str = ""
    db_name: str = "calculator"
    database_url: str | None = None

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_postgres_url(cls, v: str | None) -> str | None:
        """Hosting platforms hand out postgresql:// but asyncpg needs postgresql+asyncpg://."""
        if isinstance(v, str) and v.startswith("postgresql://"):
            return v.replace("postgresql://", "postgresql+asyncpg://", 1)
        return v or None

    database_pool_size: int = 20
    database_max_overflow: int = 10

    # Server
    host: str = "0.0.0.0"
    port: int = 3000

    # Observability
    service_name: str = "calculator-microservice"
    log_level: str = "INFO"
    log_format: str = "json"
    log_dir: str = "logs"

    def resolved_database_url(self) -> str:
        """DATABASE_URL if given, else built from the DB_* parts."""
        if self.database_url:
            return self.database_url
        return URL.create(
            "postgresql+asyncpg",
            username=self.db_username,
            password=self.db_password or None,
            host=self.db_host,
            port=self.db_port,
            database=self.db_name,
        ).render_as_string(hide_password=False)


@lru_cache
def get_settings() -> Settings:
    return Settings()
