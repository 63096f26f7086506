"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - All secrets come from environment variables (never hardcoded)
    - get_settings() is cached (lru_cache) — single instance per process
    - duplicate_code_status is 400 or 409, nothing else

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Defaults provided for all non-secret settings: works out-of-the-box with docker-compose
    - duplicate_code_status defaults to 400: existing clients treat a duplicate
      IATA code as a bad request; 409 is opt-in
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    app_name: str = "Aeroportos API"
    app_version: str = "1.0.0"

    # Database
    database_url: str = (
        "postgresql+asyncpg://aeroportos:aeroportos@db:5432/aeroportos"
    )

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_postgres_url(cls, v: str) -> str:
        """Hosting platforms provide postgresql:// but asyncpg needs postgresql+asyncpg://."""
        if isinstance(v, str) and v.startswith("postgresql://"):
            return v.replace("postgresql://", "postgresql+asyncpg://", 1)
        return v

    database_pool_size: int = 20
    database_max_overflow: int = 10

    # API
    cors_origins: list[str] = ["http://localhost:5173"]
    duplicate_code_status: int = 400

    @field_validator("duplicate_code_status")
    @classmethod
    def check_duplicate_code_status(cls, v: int) -> int:
        if v not in (400, 409):
            raise ValueError("duplicate_code_status must be 400 or 409")
        return v

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
