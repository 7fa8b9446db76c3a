import os
from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import AnyUrl, Field


def _env_files() -> tuple[str, ...]:
    # .env.<ENV> overrides .env, so each deployment picks its own DB_URL
    env = os.getenv("ENV", "dev")
    return (".env", f".env.{env}")


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=_env_files(), env_file_encoding="utf-8", extra="ignore")

    ENV: str = Field(default="dev", description="dev|staging|prod|test")
    APP_NAME: str = "Agenda API"
    APP_HOST: str = "0.0.0.0"
    APP_PORT: int = 8081

    # DB
    DB_URL: AnyUrl | str = "sqlite+aiosqlite:///./agenda.db"
    DB_ECHO: bool = False
    AUTO_MIGRATE: bool = Field(default=False, description="Run alembic upgrade head on startup")

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FILE: str | None = None

    # CORS
    CORS_ORIGINS: list[str] = ["http://localhost:3000", "http://127.0.0.1:3000"]

@lru_cache
def get_settings() -> Settings:
    return Settings()
