from typing import Literal, List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):

    # ---- app/runtime ----
    env: Literal["dev", "staging", "prod"] = "dev"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    # ---- API server configuration ----
    api_host: str = "127.0.0.1"  # localhost for dev, 0.0.0.0 for docker/prod
    api_port: int = 3333
    api_reload: bool = False  # Auto-reload on code changes (dev only)
    api_workers: int = 1  # Each worker holds its own in-memory store
    cors_origins: List[str] = ["*"]  # Allowed CORS origins (restrict in prod)
    cors_allow_credentials: bool = False

    model_config = SettingsConfigDict(
        env_file = ".env",
        env_prefix="APP_",      # APP_ENV, APP_LOG_LEVEL, etc.
        env_nested_delimiter='__',
        extra = "ignore"
    )


def get_settings() -> Settings:
    """Build settings from the environment and .env; each call re-reads them."""
    return Settings()
