from functools import lru_cache

from pydantic_settings import BaseSettings

# Relative to the working directory of the host application
_ENV_FILES = (".env",)

DEFAULT_API_URL = "https://api.completionlog.dev/v1/completions"


class Settings(BaseSettings):
    """Library settings loaded from environment variables."""

    # Completion API
    completion_api_key: str = ""
    completion_api_url: str = DEFAULT_API_URL
    completion_api_timeout: float = 30.0

    # Logging — per-category log levels (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    log_level: str = "INFO"          # completion_log.*
    log_level_http: str = "WARNING"  # httpx / httpcore — outbound HTTP

    model_config = {
        "env_file": _ENV_FILES,
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance — reads .env once."""
    return Settings()
