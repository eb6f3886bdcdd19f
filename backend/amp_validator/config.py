"""Application configuration via environment variables."""

from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Engine
    ENGINE_FACTORY: str = ""  # "package.module:callable" returning the engine
    EAGER_ENGINE_LOAD: bool = False

    # Validation
    DEFAULT_FORMAT: str = "AMP"

    # Fetch
    FETCH_TIMEOUT_SECONDS: float = 30.0

    # Service
    DEBUG: bool = False
    LOG_LEVEL: str = "info"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


@lru_cache
def get_settings() -> Settings:
    return Settings()
