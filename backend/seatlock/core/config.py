"""
Application configuration using pydantic-settings.
All config is loaded from environment variables with sensible defaults.
Seat count and lock timeout are fixed for the lifetime of the process.
"""

from pydantic import Field
from pydantic_settings import BaseSettings
from functools import lru_cache

from seatlock import __version__


class Settings(BaseSettings):
    # Application
    APP_NAME: str = "Seat Lock Service"
    APP_VERSION: str = __version__
    ENVIRONMENT: str = "development"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Seat inventory
    TOTAL_SEATS: int = Field(default=20, gt=0)
    LOCK_TIMEOUT_MS: int = Field(default=60_000, gt=0)  # 1 minute

    model_config = {
        "env_file": ".env",
        "case_sensitive": True,
    }


@lru_cache()
def get_settings() -> Settings:
    return Settings()
