"""Application configuration with environment variable support."""

from typing import List
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .models.mode import Mode


class Settings(BaseSettings):
    """
    Application settings with environment variable support.

    Priority: ENV > .env.local > .env > defaults
    .env.local is gitignored for local overrides
    """

    model_config = SettingsConfigDict(
        env_file=(".env", ".env.local"),
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # Service configuration
    PROJECT_NAME: str = "Move On Up"
    DEBUG: bool = False
    HOST: str = "localhost"
    PORT: int = 3457
    LOG_LEVEL: str = "INFO"

    # Navigation
    DEFAULT_MODE: Mode = Mode.STANDARD
    MAX_CHAIN_STEPS: int = 50

    # Security
    ALLOWED_ORIGINS: List[str] = ["chrome-extension://"]

    @field_validator("DEFAULT_MODE", mode="before")
    @classmethod
    def _parse_mode(cls, value):
        return Mode.parse(value)


# Global settings instance
settings = Settings()
