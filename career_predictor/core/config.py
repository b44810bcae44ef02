"""Configuration management for the Career Success Predictor."""

from functools import lru_cache

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Load environment variables from .env file (only if accessible)
try:
    load_dotenv()
except (PermissionError, OSError):
    # In sandboxed environments, .env might not be accessible
    # Environment variables should be set directly
    pass


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )

    # Environment
    PREDICTOR_ENV: str = Field(default="dev", description="Environment: dev, staging, prod")

    # Liveness probe
    PING_MESSAGE: str = Field(default="ping", description="Message returned by /api/ping")

    # CORS
    CORS_ALLOW_ORIGINS: list[str] = Field(
        default=["*"], description="Origins allowed to call the API from a browser"
    )


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Returns:
        Settings instance
    """
    return Settings()
