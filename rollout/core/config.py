"""Configuration management for the Rollout Dashboard."""

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
    ROLLOUT_ENV: str = Field(default="dev", description="Environment: dev, staging, prod")
    LOG_LEVEL: str | None = Field(
        default=None, description="Explicit log level; overrides the environment default"
    )

    # Advisor ("brain") upstream
    BRAIN_URL: str = Field(
        default="http://127.0.0.1:8088", description="Base URL of the advisor service"
    )
    BRAIN_QUERY_TIMEOUT: float = Field(
        default=15.0, description="Timeout in seconds for advisor queries (LLM-backed)"
    )
    BRAIN_HEALTH_TIMEOUT: float = Field(
        default=1.5, description="Timeout in seconds for the advisor health probe"
    )
    BRAIN_LOG_TIMEOUT: float = Field(
        default=1.5, description="Timeout in seconds for advisor usage logging"
    )
    BRAIN_SESSION_ID: str = Field(
        default="tgif-dashboard", description="Session id used when the client sends none"
    )
    BRAIN_USER_ID: str = Field(default="dashboard", description="User id sent to the advisor")

    # Store
    SEED_DATA: bool = Field(default=True, description="Load seed data into the default store")


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Returns:
        Settings instance
    """
    return Settings()
