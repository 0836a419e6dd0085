"""
Application configuration using Pydantic Settings.
All configuration is loaded from environment variables.
"""
from functools import lru_cache
from typing import List

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# SQLite URLs whose data disappears when the process exits
_EPHEMERAL_DATABASE_URLS = (
    "sqlite://",
    "sqlite+aiosqlite://",
    "sqlite:///:memory:",
    "sqlite+aiosqlite:///:memory:",
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Application
    app_name: str = "Workova API"
    app_version: str = "1.0.0"
    debug: bool = False
    environment: str = "development"  # development, staging, production
    log_level: str = "INFO"

    # API
    api_prefix: str = "/api/v1"
    cors_origins: List[str] = ["http://localhost:8081", "http://localhost:19006"]

    # Local store
    database_url: str = "sqlite+aiosqlite:///./workova.db"
    database_echo: bool = False

    # Rate limiting
    rate_limit_enabled: bool = True
    rate_limit_storage_uri: str = "memory://"

    # Marketplace rules
    max_message_length: int = 1000
    moderate_chat_messages: bool = False  # chat text skips the filter unless enabled

    @model_validator(mode="after")
    def _reject_ephemeral_store_in_production(self) -> "Settings":
        """Fail loud if production/staging would keep marketplace state in memory."""
        if self.environment in ("production", "staging"):
            if self.database_url in _EPHEMERAL_DATABASE_URLS:
                raise ValueError(
                    f"'database_url' points at an in-memory database. "
                    f"Set a durable DATABASE_URL in {self.environment}."
                )
        return self


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


settings = get_settings()
