"""Application Settings using Pydantic.

Environment-based configuration with validation.

Environment Variables (prefix CLEAN_DDD_):
    CLEAN_DDD_ENVIRONMENT: development | staging | production
    CLEAN_DDD_DEBUG: Enable debug mode (default: False)
    CLEAN_DDD_DATABASE_URL: SQLAlchemy async URL (default: in-memory SQLite)
    CLEAN_DDD_DEFAULT_CURRENCY: Currency for orders placed without one
    CLEAN_DDD_OUTBOX_BATCH_SIZE: Messages per relay batch
    CLEAN_DDD_LOG_LEVEL / CLEAN_DDD_LOG_FORMAT

Example .env file:
    CLEAN_DDD_ENVIRONMENT=production
    CLEAN_DDD_DATABASE_URL=sqlite+aiosqlite:///./clean_ddd.db
    CLEAN_DDD_DEFAULT_CURRENCY=EUR
    CLEAN_DDD_LOG_FORMAT=json
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings.

    All settings can be overridden via environment variables.
    """

    model_config = SettingsConfigDict(
        env_prefix="CLEAN_DDD_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ==================== Core ====================
    app_name: str = "clean-ddd"
    environment: Literal["development", "staging", "production"] = "development"
    debug: bool = False

    # ==================== Database ====================
    database_url: str = Field(
        default="sqlite+aiosqlite:///:memory:",
        description="SQLAlchemy async connection string",
    )
    db_echo: bool = Field(default=False, description="Log SQL queries")

    # ==================== Ordering ====================
    default_currency: str = Field(
        default="USD",
        min_length=3,
        max_length=3,
        description="ISO 4217 code used when PlaceOrder has no currency",
    )

    # ==================== Outbox ====================
    outbox_batch_size: int = Field(default=100, ge=1, le=1000)

    # ==================== Logging ====================
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    log_format: Literal["json", "console"] = "console"

    # ==================== Validators ====================

    @field_validator("default_currency")
    @classmethod
    def normalize_currency(cls, v: str) -> str:
        if not v.isalpha():
            raise ValueError("default_currency must be a 3-letter code")
        return v.upper()

    @property
    def is_production(self) -> bool:
        """Check if running in production."""
        return self.environment == "production"

    @property
    def is_development(self) -> bool:
        return self.environment == "development"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Call get_settings.cache_clear() to reload.
    """
    return Settings()
