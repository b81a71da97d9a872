"""
Application Settings

Centralized configuration management using Pydantic Settings.
All configuration is loaded from environment variables with sensible defaults.

Configuration Categories:
=========================
- Application: Basic app info (name, version, debug mode)
- Logging: Level and optional rotating log file
- Server: Host, port and initial server role (standby/active)
- Database: Embedded SQLite connection URL
- Jobs: Periodic stats interval and simulated processing delays
- CORS: Cross-origin resource sharing

Environment Variables:
======================
Settings are loaded from environment variables or .env file.
Environment variables take precedence over .env file values.

Usage:
======
    from todo_service.config.settings import settings

    # Access settings
    db_url = settings.DATABASE_URL
    is_dev = settings.is_development
"""

from functools import lru_cache
from typing import List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings can be overridden via environment variables.
    Use .env file for local development.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # ═══════════════════════════════════════════════════════════════════════════════
    # APPLICATION
    # ═══════════════════════════════════════════════════════════════════════════════

    APP_NAME: str = "Todo Service"
    APP_VERSION: str = "1.0.0"
    APP_ENV: str = "development"
    DEBUG: bool = False

    # ═══════════════════════════════════════════════════════════════════════════════
    # LOGGING
    # ═══════════════════════════════════════════════════════════════════════════════

    LOG_LEVEL: str = "INFO"
    LOG_FILE: str = Field(
        default="",
        description="Path of the rotating log file (empty disables file output)",
    )
    LOG_MAX_BYTES: int = Field(
        default=10 * 1024 * 1024,
        description="Rotate the log file once it reaches this size",
    )
    LOG_BACKUP_COUNT: int = Field(
        default=5,
        description="Number of rotated log files to keep",
    )

    # ═══════════════════════════════════════════════════════════════════════════════
    # SERVER
    # ═══════════════════════════════════════════════════════════════════════════════

    HOST: str = "0.0.0.0"
    PORT: int = 8080
    SERVER_ROLE: str = Field(
        default="standby",
        description="Initial admission gate mode: 'standby' or 'active'",
    )

    # ═══════════════════════════════════════════════════════════════════════════════
    # DATABASE
    # ═══════════════════════════════════════════════════════════════════════════════

    DATABASE_URL: str = Field(
        default="sqlite+aiosqlite:///./todos.db",
        description="SQLAlchemy connection URL (use the aiosqlite driver for async)",
    )

    # ═══════════════════════════════════════════════════════════════════════════════
    # BACKGROUND JOBS
    # ═══════════════════════════════════════════════════════════════════════════════

    STATS_JOB_INTERVAL_SECONDS: float = Field(
        default=60.0,
        gt=0,
        description="Interval between periodic stats reports",
    )
    DASHBOARD_PROFILE_DELAY_SECONDS: float = Field(
        default=1.0,
        ge=0,
        description="Simulated latency of the dashboard profile lookup",
    )
    REPORT_PROCESSING_DELAY_SECONDS: float = Field(
        default=2.0,
        ge=0,
        description="Simulated latency of report post-processing",
    )

    # ═══════════════════════════════════════════════════════════════════════════════
    # CORS
    # ═══════════════════════════════════════════════════════════════════════════════

    CORS_ORIGINS: List[str] = Field(
        default=["http://localhost:3000", "http://localhost:8080"],
        description="Allowed CORS origins",
    )

    # ═══════════════════════════════════════════════════════════════════════════════
    # VALIDATORS
    # ═══════════════════════════════════════════════════════════════════════════════

    @field_validator("SERVER_ROLE")
    @classmethod
    def _normalize_role(cls, value: str) -> str:
        role = value.strip().lower()
        if role not in ("standby", "active"):
            raise ValueError(f"SERVER_ROLE must be 'standby' or 'active', got {value!r}")
        return role

    # ═══════════════════════════════════════════════════════════════════════════════
    # PROPERTIES
    # ═══════════════════════════════════════════════════════════════════════════════

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.APP_ENV == "development"


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.

    Returns:
        Settings: Application settings instance
    """
    return Settings()


# Global settings instance for convenient import
settings = get_settings()
