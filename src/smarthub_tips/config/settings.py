"""Centralized configuration using pydantic-settings.

All configuration values are loaded from environment variables with sensible defaults.
Environment variables can be set in .env file or directly in the environment.

Usage:
    from smarthub_tips.config import get_settings
    settings = get_settings()
    print(settings.api_football_key)
"""

from datetime import datetime
from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def _get_app_dir() -> Path:
    """Per-user directory holding the tip store and logs."""
    return Path.home() / ".smarthub-tips"


def _get_current_nba_season() -> str:
    """Determine the current NBA season string based on date.

    NBA season runs October to June, so Jan-Sep belongs to the season
    that started the previous year (e.g. "2025-2026").
    """
    now = datetime.now()
    if now.month >= 10:
        return f"{now.year}-{now.year + 1}"
    return f"{now.year - 1}-{now.year}"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",  # Ignore extra env vars
    )

    # ==========================================================================
    # Tip store
    # ==========================================================================
    database_url: Optional[str] = Field(
        default=None,
        description="SQLAlchemy database URL (default: SQLite file in data_dir)"
    )

    # ==========================================================================
    # API Keys
    # ==========================================================================
    api_football_key: Optional[str] = Field(
        default=None,
        description="API-Football key (api-sports.io)"
    )
    api_basketball_key: Optional[str] = Field(
        default=None,
        description="API-Basketball key (api-sports.io)"
    )

    # ==========================================================================
    # Providers
    # ==========================================================================
    football_api_url: str = Field(
        default="https://v3.football.api-sports.io",
        description="Base URL of the football provider"
    )
    basketball_api_url: str = Field(
        default="https://v1.basketball.api-sports.io",
        description="Base URL of the basketball provider"
    )
    basketball_league_id: int = Field(
        default=12,
        description="API-Basketball league id used for daily game lists (12 = NBA)"
    )
    basketball_season: str = Field(
        default_factory=_get_current_nba_season,
        description="API-Basketball season string, e.g. 2025-2026"
    )
    request_timeout: float = Field(
        default=30.0,
        description="Timeout in seconds for provider requests"
    )

    # ==========================================================================
    # Tips
    # ==========================================================================
    default_tip_limit: int = Field(
        default=10,
        description="Number of tips listed per sport"
    )
    refresh_batch_size: int = Field(
        default=20,
        description="Maximum number of tips refreshed in one batch"
    )

    # ==========================================================================
    # Paths
    # ==========================================================================
    data_dir: Path = Field(
        default_factory=_get_app_dir,
        description="Directory for data files"
    )
    logs_dir: Path = Field(
        default_factory=lambda: _get_app_dir() / "logs",
        description="Directory for log files"
    )

    # ==========================================================================
    # Logging
    # ==========================================================================
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR)"
    )
    log_to_file: bool = Field(
        default=True,
        description="Whether to write logs to file"
    )
    log_max_bytes: int = Field(
        default=1_000_000,
        description="Size at which the log file is rotated"
    )
    log_backup_count: int = Field(
        default=5,
        description="Number of rotated log files kept"
    )

    # ==========================================================================
    # Validators
    # ==========================================================================
    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(f"log_level must be one of {valid_levels}")
        return v_upper

    @field_validator("default_tip_limit", "refresh_batch_size", "log_max_bytes")
    @classmethod
    def validate_positive_limit(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("limits must be positive")
        return v

    @field_validator("football_api_url", "basketball_api_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    @model_validator(mode="after")
    def default_database_url(self) -> "Settings":
        if not self.database_url:
            self.database_url = f"sqlite:///{self.data_dir / 'smarthub_tips.db'}"
        return self

    # ==========================================================================
    # Computed Properties
    # ==========================================================================
    @property
    def football_enabled(self) -> bool:
        """Whether the football provider has credentials."""
        return bool(self.api_football_key)

    @property
    def basketball_enabled(self) -> bool:
        """Whether the basketball provider has credentials."""
        return bool(self.api_basketball_key)

    def ensure_directories(self) -> None:
        """Create all required directories if they don't exist."""
        self.data_dir.mkdir(parents=True, exist_ok=True)
        self.logs_dir.mkdir(parents=True, exist_ok=True)


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings.

    Settings are loaded once and cached for performance.
    Call get_settings.cache_clear() to reload.
    """
    settings = Settings()
    settings.ensure_directories()
    return settings
