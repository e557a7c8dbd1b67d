"""
Application configuration using Pydantic Settings.

Loads configuration from environment variables (.env file).
"""

from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

from app.schemas.thresholds import ThresholdSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Project Info
    PROJECT_NAME: str = "Athlete Monitor"
    VERSION: str = "0.1.0"

    DEBUG: bool = False

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FILE: Optional[str] = None

    # Database
    DATABASE_URL: str = "sqlite:///./athlete_monitor.db"

    # Threshold defaults (overridden by the threshold_settings table)
    ACWR_MODERATE: float = 1.3
    ACWR_HIGH: float = 1.5
    LOAD_SPIKE_PERCENT: float = 30.0
    DEFAULT_DAYS: int = 30

    # Compliance policy
    WEEKLY_SESSION_TARGET: int = 5

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")

    def default_thresholds(self) -> ThresholdSettings:
        return ThresholdSettings(acwr_moderate=self.ACWR_MODERATE, acwr_high=self.ACWR_HIGH,
                                 load_spike_percent=self.LOAD_SPIKE_PERCENT, default_days=self.DEFAULT_DAYS, )


# Global settings instance
settings = Settings()
