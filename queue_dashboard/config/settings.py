"""
Configuration management for the queue dashboard.
"""

from typing import List, Optional

from dotenv import load_dotenv
from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from queue_dashboard.aggregators.rotation import parse_external_urls
from queue_dashboard.calculators.business_time import BusinessHours
from queue_dashboard.calculators.time_utils import get_zone


def _split_list(raw: str) -> List[str]:
    return [item.strip() for item in raw.split(",") if item.strip()]


class DashboardConfig(BaseSettings):
    """Configuration settings for the queue dashboard."""

    # Suri API Configuration
    api_url: str = Field(default="", alias="SURI_API_URL")
    api_key: str = Field(default="", alias="SURI_API_KEY")
    request_timeout: float = Field(default=10.0, gt=0, alias="REQUEST_TIMEOUT")

    # Polling and SLA
    refresh_interval: int = Field(default=15, ge=1, alias="REFRESH_INTERVAL")
    sla_limit: int = Field(default=15, ge=1, alias="SLA_LIMIT")
    avg_time_alert_limit: int = Field(default=30, ge=1, alias="AVG_TIME_ALERT_LIMIT")

    # Business Hours
    business_start_hour: int = Field(default=8, ge=0, le=23, alias="BUSINESS_START_HOUR")
    business_end_hour: int = Field(default=16, ge=1, le=24, alias="BUSINESS_END_HOUR")
    timezone: str = Field(default="America/Sao_Paulo", alias="BUSINESS_TIMEZONE")

    # Board Layout (comma-separated lists)
    excluded_departments_raw: str = Field(default="", alias="EXCLUDED_DEPARTMENTS")
    no_department_label: str = Field(default="General", alias="NO_DEPARTMENT_LABEL")
    items_per_column: int = Field(default=5, ge=1, alias="ITEMS_PER_COLUMN")
    columns_per_page: int = Field(default=5, ge=1, alias="COLUMNS_PER_PAGE")
    external_urls_raw: str = Field(default="", alias="EXTERNAL_URLS")

    # Application Configuration
    environment: str = Field(default="development", alias="ENVIRONMENT")
    debug: bool = Field(default=False, alias="DEBUG")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    # Retry Configuration
    max_retries: int = Field(default=3, ge=0, alias="MAX_RETRIES")
    retry_delay: float = Field(default=1.0, ge=0, alias="RETRY_DELAY")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        validate_default=True,
        populate_by_name=True,
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v):
        """Ensure log level is valid."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Log level must be one of: {valid_levels}")
        return v.upper()

    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v):
        """Ensure environment is valid."""
        valid_envs = ["development", "testing", "production"]
        if v.lower() not in valid_envs:
            raise ValueError(f"Environment must be one of: {valid_envs}")
        return v.lower()

    @field_validator("timezone")
    @classmethod
    def validate_timezone(cls, v):
        """Ensure the business time zone exists."""
        get_zone(v)
        return v

    @field_validator("api_url")
    @classmethod
    def strip_trailing_slash(cls, v):
        return v.strip().rstrip("/")

    @model_validator(mode="after")
    def validate_business_window(self) -> "DashboardConfig":
        """Ensure business hours form a non-empty window."""
        if self.business_end_hour <= self.business_start_hour:
            raise ValueError(
                f"BUSINESS_END_HOUR ({self.business_end_hour}) must be after "
                f"BUSINESS_START_HOUR ({self.business_start_hour})"
            )
        return self

    @property
    def excluded_departments(self) -> List[str]:
        return _split_list(self.excluded_departments_raw)

    @property
    def external_urls(self) -> List[str]:
        return parse_external_urls(self.external_urls_raw)

    @property
    def is_api_configured(self) -> bool:
        """Whether both the API URL and key are set."""
        return bool(self.api_url and self.api_key)

    def business_hours(self) -> BusinessHours:
        """Business window passed to the calculators."""
        return BusinessHours(
            start_hour=self.business_start_hour,
            end_hour=self.business_end_hour,
            timezone=self.timezone,
        )


def load_config(env_file: Optional[str] = None) -> DashboardConfig:
    """Load configuration from environment variables and .env file."""
    if env_file:
        load_dotenv(env_file)
    else:
        load_dotenv()

    return DashboardConfig()


# Global configuration instance
_config: Optional[DashboardConfig] = None


def get_config() -> DashboardConfig:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = load_config()
    return _config


def reload_config(env_file: Optional[str] = None) -> DashboardConfig:
    """Reload configuration (useful for testing)."""
    global _config
    _config = load_config(env_file)
    return _config
