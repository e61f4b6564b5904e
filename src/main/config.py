"""
Application Settings - Main Layer

Use Pydantic Settings for configuration management.
This module handles configuration settings provided using
environment variables, .env files and default values.
"""

from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.domain.services.pass_time_formatter import (
    DEFAULT_TIME_FORMAT,
    PassTimeFormatter,
)
from src.shared import EnumEnvironment, EnumLogLevel


class ProviderSettings(BaseSettings):
    """Third-party provider endpoints."""

    ip_lookup_url: str = Field(
        default="https://api.ipify.org", description="Public IP lookup API"
    )
    geolocation_url: str = Field(
        default="http://ipwho.is", description="IP geolocation API"
    )
    flyover_url: str = Field(
        default="https://iss-flyover.herokuapp.com",
        description="ISS flyover prediction API",
    )
    timeout_seconds: float = Field(
        default=5.0, gt=0, description="Timeout applied to every provider request"
    )

    model_config = SettingsConfigDict(
        env_prefix="PROVIDER_", case_sensitive=False, extra="ignore"
    )


class DisplaySettings(BaseSettings):
    """Rendering of pass rise times."""

    timezone: Optional[str] = Field(
        default=None,
        description="IANA time zone for rise times (None uses the system zone)",
    )
    time_format: str = Field(
        default=DEFAULT_TIME_FORMAT, description="strftime format for rise times"
    )

    @field_validator("timezone")
    @classmethod
    def validate_timezone(cls, value: Optional[str]) -> Optional[str]:
        if value:
            PassTimeFormatter(time_zone=value)
        return value or None

    model_config = SettingsConfigDict(
        env_prefix="DISPLAY_", case_sensitive=False, extra="ignore"
    )


class ApiSettings(BaseSettings):
    """HTTP API configuration settings."""

    title: str = Field(default="ISS Flyover Finder", description="API title")
    description: str = Field(
        default="Next ISS passes over the caller's current location",
        description="API description",
    )
    version: str = Field(default="1.0.0", description="API version")
    port: int = Field(default=8000, description="Port to bind the server")

    model_config = SettingsConfigDict(
        env_prefix="API_", case_sensitive=False, extra="ignore"
    )


class LoggingSettings(BaseSettings):
    """Logging configuration settings."""

    level: EnumLogLevel = Field(default=EnumLogLevel.INFO, description="Logging level")
    file_path: Optional[str] = Field(
        default=None, description="Log file path (if None, logs to console)"
    )

    model_config = SettingsConfigDict(
        env_prefix="LOG_", case_sensitive=False, extra="ignore"
    )


class AppSettings(BaseSettings):
    """Main application settings, aggregating all sub-settings."""

    environment: EnumEnvironment = Field(
        default=EnumEnvironment.DEVELOPMENT, description="Application environment"
    )

    providers: ProviderSettings = Field(default_factory=ProviderSettings)
    display: DisplaySettings = Field(default_factory=DisplaySettings)
    api: ApiSettings = Field(default_factory=ApiSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_nested_delimiter="__",
        extra="ignore",
    )


def get_settings() -> AppSettings:
    """
    Get application settings instance Factory.

    Used to be mocked in tests, allowing different settings based on enviroment.
    """
    return AppSettings()
