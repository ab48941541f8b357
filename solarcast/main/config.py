"""
Application Settings - Main Layer

Use Pydantic Settings for configuration management.
This module handles configuration settings provided using
environment variables, .env files and default values.
"""

from typing import Optional

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from solarcast.shared import EnumEnvironment, EnumLogLevel


class GESettings(BaseSettings):
    """Service identity and HTTP server settings."""

    title: str = Field(default="Solarcast", description="Service title")
    description: str = Field(
        default="Space weather forecasting service: 24-hour geomagnetic "
        "forecasts with risk classification",
        description="Service description",
    )
    version: str = Field(default="1.0.0", description="Service version")
    git_commit: str = Field(
        default="unknown",
        description="Git commit hash",
        validation_alias=AliasChoices("GE_GIT_COMMIT", "GIT_COMMIT"),
    )
    build_time: str = Field(
        default="unknown",
        description="Build timestamp",
        validation_alias=AliasChoices("GE_BUILD_TIME", "BUILD_TIME"),
    )
    host: str = Field(default="0.0.0.0", description="Interface to bind")
    port: int = Field(default=8000, description="Port to bind the server")
    reload: bool = Field(
        default=False, description="Enable auto-reload for development"
    )

    model_config = SettingsConfigDict(
        env_prefix="GE_", case_sensitive=False, extra="ignore"
    )


class ForecastSettings(BaseSettings):
    """Inference engine and fallback predictor settings."""

    model_path: Optional[str] = Field(
        default=None,
        description="Trained .keras artifact; the heuristic model is used if unset",
    )
    retry_cooldown_seconds: float = Field(
        default=60.0,
        gt=0,
        description="Delay before retrying a failed model initialization",
    )
    random_seed: Optional[int] = Field(
        default=None,
        description="Seed for the fallback predictor and simulated conditions",
    )

    model_config = SettingsConfigDict(
        env_prefix="FORECAST_",
        case_sensitive=False,
        extra="ignore",
        protected_namespaces=(),
    )


class NoaaSettings(BaseSettings):
    """NOAA SWPC feed settings."""

    solar_wind_url: str = Field(
        default="https://services.swpc.noaa.gov/json/rtsw/rtsw_wind_1m.json",
        description="Real-time solar wind JSON product",
    )
    alerts_url: str = Field(
        default="https://services.swpc.noaa.gov/json/alerts.json",
        description="Alerts, watches and warnings JSON product",
    )
    timeout: float = Field(default=10.0, gt=0, description="Request timeout (s)")

    model_config = SettingsConfigDict(
        env_prefix="NOAA_", case_sensitive=False, extra="ignore"
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

    ge: GESettings = Field(default_factory=GESettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    forecast: ForecastSettings = Field(default_factory=ForecastSettings)
    noaa: NoaaSettings = Field(default_factory=NoaaSettings)

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

    Used to be mocked in tests, allowing different settings per environment.
    """
    return AppSettings()
