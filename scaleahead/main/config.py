"""
Application Settings - Main Layer

Pydantic Settings for the predictive core, read from environment variables,
a ``.env`` file and defaults.
"""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from scaleahead.shared import EnumEnvironment, EnumLogLevel
from scaleahead.shared.consts import (
    BOOT_LATENCY_ANNOTATION,
    MAX_RETENTION_SECONDS,
    OBSERVATIONS_ANNOTATION,
    PREDICTIVE_ANNOTATION,
    RETENTION_MULTIPLIER,
    SAMPLING_PERIOD_SECONDS,
)


class PredictiveSettings(BaseSettings):
    """Tuning of the observation window and annotation keys."""

    retention_multiplier: float = Field(
        default=RETENTION_MULTIPLIER,
        gt=0,
        description="Boot latencies of history kept in the window",
    )
    max_retention_seconds: float = Field(
        default=MAX_RETENTION_SECONDS,
        gt=0,
        description="Upper bound of the retention horizon",
    )
    sampling_period_seconds: float = Field(
        default=SAMPLING_PERIOD_SECONDS,
        gt=0,
        description="Expected control-loop period",
    )
    observations_annotation: str = Field(
        default=OBSERVATIONS_ANNOTATION,
        description="Autoscaler annotation holding the observation window",
    )
    predictive_annotation: str = Field(
        default=PREDICTIVE_ANNOTATION,
        description="Autoscaler annotation enabling predictive mode",
    )
    boot_latency_annotation: str = Field(
        default=BOOT_LATENCY_ANNOTATION,
        description="Instance annotation caching the boot latency",
    )

    model_config = SettingsConfigDict(
        env_prefix="PREDICTIVE_", case_sensitive=False, extra="ignore"
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

    predictive: PredictiveSettings = Field(default_factory=PredictiveSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_nested_delimiter="__",
        extra="ignore",
    )


def get_settings() -> AppSettings:
    """Settings factory; patched in tests."""
    return AppSettings()
