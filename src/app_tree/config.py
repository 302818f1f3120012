"""Configuration management using pydantic-settings."""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
LOG_FORMATS = ("console", "json")


class Settings(BaseSettings):
    """Runtime settings loaded from APP_TREE_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="APP_TREE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # App tree manifest
    apps_config_path: str = Field(
        default="apps.yaml",
        description="Path to the YAML manifest declaring the app tree",
    )
    poll_interval_seconds: float = Field(
        default=1.0,
        gt=0,
        description="How often the runner checks whether the root app is still running",
    )

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: str = Field(default="console", description="Log renderer: console or json")

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return level

    @field_validator("log_format")
    @classmethod
    def _validate_log_format(cls, value: str) -> str:
        fmt = value.strip().lower()
        if fmt not in LOG_FORMATS:
            raise ValueError(f"log_format must be one of {', '.join(LOG_FORMATS)}")
        return fmt


def get_settings() -> Settings:
    """Get application settings."""
    return Settings()
