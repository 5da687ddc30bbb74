"""Launcher configuration using pydantic-settings.

This module defines the LauncherSettings class that reads configuration
from environment variables with the GPGLAUNCHER_ prefix. Every field has a
default, so an empty environment yields a working configuration that runs
`gpg` from PATH.
"""

from pathlib import Path
from typing import Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
LOG_FORMATS = ("console", "json")


class LauncherSettings(BaseSettings):
    """Launcher configuration from environment variables.

    All environment variables are prefixed with GPGLAUNCHER_
    (e.g., GPGLAUNCHER_GPG_PATH).
    """

    model_config = SettingsConfigDict(
        env_prefix="GPGLAUNCHER_",
        case_sensitive=False,
    )

    # -------------------------------------------------------------------------
    # External Tool Configuration
    # -------------------------------------------------------------------------
    # Name or path of the OpenPGP executable, resolved through PATH
    gpg_path: str = "gpg"

    # Kill the tool after this many seconds; unset waits indefinitely
    timeout_seconds: Optional[int] = None

    # Directory for temporary input files; unset uses the system temp dir
    temp_dir: Optional[str] = None

    # -------------------------------------------------------------------------
    # Logging Configuration
    # -------------------------------------------------------------------------
    log_level: str = "INFO"

    # "console" for human-readable lines, "json" for one JSON object per line
    log_format: str = "console"

    # -------------------------------------------------------------------------
    # Validators
    # -------------------------------------------------------------------------
    @field_validator("gpg_path")
    @classmethod
    def validate_gpg_path(cls, v: str) -> str:
        """Validate that the executable name is not empty."""
        if not v or not v.strip():
            raise ValueError("gpg_path cannot be empty")
        return v

    @field_validator("timeout_seconds")
    @classmethod
    def validate_timeout(cls, v: Optional[int]) -> Optional[int]:
        """Validate that the timeout, when set, is positive."""
        if v is not None and v < 1:
            raise ValueError("timeout_seconds must be at least 1")
        return v

    @field_validator("temp_dir")
    @classmethod
    def validate_temp_dir(cls, v: Optional[str]) -> Optional[str]:
        """Validate that the temp directory, when set, is an absolute path."""
        if v is not None and not Path(v).is_absolute():
            raise ValueError("temp_dir must be an absolute path")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return level

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        fmt = v.lower()
        if fmt not in LOG_FORMATS:
            raise ValueError(f"log_format must be one of {', '.join(LOG_FORMATS)}")
        return fmt


def get_settings() -> LauncherSettings:
    """Create and return a LauncherSettings instance.

    Raises:
        pydantic.ValidationError: If an environment value is invalid.
    """
    return LauncherSettings()
