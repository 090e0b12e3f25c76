"""
Configuration settings for spatially.
"""

from pathlib import Path
from typing import Literal, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Package settings with environment variable support.

    Attributes:
        environment: Deployment environment, drives the default log format
        log_level: Explicit log level (defaults by environment when unset)
        log_file: Optional path for rotating file logs
        json_logs: Whether file logs are written as JSON
        wkt_strict: Reject non-whitespace input after a complete WKT geometry
        wkt_legacy_multilinestring: Collapse MULTILINESTRING to its first line
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_prefix="SPATIALLY_",
    )

    # Environment
    environment: Literal["development", "staging", "production"] = "development"

    # Logging settings
    log_level: Optional[str] = None
    log_file: Optional[Path] = None
    json_logs: bool = False

    # WKT parser settings
    wkt_strict: bool = False
    wkt_legacy_multilinestring: bool = False


# Global settings instance
settings = Settings()
