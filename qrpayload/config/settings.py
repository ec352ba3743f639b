"""
==============================================================================
Scanner Settings Module
==============================================================================

Configuration management using Pydantic Settings.

A single cached Settings instance is shared by every scan session and
scanner in the process. Values are read-only once loaded.

Configuration Priority (highest to lowest):
------------------------------------------
1. Environment variables (prefixed with QRPAYLOAD_)
2. .env file
3. Default values

==============================================================================
"""

from __future__ import annotations

import logging
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


# Module logger
logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """
    Scanner settings loaded from environment variables.

    Attributes:
        app_name: Display name used in log output
        debug: Enable verbose logging
        log_level: Logging level name used when debug is off
        confirm_threshold: Sightings of the same code required before delivery
        camera_index: Capture device index for live scanning
        scan_timeout_seconds: Live scan duration (0 = until a code is delivered)
        stop_after_success: Stop a session after it delivers a barcode

    Example:
        >>> settings = Settings()
        >>> settings.confirm_threshold
        2
    """

    # =========================================================================
    # PYDANTIC SETTINGS CONFIGURATION
    # =========================================================================
    model_config = SettingsConfigDict(
        env_prefix="QRPAYLOAD_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        validate_default=True,
    )

    # =========================================================================
    # APPLICATION SETTINGS
    # =========================================================================
    app_name: str = Field(
        default="QR Payload Scanner",
        description="Display name used in log output"
    )

    debug: bool = Field(
        default=False,
        description="Enable debug mode for verbose logging"
    )

    log_level: str = Field(
        default="INFO",
        description="Logging level when debug is disabled"
    )

    # =========================================================================
    # SCAN SESSION SETTINGS
    # =========================================================================
    confirm_threshold: int = Field(
        default=2,
        ge=1,
        le=100,
        description="Sightings of the same code required before delivery"
    )

    stop_after_success: bool = Field(
        default=True,
        description="Stop a scan session after the first delivered barcode"
    )

    # =========================================================================
    # CAMERA SETTINGS
    # =========================================================================
    camera_index: int = Field(
        default=0,
        ge=0,
        description="Capture device index (0 = default camera)"
    )

    scan_timeout_seconds: int = Field(
        default=30,
        ge=0,
        le=3600,
        description="Live scan duration in seconds (0 = no limit)"
    )

    # =========================================================================
    # VALIDATORS
    # =========================================================================
    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """
        Normalize the logging level name.

        Unknown names fall back to INFO with a warning.
        """
        valid_levels = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}
        normalized = value.upper().strip()

        if normalized not in valid_levels:
            logger.warning(f"Unknown log level '{value}', defaulting to 'INFO'")
            return "INFO"

        return normalized

    # =========================================================================
    # COMPUTED PROPERTIES
    # =========================================================================
    @property
    def effective_log_level(self) -> int:
        """Numeric logging level, DEBUG when debug mode is on."""
        if self.debug:
            return logging.DEBUG
        return logging.getLevelName(self.log_level)

    def __repr__(self) -> str:
        return (
            f"Settings(app_name={self.app_name!r}, "
            f"confirm_threshold={self.confirm_threshold}, "
            f"debug={self.debug})"
        )


# =============================================================================
# SINGLETON INSTANCE MANAGEMENT
# =============================================================================

@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Get the global Settings instance.

    Uses lru_cache so only one Settings instance is created per process.
    Call ``get_settings.cache_clear()`` to reload from the environment.

    Returns:
        Global Settings instance
    """
    settings = Settings()

    if settings.debug:
        logger.info(f"Configuration loaded: {settings}")

    return settings
