"""
==============================================================================
Configuration Package
==============================================================================

Centralized configuration management using Pydantic Settings.

Usage:
------
    from qrpayload.config import get_settings, configure_logging

    settings = get_settings()
    configure_logging(settings)
    print(settings.confirm_threshold)

==============================================================================
"""

from .settings import Settings, get_settings
from .log_setup import configure_logging

__all__ = [
    "Settings",
    "get_settings",
    "configure_logging",
]
