"""
Logging setup for applications embedding the scanner.
"""

from __future__ import annotations

import logging
from typing import Optional

from .settings import Settings, get_settings


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_logging(settings: Optional[Settings] = None) -> None:
    """
    Apply the package log format at the configured level.

    Args:
        settings: Settings to read the level from (global settings if None)
    """
    settings = settings or get_settings()

    logging.basicConfig(
        level=settings.effective_log_level,
        format=LOG_FORMAT
    )

    logging.getLogger(__name__).debug(f"Logging configured for {settings.app_name}")
