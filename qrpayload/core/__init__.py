"""
==============================================================================
Core Package
==============================================================================

Exception types shared across the scanner package.

==============================================================================
"""

from .exceptions import (
    ScanException,
    session_stopped,
    invalid_threshold,
    camera_unavailable,
)

__all__ = [
    "ScanException",
    "session_stopped",
    "invalid_threshold",
    "camera_unavailable",
]
