"""
Scanner Exception Handling

Single ScanException class for all scanner errors. The QR payload decoder
never raises; these errors belong to sessions and camera scanning.
"""

from datetime import datetime, timezone
from typing import Any, Dict, Optional


class ScanException(Exception):
    """
    Unified exception for scan session and camera errors.

    Usage:
        raise ScanException("Session stopped", "SESSION_STOPPED")
        raise ScanException("Camera unavailable", "CAMERA_UNAVAILABLE", {"camera_index": 1})

    Error Codes:
        Session:
            - SESSION_STOPPED
            - INVALID_THRESHOLD

        Camera:
            - CAMERA_UNAVAILABLE
    """

    def __init__(
        self,
        message: str,
        code: str,
        details: Optional[Dict[str, Any]] = None
    ):
        """
        Initialize scan exception.

        Args:
            message: Human-readable error message
            code: Machine-readable error code (e.g., "SESSION_STOPPED")
            details: Additional error context (optional)
        """
        self.message = message
        self.code = code
        self.details = details or {}
        self.timestamp = datetime.now(timezone.utc).isoformat()
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to a dictionary for reporting."""
        error_dict = {
            "success": False,
            "error": {
                "code": self.code,
                "message": self.message,
                "timestamp": self.timestamp
            }
        }

        if self.details:
            error_dict["error"]["details"] = self.details

        return error_dict


# ============================================
# CONVENIENCE FACTORY FUNCTIONS
# ============================================

def session_stopped() -> ScanException:
    """Create session stopped exception."""
    return ScanException(
        "Scan session is stopped; call restart() to scan again",
        "SESSION_STOPPED"
    )


def invalid_threshold(value: int) -> ScanException:
    """Create invalid confirmation threshold exception."""
    return ScanException(
        f"Confirmation threshold must be at least 1, got {value}",
        "INVALID_THRESHOLD",
        {"confirm_threshold": value}
    )


def camera_unavailable(camera_index: int) -> ScanException:
    """Create camera unavailable exception."""
    return ScanException(
        f"Cannot open camera {camera_index}",
        "CAMERA_UNAVAILABLE",
        {"camera_index": camera_index}
    )
