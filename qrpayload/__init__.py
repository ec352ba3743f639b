"""
==============================================================================
qrpayload - QR Payload Decoding for Barcode Scanners
==============================================================================

Decodes the raw data bytes of QR symbols from error-corrected codewords
and delivers barcode results to application callbacks.

Usage:
------
    from qrpayload import decode_qr_data_bytes

    raw = decode_qr_data_bytes(codewords)

==============================================================================
"""

from .config import Settings, configure_logging, get_settings
from .core import ScanException
from .decoder import decode_qr_data_bytes
from .scanner import Barcode, Detection, ScanSession, build_barcode

__version__ = "1.0.0"

__all__ = [
    "Barcode",
    "Detection",
    "ScanException",
    "ScanSession",
    "Settings",
    "build_barcode",
    "configure_logging",
    "decode_qr_data_bytes",
    "get_settings",
]
