"""
==============================================================================
Scanner Package - Barcode Results
==============================================================================

Result construction and scan sessions for detected barcodes.

Classes:
--------
- Detection: Symbol reported by a vision backend
- Barcode: Result record delivered to the application
- ScanSession: Debouncing session with callbacks

The pyzbar/OpenCV frame scanner lives in ``qrpayload.scanner.core``.

==============================================================================
"""

from .models import Barcode, Detection, QR_FORMAT_LABELS
from .results import build_barcode
from .session import ScanSession

__all__ = [
    "Barcode",
    "Detection",
    "QR_FORMAT_LABELS",
    "ScanSession",
    "build_barcode",
]
