"""
Barcode result construction.

Raw bytes come from the QR payload decoder when the backend reports QR
codewords; every other symbol falls back to the UTF-8 text value.
"""

from __future__ import annotations

import logging

from qrpayload.decoder import decode_qr_data_bytes

from .models import Barcode, Detection


# Module logger
logger = logging.getLogger(__name__)


def build_barcode(detection: Detection) -> Barcode:
    """
    Build the barcode record for a detection.

    Args:
        detection: Symbol reported by the vision backend

    Returns:
        Barcode with text value, format label and raw bytes
    """
    if detection.is_qr and detection.codewords is not None:
        raw_bytes = decode_qr_data_bytes(detection.codewords)
        logger.debug(
            f"Decoded {len(raw_bytes)} bytes from "
            f"{len(detection.codewords)} QR codewords"
        )
    else:
        raw_bytes = detection.value.encode("utf-8")

    return Barcode(
        data=detection.value,
        format=detection.format,
        raw_bytes=raw_bytes
    )
