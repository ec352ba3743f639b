"""
==============================================================================
Barcode Models Module
==============================================================================

Pydantic models for detections reported by a vision backend and for the
barcode records delivered to application callbacks.

==============================================================================
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


# Format labels that identify a QR symbol across backends
QR_FORMAT_LABELS = frozenset({"QR_CODE", "QRCODE", "FORMAT_QR_CODE"})


class Detection(BaseModel):
    """
    A single symbol reported by the vision backend.

    Attributes:
        value: Text value decoded by the backend
        format: Backend format label (e.g., "QRCODE", "EAN13")
        codewords: Error-corrected data codewords, QR symbols only
    """

    model_config = ConfigDict(frozen=True)

    value: str = Field(default="", description="Decoded text value")
    format: str = Field(..., min_length=1, description="Format label")
    codewords: Optional[bytes] = Field(
        default=None,
        description="Error-corrected QR data codewords"
    )

    @property
    def is_qr(self) -> bool:
        """Check if the detection is a QR code."""
        return self.format.upper() in QR_FORMAT_LABELS

    @property
    def key(self) -> str:
        """Key used to count repeated sightings of the same symbol."""
        return self.value or self.format


class Barcode(BaseModel):
    """
    Barcode result delivered to the application.

    Attributes:
        data: Text value of the symbol
        format: Format label of the symbol
        raw_bytes: Raw payload bytes
    """

    model_config = ConfigDict(frozen=True)

    data: str
    format: str
    raw_bytes: bytes = b""
