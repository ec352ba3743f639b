"""
==============================================================================
Decoder Package - QR Payload Decoding
==============================================================================

Bit-level decoding of QR data codewords into application bytes.

Functions:
----------
- decode_qr_data_bytes: Decode error-corrected codewords to raw bytes

==============================================================================
"""

from .bitstream import BitReader
from .qr import ALPHANUMERIC_TABLE, Mode, decode_qr_data_bytes

__all__ = [
    "ALPHANUMERIC_TABLE",
    "BitReader",
    "Mode",
    "decode_qr_data_bytes",
]
