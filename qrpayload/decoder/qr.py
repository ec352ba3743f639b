"""
==============================================================================
QR Payload Decoder Module
==============================================================================

Reconstructs the application data bytes of a QR symbol from its
error-corrected data codewords (ISO/IEC 18004 data segments).

Supported segments:
------------------
- 0001 Numeric       10-bit count, 3 digits per 10 bits
- 0010 Alphanumeric   9-bit count, 2 characters per 11 bits
- 0100 Byte           8-bit count, 8 bits per byte
- 1000 Kanji          8-bit count, skipped (13 bits per character)
- 0000 Terminator

Character-count widths are those of symbol versions 1-9 only.

Decoding is best effort and never raises: a terminator, an unsupported
mode indicator, or running out of bits halts the segment loop and the
bytes decoded so far are returned.

==============================================================================
"""

from __future__ import annotations

import logging
from enum import IntEnum
from typing import Callable, Dict, Iterable, Union

from .bitstream import BitReader


# Module logger
logger = logging.getLogger(__name__)


Codewords = Union[bytes, bytearray, memoryview, Iterable[int]]


class Mode(IntEnum):
    """4-bit segment mode indicators."""

    TERMINATOR = 0b0000
    NUMERIC = 0b0001
    ALPHANUMERIC = 0b0010
    BYTE = 0b0100
    KANJI = 0b1000


MODE_INDICATOR_BITS = 4

# Character-count field widths for versions 1-9
NUMERIC_COUNT_BITS = 10
ALPHANUMERIC_COUNT_BITS = 9
BYTE_COUNT_BITS = 8
KANJI_COUNT_BITS = 8

KANJI_CHAR_BITS = 13

ALPHANUMERIC_TABLE = b"0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ $%*+-./:"

_ZERO = ord("0")


# =============================================================================
# SEGMENT DECODERS
# =============================================================================

def _decode_numeric(reader: BitReader, output: bytearray) -> None:
    remaining = reader.read(NUMERIC_COUNT_BITS)

    while remaining >= 3:
        value = reader.read(10)
        output.append(_ZERO + value // 100)
        output.append(_ZERO + (value // 10) % 10)
        output.append(_ZERO + value % 10)
        remaining -= 3

    if remaining == 2:
        value = reader.read(7)
        output.append(_ZERO + value // 10)
        output.append(_ZERO + value % 10)
    elif remaining == 1:
        output.append(_ZERO + reader.read(4))


def _append_alphanumeric(output: bytearray, index: int) -> None:
    # Indices past the table come from corrupt data and are dropped
    if index < len(ALPHANUMERIC_TABLE):
        output.append(ALPHANUMERIC_TABLE[index])


def _decode_alphanumeric(reader: BitReader, output: bytearray) -> None:
    remaining = reader.read(ALPHANUMERIC_COUNT_BITS)

    while remaining >= 2:
        value = reader.read(11)
        _append_alphanumeric(output, value // 45)
        _append_alphanumeric(output, value % 45)
        remaining -= 2

    if remaining == 1:
        _append_alphanumeric(output, reader.read(6))


def _decode_byte(reader: BitReader, output: bytearray) -> None:
    count = reader.read(BYTE_COUNT_BITS)

    for index in range(count):
        if reader.remaining < 8:
            logger.debug(
                f"Byte segment truncated: {index} of {count} bytes read"
            )
            break
        output.append(reader.read(8))


def _skip_kanji(reader: BitReader, output: bytearray) -> None:
    count = reader.read(KANJI_COUNT_BITS)
    reader.skip(count * KANJI_CHAR_BITS)


_SEGMENT_DECODERS: Dict[int, Callable[[BitReader, bytearray], None]] = {
    Mode.NUMERIC: _decode_numeric,
    Mode.ALPHANUMERIC: _decode_alphanumeric,
    Mode.BYTE: _decode_byte,
    Mode.KANJI: _skip_kanji,
}


# =============================================================================
# PUBLIC API
# =============================================================================

def decode_qr_data_bytes(codewords: Codewords) -> bytes:
    """
    Decode the data bytes carried by a QR symbol's data codewords.

    Args:
        codewords: Error-corrected data codewords, 8-bit values in
            bitstream order

    Returns:
        Concatenated payload of every decoded segment, in encounter order.
        Empty when the input is empty or starts with a terminator.

    Example:
        >>> decode_qr_data_bytes(bytes([0x40, 0x24, 0x14, 0x90]))
        b'AI'
    """
    data = bytes(codewords)
    if not data:
        return b""

    reader = BitReader(data)
    output = bytearray()
    halted = False

    while not halted:
        if reader.remaining < MODE_INDICATOR_BITS:
            halted = True
            continue

        mode = reader.read(MODE_INDICATOR_BITS)
        segment_decoder = _SEGMENT_DECODERS.get(mode)

        if segment_decoder is None:
            if mode != Mode.TERMINATOR:
                logger.debug(
                    f"Unsupported mode indicator {mode:04b} at bit "
                    f"{reader.position - MODE_INDICATOR_BITS}, stopping"
                )
            halted = True
            continue

        segment_decoder(reader, output)

    return bytes(output)
