"""
==============================================================================
Pytest Configuration and Fixtures
==============================================================================

Provides a bit writer for building codeword payloads and a clean settings
cache for every test.

==============================================================================
"""

import os

import pytest
from typing import Callable, Generator, List

from qrpayload.config import get_settings
from qrpayload.scanner import Barcode


# ============================================================================
# PAYLOAD HELPERS
# ============================================================================

class BitWriter:
    """MSB-first bit writer used to build codeword buffers."""

    def __init__(self) -> None:
        self._bits: List[int] = []

    def write(self, value: int, length: int) -> "BitWriter":
        """Append ``length`` bits of ``value``, most significant first."""
        for shift in range(length - 1, -1, -1):
            self._bits.append((value >> shift) & 1)
        return self

    def write_bytes(self, data: bytes) -> "BitWriter":
        for byte in data:
            self.write(byte, 8)
        return self

    @property
    def bit_length(self) -> int:
        return len(self._bits)

    def to_bytes(self) -> bytes:
        """Pad with zero bits to a whole number of bytes."""
        bits = self._bits + [0] * (-len(self._bits) % 8)
        out = bytearray()
        for start in range(0, len(bits), 8):
            byte = 0
            for bit in bits[start:start + 8]:
                byte = (byte << 1) | bit
            out.append(byte)
        return bytes(out)


@pytest.fixture
def bit_writer() -> BitWriter:
    """Fresh bit writer for one payload."""
    return BitWriter()


@pytest.fixture
def byte_segment() -> Callable[[bytes], bytes]:
    """Build a single terminated Byte-mode payload."""
    def build(data: bytes) -> bytes:
        writer = BitWriter().write(0b0100, 4).write(len(data), 8)
        return writer.write_bytes(data).write(0, 4).to_bytes()
    return build


# ============================================================================
# SETTINGS FIXTURES
# ============================================================================

@pytest.fixture(autouse=True)
def clean_settings(monkeypatch, tmp_path) -> Generator[None, None, None]:
    """Reload settings from a clean environment for each test."""
    for name in list(os.environ):
        if name.upper().startswith("QRPAYLOAD_"):
            monkeypatch.delenv(name, raising=False)
    # Keep a developer's .env out of the settings under test
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


# ============================================================================
# CALLBACK FIXTURES
# ============================================================================

@pytest.fixture
def delivered() -> List[List[Barcode]]:
    """Collects every list passed to an on_success callback."""
    return []
