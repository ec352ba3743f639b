"""
==============================================================================
Bitstream Reader Module
==============================================================================

MSB-first bit reader over an immutable codeword buffer.

A reader is created per decode call and owns its cursor; nothing is
shared between readers.

==============================================================================
"""

from __future__ import annotations


class BitReader:
    """
    Sequential bit reader over a byte buffer.

    Bits are consumed most-significant-bit first within each byte and in
    buffer order across bytes. The cursor only moves forward.

    Attributes:
        position: Current bit offset from the start of the buffer

    Example:
        >>> reader = BitReader(b"\\xa5")
        >>> reader.read(4)
        10
        >>> reader.remaining
        4
    """

    def __init__(self, data: bytes) -> None:
        self._data = data
        self._size = len(data) * 8
        self.position = 0

    @property
    def size(self) -> int:
        """Total number of bits in the buffer."""
        return self._size

    @property
    def remaining(self) -> int:
        """Unread bits left in the buffer."""
        return max(self._size - self.position, 0)

    def read(self, count: int) -> int:
        """
        Read up to ``count`` bits as an unsigned integer.

        The first bit read becomes the most significant bit of the result.
        Reading stops at the end of the buffer, so a field that runs past
        the end comes back short instead of raising.

        Args:
            count: Number of bits to read

        Returns:
            Accumulated unsigned value
        """
        value = 0
        for _ in range(count):
            if self.position >= self._size:
                break
            byte = self._data[self.position >> 3]
            bit = (byte >> (7 - (self.position & 7))) & 1
            value = (value << 1) | bit
            self.position += 1
        return value

    def skip(self, count: int) -> None:
        """Advance the cursor by ``count`` bits without reading them."""
        self.position += count
