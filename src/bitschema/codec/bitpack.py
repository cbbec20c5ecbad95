"""Bit-level packing and unpacking utilities.

This module provides low-level bit manipulation for compact binary encoding.
Bits are addressed least-significant-bit first: overall bit position ``p``
lives in byte ``p // 8`` at bit ``p % 8``, where bit 0 is the byte's LSB.
Values are written starting from their own least significant bit.
"""

from __future__ import annotations

MAX_BITS = 64


def _check_width(num_bits: int) -> None:
    if num_bits < 1 or num_bits > MAX_BITS:
        raise ValueError(f"num_bits must be 1-{MAX_BITS}, got {num_bits}")


class BitPacker:
    """Packs values bit-by-bit into a byte buffer.

    The buffer is zero-filled and grows as bits are written, so an optional
    ``size`` only preallocates. Every write advances an internal bit cursor.

    Example:
        >>> packer = BitPacker()
        >>> packer.write_masked(42, num_bits=8)
        >>> packer.write_masked(-3, num_bits=4)
        >>> packer.to_bytes()
        b'*\\r'
    """

    def __init__(self, size: int = 0) -> None:
        """Initialize a bit packer.

        Args:
            size: Number of zero bytes to preallocate
        """
        self._buffer = bytearray(size)
        self._position = 0

    def _write_bits(self, value: int, num_bits: int) -> None:
        end = self._position + num_bits
        needed = (end + 7) // 8
        if needed > len(self._buffer):
            self._buffer.extend(bytes(needed - len(self._buffer)))

        for bit in range(num_bits):
            if (value >> bit) & 1:
                pos = self._position + bit
                self._buffer[pos >> 3] |= 1 << (pos & 7)

        self._position = end

    def write_masked(self, value: int, num_bits: int) -> None:
        """Write the ``num_bits`` low bits of ``value`` without range checks.

        Negative values land as their two's-complement pattern truncated to
        the requested width.

        Args:
            value: Integer to write
            num_bits: Number of low bits to keep (1-64)

        Raises:
            ValueError: If num_bits is out of range
        """
        _check_width(num_bits)
        self._write_bits(value & ((1 << num_bits) - 1), num_bits)

    def bit_length(self) -> int:
        """Return the current number of bits written.

        Returns:
            Position of the bit cursor
        """
        return self._position

    def to_bytes(self) -> bytes:
        """Return the packed buffer.

        Unused high bits of the final byte are zero.

        Returns:
            Packed bytes
        """
        return bytes(self._buffer)


class BitUnpacker:
    """Unpacks values bit-by-bit from a byte buffer.

    Example:
        >>> unpacker = BitUnpacker(b"\\x2a\\x0d")
        >>> unpacker.read_uint(8)
        42
        >>> unpacker.read_int(4)
        -3
    """

    def __init__(self, data: bytes | bytearray | memoryview) -> None:
        """Initialize a bit unpacker with the given data.

        Args:
            data: Byte buffer to unpack
        """
        self._data = bytes(data)
        self._total_bits = len(self._data) * 8
        self._position = 0

    def _read_bits(self, num_bits: int) -> int:
        if self._position + num_bits > self._total_bits:
            raise IndexError(
                f"Not enough bits: need {num_bits}, have {self._total_bits - self._position}"
            )

        value = 0
        for bit in range(num_bits):
            pos = self._position + bit
            if self._data[pos >> 3] & (1 << (pos & 7)):
                value |= 1 << bit

        self._position += num_bits
        return value

    def read_uint(self, num_bits: int) -> int:
        """Read an unsigned integer of the specified bit width.

        Args:
            num_bits: Number of bits to read (1-64)

        Returns:
            Unsigned integer value

        Raises:
            ValueError: If num_bits is out of range
            IndexError: If not enough bits are available
        """
        _check_width(num_bits)
        return self._read_bits(num_bits)

    def read_int(self, num_bits: int) -> int:
        """Read a signed integer using two's complement encoding.

        Args:
            num_bits: Number of bits to read (1-64)

        Returns:
            Signed integer value

        Raises:
            ValueError: If num_bits is out of range
            IndexError: If not enough bits are available
        """
        unsigned_value = self.read_uint(num_bits)

        # Check sign bit (MSB)
        if unsigned_value & (1 << (num_bits - 1)):
            return unsigned_value - (1 << num_bits)
        return unsigned_value
