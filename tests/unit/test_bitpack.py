"""Unit tests for bitpacking utilities."""

from __future__ import annotations

import pytest

from bitschema.codec.bitpack import BitPacker, BitUnpacker


class TestBitPacker:
    """Test BitPacker functionality."""

    def test_write_masked(self) -> None:
        """Test consecutive writes filling one byte."""
        packer = BitPacker()
        packer.write_masked(15, 4)  # bits 0-3
        packer.write_masked(3, 2)  # bits 4-5
        packer.write_masked(0, 2)  # bits 6-7

        assert packer.bit_length() == 8
        assert packer.to_bytes() == b"\x3f"  # 00111111

    def test_write_negative(self) -> None:
        """Test that negative values land as two's complement."""
        packer = BitPacker()
        packer.write_masked(-1, 4)  # low nibble 1111
        packer.write_masked(3, 4)  # high nibble 0011

        assert packer.to_bytes() == b"\x3f"

    def test_write_masked_truncates(self) -> None:
        """Test masked writes keep only the low bits."""
        packer = BitPacker()
        packer.write_masked(-3, 4)
        packer.write_masked(0x1F, 4)

        assert packer.bit_length() == 8
        assert packer.to_bytes() == b"\xfd"

    def test_width_limits(self) -> None:
        """Test that widths outside 1-64 are rejected."""
        packer = BitPacker()

        with pytest.raises(ValueError, match="num_bits"):
            packer.write_masked(0, 0)

        with pytest.raises(ValueError, match="num_bits"):
            packer.write_masked(0, 65)

    def test_straddles_byte_boundary(self) -> None:
        """Test a value spanning two bytes."""
        packer = BitPacker()
        packer.write_masked(1, 3)
        packer.write_masked(0x1FF, 9)

        # 1 | 0x1FF << 3 = 0x0FF9
        assert packer.to_bytes() == b"\xf9\x0f"

    def test_preallocated_buffer(self) -> None:
        """Test that preallocated bytes stay zero."""
        packer = BitPacker(3)
        packer.write_masked(1, 1)

        assert packer.to_bytes() == b"\x01\x00\x00"

    def test_64_bit_values(self) -> None:
        """Test full-width 64-bit writes."""
        packer = BitPacker()
        packer.write_masked(-(1 << 63), 64)
        packer.write_masked((1 << 64) - 1, 64)

        assert packer.to_bytes() == b"\x00" * 7 + b"\x80" + b"\xff" * 8

    def test_to_bytes_padding(self) -> None:
        """Test padding to byte boundary."""
        packer = BitPacker()
        packer.write_masked(1, 1)

        data = packer.to_bytes()
        assert len(data) == 1
        assert data == b"\x01"

    def test_empty_packer(self) -> None:
        """Test empty bit packer."""
        packer = BitPacker()
        assert packer.bit_length() == 0
        assert packer.to_bytes() == b""


class TestBitUnpacker:
    """Test BitUnpacker functionality."""

    def test_read_uint(self) -> None:
        """Test reading unsigned integers."""
        unpacker = BitUnpacker(b"\x3f")

        assert unpacker.read_uint(4) == 15
        assert unpacker.read_uint(2) == 3
        assert unpacker.read_uint(2) == 0

    def test_read_int(self) -> None:
        """Test reading signed integers."""
        unpacker = BitUnpacker(b"\x3f")

        assert unpacker.read_int(4) == -1
        assert unpacker.read_int(4) == 3

    def test_read_one_bit_signed(self) -> None:
        """Test that a set 1-bit signed field reads as -1."""
        unpacker = BitUnpacker(b"\x01")

        assert unpacker.read_int(1) == -1

    def test_read_straddling_value(self) -> None:
        """Test reading a value spanning two bytes."""
        unpacker = BitUnpacker(b"\xf9\x0f")

        assert unpacker.read_uint(3) == 1
        assert unpacker.read_uint(9) == 0x1FF

    def test_accepts_bytearray_and_memoryview(self) -> None:
        """Test non-bytes buffers."""
        assert BitUnpacker(bytearray(b"\x2a")).read_uint(8) == 42
        assert BitUnpacker(memoryview(b"\x2a")).read_uint(8) == 42

    def test_width_limits(self) -> None:
        """Test that read widths outside 1-64 are rejected."""
        unpacker = BitUnpacker(b"\x00" * 9)

        with pytest.raises(ValueError, match="num_bits"):
            unpacker.read_uint(0)

        with pytest.raises(ValueError, match="num_bits"):
            unpacker.read_int(65)

    def test_truncation_error(self) -> None:
        """Test error on reading past end."""
        unpacker = BitUnpacker(b"\xff")

        unpacker.read_uint(8)

        with pytest.raises(IndexError, match="Not enough bits"):
            unpacker.read_uint(1)

    def test_not_enough_bits(self) -> None:
        """Test error when a read is wider than the remaining data."""
        unpacker = BitUnpacker(b"\xff")

        with pytest.raises(IndexError, match="Not enough bits"):
            unpacker.read_uint(9)


class TestRoundTrip:
    """Test round-trip packing/unpacking."""

    def test_roundtrip_mixed(self) -> None:
        """Test mixed widths and signedness round-trip."""
        packer = BitPacker()
        packer.write_masked(42, 8)
        packer.write_masked(1, 1)
        packer.write_masked(-5, 4)
        packer.write_masked((1 << 64) - 1, 64)

        unpacker = BitUnpacker(packer.to_bytes())
        assert unpacker.read_uint(8) == 42
        assert unpacker.read_uint(1) == 1
        assert unpacker.read_int(4) == -5
        assert unpacker.read_uint(64) == (1 << 64) - 1
