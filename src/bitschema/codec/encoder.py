"""Bit-packed encoder.

This module provides pack_values(), which lays out one integer per schema
field into a contiguous LSB-first byte buffer.
"""

from __future__ import annotations

from collections.abc import Sequence

from .bitpack import BitPacker
from .schema import MessageSchema


def pack_values(schema: MessageSchema, values: Sequence[int]) -> bytes:
    """Pack field values according to ``schema``.

    Fields are written in schema order starting at bit 0, with no padding
    between them; a field may straddle a byte boundary. Each value is masked
    to its field width, so negative values of signed fields are written as
    their two's-complement bit pattern.

    Args:
        schema: Layout to pack against
        values: One integer per field, in schema order

    Returns:
        ``schema.byte_length()`` bytes

    Raises:
        ValueError: If the number of values doesn't match the schema

    Example:
        >>> schema = MessageSchema.from_description([
        ...     {"name": "f1", "bit_width": 8},
        ...     {"name": "f2", "bit_width": 4, "signed": True},
        ... ])
        >>> pack_values(schema, [42, -3]).hex()
        '2a0d'
    """
    if len(values) != len(schema):
        raise ValueError(f"Expected {len(schema)} values, got {len(values)}")

    packer = BitPacker(schema.byte_length())
    for field, value in zip(schema.fields, values):
        packer.write_masked(value, field.bit_width)

    return packer.to_bytes()
