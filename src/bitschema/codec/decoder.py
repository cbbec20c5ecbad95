"""Bit-packed decoder.

This module provides unpack_values(), the inverse of pack_values().
"""

from __future__ import annotations

from ..exceptions import BufferTooSmallError
from .bitpack import BitUnpacker
from .schema import MessageSchema


def unpack_values(schema: MessageSchema, data: bytes | bytearray | memoryview) -> list[int]:
    """Unpack one integer per schema field from ``data``.

    The buffer length is checked once, before any field is read. Trailing
    bytes beyond ``schema.byte_length()`` are ignored. Signed fields whose
    top bit is set are sign-extended to negative values.

    Args:
        schema: Layout to unpack against
        data: Packed buffer

    Returns:
        Field values in schema order

    Raises:
        BufferTooSmallError: If ``data`` is shorter than the schema requires
    """
    required = schema.byte_length()
    if len(data) < required:
        raise BufferTooSmallError(required, len(data))

    unpacker = BitUnpacker(data[:required])

    values: list[int] = []
    for field in schema.fields:
        if field.is_signed:
            values.append(unpacker.read_int(field.bit_width))
        else:
            values.append(unpacker.read_uint(field.bit_width))

    return values
