"""Message size and layout utilities.

This module provides functions to inspect the packed layout of a schema
without packing anything.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..codec.message import Message
from ..codec.schema import MessageSchema


@dataclass(frozen=True)
class FieldLayout:
    """Position of one field within the packed buffer.

    Attributes:
        name: Field name
        bit_offset: Bit cursor at which the field starts
        bit_width: Number of bits occupied
        is_signed: Whether the field is two's-complement signed
        first_byte: Index of the byte holding the field's lowest bit
        last_byte: Index of the byte holding the field's highest bit
    """

    name: str
    bit_offset: int
    bit_width: int
    is_signed: bool
    first_byte: int
    last_byte: int

    @property
    def straddles_byte(self) -> bool:
        """Whether the field spans more than one byte."""
        return self.first_byte != self.last_byte


def _schema_of(schema_or_message: MessageSchema | Message) -> MessageSchema:
    if isinstance(schema_or_message, Message):
        return schema_or_message.schema
    return schema_or_message


def encoded_size(schema_or_message: MessageSchema | Message) -> int:
    """Calculate the packed size in bytes.

    Args:
        schema_or_message: Schema, or a message bound to one

    Returns:
        Size in bytes (rounded up to nearest byte)

    Example:
        >>> schema = MessageSchema.from_description([{"name": "f1", "bit_width": 9}])
        >>> encoded_size(schema)
        2
    """
    return _schema_of(schema_or_message).byte_length()


def encoded_bits(schema_or_message: MessageSchema | Message) -> int:
    """Calculate the packed size in bits, excluding final-byte padding."""
    return _schema_of(schema_or_message).total_bits()


def field_sizes(schema_or_message: MessageSchema | Message) -> dict[str, int]:
    """Get the width in bits of each field.

    Returns:
        Dictionary mapping field names to their size in bits, in schema order
    """
    return {field.name: field.bit_width for field in _schema_of(schema_or_message)}


def field_layout(schema_or_message: MessageSchema | Message) -> list[FieldLayout]:
    """Compute where each field lands in the packed buffer.

    Returns:
        One FieldLayout per field, in schema order
    """
    layout = []
    cursor = 0
    for field in _schema_of(schema_or_message):
        layout.append(
            FieldLayout(
                name=field.name,
                bit_offset=cursor,
                bit_width=field.bit_width,
                is_signed=field.is_signed,
                first_byte=cursor // 8,
                last_byte=(cursor + field.bit_width - 1) // 8,
            )
        )
        cursor += field.bit_width
    return layout


def padding_bits(schema_or_message: MessageSchema | Message) -> int:
    """Number of unused bits at the end of the final byte."""
    schema = _schema_of(schema_or_message)
    return schema.byte_length() * 8 - schema.total_bits()
