"""Unit tests for layout and sizing helpers."""

from __future__ import annotations

from bitschema import Message, MessageSchema, encoded_bits, encoded_size, field_layout, field_sizes
from bitschema.utils import padding_bits


def test_sizes(status_schema: MessageSchema) -> None:
    """Test byte and bit totals."""
    assert encoded_size(status_schema) == 2
    assert encoded_bits(status_schema) == 14
    assert padding_bits(status_schema) == 2


def test_accepts_message(status_schema: MessageSchema) -> None:
    """Test that a message can stand in for its schema."""
    msg = Message(status_schema)

    assert encoded_size(msg) == encoded_size(status_schema)
    assert field_sizes(msg) == {"status": 2, "value": 8, "flags": 4}


def test_field_layout(status_schema: MessageSchema) -> None:
    """Test bit offsets and byte spans."""
    layout = field_layout(status_schema)

    assert [entry.bit_offset for entry in layout] == [0, 2, 10]
    assert [(entry.first_byte, entry.last_byte) for entry in layout] == [(0, 0), (0, 1), (1, 1)]
    assert layout[1].straddles_byte
    assert not layout[0].straddles_byte
    assert layout[1].is_signed


def test_empty_schema() -> None:
    """Test sizing an empty schema."""
    schema = MessageSchema()

    assert encoded_size(schema) == 0
    assert field_layout(schema) == []
    assert padding_bits(schema) == 0
