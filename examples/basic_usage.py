#!/usr/bin/env python3
"""Basic usage example for bitschema.

This example demonstrates:
1. Loading message types from a schema file
2. Setting field values
3. Packing to a bit-packed buffer
4. Unpacking into a fresh message
"""

from __future__ import annotations

from pathlib import Path

from bitschema import SchemaRegistry, encoded_size, field_layout

SCHEMA_FILE = Path(__file__).with_name("sample_schemas.yaml")


def main() -> None:
    """Run the basic usage example."""
    print("=" * 60)
    print("bitschema Basic Usage Example")
    print("=" * 60)
    print()

    # Load every message type
    print("1. Loading schemas...")
    registry = SchemaRegistry.from_file(SCHEMA_FILE)
    for message_type in sorted(registry.message_types()):
        print(f"   {message_type}: {encoded_size(registry.schema(message_type))} bytes")
    print()

    # Create a message instance
    print("2. Creating a telemetry message...")
    message = registry.create("telemetry")
    message.set_field("status", 2)
    message.set_field("temperature", -123)
    message.set_field("pressure", 2047)
    message.set_field("flags", 0xAA)

    for layout in field_layout(message):
        kind = "signed" if layout.is_signed else "unsigned"
        print(
            f"   {layout.name}: {message.get_field(layout.name)} "
            f"({layout.bit_width} bits {kind} @ bit {layout.bit_offset})"
        )
    print()

    # Pack the message
    print("3. Packing...")
    buffer = message.pack()
    print(f"   Packed buffer: {buffer.hex(' ')}")
    print(f"   Binary (LSB first per byte): {' '.join(format(b, '08b')[::-1] for b in buffer)}")
    print()

    # Unpack into a new message
    print("4. Unpacking...")
    unpacked = registry.create("telemetry")
    unpacked.unpack(buffer)
    print(f"   Status: {unpacked.get_field('status')}")
    print(f"   Temperature: {unpacked.get_field('temperature')}")
    print(f"   Pressure: {unpacked.get_field('pressure')}")
    print(f"   Flags: 0x{unpacked.get_field('flags'):x}")
    print()

    assert unpacked.to_dict() == message.to_dict()
    print("Round trip OK")


if __name__ == "__main__":
    main()
