"""Schema analysis CLI command."""

from __future__ import annotations

from pathlib import Path

from ..codec.schema import MessageSchema
from ..registry import SchemaRegistry
from ..utils.sizing import field_layout, padding_bits


def analyze_file(file_path: Path) -> None:
    """Analyze every message type in a schema file.

    Args:
        file_path: Path to a JSON or YAML schema set
    """
    registry = SchemaRegistry.from_file(file_path)

    if not len(registry):
        print(f"No message types found in {file_path}")
        return

    # Print header
    print("|" * 7, "bitschema: Bit-Packed Message Codec", "|" * 7)
    print(f"{len(registry)} message type{'s' if len(registry) != 1 else ''} loaded.")
    print("Field sizes are in bits unless otherwise noted.")
    print()

    for message_type in sorted(registry.message_types()):
        analyze_schema(message_type, registry.schema(message_type))


def analyze_schema(message_type: str, schema: MessageSchema) -> None:
    """Print the layout of a single schema.

    Args:
        message_type: Name the schema is registered under
        schema: Schema to analyze
    """
    total_bits = schema.total_bits()
    total_bytes = schema.byte_length()
    padding = padding_bits(schema)

    print(f"{'=' * 19} {message_type} {'=' * 19}")
    print(f"Packed size of message: {total_bytes} bytes / {total_bytes * 8} bits")
    print(f"        body{'.' * 34}{total_bits}")
    if padding > 0:
        print(f"        padding to full byte{'.' * 19}{padding}")
    print()

    print(f"{'-' * 28} Body {'-' * 28}")
    for i, (field, layout) in enumerate(zip(schema.fields, field_layout(schema)), 1):
        kind = "signed" if field.is_signed else "unsigned"
        field_info = f"@{layout.bit_offset} {kind} [{field.min_value}, {field.max_value}]"
        field_desc = f"{i}. {field.name}"
        bits = str(field.bit_width)

        dots_needed = 54 - len(field_desc) - len(bits) - len(" bits") - len(field_info) - 1
        dots = "." * max(1, dots_needed)
        print(f"        {field_desc}{dots}{bits} bits {field_info}")

    print()
