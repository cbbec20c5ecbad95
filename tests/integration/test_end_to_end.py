"""End-to-end integration tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from bitschema import (
    BufferTooSmallError,
    SchemaRegistry,
    ValueOutOfRangeError,
    encoded_size,
    field_sizes,
)

EXAMPLE_SCHEMAS = Path(__file__).parents[2] / "examples" / "sample_schemas.yaml"

TELEMETRY_SET = {
    "telemetry": [
        {"name": "status", "bit_width": 2},
        {"name": "temperature", "bit_width": 8, "signed": True},
        {"name": "pressure", "bit_width": 12},
        {"name": "flags", "bit_width": 8},
    ],
    "command": [
        {"name": "opcode", "bit_width": 5},
        {"name": "argument", "bit_width": 32, "signed": True},
        {"name": "ack", "bit_width": 1},
    ],
}


class TestEndToEndWorkflow:
    """Test complete end-to-end workflows."""

    def test_telemetry_workflow(self) -> None:
        """Test building, packing and decoding a telemetry message."""
        registry = SchemaRegistry(TELEMETRY_SET)

        # 1. Create message
        telemetry = registry.create("telemetry")
        telemetry.set_fields(status=2, temperature=-123, pressure=2047, flags=0xAA)

        # 2. Check size
        assert encoded_size(telemetry) == 4  # 30 bits
        assert field_sizes(telemetry) == {
            "status": 2,
            "temperature": 8,
            "pressure": 12,
            "flags": 8,
        }

        # 3. Pack
        data = telemetry.pack()
        assert len(data) == 4

        # 4. Receive into a fresh message
        received = registry.create("telemetry")
        received.unpack(data)

        assert received.to_dict() == {
            "status": 2,
            "temperature": -123,
            "pressure": 2047,
            "flags": 0xAA,
        }

    def test_command_workflow(self) -> None:
        """Test a message whose fields straddle several bytes."""
        registry = SchemaRegistry(TELEMETRY_SET)

        command = registry.create("command")
        command.set_fields(opcode=31, argument=-(1 << 31), ack=1)

        data = command.pack()
        assert len(data) == 5  # 38 bits

        received = registry.create("command")
        received.unpack(data + b"\xee\xee")

        assert received.get_field("opcode") == 31
        assert received.get_field("argument") == -(1 << 31)
        assert received.get_field("ack") == 1

    def test_error_paths(self) -> None:
        """Test that bad input surfaces without corrupting state."""
        registry = SchemaRegistry(TELEMETRY_SET)
        telemetry = registry.create("telemetry")
        telemetry.set_field("pressure", 100)

        with pytest.raises(ValueOutOfRangeError):
            telemetry.set_field("pressure", 4096)

        with pytest.raises(BufferTooSmallError):
            telemetry.unpack(b"\x00\x00\x00")

        assert telemetry.get_field("pressure") == 100


class TestExampleSchemas:
    """Test the schema file shipped with the examples."""

    def test_example_file_loads(self) -> None:
        """Test that the example YAML file is a valid schema set."""
        if not EXAMPLE_SCHEMAS.exists():
            pytest.skip("Example file not found")

        registry = SchemaRegistry.from_file(EXAMPLE_SCHEMAS)

        assert registry.has_type("sensor_data")
        msg = registry.create("sensor_data")
        msg.set_field("temperature", -125)
        assert registry.create("sensor_data").get_field("temperature") == 0
        assert msg.get_field("temperature") == -125
