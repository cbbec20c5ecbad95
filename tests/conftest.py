"""Pytest configuration and shared fixtures."""

from __future__ import annotations

from typing import Any

import pytest

from bitschema import MessageSchema, SchemaRegistry


@pytest.fixture
def schema_set() -> dict[str, Any]:
    """Two-message schema set used across registry tests."""
    return {
        "status_message": [
            {"name": "device_id", "bit_width": 8, "signed": False},
            {"name": "status_code", "bit_width": 4, "signed": False},
        ],
        "sensor_data": [
            {"name": "sensor_id", "bit_width": 6, "signed": False},
            {"name": "temperature", "bit_width": 10, "signed": True},
        ],
    }


@pytest.fixture
def registry(schema_set: dict[str, Any]) -> SchemaRegistry:
    """Registry loaded from the shared schema set."""
    return SchemaRegistry(schema_set)


@pytest.fixture
def status_schema() -> MessageSchema:
    """2-bit unsigned, 8-bit signed, 4-bit unsigned."""
    return MessageSchema.from_description(
        [
            {"name": "status", "bit_width": 2},
            {"name": "value", "bit_width": 8, "signed": True},
            {"name": "flags", "bit_width": 4},
        ]
    )


@pytest.fixture
def small_schema() -> MessageSchema:
    """8-bit unsigned followed by 4-bit signed (12 bits, 2 bytes)."""
    return MessageSchema.from_description(
        [
            {"name": "f1", "bit_width": 8},
            {"name": "f2", "bit_width": 4, "signed": True},
        ]
    )
