"""bitschema: Bit-Packed Message Codec

A Python library for packing named, fixed-width integer fields into tightly
bit-packed byte buffers. Message layouts are described declaratively and
validated once; messages created from them pack and unpack bit-exactly,
including two's-complement signed fields of any width from 1 to 64 bits.

Key Features:
- Declarative schemas (Python values, JSON or YAML files)
- LSB-first packing with no padding between fields
- Exact signed/unsigned range checks and sign extension
- Registry of named message types

Quick Start:
    >>> from bitschema import SchemaRegistry
    >>>
    >>> registry = SchemaRegistry({
    ...     "sensor_data": [
    ...         {"name": "sensor_id", "bit_width": 6},
    ...         {"name": "temperature", "bit_width": 10, "signed": True},
    ...     ],
    ... })
    >>> msg = registry.create("sensor_data")
    >>> msg.set_field("sensor_id", 15)
    >>> msg.set_field("temperature", -125)
    >>> data = msg.pack()
    >>> decoded = registry.create("sensor_data")
    >>> decoded.unpack(data)
    >>> decoded.get_field("temperature")
    -125
"""

from __future__ import annotations

__version__ = "0.1.0"

from .codec import FieldSpec, Message, MessageSchema, pack_values, unpack_values
from .config import load_schema_set
from .exceptions import (
    BitSchemaError,
    BufferTooSmallError,
    InvalidSchemaError,
    UnknownFieldError,
    UnknownMessageTypeError,
    ValueOutOfRangeError,
)
from .registry import SchemaRegistry
from .utils import encoded_bits, encoded_size, field_layout, field_sizes

__all__ = [
    # Core API
    "FieldSpec",
    "MessageSchema",
    "Message",
    "SchemaRegistry",
    "pack_values",
    "unpack_values",
    # Config
    "load_schema_set",
    # Exceptions
    "BitSchemaError",
    "InvalidSchemaError",
    "UnknownMessageTypeError",
    "UnknownFieldError",
    "ValueOutOfRangeError",
    "BufferTooSmallError",
    # Sizing
    "encoded_size",
    "encoded_bits",
    "field_sizes",
    "field_layout",
    # Version
    "__version__",
]
