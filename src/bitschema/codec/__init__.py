"""Bit-packed binary codec for bitschema.

This module provides the schema model, the bit-level pack/unpack functions
and the Message type that binds values to a schema.
"""

from __future__ import annotations

from .decoder import unpack_values
from .encoder import pack_values
from .message import Message
from .schema import FieldSpec, MessageSchema

__all__ = [
    "pack_values",
    "unpack_values",
    "Message",
    "MessageSchema",
    "FieldSpec",
]
