"""Registry of named message schemas.

A SchemaRegistry is built once from a schema set, i.e. a mapping from
message-type name to a list of field entries, and then hands out fresh
Message instances bound to the stored schemas.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from pathlib import Path
from typing import Any

from .codec.message import Message
from .codec.schema import MessageSchema
from .config import load_schema_set
from .exceptions import UnknownMessageTypeError
from .models.description import parse_schema_set

logger = logging.getLogger(__name__)


class SchemaRegistry:
    """Validated message schemas keyed by message-type name.

    Every schema is validated when the registry is constructed; the registry
    is read-only afterwards. Messages created from it reference the stored
    schema, so they share its layout but never each other's values.

    Example:
        >>> registry = SchemaRegistry({
        ...     "status_message": [
        ...         {"name": "device_id", "bit_width": 8},
        ...         {"name": "status_code", "bit_width": 4},
        ...     ],
        ... })
        >>> msg = registry.create("status_message")
        >>> msg.set_field("device_id", 42)
        >>> msg.pack().hex()
        '2a00'
    """

    def __init__(self, schema_set: Mapping[str, Any]) -> None:
        """Load and validate a schema set.

        Args:
            schema_set: Mapping from message-type name to a list of
                ``{"name", "bit_width", "signed"?}`` entries

        Raises:
            InvalidSchemaError: If any definition is malformed
        """
        self._schemas: dict[str, MessageSchema] = {}

        for message_type, descriptions in parse_schema_set(schema_set).items():
            schema = MessageSchema.from_description(descriptions, message_type)
            self._schemas[message_type] = schema
            logger.debug(
                "Registered message type '%s' (%d fields, %d bytes)",
                message_type,
                len(schema),
                schema.byte_length(),
            )

        logger.debug("Loaded %d message types", len(self._schemas))

    @classmethod
    def from_file(cls, path: str | Path) -> SchemaRegistry:
        """Create a registry from a JSON or YAML schema file.

        Raises:
            FileNotFoundError: If the file doesn't exist
            InvalidSchemaError: If the file can't be parsed or is malformed
        """
        return cls(load_schema_set(path))

    def create(self, type_name: str) -> Message:
        """Create a new message of the given type with all fields set to 0.

        Raises:
            UnknownMessageTypeError: If the type is not registered
        """
        return Message(self.schema(type_name))

    def schema(self, type_name: str) -> MessageSchema:
        """Return the schema registered under ``type_name``.

        Raises:
            UnknownMessageTypeError: If the type is not registered
        """
        try:
            return self._schemas[type_name]
        except (KeyError, TypeError):
            raise UnknownMessageTypeError(type_name) from None

    def has_type(self, type_name: str) -> bool:
        """Check whether ``type_name`` is registered."""
        return type_name in self

    def message_types(self) -> set[str]:
        """Return the names of all registered message types."""
        return set(self._schemas)

    def __len__(self) -> int:
        return len(self._schemas)

    def __contains__(self, type_name: object) -> bool:
        return isinstance(type_name, str) and type_name in self._schemas

    def __iter__(self) -> Iterator[str]:
        return iter(self._schemas)

    def __repr__(self) -> str:
        return f"SchemaRegistry({sorted(self._schemas)})"
